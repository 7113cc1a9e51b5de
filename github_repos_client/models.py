"""Data models shared by the request builder and the call executor."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .errors import ApiError


class Method(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"

    @classmethod
    def coerce(cls, value: "Method | str") -> "Method":
        if isinstance(value, cls):
            return value
        return cls(str(value).upper())

    @property
    def uses_query(self) -> bool:
        """GET sends options as query parameters, everything else as a JSON body."""
        return self is Method.GET


class _NoContent:
    """Marker for a 2xx response with an empty body."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_CONTENT"


NO_CONTENT = _NoContent()


@dataclass(frozen=True)
class RequestDescriptor:
    """A fully resolved request, ready to hand to the transport."""

    method: Method
    url: str
    params: dict[str, Any] | None = None
    body: dict[str, Any] | None = None

    @property
    def payload(self) -> dict[str, Any] | None:
        return self.params if self.method.uses_query else self.body


@dataclass
class ApiResponse:
    """Response from a single GitHub REST API exchange."""

    status: int
    body: Any
    etag: str | None = None
    link: str | None = None

    @property
    def is_empty(self) -> bool:
        return self.body is NO_CONTENT


class Presence(Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    ERROR = "error"


@dataclass(frozen=True)
class CheckResult:
    """Outcome of an existence check such as collaborator membership."""

    presence: Presence
    status: int
    error: ApiError | None = None

    @property
    def found(self) -> bool:
        return self.presence is Presence.FOUND

    def unwrap(self) -> bool:
        """Return the boolean answer, re-raising the error for any other status."""
        if self.presence is Presence.ERROR:
            raise self.error
        return self.found
