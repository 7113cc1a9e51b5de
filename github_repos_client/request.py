"""Request builder: path templates plus options into a RequestDescriptor."""

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from functools import lru_cache
from typing import Any
from urllib.parse import quote

from .errors import TemplateArityError
from .models import Method, RequestDescriptor
from .options import Options

# "%s" is positional, "{name}" is named
_PLACEHOLDER = re.compile(r"%s|\{([A-Za-z_][A-Za-z0-9_]*)\}")


@dataclass(frozen=True)
class PathTemplate:
    """A URL path pattern such as ``repos/{owner}/{repo}/collaborators/{username}``.

    Literal segments alternate with placeholders: ``literals`` always has one
    more element than ``names``. Positional placeholders have a name of None.
    """

    template: str
    literals: tuple[str, ...]
    names: tuple[str | None, ...]

    @classmethod
    def parse(cls, template: str) -> "PathTemplate":
        literals = []
        names = []
        pos = 0
        for match in _PLACEHOLDER.finditer(template):
            literals.append(template[pos : match.start()])
            names.append(match.group(1))
            pos = match.end()
        literals.append(template[pos:])

        if any(n is None for n in names) and any(n is not None for n in names):
            raise ValueError(f"Template mixes positional and named placeholders: {template!r}")
        return cls(template, tuple(literals), tuple(names))

    @property
    def arity(self) -> int:
        return len(self.names)

    @property
    def is_named(self) -> bool:
        return bool(self.names) and self.names[0] is not None

    def render(self, path_args: Sequence[Any] | Mapping[str, Any] | None = None) -> str:
        """Substitute path arguments and return the resolved path."""
        values = self._ordered_values(path_args)
        parts = [self.literals[0]]
        for value, literal in zip(values, self.literals[1:]):
            parts.append(_encode_segment(value))
            parts.append(literal)
        return "".join(parts)

    def _ordered_values(self, path_args) -> list[Any]:
        if path_args is None:
            path_args = {} if self.is_named else ()

        if isinstance(path_args, Mapping):
            if self.arity and not self.is_named:
                raise TypeError(f"Template {self.template!r} takes positional arguments, got a mapping")
            expected = set(self.names)
            if set(path_args) != expected:
                missing = sorted(expected - set(path_args))
                extra = sorted(set(path_args) - expected)
                raise TemplateArityError(
                    f"Template {self.template!r}: missing {missing}, unexpected {extra}"
                )
            return [path_args[name] for name in self.names]

        if isinstance(path_args, (str, bytes)) or not isinstance(path_args, Sequence):
            raise TypeError(f"Path arguments must be a sequence or mapping, got {type(path_args).__name__}")
        if self.is_named:
            raise TypeError(f"Template {self.template!r} takes named arguments, got a sequence")
        if len(path_args) != self.arity:
            raise TemplateArityError(
                f"Template {self.template!r} has {self.arity} placeholders, got {len(path_args)} arguments"
            )
        return list(path_args)


@lru_cache(maxsize=256)
def parse_template(template: str) -> PathTemplate:
    return PathTemplate.parse(template)


def _encode_segment(value: Any) -> str:
    return quote(str(value), safe="")


def normalize_key(key: str) -> str:
    """Convert an option name to GitHub's wire convention (``has-wiki`` -> ``has_wiki``)."""
    return str(key).replace("-", "_")


def normalize_options(options: Mapping[str, Any] | Options | None) -> dict[str, Any]:
    if options is None:
        return {}
    if isinstance(options, Options):
        options = options.to_options()

    normalized: dict[str, Any] = {}
    for key, value in options.items():
        wire_key = normalize_key(key)
        if wire_key in normalized:
            raise ValueError(f"Option {key!r} collides with another option named {wire_key!r}")
        normalized[wire_key] = value
    return normalized


def build_request(
    method: Method | str,
    template: str | PathTemplate,
    path_args: Sequence[Any] | Mapping[str, Any] | None = None,
    options: Mapping[str, Any] | Options | None = None,
) -> RequestDescriptor:
    """Build a request descriptor. Pure: performs no I/O.

    Args:
        method: HTTP method; GET routes options to the query string,
            every other method to the JSON body
        template: path template, e.g. "repos/%s/%s/branches" or
            "repos/{owner}/{repo}/branches"
        path_args: sequence for positional templates, mapping for named ones
        options: option mapping or typed Options model

    Raises:
        TemplateArityError: path arguments do not match the placeholders
    """
    method = Method.coerce(method)
    if not isinstance(template, PathTemplate):
        template = parse_template(template)

    url = template.render(path_args)
    payload = normalize_options(options)

    if method.uses_query:
        return RequestDescriptor(method=method, url=url, params=payload)
    return RequestDescriptor(method=method, url=url, body=payload or None)
