"""GitHub REST API call executor using httpx."""

import logging
import threading

import httpx

from .auth import auth_from_settings
from .errors import ApiError, TransportError
from .models import NO_CONTENT, ApiResponse, CheckResult, Presence, RequestDescriptor
from .request import build_request
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)

ACCEPT = "application/vnd.github+json"


class GitHubApiClient:
    """Single-shot executor for GitHub REST API requests.

    Each call is exactly one round trip: no retries, no caching, no pagination.
    The underlying httpx.Client pools connections and is safe to share across
    threads.
    """

    def __init__(self, settings: Settings | None = None, auth: httpx.Auth | None = None, transport=None):
        settings = settings or get_settings()
        self._client = httpx.Client(
            base_url=settings.github_api_url,
            headers={
                "Accept": ACCEPT,
                "User-Agent": settings.github_user_agent,
            },
            auth=auth or auth_from_settings(settings),
            timeout=settings.github_timeout,
            follow_redirects=True,
            transport=transport,
        )

    def send(self, descriptor: RequestDescriptor, auth: httpx.Auth | None = None) -> ApiResponse:
        """Perform the HTTP exchange for a descriptor.

        Returns:
            ApiResponse for 2xx responses; body is NO_CONTENT when empty.

        Raises:
            ApiError: non-2xx response
            TransportError: connection failure or timeout
        """
        kwargs = {}
        if auth is not None:
            kwargs["auth"] = auth

        method = descriptor.method.value
        try:
            resp = self._client.request(
                method,
                descriptor.url,
                params=descriptor.params,
                json=descriptor.body,
                **kwargs,
            )
        except httpx.TransportError as e:
            raise TransportError(f"{method} {descriptor.url} failed: {e}") from e

        logger.debug("%s %s -> %s", method, descriptor.url, resp.status_code)
        body = _decode_body(resp)

        if not 200 <= resp.status_code < 300:
            logger.info("GitHub API error %s for %s %s", resp.status_code, method, descriptor.url)
            raise ApiError(
                resp.status_code,
                None if body is NO_CONTENT else body,
                method=method,
                url=descriptor.url,
            )

        return ApiResponse(
            status=resp.status_code,
            body=body,
            etag=resp.headers.get("etag"),
            link=resp.headers.get("link"),
        )

    def execute(self, descriptor: RequestDescriptor, auth: httpx.Auth | None = None):
        """Return the decoded response body unchanged, or NO_CONTENT for an empty 2xx."""
        return self.send(descriptor, auth=auth).body

    def check(
        self,
        descriptor: RequestDescriptor,
        absent_status: int = 404,
        auth: httpx.Auth | None = None,
    ) -> CheckResult:
        """Existence check: an empty 2xx is FOUND, ``absent_status`` is NOT_FOUND, other errors ERROR.

        A 2xx that carries a body is not a membership answer and counts as NOT_FOUND.
        """
        try:
            resp = self.send(descriptor, auth=auth)
        except ApiError as e:
            if e.status == absent_status:
                return CheckResult(Presence.NOT_FOUND, e.status)
            return CheckResult(Presence.ERROR, e.status, error=e)
        if resp.is_empty:
            return CheckResult(Presence.FOUND, resp.status)
        return CheckResult(Presence.NOT_FOUND, resp.status)

    def call(self, method, template, path_args=None, options=None, auth: httpx.Auth | None = None):
        """Build a request and execute it."""
        return self.execute(build_request(method, template, path_args, options), auth=auth)

    def close(self):
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


# Client instances keyed by config
_clients: dict[tuple, GitHubApiClient] = {}
_clients_lock = threading.Lock()


def get_client(settings: Settings | None = None) -> GitHubApiClient:
    """Get or create a shared client for the given settings."""
    settings = settings or get_settings()
    key = (
        settings.github_api_url,
        settings.github_token,
        settings.github_basic_auth,
        settings.github_user_agent,
        settings.github_timeout,
    )
    with _clients_lock:
        if key not in _clients:
            _clients[key] = GitHubApiClient(settings)
        return _clients[key]


def _decode_body(resp: httpx.Response):
    if not resp.content or not resp.content.strip():
        return NO_CONTENT
    try:
        return resp.json()
    except ValueError:
        return resp.text
