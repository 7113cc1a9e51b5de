"""Authentication applied to every outgoing request."""

import httpx

from .settings import Settings


class TokenAuth(httpx.Auth):
    """OAuth / personal access token sent as a bearer Authorization header."""

    def __init__(self, token: str):
        self._token = token

    def auth_flow(self, request: httpx.Request):
        request.headers["Authorization"] = f"bearer {self._token}"
        yield request


def auth_from_settings(settings: Settings) -> httpx.Auth | None:
    """Pick the auth scheme from settings: token first, then basic auth, else anonymous."""
    if settings.github_token:
        return TokenAuth(settings.github_token)
    if settings.github_basic_auth:
        username, sep, password = settings.github_basic_auth.partition(":")
        if not sep:
            raise ValueError("GITHUB_BASIC_AUTH must be in the form user:password")
        return httpx.BasicAuth(username, password)
    return None
