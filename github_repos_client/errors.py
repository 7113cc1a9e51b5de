"""Exceptions raised by the request builder and the call executor."""


class GitHubError(Exception):
    """Base class for every error raised by this package."""


class TemplateArityError(GitHubError, TypeError):
    """Path arguments do not match the placeholders of a path template.

    Always a programming error at the call site, never caused by remote state.
    """


class ApiError(GitHubError):
    """Non-2xx response from the GitHub API."""

    def __init__(self, status: int, body=None, method: str | None = None, url: str | None = None):
        self.status = status
        self.body = body
        self.method = method
        self.url = url
        super().__init__(str(self))

    @property
    def message(self) -> str | None:
        if isinstance(self.body, dict):
            return self.body.get("message")
        if isinstance(self.body, str) and self.body:
            return self.body
        return None

    def __str__(self) -> str:
        where = f" {self.method} {self.url}" if self.method and self.url else ""
        base = f"GitHub API error {self.status}{where}"
        if self.message:
            return f"{base}: {self.message}"
        return base


class TransportError(GitHubError):
    """Connection failure or timeout before a response was received."""
