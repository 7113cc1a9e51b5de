"""Python binding for the GitHub Repos REST API.

Every endpoint is a thin call site over a request builder (path template,
path arguments and options into a request descriptor) and a single-shot
executor that normalizes responses and errors.
"""

from .cli import main
from .client import GitHubApiClient, get_client
from .errors import ApiError, GitHubError, TemplateArityError, TransportError
from .models import NO_CONTENT, ApiResponse, CheckResult, Method, Presence, RequestDescriptor
from .repos import ReposApi
from .request import PathTemplate, build_request

__all__ = [
    "main",
    "GitHubApiClient",
    "get_client",
    "ApiError",
    "GitHubError",
    "TemplateArityError",
    "TransportError",
    "NO_CONTENT",
    "ApiResponse",
    "CheckResult",
    "Method",
    "Presence",
    "RequestDescriptor",
    "ReposApi",
    "PathTemplate",
    "build_request",
]

if __name__ == "__main__":
    main()
