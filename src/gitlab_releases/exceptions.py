"""GitLab API exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .response import ApiResponse


class GitLabError(Exception):
    """Base exception for GitLab operations."""


class GitLabInvalidArgumentError(GitLabError, ValueError):
    """Raised when a project reference is of an unsupported type or empty."""


class GitLabRequestError(GitLabError):
    """Raised when a request cannot be built, before anything is sent."""


class GitLabTransportError(GitLabError):
    """Raised on connection-level failures (timeout, DNS, TLS, reset)."""

    response: ApiResponse | None = None


class GitLabApiError(GitLabError):
    """Raised when the GitLab API returns a non-success response."""

    def __init__(
        self,
        status_code: int,
        status_text: str,
        body: str = "",
        response: ApiResponse | None = None,
    ) -> None:
        self.status_code = status_code
        self.status_text = status_text
        self.body = body
        self.response = response
        super().__init__(f"GitLab API Error {status_code} {status_text}: {body}")


class GitLabAuthError(GitLabApiError):
    """Raised on 401/403 authentication failures."""

    def __init__(
        self, status_code: int, body: str = "", response: ApiResponse | None = None
    ) -> None:
        status_text = "Unauthorized" if status_code == 401 else "Forbidden"
        super().__init__(status_code, status_text, body, response)


class GitLabNotFoundError(GitLabApiError):
    """Raised on 404 responses."""

    def __init__(self, body: str = "", response: ApiResponse | None = None) -> None:
        super().__init__(404, "Not Found", body, response)


class GitLabDecodeError(GitLabError):
    """Raised when a response body does not match the expected JSON shape."""

    def __init__(self, message: str, body: str = "", response: ApiResponse | None = None) -> None:
        self.body = body
        self.response = response
        super().__init__(message)


class GitLabWriteDisabledError(GitLabError):
    """Raised when a write operation is attempted in read-only mode."""

    def __init__(self) -> None:
        super().__init__("Write operations are disabled (GITLAB_READ_ONLY=true)")
