"""Custom exception hierarchy."""

from __future__ import annotations


class MetalError(Exception):
    """Base exception for all library errors."""

    pass


class APIError(MetalError):
    """Non-success response from the provisioning API.

    The server reports failures as ``{"errors": [...]}`` or ``{"error": "..."}``;
    both shapes end up in ``errors``.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        errors: list[str] | None = None,
        path: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.errors = errors or []
        self.path = path


class NotFoundError(APIError):
    """Requested resource does not exist."""

    pass


class RateLimitError(APIError):
    """API rate limit exceeded."""

    def __init__(
        self,
        message: str,
        retry_after: float = 60,
        errors: list[str] | None = None,
        path: str | None = None,
    ) -> None:
        super().__init__(message, status_code=429, errors=errors, path=path)
        self.retry_after = retry_after


class ValidationError(MetalError):
    """Client-side input validation failure."""

    pass
