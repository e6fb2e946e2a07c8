"""Typed errors raised by the BFHL handlers.

Every error carries the HTTP status it maps to, so the exception handler
in ``bfhl.main`` can render the error envelope without a lookup table.
"""


class BFHLError(Exception):
    """Base exception for all BFHL API errors.

    Attributes:
        message: Human-readable message returned to the caller.
        code: Stable error code (defaults to the class name).
        status_code: HTTP status used in the error response.
        retryable: Whether the AI resolver may retry after this error.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: str | None = None,
        status_code: int | None = None,
        retryable: bool = False,
    ):
        self.message = message
        self.code = code or self.__class__.__name__
        if status_code is not None:
            self.status_code = status_code
        self.retryable = retryable
        super().__init__(self.message)


class BadRequestError(BFHLError):
    """Raised when the request shape or a value type is invalid."""

    status_code = 400


class PayloadTooLargeError(BFHLError):
    """Raised when the request body exceeds the configured size limit."""

    status_code = 413

    def __init__(self):
        super().__init__(message="Request body too large", code="PAYLOAD_TOO_LARGE")


class UnsupportedMediaTypeError(BFHLError):
    """Raised when the request is not sent as application/json."""

    status_code = 415

    def __init__(self):
        super().__init__(
            message="Content-Type must be application/json",
            code="UNSUPPORTED_MEDIA_TYPE",
        )


class UnprocessableEntityError(BFHLError):
    """Raised when a well-typed value exceeds a configured bound."""

    status_code = 422


class RateLimitedError(BFHLError):
    """Raised when the AI provider rejects a call with 429."""

    status_code = 429


class InternalError(BFHLError):
    """Raised for unexpected failures. The message is never detailed."""

    status_code = 500

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message=message, code="INTERNAL_ERROR")


class BadGatewayError(BFHLError):
    """Raised when the AI provider fails or returns an unusable response."""

    status_code = 502


class ServiceUnavailableError(BFHLError):
    """Raised when the AI provider is not configured or rejects our key."""

    status_code = 503
