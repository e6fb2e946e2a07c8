"""ASGI middleware for body size limits, security headers and the 500 boundary."""

from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Receive, Scope, Send
from structlog import get_logger

from .config import get_settings
from .exceptions import BFHLError, InternalError, PayloadTooLargeError
from .schemas import ErrorResponse

logger = get_logger("bfhl")


SECURITY_HEADERS: dict[str, str] = {
    "Content-Security-Policy": (
        "default-src 'self';base-uri 'self';font-src 'self' https: data:;"
        "form-action 'self';frame-ancestors 'self';img-src 'self' data:;"
        "object-src 'none';script-src 'self';script-src-attr 'none';"
        "style-src 'self' https: 'unsafe-inline';upgrade-insecure-requests"
    ),
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "Origin-Agent-Cluster": "?1",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
    "X-Content-Type-Options": "nosniff",
    "X-DNS-Prefetch-Control": "off",
    "X-Download-Options": "noopen",
    "X-Frame-Options": "SAMEORIGIN",
    "X-Permitted-Cross-Domain-Policies": "none",
    "X-XSS-Protection": "0",
}


class BodyTooLargeError(Exception):
    """Raised when the streamed request body exceeds the configured limit."""


def error_response(status_code: int, message: str) -> JSONResponse:
    """Render the uniform error envelope."""
    envelope = ErrorResponse(official_email=get_settings().OFFICIAL_EMAIL, error=message)
    return JSONResponse(status_code=status_code, content=envelope.model_dump())


def render_error(exc: BFHLError) -> JSONResponse:
    return error_response(exc.status_code, exc.message)


def payload_too_large_response(max_bytes: int) -> JSONResponse:
    """Render the 413 error envelope."""
    exc = PayloadTooLargeError()
    logger.info("request_rejected", code=exc.code, max_bytes=max_bytes)
    return render_error(exc)


class MaxBodySizeMiddleware:
    """Reject requests that exceed the configured body size limit."""

    def __init__(self, app: ASGIApp, max_body_size: int) -> None:
        """Initialize the middleware with an app and size cap.

        Args:
            app: The downstream ASGI application.
            max_body_size: Maximum allowed request body size in bytes.
        """
        self.app = app
        self.max_body_size = max_body_size

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """Enforce size limits before passing control to the app.

        Args:
            scope: ASGI connection scope.
            receive: ASGI receive callable.
            send: ASGI send callable.
        """
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        for header, value in scope.get("headers", []):
            if header == b"content-length":
                try:
                    size = int(value)
                except ValueError:
                    size = self.max_body_size + 1
                if size > self.max_body_size:
                    response = payload_too_large_response(self.max_body_size)
                    await response(scope, receive, send)
                    return

        received = 0

        async def receive_wrapper():
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                body = message.get("body", b"")
                received += len(body)
                if received > self.max_body_size:
                    raise BodyTooLargeError()
            return message

        try:
            await self.app(scope, receive_wrapper, send)
        except BodyTooLargeError:
            response = payload_too_large_response(self.max_body_size)
            await response(scope, receive, send)



class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add hardening headers to every response and drop server banners.

    Unexpected exceptions are rendered as a 500 envelope here, inside the
    CORS layer, so error responses carry the same headers as any other.
    """

    async def dispatch(self, request: Request, call_next: Callable):
        try:
            response = await call_next(request)
        except Exception as e:
            logger.exception("unhandled_error", path=request.url.path, error=str(e))
            response = render_error(InternalError())
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        for banner in ("x-powered-by", "server"):
            if banner in response.headers:
                del response.headers[banner]
        return response
