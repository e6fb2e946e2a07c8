import logging

import httpx
import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import get_settings
from .exceptions import BFHLError
from .middleware import (
    MaxBodySizeMiddleware,
    SecurityHeadersMiddleware,
    error_response,
    render_error,
)
from .schemas import HealthResponse
from bfhl.dispatch.router import router as bfhl_router

settings = get_settings()


def configure_logging(level: str) -> None:
    """Filter structlog output at the configured level."""
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.INFO)
        ),
    )


configure_logging(settings.LOG_LEVEL)
logger = structlog.get_logger("bfhl")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # timeout=None leaves the per-request timeout to the AI client
    app.state.http_client = httpx.AsyncClient(timeout=None)
    logger.info("startup", app=settings.APP_NAME, ai_configured=bool(settings.GEMINI_API_KEY))

    yield

    await app.state.http_client.aclose()

app = FastAPI(
    title=settings.APP_NAME,
    lifespan=lifespan,
    debug=settings.DEBUG
)

# Added innermost first: CORS wraps security headers, which wrap the size cap
app.add_middleware(MaxBodySizeMiddleware, max_body_size=settings.MAX_BODY_BYTES)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Global exception handlers; unexpected exceptions are rendered by SecurityHeadersMiddleware
@app.exception_handler(BFHLError)
async def bfhl_exception_handler(request: Request, exc: BFHLError):
    logger.info(
        "request_failed",
        path=request.url.path,
        code=exc.code,
        status_code=exc.status_code,
    )
    return render_error(exc)

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return error_response(400, "Invalid request")

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, str(exc.detail))

@app.get("/health", response_model=HealthResponse)
async def health_check():
    return HealthResponse(official_email=get_settings().OFFICIAL_EMAIL)

# Include routers
app.include_router(bfhl_router)
