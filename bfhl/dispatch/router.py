"""FastAPI router for the /bfhl endpoint."""

import json
from typing import Annotated, Any
import httpx

from fastapi import APIRouter, Depends, Request

from bfhl.config import Settings, get_settings
from bfhl.dependencies import get_http_client
from bfhl.exceptions import BadRequestError, UnsupportedMediaTypeError
from bfhl.schemas import ErrorResponse, SuccessResponse

from .service import decode_request, dispatch


router = APIRouter(tags=["bfhl"])

JSON_MEDIA_TYPE = "application/json"


def is_json_content_type(content_type: str | None) -> bool:
    """Check for application/json, ignoring parameters such as charset."""
    if not content_type:
        return False
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == JSON_MEDIA_TYPE


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not valid JSON
    raise json.JSONDecodeError(f"Invalid constant {name}", name, 0)


def parse_json_body(raw: bytes) -> Any:
    """Decode a raw request body.

    An empty body decodes to an empty object so it fails the single-key
    check rather than the JSON parser.

    Raises:
        BadRequestError: If the body is not valid UTF-8 JSON.
    """
    if not raw.strip():
        return {}
    # Covers JSONDecodeError, UnicodeDecodeError and oversized integer literals
    try:
        return json.loads(raw.decode("utf-8"), parse_constant=_reject_constant)
    except ValueError:
        raise BadRequestError("Malformed JSON in request body")


@router.post(
    "/bfhl",
    response_model=SuccessResponse,
    responses={
        400: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        415: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
)
async def bfhl_endpoint(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
    client: Annotated[httpx.AsyncClient, Depends(get_http_client)],
) -> SuccessResponse:
    """Handle a single-key request.

    The body must be a JSON object with exactly one of ``fibonacci``,
    ``prime``, ``lcm``, ``hcf`` or ``AI``. Errors are raised as typed
    exceptions and rendered by the handlers registered in ``bfhl.main``.

    Args:
        request: Incoming request, read raw so the content type can be
            checked before parsing.
        settings: Application settings.
        client: Shared HTTP client for the AI provider.

    Returns:
        SuccessResponse with the handler result in ``data``.
    """
    if not is_json_content_type(request.headers.get("content-type")):
        raise UnsupportedMediaTypeError()

    body = parse_json_body(await request.body())
    bfhl_request = decode_request(body)
    data = await dispatch(bfhl_request, client, settings)

    return SuccessResponse(official_email=settings.OFFICIAL_EMAIL, data=data)
