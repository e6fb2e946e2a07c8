"""Decode a /bfhl body and route it to the matching handler."""

from typing import Any
import httpx
from anyio.to_thread import run_sync

from bfhl.ai import resolve_ai_answer
from bfhl.arithmetic import handle_fibonacci, handle_hcf, handle_lcm, handle_prime
from bfhl.config import Settings
from bfhl.exceptions import BadRequestError
from bfhl.validation import validate_single_key_object

from .schemas import (
    AIRequest,
    BFHLRequest,
    FibonacciRequest,
    HcfRequest,
    LcmRequest,
    PrimeRequest,
    REQUEST_TYPES,
)


def decode_request(body: Any) -> BFHLRequest:
    """Validate the body and wrap its value in the matching variant.

    Args:
        body: Decoded JSON body.

    Returns:
        One of the five request variants.

    Raises:
        BadRequestError: If the body is not a single-key object with an
            allowed key.
    """
    key, value = validate_single_key_object(body)
    return REQUEST_TYPES[key](value)


async def dispatch(
    request: BFHLRequest,
    client: httpx.AsyncClient,
    settings: Settings,
) -> Any:
    """Run the handler for a decoded request.

    Arithmetic handlers run in a worker thread so large inputs do not
    stall the event loop.

    Args:
        request: Decoded request variant.
        client: Shared HTTP client, used only for AI requests.
        settings: Application settings with the input bounds.

    Returns:
        The ``data`` payload for the success envelope.
    """
    if isinstance(request, FibonacciRequest):
        return await run_sync(handle_fibonacci, request.value, settings.MAX_FIBONACCI_TERMS)
    if isinstance(request, PrimeRequest):
        return await run_sync(handle_prime, request.value, settings.MAX_ARRAY_LENGTH)
    if isinstance(request, LcmRequest):
        return await run_sync(handle_lcm, request.value, settings.MAX_ARRAY_LENGTH)
    if isinstance(request, HcfRequest):
        return await run_sync(handle_hcf, request.value, settings.MAX_ARRAY_LENGTH)
    if isinstance(request, AIRequest):
        return await resolve_ai_answer(request.value, client, settings)
    raise BadRequestError("Unsupported key")
