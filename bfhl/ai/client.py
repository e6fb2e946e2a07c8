"""HTTP client for the Gemini generative-language API."""

import re
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from bfhl.config import Settings
from bfhl.exceptions import (
    BFHLError,
    BadGatewayError,
    RateLimitedError,
    ServiceUnavailableError,
)
from .schemas import GenerateContentRequest, GenerateContentResponse


PROMPT_TEMPLATE = (
    "Answer with exactly one word only. "
    "No punctuation. "
    "No explanations. "
    "Question: {question}"
)
MAX_ERROR_DETAIL_CHARS = 200
EMPTY_ANSWER = "N/A"

_CONTROL_WHITESPACE_RE = re.compile(r"[\r\n\t]+")
# \w also matches "_", which is not a letter or digit
_NON_WORD_RE = re.compile(r"[^\w\s-]|_")


def classify_provider_status(status_code: int) -> tuple[type[BFHLError], bool]:
    """Map a non-2xx provider status to an error class and retryability.

    Args:
        status_code: HTTP status returned by the provider.

    Returns:
        Tuple of (error class, retryable).
    """
    if status_code == 429:
        return RateLimitedError, True
    if status_code in (401, 403):
        return ServiceUnavailableError, False
    if status_code >= 500:
        return BadGatewayError, True
    return BadGatewayError, False


def shorten(value: str, max_len: int = MAX_ERROR_DETAIL_CHARS) -> str:
    """Truncate provider error bodies before they reach the caller."""
    if len(value) <= max_len:
        return value
    return f"{value[:max_len]}..."


def to_single_word(text: str) -> str:
    """Force model output down to one letter/digit/hyphen token.

    Args:
        text: Raw model output.

    Returns:
        The first token after sanitizing, or "N/A" when nothing is left.
    """
    normalized = _CONTROL_WHITESPACE_RE.sub(" ", text)
    normalized = _NON_WORD_RE.sub(" ", normalized).strip()
    if not normalized:
        return EMPTY_ANSWER
    return normalized.split()[0]


def build_generate_url(settings: Settings) -> str:
    """Build the generateContent endpoint URL for the configured model."""
    base_url = settings.GEMINI_BASE_URL.rstrip("/")
    model = quote(settings.GEMINI_MODEL, safe="")
    return f"{base_url}/v1beta/models/{model}:generateContent"


async def ask_single_word(
    client: httpx.AsyncClient,
    question: str,
    settings: Settings,
) -> str:
    """Ask Gemini a question and return a one-word answer.

    Issues exactly one POST. Retrying is left to the caller.

    Args:
        client: Shared HTTP client.
        question: Trimmed, validated question text.
        settings: Application settings with the provider key and model.

    Returns:
        The sanitized single-word answer.

    Raises:
        RateLimitedError: If the provider returns 429 (retryable).
        ServiceUnavailableError: If the provider rejects the key (401/403).
        BadGatewayError: On provider 5xx (retryable), other non-2xx,
            transport failures (retryable) or an empty response (retryable).
    """
    request = GenerateContentRequest.for_prompt(PROMPT_TEMPLATE.format(question=question))

    try:
        response = await client.post(
            build_generate_url(settings),
            params={"key": settings.GEMINI_API_KEY},
            json=request.model_dump(by_alias=True, exclude_none=True),
            headers={"Content-Type": "application/json"},
            timeout=settings.AI_REQUEST_TIMEOUT_SECONDS,
        )
    except httpx.TimeoutException:
        raise BadGatewayError(
            f"AI provider timed out after {settings.AI_REQUEST_TIMEOUT_SECONDS}s",
            retryable=True,
        )
    except httpx.RequestError as e:
        raise BadGatewayError(f"AI provider request failed: {e}", retryable=True)

    if response.status_code >= 400:
        error_cls, retryable = classify_provider_status(response.status_code)
        raise error_cls(
            f"AI provider error: {response.status_code} {shorten(response.text)}",
            retryable=retryable,
        )

    try:
        payload = GenerateContentResponse.model_validate(response.json())
        text = payload.first_text()
    except (ValueError, ValidationError):
        text = ""

    if not text:
        raise BadGatewayError("AI provider returned an empty response", retryable=True)

    return to_single_word(text)
