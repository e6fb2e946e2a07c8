"""AI module - one-word answers from Gemini with fallback."""

from .schemas import (
    GenerateContentRequest,
    GenerateContentResponse,
)
from .client import (
    ask_single_word,
    classify_provider_status,
    to_single_word,
)
from .service import (
    FALLBACK_ANSWERS,
    get_fallback_answer,
    normalize_question,
    resolve_ai_answer,
)


__all__ = [
    # Schemas
    "GenerateContentRequest",
    "GenerateContentResponse",
    # Client
    "ask_single_word",
    "classify_provider_status",
    "to_single_word",
    # Service
    "FALLBACK_ANSWERS",
    "get_fallback_answer",
    "normalize_question",
    "resolve_ai_answer",
]
