"""Pydantic schemas for the Gemini generateContent REST call."""

from typing import Literal
from pydantic import BaseModel, ConfigDict, Field


class GeminiPart(BaseModel):
    """A single content part. Only text parts are used here."""

    text: str | None = Field(default=None, description="Text content")


class GeminiContent(BaseModel):
    """A turn in the conversation sent to or returned by the model.

    Attributes:
        role: Author of the turn ("user" or "model").
        parts: Content parts of the turn.
    """

    role: Literal["user", "model"] | None = Field(default=None, description="Turn author")
    parts: list[GeminiPart] = Field(default_factory=list, description="Content parts")


class GeminiThinkingConfig(BaseModel):
    """Reasoning budget. Zero disables thinking tokens."""

    model_config = ConfigDict(populate_by_name=True)

    thinking_budget: int = Field(default=0, alias="thinkingBudget")


class GeminiGenerationConfig(BaseModel):
    """Sampling settings for a deterministic, short answer.

    Attributes:
        temperature: Sampling temperature.
        max_output_tokens: Cap on generated tokens.
        thinking_config: Reasoning budget settings.
    """

    model_config = ConfigDict(populate_by_name=True)

    temperature: float = Field(default=0, description="Sampling temperature")
    max_output_tokens: int = Field(default=20, alias="maxOutputTokens")
    thinking_config: GeminiThinkingConfig = Field(
        default_factory=GeminiThinkingConfig, alias="thinkingConfig"
    )


class GenerateContentRequest(BaseModel):
    """Request body for models/{model}:generateContent."""

    model_config = ConfigDict(populate_by_name=True)

    contents: list[GeminiContent] = Field(..., description="Conversation turns")
    generation_config: GeminiGenerationConfig = Field(
        default_factory=GeminiGenerationConfig, alias="generationConfig"
    )

    @classmethod
    def for_prompt(cls, prompt: str) -> "GenerateContentRequest":
        """Build a single-turn user request.

        Args:
            prompt: Full prompt text.

        Returns:
            GenerateContentRequest with one user turn.
        """
        return cls(contents=[GeminiContent(role="user", parts=[GeminiPart(text=prompt)])])


class GeminiCandidate(BaseModel):
    """One generated candidate. Unknown fields are ignored."""

    content: GeminiContent | None = None


class GenerateContentResponse(BaseModel):
    """Response body of generateContent, reduced to what we read."""

    candidates: list[GeminiCandidate] = Field(default_factory=list)

    def first_text(self) -> str:
        """Return the first non-blank text part across all candidates, stripped."""
        for candidate in self.candidates:
            if candidate.content is None:
                continue
            for part in candidate.content.parts:
                if part.text and part.text.strip():
                    return part.text.strip()
        return ""
