"""Response envelopes shared by every endpoint."""

from typing import Any, Literal
from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Body of GET /health."""

    is_success: Literal[True] = Field(default=True, description="Always true")
    official_email: str = Field(..., description="Identifying email")


class SuccessResponse(BaseModel):
    """Envelope for a handled /bfhl request.

    Attributes:
        is_success: Always true.
        official_email: Identifying email from configuration.
        data: Handler result.
    """

    is_success: Literal[True] = Field(default=True, description="Always true")
    official_email: str = Field(..., description="Identifying email")
    data: Any = Field(..., description="Handler result")


class ErrorResponse(BaseModel):
    """Envelope for any failed request.

    Attributes:
        is_success: Always false.
        official_email: Identifying email from configuration.
        error: Human-readable error message.
    """

    is_success: Literal[False] = Field(default=False, description="Always false")
    official_email: str = Field(..., description="Identifying email")
    error: str = Field(..., description="Error message")
