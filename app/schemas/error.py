"""Standardized error response schema."""

from pydantic import BaseModel, Field


class FieldError(BaseModel):
    """One invalid field of a request body."""

    field: str = Field(..., description="Dotted path of the offending field, as sent by the client")
    message: str


class ErrorResponse(BaseModel):
    """Standard error body for domain exceptions (4xx) and internal failures (5xx)."""

    detail: str = Field(..., description="Human-readable error message")
    code: str = Field(..., description="Machine-readable error code")
    errors: list[FieldError] | None = Field(
        None, description="Per-field problems, only for validation errors"
    )
