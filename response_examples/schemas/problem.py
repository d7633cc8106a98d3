from typing import Optional

from pydantic import BaseModel, Field


class ProblemDetails(BaseModel):
    """Machine-readable error body (RFC 9457)."""
    type: str = Field(..., description="URI reference identifying the problem type")
    title: str = Field(..., description="Short, human-readable summary of the problem type")
    status: int = Field(..., description="HTTP status code")
    detail: str = Field(..., description="Human-readable explanation of this occurrence")
    instance: Optional[str] = Field(None, description="URI reference of the request that failed")


class ValidationProblemDetails(ProblemDetails):
    """Problem details carrying the messages for every invalid field."""
    errors: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Validation messages keyed by field name"
    )
