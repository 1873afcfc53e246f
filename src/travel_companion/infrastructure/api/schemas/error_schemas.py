"""Pydantic schemas for error responses."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error envelope returned for every failed request."""

    error: str = Field(..., description="Human-readable error message")
    code: str = Field(..., description="Machine-readable error code")
