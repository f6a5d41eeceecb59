"""Standardized error response schema."""

from typing import Any

from pydantic import BaseModel, Field


class Error(BaseModel):
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Default human-readable message for the code")
    attributes: dict[str, Any] = Field(
        default_factory=dict, description="Context such as the offending field and value"
    )


class ErrorResponse(BaseModel):
    """Error body for every non-2xx response, errors in the order they were found."""

    errors: list[Error]
