"""
Common API Schemas

Shared Pydantic models used across all API routers.
"""

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """
    Standard error response model for all API errors.

    The browser client only reads `error`, so nothing else is exposed.
    Server-side diagnostics stay in the logs.

    Attributes:
        error: Human-readable error message
    """

    error: str = Field(description="Human-readable error message")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"error": "File is empty. Please upload a valid file."}
        }
    )
