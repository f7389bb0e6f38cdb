"""Pydantic schema for API error responses."""

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponseSchema(BaseModel):
    """Standard error response format for all API errors."""
    error: str = Field(
        ...,
        description="Error code",
        examples=["INVALID_CREDENTIAL"],
    )
    message: str | None = Field(
        None,
        description="Human-readable error message",
        examples=["Invalid API key"],
    )
    details: Any = Field(
        None,
        description="Additional context, e.g. the upstream response body",
    )
    request_id: str | None = Field(
        None,
        description="Request ID for tracing",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "error": "INVALID_CREDENTIAL",
                    "message": "Invalid API key",
                    "details": None,
                    "request_id": "abc123",
                }
            ]
        }
    }


class UpstreamErrorResponseSchema(ErrorResponseSchema):
    """Error response for failed Navitas API calls."""
    success: bool = Field(
        False,
        description="Always false for failed calls",
    )
    is_cloudflare: bool = Field(
        False,
        description="True when Cloudflare is blocking this server's IP",
    )
