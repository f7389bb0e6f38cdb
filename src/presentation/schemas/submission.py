"""Submission-related Pydantic schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SubmissionRequestSchema(BaseModel):
    """
    Schema for POST /api/submit request body.

    Channel and payload are validated by the submission service so that
    each failure gets its own message.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "channel": "Direct",
                    "payload": {"applicant": {"firstName": "Jane"}},
                }
            ]
        }
    )
    channel: Any = Field(
        None,
        description='Application channel, "Indirect" or "Direct"',
        examples=["Indirect"],
    )
    payload: Any = Field(
        None,
        description="Credit application in the channel's Navitas format",
    )


class SubmissionResponseSchema(BaseModel):
    """Schema for POST /api/submit response body."""

    success: bool = Field(..., description="True when Navitas accepted the call")
    status: int = Field(..., description="HTTP status returned by Navitas", examples=[200])
    data: Any = Field(None, description="Navitas response body")
