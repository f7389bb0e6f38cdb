"""Pydantic schemas for API request/response validation."""

from .locality import LocalitySchema
from .submission import SubmissionRequestSchema, SubmissionResponseSchema
from .health import HealthResponse
from .error import ErrorResponseSchema, UpstreamErrorResponseSchema

__all__ = [
    "LocalitySchema",
    "SubmissionRequestSchema",
    "SubmissionResponseSchema",
    "HealthResponse",
    "ErrorResponseSchema",
    "UpstreamErrorResponseSchema",
]
