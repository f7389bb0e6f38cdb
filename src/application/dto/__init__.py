"""Data Transfer Objects for application layer."""

from .locality import LocalityDTO
from .submission import SubmissionRequest, SubmissionResponse

__all__ = [
    "LocalityDTO",
    "SubmissionRequest",
    "SubmissionResponse",
]
