"""Data transfer objects for credit application submissions."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class SubmissionRequest:
    """Input data for forwarding a credit application."""

    channel: Any
    payload: Any


@dataclass(frozen=True)
class SubmissionResponse:
    """Relayed Navitas response for a successful submission."""

    success: bool
    status: int
    data: Any

    @classmethod
    def from_result(cls, result) -> "SubmissionResponse":
        return cls(
            success=result.success,
            status=result.status,
            data=result.data,
        )
