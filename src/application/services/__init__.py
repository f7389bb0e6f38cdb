"""Application services (use cases)."""

from .partner_auth_service import PartnerAuthService
from .locality_service import LocalityService
from .submission_service import SubmissionService

__all__ = [
    "PartnerAuthService",
    "LocalityService",
    "SubmissionService",
]
