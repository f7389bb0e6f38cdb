"""Domain Entities - Core business objects."""

from .credentials import CredentialSet, SigningIdentity
from .channel import Channel, SubmissionRoutes
from .locality import Locality, to_title_case
from .upstream import UpstreamResult

__all__ = [
    "CredentialSet",
    "SigningIdentity",
    "Channel",
    "SubmissionRoutes",
    "Locality",
    "to_title_case",
    "UpstreamResult",
]
