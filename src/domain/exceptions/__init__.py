"""Domain Exceptions - Authentication, validation and upstream errors."""

from .base import DomainException
from .auth import (
    MissingCredentialException,
    ServerMisconfiguredException,
    InvalidCredentialException,
)
from .validation import InvalidInputException
from .upstream import (
    CLOUDFLARE_MESSAGE,
    NotConfiguredException,
    UpstreamHTTPException,
    UpstreamBlockedException,
    UpstreamNetworkException,
)

__all__ = [
    "DomainException",
    "MissingCredentialException",
    "ServerMisconfiguredException",
    "InvalidCredentialException",
    "InvalidInputException",
    "CLOUDFLARE_MESSAGE",
    "NotConfiguredException",
    "UpstreamHTTPException",
    "UpstreamBlockedException",
    "UpstreamNetworkException",
]
