"""Partner authentication service - the inbound gatekeeper."""

import hmac

import structlog

from src.core.metrics import record_auth_rejection
from src.domain.entities import CredentialSet
from src.domain.exceptions import (
    InvalidCredentialException,
    MissingCredentialException,
    ServerMisconfiguredException,
)

logger = structlog.get_logger(__name__)

API_KEY_HEADER = "X-Api-Key"
KEY_HINT_LENGTH = 8


def key_hint(api_key: str) -> str:
    """Truncated form of a key that is safe to log."""
    return f"{api_key[:KEY_HINT_LENGTH]}..."


class PartnerAuthService:
    """
    Validates partner API keys against the configured allow-list.

    Missing keys, an unconfigured allow-list and unknown keys are
    reported as distinct exceptions so operators can tell a deployment
    problem from a caller problem.
    """

    def __init__(self, credentials: CredentialSet):
        self._credentials = credentials

    def authenticate(self, api_key: str | None) -> None:
        """
        Accept or reject a partner API key.

        Raises:
            MissingCredentialException: If no key was supplied
            ServerMisconfiguredException: If no keys are configured
            InvalidCredentialException: If the key is not in the allow-list
        """
        if not api_key:
            record_auth_rejection("missing")
            raise MissingCredentialException(API_KEY_HEADER)

        if self._credentials.is_empty:
            record_auth_rejection("misconfigured")
            logger.error("partner_api_keys_not_configured")
            raise ServerMisconfiguredException()

        if not self._is_allowed(api_key):
            hint = key_hint(api_key)
            record_auth_rejection("invalid")
            logger.warning("invalid_api_key_attempt", key_hint=hint)
            raise InvalidCredentialException(hint)

    def _is_allowed(self, api_key: str) -> bool:
        # No early exit: every entry is compared.
        matched = False
        for valid_key in self._credentials.keys:
            if hmac.compare_digest(api_key.encode("utf-8"), valid_key.encode("utf-8")):
                matched = True
        return matched
