"""Partner authentication exceptions."""

from .base import DomainException


class MissingCredentialException(DomainException):
    """Raised when the caller did not send an API key."""

    def __init__(self, header_name: str = "X-Api-Key"):
        super().__init__(
            message=f"Missing {header_name} header",
            code="MISSING_CREDENTIAL",
        )


class ServerMisconfiguredException(DomainException):
    """Raised when no partner API keys are configured on the server."""

    def __init__(self):
        super().__init__(
            message="Partner authentication is not configured",
            code="SERVER_MISCONFIGURED",
        )


class InvalidCredentialException(DomainException):
    """Raised when the API key is not in the configured allow-list."""

    def __init__(self, key_hint: str):
        super().__init__(
            message="Invalid API key",
            code="INVALID_CREDENTIAL",
        )
        self.key_hint = key_hint
