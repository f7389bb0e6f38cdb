"""Navitas API-related domain exceptions."""

from typing import Any

from .base import DomainException

CLOUDFLARE_MESSAGE = (
    "Navitas API is blocking this server IP (Cloudflare). Contact Navitas support."
)


class NotConfiguredException(DomainException):
    """Raised when the signing identity is incomplete."""

    def __init__(self):
        super().__init__(
            message="Navitas API credentials are not set on the server",
            code="NOT_CONFIGURED",
        )


class UpstreamHTTPException(DomainException):
    """Raised when the Navitas API answers with a non-2xx status."""

    is_cloudflare = False

    def __init__(
        self,
        status_code: int,
        url: str,
        data: Any = None,
        message: str | None = None,
        code: str = "UPSTREAM_HTTP_ERROR",
    ):
        super().__init__(
            message=message or f"Navitas API error: HTTP {status_code}",
            code=code,
        )
        self.status_code = status_code
        self.url = url
        self.data = data


class UpstreamBlockedException(UpstreamHTTPException):
    """Raised when an edge network (Cloudflare) blocks this server's address."""

    is_cloudflare = True

    def __init__(self, status_code: int, url: str, data: Any = None):
        super().__init__(
            status_code=status_code,
            url=url,
            data=data,
            message=CLOUDFLARE_MESSAGE,
            code="UPSTREAM_BLOCKED",
        )


class UpstreamNetworkException(DomainException):
    """Raised when no response could be obtained from the Navitas API."""

    is_cloudflare = False
    status_code = None
    data = None

    def __init__(self, url: str, reason: str):
        super().__init__(
            message=f"Navitas API unreachable: {reason}",
            code="UPSTREAM_NETWORK_ERROR",
        )
        self.url = url
        self.reason = reason
