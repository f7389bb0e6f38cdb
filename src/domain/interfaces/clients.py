"""External client interfaces."""

from abc import ABC, abstractmethod
from typing import Any

from src.domain.entities import UpstreamResult


class NavitasAPIClient(ABC):
    """
    Abstract client for the Navitas Connect API.

    Every call is HMAC-signed with the configured signing identity.
    """

    @abstractmethod
    def is_configured(self) -> bool:
        """Return True when every field of the signing identity is set."""
        ...

    @abstractmethod
    async def signed_get(self, path: str) -> UpstreamResult:
        """
        Issue a signed GET request.

        Args:
            path: Request path, including any query string, exactly as
                it will be transmitted

        Returns:
            UpstreamResult for a 2xx response

        Raises:
            NotConfiguredException: If the signing identity is incomplete
            UpstreamHTTPException: If the API answers with a non-2xx status
            UpstreamBlockedException: If Cloudflare blocks this server
            UpstreamNetworkException: If no response is obtained
        """
        ...

    @abstractmethod
    async def signed_post(self, path: str, payload: Any) -> UpstreamResult:
        """
        Issue a signed POST request with a JSON body.

        Args:
            path: Request path
            payload: JSON-serializable body

        Returns:
            UpstreamResult for a 2xx response

        Raises:
            Same as signed_get.
        """
        ...
