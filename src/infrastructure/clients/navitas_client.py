"""HTTP implementation of NavitasAPIClient."""

from typing import Any, Dict

import httpx
import structlog

from src.core.metrics import record_upstream_request, track_upstream_latency
from src.domain.entities import SigningIdentity, UpstreamResult
from src.domain.exceptions import (
    NotConfiguredException,
    UpstreamBlockedException,
    UpstreamHTTPException,
    UpstreamNetworkException,
)
from src.domain.interfaces import NavitasAPIClient
from src.service.signing import (
    build_get_message,
    build_post_message,
    serialize_body,
    sign_request,
)

logger = structlog.get_logger(__name__)

CLOUDFLARE_MARKER = "Cloudflare"
MESSAGE_PREVIEW_LENGTH = 200


class HttpNavitasClient(NavitasAPIClient):
    """
    HTTP client for the Navitas Connect API.

    Signs every request with HMAC-SHA256 and makes a single attempt per
    call. Failures are raised as typed domain exceptions.
    """

    def __init__(
        self,
        identity: SigningIdentity,
        timeout: float,
        user_agent: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._identity = identity
        self._timeout = timeout
        self._user_agent = user_agent
        self._transport = transport

    def is_configured(self) -> bool:
        return self._identity.is_configured

    async def signed_get(self, path: str) -> UpstreamResult:
        """Send a signed GET; the path is signed exactly as given."""
        self._ensure_configured()

        authorization = self._authorize(build_get_message(path))
        headers = self._base_headers(authorization)

        return await self._send("GET", path, headers)

    async def signed_post(self, path: str, payload: Any) -> UpstreamResult:
        """
        Send a signed POST.

        The payload is serialized once; the same string is signed and
        sent as the request body.
        """
        self._ensure_configured()

        body = serialize_body(payload)
        authorization = self._authorize(build_post_message(path, body))
        headers = self._base_headers(authorization)
        headers["Content-Type"] = "application/json"

        return await self._send("POST", path, headers, body.encode("utf-8"))

    def _ensure_configured(self) -> None:
        if not self.is_configured():
            logger.warning("navitas_not_configured")
            raise NotConfiguredException()

    def _authorize(self, message: str) -> str:
        preview = message[:MESSAGE_PREVIEW_LENGTH]
        if len(message) > MESSAGE_PREVIEW_LENGTH:
            preview += "..."
        logger.debug("hmac_signing", message=preview)

        return sign_request(self._identity.client_id, self._identity.secret, message)

    def _base_headers(self, authorization: str) -> Dict[str, str]:
        return {
            "Authorization": authorization,
            "Api-Token": self._identity.api_token,
            "Accept": "application/json",
            "User-Agent": self._user_agent,
        }

    async def _send(
        self,
        method: str,
        path: str,
        headers: Dict[str, str],
        content: bytes | None = None,
    ) -> UpstreamResult:
        url = f"{self._identity.base_url}{path}"

        try:
            with track_upstream_latency(method):
                async with httpx.AsyncClient(
                    timeout=self._timeout,
                    transport=self._transport,
                ) as client:
                    response = await client.request(
                        method,
                        url,
                        headers=headers,
                        content=content,
                    )
        except httpx.TransportError as e:
            record_upstream_request(method, "network_error")
            logger.error(
                "navitas_network_error",
                method=method,
                url=url,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise UpstreamNetworkException(url=url, reason=str(e) or type(e).__name__)

        return self._handle_response(method, url, response)

    def _handle_response(
        self,
        method: str,
        url: str,
        response: httpx.Response,
    ) -> UpstreamResult:
        """Parse the body and classify the response as success or failure."""
        data = self._parse_body(response)

        if response.is_success:
            record_upstream_request(method, "success")
            logger.info(
                "navitas_request_succeeded",
                method=method,
                url=url,
                status_code=response.status_code,
            )
            return UpstreamResult(status=response.status_code, data=data)

        if isinstance(data, str) and CLOUDFLARE_MARKER in data:
            record_upstream_request(method, "blocked")
            logger.error(
                "navitas_cloudflare_block",
                method=method,
                url=url,
                status_code=response.status_code,
            )
            raise UpstreamBlockedException(
                status_code=response.status_code,
                url=url,
                data=data,
            )

        record_upstream_request(method, "http_error")
        logger.warning(
            "navitas_http_error",
            method=method,
            url=url,
            status_code=response.status_code,
        )
        raise UpstreamHTTPException(
            status_code=response.status_code,
            url=url,
            data=data,
        )

    @staticmethod
    def _parse_body(response: httpx.Response) -> Any:
        content_type = response.headers.get("content-type", "")

        if "application/json" in content_type:
            try:
                return response.json()
            except ValueError:
                logger.warning(
                    "navitas_invalid_json",
                    status_code=response.status_code,
                )

        return response.text
