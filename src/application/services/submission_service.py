"""Submission service - forwards credit applications to Navitas."""

import structlog

from src.application.dto import SubmissionRequest, SubmissionResponse
from src.core.metrics import record_submission
from src.domain.entities import Channel, SubmissionRoutes
from src.domain.exceptions import (
    DomainException,
    InvalidInputException,
    NotConfiguredException,
)
from src.domain.interfaces import NavitasAPIClient

logger = structlog.get_logger(__name__)


class SubmissionService:
    """
    Application service for credit application submissions.

    Indirect payloads use the LeaseWorks format and Direct payloads the
    CreditApplicationRequest format; both are forwarded as-is.
    """

    def __init__(self, client: NavitasAPIClient, routes: SubmissionRoutes):
        self._client = client
        self._routes = routes

    async def submit(self, request: SubmissionRequest) -> SubmissionResponse:
        """
        Validate and forward a credit application.

        Raises:
            InvalidInputException: If the channel or payload is invalid
            NotConfiguredException: If the signing identity is incomplete
            UpstreamHTTPException: If the Navitas API rejects the submission
            UpstreamNetworkException: If the Navitas API is unreachable
        """
        channel = Channel.parse(request.channel)
        if channel is None:
            raise InvalidInputException(
                field="channel",
                message='Channel must be "Indirect" or "Direct"',
            )

        if not isinstance(request.payload, (dict, list)):
            raise InvalidInputException(
                field="payload",
                message="Request body must include a payload object",
            )

        if not self._client.is_configured():
            raise NotConfiguredException()

        path = self._routes.path_for(channel)
        log = logger.bind(channel=channel.value, path=path)
        if isinstance(request.payload, dict):
            log.info("submission_forwarding", payload_fields=sorted(request.payload))
        else:
            log.info("submission_forwarding", payload_items=len(request.payload))

        try:
            result = await self._client.signed_post(path, request.payload)
        except DomainException as e:
            record_submission(channel.value, success=False)
            log.error(
                "submission_failed",
                message=e.message,
                status_code=getattr(e, "status_code", None),
                details=getattr(e, "data", None),
            )
            raise

        record_submission(channel.value, success=True)
        log.info("submission_succeeded", status_code=result.status)

        return SubmissionResponse.from_result(result)
