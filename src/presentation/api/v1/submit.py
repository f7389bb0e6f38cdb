"""Credit application submission endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.application.dto import SubmissionRequest
from src.application.services import SubmissionService
from src.core.dependencies import get_submission_service, require_partner_key
from src.presentation.schemas import (
    ErrorResponseSchema,
    SubmissionRequestSchema,
    SubmissionResponseSchema,
    UpstreamErrorResponseSchema,
)

submit_router = APIRouter(
    prefix="/api/submit",
    dependencies=[Depends(require_partner_key)],
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid channel or payload"},
        401: {"model": ErrorResponseSchema, "description": "Missing API key"},
        403: {"model": ErrorResponseSchema, "description": "Invalid API key"},
        500: {"model": UpstreamErrorResponseSchema, "description": "Submission failed"},
        503: {"model": ErrorResponseSchema, "description": "Navitas not configured"},
    },
)


@submit_router.post(
    "",
    response_model=SubmissionResponseSchema,
    status_code=200,
    summary="Submit Credit Application",
    description="Forward an Indirect or Direct credit application to Navitas.",
)
async def submit_application(
    request: SubmissionRequestSchema,
    submission_service: Annotated[SubmissionService, Depends(get_submission_service)],
) -> SubmissionResponseSchema:
    dto = SubmissionRequest(channel=request.channel, payload=request.payload)

    response = await submission_service.submit(dto)

    return SubmissionResponseSchema(
        success=response.success,
        status=response.status,
        data=response.data,
    )
