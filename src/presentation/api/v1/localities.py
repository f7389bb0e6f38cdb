"""Locality lookup endpoint."""

from typing import Annotated, List

from fastapi import APIRouter, Depends, Query

from src.application.services import LocalityService
from src.core.dependencies import get_locality_service, require_partner_key
from src.presentation.schemas import (
    ErrorResponseSchema,
    LocalitySchema,
    UpstreamErrorResponseSchema,
)

localities_router = APIRouter(
    prefix="/api/localities",
    dependencies=[Depends(require_partner_key)],
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid zip code"},
        401: {"model": ErrorResponseSchema, "description": "Missing API key"},
        403: {"model": ErrorResponseSchema, "description": "Invalid API key"},
        500: {"model": UpstreamErrorResponseSchema, "description": "Lookup failed"},
        503: {"model": ErrorResponseSchema, "description": "Navitas not configured"},
    },
)


@localities_router.get(
    "",
    response_model=List[LocalitySchema],
    summary="Look Up Localities",
    description="Resolve city, state and county for a US zip code.",
)
async def get_localities(
    locality_service: Annotated[LocalityService, Depends(get_locality_service)],
    zipcode: Annotated[
        str | None,
        Query(description="5-digit US zip code; longer values are truncated"),
    ] = None,
) -> List[LocalitySchema]:
    """
    Look up localities for a zip code.

    GET /api/localities?zipcode=10471 returns
    [{"city": "New York", "state": "NY", "zip": "10471", "county": "Bronx"}]
    """
    localities = await locality_service.lookup(zipcode)

    return [
        LocalitySchema(
            city=loc.city,
            state=loc.state,
            zip=loc.zip,
            county=loc.county,
        )
        for loc in localities
    ]
