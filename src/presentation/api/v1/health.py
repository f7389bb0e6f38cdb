"""Health check endpoint for Render and partner connectivity tests."""

from datetime import datetime, timezone
from typing import Annotated

from fastapi import APIRouter, Depends

from src import __version__
from src.core.config import Settings, get_settings
from src.core.dependencies import get_signing_identity
from src.domain.entities import SigningIdentity
from src.presentation.schemas import HealthResponse

health_router = APIRouter()


@health_router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Returns service status and whether Navitas credentials are set.",
)
async def health_check(
    identity: Annotated[SigningIdentity, Depends(get_signing_identity)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> HealthResponse:
    return HealthResponse(
        status="ok",
        service=settings.app_name,
        version=__version__,
        navitas_configured=identity.is_configured,
        timestamp=datetime.now(timezone.utc),
    )
