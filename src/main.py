"""
Navitas Gateway - Main Application Entry Point

Sits between partner Salesforce orgs and the Navitas Credit API.
Authenticates partners, signs requests with HMAC-SHA256 and relays
locality lookups and credit application submissions.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
import uvicorn
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware

from src import __version__
from src.core.config import get_settings
from src.core.dependencies import get_credential_set, get_signing_identity
from src.core.logging import setup_logging
from src.core.metrics import get_metrics, get_metrics_content_type
from src.presentation.api import api_router
from src.presentation.middleware import (
    LoggingMiddleware,
    RequestContextMiddleware,
    SecurityHeadersMiddleware,
    error_handler_middleware,
    internal_error_response,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Sets up logging and reports whether the Navitas signing identity
    is complete. There is nothing to tear down.
    """
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    logger = structlog.get_logger(__name__)
    logger.info(
        "application_started",
        version=__version__,
        environment=settings.environment,
        port=settings.port,
        navitas_configured=get_signing_identity(settings).is_configured,
        partner_keys=len(get_credential_set(settings)),
    )

    yield

    logger.info("application_stopped")


app = FastAPI(
    title="Navitas Gateway",
    description="Partner authentication and HMAC request signing for the Navitas Credit API",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(LoggingMiddleware)
app.add_middleware(RequestContextMiddleware, on_error=internal_error_response)
app.add_middleware(SecurityHeadersMiddleware)

error_handler_middleware(app)

app.include_router(api_router)


@app.get("/metrics", include_in_schema=False)
async def metrics() -> Response:
    """Prometheus metrics endpoint."""
    return Response(
        content=get_metrics(),
        media_type=get_metrics_content_type(),
    )


def main() -> None:
    """Run the gateway with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
