"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends, Header

from src.core.config import Settings, get_settings
from src.domain.entities import CredentialSet, SigningIdentity, SubmissionRoutes
from src.infrastructure.clients import HttpNavitasClient
from src.application.services import (
    LocalityService,
    PartnerAuthService,
    SubmissionService,
)


# Configuration dependencies
def get_credential_set(
    settings: Annotated[Settings, Depends(get_settings)],
) -> CredentialSet:
    """Get the partner API key allow-list."""
    return CredentialSet.from_csv(settings.partner_api_keys)


def get_signing_identity(
    settings: Annotated[Settings, Depends(get_settings)],
) -> SigningIdentity:
    """Get the Navitas signing identity."""
    return SigningIdentity(
        base_url=settings.navitas_base_url,
        client_id=settings.navitas_hmac_client_id,
        secret=settings.navitas_hmac_secret,
        api_token=settings.navitas_api_token,
    )


def get_submission_routes(
    settings: Annotated[Settings, Depends(get_settings)],
) -> SubmissionRoutes:
    """Get the per-channel submission paths."""
    return SubmissionRoutes(
        indirect=settings.navitas_submit_path_indirect,
        direct=settings.navitas_submit_path_direct,
    )


# External client dependencies
def get_navitas_client(
    identity: Annotated[SigningIdentity, Depends(get_signing_identity)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> HttpNavitasClient:
    """Get a NavitasAPIClient instance."""
    return HttpNavitasClient(
        identity=identity,
        timeout=settings.navitas_timeout,
        user_agent=settings.navitas_user_agent,
    )


# Authentication dependencies
def get_partner_auth_service(
    credentials: Annotated[CredentialSet, Depends(get_credential_set)],
) -> PartnerAuthService:
    """Get a PartnerAuthService instance."""
    return PartnerAuthService(credentials)


def require_partner_key(
    auth_service: Annotated[PartnerAuthService, Depends(get_partner_auth_service)],
    x_api_key: Annotated[str | None, Header()] = None,
) -> None:
    """Reject the request unless it carries a valid X-Api-Key header."""
    auth_service.authenticate(x_api_key)


# Service dependencies
def get_locality_service(
    client: Annotated[HttpNavitasClient, Depends(get_navitas_client)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> LocalityService:
    """Get a LocalityService instance."""
    return LocalityService(
        client=client,
        localities_path=settings.navitas_localities_path,
    )


def get_submission_service(
    client: Annotated[HttpNavitasClient, Depends(get_navitas_client)],
    routes: Annotated[SubmissionRoutes, Depends(get_submission_routes)],
) -> SubmissionService:
    """Get a SubmissionService instance."""
    return SubmissionService(client=client, routes=routes)
