"""Locality service - resolves city, state and county from a zip code."""

import re
from typing import List

import structlog

from src.application.dto import LocalityDTO
from src.core.metrics import record_locality_lookup
from src.domain.entities import Locality
from src.domain.exceptions import (
    DomainException,
    InvalidInputException,
    NotConfiguredException,
)
from src.domain.interfaces import NavitasAPIClient

logger = structlog.get_logger(__name__)

_ZIPCODE_PREFIX = re.compile(r"^\d{5}")


def normalize_zipcode(raw: str | None) -> str:
    """
    Validate a zip code and truncate it to its first five digits.

    "10471-1234" -> "10471"

    Raises:
        InvalidInputException: If the value does not start with 5 digits
    """
    value = (raw or "").strip()

    if not _ZIPCODE_PREFIX.match(value):
        raise InvalidInputException(
            field="zipcode",
            message="Provide a 5-digit US zip code as ?zipcode=XXXXX",
        )

    return value[:5]


class LocalityService:
    """Application service for locality lookups."""

    def __init__(self, client: NavitasAPIClient, localities_path: str):
        self._client = client
        self._localities_path = localities_path

    async def lookup(self, zipcode: str | None) -> List[LocalityDTO]:
        """
        Look up localities for a zip code.

        Returns:
            Localities with city and county in Title Case

        Raises:
            InvalidInputException: If the zip code is malformed
            NotConfiguredException: If the signing identity is incomplete
            UpstreamHTTPException: If the Navitas API call fails
            UpstreamNetworkException: If the Navitas API is unreachable
        """
        zipcode = normalize_zipcode(zipcode)

        if not self._client.is_configured():
            raise NotConfiguredException()

        path = f"{self._localities_path}?zipcode={zipcode}"

        try:
            result = await self._client.signed_get(path)
        except DomainException as e:
            record_locality_lookup(success=False)
            logger.error("locality_lookup_failed", zipcode=zipcode, message=e.message)
            raise

        records = result.data if isinstance(result.data, list) else []
        localities = [
            LocalityDTO.from_entity(Locality.from_upstream(item, zipcode))
            for item in records
            if isinstance(item, dict)
        ]

        record_locality_lookup(success=True)
        logger.info("locality_lookup_completed", zipcode=zipcode, count=len(localities))

        return localities
