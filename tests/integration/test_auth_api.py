"""
Integration tests for partner authentication on protected routes.

These tests verify:
1. Missing X-Api-Key -> 401
2. Empty allow-list -> 500 (server misconfiguration)
3. Unknown key -> 403
4. Listed key -> request reaches the route handler
"""

import pytest
from httpx import AsyncClient

from .conftest import OTHER_PARTNER_KEY, PARTNER_KEY, StubNavitasClient, make_settings


class TestPartnerAuthentication:

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method,url,body",
        [
            ("GET", "/api/localities?zipcode=10471", None),
            ("POST", "/api/submit", {"channel": "Direct", "payload": {}}),
        ],
    )
    async def test_missing_key_returns_401(
        self,
        client: AsyncClient,
        navitas_client: StubNavitasClient,
        method: str,
        url: str,
        body,
    ):
        response = await client.request(method, url, json=body)

        assert response.status_code == 401
        data = response.json()
        assert data["error"] == "MISSING_CREDENTIAL"
        assert data["message"] == "Missing X-Api-Key header"
        assert navitas_client.calls == []

    @pytest.mark.asyncio
    async def test_invalid_key_returns_403(
        self,
        client: AsyncClient,
        navitas_client: StubNavitasClient,
    ):
        response = await client.get(
            "/api/localities?zipcode=10471",
            headers={"X-Api-Key": "not-a-partner"},
        )

        assert response.status_code == 403
        assert response.json()["error"] == "INVALID_CREDENTIAL"
        assert response.json()["message"] == "Invalid API key"
        assert navitas_client.calls == []

    @pytest.mark.asyncio
    async def test_unconfigured_allow_list_returns_500(self, make_app_client):
        stub = StubNavitasClient()
        client = await make_app_client(make_settings(partner_api_keys=" , "), stub)

        response = await client.get(
            "/api/localities?zipcode=10471",
            headers={"X-Api-Key": PARTNER_KEY},
        )

        assert response.status_code == 500
        data = response.json()
        assert data["error"] == "SERVER_MISCONFIGURED"
        assert "not configured" in data["message"]
        assert stub.calls == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("key", [PARTNER_KEY, OTHER_PARTNER_KEY])
    async def test_listed_key_passes_through(
        self,
        client: AsyncClient,
        navitas_client: StubNavitasClient,
        key: str,
    ):
        response = await client.get(
            "/api/localities?zipcode=10471",
            headers={"X-Api-Key": key},
        )

        assert response.status_code == 200
        assert navitas_client.calls == [("GET", "/v1/localities?zipcode=10471", None)]

    @pytest.mark.asyncio
    async def test_health_is_public(self, client: AsyncClient):
        response = await client.get("/health")

        assert response.status_code == 200
