"""
Fixtures for integration tests.

Provides:
- Test settings with partner keys and a complete signing identity
- A stub Navitas client recording signed calls
- Test clients for the FastAPI app with dependencies overridden
"""

from typing import Any, AsyncGenerator, Callable, List, Tuple

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from src.main import app
from src.core.config import Settings, get_settings
from src.core.dependencies import get_navitas_client
from src.domain.entities import UpstreamResult
from src.domain.interfaces import NavitasAPIClient


PARTNER_KEY = "partner-key-0001"
OTHER_PARTNER_KEY = "partner-key-0002"


# =============================================================================
# Settings
# =============================================================================

def make_settings(**overrides) -> Settings:
    """Build settings without reading the process environment."""
    values = {
        "partner_api_keys": f"{PARTNER_KEY}, {OTHER_PARTNER_KEY}",
        "navitas_base_url": "https://connect-demo2.navitascredit.com",
        "navitas_hmac_client_id": "client-123",
        "navitas_hmac_secret": "test-secret",
        "navitas_api_token": "token-abc",
        "navitas_localities_path": "/v1/localities",
        "navitas_submit_path_indirect": "/v1/leaseworks/submit",
        "navitas_submit_path_direct": "/v1/application/submit",
        "environment": "development",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


# =============================================================================
# Stub Client
# =============================================================================

class StubNavitasClient(NavitasAPIClient):
    """Stub Navitas client that records calls instead of signing them."""

    def __init__(
        self,
        configured: bool = True,
        result: UpstreamResult | None = None,
        error: Exception | None = None,
    ):
        self.configured = configured
        self.result = result or UpstreamResult(status=200, data=[])
        self.error = error
        self.calls: List[Tuple[str, str, Any]] = []

    def is_configured(self) -> bool:
        return self.configured

    async def signed_get(self, path: str) -> UpstreamResult:
        self.calls.append(("GET", path, None))
        if self.error:
            raise self.error
        return self.result

    async def signed_post(self, path: str, payload: Any) -> UpstreamResult:
        self.calls.append(("POST", path, payload))
        if self.error:
            raise self.error
        return self.result


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def test_settings() -> Settings:
    return make_settings()


@pytest.fixture
def navitas_client() -> StubNavitasClient:
    return StubNavitasClient()


@pytest.fixture
def auth_headers() -> dict:
    return {"X-Api-Key": PARTNER_KEY}


@pytest_asyncio.fixture
async def make_app_client() -> AsyncGenerator[Callable, None]:
    """
    Factory for test clients with custom settings and Navitas client.

    Pass navitas_client=None to keep the real HTTP client built from
    the settings.
    """
    clients = []

    async def factory(
        settings: Settings,
        navitas_client: NavitasAPIClient | None = None,
        raise_app_exceptions: bool = True,
    ) -> AsyncClient:
        app.dependency_overrides[get_settings] = lambda: settings
        if navitas_client is not None:
            app.dependency_overrides[get_navitas_client] = lambda: navitas_client

        transport = ASGITransport(app=app, raise_app_exceptions=raise_app_exceptions)
        ac = AsyncClient(transport=transport, base_url="http://test")
        clients.append(ac)
        return ac

    yield factory

    for ac in clients:
        await ac.aclose()
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(
    test_settings: Settings,
    navitas_client: StubNavitasClient,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client with mocked dependencies.

    This client:
    - Accepts PARTNER_KEY and OTHER_PARTNER_KEY
    - Uses the stub Navitas client
    """
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_navitas_client] = lambda: navitas_client

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
