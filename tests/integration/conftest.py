"""Integration test fixtures for SoundSketch.

Provides an async HTTP client and a sync TestClient wired to a real FastAPI
app whose AI gateway is mocked and whose retry delay is zero.
"""

import pytest
from httpx import ASGITransport, AsyncClient
from starlette.testclient import TestClient

from src.api.app import create_app
from src.core.config import Settings, get_settings


@pytest.fixture
def fast_settings():
    """Settings with no retry delay so transient-failure tests run instantly."""
    return Settings(_env_file=None, openai_api_key="sk-test", retry_delay_seconds=0.0)


@pytest.fixture
def app(mock_gateway, fast_settings):
    """Create a fresh FastAPI application instance with a mocked gateway."""
    app = create_app(gateway=mock_gateway)
    app.dependency_overrides[get_settings] = lambda: fast_settings
    return app


@pytest.fixture
async def async_client(app):
    """AsyncClient talking to the app in-process."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def test_client(app):
    """Synchronous TestClient (an ``httpx.Client``) for driving the UI-side APIClient."""
    with TestClient(app) as c:
        yield c
