from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from apikey_auth.app import create_app
from apikey_auth.config import Settings
from apikey_auth.dependencies import settings_dependency


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key="test-key", log_level="DEBUG", cors_allow_origins=["*"])


@pytest.fixture
async def client(settings: Settings):
    app = create_app()
    app.dependency_overrides[settings_dependency] = lambda: settings
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as test_client:
        yield test_client
