"""
Pytest Configuration and Shared Fixtures

Fixtures:
    - webhook_url: Fake destination URL
    - settings: Settings pointing at webhook_url
    - mock_webhook_client: AsyncMock-backed WebhookClient stand-in (answers 200)
    - app / client: FastAPI app + TestClient with the mock client injected
    - make_client: Factory for apps built from custom Settings

Architecture Notes:
    - TestClient doesn't require running server
    - No network: the webhook client is replaced through dependency_overrides
"""

import logging
from unittest.mock import AsyncMock, Mock

import pytest
from fastapi.testclient import TestClient

from src.api.dependencies import get_webhook_client
from src.api.main import create_app
from src.domain.relay.value_objects import WebhookResponse
from src.infrastructure.config.settings import Settings

# Configure logger for tests
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)


@pytest.fixture
def webhook_url():
    """Fake webhook URL (never contacted)."""
    return "https://discord.test/api/webhooks/123/secret-token"


@pytest.fixture
def settings(webhook_url):
    """Settings with the webhook configured and default 25MB limit."""
    return Settings(webhook_url=webhook_url)


@pytest.fixture
def mock_webhook_client():
    """Webhook client whose send_file answers 200 by default."""
    mock = Mock()
    mock.send_file = AsyncMock(return_value=WebhookResponse(status_code=200, body="{}"))
    return mock


@pytest.fixture
def make_client(mock_webhook_client):
    """
    Build a TestClient for an app created from the given Settings.

    The mock webhook client is injected unless inject_mock=False.
    """

    def _make(settings: Settings, inject_mock: bool = True, **client_kwargs) -> TestClient:
        app = create_app(settings)
        if inject_mock:
            app.dependency_overrides[get_webhook_client] = lambda: mock_webhook_client
        return TestClient(app, **client_kwargs)

    return _make


@pytest.fixture
def client(make_client, settings):
    """TestClient for an app with the webhook configured."""
    return make_client(settings)
