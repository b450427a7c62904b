"""
Common fixtures for API unit tests.

Provides shared test utilities:
- Sample upload payloads
- App without webhook configuration
"""

import io

import pytest

from src.infrastructure.config.settings import Settings


@pytest.fixture
def sample_text_file():
    """10-byte text file as (filename, fileobj, content_type)."""
    return ("a.txt", io.BytesIO(b"0123456789"), "text/plain")


@pytest.fixture
def unconfigured_client(make_client):
    """TestClient for an app whose webhook URL is not set."""
    return make_client(Settings(webhook_url=None))
