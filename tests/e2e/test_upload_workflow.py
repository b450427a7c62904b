"""
End-to-End Tests for the Upload Relay

Runs the full stack: TestClient → router → FileForwardUseCase → real
WebhookClient → httpx.MockTransport standing in for Discord.

Architecture Notes:
    - Uses FastAPI TestClient (no need for running server)
    - Only the network is faked; multipart encoding is real
    - Each test records every outbound request to assert call counts

Scenarios:
    - 10-byte a.txt, webhook 200 → success payload
    - 0-byte file → 400, no outbound call
    - 30 MB file → 400, no outbound call
    - Webhook URL unset → 500 configuration error
"""

import io

import httpx
import pytest
from fastapi import status
from fastapi.testclient import TestClient

from src.api.dependencies import get_webhook_client
from src.api.main import create_app
from src.infrastructure.config.settings import Settings
from src.infrastructure.webhook.webhook_client import WebhookClient


@pytest.fixture
def outbound_requests():
    return []


@pytest.fixture
def webhook_status():
    """Status code the fake webhook answers with (override per test)."""
    return 200


@pytest.fixture
def make_e2e_client(outbound_requests, webhook_status):
    def handler(request: httpx.Request) -> httpx.Response:
        outbound_requests.append(request)
        return httpx.Response(webhook_status, json={"id": "42"})

    def _make(settings: Settings) -> TestClient:
        app = create_app(settings)
        app.dependency_overrides[get_webhook_client] = lambda: WebhookClient(
            username=settings.webhook_username,
            transport=httpx.MockTransport(handler),
        )
        return TestClient(app)

    return _make


def test_full_workflow_happy_path(make_e2e_client, outbound_requests, webhook_url):
    client = make_e2e_client(Settings(webhook_url=webhook_url))

    response = client.post(
        "/api/upload", files={"file": ("a.txt", io.BytesIO(b"0123456789"), "text/plain")}
    )

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["success"] is True
    assert data["fileName"] == "a.txt"
    assert data["fileSize"] == 10

    assert len(outbound_requests) == 1
    outbound = outbound_requests[0]
    assert str(outbound.url) == webhook_url
    assert b'filename="a.txt"' in outbound.content
    assert b"0123456789" in outbound.content
    assert b'name="payload_json"' in outbound.content


def test_empty_file_is_rejected_without_network(make_e2e_client, outbound_requests, webhook_url):
    client = make_e2e_client(Settings(webhook_url=webhook_url))

    response = client.post(
        "/api/upload", files={"file": ("empty.txt", io.BytesIO(b""), "text/plain")}
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["error"].startswith("File is empty")
    assert outbound_requests == []


def test_oversized_file_is_rejected_without_network(make_e2e_client, outbound_requests, webhook_url):
    client = make_e2e_client(Settings(webhook_url=webhook_url))

    response = client.post(
        "/api/upload",
        files={"file": ("huge.bin", io.BytesIO(b"x" * (30 * 1024 * 1024)), "application/octet-stream")},
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert "25MB" in response.json()["error"]
    assert outbound_requests == []


def test_unconfigured_webhook_returns_configuration_error(make_e2e_client, outbound_requests):
    client = make_e2e_client(Settings(webhook_url=None))

    response = client.post(
        "/api/upload", files={"file": ("a.txt", io.BytesIO(b"0123456789"), "text/plain")}
    )

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json()["error"].startswith("Server configuration error")
    assert outbound_requests == []


@pytest.mark.parametrize(
    "webhook_status,expected_status",
    [
        (413, status.HTTP_400_BAD_REQUEST),
        (404, status.HTTP_500_INTERNAL_SERVER_ERROR),
        (500, status.HTTP_500_INTERNAL_SERVER_ERROR),
    ],
)
def test_webhook_errors_are_mapped_after_single_attempt(
    make_e2e_client, outbound_requests, webhook_url, expected_status
):
    client = make_e2e_client(Settings(webhook_url=webhook_url))

    response = client.post(
        "/api/upload", files={"file": ("a.txt", io.BytesIO(b"0123456789"), "text/plain")}
    )

    assert response.status_code == expected_status
    assert "error" in response.json()
    assert len(outbound_requests) == 1
