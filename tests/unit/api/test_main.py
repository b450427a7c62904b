"""
Tests for FastAPI app setup (src/api/main.py).

Covers:
- Health check endpoint
- CORS middleware
- Static entry page fallback
- Global exception handling
- Start-up warning for missing webhook
"""

import logging

from fastapi import status

from src.infrastructure.config.settings import Settings


def test_health_check_endpoint(client):
    """
    Test GET /api/health endpoint.

    Verifies:
    - Returns 200 OK
    - Body is {"status": "ok", "message": ...}
    """
    response = client.get("/api/health")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"status": "ok", "message": "Server is running"}


def test_health_check_without_webhook(unconfigured_client):
    """Health stays 200 even without configuration."""
    response = unconfigured_client.get("/api/health")

    assert response.status_code == status.HTTP_200_OK


def test_cors_middleware_configured(client):
    """CORS headers are present for cross-origin requests."""
    response = client.get("/api/health", headers={"Origin": "http://localhost:5173"})

    assert response.status_code == status.HTTP_200_OK
    assert response.headers["access-control-allow-origin"] == "*"


def test_settings_stored_on_app_state(make_client, settings):
    """create_app keeps the exact Settings value it was given."""
    client = make_client(settings)

    assert client.app.state.settings is settings


def test_unknown_get_serves_index_page(make_client, tmp_path, webhook_url):
    """Unmatched GET routes fall back to index.html."""
    static_dir = tmp_path / "static"
    static_dir.mkdir()
    (static_dir / "index.html").write_text("<html>entry</html>")
    client = make_client(Settings(webhook_url=webhook_url, static_dir=static_dir))

    response = client.get("/some/client/route")

    assert response.status_code == status.HTTP_200_OK
    assert "entry" in response.text


def test_static_files_served_by_name(make_client, tmp_path, webhook_url):
    """Files in the static directory are served at their path."""
    static_dir = tmp_path / "static"
    static_dir.mkdir()
    (static_dir / "index.html").write_text("<html>entry</html>")
    (static_dir / "script.js").write_text("console.log('hi');")
    client = make_client(Settings(webhook_url=webhook_url, static_dir=static_dir))

    root = client.get("/")
    script = client.get("/script.js")

    assert root.status_code == status.HTTP_200_OK
    assert "entry" in root.text
    assert script.status_code == status.HTTP_200_OK
    assert "console.log" in script.text


def test_api_routes_take_precedence_over_static(make_client, tmp_path, webhook_url):
    """The "/" static mount does not shadow /api/health."""
    static_dir = tmp_path / "static"
    static_dir.mkdir()
    (static_dir / "index.html").write_text("<html>entry</html>")
    client = make_client(Settings(webhook_url=webhook_url, static_dir=static_dir))

    response = client.get("/api/health")

    assert response.json()["status"] == "ok"


def test_missing_static_dir_returns_json_404(make_client, tmp_path, webhook_url):
    """Without a static directory, unknown routes get {"error": ...}."""
    client = make_client(Settings(webhook_url=webhook_url, static_dir=tmp_path / "missing"))

    response = client.get("/api/non-existent-endpoint")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert "error" in response.json()


def test_generic_exception_handler_hides_details(make_client, tmp_path, webhook_url):
    """
    Test that the catch-all handler returns a generic 500.

    Verifies:
    - Status 500
    - Body is {"error": generic message}, no exception text
    """
    client = make_client(
        Settings(webhook_url=webhook_url, static_dir=tmp_path / "missing"),
        raise_server_exceptions=False,
    )

    async def boom():
        raise RuntimeError("database password is hunter2")

    client.app.add_api_route("/api/boom", boom)

    response = client.get("/api/boom")

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json() == {"error": "Internal server error. Please try again later."}
    assert "hunter2" not in response.text


def test_startup_warns_when_webhook_missing(make_client, caplog):
    """Lifespan logs a warning when DISCORD_WEBHOOK_URL is not set."""
    caplog.set_level(logging.WARNING)

    with make_client(Settings(webhook_url=None)):
        pass

    assert "DISCORD_WEBHOOK_URL is not set" in caplog.text


def test_startup_quiet_when_webhook_configured(make_client, settings, caplog):
    """No configuration warning when the webhook is set."""
    caplog.set_level(logging.WARNING)

    with make_client(settings):
        pass

    assert "DISCORD_WEBHOOK_URL is not set" not in caplog.text


def test_app_title_and_version(client):
    """App has title and version metadata."""
    assert client.app.title == "Webhook File Relay API"
    assert client.app.version == "0.1.0"
