"""
API Dependencies

FastAPI dependency providers wiring Settings, WebhookClient and
FileForwardUseCase into request handlers.

Architecture Notes:
    - Settings come from app.state (set once by create_app), never from
      os.environ during a request
    - Tests replace get_webhook_client via app.dependency_overrides
"""

from fastapi import Depends, Request

from src.application.ports.webhook_client import WebhookClientProtocol
from src.application.services.file_forward_use_case import FileForwardUseCase
from src.infrastructure.config.settings import Settings
from src.infrastructure.webhook.webhook_client import WebhookClient


def get_settings(request: Request) -> Settings:
    """Return the Settings the app was created with."""
    return request.app.state.settings


def get_webhook_client(settings: Settings = Depends(get_settings)) -> WebhookClientProtocol:
    """Build an httpx-backed WebhookClient from Settings."""
    return WebhookClient(
        username=settings.webhook_username,
        timeout=settings.webhook_timeout_seconds,
    )


def get_file_forward_use_case(
    webhook_client: WebhookClientProtocol = Depends(get_webhook_client),
    settings: Settings = Depends(get_settings),
) -> FileForwardUseCase:
    """Dependency injection for FileForwardUseCase."""
    return FileForwardUseCase(webhook_client=webhook_client, settings=settings)
