"""
Infrastructure Layer - External Dependencies

Implements technical capabilities that support the Domain Layer.

Architecture:
    - Implements Application Layer protocols (WebhookClientProtocol)
    - Depends on external libraries (httpx, python-dotenv)
    - No Domain business logic (only technical implementations)

Modules:
    - config: Settings read from the environment
    - webhook: httpx client posting files to the webhook

Usage:
    >>> from src.infrastructure.config import Settings
    >>> from src.infrastructure.webhook import WebhookClient
"""
