"""
Webhook Infrastructure

Exports:
    - WebhookClient: httpx client posting files to the webhook
"""

from src.infrastructure.webhook.webhook_client import WebhookClient, build_payload_json

__all__ = ["WebhookClient", "build_payload_json"]
