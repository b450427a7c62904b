"""
Webhook Client Port

Protocol implemented by the Infrastructure Layer (WebhookClient).
Lets the use case be tested with a plain AsyncMock.
"""

from typing import Protocol

from src.domain.relay.value_objects import UploadedFile, WebhookResponse


class WebhookClientProtocol(Protocol):
    """Sends one file to a webhook and reports the HTTP outcome."""

    async def send_file(self, webhook_url: str, uploaded_file: UploadedFile) -> WebhookResponse:
        """
        POST the file to the webhook exactly once.

        Raises:
            WebhookDeliveryError: On transport failure
        """
        ...
