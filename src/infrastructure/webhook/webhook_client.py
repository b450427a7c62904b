"""
Webhook Client

Sends an uploaded file to the webhook as a multipart POST using httpx.

Responsibility:
    - Build the multipart body (file part + payload_json part)
    - Issue exactly one POST per call (no retries)
    - Return WebhookResponse for any HTTP answer
    - Convert transport failures into WebhookDeliveryError

Architecture Notes:
    - Infrastructure Layer (external HTTP dependency)
    - Implements WebhookClientProtocol from Application Layer
    - Does NOT interpret status codes (Application Layer maps them)
    - AsyncClient is opened per call with `async with`, so the connection
      is released on success, error, and cancellation

Outbound request:
    POST <webhook_url>
    Content-Type: multipart/form-data
        file          <bytes> (original filename, original content type)
        payload_json  {"content": "...", "username": "..."}
"""

import json
import logging
from typing import Optional

import httpx

from src.domain.relay.constants import (
    DEFAULT_WEBHOOK_USERNAME,
    UPLOAD_MESSAGE_TEMPLATE,
    WEBHOOK_FILE_FIELD,
    WEBHOOK_PAYLOAD_FIELD,
)
from src.domain.relay.value_objects import UploadedFile, WebhookResponse
from src.domain.shared.exceptions import WebhookDeliveryError

logger = logging.getLogger(__name__)


def build_payload_json(filename: str, username: str = DEFAULT_WEBHOOK_USERNAME) -> str:
    """
    Build the JSON metadata part posted next to the file.

    Args:
        filename: Original filename embedded in the message
        username: Sender label

    Returns:
        JSON text for the payload_json part

    Examples:
        >>> build_payload_json("a.txt")
        '{"content": "📁 New file uploaded: **a.txt**", "username": "File Uploader Bot"}'
    """
    return json.dumps(
        {
            "content": UPLOAD_MESSAGE_TEMPLATE.format(filename=filename),
            "username": username,
        },
        ensure_ascii=False,
    )


class WebhookClient:
    """
    httpx-based client for the destination webhook.

    Attributes:
        username: Sender label placed in payload_json
        timeout: Timeout in seconds; None keeps httpx's default
        transport: Optional httpx transport (tests inject httpx.MockTransport)

    Examples:
        >>> client = WebhookClient(username="File Uploader Bot")
        >>> response = await client.send_file(webhook_url, uploaded_file)
        >>> response.ok
        True
    """

    def __init__(
        self,
        username: str = DEFAULT_WEBHOOK_USERNAME,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.username = username
        self.timeout = timeout
        self.transport = transport

    def _client_kwargs(self) -> dict:
        kwargs: dict = {}
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        if self.transport is not None:
            kwargs["transport"] = self.transport
        return kwargs

    async def send_file(self, webhook_url: str, uploaded_file: UploadedFile) -> WebhookResponse:
        """
        POST the file and metadata to the webhook once.

        Args:
            webhook_url: Destination URL (secret, never logged)
            uploaded_file: Validated upload

        Returns:
            WebhookResponse with the webhook's status code and body text

        Raises:
            WebhookDeliveryError: If the request could not be completed
                (connection refused, DNS failure, timeout, protocol error)
        """
        files = {
            WEBHOOK_FILE_FIELD: (
                uploaded_file.filename,
                uploaded_file.content,
                uploaded_file.content_type,
            )
        }
        data = {WEBHOOK_PAYLOAD_FIELD: build_payload_json(uploaded_file.filename, self.username)}

        try:
            async with httpx.AsyncClient(**self._client_kwargs()) as client:
                response = await client.post(webhook_url, files=files, data=data)
        except httpx.HTTPError as e:
            raise WebhookDeliveryError(
                detail=f"Transport error while contacting webhook: {e.__class__.__name__}: {e}"
            ) from e

        logger.debug(
            f"Webhook answered {response.status_code} for {uploaded_file.filename}"
        )
        return WebhookResponse(status_code=response.status_code, body=response.text)
