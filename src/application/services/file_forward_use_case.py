"""
File Forward Use Case

Responsibility:
    Validates an incoming upload and forwards it to the configured webhook,
    translating the webhook's answer into a result or a domain error.

Architecture Notes:
    - Part of Application Layer (Services)
    - Uses WebhookClientProtocol (implemented by Infrastructure WebhookClient)
    - Called by API Layer (upload.py router)
    - Returns FileForwardResult DTO
    - Settings are injected, never read from the environment here

Contains:
    - FileForwardUseCase: validate + forward
    - FileForwardResult: DTO for a successful forward

Does NOT contain:
    - HTTP request parsing (belongs to API Layer)
    - Multipart encoding / network I/O (belongs to Infrastructure Layer)
    - Retry logic (a single attempt is made by design of the relay)
"""

import logging

from pydantic import BaseModel, ConfigDict, Field

from src.application.ports.webhook_client import WebhookClientProtocol
from src.domain.relay.value_objects import UploadedFile, WebhookResponse
from src.domain.shared.exceptions import (
    DestinationFileTooLargeError,
    NoFileUploadedError,
    WebhookDeliveryError,
    WebhookNotConfiguredError,
    WebhookNotFoundError,
)
from src.infrastructure.config.settings import Settings

logger = logging.getLogger(__name__)


# ============================================================================
# DATA TRANSFER OBJECTS (DTOs)
# ============================================================================


class FileForwardResult(BaseModel):
    """
    Result of a successful forward.

    Attributes:
        filename: Original filename
        size: File size in bytes
        message: Human-readable success message
    """

    filename: str = Field(description="Original filename from user")
    size: int = Field(description="File size in bytes", gt=0)
    message: str = Field(description="Human-readable success message")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "filename": "a.txt",
                "size": 10,
                "message": 'File "a.txt" uploaded successfully!',
            }
        }
    )


# ============================================================================
# USE CASE
# ============================================================================


class FileForwardUseCase:
    """
    Use case for relaying one uploaded file to the webhook.

    Process Flow:
        Browser uploads file (multipart/form-data)
        → API Layer buffers the `file` part
        → FileForwardUseCase.validate_upload()  (400 on bad input)
        → FileForwardUseCase.execute()
            → check webhook URL is configured   (500 if not)
            → WebhookClient.send_file()          (exactly one POST)
            → map WebhookResponse status
        → API Layer converts FileForwardResult to HTTP 200

    Status mapping:
        2xx   -> FileForwardResult
        413   -> DestinationFileTooLargeError (400)
        404   -> WebhookNotFoundError (500)
        other -> WebhookDeliveryError (500)

    Attributes:
        webhook_client: Client for the outbound POST (injected)
        settings: Process configuration (injected)

    Examples:
        >>> use_case = FileForwardUseCase(webhook_client=WebhookClient(), settings=settings)
        >>> uploaded = use_case.validate_upload("a.txt", b"0123456789", "text/plain")
        >>> result = await use_case.execute(uploaded)
        >>> result.size
        10
    """

    def __init__(self, webhook_client: WebhookClientProtocol, settings: Settings) -> None:
        self.webhook_client = webhook_client
        self.settings = settings

    def validate_upload(
        self,
        filename: str | None,
        content: bytes | None,
        content_type: str | None = None,
    ) -> UploadedFile:
        """
        Turn buffered request data into a validated UploadedFile.

        Args:
            filename: Original filename (None when no file part was sent)
            content: Buffered bytes (None when no file part was sent)
            content_type: Declared MIME type

        Returns:
            UploadedFile within the configured size limit

        Raises:
            NoFileUploadedError: If no file was sent
            EmptyFileError: If the file has zero bytes
            FileSizeExceededError: If the file exceeds the limit
        """
        if content is None or filename is None:
            raise NoFileUploadedError()

        uploaded_file = UploadedFile.create(
            filename=filename,
            content=content,
            content_type=content_type,
            max_size_bytes=self.settings.max_file_size_bytes,
        )
        logger.info(f"Uploading file: {uploaded_file.filename} ({uploaded_file.size} bytes)")
        return uploaded_file

    async def execute(self, uploaded_file: UploadedFile) -> FileForwardResult:
        """
        Forward a validated file to the webhook.

        Args:
            uploaded_file: Result of validate_upload()

        Returns:
            FileForwardResult with filename, size and success message

        Raises:
            WebhookNotConfiguredError: If no webhook URL is configured
            DestinationFileTooLargeError: If the webhook answered 413
            WebhookNotFoundError: If the webhook answered 404
            WebhookDeliveryError: On any other non-2xx or transport failure
        """
        if not self.settings.webhook_configured:
            raise WebhookNotConfiguredError()

        response = await self.webhook_client.send_file(
            self.settings.webhook_url, uploaded_file
        )

        if not response.ok:
            self._raise_for_status(response)

        logger.info(f"File uploaded successfully: {uploaded_file.filename}")

        return FileForwardResult(
            filename=uploaded_file.filename,
            size=uploaded_file.size,
            message=f'File "{uploaded_file.filename}" uploaded successfully!',
        )

    @staticmethod
    def _raise_for_status(response: WebhookResponse) -> None:
        """Map a non-2xx webhook answer to a domain error."""
        logger.error(f"Discord webhook error: {response.status_code} {response.body}")
        detail = f"Webhook answered {response.status_code}: {response.body}"

        if response.status_code == 413:
            raise DestinationFileTooLargeError()

        if response.status_code == 404:
            raise WebhookNotFoundError(detail=detail)

        raise WebhookDeliveryError(detail=detail, upstream_status=response.status_code)
