"""
Domain Layer Exceptions

This module defines the exception hierarchy for the relay.
All domain-specific exceptions inherit from DomainException.

Responsibility:
    - Base exception class for domain errors
    - Client-input vs server-side split (drives HTTP status in API Layer)
    - Clear separation from framework exceptions

Architecture Notes:
    - Part of Shared Domain (used across all layers)
    - API Layer converts to HTTP responses via global exception handlers
    - Messages are client-safe; server-only context goes in `detail`
"""


class DomainException(Exception):
    """
    Base exception for all domain layer errors.

    Attributes:
        message: Client-facing error description
        status_code: HTTP status the API Layer should respond with

    Examples:
        >>> raise DomainException("Business rule violation")

        >>> try:
        ...     # domain operation
        ... except DomainException as e:
        ...     logger.error(f"Domain error: {e}")
    """

    status_code: int = 400

    def __init__(self, message: str) -> None:
        """
        Initialize domain exception with error message.

        Args:
            message: Human-readable error description
        """
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        """String representation of the exception."""
        return f"{self.__class__.__name__}: {self.message}"

    def __repr__(self) -> str:
        """Developer-friendly representation."""
        return f"{self.__class__.__name__}(message={self.message!r})"


# ============================================================================
# CLIENT INPUT ERRORS (4xx)
# ============================================================================


class ClientInputError(DomainException):
    """
    Raised when the caller sent something we refuse to forward.

    Recoverable by the caller retrying with different input.
    """

    status_code = 400


class NoFileUploadedError(ClientInputError):
    """Raised when the multipart body has no `file` part."""

    def __init__(self, message: str = "No file uploaded. Please select a file.") -> None:
        super().__init__(message)


class EmptyFileError(ClientInputError):
    """Raised when the uploaded file has zero bytes."""

    def __init__(self, message: str = "File is empty. Please upload a valid file.") -> None:
        super().__init__(message)


class InvalidUploadError(ClientInputError):
    """
    Raised when the multipart body is malformed for our contract.

    This exception is raised when:
    - More than one file part is sent
    - A file is sent under a field other than `file`
    - The `file` field is plain text instead of a file
    """

    def __init__(self, message: str = "Invalid file upload. Please try again.") -> None:
        super().__init__(message)


class FileSizeExceededError(ClientInputError):
    """
    Raised when file size exceeds the configured local limit.

    Used by:
    - UploadedFile.create() after buffering
    - upload_size_guard_middleware on Content-Length

    Attributes:
        file_size_bytes: Actual (or declared) size in bytes
        max_size_bytes: Maximum allowed size in bytes

    Examples:
        >>> raise FileSizeExceededError(
        ...     file_size_bytes=30 * 1024 * 1024,
        ...     max_size_bytes=25 * 1024 * 1024,
        ... )
    """

    def __init__(
        self,
        message: str | None = None,
        file_size_bytes: int | None = None,
        max_size_bytes: int | None = None,
    ) -> None:
        self.file_size_bytes = file_size_bytes
        self.max_size_bytes = max_size_bytes

        if message is None:
            message = f"File size exceeds {_format_limit(max_size_bytes or 0)} limit."
        super().__init__(message)


def _format_limit(size_bytes: int) -> str:
    """Render a size limit as whole MB when possible, else bytes."""
    mb = 1024 * 1024
    if size_bytes and size_bytes % mb == 0:
        return f"{size_bytes // mb}MB"
    return f"{size_bytes} bytes"


class DestinationFileTooLargeError(ClientInputError):
    """Raised when the webhook answered 413 Payload Too Large."""

    def __init__(
        self,
        message: str = (
            "File is too large for Discord "
            "(max 25MB for free servers, 500MB for boosted)."
        ),
    ) -> None:
        super().__init__(message)


# ============================================================================
# SERVER-SIDE ERRORS (5xx)
# ============================================================================


class ServerSideError(DomainException):
    """
    Raised for failures the caller cannot fix.

    The client only ever sees `message`. `detail` carries server-only context
    (status codes, upstream bodies, missing settings) and is logged.

    Attributes:
        detail: Optional server-side diagnostic text
    """

    status_code = 500

    def __init__(self, message: str, detail: str | None = None) -> None:
        self.detail = detail
        super().__init__(message)


class WebhookNotConfiguredError(ServerSideError):
    """Raised when DISCORD_WEBHOOK_URL is not set."""

    def __init__(
        self,
        message: str = "Server configuration error. Please contact the administrator.",
        detail: str | None = "DISCORD_WEBHOOK_URL is not set in environment variables",
    ) -> None:
        super().__init__(message, detail)


class WebhookNotFoundError(ServerSideError):
    """Raised when the webhook answered 404 (deleted or mistyped URL)."""

    def __init__(
        self,
        message: str = "Discord webhook not found. Please check webhook configuration.",
        detail: str | None = None,
    ) -> None:
        super().__init__(message, detail)


class WebhookDeliveryError(ServerSideError):
    """
    Raised when the file could not be delivered to the webhook.

    This exception is raised when:
    - The webhook answered with an unexpected non-2xx status
    - The connection failed or timed out

    Attributes:
        upstream_status: Status code from the webhook, None for transport errors
    """

    def __init__(
        self,
        message: str = "Failed to send file to Discord. Please try again.",
        detail: str | None = None,
        upstream_status: int | None = None,
    ) -> None:
        self.upstream_status = upstream_status
        super().__init__(message, detail)


class InternalUploadError(ServerSideError):
    """Raised when the upload route hits an unexpected exception."""

    def __init__(
        self,
        message: str = "An error occurred while uploading the file. Please try again.",
        detail: str | None = None,
    ) -> None:
        super().__init__(message, detail)
