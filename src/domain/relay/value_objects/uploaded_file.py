"""
UploadedFile Value Object.

A single file received from the browser, fully buffered in memory.
Lives for one request only; never persisted.

This is an immutable Value Object following DDD principles.
"""

from dataclasses import dataclass, field

from src.domain.relay.constants import DEFAULT_CONTENT_TYPE, MAX_FILE_SIZE_BYTES
from src.domain.shared.exceptions import EmptyFileError, FileSizeExceededError


@dataclass(frozen=True)
class UploadedFile:
    """
    Immutable Value Object for a validated upload.

    Invariants (checked in __post_init__):
        - size == len(content)
        - 0 < size <= max_size_bytes

    Attributes:
        filename: Original filename from the client
        content: Raw file bytes
        content_type: Declared MIME type (octet-stream when the client sent none)
        size: Size in bytes
        max_size_bytes: Limit the file was validated against

    Examples:
        >>> f = UploadedFile.create("a.txt", b"0123456789", "text/plain")
        >>> f.size
        10
        >>> UploadedFile.create("empty.txt", b"", "text/plain")
        Traceback (most recent call last):
        ...
        EmptyFileError: EmptyFileError: File is empty. Please upload a valid file.
    """

    filename: str
    content: bytes = field(repr=False)
    content_type: str
    size: int
    max_size_bytes: int = field(default=MAX_FILE_SIZE_BYTES, repr=False, compare=False)

    def __post_init__(self) -> None:
        """
        Validate size invariants after initialization.

        Raises:
            ValueError: If size does not match the buffered content
            EmptyFileError: If the file has no bytes
            FileSizeExceededError: If the file is larger than max_size_bytes
        """
        if self.size != len(self.content):
            raise ValueError(
                f"size must equal content length, got size={self.size} "
                f"for {len(self.content)} bytes"
            )

        if self.size == 0:
            raise EmptyFileError()

        if self.size > self.max_size_bytes:
            raise FileSizeExceededError(
                file_size_bytes=self.size, max_size_bytes=self.max_size_bytes
            )

    @classmethod
    def create(
        cls,
        filename: str,
        content: bytes,
        content_type: str | None = None,
        max_size_bytes: int = MAX_FILE_SIZE_BYTES,
    ) -> "UploadedFile":
        """
        Build an UploadedFile, deriving size from the buffered bytes.

        Args:
            filename: Original filename
            content: Buffered bytes
            content_type: Declared MIME type (optional)
            max_size_bytes: Local upload limit

        Returns:
            Validated UploadedFile

        Raises:
            EmptyFileError: If content is empty
            FileSizeExceededError: If content exceeds max_size_bytes
        """
        return cls(
            filename=filename,
            content=content,
            content_type=content_type or DEFAULT_CONTENT_TYPE,
            size=len(content),
            max_size_bytes=max_size_bytes,
        )
