"""
Relay Constants

Business rules for the upload relay.

Business Context:
    Discord rejects attachments above 25MB on non-boosted servers, so the
    relay refuses anything larger before spending bandwidth on it.
"""

from typing import Final


# ============================================================================
# SIZE LIMITS
# ============================================================================

BYTES_PER_MB: Final[int] = 1024 * 1024

# Default local upload limit (25 MiB)
MAX_FILE_SIZE_MB: Final[int] = 25
MAX_FILE_SIZE_BYTES: Final[int] = MAX_FILE_SIZE_MB * BYTES_PER_MB

# Allowance for multipart boundaries and part headers on top of the file
MULTIPART_OVERHEAD_BYTES: Final[int] = BYTES_PER_MB


# ============================================================================
# OUTBOUND PAYLOAD
# ============================================================================

# Multipart field names expected by the webhook
WEBHOOK_FILE_FIELD: Final[str] = "file"
WEBHOOK_PAYLOAD_FIELD: Final[str] = "payload_json"

# Message posted alongside the attachment
UPLOAD_MESSAGE_TEMPLATE: Final[str] = "📁 New file uploaded: **{filename}**"
DEFAULT_WEBHOOK_USERNAME: Final[str] = "File Uploader Bot"

DEFAULT_CONTENT_TYPE: Final[str] = "application/octet-stream"
