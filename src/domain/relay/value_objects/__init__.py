"""
Relay Value Objects.

Available Value Objects:
    - UploadedFile: Validated, in-memory upload
    - WebhookResponse: Result of the outbound webhook call
"""

from src.domain.relay.value_objects.uploaded_file import UploadedFile
from src.domain.relay.value_objects.webhook_response import WebhookResponse

__all__ = [
    "UploadedFile",
    "WebhookResponse",
]
