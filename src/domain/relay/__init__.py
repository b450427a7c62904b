"""
Relay Subdomain

Upload validation rules and webhook payload constants.
"""

from .value_objects import UploadedFile, WebhookResponse

__all__ = [
    "UploadedFile",
    "WebhookResponse",
]
