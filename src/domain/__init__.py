"""
Domain Layer - Core Business Rules

Framework-independent rules of the relay: what counts as a valid upload,
what the webhook payload looks like, and the error taxonomy.

Subdomains:
    - relay: UploadedFile / WebhookResponse value objects and constants
    - shared: Domain exceptions

Usage:
    >>> from src.domain import UploadedFile, DomainException
"""

# Relay Subdomain
from .relay import UploadedFile, WebhookResponse

# Shared Domain
from .shared import ClientInputError, DomainException, ServerSideError

__all__ = [
    # Relay Subdomain
    "UploadedFile",
    "WebhookResponse",
    # Shared Domain
    "DomainException",
    "ClientInputError",
    "ServerSideError",
]
