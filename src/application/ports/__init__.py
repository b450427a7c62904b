"""
Application Layer Ports (Interfaces)

Contains Protocol definitions for dependency inversion.
Infrastructure Layer implements these protocols.
"""

from src.application.ports.webhook_client import WebhookClientProtocol

__all__ = ["WebhookClientProtocol"]
