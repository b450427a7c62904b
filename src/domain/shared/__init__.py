"""
Shared Domain Module

Shared domain concepts used across all layers.

This module exports:
    - DomainException: Base exception for all domain errors
    - ClientInputError: Base for 4xx errors
    - ServerSideError: Base for 5xx errors
"""

from .exceptions import ClientInputError, DomainException, ServerSideError

__all__ = [
    "DomainException",
    "ClientInputError",
    "ServerSideError",
]
