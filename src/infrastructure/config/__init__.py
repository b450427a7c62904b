"""
Configuration

Exports:
    - Settings: Immutable process configuration
"""

from src.infrastructure.config.settings import Settings

__all__ = ["Settings"]
