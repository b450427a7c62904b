"""
Application Services

Responsibility:
    Orchestration services that coordinate domain rules and
    infrastructure components.

Contains:
    - FileForwardUseCase: validate an upload and relay it to the webhook

Does NOT contain:
    - Domain business logic (use Domain value objects)
    - Direct infrastructure calls (use dependency injection)
"""

from src.application.services.file_forward_use_case import (
    FileForwardResult,
    FileForwardUseCase,
)

__all__ = ["FileForwardUseCase", "FileForwardResult"]
