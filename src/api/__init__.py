"""
API Layer - FastAPI Presentation Layer

Responsibility:
    HTTP interface for the relay. Handles requests, responses and
    error translation. No business logic.

Contains:
    - FastAPI router (upload)
    - Request/Response models (Pydantic)
    - Dependency injection setup
    - Middleware configuration (CORS, logging, upload size guard)

Does NOT contain:
    - Business logic (belongs to Domain/Application layers)
    - Outbound HTTP calls (belongs to Infrastructure layer)
"""
