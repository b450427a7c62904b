"""
Application Layer - Use Cases and Orchestration

Responsibility:
    Coordinates the flow of data between API, Domain and Infrastructure layers.

Contains:
    - Application services (FileForwardUseCase)
    - Ports (WebhookClientProtocol)

Does NOT contain:
    - Domain business rules (belongs to Domain layer)
    - HTTP handling (belongs to API layer)
    - Infrastructure details (belongs to Infrastructure layer)
"""
