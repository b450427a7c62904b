"""
FastAPI Application Setup

Main entry point for the webhook relay API.

Responsibility:
    - FastAPI app initialization from an explicit Settings value
    - Router registration (upload)
    - CORS middleware configuration
    - Upload size guard (rejects oversized bodies before parsing)
    - Global exception handlers ({"error": ...} responses)
    - Request logging middleware
    - Health check endpoint
    - Static entry page with index.html fallback

Architecture Notes:
    - Part of API Layer (Presentation)
    - Entry point for HTTP server (uvicorn)
    - Centralizes cross-cutting concerns (logging, CORS, error handling)
    - No business logic - pure HTTP orchestration

Contains:
    - create_app() factory function
    - run() uvicorn launcher (console script: webhook-relay)
    - Global exception handlers
    - Request logging and upload size guard middleware
    - Health check endpoint: GET /api/health
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

# Import routers
from src.api.routers import upload

# Import shared schemas
from src.api.schemas.common import ErrorResponse

# Import domain exceptions for global handling
from src.domain.relay.constants import MULTIPART_OVERHEAD_BYTES
from src.domain.shared.exceptions import (
    DomainException,
    FileSizeExceededError,
    InvalidUploadError,
    ServerSideError,
)
from src.infrastructure.config.settings import Settings

# Configure logger
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

UPLOAD_PATH = "/api/upload"
INTERNAL_ERROR_MESSAGE = "Internal server error. Please try again later."


# ============================================================================
# RESPONSE MODELS
# ============================================================================


class HealthCheckResponse(BaseModel):
    """
    Health check response model.

    Attributes:
        status: Health status (always "ok" if endpoint responds)
        message: Human-readable status
    """

    status: str = "ok"
    message: str = "Server is running"


# ============================================================================
# MIDDLEWARE
# ============================================================================


async def request_logging_middleware(request: Request, call_next):
    """
    Request logging middleware.

    Logs all incoming requests with method, path, status code, and duration.

    Logging Format:
        INFO: "Incoming request: POST /api/upload"
        INFO: "Request completed: POST /api/upload - 200 - 0.123s"
    """
    logger.info(f"Incoming request: {request.method} {request.url.path}")

    start_time = time.time()
    response = await call_next(request)
    duration = time.time() - start_time

    logger.info(
        f"Request completed: {request.method} {request.url.path} - "
        f"{response.status_code} - {duration:.3f}s"
    )

    return response


async def upload_size_guard_middleware(request: Request, call_next):
    """
    Reject uploads whose declared Content-Length can't fit the limit.

    Runs before the multipart body is parsed, so an oversized upload is
    refused without being spooled. Bodies without Content-Length (chunked)
    pass through and are bounded when the route reads the file part.
    """
    if request.method == "POST" and request.url.path == UPLOAD_PATH:
        settings: Settings = request.app.state.settings
        declared = request.headers.get("content-length")

        if declared is not None and declared.isdigit():
            limit = settings.max_file_size_bytes + MULTIPART_OVERHEAD_BYTES
            if int(declared) > limit:
                exc = FileSizeExceededError(
                    file_size_bytes=int(declared),
                    max_size_bytes=settings.max_file_size_bytes,
                )
                logger.warning(
                    f"Rejected upload before parsing: Content-Length {declared} > {limit}"
                )
                return JSONResponse(
                    status_code=exc.status_code,
                    content=ErrorResponse(error=exc.message).model_dump(),
                )

    return await call_next(request)


# ============================================================================
# EXCEPTION HANDLERS
# ============================================================================


async def domain_exception_handler(request: Request, exc: DomainException):
    """
    Global exception handler for domain layer exceptions.

    Mapping:
        - ClientInputError subclasses -> 400 Bad Request
        - ServerSideError subclasses -> 500 Internal Server Error

    Only exc.message reaches the client. ServerSideError.detail is logged.

    Examples:
        >>> raise EmptyFileError()
        >>> # Returns: 400 {"error": "File is empty. Please upload a valid file."}

        >>> raise WebhookNotConfiguredError()
        >>> # Returns: 500 {"error": "Server configuration error. Please contact the administrator."}
    """
    if isinstance(exc, ServerSideError):
        logger.error(
            f"Server-side error: {exc.__class__.__name__} - {exc.message} - "
            f"detail: {exc.detail} - Request: {request.method} {request.url.path}"
        )
    else:
        logger.warning(
            f"Domain exception: {exc.__class__.__name__} - {exc.message} - "
            f"Request: {request.method} {request.url.path}"
        )

    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=exc.message).model_dump(),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Convert request validation failures into 400 invalid upload.

    Triggered e.g. when the `file` field is sent as text instead of a file.
    """
    logger.warning(
        f"Request validation failed: {exc.errors()} - "
        f"Request: {request.method} {request.url.path}"
    )
    invalid = InvalidUploadError()
    return JSONResponse(
        status_code=invalid.status_code,
        content=ErrorResponse(error=invalid.message).model_dump(),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """
    Serve index.html for unmatched GETs, {"error": ...} for everything else.
    """
    if exc.status_code == status.HTTP_404_NOT_FOUND and request.method == "GET":
        settings: Settings = request.app.state.settings
        index_path = settings.static_dir / "index.html"
        if index_path.is_file():
            return FileResponse(index_path)

    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=str(exc.detail)).model_dump(),
        headers=getattr(exc, "headers", None),
    )


async def generic_exception_handler(request: Request, exc: Exception):
    """
    Global exception handler for unexpected exceptions.

    Catches all unhandled exceptions and converts to 500 Internal Server Error.
    Logs full stack trace; the client only sees a generic message.
    """
    logger.error(
        f"Unexpected error: {exc.__class__.__name__} - {str(exc)} - "
        f"Request: {request.method} {request.url.path}",
        exc_info=True,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(error=INTERNAL_ERROR_MESSAGE).model_dump(),
    )


# ============================================================================
# LIFESPAN
# ============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log start-up information and warn about missing configuration."""
    settings: Settings = app.state.settings

    logger.info(f"Server running on port {settings.port}")
    logger.info(f"Upload endpoint: http://localhost:{settings.port}{UPLOAD_PATH}")

    if not settings.webhook_configured:
        logger.warning("DISCORD_WEBHOOK_URL is not set! Every upload will fail.")
        logger.warning("Please create a .env file with your Discord webhook URL")

    yield


# ============================================================================
# APP FACTORY
# ============================================================================


def setup_static_files(app: FastAPI, settings: Settings) -> None:
    """
    Mount the static directory at "/" if it exists.

    Must run after all API routes are registered so they match first.
    """
    if not settings.static_dir.is_dir():
        logger.warning(
            f"Static directory {settings.static_dir} not found; entry page disabled"
        )
        return

    app.mount(
        "/",
        StaticFiles(directory=settings.static_dir, html=True),
        name="static",
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    FastAPI application factory.

    Creates and configures FastAPI app with all middleware, routers,
    and exception handlers.

    Args:
        settings: Explicit configuration; defaults to Settings.from_env()

    Returns:
        Configured FastAPI application instance

    Usage:
        >>> app = create_app(Settings(webhook_url="https://discord.com/api/webhooks/1/abc"))
        >>> # Run with uvicorn:
        >>> # uvicorn src.api.main:app --reload
    """
    settings = settings or Settings.from_env()
    logging.getLogger().setLevel(settings.log_level)

    app = FastAPI(
        title="Webhook File Relay API",
        version="0.1.0",
        description=(
            "Accepts a single file upload from the browser and forwards it to a "
            "Discord webhook, keeping the webhook URL on the server."
        ),
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Middleware: the last one added runs first
    app.middleware("http")(upload_size_guard_middleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_allow_origins),
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(request_logging_middleware)

    # Register global exception handlers
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    # Register routers with /api prefix
    app.include_router(upload.router, prefix="/api")

    # Health check endpoint
    @app.get(
        "/api/health",
        response_model=HealthCheckResponse,
        status_code=status.HTTP_200_OK,
        summary="Health check endpoint",
        tags=["health"],
    )
    async def health_check() -> HealthCheckResponse:
        """Always 200 while the process is serving requests."""
        return HealthCheckResponse()

    setup_static_files(app, settings)

    logger.info("FastAPI application created successfully")
    return app


# ============================================================================
# APP INSTANCE (for uvicorn)
# ============================================================================

# Usage: uvicorn src.api.main:app --reload
app = create_app()


def run() -> None:
    """Start uvicorn with host/port from Settings."""
    settings: Settings = app.state.settings
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
