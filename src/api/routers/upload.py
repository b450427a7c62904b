"""
API Router for File Upload

Responsibility:
    HTTP interface for relaying a single file to the webhook.
    Thin layer that delegates to Application Layer use case via dependency injection.

Architecture Notes:
    - Part of API Layer (Presentation)
    - Depends on Application Layer (FileForwardUseCase)
    - Domain exceptions propagate to the global handler in main.py
    - Unexpected exceptions are wrapped in InternalUploadError

Contains:
    - POST /upload - Validate multipart upload and forward it

Does NOT contain:
    - Webhook status mapping (Application Layer)
    - Multipart encoding of the outbound request (Infrastructure Layer)
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Request, UploadFile, status
from pydantic import BaseModel, ConfigDict, Field
from starlette.datastructures import FormData
from starlette.datastructures import UploadFile as StarletteUploadFile

from src.api.dependencies import get_file_forward_use_case
from src.api.schemas.common import ErrorResponse
from src.application.services.file_forward_use_case import FileForwardUseCase
from src.domain.relay.constants import WEBHOOK_FILE_FIELD
from src.domain.shared.exceptions import (
    DomainException,
    InternalUploadError,
    InvalidUploadError,
)

# Configure logger
logger = logging.getLogger(__name__)


# ============================================================================
# RESPONSE MODELS
# ============================================================================


class UploadResponse(BaseModel):
    """
    Response model for a successful relay.

    Serialized with camelCase keys for the browser client.

    Attributes:
        success: Always True
        message: Human-readable success message
        file_name: Original filename (``fileName``)
        file_size: Size in bytes (``fileSize``)
    """

    success: bool = Field(default=True, description="Always true on success")
    message: str = Field(description="Human-readable success message")
    file_name: str = Field(alias="fileName", description="Original filename")
    file_size: int = Field(alias="fileSize", description="File size in bytes", gt=0)

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "success": True,
                "message": 'File "a.txt" uploaded successfully!',
                "fileName": "a.txt",
                "fileSize": 10,
            }
        },
    )


# ============================================================================
# ROUTER CONFIGURATION
# ============================================================================


router = APIRouter(
    tags=["upload"],
    responses={
        400: {
            "model": ErrorResponse,
            "description": "Bad Request - No file, empty file, or file too large",
        },
        500: {
            "model": ErrorResponse,
            "description": "Internal Server Error - Configuration or webhook failure",
        },
    },
)


# ============================================================================
# HELPERS
# ============================================================================


def _ensure_single_file_part(form: FormData) -> None:
    """
    Reject bodies with extra file parts or a file under another field.

    Raises:
        InvalidUploadError: If the body breaks the one-file contract
    """
    file_fields = [
        key for key, value in form.multi_items() if isinstance(value, StarletteUploadFile)
    ]
    if len(file_fields) > 1 or any(key != WEBHOOK_FILE_FIELD for key in file_fields):
        logger.warning(f"Rejected upload with file fields: {file_fields}")
        raise InvalidUploadError()


# ============================================================================
# ENDPOINTS
# ============================================================================


@router.post(
    "/upload",
    status_code=status.HTTP_200_OK,
    response_model=UploadResponse,
    summary="Relay one file to the webhook",
    description=(
        "Upload a single file (any type, 1 byte to 25MB) as multipart/form-data "
        "field `file`. The file is forwarded to the configured webhook together "
        "with a short message."
    ),
)
async def upload_file(
    request: Request,
    file: Optional[UploadFile] = File(
        default=None,
        description="File to relay (any type, max 25MB)",
    ),
    use_case: FileForwardUseCase = Depends(get_file_forward_use_case),
) -> UploadResponse:
    """
    Validate the upload and forward it to the webhook.

    Process Flow:
        1. Check the body carries exactly one file part named `file`
        2. Read at most max_size + 1 bytes into memory
        3. use_case.validate_upload() -> UploadedFile (400 on bad input)
        4. use_case.execute() -> FileForwardResult (one webhook POST)
        5. Return 200 with fileName and fileSize

    Args:
        request: Incoming request (form already parsed by FastAPI)
        file: The `file` part, None if absent
        use_case: Injected FileForwardUseCase

    Returns:
        UploadResponse

    Raises:
        DomainException: Propagated to domain_exception_handler
        InternalUploadError: For anything unexpected

    Examples:
        >>> curl -X POST "http://localhost:3000/api/upload" -F "file=@a.txt"
        {
            "success": true,
            "message": "File \\"a.txt\\" uploaded successfully!",
            "fileName": "a.txt",
            "fileSize": 10
        }
    """
    try:
        _ensure_single_file_part(await request.form())

        filename: Optional[str] = None
        content: Optional[bytes] = None
        content_type: Optional[str] = None

        if file is not None:
            # One byte past the limit is enough to detect oversize
            content = await file.read(use_case.settings.max_file_size_bytes + 1)
            filename = file.filename
            content_type = file.content_type

            # Browsers send an empty, nameless part when nothing was picked
            if not filename and not content:
                filename, content = None, None

        uploaded_file = use_case.validate_upload(
            filename=filename, content=content, content_type=content_type
        )
        result = await use_case.execute(uploaded_file)

    except DomainException:
        raise

    except Exception as e:
        logger.error(f"Upload error: {e.__class__.__name__} - {e}", exc_info=True)
        raise InternalUploadError(detail=str(e)) from e

    finally:
        if file is not None:
            await file.close()

    return UploadResponse(
        message=result.message,
        file_name=result.filename,
        file_size=result.size,
    )
