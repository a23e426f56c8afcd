"""FastAPI exception handler for object storage errors."""

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse

from blogstore.storage.exceptions import (
    DeleteError,
    InvalidObjectUrlError,
    ObjectNameDecodeError,
    ObjectStorageError,
    UploadError,
)

logger = logging.getLogger(__name__)


async def storage_exception_handler(request: Request, exc: ObjectStorageError) -> JSONResponse:
    """Map storage exceptions to HTTP responses."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    if isinstance(exc, (InvalidObjectUrlError, ObjectNameDecodeError)):
        status_code = status.HTTP_400_BAD_REQUEST
    elif isinstance(exc, (UploadError, DeleteError)):
        status_code = status.HTTP_502_BAD_GATEWAY

    logger.error(f"Storage error on {request.method} {request.url.path}: {type(exc).__name__} - {exc.message}")

    return JSONResponse(
        status_code=status_code,
        content={
            "error": type(exc).__name__,
            "message": exc.message,
            "details": exc.details,
        },
    )
