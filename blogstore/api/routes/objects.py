"""Endpoints for storing, replacing and deleting blog objects.

Markdown documents are sent as JSON, images as multipart uploads. Every
stored object is addressed by the public URL returned on upload.
"""

import logging

from fastapi import APIRouter, Depends, File, Query, Response, UploadFile, status

from blogstore.api.dependencies import get_storage_service
from blogstore.api.models import (
    ErrorResponse,
    MarkdownUpdateRequest,
    MarkdownUploadRequest,
    ObjectUrlResponse,
)
from blogstore.storage.models import UploadedFile
from blogstore.storage.object_storage import ObjectStorageService

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Objects"],
    responses={
        400: {"model": ErrorResponse, "description": "Malformed object URL"},
        502: {"model": ErrorResponse, "description": "Object storage failure"},
    },
)


@router.post("/markdown", response_model=ObjectUrlResponse, status_code=status.HTTP_201_CREATED)
def upload_markdown(
    request: MarkdownUploadRequest,
    storage: ObjectStorageService = Depends(get_storage_service),
) -> ObjectUrlResponse:
    """Store a new markdown document.

    Example:
        POST /markdown
        {"content": "# Hello"}
        Response:
        {"url": "https://objectstorage.us-ashburn-1.oraclecloud.com/n/ns1/b/blog/o/<uuid>.md"}
    """
    return ObjectUrlResponse(url=storage.upload_markdown_content(request.content))


@router.put("/markdown", response_model=ObjectUrlResponse)
def update_markdown(
    request: MarkdownUpdateRequest,
    storage: ObjectStorageService = Depends(get_storage_service),
) -> ObjectUrlResponse:
    """Replace an existing markdown document; the URL is unchanged."""
    storage.update_markdown_content(request.url, request.content)
    return ObjectUrlResponse(url=request.url)


@router.post("/images", response_model=ObjectUrlResponse, status_code=status.HTTP_201_CREATED)
def upload_image(
    file: UploadFile = File(..., description="Image to store"),
    storage: ObjectStorageService = Depends(get_storage_service),
) -> ObjectUrlResponse:
    """Store an uploaded image under a new object name."""
    logger.debug(f"Received image upload {file.filename} ({file.content_type})")
    return ObjectUrlResponse(url=storage.upload_image(UploadedFile.from_upload(file)))


@router.delete("/objects", status_code=status.HTTP_204_NO_CONTENT)
def delete_object(
    url: str = Query(..., description="Object URL to delete"),
    storage: ObjectStorageService = Depends(get_storage_service),
) -> Response:
    """Delete the object at url."""
    storage.delete_file_object(url)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
