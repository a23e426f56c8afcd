"""Pydantic models for API request/response validation.

These models define the schema for API requests and responses.
"""

from datetime import datetime, timezone
from typing import Dict

from pydantic import BaseModel, Field


class MarkdownUploadRequest(BaseModel):
    """Request model for storing a new markdown document."""

    content: str = Field(..., description="Markdown text")


class MarkdownUpdateRequest(BaseModel):
    """Request model for replacing an existing markdown document."""

    url: str = Field(..., description="Object URL returned when the document was uploaded")
    content: str = Field(..., description="New markdown text")


class ObjectUrlResponse(BaseModel):
    """Response model carrying the public URL of a stored object."""

    url: str = Field(..., description="Public object URL")


class ErrorResponse(BaseModel):
    """Response model for storage errors."""

    error: str = Field(..., description="Exception class name")
    message: str = Field(..., description="Error message")
    details: Dict[str, str] = Field(default_factory=dict, description="Error context")


class HealthResponse(BaseModel):
    """Response model for health check endpoint."""

    status: str = Field(..., description="Health status")
    region: str = Field(..., description="Configured OCI region")
    bucket: str = Field(..., description="Configured bucket name")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Health check timestamp",
    )


class APIInfoResponse(BaseModel):
    """Response model for API info endpoint."""

    name: str = Field(..., description="API name")
    version: str = Field(..., description="API version")
    description: str = Field(..., description="API description")
