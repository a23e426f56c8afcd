"""Exception hierarchy for object storage operations."""

from typing import Dict, Optional


class ObjectStorageError(Exception):
    """Base exception for all object storage errors."""

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class UploadError(ObjectStorageError):
    """Raised when writing an object to the bucket fails."""


class DeleteError(ObjectStorageError):
    """Raised when deleting an object from the bucket fails."""


class InvalidObjectUrlError(ObjectStorageError, ValueError):
    """Raised when an object name cannot be located in an object URL."""


class ObjectNameDecodeError(ObjectStorageError):
    """Raised when the object name segment of a URL is not valid percent-encoded UTF-8."""
