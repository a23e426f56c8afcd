"""Storage package for OCI object storage.

This package provides the blog's object storage service (markdown and image
uploads addressed by public object URLs) and the S3-compatible client it
talks to OCI with.
"""

from blogstore.storage.exceptions import (
    DeleteError,
    InvalidObjectUrlError,
    ObjectNameDecodeError,
    ObjectStorageError,
    UploadError,
)
from blogstore.storage.models import StorageConfig, UploadedFile
from blogstore.storage.object_storage import ObjectStorageClient, ObjectStorageService
from blogstore.storage.oci_client import OCIObjectStorageClient

__all__ = [
    "DeleteError",
    "InvalidObjectUrlError",
    "ObjectNameDecodeError",
    "ObjectStorageClient",
    "ObjectStorageError",
    "ObjectStorageService",
    "OCIObjectStorageClient",
    "StorageConfig",
    "UploadError",
    "UploadedFile",
]
