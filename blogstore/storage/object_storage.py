"""Object storage service for blog content.

This module provides ObjectStorageService, which stores markdown documents
and images in an OCI object storage bucket and hands back public object
URLs. The URL is the only handle callers keep: updates and deletes take the
URL and recover the object name from it.

Object naming:
- Markdown documents: <uuid4>.md
- Images: <uuid4>_<original filename>

Object URL format:
    https://objectstorage.<region>.oraclecloud.com/n/<namespace>/b/<bucket>/o/<encoded name>

The object name is form-encoded (space as '+', everything outside
[A-Za-z0-9.*_-] as %XX) so links produced here match links already stored
by earlier versions of the blog.
"""

import io
import logging
import re
import uuid
from typing import BinaryIO, Protocol
from urllib.parse import quote_plus, unquote_plus

from botocore.exceptions import BotoCoreError, ClientError

from blogstore.storage.exceptions import (
    DeleteError,
    InvalidObjectUrlError,
    ObjectNameDecodeError,
    UploadError,
)
from blogstore.storage.models import StorageConfig, UploadedFile

logger = logging.getLogger(__name__)

MARKDOWN_CONTENT_TYPE = "text/markdown"
OBJECT_URL_TEMPLATE = "https://objectstorage.{region}.oraclecloud.com/n/{namespace}/b/{bucket}/o/{name}"
OBJECT_NAME_DELIMITER = "/o/"
MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")

# Errors raised by storage clients for I/O and service failures
STORAGE_ERRORS = (OSError, BotoCoreError, ClientError)


class ObjectStorageClient(Protocol):
    """Put/delete primitives of an object storage provider.

    Implementations must report I/O and service failures as OSError or a
    botocore BotoCoreError/ClientError; only those are wrapped into
    UploadError/DeleteError; any other exception propagates unchanged.
    """

    def put_object(
        self,
        namespace: str,
        bucket: str,
        object_name: str,
        body: BinaryIO,
        content_type: str,
        content_length: int,
    ) -> None:
        ...

    def delete_object(self, namespace: str, bucket: str, object_name: str) -> None:
        ...


def new_markdown_object_name() -> str:
    """Return a fresh object name for a markdown document."""
    return f"{uuid.uuid4()}.md"


def new_image_object_name(filename: str) -> str:
    """Return a fresh object name that keeps the original filename as suffix."""
    return f"{uuid.uuid4()}_{filename}"


def encode_object_name(object_name: str) -> str:
    # quote_plus leaves '~' alone and escapes '*'; stored links have the opposite
    return quote_plus(object_name, safe="*").replace("~", "%7E")


def decode_object_name(encoded: str) -> str:
    """Decode a form-encoded object name.

    Raises:
        ObjectNameDecodeError: On a '%' not followed by two hex digits, or
            when the decoded bytes are not valid UTF-8
    """
    malformed = MALFORMED_ESCAPE.search(encoded)
    if malformed:
        raise ObjectNameDecodeError(
            f"Error decoding object name from the URL: malformed escape at position {malformed.start()}",
            details={"object_name": encoded},
        )

    try:
        return unquote_plus(encoded, errors="strict")
    except UnicodeDecodeError as e:
        raise ObjectNameDecodeError(
            f"Error decoding object name from the URL: {e}",
            details={"object_name": encoded},
        ) from e


def create_object_url(config: StorageConfig, object_name: str) -> str:
    """Build the public URL of object_name in the bucket described by config."""
    return OBJECT_URL_TEMPLATE.format(
        region=config.region,
        namespace=config.namespace,
        bucket=config.bucket,
        name=encode_object_name(object_name),
    )


class ObjectStorageService:
    """Uploads, replaces and deletes blog objects in a single bucket.

    The service holds no state besides its configuration and client, so one
    instance can be shared between concurrent callers. Concurrent writes to
    the same object are resolved by the storage service (last write wins).

    Attributes:
        config: Bucket location objects are written to
        client: Storage client performing the remote calls
    """

    def __init__(self, config: StorageConfig, client: ObjectStorageClient) -> None:
        self.config = config
        self.client = client

    def upload_markdown_content(self, content: str) -> str:
        """Store a markdown document under a new object name.

        Args:
            content: Markdown text, stored as UTF-8

        Returns:
            Public URL of the new object

        Raises:
            UploadError: If the upload fails
        """
        object_name = new_markdown_object_name()
        return self._upload_markdown(content, object_name)

    def update_markdown_content(self, object_url: str, content: str) -> None:
        """Overwrite the markdown document at object_url in place.

        The object name is taken from the URL, so the URL stays valid.

        Args:
            object_url: URL previously returned by upload_markdown_content
            content: New markdown text

        Raises:
            InvalidObjectUrlError: If object_url has no object name
            ObjectNameDecodeError: If the object name can't be decoded
            UploadError: If the upload fails
        """
        object_name = self.strip_object_name(object_url)
        self._upload_markdown(content, object_name)

    def _upload_markdown(self, content: str, object_name: str) -> str:
        data = content.encode("utf-8")

        with io.BytesIO(data) as body:
            self._put(object_name, body, MARKDOWN_CONTENT_TYPE, len(data), "markdown file")

        return self.create_object_url(object_name)

    def upload_image(self, file: UploadedFile) -> str:
        """Store an uploaded file under a new object name.

        The declared content type and size of the file are sent as-is.

        Args:
            file: Uploaded file; its stream is closed when this returns

        Returns:
            Public URL of the new object

        Raises:
            UploadError: If the upload fails
        """
        object_name = new_image_object_name(file.filename)

        with file.stream as body:
            self._put(object_name, body, file.content_type, file.size, "image")

        return self.create_object_url(object_name)

    def _put(
        self,
        object_name: str,
        body: BinaryIO,
        content_type: str,
        content_length: int,
        kind: str,
    ) -> None:
        try:
            self.client.put_object(
                self.config.namespace,
                self.config.bucket,
                object_name,
                body,
                content_type,
                content_length,
            )
        except STORAGE_ERRORS as e:
            logger.error(f"Failed to upload {object_name}: {e}")
            raise UploadError(
                f"Error uploading {kind}: {e}",
                details={"object_name": object_name},
            ) from e

        logger.info(f"Uploaded {kind} {object_name} ({content_length} bytes, {content_type})")

    def delete_file_object(self, object_url: str) -> None:
        """Delete the object referenced by object_url.

        Whether deleting a missing object is an error is up to the storage
        provider.

        Args:
            object_url: URL of the object to delete

        Raises:
            InvalidObjectUrlError: If object_url has no object name
            ObjectNameDecodeError: If the object name can't be decoded
            DeleteError: If the delete fails
        """
        object_name = self.strip_object_name(object_url)

        try:
            self.client.delete_object(self.config.namespace, self.config.bucket, object_name)
        except STORAGE_ERRORS as e:
            logger.error(f"Failed to delete {object_name}: {e}")
            raise DeleteError(
                f"Failed to delete object from OCI bucket: {e}",
                details={"object_name": object_name},
            ) from e

        logger.info(f"Deleted {object_name}")

    def create_object_url(self, object_name: str) -> str:
        """Build the public URL of object_name."""
        return create_object_url(self.config, object_name)

    def strip_object_name(self, object_url: str) -> str:
        """Recover the object name from an object URL.

        The URL must contain the '/o/' delimiter exactly once, followed by a
        non-empty encoded name.

        Args:
            object_url: Object URL

        Returns:
            Decoded object name

        Raises:
            InvalidObjectUrlError: If the URL doesn't have that shape
            ObjectNameDecodeError: If the name has a malformed escape or
                isn't valid encoded UTF-8
        """
        sections = object_url.split(OBJECT_NAME_DELIMITER)
        if len(sections) != 2 or not sections[1]:
            raise InvalidObjectUrlError(
                "Invalid URL format, unable to extract object name.",
                details={"object_url": object_url},
            )

        try:
            return decode_object_name(sections[1])
        except ObjectNameDecodeError as e:
            e.details["object_url"] = object_url
            raise
