"""Value types passed to the object storage adapter.

StorageConfig is the immutable (region, namespace, bucket) triple the
adapter is constructed with. UploadedFile describes a file handed in by a
caller, typically a multipart upload from the API or a local file from the
CLI.
"""

import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import Any, BinaryIO, Optional

DEFAULT_CONTENT_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class StorageConfig:
    """Location of the bucket objects are written to.

    Attributes:
        region: OCI region identifier, e.g. us-ashburn-1
        namespace: Object storage namespace of the tenancy
        bucket: Bucket name
    """

    region: str
    namespace: str
    bucket: str


@dataclass
class UploadedFile:
    """A caller-supplied file with its declared metadata.

    The content type and size are trusted as given; the adapter does not
    inspect the stream to recompute them.

    Attributes:
        stream: Binary file object positioned at the start of the content
        filename: Original filename, appended to the generated object name
        content_type: Declared MIME type
        size: Declared size in bytes
    """

    stream: BinaryIO
    filename: str
    content_type: str
    size: int

    @classmethod
    def from_upload(cls, upload: Any) -> "UploadedFile":
        """Build from a Starlette/FastAPI ``UploadFile``.

        ``UploadFile.size`` is not always populated, in which case the size
        is taken from the spooled file by seeking to its end.
        """
        size = upload.size
        if size is None:
            upload.file.seek(0, 2)
            size = upload.file.tell()
            upload.file.seek(0)

        return cls(
            stream=upload.file,
            filename=upload.filename or "",
            content_type=upload.content_type or DEFAULT_CONTENT_TYPE,
            size=size,
        )

    @classmethod
    def from_path(cls, path: Path, content_type: Optional[str] = None) -> "UploadedFile":
        """Open a local file for upload.

        Args:
            path: File to open
            content_type: MIME type; guessed from the extension if omitted

        Raises:
            FileNotFoundError: If path doesn't exist
        """
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        if content_type is None:
            content_type, _ = mimetypes.guess_type(str(path))
            if content_type is None:
                content_type = DEFAULT_CONTENT_TYPE

        return cls(
            stream=open(path, "rb"),
            filename=path.name,
            content_type=content_type,
            size=path.stat().st_size,
        )
