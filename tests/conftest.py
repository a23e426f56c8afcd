"""Shared fixtures for Blog Object Storage tests."""

from typing import BinaryIO, Dict, List, Optional, Tuple

import pytest

from blogstore.storage.models import StorageConfig
from blogstore.storage.object_storage import ObjectStorageService


class RecordingStorageClient:
    """In-memory storage client that records every call.

    Bodies are read at put time because the service closes them afterwards.
    Setting put_error/delete_error makes the next calls raise it.
    """

    def __init__(self) -> None:
        self.objects: Dict[Tuple[str, str, str], bytes] = {}
        self.puts: List[dict] = []
        self.deletes: List[Tuple[str, str, str]] = []
        self.put_error: Optional[Exception] = None
        self.delete_error: Optional[Exception] = None
        self.last_body: Optional[BinaryIO] = None

    @property
    def calls(self) -> int:
        return len(self.puts) + len(self.deletes)

    def put_object(
        self,
        namespace: str,
        bucket: str,
        object_name: str,
        body: BinaryIO,
        content_type: str,
        content_length: int,
    ) -> None:
        self.last_body = body
        if self.put_error is not None:
            raise self.put_error

        data = body.read()
        self.puts.append(
            {
                "namespace": namespace,
                "bucket": bucket,
                "object_name": object_name,
                "data": data,
                "content_type": content_type,
                "content_length": content_length,
            }
        )
        self.objects[(namespace, bucket, object_name)] = data

    def delete_object(self, namespace: str, bucket: str, object_name: str) -> None:
        if self.delete_error is not None:
            raise self.delete_error

        self.deletes.append((namespace, bucket, object_name))
        self.objects.pop((namespace, bucket, object_name), None)


@pytest.fixture
def storage_config() -> StorageConfig:
    """Bucket location used throughout the tests."""
    return StorageConfig(region="us-ashburn-1", namespace="ns1", bucket="blog")


@pytest.fixture
def fake_client() -> RecordingStorageClient:
    """Create a recording in-memory storage client."""
    return RecordingStorageClient()


@pytest.fixture
def storage_service(
    storage_config: StorageConfig, fake_client: RecordingStorageClient
) -> ObjectStorageService:
    """Create an ObjectStorageService backed by the recording client."""
    return ObjectStorageService(storage_config, fake_client)


@pytest.fixture
def storage_env(monkeypatch: pytest.MonkeyPatch) -> Dict[str, str]:
    """Set the required storage environment variables."""
    env_vars = {
        "OCI_REGION": "us-ashburn-1",
        "OCI_NAMESPACE": "ns1",
        "OCI_BUCKET": "blog",
        "OCI_ACCESS_KEY": "test_access_key",
        "OCI_SECRET_KEY": "test_secret_key",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars
