"""Build a storage service from application settings."""

from blogstore.core.config import Settings
from blogstore.storage.object_storage import ObjectStorageService
from blogstore.storage.oci_client import OCIObjectStorageClient


def create_object_storage_service(settings: Settings) -> ObjectStorageService:
    """Create an ObjectStorageService backed by the OCI S3 compatibility API.

    Args:
        settings: Application settings

    Returns:
        ObjectStorageService bound to the configured bucket
    """
    config = settings.storage_config()
    client = OCIObjectStorageClient(
        region=config.region,
        namespace=config.namespace,
        access_key=settings.oci_access_key,
        secret_key=settings.oci_secret_key,
        endpoint_url=settings.oci_endpoint_url,
    )
    return ObjectStorageService(config, client)
