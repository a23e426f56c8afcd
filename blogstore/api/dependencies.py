"""Dependency providers for API endpoints.

The storage service is created once per process from Settings and shared
by all requests; it holds no per-request state.
"""

from functools import lru_cache

from blogstore.core.config import Settings
from blogstore.storage.factory import create_object_storage_service
from blogstore.storage.object_storage import ObjectStorageService


@lru_cache
def get_settings() -> Settings:
    """Get the application settings (loaded once).

    Returns:
        Settings: Application settings
    """
    return Settings()


@lru_cache
def get_storage_service() -> ObjectStorageService:
    """Dependency function to get the object storage service.

    Returns:
        ObjectStorageService: Service bound to the configured bucket

    Example:
        @router.post("/endpoint")
        def my_endpoint(storage: ObjectStorageService = Depends(get_storage_service)):
            ...
    """
    return create_object_storage_service(get_settings())
