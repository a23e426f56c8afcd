"""Health check endpoint for monitoring API status.

The check is local: it reports the bucket the API is configured for
without calling the storage service.
"""

from fastapi import APIRouter, Depends

from blogstore.api.dependencies import get_storage_service
from blogstore.api.models import HealthResponse
from blogstore.storage.object_storage import ObjectStorageService

router = APIRouter()


@router.get("/health", response_model=HealthResponse, tags=["Health"])
def health_check(storage: ObjectStorageService = Depends(get_storage_service)) -> HealthResponse:
    """Check API health.

    Returns:
        HealthResponse: Health status and configured bucket

    Example:
        GET /health
        Response:
        {
            "status": "healthy",
            "region": "us-ashburn-1",
            "bucket": "blog",
            "timestamp": "2026-10-19T10:00:00Z"
        }
    """
    return HealthResponse(
        status="healthy",
        region=storage.config.region,
        bucket=storage.config.bucket,
    )
