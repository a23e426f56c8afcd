"""FastAPI application for Blog Object Storage.

This is the main entry point for the REST API server. It provides:
- Markdown document upload and in-place update
- Image upload
- Object deletion by URL
- Health check endpoint
- API documentation (automatic via FastAPI)
"""

from fastapi import FastAPI

from blogstore import __version__
from blogstore.api.errors import storage_exception_handler
from blogstore.api.models import APIInfoResponse
from blogstore.api.routes import health, objects
from blogstore.storage.exceptions import ObjectStorageError

# Create FastAPI application
app = FastAPI(
    title="Blog Object Storage API",
    description="REST API for storing blog documents and images in OCI object storage",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_exception_handler(ObjectStorageError, storage_exception_handler)

# Include routers
app.include_router(health.router)
app.include_router(objects.router)


@app.get("/", response_model=APIInfoResponse, tags=["Root"])
def root() -> APIInfoResponse:
    """API root endpoint.

    Returns:
        APIInfoResponse: API name, version, and description
    """
    return APIInfoResponse(
        name="Blog Object Storage API",
        version=__version__,
        description="REST API for storing blog documents and images in OCI object storage",
    )


# For running with uvicorn directly
if __name__ == "__main__":
    import uvicorn

    from blogstore.core.config import Settings

    settings = Settings()
    uvicorn.run(
        "blogstore.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
