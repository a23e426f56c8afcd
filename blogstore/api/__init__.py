"""FastAPI REST API for Blog Object Storage.

This package exposes the object storage service over HTTP so the blog
editor can upload, replace and delete documents and images.
"""

from .main import app

__all__ = ["app"]
