"""CLI entry point for Blog Object Storage.

This module provides a command-line interface to the object storage
service, reading the bucket configuration from the environment.

Usage:
    # Store a markdown document (use - for stdin)
    python -m blogstore upload-markdown post.md

    # Replace a stored markdown document in place
    python -m blogstore update-markdown <object_url> post.md

    # Store an image
    python -m blogstore upload-image photo.png

    # Delete a stored object
    python -m blogstore delete <object_url>

    # Print the public URL of an object name
    python -m blogstore url 3f2a...e1.md

    # Run the REST API
    python -m blogstore serve
"""

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

import click
from pydantic import ValidationError

from blogstore import __version__
from blogstore.core.config import Settings, StorageLocationSettings
from blogstore.storage.exceptions import ObjectStorageError
from blogstore.storage.factory import create_object_storage_service
from blogstore.storage.models import UploadedFile
from blogstore.storage.object_storage import ObjectStorageService, create_object_url

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def load_settings() -> Settings:
    """Load settings and apply the configured log level.

    Exits with status 1 if required settings are missing or invalid.
    """
    try:
        settings = Settings()
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    logging.getLogger().setLevel(settings.log_level)
    return settings


def load_service() -> ObjectStorageService:
    return create_object_storage_service(load_settings())


@click.group()
def cli() -> None:
    """Blog Object Storage - blog documents and images in OCI object storage."""
    pass


@cli.command("upload-markdown")
@click.argument("source", type=click.File("r", encoding="utf-8"))
def upload_markdown(source: TextIO) -> None:
    """Store a markdown document and print its URL.

    SOURCE is a markdown file, or - to read from stdin.
    """
    service = load_service()
    try:
        url = service.upload_markdown_content(source.read())
    except ObjectStorageError as e:
        logger.error(f"Upload failed: {e.message}")
        sys.exit(1)

    click.echo(url)


@cli.command("update-markdown")
@click.argument("object_url")
@click.argument("source", type=click.File("r", encoding="utf-8"))
def update_markdown(object_url: str, source: TextIO) -> None:
    """Replace the markdown document at OBJECT_URL.

    SOURCE is a markdown file, or - to read from stdin.
    """
    service = load_service()
    try:
        service.update_markdown_content(object_url, source.read())
    except ObjectStorageError as e:
        logger.error(f"Update failed: {e.message}")
        sys.exit(1)

    logger.info(f"Updated {object_url}")


@cli.command("upload-image")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--content-type",
    "-t",
    default=None,
    help="MIME type of the file (default: guessed from the extension)",
)
def upload_image(path: Path, content_type: Optional[str]) -> None:
    """Store the image at PATH and print its URL."""
    service = load_service()
    try:
        url = service.upload_image(UploadedFile.from_path(path, content_type))
    except ObjectStorageError as e:
        logger.error(f"Upload failed: {e.message}")
        sys.exit(1)

    click.echo(url)


@cli.command()
@click.argument("object_url")
def delete(object_url: str) -> None:
    """Delete the object at OBJECT_URL."""
    service = load_service()
    try:
        service.delete_file_object(object_url)
    except ObjectStorageError as e:
        logger.error(f"Delete failed: {e.message}")
        sys.exit(1)

    logger.info(f"Deleted {object_url}")


@cli.command()
@click.argument("object_name")
def url(object_name: str) -> None:
    """Print the public URL of OBJECT_NAME.

    Needs only OCI_REGION, OCI_NAMESPACE and OCI_BUCKET; no credentials are
    read and no storage client is created.
    """
    try:
        location = StorageLocationSettings()
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    click.echo(create_object_url(location.storage_config(), object_name))


@cli.command()
def serve() -> None:
    """Run the REST API with uvicorn."""
    import uvicorn

    settings = load_settings()
    logger.info(f"Starting API on {settings.api_host}:{settings.api_port}")
    uvicorn.run(
        "blogstore.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )


@cli.command()
def version() -> None:
    """Show version information."""
    click.echo(f"Blog Object Storage v{__version__}")
    click.echo("Markdown and image storage on OCI object storage")


if __name__ == "__main__":
    cli()
