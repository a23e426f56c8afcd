"""Configuration management for Blog Object Storage.

This module provides centralized configuration management using pydantic-settings.
All configuration is loaded from environment variables or .env files with
validation. The storage triple (region, namespace, bucket) is exposed as an
immutable StorageConfig so the storage adapter never reads settings directly.

StorageLocationSettings holds only the bucket location, for commands that
build object URLs without talking to the storage service. Settings extends
it with credentials and application options.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from blogstore.storage.models import StorageConfig

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class StorageLocationSettings(BaseSettings):
    """Bucket location loaded from environment variables.

    Attributes:
        oci_region: OCI region identifier (e.g. us-ashburn-1)
        oci_namespace: Object storage namespace of the tenancy
        oci_bucket: Bucket holding blog documents and images
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    oci_region: str = Field(
        ...,
        description="OCI region identifier (e.g. us-ashburn-1)",
    )
    oci_namespace: str = Field(
        ...,
        description="Object storage namespace of the tenancy",
    )
    oci_bucket: str = Field(
        ...,
        description="Bucket holding blog documents and images",
    )

    @field_validator("oci_region", "oci_namespace", "oci_bucket")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Validate that storage identifiers are not blank.

        Args:
            v: The identifier value

        Returns:
            The stripped value

        Raises:
            ValueError: If the value is empty or whitespace only
        """
        v = v.strip()
        if not v:
            raise ValueError("storage identifiers must not be blank")
        return v

    def storage_config(self) -> StorageConfig:
        """Return the immutable storage triple used by the storage adapter."""
        return StorageConfig(
            region=self.oci_region,
            namespace=self.oci_namespace,
            bucket=self.oci_bucket,
        )


class Settings(StorageLocationSettings):
    """Application settings loaded from environment variables.

    All settings are loaded from environment variables or .env files.
    Required fields will raise validation errors if not provided.
    Optional fields have sensible defaults.

    Attributes:
        # OCI Object Storage Configuration (3 fields, plus the bucket location)
        oci_access_key: Customer secret key ID for the S3 compatibility API
        oci_secret_key: Customer secret key for the S3 compatibility API
        oci_endpoint_url: Optional override of the S3 compatibility endpoint

        # Application Configuration (2 fields)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        environment: Environment name (development, production)

        # API Configuration (3 fields)
        api_host: Host to bind FastAPI server
        api_port: Port for FastAPI server
        api_reload: Enable auto-reload for development
    """

    # OCI Object Storage Configuration (3 fields)
    oci_access_key: str = Field(
        ...,
        description="Customer secret key ID for the S3 compatibility API",
    )
    oci_secret_key: str = Field(
        ...,
        description="Customer secret key for the S3 compatibility API",
    )
    oci_endpoint_url: Optional[str] = Field(
        default=None,
        description="Override of the S3 compatibility endpoint URL",
    )

    # Application Configuration (2 fields)
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    environment: str = Field(
        default="development",
        description="Environment name (development, production)",
    )

    # API Configuration (3 fields)
    api_host: str = Field(
        default="0.0.0.0",
        description="Host to bind FastAPI server",
    )
    api_port: int = Field(
        default=8000,
        description="Port for FastAPI server",
        gt=0,
        le=65535,
    )
    api_reload: bool = Field(
        default=True,
        description="Enable auto-reload for development",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize the logging level.

        Args:
            v: The log_level value

        Returns:
            The upper-cased level name

        Raises:
            ValueError: If the level is not a known logging level
        """
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level
