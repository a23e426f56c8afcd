"""Tests for configuration management and service wiring."""

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from blogstore.core.config import Settings, StorageLocationSettings
from blogstore.storage.factory import create_object_storage_service
from blogstore.storage.models import StorageConfig
from blogstore.storage.object_storage import ObjectStorageService


def test_settings_loads_from_environment(storage_env):
    """Test that Settings loads all required environment variables."""
    settings = Settings()

    assert settings.oci_region == "us-ashburn-1"
    assert settings.oci_namespace == "ns1"
    assert settings.oci_bucket == "blog"
    assert settings.oci_access_key == "test_access_key"
    assert settings.oci_secret_key == "test_secret_key"


def test_settings_loads_optional_fields(storage_env):
    """Test that optional fields have defaults."""
    settings = Settings()

    assert settings.oci_endpoint_url is None
    assert settings.log_level == "INFO"
    assert settings.environment == "development"
    assert settings.api_host == "0.0.0.0"
    assert settings.api_port == 8000
    assert settings.api_reload is True


def test_settings_overrides_optional_fields(storage_env, monkeypatch):
    """Test that optional fields can be overridden via environment variables."""
    monkeypatch.setenv("OCI_ENDPOINT_URL", "http://localhost:9000")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("API_PORT", "9090")
    monkeypatch.setenv("API_RELOAD", "false")

    settings = Settings()

    assert settings.oci_endpoint_url == "http://localhost:9000"
    assert settings.log_level == "DEBUG"
    assert settings.environment == "production"
    assert settings.api_port == 9090
    assert settings.api_reload is False


@pytest.mark.parametrize(
    "missing",
    ["OCI_REGION", "OCI_NAMESPACE", "OCI_BUCKET", "OCI_ACCESS_KEY", "OCI_SECRET_KEY"],
)
def test_settings_missing_required_field(storage_env, monkeypatch, missing):
    """Test that each required field raises when absent."""
    monkeypatch.delenv(missing)

    with pytest.raises(ValidationError) as exc_info:
        Settings()

    assert missing.lower() in str(exc_info.value)


def test_settings_rejects_blank_bucket(storage_env, monkeypatch):
    """Test that blank storage identifiers are rejected."""
    monkeypatch.setenv("OCI_BUCKET", "   ")

    with pytest.raises(ValidationError, match="must not be blank"):
        Settings()


def test_settings_rejects_unknown_log_level(storage_env, monkeypatch):
    """Test that log_level must be a logging level name."""
    monkeypatch.setenv("LOG_LEVEL", "verbose")

    with pytest.raises(ValidationError, match="log_level"):
        Settings()


def test_settings_rejects_invalid_port(storage_env, monkeypatch):
    """Test that api_port must be a valid TCP port."""
    monkeypatch.setenv("API_PORT", "0")

    with pytest.raises(ValidationError):
        Settings()


def test_storage_location_settings_without_credentials(monkeypatch):
    """Test that the bucket location loads without credentials."""
    monkeypatch.setenv("OCI_REGION", " us-ashburn-1 ")
    monkeypatch.setenv("OCI_NAMESPACE", "ns1")
    monkeypatch.setenv("OCI_BUCKET", "blog")
    monkeypatch.delenv("OCI_ACCESS_KEY", raising=False)
    monkeypatch.delenv("OCI_SECRET_KEY", raising=False)

    location = StorageLocationSettings()

    assert location.storage_config() == StorageConfig(
        region="us-ashburn-1", namespace="ns1", bucket="blog"
    )


def test_storage_config(storage_env):
    """Test that the storage triple is extracted as an immutable value."""
    config = Settings().storage_config()

    assert config == StorageConfig(region="us-ashburn-1", namespace="ns1", bucket="blog")
    with pytest.raises(AttributeError):
        config.bucket = "other"


def test_create_object_storage_service(storage_env, monkeypatch):
    """Test that the factory wires settings into the client and service."""
    monkeypatch.setenv("OCI_ENDPOINT_URL", "http://localhost:9000")

    with patch("blogstore.storage.oci_client.boto3.client") as client_factory:
        service = create_object_storage_service(Settings())

    assert isinstance(service, ObjectStorageService)
    assert service.config.bucket == "blog"
    assert service.client.namespace == "ns1"
    assert service.client.endpoint_url == "http://localhost:9000"

    kwargs = client_factory.call_args.kwargs
    assert kwargs["aws_access_key_id"] == "test_access_key"
    assert kwargs["aws_secret_access_key"] == "test_secret_key"
