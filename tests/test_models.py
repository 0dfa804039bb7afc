"""Tests for the data model and error types."""

import dataclasses

import pytest

from kvcore_toolkit.core.models import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_MS,
    ClientConfig,
    ConfigurationError,
    KVCoreError,
    RequestDescriptor,
    TransportError,
    UpstreamError,
    ValidationError,
)


def test_client_config_defaults():
    """Test creating a config with only a token."""
    config = ClientConfig(bearer_token="abc")

    assert config.base_url == DEFAULT_BASE_URL == "https://api.kvcore.com/v2/public"
    assert config.timeout_ms == DEFAULT_TIMEOUT_MS == 30000
    assert config.timeout_seconds == 30.0
    assert config.debug is False


def test_client_config_is_frozen():
    config = ClientConfig(bearer_token="abc")
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.debug = True


def test_client_config_repr_hides_token():
    config = ClientConfig(bearer_token="super-secret")
    assert "super-secret" not in repr(config)
    assert "***" in repr(config)


def test_request_descriptor():
    descriptor = RequestDescriptor(method="GET", path="/contacts", params={"limit": 5})

    assert descriptor.method == "GET"
    assert descriptor.params == {"limit": 5}
    assert descriptor.json is None


def test_error_to_dict():
    """Test serializing an error."""
    error = UpstreamError("Not found", status_code=404, response_body={"message": "Not found"})

    assert str(error) == "Not found"
    assert error.to_dict() == {
        "message": "Not found",
        "status_code": 404,
        "response_body": {"message": "Not found"},
    }


def test_error_default_status_codes():
    assert KVCoreError("x").status_code == 500
    assert ConfigurationError("x").status_code == 500
    assert ValidationError("x").status_code == 400
    assert TransportError("x").status_code == 503
    assert TransportError("x", status_code=500).status_code == 500


def test_error_hierarchy():
    for cls in (ConfigurationError, ValidationError, UpstreamError, TransportError):
        assert issubclass(cls, KVCoreError)
    assert ValidationError("x").response_body is None
