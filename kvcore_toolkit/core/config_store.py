"""Environment-driven configuration for the client and the server."""

import logging
from typing import Mapping

from pydantic import Field, PositiveInt
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import (
    ClientConfig,
    ConfigurationError,
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_MS,
)

logger = logging.getLogger(__name__)

DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_RATE_LIMIT_WINDOW_MS = 15 * 60 * 1000
DEFAULT_RATE_LIMIT_MAX_REQUESTS = 100

_SETTINGS_CONFIG = SettingsConfigDict(
    env_file=".env",
    env_file_encoding="utf-8",
    env_ignore_empty=True,
    extra="ignore",
    frozen=True,
    populate_by_name=True,
    str_strip_whitespace=True,
)


class ClientSettings(BaseSettings):
    """Client settings loaded from KVCORE_* environment variables and .env."""

    model_config = _SETTINGS_CONFIG

    bearer_token: str = Field(validation_alias="KVCORE_BEARER_TOKEN", min_length=1)
    base_url: str = Field(DEFAULT_BASE_URL, validation_alias="KVCORE_BASE_URL", min_length=1)
    timeout_ms: PositiveInt = Field(DEFAULT_TIMEOUT_MS, validation_alias="KVCORE_TIMEOUT_MS")
    debug: bool = Field(False, validation_alias="KVCORE_DEBUG")

    def client_config(self) -> ClientConfig:
        return ClientConfig(
            bearer_token=self.bearer_token,
            base_url=self.base_url,
            timeout_ms=self.timeout_ms,
            debug=self.debug,
        )


class ServerSettings(BaseSettings):
    """
    Settings for the HTTP server adapter.

    Unlike the client, the server requires KVCORE_BASE_URL to be set
    explicitly alongside KVCORE_BEARER_TOKEN.
    """

    model_config = _SETTINGS_CONFIG

    base_url: str = Field(validation_alias="KVCORE_BASE_URL", min_length=1)
    bearer_token: str = Field(validation_alias="KVCORE_BEARER_TOKEN", min_length=1)
    host: str = Field(DEFAULT_HOST, validation_alias="HOST")
    port: PositiveInt = Field(DEFAULT_PORT, validation_alias="PORT")
    timeout_ms: PositiveInt = Field(DEFAULT_TIMEOUT_MS, validation_alias="KVCORE_TIMEOUT_MS")
    rate_limit_window_ms: PositiveInt = Field(
        DEFAULT_RATE_LIMIT_WINDOW_MS, validation_alias="RATE_LIMIT_WINDOW_MS"
    )
    rate_limit_max_requests: PositiveInt = Field(
        DEFAULT_RATE_LIMIT_MAX_REQUESTS, validation_alias="RATE_LIMIT_MAX_REQUESTS"
    )
    debug: bool = Field(False, validation_alias="KVCORE_DEBUG")
    environment: str = Field("development", validation_alias="ENVIRONMENT")

    def client_config(self) -> ClientConfig:
        """Build the client configuration these settings describe."""
        return ClientConfig(
            bearer_token=self.bearer_token,
            base_url=self.base_url,
            timeout_ms=self.timeout_ms,
            debug=self.debug,
        )


def _configuration_error(
    settings_cls: type[BaseSettings], error: PydanticValidationError
) -> ConfigurationError:
    """Turn the first pydantic error into a ConfigurationError naming the variable."""
    first = error.errors()[0]
    name = str(first["loc"][0]) if first["loc"] else settings_cls.__name__
    field = settings_cls.model_fields.get(name)
    if field is not None and isinstance(field.validation_alias, str):
        name = field.validation_alias

    if first["type"] in ("missing", "string_too_short"):
        return ConfigurationError(f"{name} environment variable is required")
    return ConfigurationError(f"{name} is invalid: {first['msg']}")


def _load(settings_cls, env: Mapping[str, str] | None):
    try:
        if env is None:
            return settings_cls()
        # An explicit mapping replaces os.environ and .env entirely
        present = {key: value for key, value in env.items() if value and value.strip()}
        return settings_cls.model_validate(present)
    except PydanticValidationError as e:
        raise _configuration_error(settings_cls, e) from e


def load_client_config(env: Mapping[str, str] | None = None) -> ClientConfig:
    """
    Build a ClientConfig from environment variables.

    Recognised variables:
    - KVCORE_BEARER_TOKEN (required)
    - KVCORE_BASE_URL (defaults to the public v2 endpoint)
    - KVCORE_TIMEOUT_MS (defaults to 30000)
    - KVCORE_DEBUG

    Args:
        env: Mapping to read from (defaults to os.environ plus .env)

    Returns:
        The client configuration

    Raises:
        ConfigurationError: If the token is missing or a value is malformed
    """
    return _load(ClientSettings, env).client_config()


def load_server_settings(env: Mapping[str, str] | None = None) -> ServerSettings:
    """
    Build ServerSettings from environment variables.

    Args:
        env: Mapping to read from (defaults to os.environ plus .env)

    Returns:
        The server settings

    Raises:
        ConfigurationError: If a required variable is missing or malformed
    """
    settings = _load(ServerSettings, env)
    logger.debug(
        f"Loaded server settings: base_url={settings.base_url}, port={settings.port}"
    )
    return settings
