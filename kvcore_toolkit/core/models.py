"""Core data models and error types for the KVCore toolkit."""

from dataclasses import dataclass
from typing import Any, Mapping, Sequence

DEFAULT_BASE_URL = "https://api.kvcore.com/v2/public"
DEFAULT_TIMEOUT_MS = 30000

# Query parameters as a mapping, or as pairs when a key repeats
QueryParams = Mapping[str, Any] | Sequence[tuple[str, Any]]


@dataclass(frozen=True)
class ClientConfig:
    """
    Connection settings for one KVCore client.

    The ``debug`` field only seeds the transport's debug flag; toggling
    debug at runtime goes through the client, not this object.
    """
    bearer_token: str
    base_url: str = DEFAULT_BASE_URL
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    debug: bool = False

    @property
    def timeout_seconds(self) -> float:
        """Timeout converted to the seconds httpx expects."""
        return self.timeout_ms / 1000.0

    def __repr__(self) -> str:
        return (
            f"ClientConfig(base_url={self.base_url!r}, "
            f"timeout_ms={self.timeout_ms}, debug={self.debug}, bearer_token='***')"
        )


@dataclass(frozen=True)
class RequestDescriptor:
    """A single outbound request, built per call and never reused."""
    method: str
    path: str
    params: QueryParams | None = None
    json: Any = None


class KVCoreError(Exception):
    """
    Base error for everything raised by the toolkit.

    Every failure that leaves the client carries the same shape: a message,
    an HTTP-style status code and, for upstream failures, the raw body the
    API returned.
    """

    default_status_code = 500

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code if status_code is not None else self.default_status_code
        self.response_body = response_body

    def to_dict(self) -> dict[str, Any]:
        """Convert the error to a plain dictionary."""
        return {
            "message": self.message,
            "status_code": self.status_code,
            "response_body": self.response_body,
        }


class ConfigurationError(KVCoreError):
    """Raised when required configuration is missing or invalid."""
    pass


class ValidationError(KVCoreError):
    """Raised when caller input is rejected before any request is sent."""

    default_status_code = 400


class UpstreamError(KVCoreError):
    """Raised when the KVCore API responds with a non-2xx status."""
    pass


class TransportError(KVCoreError):
    """Raised when no response was received or the request was never sent."""

    default_status_code = 503
