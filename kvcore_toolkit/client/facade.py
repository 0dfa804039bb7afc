"""
KVCore client facade.

Binds one configuration to one transport and exposes every resource
mediator as a member.
"""

import logging
from typing import Mapping

import httpx

from ..core.config_store import load_client_config
from ..core.models import ClientConfig, DEFAULT_BASE_URL, DEFAULT_TIMEOUT_MS
from ..resources import CallsAPI, ContactsAPI, MiscAPI, NotesAPI, SearchAlertsAPI
from .transport import RequestHook, Transport

logger = logging.getLogger(__name__)


class KVCoreClient:
    """
    Client for the KVCore Public API v2.

    Each instance owns its own configuration and transport, so several
    clients can coexist in one process (and in parallel tests).

    Example:
        >>> async with KVCoreClient(bearer_token="token") as client:
        ...     contacts = await client.contacts.list({"limit": 5})
    """

    def __init__(
        self,
        bearer_token: str | None = None,
        base_url: str | None = None,
        timeout_ms: int | None = None,
        debug: bool = False,
        http_client: httpx.AsyncClient | None = None,
        hook: RequestHook | None = None,
    ):
        """
        Initialize the client.

        Args:
            bearer_token: KVCore API bearer token (required)
            base_url: API base URL (defaults to the public v2 endpoint)
            timeout_ms: Request timeout in milliseconds (default 30000)
            debug: Start with debug logging enabled
            http_client: Optional httpx async client (created if None)
            hook: Debug hook (defaults to logging each request/response)

        Raises:
            ConfigurationError: If bearer_token is missing
        """
        config = ClientConfig(
            bearer_token=bearer_token or "",
            base_url=base_url or DEFAULT_BASE_URL,
            timeout_ms=DEFAULT_TIMEOUT_MS if timeout_ms is None else timeout_ms,
            debug=debug,
        )
        self._setup(config, http_client, hook)

    def _setup(
        self,
        config: ClientConfig,
        http_client: httpx.AsyncClient | None,
        hook: RequestHook | None,
    ) -> None:
        self.config = config
        self.transport = Transport(config, http_client=http_client, hook=hook)

        self.contacts = ContactsAPI(self.transport)
        self.notes = NotesAPI(self.transport)
        self.calls = CallsAPI(self.transport)
        self.search_alerts = SearchAlertsAPI(self.transport)
        self.misc = MiscAPI(self.transport)

        logger.debug(f"Created KVCore client for {config.base_url}")

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        http_client: httpx.AsyncClient | None = None,
        hook: RequestHook | None = None,
    ) -> "KVCoreClient":
        """Create a client from an existing ClientConfig."""
        client = cls.__new__(cls)
        client._setup(config, http_client, hook)
        return client

    @classmethod
    def from_env(
        cls,
        env: Mapping[str, str] | None = None,
        http_client: httpx.AsyncClient | None = None,
        hook: RequestHook | None = None,
    ) -> "KVCoreClient":
        """
        Create a client from KVCORE_* environment variables.

        Raises:
            ConfigurationError: If KVCORE_BEARER_TOKEN is not set
        """
        return cls.from_config(load_client_config(env), http_client=http_client, hook=hook)

    @property
    def debug_enabled(self) -> bool:
        return self.transport.debug_enabled

    def enable_debug(self) -> None:
        """Enable debug logging from the next request on."""
        self.transport.debug_enabled = True

    def disable_debug(self) -> None:
        """Disable debug logging from the next request on."""
        self.transport.debug_enabled = False

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this client created it."""
        await self.transport.aclose()

    async def __aenter__(self):
        """Async context manager support."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager cleanup."""
        await self.aclose()
        return False
