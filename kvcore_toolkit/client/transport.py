"""
Transport adapter for the KVCore Public API.

Owns the single outbound HTTP channel and turns every failure into one of
the toolkit's error types, so callers only ever see a message, a status
code and (for upstream failures) the raw response body.
"""

import logging
from typing import Any

import httpx

from ..core.models import (
    ClientConfig,
    ConfigurationError,
    KVCoreError,
    RequestDescriptor,
    TransportError,
    UpstreamError,
)

logger = logging.getLogger(__name__)

NO_RESPONSE_MESSAGE = "No response received from KVCore API"


class RequestHook:
    """
    Observer for request/response events.

    Hooks only run while debug is enabled. They see each event after it
    happened and cannot change the request, the payload or the error.
    """

    def on_request(self, request: httpx.Request) -> None:
        pass

    def on_response(self, response: httpx.Response) -> None:
        pass

    def on_error(self, request: httpx.Request | None, error: KVCoreError) -> None:
        pass


class LoggingHook(RequestHook):
    """Default hook: writes one log line per event."""

    def __init__(self, log: logging.Logger | None = None):
        self.log = log or logger

    def on_request(self, request: httpx.Request) -> None:
        self.log.info(f"[KVCore] {request.method} {request.url.path}")

    def on_response(self, response: httpx.Response) -> None:
        self.log.info(f"[KVCore] {response.status_code} {response.request.url.path}")

    def on_error(self, request: httpx.Request | None, error: KVCoreError) -> None:
        path = request.url.path if request is not None else "<unsent>"
        if error.response_body is not None:
            self.log.error(
                f"[KVCore Error] {error.status_code} - {path} {error.response_body}"
            )
        else:
            self.log.error(f"[KVCore Error] {error.status_code} - {path} {error.message}")


def _parse_body(response: httpx.Response) -> Any:
    """Decode a response body: JSON when possible, else text, None if empty."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def _upstream_message(body: Any, status_code: int) -> str:
    if isinstance(body, dict):
        for key in ("message", "error"):
            if body.get(key):
                return str(body[key])
    return f"Request failed with status code {status_code}"


class Transport:
    """
    Single HTTP channel to the KVCore API.

    Features:
    - Bearer authentication and JSON headers on every request
    - Upstream body returned unchanged on success
    - Every failure normalised into UpstreamError or TransportError
    - Optional debug hook, toggled at runtime via ``debug_enabled``

    There are no retries: one ``send`` is one upstream round trip.
    """

    def __init__(
        self,
        config: ClientConfig,
        http_client: httpx.AsyncClient | None = None,
        hook: RequestHook | None = None,
    ):
        """
        Initialize the transport.

        Args:
            config: Connection settings
            http_client: Optional httpx async client (created if None)
            hook: Debug hook (defaults to LoggingHook)

        Raises:
            ConfigurationError: If the bearer token is missing or the
                timeout is not positive
        """
        if not config.bearer_token or not config.bearer_token.strip():
            raise ConfigurationError("bearerToken is required")
        if config.timeout_ms <= 0:
            raise ConfigurationError(
                f"timeout_ms must be greater than zero, got {config.timeout_ms}"
            )

        self.config = config
        self.debug_enabled = config.debug
        self.hook = hook or LoggingHook()

        # Track if we own the HTTP client (for cleanup)
        self._owns_client = http_client is None

        if http_client is None:
            self.http_client = httpx.AsyncClient(timeout=config.timeout_seconds)
        else:
            self.http_client = http_client

    async def aclose(self) -> None:
        """Close the HTTP client if we created it."""
        if self._owns_client and self.http_client:
            await self.http_client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
        return False

    def _build_url(self, path: str) -> str:
        """
        Build full URL from base URL and path.

        Only the leading slash of ``path`` is stripped; a trailing slash is
        part of some upstream routes and is kept.
        """
        base_url = self.config.base_url.rstrip("/")
        path = path.lstrip("/")
        return f"{base_url}/{path}"

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.config.bearer_token}",
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

    def _emit(self, debug: bool, event: str, *args: Any) -> None:
        if not debug:
            return
        try:
            getattr(self.hook, event)(*args)
        except Exception:
            logger.exception(f"Debug hook {event} failed")

    def _failure(
        self, debug: bool, request: httpx.Request | None, error: KVCoreError
    ) -> KVCoreError:
        self._emit(debug, "on_error", request, error)
        return error

    async def send(self, descriptor: RequestDescriptor) -> Any:
        """
        Send one request and return the upstream body unchanged.

        Args:
            descriptor: Method, path, query parameters and JSON body

        Returns:
            Parsed JSON body, raw text for non-JSON bodies, or None when
            the response is empty

        Raises:
            UpstreamError: Upstream answered with a non-2xx status
            TransportError: No response (503) or request never sent (500)
        """
        # Read the flag once so a toggle mid-flight does not split a pair
        debug = self.debug_enabled

        try:
            request = self.http_client.build_request(
                method=descriptor.method,
                url=self._build_url(descriptor.path),
                params=descriptor.params,
                json=descriptor.json,
                headers=self._headers(),
                timeout=self.config.timeout_seconds,
            )
        except (TypeError, ValueError, httpx.InvalidURL) as e:
            raise self._failure(
                debug, None, TransportError(str(e), status_code=500)
            ) from e

        self._emit(debug, "on_request", request)

        try:
            response = await self.http_client.send(request)
        except httpx.UnsupportedProtocol as e:
            raise self._failure(
                debug, request, TransportError(str(e), status_code=500)
            ) from e
        except httpx.TransportError as e:
            logger.debug(f"No response for {request.method} {request.url}: {e}")
            raise self._failure(
                debug, request, TransportError(NO_RESPONSE_MESSAGE, status_code=503)
            ) from e

        body = _parse_body(response)

        if not response.is_success:
            raise self._failure(
                debug,
                request,
                UpstreamError(
                    _upstream_message(body, response.status_code),
                    status_code=response.status_code,
                    response_body=body,
                ),
            )

        self._emit(debug, "on_response", response)
        return body
