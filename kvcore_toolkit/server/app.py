"""
FastAPI application factory.

Creates the app with the per-IP rate limiter, the JSON error envelope,
and one KVCore client shared by every route.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from .. import __version__
from ..client import KVCoreClient
from ..core.config_store import ServerSettings, load_server_settings
from .errors import register_error_handlers
from .rate_limit import FixedWindowLimiter, RateLimitMiddleware, RateLimitPolicy
from .routes import api_router

logger = logging.getLogger(__name__)


def create_app(
    settings: ServerSettings | None = None,
    client: KVCoreClient | None = None,
) -> FastAPI:
    """
    Build the HTTP server.

    Args:
        settings: Server settings (read from the environment and .env if None)
        client: KVCore client to forward through (built from settings if None)

    Returns:
        The configured FastAPI app

    Raises:
        ConfigurationError: If required settings are missing
    """
    if settings is None:
        settings = load_server_settings()

    owns_client = client is None
    if client is None:
        client = KVCoreClient.from_config(settings.client_config())

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(f"KVCore integration server listening on {settings.host}:{settings.port}")
        logger.info(f"Environment: {settings.environment}")
        logger.info(f"KVCore base URL: {settings.base_url}")
        logger.info(
            f"Rate limit: {settings.rate_limit_max_requests} requests "
            f"per {settings.rate_limit_window_ms} ms"
        )
        yield
        if owns_client:
            await client.aclose()
            logger.info("KVCore client closed")

    app = FastAPI(
        title="KVCore Integration",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.kvcore = client
    app.state.settings = settings

    limiter = FixedWindowLimiter(
        RateLimitPolicy(
            window_ms=settings.rate_limit_window_ms,
            max_requests=settings.rate_limit_max_requests,
        )
    )
    app.add_middleware(RateLimitMiddleware, limiter=limiter)
    app.state.rate_limiter = limiter

    register_error_handlers(app)
    app.include_router(api_router)

    return app
