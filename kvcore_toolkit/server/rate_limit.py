"""
Fixed-window rate limiting per client IP.

Each client gets ``max_requests`` per window; the counter resets when the
window that started with the client's first request expires.
"""

import logging
import math
import threading
import time
from dataclasses import dataclass
from typing import Callable

from fastapi import Request
from fastapi.responses import JSONResponse, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

logger = logging.getLogger(__name__)

RATE_LIMIT_MESSAGE = "Too many requests from this IP, please try again later."


@dataclass
class RateLimitPolicy:
    """Window length and request budget per client."""
    window_ms: int = 15 * 60 * 1000
    max_requests: int = 100


@dataclass
class RateLimitResult:
    """Outcome of one hit against the limiter."""
    allowed: bool
    limit: int
    remaining: int
    reset_seconds: int


class FixedWindowLimiter:
    """
    In-memory fixed-window counter keyed by client.
    """

    def __init__(
        self,
        policy: RateLimitPolicy | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize FixedWindowLimiter."""
        self.policy = policy or RateLimitPolicy()
        self.window_seconds = max(self.policy.window_ms, 1) / 1000.0
        self._clock = clock
        self._windows: dict[str, tuple[float, int]] = {}
        self._last_sweep = clock()
        self._lock = threading.Lock()

    def _sweep(self, now: float) -> None:
        """Drop windows that have expired."""
        if now - self._last_sweep < self.window_seconds:
            return
        self._last_sweep = now
        expired = [
            key for key, (started, _) in self._windows.items()
            if now - started >= self.window_seconds
        ]
        for key in expired:
            del self._windows[key]

    def hit(self, key: str) -> RateLimitResult:
        """
        Count one request for ``key``.

        Args:
            key: Client identifier (usually the remote IP)

        Returns:
            Whether the request is allowed plus the header values
        """
        with self._lock:
            now = self._clock()
            self._sweep(now)

            started, count = self._windows.get(key, (now, 0))
            if now - started >= self.window_seconds:
                started, count = now, 0

            count += 1
            self._windows[key] = (started, count)

            limit = self.policy.max_requests
            reset = max(0, math.ceil(started + self.window_seconds - now))
            return RateLimitResult(
                allowed=count <= limit,
                limit=limit,
                remaining=max(0, limit - count),
                reset_seconds=reset,
            )

    def reset(self) -> None:
        """Forget every client."""
        with self._lock:
            self._windows.clear()


class RateLimitMiddleware(BaseHTTPMiddleware):
    """
    Rejects clients over their budget with 429 and adds RateLimit-* headers
    to every response.
    """

    def __init__(self, app, limiter: FixedWindowLimiter):
        super().__init__(app)
        self.limiter = limiter

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        client_key = request.client.host if request.client else "unknown"
        result = self.limiter.hit(client_key)

        if result.allowed:
            response = await call_next(request)
        else:
            logger.warning(f"Rate limit exceeded for {client_key} on {request.url.path}")
            response = JSONResponse(status_code=429, content={"error": RATE_LIMIT_MESSAGE})

        response.headers["RateLimit-Limit"] = str(result.limit)
        response.headers["RateLimit-Remaining"] = str(result.remaining)
        response.headers["RateLimit-Reset"] = str(result.reset_seconds)
        return response
