"""Security headers and per-client rate limiting for the JSON API.

The limiter is process-local, like the in-memory stores: with several
worker processes each one counts separately.
"""

from __future__ import annotations

import logging
import math
import threading
import time
from dataclasses import dataclass
from typing import Callable, Optional

from flask import Flask, g, request

from .responses import error_response

logger = logging.getLogger(__name__)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
}

WRITE_METHODS = frozenset({"POST", "PUT", "PATCH", "DELETE"})

_PRUNE_THRESHOLD = 1024


@dataclass(frozen=True)
class RateLimitResult:
    allowed: bool
    limit: int
    remaining: int
    reset_at: float


class RateLimiter:
    """Fixed-window counter keyed by client address."""

    def __init__(self, max_requests: int, window_seconds: float, *, clock: Callable[[], float] = time.monotonic):
        if max_requests < 1 or window_seconds <= 0:
            raise ValueError("rate limit needs max_requests >= 1 and a positive window")
        self._max = max_requests
        self._window = float(window_seconds)
        self._clock = clock
        self._lock = threading.Lock()
        self._windows: dict[str, tuple[int, float]] = {}

    def hit(self, key: str) -> RateLimitResult:
        now = self._clock()
        with self._lock:
            if len(self._windows) > _PRUNE_THRESHOLD:
                self._windows = {k: v for k, v in self._windows.items() if v[1] > now}

            count, reset_at = self._windows.get(key, (0, 0.0))
            if now >= reset_at:
                count, reset_at = 0, now + self._window
            if count >= self._max:
                return RateLimitResult(False, self._max, 0, reset_at)

            count += 1
            self._windows[key] = (count, reset_at)
            return RateLimitResult(True, self._max, self._max - count, reset_at)

    def seconds_until(self, reset_at: float) -> int:
        return max(1, math.ceil(reset_at - self._clock()))


def register_security(app: Flask, limiter: Optional[RateLimiter] = None) -> None:
    @app.before_request
    def limit_write_requests():
        if limiter is None or request.method not in WRITE_METHODS or not request.path.startswith("/api/"):
            return None

        client = request.remote_addr or "unknown"
        result = limiter.hit(client)
        g.rate_limit = result
        if result.allowed:
            return None

        logger.warning("Rate limit exceeded by %s on %s %s", client, request.method, request.path)
        response, status = error_response("Too many requests, please try again later", 429)
        response.headers["Retry-After"] = str(limiter.seconds_until(result.reset_at))
        return response, status

    @app.after_request
    def add_security_headers(response):
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)

        result = g.get("rate_limit")
        if result is not None:
            response.headers["X-RateLimit-Limit"] = str(result.limit)
            response.headers["X-RateLimit-Remaining"] = str(result.remaining)
        return response
