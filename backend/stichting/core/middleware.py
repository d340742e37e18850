"""
HTTP middleware: security response headers and per-address rate limiting.
"""
import logging
import threading
import time
from typing import Dict, Tuple

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from stichting.core.utils import format_error

logger = logging.getLogger(__name__)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "X-DNS-Prefetch-Control": "off",
    "Referrer-Policy": "no-referrer",
    "Cross-Origin-Opener-Policy": "same-origin",
    "X-Permitted-Cross-Domain-Policies": "none",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        return response


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Fixed one-minute window per client address.

    Counters live in this process only; they bound request volume, not
    access to any single resource.
    """

    def __init__(self, app: FastAPI, limit: int = 120, window_seconds: int = 60):
        super().__init__(app)
        self.limit = limit
        self.window_seconds = window_seconds
        self._hits: Dict[str, Tuple[float, int]] = {}
        self._lock = threading.Lock()

    def _client_key(self, request: Request) -> str:
        return request.client.host if request.client else "unknown"

    def _register_hit(self, key: str) -> int:
        now = time.monotonic()
        with self._lock:
            window_start, count = self._hits.get(key, (now, 0))
            if now - window_start >= self.window_seconds:
                window_start, count = now, 0
            count += 1
            self._hits[key] = (window_start, count)
            # Drop expired windows so the table does not grow without bound
            if len(self._hits) > 10000:
                self._hits = {
                    k: v for k, v in self._hits.items()
                    if now - v[0] < self.window_seconds
                }
        return count

    async def dispatch(self, request: Request, call_next):
        key = self._client_key(request)
        count = self._register_hit(key)
        if count > self.limit:
            logger.warning(f"Rate limit exceeded for {key} ({count} requests)")
            return JSONResponse(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                content=format_error("Too many requests, please try again later."),
            )
        return await call_next(request)
