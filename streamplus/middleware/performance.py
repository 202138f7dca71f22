"""
Response middleware for FastAPI.

Provides:
- Standard response headers (X-Powered-By, Cache-Control, Vary, security headers)
- Request timing header and slow request logging
"""

import time
from typing import Callable
import logging

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
}


class ResponseHeadersMiddleware(BaseHTTPMiddleware):
    """
    Adds the proxy's standard headers.

    Security headers follow helmet's defaults, without a content security
    policy.

    Cache-Control is only set on successful GET responses so that errors
    are never kept by browsers or intermediaries.
    """

    def __init__(
        self,
        app: ASGIApp,
        powered_by: str = "Stream+",
        max_age: int = 300,
    ):
        super().__init__(app)
        self.powered_by = powered_by
        self.max_age = max_age

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)

        response.headers["X-Powered-By"] = self.powered_by
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        if request.method == "GET" and 200 <= response.status_code < 300:
            response.headers.setdefault("Cache-Control", f"public, max-age={self.max_age}")

        vary = response.headers.get("Vary", "")
        if "accept-encoding" not in vary.lower():
            response.headers["Vary"] = f"{vary}, Accept-Encoding" if vary else "Accept-Encoding"

        return response


class TimingMiddleware(BaseHTTPMiddleware):
    """
    Middleware that tracks request timing.

    Slow requests are usually a slow upstream (playlist host or TMDB).
    """

    def __init__(
        self,
        app: ASGIApp,
        slow_request_threshold_ms: float = 1000,
        enable_header: bool = True,
    ):
        super().__init__(app)
        self.slow_request_threshold_ms = slow_request_threshold_ms
        self.enable_header = enable_header

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000

        if duration_ms > self.slow_request_threshold_ms:
            logger.warning(
                f"Slow request: {request.method} {request.url.path} "
                f"took {duration_ms:.2f}ms"
            )

        if self.enable_header:
            response.headers["X-Response-Time"] = f"{duration_ms:.2f}ms"

        return response

