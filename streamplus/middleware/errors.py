"""
Last-resort error handling inside the middleware stack.

Exceptions that no route or exception handler dealt with are turned into a
500 JSON body here, below CORS and the standard-header middleware, so the
browser client can still read the error.
"""

import logging
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Erro interno do servidor"


def internal_error_response() -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR_MESSAGE})


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Converts uncategorized exceptions into a generic 500."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            logger.error(
                f"Unhandled error on {request.method} {request.url.path}: {e}", exc_info=e
            )
            return internal_error_response()
