"""
Error types shared by the playlist and catalog proxies.

Every error carries the HTTP status it maps to, so the API layer can turn
any of them into a JSON body without knowing where it came from.
"""

from typing import Any, Optional


class ProxyError(Exception):
    """Base class for failures surfaced to API callers."""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        details: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details
        self.original_error = original_error

    def to_dict(self) -> dict[str, Any]:
        """Render the error as the JSON body returned to clients."""
        body: dict[str, Any] = {"error": self.message}
        if self.details:
            body["details"] = self.details
        return body


class UpstreamUnavailableError(ProxyError):
    """Network failure or non-success status from the remote source."""

    status_code = 502

    def __init__(
        self,
        message: str,
        details: Optional[str] = None,
        original_error: Optional[Exception] = None,
        upstream_status: Optional[int] = None,
    ):
        super().__init__(message, details, original_error)
        self.upstream_status = upstream_status


class InvalidSourceError(ProxyError):
    """Fetched playlist body is not an M3U document."""

    status_code = 502


class InvalidRequestError(ProxyError):
    """Missing or malformed caller parameters."""

    status_code = 400


class UpstreamTimeoutError(ProxyError):
    """Upstream did not answer within the configured deadline."""

    status_code = 504


__all__ = [
    "ProxyError",
    "UpstreamUnavailableError",
    "InvalidSourceError",
    "InvalidRequestError",
    "UpstreamTimeoutError",
]
