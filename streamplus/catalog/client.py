"""
TMDB Client

Thin passthrough client for The Movie Database API.
"""

import asyncio
import logging
from typing import Any, Dict, Optional

import aiohttp

from streamplus.exceptions import UpstreamTimeoutError, UpstreamUnavailableError

logger = logging.getLogger(__name__)


class TMDBClient:
    """TMDB client returning raw JSON payloads."""

    BASE_URL = "https://api.themoviedb.org/3"

    def __init__(
        self,
        api_key: Optional[str] = None,
        language: str = "pt-BR",
        base_url: Optional[str] = None,
        timeout: float = 3.0,
    ):
        self.api_key = api_key
        self.language = language
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.timeout = timeout
        self._session: Optional[aiohttp.ClientSession] = None

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Get or create HTTP session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout)
            )
        return self._session

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        GET ``path`` relative to the API root and return the decoded body.

        Raises:
            UpstreamTimeoutError: no answer within the client timeout
            UpstreamUnavailableError: connection failure or non-200 status
        """
        if not self.api_key:
            logger.warning("TMDB API key not configured")
            raise UpstreamUnavailableError("API não respondeu", details="TMDB API key not configured")

        session = await self._ensure_session()

        url = f"{self.base_url}/{path.lstrip('/')}"
        request_params: Dict[str, Any] = {
            "api_key": self.api_key,
            "language": self.language,
        }
        if params:
            request_params.update({k: str(v) for k, v in params.items() if v is not None})

        try:
            async with session.get(url, params=request_params) as response:
                if response.status == 200:
                    return await response.json()
                if response.status == 401:
                    logger.error("TMDB API key invalid")
                elif response.status == 404:
                    logger.debug(f"TMDB resource not found: {path}")
                else:
                    logger.warning(f"TMDB API error: HTTP {response.status}")
                raise UpstreamUnavailableError(
                    "API não respondeu",
                    details=f"HTTP {response.status}",
                    upstream_status=response.status,
                )
        except asyncio.TimeoutError as e:
            logger.warning(f"TMDB request timed out after {self.timeout}s: {path}")
            raise UpstreamTimeoutError(
                "Falha na requisição: tempo esgotado",
                details=f"no response within {self.timeout}s",
                original_error=e,
            )
        except aiohttp.ClientError as e:
            logger.error(f"TMDB request failed: {e}")
            raise UpstreamUnavailableError(
                f"Falha na requisição: {e}", original_error=e
            )

    async def close(self) -> None:
        """Close HTTP session."""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None


__all__ = ["TMDBClient"]
