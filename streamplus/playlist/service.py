"""Playlist ingestion: fetch, parse and cache the remote M3U playlist"""

import logging
from typing import Optional

import httpx

from ..cache.snapshot import SnapshotCache
from ..exceptions import UpstreamUnavailableError
from .parser import Channel, M3UParser, filter_by_name

logger = logging.getLogger(__name__)

LOAD_FAILED_MESSAGE = "Falha ao carregar lista M3U"


class PlaylistService:
    """
    Serves the parsed playlist out of a whole-dataset cache.

    One instance lives for the lifetime of the application; the HTTP client
    it owns is closed by aclose() at shutdown.
    """

    def __init__(
        self,
        playlist_url: str,
        cache: SnapshotCache[list[Channel]],
        client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = 60.0,
    ):
        self.playlist_url = playlist_url
        self.cache = cache
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout), follow_redirects=True
        )

    async def fetch_playlist_text(self) -> str:
        """Download the playlist body, mapping transport failures to proxy errors"""
        if not self.playlist_url:
            raise UpstreamUnavailableError(LOAD_FAILED_MESSAGE, details="playlist URL not configured")

        logger.info(f"Fetching M3U from URL: {self.playlist_url}")
        try:
            response = await self._client.get(
                self.playlist_url, headers={"Cache-Control": "no-store"}
            )
            response.raise_for_status()
        except httpx.TimeoutException as e:
            logger.warning(f"Playlist fetch timed out: {e}")
            raise UpstreamUnavailableError(
                LOAD_FAILED_MESSAGE,
                details=f"timeout: {e}" if str(e) else "timeout",
                original_error=e,
            )
        except httpx.HTTPStatusError as e:
            logger.warning(f"Playlist host answered HTTP {e.response.status_code}")
            raise UpstreamUnavailableError(
                LOAD_FAILED_MESSAGE,
                details=f"HTTP {e.response.status_code}",
                original_error=e,
                upstream_status=e.response.status_code,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"Playlist fetch failed: {e}")
            raise UpstreamUnavailableError(LOAD_FAILED_MESSAGE, details=str(e), original_error=e)

        return response.text

    async def load_channels(self) -> list[Channel]:
        """Fetch and parse without touching the cache"""
        text = await self.fetch_playlist_text()
        return M3UParser.parse(text)

    async def get_channels(self, query: Optional[str] = None) -> list[Channel]:
        """
        Cached channel list, optionally narrowed by a name substring.

        The filter is applied to the cached list on every call and never
        stored.
        """
        channels = await self.cache.get_or_refresh(self.load_channels)
        return filter_by_name(channels, query)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
