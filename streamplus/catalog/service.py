"""
Catalog proxy: route a logical query to TMDB through the keyed cache.
"""

import copy
import logging
from typing import Any, Mapping, Optional

from streamplus.cache.base import generate_cache_key
from streamplus.cache.memory import MemoryCache
from streamplus.catalog.client import TMDBClient
from streamplus.catalog.routes import EMPTY_RESULTS, resolve_route

logger = logging.getLogger(__name__)


class CatalogService:
    """Caches TMDB responses per (endpoint, query parameters)."""

    def __init__(
        self,
        client: TMDBClient,
        cache: MemoryCache,
        ttl: Optional[float] = None,
    ):
        self.client = client
        self.cache = cache
        self.ttl = ttl

    async def query(self, endpoint: str, params: Mapping[str, Any]) -> Any:
        """
        Answer a logical catalog query.

        Args:
            endpoint: Logical endpoint name (hero, movies, search, ...)
            params: The caller's query parameters, all of which take part
                in the cache key.
        """
        request = resolve_route(endpoint, params)
        if request is None:
            return copy.deepcopy(EMPTY_RESULTS)

        key = generate_cache_key(endpoint, params)

        async def fetch() -> Any:
            logger.info(f"Fetching TMDB {request.path} for {endpoint}")
            return await self.client.get(request.path, request.params)

        return await self.cache.get_or_fetch(key, fetch, ttl=self.ttl)

    async def close(self) -> None:
        await self.client.close()
