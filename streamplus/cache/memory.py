"""
In-memory LRU cache with per-entry TTL, used by the catalog proxy.
"""

import asyncio
import logging
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional

from streamplus.cache.base import CacheStats

logger = logging.getLogger(__name__)

_MISSING = object()


@dataclass
class CacheEntry:
    """A single cache entry with metadata."""
    value: Any
    timestamp: float
    expires_at: float

    def is_expired(self, now: float) -> bool:
        """Check if entry has expired."""
        return now >= self.expires_at


class MemoryCache:
    """
    Keyed TTL cache with optional least-recently-used bound.

    Features:
    - Time-based expiration per entry
    - LRU eviction when ``max_entries`` is reached (0 or less = unbounded)
    - Read-through ``get_or_fetch`` that never stores failures
    - Optional collapsing of concurrent misses on the same key into one fetch

    All bookkeeping happens between awaits, so the event loop never sees a
    half-updated entry and no lock is needed.
    """

    def __init__(
        self,
        default_ttl: float = 300,
        max_entries: int = 100,
        dedupe_inflight: bool = True,
        clock: Callable[[], float] = time.time,
    ):
        self.default_ttl = default_ttl
        self.max_entries = max_entries
        self.dedupe_inflight = dedupe_inflight
        self.stats = CacheStats()
        self._clock = clock
        self._cache: OrderedDict[str, CacheEntry] = OrderedDict()
        self._inflight: Dict[str, asyncio.Future] = {}

    def __len__(self) -> int:
        return len(self._cache)

    def __contains__(self, key: str) -> bool:
        return self._lookup(key, touch=False, count=False) is not _MISSING

    @property
    def bounded(self) -> bool:
        return self.max_entries > 0

    def _lookup(self, key: str, touch: bool = True, count: bool = True) -> Any:
        entry = self._cache.get(key)

        if entry is None:
            if count:
                self.stats.misses += 1
            return _MISSING

        if entry.is_expired(self._clock()):
            # Stale entries stay in place until overwritten; only a
            # successful refresh replaces them.
            if count:
                self.stats.misses += 1
            return _MISSING

        if touch:
            self._cache.move_to_end(key)
        if count:
            self.stats.hits += 1
        return entry.value

    def _evict_lru(self) -> None:
        """Evict least recently used entries until there is room for one more."""
        if not self.bounded:
            return
        while len(self._cache) >= self.max_entries:
            key, _ = self._cache.popitem(last=False)
            self.stats.evictions += 1
            logger.debug(f"Evicted cache entry {key}")

    def _store(self, key: str, value: Any, ttl: Optional[float]) -> None:
        now = self._clock()
        if ttl is None:
            ttl = self.default_ttl

        # Replacing a key never evicts a neighbour
        self._cache.pop(key, None)
        self._evict_lru()
        self._cache[key] = CacheEntry(value=value, timestamp=now, expires_at=now + ttl)

        self.stats.sets += 1
        self.stats.entry_count = len(self._cache)

    async def get(self, key: str, default: Any = None) -> Any:
        """Get a fresh value from cache, marking it most recently used."""
        value = self._lookup(key)
        return default if value is _MISSING else value

    async def set(self, key: str, value: Any, ttl: Optional[float] = None) -> None:
        """Set a value in cache."""
        self._store(key, value, ttl)

    async def delete(self, key: str) -> bool:
        """Delete a value from cache."""
        if self._cache.pop(key, None) is None:
            return False
        self.stats.deletes += 1
        self.stats.entry_count = len(self._cache)
        return True

    async def clear(self) -> int:
        """Remove every entry."""
        count = len(self._cache)
        self._cache.clear()
        self.stats.entry_count = 0
        return count

    def keys(self) -> List[str]:
        """Keys from least to most recently used."""
        return list(self._cache.keys())

    async def get_or_fetch(
        self,
        key: str,
        fetch: Callable[[], Awaitable[Any]],
        ttl: Optional[float] = None,
    ) -> Any:
        """
        Return the cached value for ``key`` or fetch, store and return it.

        A failing fetch is not cached: the exception reaches the caller and
        whatever entry existed before is left untouched.
        """
        value = self._lookup(key)
        if value is not _MISSING:
            logger.debug(f"Cache hit: {key}")
            return value

        logger.debug(f"Cache miss: {key}")

        if not self.dedupe_inflight:
            value = await fetch()
            self._store(key, value, ttl)
            return value

        future = self._inflight.get(key)
        if future is None:
            future = asyncio.ensure_future(self._fetch_and_store(key, fetch, ttl))
            self._inflight[key] = future
            future.add_done_callback(lambda f, k=key: self._forget_inflight(k, f))
        else:
            logger.debug(f"Joining in-flight fetch: {key}")

        # A cancelled waiter must not cancel the fetch other waiters share
        return await asyncio.shield(future)

    async def _fetch_and_store(
        self,
        key: str,
        fetch: Callable[[], Awaitable[Any]],
        ttl: Optional[float],
    ) -> Any:
        value = await fetch()
        self._store(key, value, ttl)
        return value

    def _forget_inflight(self, key: str, future: asyncio.Future) -> None:
        if self._inflight.get(key) is future:
            del self._inflight[key]
        # Mark the error as retrieved when every waiter was cancelled
        if not future.cancelled():
            future.exception()

    def get_stats(self) -> CacheStats:
        """Get cache statistics."""
        self.stats.entry_count = len(self._cache)
        return self.stats
