"""
Single-slot cache holding one whole dataset, used by the playlist proxy.
"""

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Snapshot(Generic[T]):
    """The stored dataset and when it was fetched (epoch seconds)."""
    timestamp: float
    data: Optional[T]


class SnapshotCache(Generic[T]):
    """
    Whole-dataset TTL cache.

    The slot is replaced by a single assignment after a successful fetch, so
    readers only ever see the previous snapshot or the new one. Failed
    fetches leave the slot as it was.
    """

    def __init__(
        self,
        ttl: float,
        dedupe_inflight: bool = True,
        clock: Callable[[], float] = time.time,
    ):
        self.ttl = ttl
        self.dedupe_inflight = dedupe_inflight
        self.refresh_count = 0
        self._clock = clock
        self._snapshot: Snapshot[T] = Snapshot(timestamp=0.0, data=None)
        self._inflight: Optional[asyncio.Future] = None

    @property
    def timestamp(self) -> float:
        return self._snapshot.timestamp

    @property
    def age(self) -> Optional[float]:
        """Seconds since the last successful refresh, or None if never filled."""
        if self._snapshot.data is None:
            return None
        return self._clock() - self._snapshot.timestamp

    def is_fresh(self, now: Optional[float] = None) -> bool:
        if self._snapshot.data is None:
            return False
        if now is None:
            now = self._clock()
        return now - self._snapshot.timestamp < self.ttl

    def peek(self) -> Optional[T]:
        """Stored data regardless of age."""
        return self._snapshot.data

    def invalidate(self) -> None:
        """Force the next call to refresh. Stored data stays readable via peek()."""
        self._snapshot = Snapshot(timestamp=0.0, data=self._snapshot.data)

    async def get_or_refresh(
        self,
        fetch: Callable[[], Awaitable[T]],
        now: Optional[float] = None,
    ) -> T:
        """
        Return the stored dataset while fresh, otherwise refresh it.

        Args:
            fetch: Coroutine function producing the new dataset.
            now: Evaluation time in epoch seconds (defaults to the clock). A
                refresh triggered by this call is stamped with it.
        """
        if now is None:
            now = self._clock()

        if self.is_fresh(now):
            logger.debug("Snapshot cache hit")
            return self._snapshot.data

        if not self.dedupe_inflight:
            return await self._refresh(fetch, now)

        if self._inflight is None:
            future = asyncio.ensure_future(self._refresh(fetch, now))
            self._inflight = future
            future.add_done_callback(self._forget_inflight)
        else:
            logger.debug("Joining in-flight snapshot refresh")

        return await asyncio.shield(self._inflight)

    async def _refresh(self, fetch: Callable[[], Awaitable[T]], now: float) -> T:
        logger.info("Refreshing snapshot cache")
        data = await fetch()
        self._snapshot = Snapshot(timestamp=now, data=data)
        self.refresh_count += 1
        return data

    def _forget_inflight(self, future: asyncio.Future) -> None:
        if self._inflight is future:
            self._inflight = None
        if not future.cancelled():
            future.exception()

    def to_dict(self) -> dict[str, Any]:
        """Diagnostic view for the health endpoint."""
        data = self._snapshot.data
        return {
            "ttl_seconds": self.ttl,
            "age_seconds": round(self.age, 1) if self.age is not None else None,
            "fresh": self.is_fresh(),
            "entries": len(data) if data is not None and hasattr(data, "__len__") else None,
            "refresh_count": self.refresh_count,
        }
