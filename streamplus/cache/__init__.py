"""
Stream+ caching layer

- MemoryCache: keyed TTL cache with LRU bound (catalog responses)
- SnapshotCache: single-slot whole-dataset cache (parsed playlist)
"""

from streamplus.cache.base import CacheStats, generate_cache_key
from streamplus.cache.memory import CacheEntry, MemoryCache
from streamplus.cache.snapshot import Snapshot, SnapshotCache

__all__ = [
    "CacheEntry",
    "CacheStats",
    "MemoryCache",
    "Snapshot",
    "SnapshotCache",
    "generate_cache_key",
]
