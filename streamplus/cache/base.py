"""
Cache statistics and key derivation.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional
import hashlib
import json


@dataclass
class CacheStats:
    """Cache statistics."""
    hits: int = 0
    misses: int = 0
    sets: int = 0
    deletes: int = 0
    evictions: int = 0
    entry_count: int = 0

    @property
    def hit_rate(self) -> float:
        """Calculate cache hit rate."""
        total = self.hits + self.misses
        return (self.hits / total * 100) if total > 0 else 0.0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "hits": self.hits,
            "misses": self.misses,
            "sets": self.sets,
            "deletes": self.deletes,
            "evictions": self.evictions,
            "hit_rate": round(self.hit_rate, 2),
            "entry_count": self.entry_count,
        }


MAX_KEY_LENGTH = 200


def generate_cache_key(endpoint: str, params: Optional[Mapping[str, Any]] = None) -> str:
    """
    Build the cache key for an endpoint and its query parameters.

    Parameters are sorted by name and ``None`` values dropped, so two
    requests for the same logical query share a slot whatever order their
    parameters arrived in. All values are compared as strings, which makes
    ``page=1`` and ``page="1"`` the same query.
    """
    canonical = {
        str(name): str(value)
        for name, value in (params or {}).items()
        if value is not None
    }
    key_string = f"{endpoint}-{json.dumps(canonical, sort_keys=True, ensure_ascii=False)}"

    # Hash long keys
    if len(key_string) > MAX_KEY_LENGTH:
        digest = hashlib.sha256(key_string.encode()).hexdigest()[:32]
        return f"{endpoint}-{digest}"

    return key_string
