"""In-memory LRU cache with TTL expiration.

Process-level cache for geocoding lookups. Coordinates of a named place
rarely change, so entries live for a day by default.
"""

import time
from collections import OrderedDict
from typing import Any


class LRUCache:
    """TTL-aware LRU cache for JSON-serializable values."""

    def __init__(self, max_size: int = 512, ttl_seconds: int = 86400) -> None:
        self._cache: OrderedDict[str, tuple[float, Any]] = OrderedDict()
        self._max_size = max_size
        self._ttl = ttl_seconds

    def __len__(self) -> int:
        return len(self._cache)

    def get(self, key: str) -> Any | None:
        entry = self._cache.get(key)
        if entry is None:
            return None
        stored_at, value = entry
        if time.monotonic() - stored_at > self._ttl:
            del self._cache[key]
            return None
        self._cache.move_to_end(key)
        return value

    def set(self, key: str, value: Any) -> None:
        self._cache[key] = (time.monotonic(), value)
        self._cache.move_to_end(key)
        while len(self._cache) > self._max_size:
            self._cache.popitem(last=False)
