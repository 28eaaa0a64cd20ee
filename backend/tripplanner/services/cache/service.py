"""Cache service implementation.

Abstract cache interface plus a Redis implementation. The cache is used for
geocoding lookups only: coordinates of a named place are stable across
requests, generated attractions are not and are never cached.

Key format: ``geocode:{provider}:{normalized query}``
"""

import json
from abc import ABC, abstractmethod
from typing import Any

import redis.asyncio as redis


class CacheService(ABC):
    """Abstract base class for cache services."""

    @abstractmethod
    async def get(self, key: str) -> Any | None:
        """Retrieve cached value by key.

        Args:
            key: The cache key to look up.

        Returns:
            The cached value if found, None otherwise.
        """
        pass

    @abstractmethod
    async def set(self, key: str, value: Any, ttl_seconds: int | None = None) -> None:
        """Store a JSON-serializable value, optionally with a TTL."""
        pass

    async def close(self) -> None:
        """Release any connection held by the cache."""

    @staticmethod
    def build_geocode_key(provider: str, query: str) -> str:
        """Generate cache key for a geocoding query.

        Whitespace is collapsed and the query lower-cased so that
        "British Museum,  London" and "british museum, london" share a key.

        Example:
            >>> CacheService.build_geocode_key("nominatim", "Big Ben, London")
            'geocode:nominatim:big ben, london'
        """
        normalized = " ".join(query.lower().split())
        return f"geocode:{provider}:{normalized}"


class RedisCacheService(CacheService):
    """Redis-based implementation of the cache service.

    Values are stored as JSON strings with an expiry.
    """

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379",
        default_ttl: int = 86400,
    ) -> None:
        self._redis_url = redis_url
        self._default_ttl = default_ttl
        self._client: redis.Redis | None = None

    async def _ensure_connected(self) -> redis.Redis:
        if self._client is None:
            self._client = redis.from_url(
                self._redis_url,
                encoding="utf-8",
                decode_responses=True,
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def get(self, key: str) -> Any | None:
        client = await self._ensure_connected()
        value = await client.get(key)
        if value is None:
            return None
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            return None

    async def set(self, key: str, value: Any, ttl_seconds: int | None = None) -> None:
        client = await self._ensure_connected()
        ttl = ttl_seconds if ttl_seconds is not None else self._default_ttl
        await client.set(key, json.dumps(value), ex=ttl)
