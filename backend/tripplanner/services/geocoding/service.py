"""Geocoding services: OpenStreetMap Nominatim, Komoot Photon, plus caching.

All implementations share one contract: ``geocode(query)`` returns at least
one ``Coordinates`` or raises ``GeocodingError``. Empty result sets, HTTP
errors, timeouts and malformed payloads all surface as ``GeocodingError`` so
callers need a single except clause.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from tripplanner.config import Settings
from tripplanner.models import Coordinates
from tripplanner.services.cache import CacheService, RedisCacheService
from tripplanner.utils.cache import LRUCache

logger = logging.getLogger(__name__)

PROVIDERS = ("nominatim", "photon")


class GeocodingError(Exception):
    """A query could not be resolved to coordinates."""

    def __init__(self, query: str, reason: str) -> None:
        super().__init__(f"Could not geocode '{query}': {reason}")
        self.query = query
        self.reason = reason


class GeocodingService(ABC):
    """Abstract base class for geocoding services."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Short provider identifier, used in logs and cache keys."""
        ...

    @abstractmethod
    async def geocode(self, query: str) -> list[Coordinates]:
        """Resolve a free-text query to coordinates, best match first.

        Raises:
            GeocodingError: no result, or the lookup itself failed.
        """
        ...

    async def close(self) -> None:
        """Release network resources."""


class HTTPGeocodingService(GeocodingService):
    """Shared plumbing for HTTP geocoders.

    One ``httpx.AsyncClient`` is created lazily and reused for every lookup.
    Subclasses build the query params and parse the JSON payload.
    """

    def __init__(
        self,
        url: str,
        timeout: float = 8.0,
        user_agent: str = "TripPlanner/1.0 (contact@tripplanner.app)",
        limit: int = 1,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._url = url
        self._timeout = timeout
        self._user_agent = user_agent
        self._limit = limit
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                headers={"User-Agent": self._user_agent},
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    @abstractmethod
    def _params(self, query: str) -> dict[str, Any]:
        ...

    @abstractmethod
    def _parse(self, payload: Any) -> list[Coordinates]:
        ...

    async def geocode(self, query: str) -> list[Coordinates]:
        client = self._get_client()
        try:
            response = await client.get(self._url, params=self._params(query))
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as e:
            logger.info(f"[GEOCODE] {self.provider_name} request failed for '{query}': {e!r}")
            raise GeocodingError(query, f"{type(e).__name__}: {e}") from e
        except ValueError as e:
            raise GeocodingError(query, "invalid JSON response") from e

        results = self._parse(payload)
        if not results:
            logger.info(f"[GEOCODE] {self.provider_name}: no results for '{query}'")
            raise GeocodingError(query, "no results")
        return results


class NominatimGeocodingService(HTTPGeocodingService):
    """OpenStreetMap Nominatim search API.

    Nominatim returns ``lat``/``lon`` as strings. Its usage policy requires an
    identifying User-Agent and asks for at most one request per second, so keep
    the generator's concurrency low when pointing at the public instance.
    """

    provider_name = "nominatim"

    def __init__(self, url: str = "https://nominatim.openstreetmap.org/search", **kwargs: Any) -> None:
        super().__init__(url, **kwargs)

    def _params(self, query: str) -> dict[str, Any]:
        return {"q": query, "format": "json", "limit": self._limit}

    def _parse(self, payload: Any) -> list[Coordinates]:
        if not isinstance(payload, list):
            return []
        results = []
        for item in payload:
            try:
                results.append(Coordinates(lat=float(item["lat"]), lng=float(item["lon"])))
            except (KeyError, TypeError, ValueError, ValidationError):
                continue
        return results


class PhotonGeocodingService(HTTPGeocodingService):
    """Komoot Photon API (OSM data, GeoJSON output, ``[lng, lat]`` order)."""

    provider_name = "photon"

    def __init__(self, url: str = "https://photon.komoot.io/api/", **kwargs: Any) -> None:
        super().__init__(url, **kwargs)

    def _params(self, query: str) -> dict[str, Any]:
        return {"q": query, "limit": self._limit}

    def _parse(self, payload: Any) -> list[Coordinates]:
        if not isinstance(payload, dict):
            return []
        results = []
        for feature in payload.get("features") or []:
            try:
                lng, lat = feature["geometry"]["coordinates"][:2]
                results.append(Coordinates(lat=float(lat), lng=float(lng)))
            except (KeyError, TypeError, ValueError, ValidationError):
                continue
        return results


class CachedGeocodingService(GeocodingService):
    """Two-layer cache in front of another geocoder.

    1. In-memory LRU (process-level)
    2. Optional shared cache, usually Redis

    Only successful lookups are cached. A broken shared cache is logged and
    skipped; it never turns a lookup into a failure.
    """

    def __init__(
        self,
        inner: GeocodingService,
        memory: Optional[LRUCache] = None,
        shared: Optional[CacheService] = None,
        ttl_seconds: int = 86400,
    ) -> None:
        self._inner = inner
        self._memory = memory if memory is not None else LRUCache(ttl_seconds=ttl_seconds)
        self._shared = shared
        self._ttl = ttl_seconds

    @property
    def provider_name(self) -> str:
        return self._inner.provider_name

    async def geocode(self, query: str) -> list[Coordinates]:
        key = CacheService.build_geocode_key(self.provider_name, query)

        cached = self._memory.get(key)
        if cached is None and self._shared is not None:
            try:
                cached = await self._shared.get(key)
            except Exception as e:
                logger.info(f"[GEOCODE] Shared cache read failed: {e}")
        if cached:
            try:
                results = [Coordinates(**item) for item in cached]
            except (TypeError, ValueError, ValidationError) as e:
                logger.info(f"[GEOCODE] Ignoring malformed cache entry for {key}: {e}")
                results = []
            if results:
                self._memory.set(key, cached)
                return results

        results = await self._inner.geocode(query)
        serialized = [item.model_dump() for item in results]
        self._memory.set(key, serialized)
        if self._shared is not None:
            try:
                await self._shared.set(key, serialized, ttl_seconds=self._ttl)
            except Exception as e:
                logger.info(f"[GEOCODE] Shared cache write failed: {e}")
        return results

    async def close(self) -> None:
        await self._inner.close()
        if self._shared is not None:
            await self._shared.close()


def create_geocoding_service(provider: str, settings: Settings) -> GeocodingService:
    """Build the configured geocoder, wrapped in the lookup cache."""
    provider = provider.lower()
    options = {
        "timeout": settings.geocode_timeout,
        "user_agent": settings.geocoder_user_agent,
    }
    if provider == "nominatim":
        inner: GeocodingService = NominatimGeocodingService(settings.nominatim_url, **options)
    elif provider == "photon":
        inner = PhotonGeocodingService(settings.photon_url, **options)
    else:
        raise ValueError(f"Unknown geocoding provider '{provider}'. Expected one of: {', '.join(PROVIDERS)}")

    shared = None
    if settings.redis_url:
        shared = RedisCacheService(settings.redis_url, default_ttl=settings.geocode_cache_ttl)
    return CachedGeocodingService(
        inner,
        memory=LRUCache(max_size=settings.geocode_cache_size, ttl_seconds=settings.geocode_cache_ttl),
        shared=shared,
        ttl_seconds=settings.geocode_cache_ttl,
    )
