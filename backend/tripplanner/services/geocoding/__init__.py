"""Geocoding via OpenStreetMap services, with a lookup cache."""

from .service import (
    PROVIDERS,
    CachedGeocodingService,
    GeocodingError,
    GeocodingService,
    HTTPGeocodingService,
    NominatimGeocodingService,
    PhotonGeocodingService,
    create_geocoding_service,
)

__all__ = [
    "PROVIDERS",
    "CachedGeocodingService",
    "GeocodingError",
    "GeocodingService",
    "HTTPGeocodingService",
    "NominatimGeocodingService",
    "PhotonGeocodingService",
    "create_geocoding_service",
]
