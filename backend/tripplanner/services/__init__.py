"""Trip Planner Services.

Service layer components:
- NLP: spaCy named-entity and part-of-speech tagging
- City Extractor: canonical city name from free text
- Name Synthesizer: candidate attraction names (criteria, curated, generic)
- Text Classifier: category, description, rating, duration, best time
- Geocoding: Nominatim / Photon lookups with LRU + Redis caching
- Geo Enricher: exact -> city-center -> drop resolution per candidate
- Attraction Generator: the end-to-end pipeline
- Trip API: client for the HTTP API
"""

from .attraction_generator import AttractionGenerator
from .cache import CacheService, RedisCacheService
from .city_extractor import CityNameExtractor
from .container import ServiceContainer
from .geo_enricher import GeoEnricher, Resolution, ResolutionStatus
from .geocoding import (
    CachedGeocodingService,
    GeocodingError,
    GeocodingService,
    NominatimGeocodingService,
    PhotonGeocodingService,
    create_geocoding_service,
)
from .name_synthesizer import AttractionNameSynthesizer
from .nlp import SpacyTagger, Tagger, TagScheme
from .text_classifier import TextClassifier
from .trip_api import TripAPIClient, TripAPIError

__all__ = [
    # Pipeline
    "AttractionGenerator",
    "AttractionNameSynthesizer",
    "CityNameExtractor",
    "GeoEnricher",
    "Resolution",
    "ResolutionStatus",
    "TextClassifier",
    "ServiceContainer",
    # NLP
    "SpacyTagger",
    "Tagger",
    "TagScheme",
    # Geocoding
    "CachedGeocodingService",
    "GeocodingError",
    "GeocodingService",
    "NominatimGeocodingService",
    "PhotonGeocodingService",
    "create_geocoding_service",
    # Cache
    "CacheService",
    "RedisCacheService",
    # Client
    "TripAPIClient",
    "TripAPIError",
]
