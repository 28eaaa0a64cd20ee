"""Geocoding-based enrichment of candidate attractions."""

from .service import JITTER_DEGREES, GeoEnricher, Resolution, ResolutionStatus

__all__ = ["JITTER_DEGREES", "GeoEnricher", "Resolution", "ResolutionStatus"]
