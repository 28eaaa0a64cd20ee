"""Attraction generation pipeline."""

from .service import AttractionGenerator

__all__ = ["AttractionGenerator"]
