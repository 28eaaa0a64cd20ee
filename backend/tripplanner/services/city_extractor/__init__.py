"""City name extraction."""

from .service import CityNameExtractor

__all__ = ["CityNameExtractor"]
