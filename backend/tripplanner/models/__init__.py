"""Data models for the trip planner."""

from .core import (
    AppError,
    Attraction,
    AttractionCategory,
    Coordinates,
    ErrorCode,
    HealthStatus,
)

__all__ = [
    "AppError",
    "Attraction",
    "AttractionCategory",
    "Coordinates",
    "ErrorCode",
    "HealthStatus",
]
