"""HTTP client for the trip planner API."""

from .service import TripAPIClient, TripAPIError

__all__ = ["TripAPIClient", "TripAPIError"]
