"""Core data models for the trip planner.

Pydantic models shared by the generator, the HTTP API and the API client.
The wire format is snake_case (``visit_duration``, ``best_time``); the
attraction ``id`` is local to a process and never sent over the wire.
"""

from enum import Enum
from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class AttractionCategory(str, Enum):
    """Fixed label set emitted by the text classifier."""

    CULTURAL = "Cultural"
    NATURE = "Nature"
    ENTERTAINMENT = "Entertainment"
    SHOPPING = "Shopping"
    TOURIST_ATTRACTION = "Tourist Attraction"


class Coordinates(BaseModel):
    """Geographic coordinates with validation.

    Latitude must be between -90 and 90 degrees.
    Longitude must be between -180 and 180 degrees.
    """

    model_config = ConfigDict(frozen=True)

    lat: float = Field(..., ge=-90, le=90, description="Latitude in degrees")
    lng: float = Field(..., ge=-180, le=180, description="Longitude in degrees")


class Attraction(BaseModel):
    """A generated (or fetched) tourist attraction.

    Immutable once built. Every instance gets a fresh ``id``, including
    instances decoded from the wire.
    """

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4, exclude=True)
    name: str = Field(..., min_length=1, description="Display name")
    description: str = Field(..., description="One-sentence description")
    lat: float = Field(..., ge=-90, le=90, description="Latitude in degrees")
    lng: float = Field(..., ge=-180, le=180, description="Longitude in degrees")
    category: str = Field(..., description="Attraction category label")
    rating: float = Field(..., ge=0, le=10, description="Rating out of 10")
    visit_duration: str = Field(..., description="Typical visit length, e.g. '1-2 hours'")
    best_time: str = Field(..., description="Best time of day to visit")

    @property
    def coordinates(self) -> Coordinates:
        return Coordinates(lat=self.lat, lng=self.lng)


class HealthStatus(BaseModel):
    """Health check payload."""

    status: str
    timestamp: str
    service: str
    version: str


class ErrorCode(str, Enum):
    """Error codes returned by the HTTP API."""

    INVALID_INPUT = "INVALID_INPUT"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    API_ERROR = "API_ERROR"


class AppError(BaseModel):
    """Structured error body for API responses."""

    code: ErrorCode
    message: str
    user_message: Optional[str] = None
