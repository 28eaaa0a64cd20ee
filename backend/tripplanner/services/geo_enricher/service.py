"""Geographic enrichment of candidate attraction names.

Resolution strategy for a candidate ``name`` in ``city``:
1. Geocode "{name}, {city}"; the first hit is used as-is      -> RESOLVED
2. Otherwise geocode the city alone and offset its center by a
   small random jitter so fallbacks don't stack on one point  -> APPROXIMATED
3. Otherwise give up; the candidate is dropped                 -> UNRESOLVED
"""

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from tripplanner.models import Attraction, AttractionCategory, Coordinates
from tripplanner.services.geocoding import GeocodingError, GeocodingService
from tripplanner.services.text_classifier import TextClassifier

logger = logging.getLogger(__name__)

# Max offset (degrees) applied to the city center for approximated attractions
JITTER_DEGREES = 0.05


class ResolutionStatus(str, Enum):
    RESOLVED = "resolved"
    APPROXIMATED = "approximated"
    UNRESOLVED = "unresolved"


@dataclass(frozen=True)
class Resolution:
    """Outcome of locating one candidate."""

    status: ResolutionStatus
    coordinates: Optional[Coordinates] = None

    @classmethod
    def resolved(cls, coordinates: Coordinates) -> "Resolution":
        return cls(ResolutionStatus.RESOLVED, coordinates)

    @classmethod
    def approximated(cls, coordinates: Coordinates) -> "Resolution":
        return cls(ResolutionStatus.APPROXIMATED, coordinates)

    @classmethod
    def unresolved(cls) -> "Resolution":
        return cls(ResolutionStatus.UNRESOLVED)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class GeoEnricher:
    """Turn a candidate name into a complete Attraction, or nothing."""

    def __init__(
        self,
        geocoder: GeocodingService,
        classifier: TextClassifier,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._geocoder = geocoder
        self._classifier = classifier
        self._rng = rng or random.Random()

    async def locate(self, name: str, city: str) -> Resolution:
        try:
            results = await self._geocoder.geocode(f"{name}, {city}")
            return Resolution.resolved(results[0])
        except GeocodingError as e:
            logger.info(f"[ENRICH] Exact lookup failed for {name}: {e.reason}")

        try:
            center = (await self._geocoder.geocode(city))[0]
        except GeocodingError as e:
            logger.info(f"[ENRICH] City lookup failed for {city}, dropping {name}: {e.reason}")
            return Resolution.unresolved()

        # one draw, applied to both axes
        offset = self._rng.uniform(-JITTER_DEGREES, JITTER_DEGREES)
        return Resolution.approximated(
            Coordinates(
                lat=_clamp(center.lat + offset, -90.0, 90.0),
                lng=_clamp(center.lng + offset, -180.0, 180.0),
            )
        )

    async def resolve(self, name: str, city: str) -> Optional[Attraction]:
        resolution = await self.locate(name, city)
        return self.assemble(name, city, resolution)

    def assemble(self, name: str, city: str, resolution: Resolution) -> Optional[Attraction]:
        """Build the Attraction for a located candidate.

        Approximated attractions are described as a generic "Tourist
        Attraction" while keeping their name-derived ``category``.
        """
        if resolution.status == ResolutionStatus.UNRESOLVED or resolution.coordinates is None:
            return None

        category = self._classifier.category(name)
        if resolution.status == ResolutionStatus.RESOLVED:
            description_category = category
        else:
            description_category = AttractionCategory.TOURIST_ATTRACTION

        return Attraction(
            name=name,
            description=self._classifier.description(name, city, description_category),
            lat=resolution.coordinates.lat,
            lng=resolution.coordinates.lng,
            category=category.value,
            rating=self._classifier.rating(name),
            visit_duration=self._classifier.visit_duration(name),
            best_time=self._classifier.best_time(name),
        )
