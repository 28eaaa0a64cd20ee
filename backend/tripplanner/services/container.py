"""Service wiring.

``ServiceContainer`` owns one instance of each service for an application
and hands out generators bound to a geocoding provider. Nothing here is a
module-level singleton; the FastAPI app keeps its container on ``app.state``
and tests build their own with fakes.
"""

import logging
import random
from typing import Callable, Optional

from tripplanner.config import Settings
from tripplanner.services.attraction_generator import AttractionGenerator
from tripplanner.services.city_extractor import CityNameExtractor
from tripplanner.services.geo_enricher import GeoEnricher
from tripplanner.services.geocoding import (
    PROVIDERS,
    GeocodingService,
    create_geocoding_service,
)
from tripplanner.services.name_synthesizer import AttractionNameSynthesizer
from tripplanner.services.nlp import SpacyTagger, Tagger
from tripplanner.services.text_classifier import TextClassifier

logger = logging.getLogger(__name__)

GeocoderFactory = Callable[[str, Settings], GeocodingService]


class ServiceContainer:
    """Builds and owns the generation services."""

    def __init__(
        self,
        settings: Settings,
        tagger: Optional[Tagger] = None,
        geocoder_factory: GeocoderFactory = create_geocoding_service,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.settings = settings
        self.tagger = tagger or SpacyTagger(settings.spacy_model)
        self.rng = rng or random.Random()
        self.classifier = TextClassifier(self.rng)
        self.extractor = CityNameExtractor(self.tagger)
        self.synthesizer = AttractionNameSynthesizer(self.tagger)
        self._geocoder_factory = geocoder_factory
        self._geocoders: dict[str, GeocodingService] = {}

    def geocoder(self, provider: Optional[str] = None) -> GeocodingService:
        """Geocoder for ``provider`` (configured default when None).

        Raises:
            ValueError: unknown provider.
        """
        name = (provider or self.settings.geocoding_provider).lower()
        if name not in PROVIDERS:
            raise ValueError(f"Unknown geocoding provider '{name}'. Expected one of: {', '.join(PROVIDERS)}")
        if name not in self._geocoders:
            self._geocoders[name] = self._geocoder_factory(name, self.settings)
        return self._geocoders[name]

    def generator(self, provider: Optional[str] = None) -> AttractionGenerator:
        enricher = GeoEnricher(self.geocoder(provider), self.classifier, self.rng)
        return AttractionGenerator(
            self.extractor,
            self.synthesizer,
            enricher,
            concurrency=self.settings.geocode_concurrency,
        )

    async def close(self) -> None:
        for name, geocoder in self._geocoders.items():
            try:
                await geocoder.close()
            except Exception as e:
                logger.info(f"[SERVICES] Error closing {name} geocoder: {e}")
        self._geocoders.clear()
