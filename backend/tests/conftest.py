"""Shared fixtures: in-memory tagger and geocoder fakes."""

import random
import re
from typing import Optional

import pytest

from tripplanner.models import Coordinates
from tripplanner.services.geocoding import GeocodingError, GeocodingService
from tripplanner.services.nlp import Tag, TaggedUnit, Tagger, TagScheme

LONDON = Coordinates(lat=51.5074, lng=-0.1278)
BRITISH_MUSEUM = Coordinates(lat=51.5194, lng=-0.1270)
PARIS = Coordinates(lat=48.8566, lng=2.3522)

_FUNCTION_WORDS = {"a", "an", "and", "the", "or", "with", "for", "in", "of", "to", "i", "some", "like", "want"}


class FakeTagger(Tagger):
    """Word-splitting tagger.

    NAME_TYPE: the leftmost occurrence of any configured place phrase is one
    PLACE_NAME unit. LEXICAL_CLASS: function words are OTHER_WORD, everything
    else is a NOUN.
    """

    def __init__(self, places: Optional[list[str]] = None) -> None:
        self.places = places or []
        self.calls: list[tuple[str, TagScheme]] = []

    def tag(self, text: str, scheme: TagScheme) -> list[TaggedUnit]:
        self.calls.append((text, scheme))
        if scheme == TagScheme.LEXICAL_CLASS:
            return [
                (word, Tag.OTHER_WORD if word.lower() in _FUNCTION_WORDS else Tag.NOUN)
                for word in re.findall(r"[\w'-]+", text)
            ]

        hits = [(text.find(place), place) for place in self.places if place in text]
        if not hits:
            return [(word, None) for word in re.findall(r"[\w'-]+", text)]
        start, place = min(hits)
        before = re.findall(r"[\w'-]+", text[:start])
        after = re.findall(r"[\w'-]+", text[start + len(place):])
        return (
            [(word, None) for word in before]
            + [(place, Tag.PLACE_NAME)]
            + [(word, None) for word in after]
        )


class FakeGeocoder(GeocodingService):
    """Geocoder answering from a dict; unknown queries raise GeocodingError."""

    provider_name = "fake"

    def __init__(self, results: Optional[dict[str, list[Coordinates]]] = None) -> None:
        self.results = results or {}
        self.failing: set[str] = set()
        self.calls: list[str] = []
        self.closed = False

    async def geocode(self, query: str) -> list[Coordinates]:
        self.calls.append(query)
        if query in self.failing:
            raise GeocodingError(query, "ConnectError: network unreachable")
        if not self.results.get(query):
            raise GeocodingError(query, "no results")
        return self.results[query]

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def tagger() -> FakeTagger:
    return FakeTagger(places=["London", "Paris", "New York", "Tokyo"])


@pytest.fixture
def geocoder() -> FakeGeocoder:
    return FakeGeocoder()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
