"""Candidate attraction names for a city.

Candidates come from three sources, concatenated in this order:
1. criteria-driven patterns (what the user asked for)
2. curated landmarks for well-known cities, or generic fallbacks
3. generic "{city} <Kind>" patterns

Duplicates are dropped case-insensitively keeping the first occurrence, and
the list is truncated to MAX_CANDIDATES. The order is deterministic, so the
same input always yields the same candidates.
"""

import logging
from typing import Iterable, Optional

from tripplanner.services.nlp import Tag, Tagger, TagScheme

from .landmarks import (
    CRITERIA_PATTERNS,
    CURATED_LANDMARKS,
    FALLBACK_PATTERNS,
    GENERIC_PATTERNS,
)

logger = logging.getLogger(__name__)

MAX_CANDIDATES = 15

_KEYWORD_TAGS = {Tag.NOUN, Tag.ADJECTIVE}


class AttractionNameSynthesizer:
    """Build the candidate name list for a canonical city name."""

    def __init__(self, tagger: Tagger, max_candidates: int = MAX_CANDIDATES) -> None:
        self._tagger = tagger
        self._max_candidates = max_candidates

    def synthesize(self, city: str, criteria: Optional[str] = None) -> list[str]:
        candidates: list[str] = []
        if criteria:
            candidates.extend(self.criteria_names(city, criteria))
        candidates.extend(self.curated_names(city))
        candidates.extend(pattern.format(city=city) for pattern in GENERIC_PATTERNS)

        names = _dedupe(candidates)[: self._max_candidates]
        logger.info(f"[SYNTH] {len(names)} candidates for {city} (from {len(candidates)})")
        return names

    def keywords(self, criteria: str) -> set[str]:
        """Nouns and adjectives found in the criteria, lower-cased."""
        lowered = criteria.lower()
        return {
            unit
            for unit, tag in self._tagger.tag(lowered, TagScheme.LEXICAL_CLASS)
            if tag in _KEYWORD_TAGS
        }

    def criteria_names(self, city: str, criteria: str) -> list[str]:
        keywords = self.keywords(criteria)
        names: list[str] = []
        for triggers, patterns in CRITERIA_PATTERNS:
            if keywords & triggers:
                names.extend(pattern.format(city=city) for pattern in patterns)
        return names

    @staticmethod
    def curated_names(city: str) -> list[str]:
        lowered = city.lower()
        for keys, landmarks in CURATED_LANDMARKS:
            if any(key in lowered for key in keys):
                return list(landmarks)
        return [pattern.format(city=city) for pattern in FALLBACK_PATTERNS]


def _dedupe(names: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    unique = []
    for name in names:
        key = name.lower()
        if key in seen:
            continue
        seen.add(key)
        unique.append(name)
    return unique
