"""City name extraction from free-text input."""

import logging
import string

from tripplanner.services.nlp import Tag, Tagger, TagScheme

logger = logging.getLogger(__name__)


class CityNameExtractor:
    """Normalize a raw destination string into a canonical city name.

    The first unit tagged as a place name wins ("trip to paris in may"
    -> "Paris"). When no place is recognized the trimmed input is used as-is.
    Either way the result is capitalized word by word, so the extractor
    always returns a usable string.
    """

    def __init__(self, tagger: Tagger) -> None:
        self._tagger = tagger

    def extract(self, raw_input: str) -> str:
        city = raw_input.strip()
        for unit, tag in self._tagger.tag(raw_input, TagScheme.NAME_TYPE):
            if tag == Tag.PLACE_NAME:
                city = unit.strip()
                break
        canonical = string.capwords(city)
        logger.debug(f"[EXTRACT] {raw_input!r} -> {canonical!r}")
        return canonical
