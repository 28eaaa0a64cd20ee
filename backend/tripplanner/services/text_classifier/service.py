"""Keyword heuristics that describe an attraction from its name.

Every rule is a case-insensitive substring check on the attraction name.
Rules are evaluated top to bottom and the first match wins, so "Palace
Gardens" is a Nature spot while "Garden Palace Museum" is Cultural.
"""

import random
from typing import Optional

from tripplanner.models import AttractionCategory

# (keywords, category) in priority order
CATEGORY_RULES: list[tuple[tuple[str, ...], AttractionCategory]] = [
    (("museum", "gallery"), AttractionCategory.CULTURAL),
    (("park", "garden"), AttractionCategory.NATURE),
    (("tower", "observation"), AttractionCategory.ENTERTAINMENT),
    (("cathedral", "church", "palace"), AttractionCategory.CULTURAL),
    (("market", "shopping"), AttractionCategory.SHOPPING),
]

DESCRIPTION_TEMPLATES: list[tuple[tuple[str, ...], str]] = [
    (("museum",), "A renowned museum in {city} featuring extensive collections of art, history, and culture."),
    (("park",), "A beautiful public park in {city} offering green spaces, walking paths, and recreational facilities."),
    (("cathedral", "church"), "A historic religious site in {city} known for its stunning architecture and cultural significance."),
    (("tower",), "An iconic tower in {city} offering panoramic views of the city skyline."),
    (("palace",), "A historic palace in {city} showcasing royal architecture and rich history."),
    (("bridge",), "A famous bridge in {city} connecting different parts of the city with architectural significance."),
    (("market",), "A vibrant market in {city} offering local goods, food, and cultural experiences."),
    (("garden",), "Beautiful gardens in {city} featuring diverse plant collections and peaceful walking paths."),
]
GENERIC_DESCRIPTION = "A popular attraction in {city} worth visiting for its cultural and historical significance."

# (keywords, (low, high)) -- ratings are drawn uniformly from the range
RATING_TIERS: list[tuple[tuple[str, ...], tuple[float, float]]] = [
    (("tower", "palace", "museum"), (8.5, 9.8)),
    (("park", "garden"), (8.0, 9.0)),
]
DEFAULT_RATING_RANGE = (7.5, 9.0)

VISIT_DURATIONS: list[tuple[tuple[str, ...], str]] = [
    (("museum", "palace"), "2-3 hours"),
    (("park", "garden"), "1-2 hours"),
    (("tower", "observation"), "1 hour"),
]
DEFAULT_VISIT_DURATION = "30 minutes - 1 hour"

BEST_TIMES: list[tuple[tuple[str, ...], str]] = [
    (("park", "garden"), "Morning/Afternoon"),
    (("tower", "observation"), "Evening"),
]
DEFAULT_BEST_TIME = "Morning"


def _first_match(name: str, rules: list[tuple[tuple[str, ...], object]]) -> Optional[object]:
    lowered = name.lower()
    for keywords, value in rules:
        if any(keyword in lowered for keyword in keywords):
            return value
    return None


class TextClassifier:
    """Derive category, description, rating, duration and best time from a name.

    Holds no state besides the random source used for ratings; pass a seeded
    ``random.Random`` for reproducible output.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()

    def category(self, name: str) -> AttractionCategory:
        match = _first_match(name, CATEGORY_RULES)
        return match if match is not None else AttractionCategory.TOURIST_ATTRACTION

    def description(
        self,
        name: str,
        city: str,
        category: str = AttractionCategory.TOURIST_ATTRACTION,
    ) -> str:
        """Describe the attraction in one sentence.

        The text depends on the name alone. ``category`` is the label the
        caller describes the name under; it does not change the sentence.
        """
        template = _first_match(name, DESCRIPTION_TEMPLATES)
        return (template or GENERIC_DESCRIPTION).format(city=city)

    def rating(self, name: str) -> float:
        low, high = _first_match(name, RATING_TIERS) or DEFAULT_RATING_RANGE
        return self._rng.uniform(low, high)

    def visit_duration(self, name: str) -> str:
        return _first_match(name, VISIT_DURATIONS) or DEFAULT_VISIT_DURATION

    def best_time(self, name: str) -> str:
        return _first_match(name, BEST_TIMES) or DEFAULT_BEST_TIME
