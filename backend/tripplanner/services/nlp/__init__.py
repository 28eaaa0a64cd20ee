"""Named-entity and part-of-speech tagging."""

from .service import SpacyTagger, Tag, TaggedUnit, Tagger, TagScheme

__all__ = [
    "SpacyTagger",
    "Tag",
    "TaggedUnit",
    "Tagger",
    "TagScheme",
]
