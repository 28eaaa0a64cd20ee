"""Text tagging backed by spaCy.

Two tagging schemes are used by the generator:
- NAME_TYPE: named entities (place, person, organization names)
- LEXICAL_CLASS: part of speech (noun, adjective, ...)

``tag()`` returns ``(unit, tag)`` pairs in text order. For NAME_TYPE a
multi-word entity such as "New York" is a single unit. Units without a tag
of interest carry ``None``.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Optional

import spacy

logger = logging.getLogger(__name__)


class TagScheme(str, Enum):
    """Tagging schemes understood by a Tagger."""

    NAME_TYPE = "name_type"
    LEXICAL_CLASS = "lexical_class"


class Tag(str, Enum):
    """Tags emitted by a Tagger."""

    # NAME_TYPE
    PLACE_NAME = "PlaceName"
    PERSON_NAME = "PersonalName"
    ORGANIZATION_NAME = "OrganizationName"
    # LEXICAL_CLASS
    NOUN = "Noun"
    ADJECTIVE = "Adjective"
    VERB = "Verb"
    ADVERB = "Adverb"
    OTHER_WORD = "OtherWord"


TaggedUnit = tuple[str, Optional[Tag]]


class Tagger(ABC):
    """Abstract tagger interface."""

    @abstractmethod
    def tag(self, text: str, scheme: TagScheme) -> list[TaggedUnit]:
        pass


# spaCy entity labels -> NAME_TYPE tags
_ENTITY_TAGS = {
    "GPE": Tag.PLACE_NAME,
    "LOC": Tag.PLACE_NAME,
    "FAC": Tag.PLACE_NAME,
    "PERSON": Tag.PERSON_NAME,
    "ORG": Tag.ORGANIZATION_NAME,
    "NORP": Tag.ORGANIZATION_NAME,
}

# Universal POS tags -> LEXICAL_CLASS tags
_POS_TAGS = {
    "NOUN": Tag.NOUN,
    "PROPN": Tag.NOUN,
    "ADJ": Tag.ADJECTIVE,
    "VERB": Tag.VERB,
    "AUX": Tag.VERB,
    "ADV": Tag.ADVERB,
}


class SpacyTagger(Tagger):
    """Tagger using a pretrained spaCy pipeline.

    The pipeline is loaded on first use (or eagerly via ``load()`` at
    startup). Install the default model with
    ``python -m spacy download en_core_web_sm``.
    """

    def __init__(self, model_name: str = "en_core_web_sm") -> None:
        self._model_name = model_name
        self._nlp: Any = None

    def load(self) -> None:
        if self._nlp is not None:
            return
        try:
            self._nlp = spacy.load(self._model_name)
        except OSError as e:
            raise RuntimeError(
                f"spaCy model '{self._model_name}' is not installed. "
                f"Run: python -m spacy download {self._model_name}"
            ) from e
        logger.info(f"[NLP] Loaded spaCy model {self._model_name}")

    def tag(self, text: str, scheme: TagScheme) -> list[TaggedUnit]:
        self.load()
        doc = self._nlp(text)
        if scheme == TagScheme.NAME_TYPE:
            return self._name_types(doc)
        return [
            (token.text, _POS_TAGS.get(token.pos_, Tag.OTHER_WORD))
            for token in doc
            if not (token.is_punct or token.is_space)
        ]

    @staticmethod
    def _name_types(doc: Any) -> list[TaggedUnit]:
        entities = {ent.start: ent for ent in doc.ents}
        units: list[TaggedUnit] = []
        i = 0
        while i < len(doc):
            ent = entities.get(i)
            if ent is not None:
                units.append((ent.text, _ENTITY_TAGS.get(ent.label_)))
                i = ent.end
                continue
            token = doc[i]
            if not (token.is_punct or token.is_space):
                units.append((token.text, None))
            i += 1
        return units
