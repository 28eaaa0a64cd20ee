"""Unit tests for the spaCy tagger adapter.

Uses a blank English pipeline with hand-set entities and POS tags, so no
trained model download is needed.
"""

import pytest
import spacy
from spacy.tokens import Span

from tripplanner.services.nlp import SpacyTagger, Tag, TagScheme


def tagger_for(doc) -> SpacyTagger:
    tagger = SpacyTagger()
    tagger._nlp = lambda text: doc
    return tagger


class TestSpacyTagger:
    def setup_method(self) -> None:
        self.nlp = spacy.blank("en")

    def test_name_type_merges_entities(self) -> None:
        doc = self.nlp("A trip to New York, please")
        doc.ents = [Span(doc, 3, 5, label="GPE")]

        units = tagger_for(doc).tag(doc.text, TagScheme.NAME_TYPE)

        assert units == [
            ("A", None),
            ("trip", None),
            ("to", None),
            ("New York", Tag.PLACE_NAME),
            ("please", None),
        ]

    def test_name_type_labels(self) -> None:
        doc = self.nlp("Alice works at Acme near Hyde Park")
        doc.ents = [
            Span(doc, 0, 1, label="PERSON"),
            Span(doc, 3, 4, label="ORG"),
            Span(doc, 5, 7, label="LOC"),
        ]

        tags = dict(tagger_for(doc).tag(doc.text, TagScheme.NAME_TYPE))

        assert tags["Alice"] == Tag.PERSON_NAME
        assert tags["Acme"] == Tag.ORGANIZATION_NAME
        assert tags["Hyde Park"] == Tag.PLACE_NAME

    def test_lexical_class(self) -> None:
        doc = self.nlp("cultural museums , quickly")
        for token, pos in zip(doc, ["ADJ", "NOUN", "PUNCT", "ADV"]):
            token.pos_ = pos

        units = tagger_for(doc).tag(doc.text, TagScheme.LEXICAL_CLASS)

        assert units == [
            ("cultural", Tag.ADJECTIVE),
            ("museums", Tag.NOUN),
            ("quickly", Tag.ADVERB),
        ]

    def test_missing_model(self) -> None:
        tagger = SpacyTagger("no_such_model_xyz")
        with pytest.raises(RuntimeError, match="python -m spacy download no_such_model_xyz"):
            tagger.load()
