"""Candidate attraction name synthesis."""

from .service import MAX_CANDIDATES, AttractionNameSynthesizer

__all__ = ["MAX_CANDIDATES", "AttractionNameSynthesizer"]
