"""Name-based attraction classification."""

from .service import TextClassifier

__all__ = ["TextClassifier"]
