from __future__ import annotations

from .model import Classifier
from .regions import RegionIndex


class PlainClassifier(Classifier):
    """Every offset is code; only the one-character escape check applies."""

    name = "plain"

    def regions(self, text: str) -> RegionIndex:
        return RegionIndex()


__all__ = ["PlainClassifier"]
