"""
Lexical classification contract.

A classifier answers, for an offset in a text, whether that offset is
plain code, inside a string literal or inside a comment, and whether the
character is escaped by the immediately preceding character.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from .regions import RegionIndex

DEFAULT_ESCAPE_CHAR = "\\"


class LexicalRole(str, Enum):
    CODE = "code"
    STRING = "string"
    COMMENT = "comment"


@dataclass(frozen=True)
class LexicalContext:
    """Classification of a single character position."""
    role: LexicalRole = LexicalRole.CODE
    escaped: bool = False

    @property
    def countable(self) -> bool:
        """Only unescaped code characters take part in balance counting."""
        return self.role is LexicalRole.CODE and not self.escaped


def is_escaped(text: str, offset: int, escape_char: str = DEFAULT_ESCAPE_CHAR) -> bool:
    """
    One-character look-back escape check.

    Not transitive: a character preceded by an escape character is escaped
    even if that escape character is itself preceded by another one.
    """
    return bool(escape_char) and offset > 0 and text[offset - 1] == escape_char


class BoundClassifier:
    """Classifier prepared for one concrete text."""

    def __init__(self, text: str, regions: RegionIndex, escape_char: str = DEFAULT_ESCAPE_CHAR):
        self.text = text
        self.regions = regions
        self.escape_char = escape_char

    def classify(self, offset: int) -> LexicalContext:
        return LexicalContext(
            role=self.regions.role_at(offset),
            escaped=is_escaped(self.text, offset, self.escape_char),
        )


class Classifier(ABC):
    """
    Base class for lexical classification strategies.

    Subclasses build a RegionIndex of string/comment regions for a text;
    everything outside those regions is code.
    """

    #: Registry name (python, c-style, plain, …)
    name: str = "base"

    def __init__(self, escape_char: str = DEFAULT_ESCAPE_CHAR):
        self.escape_char = escape_char

    @abstractmethod
    def regions(self, text: str) -> RegionIndex:
        """
        Compute string and comment regions of the text.

        Returns:
            RegionIndex over char offsets of the text
        """
        pass

    def bind(self, text: str) -> BoundClassifier:
        """Prepare per-text state. Each call returns a fresh object."""
        return BoundClassifier(text, self.regions(text), self.escape_char)

    def classify(self, text: str, offset: int) -> LexicalContext:
        """
        Classify a single offset.

        Convenience for one-off queries; scanning a whole text should use
        bind() to avoid recomputing regions per position.
        """
        return self.bind(text).classify(offset)


class FunctionClassifier(Classifier):
    """
    Adapter for a caller-supplied strategy `fn(text, offset) -> LexicalRole`.

    The function is queried once per position during a scan.
    """

    name = "function"

    def __init__(self, fn: Callable[[str, int], LexicalRole], escape_char: str = DEFAULT_ESCAPE_CHAR):
        super().__init__(escape_char)
        self._fn = fn

    def regions(self, text: str) -> RegionIndex:
        from .regions import Region, RegionIndex
        spans = []
        for offset in range(len(text)):
            role = LexicalRole(self._fn(text, offset))
            if role is not LexicalRole.CODE:
                spans.append(Region(offset, offset + 1, role))
        return RegionIndex(spans)


__all__ = [
    "DEFAULT_ESCAPE_CHAR",
    "LexicalRole",
    "LexicalContext",
    "is_escaped",
    "BoundClassifier",
    "Classifier",
    "FunctionClassifier",
]
