"""
Delimiter classes and per-class balance records.

Three independent classes are tracked: round, square and curly.
Each class is counted on its own; openers of one class are never
matched against closers of another.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, Optional, Tuple


class DelimiterClass(Enum):
    """Delimiter class with its fixed open and close literals."""

    PAREN = ("(", ")")
    BRACKET = ("[", "]")
    CURLY = ("{", "}")

    @property
    def open(self) -> str:
        return self.value[0]

    @property
    def close(self) -> str:
        return self.value[1]

    @classmethod
    def for_char(cls, ch: str) -> Optional[DelimiterClass]:
        """Class owning the given literal, or None for non-delimiters."""
        return _BY_CHAR.get(ch)


# Fixed iteration order for scanning and trimming
DELIMITER_CLASSES: Tuple[DelimiterClass, ...] = (
    DelimiterClass.PAREN,
    DelimiterClass.BRACKET,
    DelimiterClass.CURLY,
)

_BY_CHAR: Dict[str, DelimiterClass] = {}
for _dc in DELIMITER_CLASSES:
    _BY_CHAR[_dc.open] = _dc
    _BY_CHAR[_dc.close] = _dc

DELIMITER_CHARS = frozenset(_BY_CHAR)


@dataclass(frozen=True)
class ClassBalance:
    """
    Net balance of one delimiter class over a scanned text.

    Attributes:
        delimiter: Delimiter class
        count: Signed depth; > 0 excess openers, < 0 excess closers
        opens: Offsets of countable openers, ascending; None when unknown
        closes: Offsets of countable closers, ascending; None when unknown
    """
    delimiter: DelimiterClass
    count: int = 0
    opens: Optional[Tuple[int, ...]] = None
    closes: Optional[Tuple[int, ...]] = None

    @property
    def open(self) -> str:
        return self.delimiter.open

    @property
    def close(self) -> str:
        return self.delimiter.close

    @property
    def is_balanced(self) -> bool:
        return self.count == 0

    def as_triple(self) -> Tuple[str, str, int]:
        return self.open, self.close, self.count


@dataclass(frozen=True)
class ScanResult:
    """Exactly one ClassBalance per delimiter class, in DELIMITER_CLASSES order."""
    entries: Tuple[ClassBalance, ...]

    def __post_init__(self):
        classes = tuple(e.delimiter for e in self.entries)
        if classes != DELIMITER_CLASSES:
            raise ValueError(f"ScanResult must cover {DELIMITER_CLASSES} in order, got {classes}")

    @classmethod
    def empty(cls) -> ScanResult:
        return cls(tuple(ClassBalance(dc) for dc in DELIMITER_CLASSES))

    def __iter__(self) -> Iterator[ClassBalance]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, delimiter: DelimiterClass) -> ClassBalance:
        return self.entries[DELIMITER_CLASSES.index(delimiter)]

    def counts(self) -> Dict[DelimiterClass, int]:
        return {e.delimiter: e.count for e in self.entries}

    def triples(self) -> Tuple[Tuple[str, str, int], ...]:
        return tuple(e.as_triple() for e in self.entries)

    @property
    def is_balanced(self) -> bool:
        return all(e.is_balanced for e in self.entries)


__all__ = [
    "DelimiterClass",
    "DELIMITER_CLASSES",
    "DELIMITER_CHARS",
    "ClassBalance",
    "ScanResult",
]
