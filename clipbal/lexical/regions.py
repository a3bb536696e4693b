"""
Sorted lexical regions with offset lookup.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from typing import Iterable, List

from .model import LexicalRole


@dataclass(frozen=True)
class Region:
    """Half-open char range [start, end) with a non-code lexical role."""
    start: int
    end: int
    role: LexicalRole

    def __post_init__(self):
        if self.start > self.end:
            raise ValueError(f"Invalid region: start ({self.start}) > end ({self.end})")

    def contains(self, offset: int) -> bool:
        return self.start <= offset < self.end


class RegionIndex:
    """
    Non-overlapping regions sorted by start offset.

    Overlapping input regions are resolved by keeping the one that starts
    first (a comment inside a string stays part of the string). Offsets
    outside every region are code.
    """

    def __init__(self, regions: Iterable[Region] = ()):
        self._regions: List[Region] = []
        last_end = -1
        for region in sorted(regions, key=lambda r: (r.start, -r.end)):
            if region.start == region.end:
                continue
            if region.start < last_end:
                # Nested or overlapping: already covered by the outer region
                continue
            self._regions.append(region)
            last_end = region.end
        self._starts = [r.start for r in self._regions]

    def __len__(self) -> int:
        return len(self._regions)

    def __iter__(self):
        return iter(self._regions)

    def role_at(self, offset: int) -> LexicalRole:
        i = bisect_right(self._starts, offset) - 1
        if i >= 0 and self._regions[i].contains(offset):
            return self._regions[i].role
        return LexicalRole.CODE


__all__ = ["Region", "RegionIndex"]
