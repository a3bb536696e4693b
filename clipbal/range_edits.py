"""
Range-based deletion planner.
Collects deletions as offsets into the original text and applies them in a single copy.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class TextRange:
    """Represents a range in text by character positions."""
    start_char: int
    end_char: int

    def __post_init__(self):
        if self.start_char > self.end_char:
            raise ValueError(f"Invalid range: start_char ({self.start_char}) > end_char ({self.end_char})")

    @property
    def length(self) -> int:
        return self.end_char - self.start_char

    def overlaps(self, other: TextRange) -> bool:
        """Check if this range overlaps with another."""
        return not (self.end_char <= other.start_char or other.end_char <= self.start_char)


@dataclass(frozen=True)
class Edit:
    """A single deletion using character positions."""
    range: TextRange
    type: Optional[str]  # Type for counter in stats


class RangeEditor:
    """
    Deletion editor working with character positions of the original text.

    Offsets always refer to the original text, so deletions planned
    independently (e.g. per delimiter class) never shift each other.
    """

    def __init__(self, original_text: str):
        self.original_text = original_text
        self.edits: List[Edit] = []

    def add_deletion(self, start_char: int, end_char: int, edit_type: Optional[str]) -> None:
        """
        Add a deletion. On overlap the wider edit wins; same width keeps the first one.
        """
        char_range = TextRange(start_char, end_char)
        new_width = char_range.length

        edits_to_remove = []
        for i, existing in enumerate(self.edits):
            if char_range.overlaps(existing.range):
                if new_width > existing.range.length:
                    edits_to_remove.append(i)
                else:
                    return

        for i in reversed(edits_to_remove):
            del self.edits[i]

        self.edits.append(Edit(char_range, edit_type))

    def add_char_deletion(self, offset: int, edit_type: Optional[str]) -> None:
        """Delete exactly one character."""
        self.add_deletion(offset, offset + 1, edit_type)

    def validate_edits(self) -> List[str]:
        """Validate that all edits are within bounds."""
        errors = []
        for i, edit in enumerate(self.edits):
            if edit.range.start_char < 0:
                errors.append(f"Edit {i}: start_char ({edit.range.start_char}) is negative")
            if edit.range.end_char > len(self.original_text):
                errors.append(
                    f"Edit {i}: end_char ({edit.range.end_char}) exceeds text length ({len(self.original_text)})"
                )
        return errors

    def removed_offsets(self) -> List[int]:
        """All deleted character offsets of the original text, ascending."""
        offsets: List[int] = []
        for edit in sorted(self.edits, key=lambda e: e.range.start_char):
            offsets.extend(range(edit.range.start_char, edit.range.end_char))
        return offsets

    def apply_edits(self) -> Tuple[str, Dict[str, Any]]:
        """
        Apply all edits and return the modified text and statistics.

        Returns:
            Tuple of (modified_text, statistics)
        """
        validation_errors = self.validate_edits()
        if validation_errors:
            raise ValueError(f"Edit validation failed: {'; '.join(validation_errors)}")

        stats: Dict[str, Any] = {"edits_applied": 0, "chars_removed": 0, "by_type": {}}
        if not self.edits:
            return self.original_text, stats

        parts: List[str] = []
        cursor = 0
        for edit in sorted(self.edits, key=lambda e: e.range.start_char):
            removed = self.original_text[edit.range.start_char:edit.range.end_char]
            parts.append(self.original_text[cursor:edit.range.start_char])
            cursor = edit.range.end_char

            stats["chars_removed"] += len(removed)
            if edit.type:
                stats["by_type"][edit.type] = stats["by_type"].get(edit.type, 0) + 1
        parts.append(self.original_text[cursor:])
        stats["edits_applied"] = len(self.edits)

        return "".join(parts), stats

    def get_edit_summary(self) -> Dict[str, Any]:
        """Get summary of planned edits without applying them."""
        edit_types: Dict[str, int] = {}
        for edit in self.edits:
            if edit.type:
                edit_types[edit.type] = edit_types.get(edit.type, 0) + 1

        return {
            "total_edits": len(self.edits),
            "chars_to_remove": sum(edit.range.length for edit in self.edits),
            "edit_types": edit_types,
        }


__all__ = ["TextRange", "Edit", "RangeEditor"]
