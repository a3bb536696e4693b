"""
Delimiter trimmer.

Excess closers are assumed to be stray trailing closers of a structure
whose opener lies outside the copied span, so they are removed from the
end inward. Excess openers are removed from the start inward. When fewer
eligible occurrences exist than the count asks for, all of them are
removed and trimming stops without error.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .delimiters import ClassBalance, ScanResult
from .range_edits import RangeEditor

logger = logging.getLogger(__name__)


def select_targets(text: str, opener: str, closer: str, count: int,
                   candidates: Optional[Sequence[int]] = None) -> List[int]:
    """
    Offsets of the delimiters one class trim would delete, ascending.

    Args:
        text: Current text
        opener: Opening literal of the class
        closer: Closing literal of the class
        count: Signed balance of the class
        candidates: Offsets eligible for deletion; every occurrence of the
            literal when None

    Returns:
        At most |count| offsets: the first openers or the last closers
    """
    if count == 0:
        return []

    literal = opener if count > 0 else closer
    if candidates is None:
        eligible = [i for i, ch in enumerate(text) if ch == literal]
    else:
        eligible = sorted(i for i in candidates if 0 <= i < len(text) and text[i] == literal)

    wanted = abs(count)
    if len(eligible) < wanted:
        logger.debug("trim %r: wanted %d, only %d eligible", literal, wanted, len(eligible))

    if count > 0:
        return eligible[:wanted]
    return eligible[-wanted:]


def trim_one(text: str, opener: str, closer: str, count: int,
             candidates: Optional[Sequence[int]] = None) -> str:
    """Remove |count| excess delimiters of one class from the appropriate end."""
    targets = select_targets(text, opener, closer, count, candidates)
    if not targets:
        return text
    editor = RangeEditor(text)
    for offset in targets:
        editor.add_char_deletion(offset, edit_type=opener + closer)
    result, _ = editor.apply_edits()
    return result


def plan_deletions(text: str, scan_result: ScanResult) -> RangeEditor:
    """
    Plan deletions of every class against the original text.

    Only the countable occurrences recorded by the scan are eligible, so
    escaped delimiters and those inside strings or comments survive.
    """
    editor = RangeEditor(text)
    for entry in scan_result:
        for offset in _entry_targets(text, entry):
            editor.add_char_deletion(offset, edit_type=entry.delimiter.name.lower())
    logger.debug("trim plan: %s", editor.get_edit_summary())
    return editor


def _entry_targets(text: str, entry: ClassBalance) -> List[int]:
    # Without recorded offsets every literal occurrence is eligible
    candidates = entry.opens if entry.count > 0 else entry.closes
    return select_targets(text, entry.open, entry.close, entry.count, candidates)


def trim_all(text: str, scan_result: ScanResult) -> str:
    """
    Apply the trim of every class in order and return the resulting text.

    Class trims touch disjoint literals and commute, so planning all of
    them on the original text and applying once equals threading the
    text through each class in turn.
    """
    result, _ = plan_deletions(text, scan_result).apply_edits()
    return result


__all__ = ["select_targets", "trim_one", "plan_deletions", "trim_all"]
