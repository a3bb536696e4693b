"""
Lexical scanner: per-class delimiter balance of a text.

Walks the text once, left to right. Every position is classified first
(context can change on any character, e.g. entering a string); only
countable delimiters move the counters.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from .delimiters import DELIMITER_CLASSES, ClassBalance, DelimiterClass, ScanResult
from .lexical.model import Classifier
from .lexical.plain import PlainClassifier

logger = logging.getLogger(__name__)


def scan(text: str, classifier: Optional[Classifier] = None) -> ScanResult:
    """
    Compute the net balance of each delimiter class.

    Args:
        text: Text to analyze (not modified)
        classifier: Lexical classification strategy; plain code when None

    Returns:
        ScanResult with one entry per class in Paren, Bracket, Curly order
    """
    bound = (classifier or PlainClassifier()).bind(text)

    counts: Dict[DelimiterClass, int] = {dc: 0 for dc in DELIMITER_CLASSES}
    opens: Dict[DelimiterClass, List[int]] = {dc: [] for dc in DELIMITER_CLASSES}
    closes: Dict[DelimiterClass, List[int]] = {dc: [] for dc in DELIMITER_CLASSES}

    for offset, ch in enumerate(text):
        ctx = bound.classify(offset)
        if not ctx.countable:
            continue
        dc = DelimiterClass.for_char(ch)
        if dc is None:
            continue
        if ch == dc.open:
            counts[dc] += 1
            opens[dc].append(offset)
        else:
            counts[dc] -= 1
            closes[dc].append(offset)

    result = ScanResult(tuple(
        ClassBalance(dc, counts[dc], tuple(opens[dc]), tuple(closes[dc]))
        for dc in DELIMITER_CLASSES
    ))
    logger.debug("scan: %s", {dc.name: c for dc, c in result.counts().items()})
    return result


__all__ = ["scan"]
