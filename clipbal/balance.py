"""
Balance facade: scan, then trim.
"""

from __future__ import annotations

from typing import Optional

from .lexical.model import Classifier
from .report_schema import BalanceReport, ClassReport
from .scanner import scan
from .trimmer import plan_deletions


def balance(text: str, classifier: Optional[Classifier] = None) -> str:
    """
    Remove the minimal set of unmatched delimiters so the text is locally balanced.

    Args:
        text: Clipboard payload
        classifier: Lexical classification strategy; plain code when None

    Returns:
        Balanced text (identical to the input when every class is balanced)
    """
    result = scan(text, classifier)
    if result.is_balanced:
        return text
    balanced, _ = plan_deletions(text, result).apply_edits()
    return balanced


def balance_report(text: str, classifier: Optional[Classifier] = None) -> BalanceReport:
    """Like balance(), but also describe counts and deletions per class."""
    result = scan(text, classifier)
    editor = plan_deletions(text, result)
    balanced, stats = editor.apply_edits()

    by_type = stats["by_type"]
    classes = [
        ClassReport(
            name=entry.delimiter.name.lower(),
            open=entry.open,
            close=entry.close,
            count=entry.count,
            removed=by_type.get(entry.delimiter.name.lower(), 0),
        )
        for entry in result
    ]
    return BalanceReport(
        language=classifier.name if classifier is not None else "plain",
        original=text,
        balanced=balanced,
        changed=balanced != text,
        classes=classes,
        removed_offsets=editor.removed_offsets(),
    )


__all__ = ["balance", "balance_report"]
