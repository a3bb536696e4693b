"""
Clipboard Balancer: trim unmatched delimiters from copied text fragments.
"""

from __future__ import annotations

from .balance import balance, balance_report
from .delimiters import DELIMITER_CLASSES, ClassBalance, DelimiterClass, ScanResult
from .scanner import scan
from .trimmer import trim_all, trim_one

__all__ = [
    "balance",
    "balance_report",
    "scan",
    "trim_all",
    "trim_one",
    "DelimiterClass",
    "DELIMITER_CLASSES",
    "ClassBalance",
    "ScanResult",
]
