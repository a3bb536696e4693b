"""
Marker-driven tokenizer for string and comment regions.

Works on arbitrary fragments: no grammar, no error recovery, just a
left-to-right walk that recognizes comment and quote markers in code.
Unterminated strings and comments run to the end of the text.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from .comment_style import LexicalStyle, C_STYLE, HASH_STYLE, LISP_STYLE
from .model import Classifier, LexicalRole, is_escaped
from .regions import Region, RegionIndex

logger = logging.getLogger(__name__)


class StyleClassifier(Classifier):
    """Classifier backed by a LexicalStyle."""

    name = "style"

    def __init__(self, style: LexicalStyle):
        super().__init__(style.escape_char)
        self.style = style
        self._quotes = style.ordered_quotes()

    def regions(self, text: str) -> RegionIndex:
        regions: List[Region] = []
        n = len(text)
        i = 0
        while i < n:
            found = self._match_region(text, i)
            if found is None:
                i += 1
                continue
            end, role = found
            regions.append(Region(i, end, role))
            i = end

        logger.debug("%s: %d lexical regions in %d chars", self.name, len(regions), n)
        return RegionIndex(regions)

    def _match_region(self, text: str, i: int) -> Optional[Tuple[int, LexicalRole]]:
        """Region starting at code offset i, as (end, role), or None."""
        for opener, closer in self.style.block_comments:
            if text.startswith(opener, i):
                close_at = text.find(closer, i + len(opener))
                end = len(text) if close_at < 0 else close_at + len(closer)
                return end, LexicalRole.COMMENT

        for marker in self.style.line_comments:
            if text.startswith(marker, i):
                eol = text.find("\n", i + len(marker))
                return (len(text) if eol < 0 else eol), LexicalRole.COMMENT

        for quote in self._quotes:
            if text.startswith(quote, i) and not is_escaped(text, i, self.escape_char):
                return self._string_end(text, i + len(quote), quote), LexicalRole.STRING

        return None

    def _string_end(self, text: str, j: int, quote: str) -> int:
        n = len(text)
        esc = self.escape_char
        while j < n:
            if esc and text[j] == esc:
                j += 2
                continue
            if text.startswith(quote, j):
                return j + len(quote)
            j += 1
        return n


class CStyleClassifier(StyleClassifier):
    name = "c-style"

    def __init__(self):
        super().__init__(C_STYLE)


class HashStyleClassifier(StyleClassifier):
    name = "hash"

    def __init__(self):
        super().__init__(HASH_STYLE)


class LispStyleClassifier(StyleClassifier):
    name = "lisp"

    def __init__(self):
        super().__init__(LISP_STYLE)


__all__ = ["StyleClassifier", "CStyleClassifier", "HashStyleClassifier", "LispStyleClassifier"]
