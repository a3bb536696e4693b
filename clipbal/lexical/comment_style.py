from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .model import DEFAULT_ESCAPE_CHAR


@dataclass(frozen=True)
class LexicalStyle:
    """Comment and string markers of a language family."""

    line_comments: Tuple[str, ...] = ()
    """Single-line comment markers (e.g., '//' or '#'), run to end of line."""

    block_comments: Tuple[Tuple[str, str], ...] = ()
    """Multi-line comment marker pairs (e.g., ('/*', '*/'))."""

    quotes: Tuple[str, ...] = ()
    """String delimiters; the same marker opens and closes (e.g., '"', "'''")."""

    escape_char: str = DEFAULT_ESCAPE_CHAR
    """Escape character inside strings and before delimiters in code."""

    def ordered_quotes(self) -> Tuple[str, ...]:
        """Quotes with longer markers first, so '\"\"\"' wins over '\"'."""
        return tuple(sorted(self.quotes, key=len, reverse=True))

    @staticmethod
    def from_dict(d: Optional[Dict[str, Any]], escape_char: str = DEFAULT_ESCAPE_CHAR) -> LexicalStyle:
        """Build a style from a config mapping (already type-checked)."""
        d = d or {}
        return LexicalStyle(
            line_comments=tuple(d.get("line_comments") or ()),
            block_comments=tuple((pair[0], pair[1]) for pair in d.get("block_comments") or ()),
            quotes=tuple(d.get("quotes") or ()),
            escape_char=escape_char,
        )


# Shared style constants for common language families

# C-family languages: C, C++, Java, JavaScript, TypeScript, Scala, Kotlin
C_STYLE = LexicalStyle(
    line_comments=("//",),
    block_comments=(("/*", "*/"),),
    quotes=('"', "'"),
)

# Hash-style comments: Python, Ruby, Shell
HASH_STYLE = LexicalStyle(
    line_comments=("#",),
    quotes=('"""', "'''", '"', "'"),
)

# Lisp family: ';' line comments, '#| … |#' block comments, double-quoted strings
LISP_STYLE = LexicalStyle(
    line_comments=(";",),
    block_comments=(("#|", "|#"),),
    quotes=('"',),
)

# No strings, no comments: every unescaped delimiter counts
PLAIN_STYLE = LexicalStyle()


__all__ = ["LexicalStyle", "C_STYLE", "HASH_STYLE", "LISP_STYLE", "PLAIN_STYLE"]
