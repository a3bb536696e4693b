"""
Base exception for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from CBUserError.

Programming errors and bugs should NOT inherit from CBUserError;
they will propagate with full tracebacks.
"""

from __future__ import annotations


class CBUserError(Exception):
    """
    Base class for all user-facing errors in Clipboard Balancer.

    These errors indicate problems that the user can fix:
    configuration issues, unknown languages, missing source files.
    """
    pass


class UnknownLanguageError(CBUserError):
    """Requested lexical language is not registered."""

    def __init__(self, name: str, known: list[str]):
        self.name = name
        self.known = known
        super().__init__(f"Unknown language '{name}'. Known: {', '.join(known)}")


class SourceReadError(CBUserError):
    """Text source could not be read (missing or unreadable file)."""
    pass


__all__ = ["CBUserError", "UnknownLanguageError", "SourceReadError"]
