"""
t9words.errors
==============
Exceptions raised at the boundary of the package.

Lookups inside the trie never raise; a missing edge or node is reported as
``None`` / ``False``.  Everything here is about bad input or bad settings.
"""

from __future__ import annotations


class T9WordsError(Exception):
    """Base class for all errors raised by t9words."""


class ConfigError(T9WordsError):
    """A configuration value or keypad layout is invalid."""


class InvalidDigitsError(T9WordsError, ValueError):
    """A query contains characters other than ``0``-``9``."""

    def __init__(self, digits: str, bad: str) -> None:
        self.digits = digits
        self.bad = bad
        super().__init__(f"invalid digit string {digits!r}: unexpected {bad!r}")


class SearchLimitExceeded(T9WordsError):
    """The decomposition search popped more frames than the caller allowed."""

    def __init__(self, max_frames: int) -> None:
        self.max_frames = max_frames
        super().__init__(f"search stopped after {max_frames:,} frames")
