"""
t9words.keypad
==============
Telephone keypad letter tables.

A :class:`Keypad` is an immutable digit → letters mapping plus its reverse.
The search takes one as an argument instead of reading a global, so other
layouts can be swapped in from ``config.json`` or from tests.
"""

from __future__ import annotations

from collections.abc import Mapping

from .errors import ConfigError, InvalidDigitsError

# ─── Default T9 layout ────────────────────────────────────────────────────────

T9_MAP: dict[str, str] = {
    "0": "",
    "1": "",
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}

DIGITS = "0123456789"


class Keypad:
    """
    Digit → candidate letters table.

    Usage::

        pad = Keypad()                      # standard T9
        pad.letters("7")                    # ('p', 'q', 'r', 's')
        pad.to_digits("an go")              # '2646'

        Keypad({"2": "ab", "3": "cd"})      # custom layout
    """

    __slots__ = ("_letters", "_char_to_digit", "_alphabet")

    def __init__(self, layout: Mapping[str, str | list[str]] | None = None) -> None:
        if layout is None:
            layout = T9_MAP

        letters: dict[str, tuple[str, ...]] = {d: () for d in DIGITS}
        char_to_digit: dict[str, str] = {}

        for digit, chars in layout.items():
            if not isinstance(digit, str) or len(digit) != 1 or digit not in DIGITS:
                raise ConfigError(f"keypad key must be a single digit 0-9, got {digit!r}")
            if isinstance(chars, str):
                chars = list(chars)
            elif not isinstance(chars, (list, tuple)):
                raise ConfigError(
                    f"keypad letters for {digit!r} must be a string or list, got {chars!r}"
                )
            group: list[str] = []
            for ch in chars:
                if not isinstance(ch, str) or len(ch) != 1 or not ("a" <= ch <= "z"):
                    raise ConfigError(
                        f"keypad letters must be single lowercase a-z characters, "
                        f"got {ch!r} under {digit!r}"
                    )
                owner = char_to_digit.get(ch)
                if owner is not None and owner != digit:
                    raise ConfigError(f"letter {ch!r} is mapped to both {owner!r} and {digit!r}")
                if owner is None:
                    char_to_digit[ch] = digit
                    group.append(ch)
            letters[digit] = tuple(group)

        self._letters = letters
        self._char_to_digit = char_to_digit
        self._alphabet = frozenset(char_to_digit)

    @property
    def alphabet(self) -> frozenset[str]:
        """Every letter on the pad."""
        return self._alphabet

    def __repr__(self) -> str:
        groups = ", ".join(f"{d}={''.join(ls)}" for d, ls in self._letters.items() if ls)
        return f"Keypad({groups})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Keypad):
            return NotImplemented
        return self._letters == other._letters

    def __hash__(self) -> int:
        return hash(tuple(self._letters.items()))

    # ── Lookups ───────────────────────────────────────────────────────────────

    def letters(self, digit: str) -> tuple[str, ...]:
        """Candidate letters for ``digit`` in keypad order; empty if it has none."""
        return self._letters.get(digit, ())

    def digit_for(self, letter: str) -> str | None:
        return self._char_to_digit.get(letter)

    def to_digits(self, text: str) -> str:
        """
        Convert a word, or a space-separated run of words, to its digit string.
        Spaces are dropped.  Raises ``ValueError`` on a letter not on the pad.
        """
        result: list[str] = []
        for ch in text:
            if ch == " ":
                continue
            digit = self._char_to_digit.get(ch)
            if digit is None:
                raise ValueError(f"character {ch!r} is not on the keypad")
            result.append(digit)
        return "".join(result)

    # ── Validation ────────────────────────────────────────────────────────────

    @staticmethod
    def validate_digits(digits: str) -> str:
        """Return ``digits`` unchanged, or raise :class:`InvalidDigitsError`."""
        for ch in digits:
            if ch not in DIGITS:
                raise InvalidDigitsError(digits, ch)
        return digits


DEFAULT_KEYPAD = Keypad()
