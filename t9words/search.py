"""
t9words.search
==============
Split a digit string into dictionary words.

The trie is walked in lock-step with the digits using an explicit stack of
frames, so long inputs never hit the interpreter's recursion limit and the
caller may stop iterating at any point.

Note that the number of results can grow exponentially with the length of
the digit string.  Pass ``max_frames`` to put a ceiling on the work done.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import NamedTuple

from .errors import SearchLimitExceeded
from .keypad import DEFAULT_KEYPAD, Keypad
from .trie import ROOT, Trie

log = logging.getLogger(__name__)


class Frame(NamedTuple):
    """Pending work: output so far, trie position, digits consumed."""

    text: str
    node: int
    index: int


def decompose(
    digits: str,
    trie: Trie,
    keypad: Keypad = DEFAULT_KEYPAD,
    max_frames: int | None = None,
) -> Iterator[str]:
    """
    Yield every way of spelling ``digits`` as one or more words from ``trie``.

    Words in a result are separated by single spaces.  Each distinct result
    is yielded once: a frame's text fixes its path through the trie, so no
    two frames carry the same text and nothing is buffered to filter repeats.
    The order is unspecified.  ``digits`` is assumed to be
    validated already (see :meth:`Keypad.validate_digits`).

    Raises :class:`SearchLimitExceeded` once more than ``max_frames`` frames
    have been processed.  Results yielded before that point are complete.
    """
    end = len(digits)
    stack: list[Frame] = [Frame("", ROOT, 0)]
    popped = found = 0

    while stack:
        text, node, index = stack.pop()
        popped += 1
        if max_frames is not None and popped > max_frames:
            log.debug("Frame limit %d hit with %d frames pending", max_frames, len(stack) + 1)
            raise SearchLimitExceeded(max_frames)

        if index == end:
            if trie.is_terminal(node):
                found += 1
                yield text
            continue

        # At the root a "new word" is the current word; an empty word is never emitted mid-result.
        at_boundary = node != ROOT and trie.is_terminal(node)
        for letter in keypad.letters(digits[index]):
            # Continue the current word
            child = trie.next_node(node, letter)
            if child is not None:
                stack.append(Frame(text + letter, child, index + 1))

            # Start a new word after a complete one
            if at_boundary:
                child = trie.next_node(ROOT, letter)
                if child is not None:
                    stack.append(Frame(f"{text} {letter}", child, index + 1))

    log.debug("Search over %r finished: %d frames, %d results", digits, popped, found)


def solve(
    digits: str,
    trie: Trie,
    keypad: Keypad = DEFAULT_KEYPAD,
    max_frames: int | None = None,
) -> set[str]:
    """Collect :func:`decompose` into a set."""
    return set(decompose(digits, trie, keypad, max_frames))
