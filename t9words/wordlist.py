"""
t9words.wordlist
================
Reading, filtering and importing plain-text word lists.

A word list is UTF-8 text with one word per line.  Blank lines and lines
starting with ``#`` are skipped.  Words are never case-folded: anything that
is not made entirely of keypad letters is rejected by :func:`is_acceptable`.
"""

from __future__ import annotations

import logging
import string
from collections.abc import Iterable, Iterator
from pathlib import Path

from .trie import Trie

log = logging.getLogger(__name__)

LOWERCASE: frozenset[str] = frozenset(string.ascii_lowercase)
DEFAULT_MIN_LENGTH = 2


def is_acceptable(
    word: str,
    min_length: int = DEFAULT_MIN_LENGTH,
    alphabet: Iterable[str] = LOWERCASE,
) -> bool:
    """True if ``word`` is long enough and spelled only from ``alphabet``."""
    if not word or len(word) < min_length:
        return False
    allowed = alphabet if isinstance(alphabet, (set, frozenset)) else set(alphabet)
    return all(ch in allowed for ch in word)


def read_wordlist(path: str | Path) -> Iterator[str]:
    """Yield the stripped, non-comment lines of a word list file."""
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            word = line.strip()
            if word and not word.startswith("#"):
                yield word


def load_wordlist(lang_code: str, wordlist_dir: str | Path) -> list[str]:
    """
    Load ``<wordlist_dir>/<lang_code>.txt``.
    A missing file is logged and gives an empty list.
    """
    path = Path(wordlist_dir) / f"{lang_code}.txt"
    if not path.exists():
        log.warning("Wordlist not found for '%s' at %s", lang_code, path)
        return []
    words = list(read_wordlist(path))
    log.info("Loaded %s words  [%s]", f"{len(words):,}", lang_code)
    return words


def build_trie(
    words: Iterable[str],
    min_length: int = DEFAULT_MIN_LENGTH,
    alphabet: Iterable[str] = LOWERCASE,
    trie: Trie | None = None,
) -> Trie:
    """Insert every acceptable word into ``trie`` (a new one by default)."""
    if trie is None:
        trie = Trie()
    allowed = frozenset(alphabet)
    accepted = skipped = 0
    for word in words:
        if is_acceptable(word, min_length, allowed):
            trie.insert(word)
            accepted += 1
        else:
            skipped += 1
    if skipped:
        log.info("Skipped %s unacceptable word(s)", f"{skipped:,}")
    log.debug("Indexed %d words, trie now has %d nodes", accepted, trie.node_count)
    return trie


def list_wordlists(wordlist_dir: str | Path) -> dict[str, int]:
    """Map language code → number of entries for each ``*.txt`` in the directory."""
    wdir = Path(wordlist_dir)
    if not wdir.is_dir():
        return {}
    return {f.stem: sum(1 for _ in read_wordlist(f)) for f in sorted(wdir.glob("*.txt"))}


# ─── Import ───────────────────────────────────────────────────────────────────

def merge_wordlist(
    source: str | Path,
    dest: str | Path,
    append: bool = False,
    min_length: int = DEFAULT_MIN_LENGTH,
    alphabet: Iterable[str] = LOWERCASE,
) -> tuple[int, int]:
    """
    Clean ``source`` into ``dest``, sorted and de-duplicated.

    Source lines are lower-cased before filtering, since imported lists often
    capitalise proper nouns.  With ``append`` the existing contents of ``dest``
    are kept.  Returns ``(total_words, newly_added)``.
    """
    allowed = frozenset(alphabet)
    new_words: set[str] = set()
    skipped = 0
    for word in read_wordlist(source):
        word = word.lower()
        if is_acceptable(word, min_length, allowed):
            new_words.add(word)
        else:
            skipped += 1
    if skipped:
        log.info("Skipped %d word(s) with unmappable characters or too short", skipped)

    dest = Path(dest)
    existing: set[str] = set()
    if append and dest.exists():
        existing = set(read_wordlist(dest))
        log.info("Existing words in %s: %s", dest.name, f"{len(existing):,}")

    combined = sorted(existing | new_words)
    added = len(combined) - len(existing)

    header = (
        f"# {dest.stem} word list for t9words\n"
        f"# Imported by add_wordlist.py\n"
        f"# Words: {len(combined):,}\n"
        f"# One word per line. Lines starting with # are ignored.\n\n"
    )
    dest.parent.mkdir(parents=True, exist_ok=True)
    with open(dest, "w", encoding="utf-8") as f:
        f.write(header)
        for word in combined:
            f.write(word + "\n")

    return len(combined), added
