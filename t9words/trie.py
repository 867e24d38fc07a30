"""
t9words.trie
============
Prefix trie stored as a flat node table.

Nodes are addressed by their integer position in ``Trie.nodes``; node 0 is
the root.  Ids are never reused or reordered, so a search can hold on to them
while the trie is shared read-only.
"""

from __future__ import annotations

from collections.abc import Iterable

ROOT = 0


class TrieNode:
    """Single entry in the node table."""

    __slots__ = ("edges", "terminal")

    def __init__(self) -> None:
        self.edges: dict[str, int] = {}
        self.terminal: bool = False

    def __repr__(self) -> str:
        mark = "*" if self.terminal else ""
        return f"TrieNode({''.join(sorted(self.edges))}{mark})"


class Trie:
    """
    Append-only prefix trie.

    Built once by the wordlist loader, then treated as read-only by the
    search.  No deletion; no locking.
    """

    def __init__(self) -> None:
        self.nodes: list[TrieNode] = [TrieNode()]
        self._words = 0

    @classmethod
    def from_words(cls, words: Iterable[str]) -> Trie:
        trie = cls()
        for word in words:
            trie.insert(word)
        return trie

    def __len__(self) -> int:
        return self._words

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def __repr__(self) -> str:
        return f"Trie(words={self._words}, nodes={len(self.nodes)})"

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    # ── Building ──────────────────────────────────────────────────────────────

    def _add_node(self) -> int:
        self.nodes.append(TrieNode())
        return len(self.nodes) - 1

    def insert(self, word: str) -> None:
        """Insert ``word``.  Inserting an existing word is a no-op."""
        node = ROOT
        for ch in word:
            child = self.nodes[node].edges.get(ch)
            if child is None:
                child = self._add_node()
                self.nodes[node].edges[ch] = child
            node = child
        if not self.nodes[node].terminal:
            self.nodes[node].terminal = True
            self._words += 1

    # ── Queries ───────────────────────────────────────────────────────────────

    def _walk(self, s: str) -> int | None:
        node = ROOT
        for ch in s:
            child = self.next_node(node, ch)
            if child is None:
                return None
            node = child
        return node

    def contains(self, word: str) -> bool:
        node = self._walk(word)
        return node is not None and self.nodes[node].terminal

    def has_prefix(self, prefix: str) -> bool:
        return self._walk(prefix) is not None

    def next_node(self, node: int, letter: str) -> int | None:
        """Child reached from ``node`` via ``letter``, or ``None``.

        An id outside the table also gives ``None`` rather than an error.
        """
        if not 0 <= node < len(self.nodes):
            return None
        return self.nodes[node].edges.get(letter)

    def is_terminal(self, node: int) -> bool:
        if not 0 <= node < len(self.nodes):
            return False
        return self.nodes[node].terminal
