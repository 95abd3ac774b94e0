"""Prefix trees: a word trie and a prefix-sum map."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class _TrieNode:
    children: dict[str, _TrieNode] = field(default_factory=dict)
    end: bool = False


@dataclass
class _SumNode:
    children: dict[str, _SumNode] = field(default_factory=dict)
    total: int = 0


class Trie:
    """A set of words supporting exact and prefix lookups."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def _walk(self, text: str) -> _TrieNode | None:
        node = self._root
        for char in text:
            child = node.children.get(char)
            if child is None:
                return None
            node = child
        return node

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        node = self._root
        for char in word:
            node = node.children.setdefault(char, _TrieNode())
        node.end = True

    def search(self, word: str) -> bool:
        """Tell whether ``word`` was inserted."""
        node = self._walk(word)
        return node is not None and node.end

    def starts_with(self, prefix: str) -> bool:
        """Tell whether any inserted word begins with ``prefix``."""
        return self._walk(prefix) is not None


class MapSum:
    """Maps keys to values and sums the values of keys sharing a prefix."""

    def __init__(self) -> None:
        self._root = _SumNode()
        self._values: dict[str, int] = {}

    def insert(self, key: str, val: int) -> None:
        """Set ``key`` to ``val``, replacing any earlier value."""
        delta = val - self._values.get(key, 0)
        self._values[key] = val
        node = self._root
        node.total += delta
        for char in key:
            node = node.children.setdefault(char, _SumNode())
            node.total += delta

    def sum(self, prefix: str) -> int:
        """Return the sum of the values of all keys beginning with ``prefix``."""
        node = self._root
        for char in prefix:
            child = node.children.get(char)
            if child is None:
                return 0
            node = child
        return node.total