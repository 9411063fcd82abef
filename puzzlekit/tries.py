"""Prefix-tree puzzles: root replacement, one-edit lookup, prefix sums and more."""

from __future__ import annotations

import string
from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass
class _Node:
    children: dict[str, _Node] = field(default_factory=dict)
    is_end: bool = False
    total: int = 0


class Trie:
    """A set of words stored as a prefix tree."""

    def __init__(self) -> None:
        self._root = _Node()

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        node = self._root
        for letter in word:
            node = node.children.setdefault(letter, _Node())
        node.is_end = True

    def contains(self, word: str) -> bool:
        """Return whether ``word`` itself was inserted."""
        node = self._root
        for letter in word:
            node = node.children.get(letter)
            if node is None:
                return False
        return node.is_end

    def shortest_prefix(self, word: str) -> str:
        """Return the shortest inserted non-empty prefix of ``word``, or ``word`` itself."""
        node = self._root
        for length, letter in enumerate(word, start=1):
            node = node.children.get(letter)
            if node is None:
                break
            if node.is_end:
                return word[:length]
        return word


def replace_words(dictionary: Iterable[str], sentence: str) -> str:
    """Replace every space-separated word by its shortest root from ``dictionary``."""
    trie = Trie()
    for root in dictionary:
        trie.insert(root)
    replaced = " ".join(trie.shortest_prefix(word) for word in sentence.split(" "))
    return replaced.rstrip(" ")


class MagicDictionary:
    """Finds words that match a stored word after changing exactly one letter."""

    def __init__(self) -> None:
        self._trie = Trie()

    def build_dict(self, dictionary: Iterable[str]) -> None:
        """Add every word of ``dictionary``."""
        for word in dictionary:
            self._trie.insert(word)

    def search(self, search_word: str) -> bool:
        """Return whether changing one letter of ``search_word`` yields a stored word."""
        for position, current in enumerate(search_word):
            head, tail = search_word[:position], search_word[position + 1:]
            for letter in string.ascii_lowercase:
                if letter != current and self._trie.contains(head + letter + tail):
                    return True
        return False


class MapSum:
    """Maps keys to values and sums the values of all keys sharing a prefix."""

    def __init__(self) -> None:
        self._root = _Node()
        self._values: dict[str, int] = {}

    def insert(self, key: str, val: int) -> None:
        """Set ``key`` to ``val``, replacing any earlier value."""
        delta = val - self._values.get(key, 0)
        node = self._root
        node.total += delta
        for letter in key:
            node = node.children.setdefault(letter, _Node())
            node.total += delta
        node.is_end = True
        self._values[key] = val

    def sum(self, prefix: str) -> int:
        """Return the sum of values of all keys starting with ``prefix``."""
        node = self._root
        for letter in prefix:
            node = node.children.get(letter)
            if node is None:
                return 0
        return node.total


def _camel_matches(query: str, pattern: str) -> bool:
    matched = 0
    for letter in query:
        if matched < len(pattern) and pattern[matched] == letter:
            matched += 1
        elif not "a" <= letter <= "z":
            return False
    return matched == len(pattern)


def camel_match(queries: Iterable[str], pattern: str) -> list[bool]:
    """Tell for each query whether inserting lowercase letters into ``pattern`` gives it."""
    return [_camel_matches(query, pattern) for query in queries]


def min_valid_strings(words: Iterable[str], target: str) -> int:
    """Return the fewest prefixes of ``words`` that concatenate to ``target``, or -1."""
    trie = Trie()
    for word in words:
        trie.insert(word)

    unreachable = float("inf")
    best: list[float] = [unreachable] * len(target) + [0]
    for start in range(len(target) - 1, -1, -1):
        node = trie._root
        for end in range(start, len(target)):
            node = node.children.get(target[end])
            if node is None:
                break
            best[start] = min(best[start], 1 + best[end + 1])
    result = best[0]
    return -1 if result == unreachable else int(result)