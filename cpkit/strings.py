"""String matching: KMP, Rabin-Karp and a prefix-conflict trie."""

from dataclasses import dataclass, field

_PRIME = 5


def prefix_table(pattern):
    """Return the KMP failure table of ``pattern``.

    The table has ``len(pattern) + 1`` entries; entry 0 is -1 and entry i is
    the length of the longest proper border of ``pattern[:i]``.
    """
    table = [0] * (len(pattern) + 1)
    table[0] = -1
    j = -1
    for i, ch in enumerate(pattern):
        while j >= 0 and ch != pattern[j]:
            j = table[j]
        j += 1
        table[i + 1] = j
    return table


def kmp_search(pattern, text):
    """Return the start index of every occurrence of ``pattern`` in ``text``.

    Overlapping occurrences are all reported, in increasing order.
    """
    if not pattern:
        raise ValueError("pattern must not be empty")
    table = prefix_table(pattern)
    matches = []
    j = 0
    for i, ch in enumerate(text, 1):
        while j >= 0 and ch != pattern[j]:
            j = table[j]
        j += 1
        if j == len(pattern):
            matches.append(i - j)
            j = table[j]
    return matches


def _hash(chars):
    return sum(ord(ch) * _PRIME**i for i, ch in enumerate(chars))


def rabin_karp(text, pattern):
    """Return the index of the first occurrence of ``pattern`` in ``text``, or -1."""
    m = len(pattern)
    if m > len(text):
        return -1
    target = _hash(pattern)
    window = _hash(text[:m])
    high = _PRIME ** (m - 1) if m else 0
    last = len(text) - m
    for i in range(last + 1):
        if window == target and text[i : i + m] == pattern:
            return i
        if i < last:
            window = (window - ord(text[i])) // _PRIME + ord(text[i + m]) * high
    return -1


@dataclass
class _Node:
    children: dict = field(default_factory=dict)
    is_end: bool = False


class PrefixTrie:
    """A trie that detects words sharing a prefix relation with stored words."""

    def __init__(self):
        self._root = _Node()

    def add(self, word):
        """Store ``word`` in the trie."""
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _Node())
        node.is_end = True

    def search(self, word):
        """Return True when ``word`` leaves the stored words prefix-free.

        False is returned when a stored word is a prefix of ``word`` or
        ``word`` is a prefix of (or equal to) a stored word.
        """
        node = self._root
        for ch in word:
            node = node.children.get(ch)
            if node is None:
                return True
            if node.is_end:
                return False
        return False