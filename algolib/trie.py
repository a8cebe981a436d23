"""Prefix trees over strings and over fixed-width integers."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class _TrieNode:
    char: int
    children: dict = field(default_factory=dict)
    accept: list = field(default_factory=list)
    common: int = 0


class Trie:
    """Trie over an alphabet of ``char_size`` consecutive characters from ``base``."""

    def __init__(self, char_size=26, base="a"):
        self._char_size = char_size
        self._base = ord(base) if isinstance(base, str) else base
        self._root = _TrieNode(0)
        self._node_count = 1

    def _code(self, ch):
        c = ord(ch) - self._base
        if not 0 <= c < self._char_size:
            raise ValueError(f"character {ch!r} outside the alphabet")
        return c

    def insert(self, word, word_id=None):
        """Insert ``word``; its id defaults to the number of words so far."""
        if word_id is None:
            word_id = self._root.common
        node = self._root
        for ch in word:
            c = self._code(ch)
            child = node.children.get(c)
            if child is None:
                child = node.children[c] = _TrieNode(c)
                self._node_count += 1
            node.common += 1
            node = child
        node.common += 1
        node.accept.append(word_id)

    def search(self, word, prefix=False):
        """True if ``word`` was inserted, or with ``prefix`` if any word starts with it."""
        node = self._root
        for ch in word:
            node = node.children.get(self._code(ch))
            if node is None:
                return False
        return True if prefix else bool(node.accept)

    def start_with(self, prefix):
        return self.search(prefix, prefix=True)

    def count(self):
        """Number of words inserted."""
        return self._root.common

    def __len__(self):
        return self._node_count


class _BitNode:
    __slots__ = ("children", "exist", "accept")

    def __init__(self):
        self.children = [None, None]
        self.exist = 0
        self.accept = []


def _count(node):
    return node.exist if node is not None else 0


class BinaryTrie:
    """Multiset of integers of ``max_log + 1`` bits with a global xor mask."""

    def __init__(self, max_log):
        if max_log < 0:
            raise ValueError("max_log must not be negative")
        self._max_log = max_log
        self._lazy = 0
        self._root = _BitNode()

    def _bits(self):
        return range(self._max_log, -1, -1)

    def _path(self, x):
        node = self._root
        path = [node]
        for b in self._bits():
            node = node.children[((x ^ self._lazy) >> b) & 1]
            if node is None:
                return None
            path.append(node)
        return path

    def add(self, x, id_=None):
        """Insert ``x``, recording ``id_`` at its leaf when given."""
        node = self._root
        node.exist += 1
        for b in self._bits():
            c = ((x ^ self._lazy) >> b) & 1
            child = node.children[c]
            if child is None:
                child = node.children[c] = _BitNode()
            child.exist += 1
            node = child
        if id_ is not None:
            node.accept.append(id_)

    def remove(self, x, id_=None):
        """Remove one occurrence of ``x``, and ``id_`` from its leaf when given."""
        path = self._path(x)
        if path is None or path[-1].exist == 0:
            raise KeyError(x)
        for node in path:
            node.exist -= 1
        leaf = path[-1]
        if id_ is not None and id_ in leaf.accept:
            leaf.accept.remove(id_)

    def find(self, x):
        """Return ``(count, ids)`` for the value ``x``."""
        path = self._path(x)
        if path is None:
            return 0, []
        return path[-1].exist, list(path[-1].accept)

    def _require_nonempty(self):
        if self._root.exist == 0:
            raise IndexError("trie is empty")

    def max_element(self):
        """Return ``(value, ids)`` of the largest value."""
        self._require_nonempty()
        node, value = self._root, 0
        for b in self._bits():
            lb = (self._lazy >> b) & 1
            high = node.children[lb ^ 1]
            if _count(high):
                node = high
                value |= 1 << b
            else:
                node = node.children[lb]
        return value, list(node.accept)

    def min_element(self):
        """Return ``(value, ids)`` of the smallest value."""
        self._require_nonempty()
        node, value = self._root, 0
        for b in self._bits():
            lb = (self._lazy >> b) & 1
            low = node.children[lb]
            if _count(low):
                node = low
            else:
                node = node.children[lb ^ 1]
                value |= 1 << b
        return value, list(node.accept)

    def get_kth(self, k):
        """Return ``(value, ids)`` of the ``k``-th smallest value, counting from 1."""
        if not 1 <= k <= self._root.exist:
            raise IndexError(f"k={k} out of range")
        node, value = self._root, 0
        for b in self._bits():
            lb = (self._lazy >> b) & 1
            low = node.children[lb]
            ex0 = _count(low)
            if ex0 < k:
                k -= ex0
                node = node.children[lb ^ 1]
                value |= 1 << b
            else:
                node = low
        return value, list(node.accept)

    def operate_xor(self, x):
        """Xor every stored value with ``x``."""
        self._lazy ^= x