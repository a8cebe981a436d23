"""Disjoint-set structures: plain, weighted and persistent."""

from __future__ import annotations

import copy

_MISSING = object()


class UnionFind:
    """Disjoint sets with union by rank and path compression."""

    def __init__(self, n):
        self._parent = [-1] * n
        self._rank = [0] * n
        self._size = [1] * n

    def root(self, x):
        """Representative of the set holding ``x``."""
        path = []
        while self._parent[x] != -1:
            path.append(x)
            x = self._parent[x]
        for node in path:
            self._parent[node] = x
        return x

    def same(self, x, y):
        return self.root(x) == self.root(y)

    def merge(self, x, y):
        """Join the sets of ``x`` and ``y``; False if already joined."""
        rx, ry = self.root(x), self.root(y)
        if rx == ry:
            return False
        if self._rank[rx] < self._rank[ry]:
            rx, ry = ry, rx
        self._parent[ry] = rx
        if self._rank[rx] == self._rank[ry]:
            self._rank[rx] += 1
        self._size[rx] += self._size[ry]
        return True

    def size(self, x):
        return self._size[self.root(x)]


class PotentialUnionFind:
    """Disjoint sets carrying a potential difference between members."""

    def __init__(self, n):
        self._parent_or_size = [-1] * n
        self._diff_weights = [0] * n

    def root(self, i):
        path = []
        while self._parent_or_size[i] >= 0:
            path.append(i)
            i = self._parent_or_size[i]
        root = i
        for node in reversed(path):
            parent = self._parent_or_size[node]
            if parent != root:
                self._diff_weights[node] += self._diff_weights[parent]
                self._parent_or_size[node] = root
        return root

    def _weight(self, i):
        self.root(i)
        return self._diff_weights[i]

    def merge(self, a, b, w):
        """Join ``a`` and ``b`` so that the potential of ``b`` minus ``a`` is ``w``."""
        w += self._weight(a) - self._weight(b)
        a, b = self.root(a), self.root(b)
        if a == b:
            return
        if -self._parent_or_size[a] < -self._parent_or_size[b]:
            a, b = b, a
            w = -w
        self._parent_or_size[a] += self._parent_or_size[b]
        self._parent_or_size[b] = a
        self._diff_weights[b] = w

    def diff(self, a, b):
        """Potential of ``b`` minus potential of ``a``."""
        return self._weight(b) - self._weight(a)

    def same(self, a, b):
        return self.root(a) == self.root(b)

    def size(self, i):
        return -self._parent_or_size[self.root(i)]


class _PNode:
    __slots__ = ("value", "children")

    def __init__(self, value, children):
        self.value = value
        self.children = children


class PersistentArray:
    """Immutable array; ``set`` returns a new array sharing unchanged nodes."""

    def __init__(self, values=(), log=3):
        if log < 1:
            raise ValueError("log must be positive")
        self._log = log
        self._mask = (1 << log) - 1
        self._root = None
        for k, value in enumerate(values):
            self._root = self._assign(self._root, k, value)

    def _assign(self, node, k, value):
        if node is None:
            new = _PNode(_MISSING, [None] * (self._mask + 1))
        else:
            new = _PNode(node.value, list(node.children))
        if k == 0:
            new.value = value
        else:
            i = k & self._mask
            new.children[i] = self._assign(new.children[i], k >> self._log, value)
        return new

    def get(self, k):
        if k < 0:
            raise IndexError(f"index {k} out of range")
        node = self._root
        while node is not None and k:
            node = node.children[k & self._mask]
            k >>= self._log
        if node is None or node.value is _MISSING:
            raise IndexError("index not set")
        return node.value

    def set(self, k, value):
        """Return a new array with position ``k`` set to ``value``."""
        if k < 0:
            raise IndexError(f"index {k} out of range")
        other = copy.copy(self)
        other._root = self._assign(self._root, k, value)
        return other


class PersistentUnionFind:
    """Disjoint sets whose states can be kept cheaply with ``copy``."""

    def __init__(self, n):
        self._data = PersistentArray([-1] * n, log=3)

    def find(self, k):
        while (p := self._data.get(k)) >= 0:
            k = p
        return k

    def size(self, k):
        return -self._data.get(self.find(k))

    def unite(self, x, y):
        """Join the sets of ``x`` and ``y``; False if already joined."""
        x, y = self.find(x), self.find(y)
        if x == y:
            return False
        u, v = self._data.get(x), self._data.get(y)
        if u < v:
            self._data = self._data.set(x, u + v).set(y, x)
        else:
            self._data = self._data.set(y, u + v).set(x, y)
        return True

    def copy(self):
        """Snapshot of the current state, unaffected by later unions."""
        return copy.copy(self)