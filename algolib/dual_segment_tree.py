"""Segment tree that applies actions to ranges and reads single positions."""

from __future__ import annotations


class DualSegmentTree:
    """Range-action, point-read tree over ``n`` positions.

    ``composition(f, g)`` is the action "f, then g" and ``id_`` is the
    identity action every position starts with.
    """

    def __init__(self, composition, id_, n):
        if n < 0:
            raise ValueError("size must not be negative")
        self._composition = composition
        self._id = id_
        self._n = n
        sz, height = 1, 0
        while sz < n:
            sz <<= 1
            height += 1
        self._sz = sz
        self._height = height
        self._lazy = [id_] * (2 * sz)

    def _propagate(self, k):
        lazy = self._lazy
        f = lazy[k]
        if f != self._id:
            lazy[2 * k] = self._composition(lazy[2 * k], f)
            lazy[2 * k + 1] = self._composition(lazy[2 * k + 1], f)
            lazy[k] = self._id

    def _thrust(self, k):
        for i in range(self._height, 0, -1):
            self._propagate(k >> i)

    def get(self, k):
        """The action accumulated at position ``k``."""
        if not 0 <= k < self._n:
            raise IndexError(f"position {k} out of range")
        k += self._sz
        self._thrust(k)
        return self._lazy[k]

    def __getitem__(self, k):
        return self.get(k)

    def apply(self, a, b, f):
        """Apply the action ``f`` to every position of ``[a, b)``."""
        if not 0 <= a <= b <= self._n:
            raise IndexError(f"invalid range [{a}, {b})")
        if a == b:
            return
        a += self._sz
        b += self._sz
        self._thrust(a)
        self._thrust(b - 1)
        lazy, compose = self._lazy, self._composition
        l, r = a, b
        while l < r:
            if l & 1:
                lazy[l] = compose(lazy[l], f)
                l += 1
            if r & 1:
                r -= 1
                lazy[r] = compose(lazy[r], f)
            l >>= 1
            r >>= 1