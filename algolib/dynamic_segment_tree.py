"""Segment tree over a huge index range that allocates only touched positions."""

from __future__ import annotations


class _Node:
    __slots__ = ("index", "value", "product", "left", "right")

    def __init__(self, index, value):
        self.index = index
        self.value = value
        self.product = value
        self.left = None
        self.right = None


class DynamicSegmentTree:
    """Point-update, range-fold tree over ``[0, n)`` with one node per set position."""

    def __init__(self, n, op, e):
        if n < 0:
            raise ValueError("size must not be negative")
        self._n = n
        self._op = op
        self._e = e
        self._root = None

    def _check_index(self, p):
        if not 0 <= p < self._n:
            raise IndexError(f"position {p} out of range")

    def _check_range(self, l, r):
        if not 0 <= l <= r <= self._n:
            raise IndexError(f"invalid range [{l}, {r})")

    def _update(self, t):
        op, e = self._op, self._e
        left = t.left.product if t.left else e
        right = t.right.product if t.right else e
        t.product = op(op(left, t.value), right)

    def set(self, p, x):
        self._check_index(p)
        self._root = self._set(self._root, 0, self._n, p, x)

    def _set(self, t, a, b, p, x):
        if t is None:
            return _Node(p, x)
        if t.index == p:
            t.value = x
            self._update(t)
            return t
        c = (a + b) >> 1
        if p < c:
            if t.index < p:
                t.index, p = p, t.index
                t.value, x = x, t.value
            t.left = self._set(t.left, a, c, p, x)
        else:
            if p < t.index:
                t.index, p = p, t.index
                t.value, x = x, t.value
            t.right = self._set(t.right, c, b, p, x)
        self._update(t)
        return t

    def get(self, p):
        self._check_index(p)
        t, a, b = self._root, 0, self._n
        while t is not None:
            if t.index == p:
                return t.value
            c = (a + b) >> 1
            if p < c:
                t, b = t.left, c
            else:
                t, a = t.right, c
        return self._e

    def query(self, l, r):
        """Fold over the half-open range ``[l, r)``."""
        self._check_range(l, r)
        return self._query(self._root, 0, self._n, l, r)

    def _query(self, t, a, b, l, r):
        if t is None or b <= l or r <= a:
            return self._e
        if l <= a and b <= r:
            return t.product
        c = (a + b) >> 1
        result = self._query(t.left, a, c, l, r)
        if l <= t.index < r:
            result = self._op(result, t.value)
        return self._op(result, self._query(t.right, c, b, l, r))

    def all_query(self):
        return self._root.product if self._root else self._e

    def reset(self, l, r):
        """Return every position of ``[l, r)`` to the identity."""
        self._check_range(l, r)
        self._root = self._reset(self._root, 0, self._n, l, r)

    def _reset(self, t, a, b, l, r):
        if t is None or b <= l or r <= a:
            return t
        if l <= a and b <= r:
            return None
        c = (a + b) >> 1
        t.left = self._reset(t.left, a, c, l, r)
        t.right = self._reset(t.right, c, b, l, r)
        if l <= t.index < r:
            t.value = self._e
        self._update(t)
        return t

    def max_right(self, l, f):
        """Largest ``r`` such that ``f`` holds for the fold of ``[l, r)``.

        ``f`` must hold for the identity and be monotone along the range.
        """
        if not 0 <= l <= self._n:
            raise IndexError(f"position {l} out of range")
        op, n = self._op, self._n
        if not f(self._e):
            raise ValueError("predicate must hold for the identity")
        acc = self._e

        def walk(t, a, b):
            nonlocal acc
            if t is None or b <= l:
                return n
            if l <= a:
                whole = op(acc, t.product)
                if f(whole):
                    acc = whole
                    return n
            c = (a + b) >> 1
            result = walk(t.left, a, c)
            if result != n:
                return result
            if l <= t.index:
                acc = op(acc, t.value)
                if not f(acc):
                    return t.index
            return walk(t.right, c, b)

        return walk(self._root, 0, n)

    def min_left(self, r, f):
        """Smallest ``l`` such that ``f`` holds for the fold of ``[l, r)``.

        ``f`` must hold for the identity and be monotone along the range.
        """
        if not 0 <= r <= self._n:
            raise IndexError(f"position {r} out of range")
        op = self._op
        if not f(self._e):
            raise ValueError("predicate must hold for the identity")
        acc = self._e

        def walk(t, a, b):
            nonlocal acc
            if t is None or r <= a:
                return 0
            if b <= r:
                whole = op(t.product, acc)
                if f(whole):
                    acc = whole
                    return 0
            c = (a + b) >> 1
            result = walk(t.right, c, b)
            if result != 0:
                return result
            if t.index < r:
                acc = op(t.value, acc)
                if not f(acc):
                    return t.index + 1
            return walk(t.left, a, c)

        return walk(self._root, 0, self._n)