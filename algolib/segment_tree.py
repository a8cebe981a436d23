"""Segment tree over a monoid with point updates and range folds."""

from __future__ import annotations


class SegmentTree:
    """Point-update, range-fold tree for an associative ``op`` with identity ``e``.

    ``data`` is either a size, giving a tree filled with ``e``, or a sequence
    of initial values.
    """

    def __init__(self, op, e, data):
        self._op = op
        self._e = e
        values = None
        if isinstance(data, int):
            if data < 0:
                raise ValueError("size must not be negative")
            n = data
        else:
            values = list(data)
            n = len(values)
        self._n = n
        sz = 1
        while sz < n:
            sz <<= 1
        self._sz = sz
        self._seg = [e] * (2 * sz)
        if values is not None:
            self.build(values)

    def _check_index(self, k):
        if not 0 <= k < self._n:
            raise IndexError(f"position {k} out of range")

    def _pull(self, k):
        seg = self._seg
        seg[k] = self._op(seg[2 * k], seg[2 * k + 1])

    def build(self, values):
        """Replace the contents with ``values``, which must have length ``n``."""
        values = list(values)
        if len(values) != self._n:
            raise ValueError(f"expected {self._n} values, got {len(values)}")
        self._seg[self._sz:self._sz + self._n] = values
        for k in range(self._sz - 1, 0, -1):
            self._pull(k)

    def set(self, k, x):
        self._check_index(k)
        k += self._sz
        self._seg[k] = x
        k >>= 1
        while k:
            self._pull(k)
            k >>= 1

    def get(self, k):
        self._check_index(k)
        return self._seg[k + self._sz]

    def __getitem__(self, k):
        return self.get(k)

    def apply(self, k, x):
        """Replace the value at ``k`` by ``op(value, x)``."""
        self._check_index(k)
        k += self._sz
        self._seg[k] = self._op(self._seg[k], x)
        k >>= 1
        while k:
            self._pull(k)
            k >>= 1

    def query(self, l, r):
        """Fold over the half-open range ``[l, r)``; ``e`` when it is empty."""
        if l >= r:
            return self._e
        if l < 0 or r > self._n:
            raise IndexError(f"invalid range [{l}, {r})")
        op, seg = self._op, self._seg
        left = right = self._e
        l += self._sz
        r += self._sz
        while l < r:
            if l & 1:
                left = op(left, seg[l])
                l += 1
            if r & 1:
                r -= 1
                right = op(seg[r], right)
            l >>= 1
            r >>= 1
        return op(left, right)

    def all_query(self):
        return self._seg[1]

    def find_first(self, l, check):
        """Smallest ``r`` such that ``check`` holds for the fold of ``[l, r)``, or ``n``."""
        if l < 0:
            raise IndexError(f"position {l} out of range")
        n, sz, seg, op = self._n, self._sz, self._seg, self._op
        if l >= n:
            return n
        l += sz
        acc = self._e
        while True:
            while l & 1 == 0:
                l >>= 1
            nxt = op(acc, seg[l])
            if check(nxt):
                while l < sz:
                    l <<= 1
                    nxt = op(acc, seg[l])
                    if not check(nxt):
                        acc = nxt
                        l += 1
                return l + 1 - sz
            acc = nxt
            l += 1
            if l & -l == l:
                return n

    def find_last(self, r, check):
        """Largest ``l`` such that ``check`` holds for the fold of ``[l, r)``, or -1."""
        if r > self._n:
            raise IndexError(f"position {r} out of range")
        if r <= 0:
            return -1
        sz, seg, op = self._sz, self._seg, self._op
        r += sz
        acc = self._e
        while True:
            r -= 1
            while r > 1 and r & 1:
                r >>= 1
            nxt = op(seg[r], acc)
            if check(nxt):
                while r < sz:
                    r = (r << 1) + 1
                    nxt = op(seg[r], acc)
                    if not check(nxt):
                        acc = nxt
                        r -= 1
                return r - sz
            acc = nxt
            if r & -r == r:
                return -1