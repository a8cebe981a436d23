"""Fenwick tree for prefix sums with point updates."""

from __future__ import annotations


class BinaryIndexedTree:
    """Point-add, prefix-sum tree over ``n`` positions.

    ``data`` is either a size or an initial sequence of values.
    """

    def __init__(self, data):
        if isinstance(data, int):
            if data < 0:
                raise ValueError("size must not be negative")
            self._n = data
            self._dat = [0] * (data + 1)
        else:
            values = list(data)
            self._n = len(values)
            self._dat = [0] * (self._n + 1)
            self.build(values)

    def build(self, values):
        """Replace the contents with ``values``, which must have length ``n``."""
        values = list(values)
        n = self._n
        if len(values) != n:
            raise ValueError(f"expected {n} values, got {len(values)}")
        dat = [0, *values]
        for i in range(1, n + 1):
            j = i + (i & -i)
            if j <= n:
                dat[j] += dat[i]
        self._dat = dat

    def add(self, k, x):
        if not 0 <= k < self._n:
            raise IndexError(f"position {k} out of range")
        k += 1
        while k <= self._n:
            self._dat[k] += x
            k += k & -k

    def prefix_sum(self, r):
        """Sum of the first ``r`` values."""
        total = 0
        while r > 0:
            total += self._dat[r]
            r -= r & -r
        return total

    def sum(self, l, r):
        """Sum over the half-open range ``[l, r)``."""
        return self.prefix_sum(r) - self.prefix_sum(l)

    def _search(self, x, strict):
        i = 0
        k = 1 << self._n.bit_length()
        while k:
            if i + k <= self._n:
                step = self._dat[i + k]
                if step < x or (not strict and step == x):
                    x -= step
                    i += k
            k >>= 1
        return i

    def lower_bound(self, x):
        """Largest ``i`` with ``prefix_sum(i) < x``; values must be non-negative."""
        return self._search(x, strict=True)

    def upper_bound(self, x):
        """Largest ``i`` with ``prefix_sum(i) <= x``; values must be non-negative."""
        return self._search(x, strict=False)