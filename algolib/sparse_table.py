"""Static range queries answered in constant time."""

from __future__ import annotations


class SparseTable:
    """Range queries for an idempotent, associative operation such as min."""

    def __init__(self, values, f):
        values = list(values)
        self._f = f
        self._n = len(values)
        self._table = [values]
        span = 1
        while span * 2 <= self._n:
            prev = self._table[-1]
            self._table.append([f(prev[j], prev[j + span]) for j in range(self._n - 2 * span + 1)])
            span *= 2

    def query(self, l, r):
        """Fold of ``f`` over the non-empty half-open range ``[l, r)``."""
        if not 0 <= l < r <= self._n:
            raise IndexError(f"invalid range [{l}, {r})")
        b = (r - l).bit_length() - 1
        row = self._table[b]
        return self._f(row[l], row[r - (1 << b)])


class DisjointSparseTable:
    """Range queries for any associative operation."""

    def __init__(self, values, f):
        values = list(values)
        n = len(values)
        self._f = f
        self._n = n
        levels = n.bit_length()
        self._table = [list(values)] + [[None] * n for _ in range(1, levels)]
        for i in range(1, levels):
            row = self._table[i]
            shift = 1 << i
            for j in range(0, n, shift << 1):
                t = min(j + shift, n)
                row[t - 1] = values[t - 1]
                for k in range(t - 2, j - 1, -1):
                    row[k] = f(values[k], row[k + 1])
                if n <= t:
                    break
                row[t] = values[t]
                for k in range(t + 1, min(t + shift, n)):
                    row[k] = f(row[k - 1], values[k])

    def query(self, l, r):
        """Fold of ``f`` over the non-empty half-open range ``[l, r)``."""
        if not 0 <= l < r <= self._n:
            raise IndexError(f"invalid range [{l}, {r})")
        r -= 1
        if l == r:
            return self._table[0][l]
        p = (l ^ r).bit_length() - 1
        return self._f(self._table[p][l], self._table[p][r])