"""Exact maximum independent set for graphs of at most 63 vertices."""

from __future__ import annotations

_MAX_VERTICES = 63


class MaximumIndependentSet:
    """Branch-and-reduce search, run when the object is built."""

    def __init__(self, graph):
        n = len(graph)
        if n > _MAX_VERTICES:
            raise ValueError(f"at most {_MAX_VERTICES} vertices are supported")
        self._n = n
        self._conn = [0] * n
        for i, nbrs in enumerate(graph):
            for j in nbrs:
                if i != j:
                    self._conn[i] |= 1 << j
                    self._conn[j] |= 1 << i
        self._best_size = -1
        self._best = 0
        self._avail = (1 << n) - 1
        self._state = 0
        self._search()

    def _search(self):
        conn = self._conn
        taken = []
        retry = True
        while retry:
            retry = False
            for i in range(self._n):
                bit = 1 << i
                if not self._avail & bit:
                    continue
                nb = (self._avail & conn[i]).bit_count()
                if nb <= 1:
                    taken.append(i)
                    self._avail -= bit
                    self._state |= bit
                    retry = True
                    if nb == 1:
                        rest = self._avail & conn[i]
                        j = (rest & -rest).bit_length() - 1
                        taken.append(j)
                        self._avail &= ~(1 << j)

        size = self._state.bit_count()
        if size > self._best_size:
            self._best_size = size
            self._best = self._state

        degree, pivot = -1, -1
        for i in range(self._n):
            if self._avail & (1 << i):
                c = (self._avail & conn[i]).bit_count()
                if c > degree:
                    degree, pivot = c, i

        if degree > 0:
            nxt = self._avail & conn[pivot]
            self._avail -= 1 << pivot
            self._search()
            self._state |= 1 << pivot
            self._avail &= ~nxt
            self._search()
            self._avail |= nxt
            self._avail |= 1 << pivot
            self._state &= ~(1 << pivot)

        for i in reversed(taken):
            self._avail |= 1 << i
            self._state &= ~(1 << i)

    def vertices(self):
        """Vertices of a largest independent set, in increasing order."""
        return [i for i in range(self._n) if self._best >> i & 1]