"""Prefix sums in one and three dimensions."""

from __future__ import annotations

from itertools import accumulate


class CumulativeSum:
    """Prefix sums over a one-dimensional sequence.

    Built from a sequence it is ready at once. Built from a size, values are
    added with ``add`` and folded in with ``build``.
    """

    def __init__(self, data):
        if isinstance(data, int):
            if data < 0:
                raise ValueError("size must not be negative")
            self._dat = [0] * (data + 1)
        else:
            self._dat = [0, *data]
            self.build()

    def add(self, k, x):
        """Add ``x`` at position ``k``; takes effect after ``build``."""
        if not 0 <= k < len(self._dat) - 1:
            raise IndexError(f"position {k} out of range")
        self._dat[k + 1] += x

    def build(self):
        """Turn the stored values into prefix sums."""
        self._dat = list(accumulate(self._dat))

    def prefix(self, r):
        """Sum of the first ``r`` values, clamped to the sequence."""
        if r < 0:
            return 0
        return self._dat[min(r, len(self._dat) - 1)]

    def sum(self, l, r):
        """Sum over the half-open range ``[l, r)``."""
        return self.prefix(r) - self.prefix(l)


class CumulativeSum3D:
    """Prefix sums over a three-dimensional grid.

    ``data`` is either the dimensions ``(a, b, c)`` of an empty grid, or a
    nested, rectangular list of values.
    """

    def __init__(self, data):
        if len(data) == 3 and all(isinstance(d, int) for d in data):
            a, b, c = data
            if min(a, b, c) < 0:
                raise ValueError("dimensions must not be negative")
            self._dat = [[[0] * (c + 1) for _ in range(b + 1)] for _ in range(a + 1)]
            return
        a = len(data)
        b = len(data[0]) if a else 0
        c = len(data[0][0]) if b else 0
        self._dat = [[[0] * (c + 1) for _ in range(b + 1)] for _ in range(a + 1)]
        for i, plane in enumerate(data, 1):
            for j, row in enumerate(plane, 1):
                for k, value in enumerate(row, 1):
                    self._dat[i][j][k] += value
        self.build()

    def add(self, x, y, z, w):
        """Add ``w`` at ``(x, y, z)``; positions beyond the grid are ignored."""
        x, y, z = x + 1, y + 1, z + 1
        dat = self._dat
        if x >= len(dat) or y >= len(dat[0]) or z >= len(dat[0][0]):
            return
        dat[x][y][z] += w

    def build(self):
        """Turn the stored values into prefix sums."""
        d = self._dat
        for i in range(1, len(d)):
            for j in range(1, len(d[i])):
                for k in range(1, len(d[i][j])):
                    d[i][j][k] += (
                        d[i][j][k - 1]
                        + d[i][j - 1][k]
                        + d[i - 1][j][k]
                        - d[i][j - 1][k - 1]
                        - d[i - 1][j - 1][k]
                        - d[i - 1][j][k - 1]
                        + d[i - 1][j - 1][k - 1]
                    )

    def sum(self, sx, sy, sz, gx, gy, gz):
        """Sum over the box ``[sx, gx) x [sy, gy) x [sz, gz)``."""
        d = self._dat
        return (
            d[gx][gy][gz]
            - d[sx][gy][gz]
            - d[gx][sy][gz]
            - d[gx][gy][sz]
            + d[gx][sy][sz]
            + d[sx][gy][sz]
            + d[sx][sy][gz]
            - d[sx][sy][sz]
        )