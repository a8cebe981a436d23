"""Segment tree supporting range chmin, chmax, add and assign with min/max/sum queries."""

from __future__ import annotations

import math

_INF = math.inf


class _Cell:
    __slots__ = ("sum", "b1", "s1", "b2", "s2", "b_cnt", "s_cnt", "add")

    def __init__(self, a=0):
        self.sum = a
        self.b1 = a  # largest value
        self.s1 = a  # smallest value
        self.b2 = -_INF  # second largest
        self.s2 = _INF  # second smallest
        self.b_cnt = 1
        self.s_cnt = 1
        self.add = 0


class SegmentTreeBeats:
    """Range updates and queries over integers; ``data`` is a size or a sequence."""

    def __init__(self, data):
        values = [0] * data if isinstance(data, int) else list(data)
        n = len(values)
        size, log = 1, 0
        while size < n:
            size <<= 1
            log += 1
        self._n = n
        self._size = size
        self._log = log
        self._seq = [_Cell() for _ in range(2 * size)]
        for i, v in enumerate(values):
            self._seq[i + size] = _Cell(v)
        for i in range(size - 1, 0, -1):
            self._update(i)

    def _update(self, k):
        s, l, r = self._seq[k], self._seq[2 * k], self._seq[2 * k + 1]
        s.sum = l.sum + r.sum
        if l.b1 == r.b1:
            s.b1 = l.b1
            s.b2 = max(l.b2, r.b2)
            s.b_cnt = l.b_cnt + r.b_cnt
        elif l.b1 > r.b1:
            s.b1 = l.b1
            s.b2 = max(l.b2, r.b1)
            s.b_cnt = l.b_cnt
        else:
            s.b1 = r.b1
            s.b2 = max(l.b1, r.b2)
            s.b_cnt = r.b_cnt
        if l.s1 == r.s1:
            s.s1 = l.s1
            s.s2 = min(l.s2, r.s2)
            s.s_cnt = l.s_cnt + r.s_cnt
        elif l.s1 > r.s1:
            s.s1 = r.s1
            s.s2 = min(l.s1, r.s2)
            s.s_cnt = r.s_cnt
        else:
            s.s1 = l.s1
            s.s2 = min(l.s2, r.s1)
            s.s_cnt = l.s_cnt

    def _eval_add(self, k, x):
        s = self._seq[k]
        s.sum += x * (1 << (self._log - (k.bit_length() - 1)))
        s.b1 += x
        s.s1 += x
        if s.b2 != -_INF:
            s.b2 += x
        if s.s2 != _INF:
            s.s2 += x
        s.add += x

    def _eval_min(self, k, x):
        s = self._seq[k]
        s.sum += (x - s.b1) * s.b_cnt
        if s.s1 == s.b1:
            s.s1 = x
        if s.s2 == s.b1:
            s.s2 = x
        s.b1 = x

    def _eval_max(self, k, x):
        s = self._seq[k]
        s.sum += (x - s.s1) * s.s_cnt
        if s.b1 == s.s1:
            s.b1 = x
        if s.b2 == s.s1:
            s.b2 = x
        s.s1 = x

    def _eval(self, k):
        s = self._seq[k]
        if s.add != 0:
            self._eval_add(2 * k, s.add)
            self._eval_add(2 * k + 1, s.add)
            s.add = 0
        for child in (2 * k, 2 * k + 1):
            if s.b1 < self._seq[child].b1:
                self._eval_min(child, s.b1)
            if s.s1 > self._seq[child].s1:
                self._eval_max(child, s.s1)

    def _apply_min(self, k, x):
        s = self._seq[k]
        if s.b1 <= x:
            return
        if s.b2 < x:
            self._eval_min(k, x)
            return
        self._eval(k)
        self._apply_min(2 * k, x)
        self._apply_min(2 * k + 1, x)
        self._update(k)

    def _apply_max(self, k, x):
        s = self._seq[k]
        if s.s1 >= x:
            return
        if s.s2 > x:
            self._eval_max(k, x)
            return
        self._eval(k)
        self._apply_max(2 * k, x)
        self._apply_max(2 * k + 1, x)
        self._update(k)

    def _check_range(self, l, r):
        if not 0 <= l <= r <= self._n:
            raise IndexError(f"invalid range [{l}, {r})")

    def _push_range(self, l, r):
        for i in range(self._log, 0, -1):
            if ((l >> i) << i) != l:
                self._eval(l >> i)
            if ((r >> i) << i) != r:
                self._eval(r >> i)

    def _range_apply(self, l, r, action):
        self._check_range(l, r)
        if l == r:
            return
        l += self._size
        r += self._size
        self._push_range(l, r)
        lo, hi = l, r
        while lo < hi:
            if lo & 1:
                action(lo)
                lo += 1
            if hi & 1:
                hi -= 1
                action(hi)
            lo >>= 1
            hi >>= 1
        for i in range(1, self._log + 1):
            if ((l >> i) << i) != l:
                self._update(l >> i)
            if ((r >> i) << i) != r:
                self._update(r >> i)

    def _range_cells(self, l, r):
        l += self._size
        r += self._size
        self._push_range(l, r)
        while l < r:
            if l & 1:
                yield self._seq[l]
                l += 1
            if r & 1:
                r -= 1
                yield self._seq[r]
            l >>= 1
            r >>= 1

    def apply_chmin(self, l, r, x):
        """Replace each value in ``[l, r)`` by ``min(value, x)``."""
        self._range_apply(l, r, lambda k: self._apply_min(k, x))

    def apply_chmax(self, l, r, x):
        """Replace each value in ``[l, r)`` by ``max(value, x)``."""
        self._range_apply(l, r, lambda k: self._apply_max(k, x))

    def apply_add(self, l, r, x):
        """Add ``x`` to each value in ``[l, r)``."""
        self._range_apply(l, r, lambda k: self._eval_add(k, x))

    def apply_update(self, l, r, x):
        """Set each value in ``[l, r)`` to ``x``."""

        def assign(k):
            self._apply_min(k, x)
            self._apply_max(k, x)

        self._range_apply(l, r, assign)

    def query_min(self, l, r):
        """Minimum over ``[l, r)``; infinity when the range is empty."""
        self._check_range(l, r)
        return min((c.s1 for c in self._range_cells(l, r)), default=_INF)

    def query_max(self, l, r):
        """Maximum over ``[l, r)``; minus infinity when the range is empty."""
        self._check_range(l, r)
        return max((c.b1 for c in self._range_cells(l, r)), default=-_INF)

    def query_sum(self, l, r):
        """Sum over ``[l, r)``."""
        self._check_range(l, r)
        return sum(c.sum for c in self._range_cells(l, r))