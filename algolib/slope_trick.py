"""Piecewise-linear convex functions kept as two heaps of breakpoints."""

from __future__ import annotations

import heapq
import math


class SlopeTrick:
    """Convex piecewise-linear function, starting as the zero function."""

    def __init__(self):
        self._min_f = 0
        self._left = [math.inf]  # negated values: a max-heap
        self._right = [math.inf]
        self._add_l = 0
        self._add_r = 0

    def _left_top(self):
        return -self._left[0] + self._add_l

    def _right_top(self):
        return self._right[0] + self._add_r

    def min_get(self):
        """Return ``(minimum, leftmost argmin, rightmost argmin)``."""
        return self._min_f, self._left_top(), self._right_top()

    def add_a(self, a):
        """Add the constant ``a``."""
        self._min_f += a

    def add_x_a(self, a):
        """Add ``max(0, x - a)``."""
        self._min_f += max(0, self._left_top() - a)
        moved = -heapq.heappushpop(self._left, -(a - self._add_l))
        heapq.heappush(self._right, moved + self._add_l - self._add_r)

    def add_a_x(self, a):
        """Add ``max(0, a - x)``."""
        self._min_f += max(0, a - self._right_top())
        moved = heapq.heappushpop(self._right, a - self._add_r)
        heapq.heappush(self._left, -(moved + self._add_r - self._add_l))

    def add_abs(self, a):
        """Add ``|x - a|``."""
        self.add_a_x(a)
        self.add_x_a(a)

    def right_clear(self):
        """Replace f(x) by the minimum of f over ``y <= x``."""
        self._right = [math.inf]

    def left_clear(self):
        """Replace f(x) by the minimum of f over ``y >= x``."""
        self._left = [math.inf]

    def shift(self, a, b=None):
        """Replace f(x) by the minimum of f over ``x - b <= y <= x - a``."""
        if b is None:
            b = a
        if a > b:
            raise ValueError("shift requires a <= b")
        self._add_l += a
        self._add_r += b