"""Segment tree with lazy propagation of range actions."""

from __future__ import annotations


class LazySegmentTree:
    """Range-action, range-fold tree.

    ``op``/``e`` form the monoid of values, ``mapping(x, f)`` applies an
    action to a value, ``composition(f, g)`` gives the action "f, then g",
    and ``id_`` is the identity action. ``data`` is a size or a sequence.
    """

    def __init__(self, op, e, mapping, composition, id_, data):
        self._op = op
        self._e = e
        self._mapping = mapping
        self._composition = composition
        self._id = id_
        values = None
        if isinstance(data, int):
            if data < 0:
                raise ValueError("size must not be negative")
            n = data
        else:
            values = list(data)
            n = len(values)
        self._n = n
        sz, height = 1, 0
        while sz < n:
            sz <<= 1
            height += 1
        self._sz = sz
        self._height = height
        self._dat = [e] * (2 * sz)
        self._lazy = [id_] * (2 * sz)
        if values is not None:
            self.build(values)

    def _check_index(self, k):
        if not 0 <= k < self._n:
            raise IndexError(f"position {k} out of range")

    def _update(self, k):
        self._dat[k] = self._op(self._dat[2 * k], self._dat[2 * k + 1])

    def _all_apply(self, k, f):
        self._dat[k] = self._mapping(self._dat[k], f)
        if k < self._sz:
            self._lazy[k] = self._composition(self._lazy[k], f)

    def _propagate(self, k):
        f = self._lazy[k]
        if f != self._id:
            self._all_apply(2 * k, f)
            self._all_apply(2 * k + 1, f)
            self._lazy[k] = self._id

    def _push_path(self, k):
        for i in range(self._height, 0, -1):
            self._propagate(k >> i)

    def _pull_path(self, k):
        for i in range(1, self._height + 1):
            self._update(k >> i)

    def build(self, values):
        """Replace the contents with ``values``, which must have length ``n``."""
        values = list(values)
        if len(values) != self._n:
            raise ValueError(f"expected {self._n} values, got {len(values)}")
        self._dat[self._sz:self._sz + self._n] = values
        self._lazy = [self._id] * (2 * self._sz)
        for k in range(self._sz - 1, 0, -1):
            self._update(k)

    def set(self, k, x):
        self._check_index(k)
        k += self._sz
        self._push_path(k)
        self._dat[k] = x
        self._pull_path(k)

    def get(self, k):
        self._check_index(k)
        k += self._sz
        self._push_path(k)
        return self._dat[k]

    def __getitem__(self, k):
        return self.get(k)

    def _push_range(self, l, r):
        for i in range(self._height, 0, -1):
            if ((l >> i) << i) != l:
                self._propagate(l >> i)
            if ((r >> i) << i) != r:
                self._propagate((r - 1) >> i)

    def query(self, l, r):
        """Fold over the half-open range ``[l, r)``; ``e`` when it is empty."""
        if l >= r:
            return self._e
        if l < 0 or r > self._n:
            raise IndexError(f"invalid range [{l}, {r})")
        op, dat = self._op, self._dat
        l += self._sz
        r += self._sz
        self._push_range(l, r)
        left = right = self._e
        while l < r:
            if l & 1:
                left = op(left, dat[l])
                l += 1
            if r & 1:
                r -= 1
                right = op(dat[r], right)
            l >>= 1
            r >>= 1
        return op(left, right)

    def all_query(self):
        return self._dat[1]

    def apply(self, k, f):
        """Apply the action ``f`` to the single position ``k``."""
        self._check_index(k)
        k += self._sz
        self._push_path(k)
        self._dat[k] = self._mapping(self._dat[k], f)
        self._pull_path(k)

    def apply_range(self, l, r, f):
        """Apply the action ``f`` to every position of ``[l, r)``."""
        if l >= r:
            return
        if l < 0 or r > self._n:
            raise IndexError(f"invalid range [{l}, {r})")
        l += self._sz
        r += self._sz
        self._push_range(l, r)
        lo, hi = l, r
        while lo < hi:
            if lo & 1:
                self._all_apply(lo, f)
                lo += 1
            if hi & 1:
                hi -= 1
                self._all_apply(hi, f)
            lo >>= 1
            hi >>= 1
        for i in range(1, self._height + 1):
            if ((l >> i) << i) != l:
                self._update(l >> i)
            if ((r >> i) << i) != r:
                self._update((r - 1) >> i)

    def find_first(self, l, check):
        """Smallest ``r`` such that ``check`` holds for the fold of ``[l, r)``, or ``n``."""
        if l < 0:
            raise IndexError(f"position {l} out of range")
        n, sz, op, dat = self._n, self._sz, self._op, self._dat
        if l >= n:
            return n
        l += sz
        self._push_path(l)
        acc = self._e
        while True:
            while l & 1 == 0:
                l >>= 1
            nxt = op(acc, dat[l])
            if check(nxt):
                while l < sz:
                    self._propagate(l)
                    l <<= 1
                    nxt = op(acc, dat[l])
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
        sz, op, dat = self._sz, self._op, self._dat
        r += sz
        self._push_path(r - 1)
        acc = self._e
        while True:
            r -= 1
            while r > 1 and r & 1:
                r >>= 1
            nxt = op(dat[r], acc)
            if check(nxt):
                while r < sz:
                    self._propagate(r)
                    r = (r << 1) + 1
                    nxt = op(dat[r], acc)
                    if not check(nxt):
                        acc = nxt
                        r -= 1
                return r - sz
            acc = nxt
            if r & -r == r:
                return -1