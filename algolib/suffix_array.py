"""Suffix array by induced sorting, with LCP array and pattern search."""

from __future__ import annotations

import sys
from bisect import bisect_left
from collections.abc import Sequence
from itertools import accumulate, groupby


def _sa_is(s):
    """Suffix array of ``s``, whose last value is a unique minimum 0."""
    n = len(s)
    if n == 1:
        return [0]
    ret = [0] * n
    is_s = [False] * n
    is_lms = [False] * n
    m = 0
    for i in range(n - 2, -1, -1):
        is_s[i] = s[i] > s[i + 1] or (s[i] == s[i + 1] and is_s[i + 1])
        is_lms[i + 1] = is_s[i] and not is_s[i + 1]
        m += is_lms[i + 1]
    upper = max(s)

    def induced_sort(lms):
        l = [0] * (upper + 2)
        r = [0] * (upper + 2)
        for v in s:
            l[v + 1] += 1
            r[v] += 1
        l = list(accumulate(l))
        r = list(accumulate(r))
        ret[:] = [-1] * n
        for x in reversed(lms):
            r[s[x]] -= 1
            ret[r[s[x]]] = x
        for idx in range(n):
            v = ret[idx]
            if v >= 1 and is_s[v - 1]:
                c = s[v - 1]
                ret[l[c]] = v - 1
                l[c] += 1
        r = [0] * (upper + 2)
        for v in s:
            r[v] += 1
        r = list(accumulate(r))
        for k in range(n - 1, 0, -1):
            i = ret[k]
            if i >= 1 and not is_s[i - 1]:
                c = s[i - 1]
                r[c] -= 1
                ret[r[c]] = i - 1

    lms = [i for i in range(1, n) if is_lms[i]]
    induced_sort(lms)
    new_lms = [v for v in ret if not is_s[v] and v > 0 and is_s[v - 1]]

    def is_same(a, b):
        if s[a] != s[b]:
            return False
        a += 1
        b += 1
        while True:
            if s[a] != s[b]:
                return False
            if is_lms[a] or is_lms[b]:
                return is_lms[a] and is_lms[b]
            a += 1
            b += 1

    rank = 0
    ret[n - 1] = 0
    for i in range(1, m):
        if not is_same(new_lms[i - 1], new_lms[i]):
            rank += 1
        ret[new_lms[i]] = rank

    if rank + 1 < m:
        new_s = [ret[x] for x in lms]
        new_lms = [lms[i] for i in _sa_is(new_s)]

    induced_sort(new_lms)
    return ret


class SuffixArray(Sequence):
    """Sorted start positions of all suffixes of ``values``, the empty one included.

    ``values`` is a string or a sequence of integers; with ``compress`` any
    sequence of comparable items is accepted.
    """

    def __init__(self, values, compress=False):
        self.values = values
        if compress:
            xs = [k for k, _ in groupby(sorted(values))]
            codes = [bisect_left(xs, v) + 1 for v in values]
        elif len(values):
            key = ord if isinstance(values, str) else int
            low = min(key(v) for v in values)
            codes = [key(v) - low + 1 for v in values]
        else:
            codes = []
        self._sa = _sa_is(codes + [0])

    def __len__(self):
        return len(self._sa)

    def __getitem__(self, i):
        return self._sa[i]

    def __repr__(self):
        return f"SuffixArray({self._sa!r})"

    def output(self, file=None):
        """Write each rank, its start position and the suffix, one per line."""
        out = sys.stdout if file is None else file
        vs = self.values
        for i, start in enumerate(self._sa):
            if isinstance(vs, str):
                print(f"{i}:[{start}] {vs[start:]}", file=out)
            else:
                tail = "".join(f" {v}" for v in vs[start:])
                print(f"{i}:[{start}]{tail}", file=out)

    def lt_substr(self, t, si=0, ti=0):
        """Whether ``values[si:]`` sorts before ``t[ti:]``."""
        vs = self.values
        sn, tn = len(vs), len(t)
        while si < sn and ti < tn:
            if vs[si] < t[ti]:
                return True
            if vs[si] > t[ti]:
                return False
            si += 1
            ti += 1
        return si >= sn and ti < tn

    def _search(self, t, ng):
        ok = len(self._sa)
        while ok - ng > 1:
            mid = (ok + ng) // 2
            if self.lt_substr(t, self._sa[mid]):
                ng = mid
            else:
                ok = mid
        return ok

    def lower_bound(self, t):
        """Smallest rank whose suffix is not less than ``t``."""
        return self._search(t, 0)

    def equal_range(self, t):
        """Ranks ``(lo, hi)`` of the suffixes that start with the non-empty ``t``."""
        if not len(t):
            raise ValueError("pattern must not be empty")
        low = self.lower_bound(t)
        if isinstance(t, str):
            bumped = t[:-1] + chr(ord(t[-1]) + 1)
        else:
            bumped = [*t[:-1], t[-1] + 1]
        return low, self._search(bumped, low - 1)


def lcp_array(sa):
    """``lcp[k]`` is the common prefix length of the suffixes ranked ``k - 1`` and ``k``."""
    vs = sa.values
    n = len(sa) - 1
    lcp = [0] * (n + 1)
    rank = [0] * (n + 1)
    for i, start in enumerate(sa):
        rank[start] = i
    h = 0
    for i in range(n + 1):
        if rank[i] < n:
            j = sa[rank[i] + 1]
            while j + h < n and i + h < n and vs[i + h] == vs[j + h]:
                h += 1
            lcp[rank[i] + 1] = h
            if h > 0:
                h -= 1
        else:
            h = 0
    return lcp