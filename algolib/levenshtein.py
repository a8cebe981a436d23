"""Edit distance between two sequences."""

from __future__ import annotations


def levenshtein_distance(s, t):
    """Number of insertions, deletions and substitutions turning ``s`` into ``t``."""
    prev = list(range(len(t) + 1))
    for i, a in enumerate(s, 1):
        cur = [i]
        for j, b in enumerate(t, 1):
            cur.append(min(prev[j] + 1, cur[j - 1] + 1, prev[j - 1] + (a != b)))
        prev = cur
    return prev[-1]