"""Minimum Steiner tree by dynamic programming over terminal subsets."""

from __future__ import annotations

import heapq
import math


class MinimumSteinerTree:
    """Undirected weighted graph on which Steiner trees are computed."""

    def __init__(self, n):
        if n < 0:
            raise ValueError("vertex count must not be negative")
        self._n = n
        self._graph = [[] for _ in range(n)]

    def _check_vertex(self, v):
        if not 0 <= v < self._n:
            raise IndexError(f"vertex {v} out of range")

    def add_edge(self, u, v, cost):
        self._check_vertex(u)
        self._check_vertex(v)
        self._graph[u].append((v, cost))
        self._graph[v].append((u, cost))

    def solve(self, terminals):
        """Return ``dp`` where ``dp[mask][v]`` is the least cost of a tree
        joining the terminals in ``mask`` and vertex ``v`` (infinity if none).
        """
        terminals = list(terminals)
        if not terminals:
            raise ValueError("at least one terminal is required")
        for v in terminals:
            self._check_vertex(v)
        n = self._n
        full = 1 << len(terminals)
        dp = [[math.inf] * n for _ in range(full)]
        for i, v in enumerate(terminals):
            dp[1 << i][v] = 0
        for mask in range(1, full):
            row = dp[mask]
            for j in range(n):
                sub = mask
                while sub:
                    candidate = dp[sub][j] + dp[mask ^ sub][j]
                    if candidate < row[j]:
                        row[j] = candidate
                    sub = (sub - 1) & mask
            heap = [(c, j) for j, c in enumerate(row) if c != math.inf]
            heapq.heapify(heap)
            while heap:
                c, v = heapq.heappop(heap)
                if row[v] < c:
                    continue
                for to, cost in self._graph[v]:
                    if row[to] > c + cost:
                        row[to] = c + cost
                        heapq.heappush(heap, (row[to], to))
        return dp