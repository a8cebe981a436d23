"""Articulation points and bridges of an undirected graph."""

from __future__ import annotations


class LowLink:
    """Finds articulation points and bridges; call ``build`` first.

    After ``build``, ``articulation`` lists the articulation points and
    ``bridge`` the bridges as ``(min, max)`` vertex pairs.
    """

    def __init__(self, graph):
        self._graph = [list(adj) for adj in graph]
        n = len(self._graph)
        self._n = n
        self._visited = [False] * n
        self._ord = [0] * n
        self._low = [0] * n
        self.articulation = []
        self.bridge = []

    def build(self):
        n = self._n
        self._visited = [False] * n
        self._ord = [0] * n
        self._low = [0] * n
        self.articulation = []
        self.bridge = []
        counter = 0
        for start in range(n):
            if not self._visited[start]:
                counter = self._dfs(start, counter)

    def _dfs(self, start, counter):
        graph, visited, order, low = self._graph, self._visited, self._ord, self._low

        def enter(v):
            nonlocal counter
            visited[v] = True
            order[v] = low[v] = counter
            counter += 1

        enter(start)
        # frame: [vertex, parent, next neighbour index, child count, is articulation]
        stack = [[start, -1, 0, 0, False]]
        while stack:
            frame = stack[-1]
            cur, par, idx = frame[0], frame[1], frame[2]
            if idx < len(graph[cur]):
                frame[2] += 1
                nxt = graph[cur][idx]
                if not visited[nxt]:
                    frame[3] += 1
                    enter(nxt)
                    stack.append([nxt, cur, 0, 0, False])
                elif nxt != par:
                    low[cur] = min(low[cur], order[nxt])
                continue
            stack.pop()
            if par == -1 and frame[3] >= 2:
                frame[4] = True
            if frame[4]:
                self.articulation.append(cur)
            if stack:
                up = stack[-1]
                p, grand = up[0], up[1]
                if cur != grand:
                    low[p] = min(low[p], low[cur])
                if grand != -1 and order[p] <= low[cur]:
                    up[4] = True
                if order[p] < low[cur]:
                    self.bridge.append((min(p, cur), max(p, cur)))
        return counter