import math
from itertools import combinations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from algolib.steiner_tree import MinimumSteinerTree
from algolib.union_find import UnionFind


@st.composite
def instances(draw):
    n = draw(st.integers(1, 6))
    edges = draw(
        st.lists(
            st.tuples(st.integers(0, n - 1), st.integers(0, n - 1), st.integers(1, 9)),
            max_size=12,
        )
    )
    terminals = draw(st.lists(st.integers(0, n - 1), min_size=1, max_size=3, unique=True))
    return n, edges, terminals


def _brute(n, edges, terminals):
    best = math.inf
    others = [v for v in range(n) if v not in terminals]
    for r in range(len(others) + 1):
        for extra in combinations(others, r):
            chosen = set(terminals) | set(extra)
            uf = UnionFind(n)
            cost = 0
            for u, v, c in sorted(edges, key=lambda e: e[2]):
                if u in chosen and v in chosen and uf.merge(u, v):
                    cost += c
            first = next(iter(chosen))
            if all(uf.same(first, v) for v in chosen):
                best = min(best, cost)
    return best


def _floyd(n, edges):
    d = [[0 if i == j else math.inf for j in range(n)] for i in range(n)]
    for u, v, c in edges:
        d[u][v] = min(d[u][v], c)
        d[v][u] = min(d[v][u], c)
    for k in range(n):
        for i in range(n):
            for j in range(n):
                d[i][j] = min(d[i][j], d[i][k] + d[k][j])
    return d


def _solve(n, edges, terminals):
    tree = MinimumSteinerTree(n)
    for u, v, c in edges:
        tree.add_edge(u, v, c)
    return tree.solve(terminals)


def test_path_between_two_terminals():
    dp = _solve(3, [(0, 1, 1), (1, 2, 2)], [0, 2])
    assert dp[3][0] == 3


def test_star_beats_direct_edges():
    edges = [(0, 3, 1), (1, 3, 1), (2, 3, 1), (0, 1, 5), (1, 2, 5), (0, 2, 5)]
    dp = _solve(4, edges, [0, 1, 2])
    assert min(dp[7]) == 3


def test_no_terminals_rejected():
    with pytest.raises(ValueError):
        MinimumSteinerTree(3).solve([])


def test_terminal_out_of_range():
    with pytest.raises(IndexError):
        MinimumSteinerTree(3).solve([3])


@settings(max_examples=80, deadline=None)
@given(instances())
def test_matches_brute_force(instance):
    n, edges, terminals = instance
    dp = _solve(n, edges, terminals)
    assert min(dp[(1 << len(terminals)) - 1]) == _brute(n, edges, terminals)


@settings(max_examples=60, deadline=None)
@given(instances())
def test_single_terminal_rows_are_distances(instance):
    n, edges, terminals = instance
    dp = _solve(n, edges, terminals)
    dist = _floyd(n, edges)
    for i, t in enumerate(terminals):
        assert dp[1 << i] == dist[t]