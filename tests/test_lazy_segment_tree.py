import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algolib.lazy_segment_tree import LazySegmentTree

values_st = st.lists(st.integers(-50, 50), min_size=1, max_size=40)
ops_st = st.lists(
    st.tuples(st.integers(0, 2), st.integers(0, 40), st.integers(0, 40), st.integers(-20, 20)),
    max_size=30,
)


def _add_min_tree(data):
    return LazySegmentTree(min, math.inf, lambda x, f: x + f, lambda f, g: f + g, 0, data)


def _assign_sum_tree(data):
    return LazySegmentTree(
        lambda a, b: (a[0] + b[0], a[1] + b[1]),
        (0, 0),
        lambda x, f: x if f is None else (f * x[1], x[1]),
        lambda f, g: f if g is None else g,
        None,
        [(v, 1) for v in data],
    )


@given(values_st, ops_st)
def test_add_min_matches_list(values, ops):
    n = len(values)
    tree = _add_min_tree(values)
    ref = list(values)
    for kind, a, b, x in ops:
        l, r = sorted((a % (n + 1), b % (n + 1)))
        if kind == 0:
            tree.apply_range(l, r, x)
            for i in range(l, r):
                ref[i] += x
        elif kind == 1 and l < n:
            tree.set(l, x)
            ref[l] = x
        elif kind == 2 and l < n:
            tree.apply(l, x)
            ref[l] += x
        assert tree.query(l, r) == min(ref[l:r], default=math.inf)
    assert [tree[i] for i in range(n)] == ref
    assert tree.all_query() == min(ref)


@given(values_st, ops_st)
def test_assign_sum_matches_list(values, ops):
    n = len(values)
    tree = _assign_sum_tree(values)
    ref = list(values)
    for _, a, b, x in ops:
        l, r = sorted((a % (n + 1), b % (n + 1)))
        tree.apply_range(l, r, x)
        ref[l:r] = [x] * (r - l)
        assert tree.query(l, r) == (sum(ref[l:r]), r - l)
    assert tree.all_query() == (sum(ref), n)


@given(values_st, ops_st, st.data())
def test_find_first_and_last_match_scan(values, ops, data):
    n = len(values)
    tree = _add_min_tree(values)
    ref = list(values)
    for _, a, b, x in ops:
        l, r = sorted((a % (n + 1), b % (n + 1)))
        tree.apply_range(l, r, x)
        for i in range(l, r):
            ref[i] += x
    limit = data.draw(st.integers(-60, 60))
    start = data.draw(st.integers(0, n))
    expected_first = next((i + 1 for i in range(start, n) if ref[i] < limit), n)
    assert tree.find_first(start, lambda s: s < limit) == expected_first
    end = data.draw(st.integers(0, n))
    expected_last = next((i for i in range(end - 1, -1, -1) if ref[i] < limit), -1)
    assert tree.find_last(end, lambda s: s < limit) == expected_last


def test_size_constructor_and_build():
    tree = _add_min_tree(4)
    assert tree.all_query() == math.inf
    tree.build([4, 2, 6, 8])
    tree.apply_range(1, 3, 10)
    assert [tree[i] for i in range(4)] == [4, 12, 16, 8]


def test_empty_range_is_identity():
    tree = _add_min_tree([1, 2, 3])
    tree.apply_range(2, 2, 100)
    assert tree.query(2, 2) == math.inf
    assert tree.all_query() == 1


def test_errors():
    tree = _add_min_tree([1, 2, 3])
    with pytest.raises(IndexError):
        tree.get(3)
    with pytest.raises(IndexError):
        tree.apply_range(0, 4, 1)
    with pytest.raises(ValueError):
        tree.build([1])