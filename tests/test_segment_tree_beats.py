import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algolib.segment_tree_beats import SegmentTreeBeats

values_st = st.lists(st.integers(-100, 100), min_size=1, max_size=40)
ops_st = st.lists(
    st.tuples(st.integers(0, 3), st.integers(0, 40), st.integers(0, 40), st.integers(-100, 100)),
    max_size=40,
)


@given(values_st, ops_st)
def test_random_operations_match_list(values, ops):
    n = len(values)
    tree = SegmentTreeBeats(values)
    ref = list(values)
    for kind, a, b, x in ops:
        l, r = sorted((a % (n + 1), b % (n + 1)))
        if kind == 0:
            tree.apply_chmin(l, r, x)
            ref[l:r] = [min(v, x) for v in ref[l:r]]
        elif kind == 1:
            tree.apply_chmax(l, r, x)
            ref[l:r] = [max(v, x) for v in ref[l:r]]
        elif kind == 2:
            tree.apply_add(l, r, x)
            ref[l:r] = [v + x for v in ref[l:r]]
        else:
            tree.apply_update(l, r, x)
            ref[l:r] = [x] * (r - l)
        assert tree.query_sum(l, r) == sum(ref[l:r])
        if l < r:
            assert tree.query_min(l, r) == min(ref[l:r])
            assert tree.query_max(l, r) == max(ref[l:r])
    assert tree.query_sum(0, n) == sum(ref)
    assert [tree.query_sum(i, i + 1) for i in range(n)] == ref


def test_size_constructor_starts_at_zero():
    tree = SegmentTreeBeats(5)
    assert tree.query_sum(0, 5) == 0
    tree.apply_add(1, 4, 3)
    tree.apply_chmin(0, 5, 2)
    assert [tree.query_max(i, i + 1) for i in range(5)] == [0, 2, 2, 2, 0]


def test_empty_range_queries():
    tree = SegmentTreeBeats([1, 2, 3, 4])
    assert tree.query_min(2, 2) == math.inf
    assert tree.query_max(2, 2) == -math.inf
    assert tree.query_sum(2, 2) == 0


def test_invalid_range_raises():
    tree = SegmentTreeBeats([1, 2, 3])
    with pytest.raises(IndexError):
        tree.query_sum(0, 4)
    with pytest.raises(IndexError):
        tree.apply_add(2, 1, 5)