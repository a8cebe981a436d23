import pytest
from hypothesis import given
from hypothesis import strategies as st

from algolib.dual_segment_tree import DualSegmentTree


def _add(f, g):
    return f + g


def _affine_then(f, g):
    # f then g, where (a, b) maps x to a * x + b
    return (f[0] * g[0], g[0] * f[1] + g[1])


@st.composite
def _operations(draw, value):
    n = draw(st.integers(1, 20))
    ops = []
    for _ in range(draw(st.integers(0, 15))):
        a = draw(st.integers(0, n))
        b = draw(st.integers(a, n))
        ops.append((a, b, draw(value)))
    return n, ops


@given(_operations(st.integers(-50, 50)))
def test_range_add_matches_naive(case):
    n, ops = case
    tree = DualSegmentTree(_add, 0, n)
    expected = [0] * n
    for a, b, x in ops:
        tree.apply(a, b, x)
        for i in range(a, b):
            expected[i] += x
    assert [tree[i] for i in range(n)] == expected


@given(_operations(st.tuples(st.integers(-3, 3), st.integers(-5, 5))))
def test_affine_actions_keep_order(case):
    n, ops = case
    tree = DualSegmentTree(_affine_then, (1, 0), n)
    expected = [(1, 0)] * n
    for a, b, f in ops:
        tree.apply(a, b, f)
        for i in range(a, b):
            expected[i] = _affine_then(expected[i], f)
    assert [tree.get(i) for i in range(n)] == expected


def test_fresh_tree_holds_identity():
    tree = DualSegmentTree(_add, 0, 5)
    assert [tree[i] for i in range(5)] == [0] * 5


def test_empty_range_changes_nothing():
    tree = DualSegmentTree(_add, 0, 4)
    tree.apply(2, 2, 7)
    assert [tree[i] for i in range(4)] == [0, 0, 0, 0]


def test_get_out_of_range_raises():
    tree = DualSegmentTree(_add, 0, 3)
    with pytest.raises(IndexError):
        tree.get(3)


def test_apply_invalid_range_raises():
    tree = DualSegmentTree(_add, 0, 3)
    with pytest.raises(IndexError):
        tree.apply(2, 1, 5)
    with pytest.raises(IndexError):
        tree.apply(0, 4, 5)


def test_negative_size_raises():
    with pytest.raises(ValueError):
        DualSegmentTree(_add, 0, -1)