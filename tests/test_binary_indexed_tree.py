import pytest
from hypothesis import given
from hypothesis import strategies as st

from algolib.binary_indexed_tree import BinaryIndexedTree

values_strategy = st.lists(st.integers(-50, 50), max_size=20)
nonnegative = st.lists(st.integers(0, 10), min_size=1, max_size=20)


@given(values_strategy)
def test_range_sums_match_slices(values):
    bit = BinaryIndexedTree(values)
    n = len(values)
    for l in range(n + 1):
        for r in range(l, n + 1):
            assert bit.sum(l, r) == sum(values[l:r])


@given(values_strategy, st.data())
def test_add_updates_sums(values, data):
    if not values:
        values = [0]
    bit = BinaryIndexedTree(len(values))
    for k, v in enumerate(values):
        bit.add(k, v)
    k = data.draw(st.integers(0, len(values) - 1))
    x = data.draw(st.integers(-20, 20))
    bit.add(k, x)
    values[k] += x
    assert [bit.prefix_sum(r) for r in range(len(values) + 1)] == [
        sum(values[:r]) for r in range(len(values) + 1)
    ]


@given(nonnegative, st.integers(-5, 120))
def test_lower_bound_invariant(values, x):
    bit = BinaryIndexedTree(values)
    n = len(values)
    i = bit.lower_bound(x)
    assert 0 <= i <= n
    assert i == 0 or bit.prefix_sum(i) < x
    assert i == n or bit.prefix_sum(i + 1) >= x


@given(nonnegative, st.integers(-5, 120))
def test_upper_bound_invariant(values, x):
    bit = BinaryIndexedTree(values)
    n = len(values)
    i = bit.upper_bound(x)
    assert 0 <= i <= n
    assert i == 0 or bit.prefix_sum(i) <= x
    assert i == n or bit.prefix_sum(i + 1) > x


def test_build_with_wrong_length_raises():
    bit = BinaryIndexedTree(3)
    with pytest.raises(ValueError):
        bit.build([1, 2])


def test_add_out_of_range_raises():
    bit = BinaryIndexedTree([1, 2, 3])
    with pytest.raises(IndexError):
        bit.add(-1, 5)