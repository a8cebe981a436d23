import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algolib.cumulative_sum import CumulativeSum, CumulativeSum3D


@given(st.lists(st.integers(-100, 100), max_size=20))
def test_range_sums_match_slices(values):
    cs = CumulativeSum(values)
    n = len(values)
    for l in range(n + 1):
        for r in range(l, n + 1):
            assert cs.sum(l, r) == sum(values[l:r])


@given(st.lists(st.integers(-100, 100), max_size=20))
def test_prefix_is_clamped(values):
    cs = CumulativeSum(values)
    assert cs.prefix(-1) == 0
    assert cs.prefix(len(values) + 5) == sum(values)


def test_sized_add_then_build():
    values = [0, 0, 7, 0, 3]
    cs = CumulativeSum(len(values))
    for k, v in enumerate(values):
        if v:
            cs.add(k, v)
    cs.build()
    assert [cs.sum(i, i + 1) for i in range(len(values))] == values
    assert cs.sum(0, len(values)) == sum(values)


def test_add_out_of_range_raises():
    cs = CumulativeSum(3)
    with pytest.raises(IndexError):
        cs.add(3, 1)


def _random_grid(rng, a, b, c):
    return [[[rng.randint(-9, 9) for _ in range(c)] for _ in range(b)] for _ in range(a)]


def _box_sum(grid, sx, sy, sz, gx, gy, gz):
    return sum(grid[i][j][k] for i in range(sx, gx) for j in range(sy, gy) for k in range(sz, gz))


@pytest.mark.parametrize("seed", range(5))
def test_3d_box_sums_match_brute_force(seed):
    rng = random.Random(seed)
    a, b, c = rng.randint(1, 4), rng.randint(1, 4), rng.randint(1, 4)
    grid = _random_grid(rng, a, b, c)
    cs = CumulativeSum3D(grid)
    for _ in range(30):
        sx, gx = sorted(rng.randint(0, a) for _ in range(2))
        sy, gy = sorted(rng.randint(0, b) for _ in range(2))
        sz, gz = sorted(rng.randint(0, c) for _ in range(2))
        assert cs.sum(sx, sy, sz, gx, gy, gz) == _box_sum(grid, sx, sy, sz, gx, gy, gz)


def test_3d_sized_add_matches_nested_constructor():
    rng = random.Random(42)
    grid = _random_grid(rng, 3, 2, 4)
    built = CumulativeSum3D((3, 2, 4))
    for i, plane in enumerate(grid):
        for j, row in enumerate(plane):
            for k, value in enumerate(row):
                built.add(i, j, k, value)
    built.build()
    direct = CumulativeSum3D(grid)
    assert built.sum(0, 0, 0, 3, 2, 4) == direct.sum(0, 0, 0, 3, 2, 4)
    assert built.sum(1, 0, 1, 3, 1, 3) == _box_sum(grid, 1, 0, 1, 3, 1, 3)


def test_3d_add_outside_grid_is_ignored():
    cs = CumulativeSum3D((2, 2, 2))
    cs.add(5, 0, 0, 1)
    cs.add(0, 0, 9, 1)
    cs.build()
    assert cs.sum(0, 0, 0, 2, 2, 2) == 0