# algolib

Classic algorithms and data structures in pure Python, with no dependencies
outside the standard library. Python 3.10 or later is required.

## Installation

```
pip install algolib
```

To run the tests:

```
pip install "algolib[test]"
pytest
```

## Contents

**Range queries**
- `algolib.cumulative_sum`: `CumulativeSum` (one-dimensional prefix sums) and
  `CumulativeSum3D` (box sums over a three-dimensional grid)
- `algolib.binary_indexed_tree`: `BinaryIndexedTree` (point add, prefix sums,
  `lower_bound` / `upper_bound` over non-negative values)
- `algolib.sparse_table`: `SparseTable` (idempotent operations such as `min`)
  and `DisjointSparseTable` (any associative operation)
- `algolib.segment_tree`: `SegmentTree` (point update, range fold,
  `find_first` / `find_last`)
- `algolib.lazy_segment_tree`: `LazySegmentTree` (range actions and range folds)
- `algolib.dual_segment_tree`: `DualSegmentTree` (range actions, point reads)
- `algolib.dynamic_segment_tree`: `DynamicSegmentTree` (huge index ranges,
  one node per position set; `reset`, `max_right`, `min_left`)
- `algolib.segment_tree_beats`: `SegmentTreeBeats` (range chmin, chmax, add
  and assign, with min, max and sum queries)

**Sets and trees**
- `algolib.union_find`: `UnionFind`, `PotentialUnionFind` (differences between
  members), `PersistentArray` and `PersistentUnionFind` (cheap snapshots with `copy`)
- `algolib.trie`: `Trie` (strings over a contiguous alphabet) and `BinaryTrie`
  (multiset of fixed-width integers with a global xor)
- `algolib.slope_trick`: `SlopeTrick` (convex piecewise-linear functions)
- `algolib.link_cut_tree`: `LinkCutTree` (dynamic forest with path folds)

**Graphs**
- `algolib.steiner_tree`: `MinimumSteinerTree`
- `algolib.low_link`: `LowLink` (articulation points and bridges)
- `algolib.maximum_independent_set`: `MaximumIndependentSet` (exact, up to 63 vertices)

**Strings**
- `algolib.levenshtein`: `levenshtein_distance`
- `algolib.suffix_array`: `SuffixArray` and `lcp_array`

Ranges are half-open `[l, r)` throughout. Out-of-range positions raise
`IndexError`; invalid arguments raise `ValueError`.

## Examples

Connectivity with union-find:

```python
from algolib.union_find import UnionFind

uf = UnionFind(5)
uf.merge(0, 1)
uf.merge(1, 2)
assert uf.same(0, 2)
assert uf.size(0) == 3
```

Range minimum with a segment tree; the identity is passed as a value:

```python
from algolib.segment_tree import SegmentTree

seg = SegmentTree(min, float("inf"), [5, 3, 8, 1, 4])
assert seg.query(0, 3) == 3
seg.set(1, 9)
assert seg.query(0, 3) == 5
```

Range add and range minimum with lazy propagation:

```python
from algolib.lazy_segment_tree import LazySegmentTree

seg = LazySegmentTree(
    min, float("inf"),
    lambda x, f: x + f,   # mapping
    lambda f, g: f + g,   # composition
    0,                    # identity action
    [1, 2, 3, 4],
)
seg.apply_range(1, 3, 10)
assert seg.query(1, 3) == 12
assert seg.query(0, 4) == 1
```

A trie over lower-case words:

```python
from algolib.trie import Trie

trie = Trie()
trie.insert("apple")
assert not trie.search("app")
assert trie.start_with("app")
assert trie.count() == 1
```

Suffix array and LCP array; the empty suffix is included:

```python
from algolib.suffix_array import SuffixArray, lcp_array

sa = SuffixArray("banana")
assert list(sa) == [6, 5, 3, 1, 0, 4, 2]
assert sa.equal_range("ana") == (2, 4)
assert lcp_array(sa) == [0, 0, 1, 3, 0, 0, 2]
```

Edit distance:

```python
from algolib.levenshtein import levenshtein_distance

assert levenshtein_distance("kitten", "sitting") == 3
```

## What it does not cover

algolib has no network-flow algorithms (maximum flow, minimum-cost flow), no
double-ended priority queue, and no modular arithmetic, convolution or
polynomial / power-series routines. It is a library only and installs no
command-line tool.