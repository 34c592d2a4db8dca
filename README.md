# cpalgos

Classic competitive-programming algorithms in plain Python, with no
dependencies beyond the standard library.

## Modules

### `cpalgos.kmp`: Knuth–Morris–Pratt string matching

- `prefix_function(pattern)` returns the failure table of `pattern`. Entry `i`
  is the length of the longest proper prefix of `pattern[:i + 1]` that is also
  a suffix of it.
- `find_occurrences(text, pattern)` returns the 0-based start index of every
  occurrence of `pattern` in `text`, overlapping ones included, in increasing
  order. An empty pattern raises `ValueError`.

```python
from cpalgos.kmp import find_occurrences

find_occurrences("abababa", "aba")   # [0, 2, 4]
```

### `cpalgos.mex`: minimum excluded value

- `find_mex(nums)` returns the smallest non-negative integer not in `nums`.
- `Mex(values)` keeps the MEX of a list up to date under point updates:
  `mex()` reads it, `update(index, value)` replaces one element (an index out
  of range raises `IndexError`).
- `MexSegmentTree(max_value)` is a minimum segment tree over the values
  `0..max_value`, each holding a position that starts at 0.
  `set(index, value)` stores a position; `find_mex(bound)` returns the smallest
  value whose position is below `bound`, or `max_value + 1` if there is none.
- `range_mex(values, queries)` answers MEX queries over subarrays offline. Each
  query is a `(left, right)` pair of 0-based inclusive indices; answers come
  back in query order. An invalid query raises `ValueError`.

```python
from cpalgos.mex import Mex, find_mex, range_mex

find_mex([0, 1, 2, 4, 5])   # 3
find_mex([1, 2, 3, 4, 5])   # 0

tracker = Mex([0, 1, 2, 4, 5])
tracker.mex()               # 3
tracker.update(3, 3)        # the list is now [0, 1, 2, 3, 5]
tracker.mex()               # 4

range_mex([0, 0, 1, 2, 4, 6], [(0, 3)])   # [3]
```

### `cpalgos.lca`: tree path queries by binary lifting

`WeightedTree(size, edges, root=0)` builds a rooted tree over nodes
`0..size-1` from `size - 1` edges given as `(u, v, weight)` triples. It raises
`ValueError` if the edges are the wrong number or do not connect every node,
and `IndexError` for a node out of range.

- `depth(node)` returns the number of edges between `node` and the root.
- `path_extremes(u, v)` returns `(minimum, maximum)` edge weight on the path
  between `u` and `v`. Asking for the path from a node to itself raises
  `ValueError`.

```python
from cpalgos.lca import WeightedTree

tree = WeightedTree(4, [(0, 1, 5), (1, 2, 2), (1, 3, 9)])
tree.depth(2)              # 2
tree.path_extremes(2, 3)   # (2, 9)
```

### `cpalgos.sorting`: textbook sorting algorithms

Every function takes an iterable and returns a new sorted list, leaving the
input unchanged:

- `bingo_sort`
- `bubble_sort`
- `bucket_sort`, for numbers in `[0, 1)`; other values raise `ValueError`
- `counting_sort` and `radix_sort`, for non-negative integers; negative values
  raise `ValueError`
- `heap_sort`
- `insertion_sort`
- `merge_sort`
- `quick_sort`
- `selection_sort`
- `shell_sort`
- `tim_sort`

The module also has `ALGORITHMS`, a dictionary from short names (`"bingo"`,
`"bubble"`, …, `"tim"`) to these functions.

```python
from cpalgos.sorting import merge_sort

merge_sort([5, 2, 9, 1])   # [1, 2, 5, 9]
```

## Installation

```
pip install .
```

With what the test suite needs:

```
pip install ".[test]"
```

## Command-line tools

Each tool reads standard input and writes to standard output.

- `cpalgos-kmp` reads a text and a pattern as two whitespace-separated tokens
  and prints the 1-based start position of every occurrence, each followed by
  a space.

  ```
  echo "abababa aba" | cpalgos-kmp      # 1 3 5
  ```

- `cpalgos-mex [VALUES ...]` prints `MEX of {...} is N` for the given integers,
  or for three built-in example sets when none are given.
  With `--queries` it instead reads a count and that many `left right` pairs
  (0-based, inclusive) and prints the MEX of each subarray of the given values
  (of `0 0 1 2 4 6` when none are given), one per line.

  ```
  cpalgos-mex 0 1 2 4 5                 # MEX of {0, 1, 2, 4, 5} is 3
  echo "1 0 3" | cpalgos-mex --queries  # 3
  ```

- `cpalgos-lca` reads `N`, then `N - 1` lines `u v weight`, then `Q`, then `Q`
  lines `u v`, with nodes numbered from 1, and prints the minimum and maximum
  edge weight on each path. A query from a node to itself prints
  `1000000000 -1000000000`.

- `cpalgos-sort [ALGORITHM]` reads a count followed by that many numbers and
  prints them sorted, each followed by a space. `ALGORITHM` is one of the
  names in `ALGORITHMS` and defaults to `quick`; with `bucket` the numbers are
  read as floats.

  ```
  echo "5 3 1 4 1 5" | cpalgos-sort merge   # 1 1 3 4 5
  ```

## Running the tests

```
pytest
```