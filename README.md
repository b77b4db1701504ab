# dsakit

A small library of classic algorithm routines, grouped by topic. It has no
dependencies beyond the standard library.

## Installation

```
pip install dsakit
```

To run the test suite, install the test extra:

```
pip install "dsakit[test]"
pytest
```

## Modules

### `dsakit.arrays`

- `find_duplicate(nums)`: the repeated value in a list of length `n` holding
  `1 .. n-1` plus one duplicate. It is worked out from the sum alone, so the
  input is not checked.
- `intersection(nums1, nums2)`: the distinct values found in both inputs, in
  ascending order.
- `max_subarray_sum(nums)`: the largest sum of a non-empty contiguous run
  (Kadane's method). Raises `ValueError` for an empty sequence.
- `max_subarray_product(nums)`: the largest product of a non-empty contiguous
  run, scanning from both ends. Raises `ValueError` for an empty sequence.

### `dsakit.dp`

- `count_coin_change(coins, amount)`: how many combinations of coins, each
  usable any number of times, add up to `amount`. Raises `ValueError` for a
  negative amount or a coin that is not positive.
- `knapsack(capacity, values, weights)`: the best total value for a 0/1
  knapsack. Raises `ValueError` for a negative capacity or mismatched lists.
- `longest_common_subsequence(text1, text2)`: the length of the LCS.
- `longest_increasing_subsequence(nums)`: the length of the longest
  non-decreasing subsequence (`0` for an empty sequence).
- `rod_cutting(length, prices, lengths)`: the best price for a rod of `length`
  cut into pieces of the given lengths, each usable any number of times; any
  length left over is wasted. Raises `ValueError` for a negative length, no
  pieces, mismatched lists or a piece length that is not positive.
- `unique_paths(rows, cols)`: the number of right/down paths from the top-left
  to the bottom-right of a grid (`0` when either size is not positive).
- `unique_paths_with_obstacles(grid)`: the same, where cells holding `1` are
  blocked. Raises `ValueError` for an empty or ragged grid.

### `dsakit.two_pointer`

- `longest_subarray_with_sum_at_most(nums, k)`: the length of the longest
  contiguous window whose sum does not exceed `k`. The sliding window is exact
  for non-negative numbers.

### `dsakit.graph`

`Graph` is a graph of integer nodes stored as adjacency lists in insertion
order:

- `add_edge(u, v, directed)`: adds `u -> v`, and `v -> u` too unless `directed`.
- `format()`: one `node -> neighbours` line per node with listed edges; `str(g)`
  gives the same text.
- `bfs(start)` and `dfs(start)`: the nodes reachable from `start`, in
  breadth-first or depth-first order.
- `shortest_path(source, target)`: a path with the fewest edges, as a list of
  nodes. Raises `ValueError` if `target` cannot be reached.

```python
from dsakit.graph import Graph

g = Graph()
g.add_edge(1, 2, False)
g.add_edge(1, 3, False)
g.add_edge(2, 4, True)

print(g.format())
# 1 -> 2 3
# 2 -> 1 4
# 3 -> 1
print(g.bfs(1))                # [1, 2, 3, 4]
print(g.dfs(1))                # [1, 2, 4, 3]
print(g.shortest_path(1, 4))   # [1, 2, 4]
```

### `dsakit.strings`

- `most_frequent_letter(text)`: the ASCII letter that occurs most often,
  ignoring case and returned in lower case. Ties go to the earliest letter in
  the alphabet; with no letters at all the answer is `"a"`.
- `permutations(nums)`: every ordering of `nums`, produced by swapping each
  element into place.
- `subsets(nums)`: every subset of `nums`, leaving each element out before
  taking it.

## Example

```python
from dsakit.arrays import max_subarray_sum
from dsakit.dp import knapsack

max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4])   # 6
knapsack(4, [1, 2, 3], [4, 5, 1])                   # 3
```

## What it does not do

`dsakit` is a library only. It has no command-line program and does not read
problems from standard input; call the functions from your own code.