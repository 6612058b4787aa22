# contestkit

A library of solutions to well-known algorithmic problems. Each one is an
ordinary function or a small class that takes plain Python data and returns
plain Python data. It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `contestkit.monotonic` | `max_strength_by_group_size`, `min_of_window_maxima`, `largest_a_rectangle`, `trapped_water` |
| `contestkit.windows` | `sliding_window_maximum`, `sliding_window_median` |
| `contestkit.strings` | `minimum_window`, `count_divisible_substrings` |
| `contestkit.counting` | `count_beautiful_integers`, `fibonacci_gcd`, `permutation_sequence`, `max_min_height` |
| `contestkit.roads` | `min_library_cost` |
| `contestkit.rangetrees` | `PrefixSumArray`, `RangeSumArray` |
| `contestkit.smallvalues` | `nested_segment_counts`, `InversionArray`, `DistinctArray` (values 1..40) |
| `contestkit.pointqueries` | `AlternatingSumArray`, `CandyArray`, `nearest_distance_minimums` |
| `contestkit.sequences` | `count_leader_pairs`, `max_weighted_increasing_subsequence` |
| `contestkit.skyline` | `skyline` |
| `contestkit.binarysearch` | `sorted_subsegment_value`, `subtree_sort_value` |
| `contestkit.costquery` | `CostQuery` |
| `contestkit.escape` | `find_escape` |
| `contestkit.trees` | `milk_visits`, `run_road_total`, `count_similar_pairs` |
| `contestkit.bridges` | `bridge_counts` |

## Examples

```python
from contestkit.monotonic import trapped_water
from contestkit.windows import sliding_window_maximum
from contestkit.strings import minimum_window
from contestkit.counting import permutation_sequence, fibonacci_gcd
from contestkit.skyline import skyline
from contestkit.bridges import bridge_counts

trapped_water([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])   # 6
sliding_window_maximum([1, 3, -1, -3, 5, 3, 6, 7], 3)  # [3, 3, 5, 5, 6, 7]
minimum_window("ADOBECODEBANC", "ABC")                 # "BANC"
permutation_sequence(3, 3)                             # "213"
fibonacci_gcd(12, 18, 1000)                            # 8, i.e. F(6)

skyline([(2, 9, 10), (3, 7, 15), (5, 12, 12), (15, 20, 10), (19, 24, 8)])
# [(2, 10), (3, 15), (7, 12), (12, 0), (15, 10), (20, 8), (24, 0)]

bridge_counts(3, [(0, 1), (1, 2), (2, 0)])             # [1, 2, 0]
```

Classes that answer queries against a changing array keep their state between
calls:

```python
from contestkit.rangetrees import RangeSumArray

arr = RangeSumArray([1, 2, 3, 4])
arr.add(1, 2, 10)
arr.assign(3, 4, 0)
arr.sum(1, 4)   # 23
```

## Conventions

- The array classes (`PrefixSumArray`, `RangeSumArray`, `InversionArray`,
  `DistinctArray`, `AlternatingSumArray`, `CandyArray`) take 1-based positions,
  and their ranges are inclusive on both ends. So do the range queries of
  `count_divisible_substrings` and `nearest_distance_minimums`.
- Tree functions in `contestkit.trees`, `contestkit.costquery` and
  `subtree_sort_value` number nodes 1..n.
- `bridge_counts` numbers nodes 0..n-1, and `sorted_subsegment_value` uses
  0-based indices.
- Invalid arguments raise `ValueError` or `IndexError`.

## What it does not do

contestkit is a library only. It has no command-line tool and does not read
problem input from files or standard input, nor write answers out; parsing
input and printing results is left to the caller.