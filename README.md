# cpkit

A collection of algorithms and data structures often used in competitive
programming, written as a plain Python library with no third-party
dependencies.

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
| `cpkit.modular` | `MOD` (10^9 + 7), `mod_pow`, `mod_inverse`, `mod_add`, `mod_sub`, `mod_mul`, `mod_div`, `inverse_table`, `factorial_table` |
| `cpkit.primes` | `smallest_prime_factors`, `primes_up_to` (linear sieve), `count_primes`, `is_probable_prime` (Miller-Rabin with random bases) |
| `cpkit.combinatorics` | `catalan_numbers`, `n_choose_r`, `nth_non_fibonacci`, `factorial_digit_count`, and `max_non_attacking_rooks`, `max_non_attacking_queens`, `max_non_attacking_knights`, `max_non_attacking_kings` |
| `cpkit.numeric` | `bisection`, `secant`, `circle_through_points` (returns a `Circle` with `x`, `y`, `radius`) |
| `cpkit.matrix` | `Matrix` with modular `*`, `*=`, `**`, `Matrix.identity`, and `matrix_power` |
| `cpkit.directions` | `FOUR_DIRECTIONS`, `EIGHT_DIRECTIONS`, `KNIGHT_MOVES` and the generator `neighbours` |
| `cpkit.strings` | `prefix_table`, `kmp_search` (all match positions), `rabin_karp` (first match or -1), `PrefixTrie` |
| `cpkit.dynamic` | `edit_distance`, `wildcard_match` (`?` and `*`) |
| `cpkit.digit_dp` | `digit_sum_total`, `digit_sum_between`, `count_prime_digit_sum`, `count_prime_digit_sum_between`, `count_prime_alternating_difference`, `count_difference_one` |
| `cpkit.search` | `linear_search` (index of the first match, or `None`) |
| `cpkit.graphs` | `bellman_ford`, `bfs_distances`, `floyd_warshall`, `has_negative_cycle`, `max_flow` (returns a `FlowResult` with `value` and `edges`) |
| `cpkit.lca` | `RootedForest` and `SqrtForest` for lowest common ancestor queries |
| `cpkit.geometry` | `convex_hull` (gift wrapping, keeps collinear boundary points, returns them sorted) |
| `cpkit.avl`, `cpkit.bst` | `AVLTree`, `BinarySearchTree` (optional `key`), `EmptyTreeError` |
| `cpkit.dsu` | `DisjointSet` with `find` and `union` |
| `cpkit.fenwick` | `FenwickTree` with `update` and prefix-sum `query` |
| `cpkit.segment_tree` | `SegmentTree` with a custom combine function and point assignment, `RangeAddTree` for range addition and point reads |
| `cpkit.linked_list`, `cpkit.stack`, `cpkit.fifo`, `cpkit.vector` | `LinkedList`, `Stack`, `Queue`, `Vector` containers |

## Examples

```python
from cpkit.modular import mod_pow, mod_inverse
from cpkit.primes import count_primes
from cpkit.dynamic import edit_distance
from cpkit.strings import rabin_karp
from cpkit.segment_tree import SegmentTree

mod_pow(2, 10, 1_000_000_007)        # 1024
mod_inverse(3, 11)                    # 4
count_primes(100)                     # 25
edit_distance("hello", "world")       # 4
rabin_karp("helloWorld", "World")     # 5

tree = SegmentTree([1, 2, 3, 4], lambda a, b: a + b, 0)
tree.query(1, 3)                      # 9
tree.update(0, 10)
tree.query(0, 1)                      # 12
```

Errors are raised as exceptions: asking an empty `AVLTree` or
`BinarySearchTree` for its minimum raises `EmptyTreeError`, popping an empty
`Stack`, `Queue`, `LinkedList` or `Vector` raises `IndexError`, and invalid
arguments such as a negative exponent raise `ValueError`.

## What it does not do

cpkit is a library only. It has no command-line program and reads no input
files or standard input: problems are solved by calling its functions and
classes with Python values and using what they return.