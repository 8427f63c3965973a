# contestkit

A collection of algorithms and data structures that come up again and again
in competitive programming, written as plain Python modules. The only
runtime dependency is `sortedcontainers`.

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
| `contestkit.bigint` | `BigInt`, a non-negative integer of any size stored in base 10^9 limbs; `BigIntUnderflowError` when a subtraction would go negative |
| `contestkit.number_theory` | `gcd`, `lcm`, `prime_factorization`, `ncr`, `npr`, divisor counts and sums, `phi`, `permutations`, `decimal_to_base` / `base_to_decimal`, small geometry helpers such as `dist`, `slope`, `is_triangle` |
| `contestkit.modint` | `ModInt`, an integer modulo a fixed modulus (10^9+7 by default) with inverses and powers |
| `contestkit.matrix` | `Matrix` with modular `*` and `**`; `identity`, `zero`, `fibonacci_transition`, `kth_term` |
| `contestkit.miller_rabin` | `is_probable_prime`, `mul_mod`, `pow_mod` |
| `contestkit.factors` | `Factorization`, a sieve of divisors and distinct prime divisors up to a bound |
| `contestkit.string_hash` | `DoubleHash`, polynomial hashing with two moduli over 1-based ranges |
| `contestkit.hashed_deque` | `HashedDeque` and its `HashParams`; `next_prime` |
| `contestkit.text_search` | `prefix_function`, `kmp_search`, `longest_palindromic_substring` |
| `contestkit.fenwick` | `FenwickTree`, `FenwickTree2D`, `RangeFenwickTree` (0-based positions) |
| `contestkit.lazy_segment_tree` | `LazySegmentTree` with range assignment and range minimum (1-based positions) |
| `contestkit.coordinate_compression` | `CoordinateCompressor` |
| `contestkit.kadane` | `min_subarray_sum`, `max_subarray_sum` |
| `contestkit.monotonic_stacks` | `next_greater`, `prev_greater`, `next_smaller`, `prev_smaller` |
| `contestkit.dsu` | `DisjointSet` with component listing |
| `contestkit.heap` | `Heap` ordered by any comparison (max-heap by default) |
| `contestkit.monotonic_queue` | `MonotonicStack`, `MonotonicQueue` keeping a running aggregate (maximum by default) |
| `contestkit.ordered_multiset` | `OrderedMultiset` with positional access and `order_of_key` |
| `contestkit.bst` | `BinarySearchTree` and its `Node` |
| `contestkit.convex_hull_trick` | `LineContainer`, minimum or maximum over a set of lines |
| `contestkit.graph` | `Graph`: DFS, BFS distance, cycle and bipartite checks, leaf peeling |
| `contestkit.dijkstra` | `WeightedGraph` shortest paths |
| `contestkit.floyd` | `floyd_warshall` |
| `contestkit.forward_star` | `ForwardStarGraph`, edges as linked lists |
| `contestkit.centroid` | `CentroidDecomposition` |
| `contestkit.convex_hull` | `convex_hull` (Graham scan over complex points), `cross`, `dcmp` |
| `contestkit.hld` | `HeavyLightDecomposition` with path ranges |
| `contestkit.lca` | `LCA` with binary lifting |
| `contestkit.weighted_lca` | `WeightedLCA` with path costs |
| `contestkit.mo` | `process_queries` and `RangeQuery` (Mo's ordering over arrays) |
| `contestkit.mo_tree` | `TreeMo` (Mo's ordering over tree paths) |

## Examples

```python
from contestkit.bigint import BigInt
from contestkit.number_theory import gcd, ncr
from contestkit.fenwick import FenwickTree
from contestkit.text_search import kmp_search
from contestkit.dsu import DisjointSet

print(BigInt("123456789123456789") * BigInt(1000))
print(gcd(84, 36), ncr(10, 3))    # 12 120

tree = FenwickTree(5)
tree.build([1, 2, 3, 4, 5])
print(tree.query(1, 3))           # 2 + 3 + 4 = 9

print(kmp_search("abababa", "aba"))   # [0, 2, 4]

dsu = DisjointSet(5)              # nodes 1..5
dsu.union(1, 2)
print(dsu.same(1, 2), dsu.component_count())   # True 4
```

Each module documents its indexing conventions in its docstrings; several
structures follow the 1-based node numbering that is usual for tree and
graph problems. Out-of-range positions and nodes raise `IndexError`, and
bad arguments raise `ValueError`.

## What it does not do

contestkit is a library only. It has no command-line program and does not
read problem input from standard input or files: build the structures from
your own parsed data and call their methods.