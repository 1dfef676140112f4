# cpkit

Data structures and algorithms that come up again and again in competitive
programming, written in plain Python with no third-party dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `cpkit.segment_tree` | `SegmentTree` (point update, range query, `find`, `find_value`), `LazySegmentTree` (range update, range query, `find`, `find_value`), `DynamicSegmentTree` (lazy range update and query, nodes created only when first visited) |
| `cpkit.dsu` | `DisjointSet`, `DataDisjointSet` (a value per set, merged by an operator on union), `RollbackDisjointSet` (unions can be undone back to a version) |
| `cpkit.modint` | `ModInt` (modulus 1 000 000 007), `modint_factory(mod)` for other moduli, and the ready-made `Mint1099` and `Mint998` |
| `cpkit.mo` | `Mo` for offline range queries, with `solve` (add/remove callbacks) and `solve_rollback` (add plus save/restore callbacks) |
| `cpkit.formatting` | `format_value`, `format_indices` and `TokenReader` for whitespace-separated input |
| `cpkit.flow` | `FlowNetwork` (Dinic maximum flow) and `CostFlowNetwork` (minimum-cost maximum flow, `dinic_mcmf` or `primal_dual_mcmf`) |
| `cpkit.strings` | `prefix_function`, `z_function`, `kmp`, `Charset` with the alphabets `LOWER`, `UPPER`, `DIGIT`, `ALPHA`, `ALNUM`, `ASCII`, and `Trie`, `OrderedTrie`, `AhoCorasick` |
| `cpkit.suffix_array` | `build_suffix_array`, `build_lcp`, `SuffixArray` with substring search and `LcpTable` |
| `cpkit.gcd_queries` | a solver for rectangle-GCD queries built on `SegmentTree`, also run as a command |

Indices are 0-based and ranges are inclusive on both ends: `query(l, r)`
covers positions `l` to `r`. Segment tree methods raise `IndexError` for a
range outside the tree. `union_sets` returns the root of the merged set, or
`None` when both elements were already in the same set. `OrderedTrie.erase`
raises `KeyError` when fewer copies are stored than asked to remove.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Examples

Range sums with point additions:

```python
from cpkit.segment_tree import SegmentTree

st = SegmentTree([3, 2, 8, 5])
st.query(1, 3)   # 15
st.modify(1, 10)
st.query(1, 3)   # 25
```

Range maximum with range assignment:

```python
from cpkit.segment_tree import LazySegmentTree

st = LazySegmentTree([3, 2, 8, 5], combine=max, update=lambda old, new: new)
st.modify(1, 2, 10)
st.query(0, 3)   # 10
```

Disjoint sets with rollback:

```python
from cpkit.dsu import RollbackDisjointSet

d = RollbackDisjointSet(5)
d.union_sets(0, 1)
d.union_sets(1, 2)
d.size_of_set(0)  # 3
d.rollback()
d.size_of_set(0)  # 2
```

Modular arithmetic:

```python
from cpkit.modint import ModInt, modint_factory

ModInt(2).pow(10)            # ModInt(1024)
Mint13 = modint_factory(13)
Mint13(3) * Mint13(5)        # ModInt13(2)
```

Pattern matching:

```python
from cpkit.strings import kmp, AhoCorasick

kmp("abababa", "aba")                                # [0, 2, 4]
AhoCorasick(["a", "ab", "b"]).count_matches("abab")  # [2, 2, 2]
```

Maximum flow:

```python
from cpkit.flow import FlowNetwork

net = FlowNetwork(4, 0, 3)
net.push_edge(0, 1, 3)
net.push_edge(1, 3, 2)
net.push_edge(0, 2, 1)
net.push_edge(2, 3, 4)
net.dinic_max_flow()  # 3
```

## Command line

The rectangle-GCD solver reads a problem from standard input and prints one
answer per query:

```
cpkit-gcd-queries < input.txt
```

The input holds `N Q`, then the arrays `A` and `B` of length `N`, then `Q`
lines `h1 h2 w1 w2` (1-based, inclusive). Each answer is the GCD of
`A[i] + B[j]` over the rectangle `h1 <= i <= h2`, `w1 <= j <= w2`.

## What is not included

The flow networks are the only graph algorithms here: there is no general
graph type, traversal or shortest-path routine, and no matrix or number-theory
helpers beyond `ModInt`.