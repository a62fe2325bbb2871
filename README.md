# dsexercises

Classic data-structure and algorithm exercises as small, self-contained
Python modules. Only the standard library is used.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module                 | Contents |
|------------------------|----------|
| `dsexercises.shortest` | `all_pairs_shortest(cost)`, which relaxes through every intermediate vertex, and `single_source_shortest(cost, source)`, which grows the set of settled vertices one at a time |
| `dsexercises.mst`      | `Edge`, `DisjointSet` (`find`, `union`, `add`), `kruskal`, `kruskal_components`, `prim` |
| `dsexercises.sorting`  | `heap_sort`, `counting_sort` (non-negative integers), `randomized_select`, `odd_first` |
| `dsexercises.strings`  | `failure_function`, `kmp_search`, `next_values`, `kmp_index`, `convert_digits`, `power_set` |
| `dsexercises.huffman`  | `HuffmanCode` (`encode`, `decode`), `letter_frequencies`, `build_code`, `pack_bits`, `unpack_bits`, `compress`, `decompress` |
| `dsexercises.search`   | `min_steps`, `binary_multiple`, `solve_maze` |
| `dsexercises.trees`    | `TreeNode`, `build_preorder`, `build_from_post_in`, `preorder`, `inorder`, `postorder`, their `*_iterative` versions, `shape`, `leaf_count`, `height` |
| `dsexercises.linked`   | `Node`, `from_iterable`, `to_list`, `reverse` |
| `dsexercises.lift`     | `Character`, `max_reach` (three characters who move, lift and throw along a ray) |
| `dsexercises.sparse`   | `Term`, `SparseMatrix` with `from_dense`, `to_dense`, `add`, `subtract`, `transpose`, `multiply` |

Some details worth knowing:

- `single_source_shortest` settles at most `n - 2` vertices and never picks a
  vertex whose tentative distance is 9999 or more.
- In `kruskal` and `kruskal_components` vertices are numbered from 1; `prim`
  uses 0-based matrix indices, treats weights of 1000 or more as missing
  edges, returns each vertex's parent (`None` for the start) and raises
  `ValueError` for a disconnected graph.
- `kmp_index` accepts any text character whenever the match restarts at
  pattern position 0, so the first pattern character acts as a wildcard.
- `convert_digits` reads every character as one decimal position, counting
  non-digits as zero; a leading minus negates the result and shifts every
  position down by one.
- `power_set` yields tuples, leaving elements out before taking them in.
- `solve_maze` moves in eight directions over a grid where `0` is open, and
  returns the path as a list of `(row, column)` cells or `None`.
- `compress` keeps only lowercase letters; its output is a little-endian
  header (bit count and 26 letter counts) followed by the packed code bits.

## Examples

```python
from dsexercises.strings import kmp_search, power_set
from dsexercises.search import min_steps, binary_multiple
from dsexercises.sorting import heap_sort
from dsexercises.linked import from_iterable, reverse, to_list

kmp_search("abababcd", "abcd")              # 4
min_steps(5, 17)                            # 4
binary_multiple(2)                          # 10
heap_sort([3, 1, 2])                        # [1, 2, 3]
to_list(reverse(from_iterable([1, 2, 3])))  # [3, 2, 1]
list(power_set("ab"))                       # [(), ('b',), ('a',), ('a', 'b')]
```

```python
from dsexercises.sparse import SparseMatrix

a = SparseMatrix.from_dense([[1, 0], [0, 2]])
b = SparseMatrix.from_dense([[0, 3], [4, 0]])
a.multiply(b).to_dense()                    # [[0, 3], [8, 0]]
```

```python
from dsexercises.huffman import compress, decompress

decompress(compress("abracadabra"))         # 'abracadabra'
```

## Command-line tools

```
dsexercises-shortest
dsexercises-shortest --source 0
dsexercises-search steps
dsexercises-search multiple
dsexercises-lift
```

- `dsexercises-shortest` prints the all-pairs distance matrix of a built-in
  six-vertex graph, or with `--source N` the distances from vertex `N` only.
- `dsexercises-search steps` reads `start end` pairs from standard input and
  prints the fewest moves (step by one or double) for each pair.
- `dsexercises-search multiple` reads integers from standard input up to the
  first `0` and prints, for each, a multiple written only with 0 and 1.
- `dsexercises-lift` reads nine integers from standard input — position,
  movement range and throwing range of three characters — and prints the
  farthest position any of them can reach.

## What is not included

The trees, Huffman, sparse-matrix, spanning-tree, sorting and string modules
are libraries only: there is no interactive menu or command for them, and
`compress`/`decompress` work on strings and bytes without reading or writing
files themselves.