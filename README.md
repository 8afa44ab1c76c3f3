# algodrills

Short, tested solutions to classic algorithm exercises, grouped by technique.
The package is a plain library. It has no runtime dependencies.

## Install

```
pip install .
pip install ".[test]"    # to run the tests
```

## Modules

- `algodrills.search`: exhaustive search.
  - `count_simple(k, n)` and `count_better(k, n)` count the triples in `[0, k]^3` that sum to `n`.
  - `sum_bit(s, bit)` and `sum_combi(s)` sum the numbers you get by placing `+` signs between the digits of `s`.
- `algodrills.recursion`: recursion and memoisation.
  - `tribo(n)` gives the n-th tribonacci number.
  - `tribo_memo(n)` gives the list of tribonacci numbers up to `n`.
  - `count753_recursive(k)` and `count753_permutation(k)` count "753 numbers".
  - `partial_sum_exists(w, a)` checks for a subset of `a` that sums to `w`.
- `algodrills.dp`: dynamic programming.
  - `happy_max(z)`.
  - Subset-sum variants:
    - `subset_sum_pull` and `subset_sum_push`.
    - `subset_sum_within_pull` and `subset_sum_within_push`, which allow at most `k` items.
    - `subset_sum_unbounded_pull` and `subset_sum_unbounded_push`, which let each item be reused.
  - `longest_common_subsequence(s, t)`.
  - `aqua(m, a)` gives the best sum of averages over `m` contiguous groups.
  - `min_union_cost(slimes)`.
- `algodrills.greedy`: greedy methods.
  - `count_push` and `min_push`.
  - `max_pairing_numbers` and `max_pairing_points`.
  - `can_done(tasks)`, for deadline scheduling.
  - `min_cost(shops, m)`.
- `algodrills.binary_search`: binary search.
  - `ranking`, `festival_simple` and `festival_binary`.
  - `darts_simple` and `darts_binary`.
  - `count_spaced` and `cows`.
  - `count_products_at_most`, `product_th_simple` and `product_th_binary`.
  - `bisection(constants, interval)` finds a root of `A*t + B*sin(C*t*pi) = 100`.
- `algodrills.stacks`:
  - `polish(expr)` evaluates reverse Polish notation made of single digits and `+ - * /`.
  - `pairing_paren(parens)` maps each `(` index to the index of the `)` that matches it.
- `algodrills.union_find`: `UnionFind`, with the methods `root`, `is_same_set`, `unite`, `size` and `count_set`.
- `algodrills.connectivity`: union-find applications.
  - `bridges(edges)` counts the edges whose removal disconnects the graph.
  - `decay(edges)` gives the component count as edges collapse.
  - `cities(edge_sets, n)`.
- `algodrills.graph`: edge sets and adjacency lists.
  - `EdgeSet` supports `len`, indexing, `order()` and `to_adjacency_list()`.
  - `order_edge_set` and `to_adjacency_list(edges, directed=False)`.
  - `reachable_dfs` and `reachable_bfs` return the vertices reachable from a start vertex.
- `algodrills.graph_search`: graph search applications.
  - `bfs_distances`.
  - `tree`, which returns a list of `Vertex(depth, size)`.
  - `count_connected(edges, search)`, which takes `reachable_dfs` or `reachable_bfs` as the search.
  - `exists_path_by_recursive` and `exists_path_by_bfs`.
  - `is_bipartite_by_recursive` and `is_bipartite_by_bfs`.
  - `locate_start_and_goal` and `shortest_path`, for mazes given as strings.
  - `topological_sort`.

In every graph function, the vertices must be numbered `0..n-1` with no gaps.

## Example

```python
from algodrills.stacks import polish
from algodrills.union_find import UnionFind
from algodrills.recursion import tribo
from algodrills.graph import reachable_bfs
from algodrills.graph_search import count_connected

polish("34+12-*")        # -7.0

uf = UnionFind(7)
uf.unite(1, 2)
uf.unite(2, 3)
uf.is_same_set(1, 3)     # True

tribo(20)                # 35890

count_connected([(0, 1), (2, 3)], reachable_bfs)   # 2
```

## Errors

- Invalid input usually raises `ValueError`. Examples are:
  - negative arguments;
  - a malformed expression or malformed brackets;
  - vertex labels that are not sequential;
  - no solution in the darts functions;
  - `min_cost` when not enough items can be bought.
- An index or rank out of range raises `IndexError`.
- `bfs_distances` and `shortest_path` raise `algodrills.graph_search.UnreachableError` when a vertex or the goal cannot be reached.

## Not included

There is no command-line tool. Every function reads its input from its arguments. Nothing reads from standard input or from files.

## Tests

```
pytest
```