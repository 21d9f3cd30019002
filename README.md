# cpalgos

A small library of classic algorithms, plus solvers for a set of short
competitive-programming problems. Every function takes plain Python values
and returns a result. It needs nothing outside the standard library.

## Installation

```
pip install .
```

Use `pip install .[test]` to also get the test dependencies.

## Modules

### `cpalgos.trees`

- `TreeNode` is a dataclass with `data`, `left` and `right`.
- `insert(root, data)` inserts a value into a binary search tree and returns the root. Smaller values go left. Equal and larger values go right.
- `build_tree(values)` inserts the values in the order given. It returns `None` for no values.
- `inorder`, `preorder` and `postorder` are generators that yield the node values in their order.
- `height(root)` counts the nodes on the longest root-to-leaf path. An empty tree has height 0.
- `is_balanced(root)` is true if, at every node, the heights of the two subtrees differ by at most one.
- `ancestor_sum(n)` sums `n, n // 2, ...` down to 1. This is the sum of the labels on the path from node `n` to the root of a heap-numbered binary tree.

```python
from cpalgos.trees import build_tree, inorder, height

root = build_tree([5, 3, 8, 1, 4])
list(inorder(root))   # [1, 3, 4, 5, 8]
height(root)          # 3
```

### `cpalgos.graph`

Adjacency lists are sequences indexed by vertex number, starting at 0.

- `bfs(adj, source, visited=None)` returns the breadth-first order of the vertices reachable from `source`. If you pass a `visited` set, it is updated in place, so several searches can share it.
- `bfs_disconnected(adj)` and `dfs(adj)` return the breadth-first and depth-first visiting orders. They start a new search at each vertex not yet seen, so every component is covered.
- `add_edge(adj, s, t)` adds an undirected edge to an adjacency list.
- `dijkstra(edges, source)` takes `(source, destination, weight)` triples for a directed graph. It returns a dict that maps every node named by an edge, in sorted order, to its shortest distance from `source`. Unreachable nodes map to `math.inf`. It raises `KeyError` if `source` is not in the graph.
- `topological_sort(graph)` takes a mapping from each node to its successors and returns the nodes in topological order. Nodes that appear only as targets are included. Roots are taken in the mapping's iteration order.

```python
from cpalgos.graph import bfs_disconnected, dijkstra

bfs_disconnected([[1, 2], [0], [0], [4], [3, 5], [4]])   # [0, 1, 2, 3, 4, 5]
dijkstra([("A", "B", 4), ("A", "C", 1), ("C", "B", 2)], "A")
# {'A': 0, 'B': 3, 'C': 1}
```

### `cpalgos.bitmasking`

| Function | Returns |
| --- | --- |
| `max_xor_sum(values)` | The largest value over `x` in `values` of the sum of `x ^ y` over all `y` in `values`. Only the lowest 30 bits count. Raises `ValueError` if `values` is empty. |
| `xor_upto(n)` | `0 ^ 1 ^ ... ^ n`. |
| `mexor_mixup(a, b)` | The shortest array length with MEX `a` and XOR `b`. |
| `bacteria_count(n)` | The number of set bits in `n`. |
| `rock_and_lever_pairs(values)` | The number of pairs `i < j` with `values[i] & values[j] >= values[i] ^ values[j]`, for non-negative values. |

### `cpalgos.greedy`

- `can_defeat_dragons(strength, dragons)` takes `dragons` as `(strength, bonus)` pairs. The hero fights the weakest dragon first and must be strictly stronger to win. Each win adds the dragon's bonus.
- `can_pass_all_levels(n, x_levels, y_levels)` tells whether the two players together pass all `n` levels.
- `move_to_end(values)` returns, for each `k` from 1 to `n`, the best sum of the last `k` elements after one element has been moved to the end.
- `taxi_count(groups)` gives the fewest four-seat taxis that carry every group, with each group riding in a single taxi. It raises `ValueError` if a group size is not between 1 and 4.

### `cpalgos.arithmetic`

- `bitpp(statements)` runs the `++X`, `X++`, `--X` and `X--` statements, starting from 0, and returns the final value of `x`.
- `cheap_travel(n, m, a, b)` gives the lowest cost of `n` rides, given single tickets at `a` and `m`-ride tickets at `b`.
- `is_equilibrium(forces)` tells whether a list of 3-D force vectors sums to zero.
- `cut_ribbon(n, a, b, c)` gives the largest number of pieces of lengths `a`, `b` and `c` that make up `n` exactly. It returns 0 if there is none.
- `max_expression(a, b, c)` gives the largest value you can make from `a`, `b` and `c` in that order, using `+`, `*` and brackets.
- `three_decks(a, b, c)` tells whether cards moved from deck `c` can even out the decks `a <= b <= c`.
- `sieve(n)` returns a list of primality flags for `0..n`.
- `is_t_prime(x)` tells whether `x` has exactly three divisors, that is, whether it is the square of a prime. Only primes up to 10**6 are checked.
- `lantern_radius(length, positions)` gives, as a float, the smallest light radius that lights the whole street. It raises `ValueError` if there are no lanterns.

### `cpalgos.strings`

- `fix_caps_lock(word)` undoes an accidental caps lock. A word that is all upper case, or that is lower case only in its first letter, has the case of every letter flipped. Any other word is returned unchanged.
- `football_winner(goals)` takes the name of the team that scored each goal and returns the team that scored more. It raises `ValueError` if there were no goals.
- `register_names(names)` is a generator that yields one response per request. A new name gets `OK`. A repeated name gets the name with the next free number appended.

```python
from cpalgos.strings import fix_caps_lock, register_names

fix_caps_lock("cAPS")                              # 'Caps'
list(register_names(["abacaba", "acaba", "abacaba"]))
# ['OK', 'OK', 'abacaba1']
```

## What it does not do

The package is a library only. It has no command-line program and does not read problem input from standard input. You parse the input yourself and pass the values to the functions.

## Running the tests

```
pytest
```