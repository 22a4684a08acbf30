# algokit

Classic algorithms and a few small programs in plain Python, with no
third-party dependencies.

## What is inside

| Module            | Contents |
|-------------------|----------|
| `algokit.graphs`  | `Edge`, `NegativeCycleError`, `bellman_ford`, `floyd_warshall`, `kruskal`, `format_distances`, `format_matrix` |
| `algokit.dynamic` | `egg_drop`, `fib_bottom_up`, `fib_top_down`, `knapsack` returning a `KnapsackResult`, `job_scheduling` |
| `algokit.arrays`  | `exchange_sort`, `smallest_missing`, `subarray_with_sum`, `max_activities`, `binary_search`, `boring_apartments`, `spiral_center` |
| `algokit.bank`    | `Account` with `deposit`, `withdraw` and `describe`; `InsufficientFundsError` |
| `algokit.lru`     | `LRUCache` with `get`, `put`, `len()` and `in` |
| `algokit.bignum`  | `add`, `multiply` and `factorial` on non-negative decimal digit strings |
| `algokit.puzzle`  | `FifteenPuzzle`, `Direction` and `play` |
| `algokit.chat`    | a TCP server that answers each message with its characters reversed, and a client for it |
| `algokit.cli`     | the `algokit` command |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from algokit.dynamic import egg_drop, fib_bottom_up, fib_top_down

egg_drop(2, 10)      # 4 trials in the worst case
fib_bottom_up(10)    # 55
fib_top_down(10)     # 55
```

```python
from algokit.lru import LRUCache

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)         # 1
cache.put(3, 3)      # evicts key 2, the least recently used
cache.get(2)         # None
len(cache)           # 2
```

```python
from algokit.bignum import factorial, multiply

multiply("12", "34") # "408"
factorial(5)         # "120"
```

Graph functions take a vertex count and edges given as `Edge` values or
`(source, destination, weight)` tuples. `bellman_ford` returns one distance
per vertex, with `math.inf` for unreachable vertices, and raises
`NegativeCycleError` when a negative-weight cycle is reachable from the
source. `floyd_warshall` returns the all-pairs distance matrix. `kruskal`
returns the edges of a minimum spanning tree, each with its smaller endpoint
first, and raises `ValueError` if the graph is not connected.
`format_distances` and `format_matrix` turn these results into printable
tables.

`Account.withdraw` raises `InsufficientFundsError` and leaves the balance
unchanged when the amount is larger than the balance.

## Command line

`algokit` reads whitespace-separated numbers from standard input and runs
one of these subcommands:

| Subcommand       | Input |
|------------------|-------|
| `bank`           | account number, name, type, balance, deposit, withdrawal |
| `bellman-ford`   | vertices, edge count, edges as `src dst weight`, source |
| `floyd-warshall` | vertices, edge count, edges as `src dst weight` |
| `kruskal`        | vertices, edge count, edges as `src dst weight` |
| `knapsack`       | item count, items as `weight profit`, capacity |
| `jobs`           | job count, jobs as `start duration profit` |

```
echo "3 2  0 1 4  1 2 -1  0" | algokit bellman-ford
algokit --help
```

Malformed or short input is reported on standard error with exit status 1.

The chat pair listens on and connects to TCP port 5000 by default; both take
`--port`, and the server also takes `--host`. The client sends every word it
reads from standard input and prints each reply:

```
algokit-chat-server
algokit-chat-client localhost
```

## What it does not do

The fifteen puzzle has no interactive screen and no command of its own:
`play` takes its moves from any iterable of keys (a `Direction`, an arrow-key
scan code, or `"q"` to quit) and writes the board as text to a stream you
pass in. The array puzzles, egg drop, Fibonacci and digit-string functions
are available only as library calls, not through the `algokit` command.