# tspbound

An exact solver for the travelling salesman problem on small instances. It
reads city coordinates from a TSPLIB `.tsp` file, builds a matrix of
Euclidean distances rounded to the nearest integer, and finds the length of
the shortest round trip with a branch-and-bound search.

The search is exponential in the worst case, so it is meant for small
instances (a few dozen cities at most).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
tspbound cities.tsp
tspbound -j 4 cities.tsp
```

The command prints three lines: the file name (`Archivo: ...`), the minimum
tour length (`Distancia mínima del TSP: ...`) and the time the search took
(`Tiempo de ejecución: ... segundos`).

Without options the single-threaded search (`solve`) is used. With
`-j N` / `--workers N` the search is split over `N` worker threads
(`solve_parallel`) and the timing line names the worker count.

If no file is given, a usage line is printed to standard error and the exit
status is 1. A file that cannot be read or is malformed also gives exit
status 1 with a message on standard error. When no closed tour exists the
reported length is `2147483647`.

## Library use

```python
from tspbound.tsplib import parse_tsplib, distance_matrix
from tspbound.solver import solve
from tspbound.parallel import solve_parallel

points = parse_tsplib("cities.tsp")
adj = distance_matrix(points)

print(solve(adj))                      # single thread
print(solve_parallel(adj, workers=4))  # subtrees shared out between threads
```

### `tspbound.tsplib`

- `Point(x, y)`: a frozen dataclass holding a city position.
- `parse_tsplib(path)` reads a file; `parse_tsplib_text(text)` parses a
  string. The header is scanned up to the `NODE_COORD_SECTION` line; a line
  containing `DIMENSION` sets the city count from its first numeric token.
  After the section marker come that many `index x y` triples. If no
  dimension is declared the result is an empty list; too few or malformed
  triples raise `ValueError`.
- `distance_matrix(points)` returns a square list of lists of integers:
  Euclidean distances rounded half up, with zeros on the diagonal.

### `tspbound.solver`

A zero off-diagonal entry in the matrix means there is no edge. An empty or
non-square matrix raises `ValueError`.

- `solve(adj)` returns the cost of the shortest tour starting at city 0,
  trying neighbours cheapest first, or `None` when no closed tour exists.
- `solve_classic(adj)` tries neighbours in index order. A city chosen by one
  branch stays marked as visited for the branches tried after it at the same
  level, so the result is the cost of a real tour that may be longer than the
  optimum. Returns `None` when no closed tour is found.
- `min_costs(adj)` returns a `MinCosts` with the cheapest (`first`) and
  second cheapest (`second`) edge cost leaving each city.
- `initial_bound(costs)` is half the sum of those minima, rounded up when
  the sum is odd: the lower bound the search starts from.
- `first_min(adj, i)` and `second_min(adj, i)` give the cheapest and second
  cheapest cost for one city (`second_min` skips costs equal to the
  cheapest).
- `NO_COST` (`2**31 - 1`) stands in where a row has no such edge.

### `tspbound.parallel`

- `assign_subtrees(n, workers)` deals the second tour cities `1 .. n-1`
  round-robin: worker `k` gets every city `i` with `(i - 1) % workers == k`.
- `solve_subtrees(adj, starts)` searches the subtrees whose tours begin with
  city 0 followed by each given start city; the best cost found so far prunes
  later subtrees. Returns `None` if none holds a closed tour.
- `solve_parallel(adj, workers=None)` runs each worker's subtrees in its own
  thread and returns the minimum; `workers` defaults to the CPU count.

## What it does not do

The workers of `solve_parallel` are threads inside one Python process; there
is no spreading of the search over several processes or machines, and the
threads do not share their best cost with one another while searching. Only
coordinate files with a `NODE_COORD_SECTION` are read; explicit edge-weight
sections and other TSPLIB distance types are not supported, and the tour
itself is not reported, only its length.