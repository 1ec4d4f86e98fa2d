"""Branch and bound search for the shortest travelling-salesman tour."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

Matrix = Sequence[Sequence[int]]

NO_COST = 2**31 - 1
"""Stand-in cost for a row that has no first or second cheapest edge."""


@dataclass(frozen=True)
class MinCosts:
    """The cheapest and second cheapest edge cost leaving each node."""

    first: tuple[int, ...]
    second: tuple[int, ...]


def _size(adj: Matrix) -> int:
    n = len(adj)
    if n == 0:
        raise ValueError("the distance matrix is empty")
    if any(len(row) != n for row in adj):
        raise ValueError("the distance matrix must be square")
    return n


def _half(value: int) -> int:
    """Halve an integer, truncating toward zero."""
    quotient = abs(value) // 2
    return quotient if value >= 0 else -quotient


def min_costs(adj: Matrix) -> MinCosts:
    """Compute the two smallest off-diagonal costs of every row."""
    _size(adj)
    firsts: list[int] = []
    seconds: list[int] = []
    for i, row in enumerate(adj):
        first = second = NO_COST
        for j, cost in enumerate(row):
            if i == j:
                continue
            if cost <= first:
                first, second = cost, first
            elif cost < second:
                second = cost
        firsts.append(first)
        seconds.append(second)
    return MinCosts(tuple(firsts), tuple(seconds))


def initial_bound(costs: MinCosts) -> int:
    """Half the summed first and second minima, rounded up when odd."""
    total = sum(f + s for f, s in zip(costs.first, costs.second))
    half = _half(total)
    return half + 1 if total & 1 else half


def first_min(adj: Matrix, i: int) -> int:
    """The cheapest edge cost leaving node ``i``."""
    return min((cost for k, cost in enumerate(adj[i]) if k != i), default=NO_COST)


def second_min(adj: Matrix, i: int) -> int:
    """The second cheapest edge cost leaving node ``i``."""
    first = second = NO_COST
    for j, cost in enumerate(adj[i]):
        if i == j:
            continue
        if cost <= first:
            first, second = cost, first
        elif cost < second and cost != first:
            second = cost
    return second


def solve(adj: Matrix) -> int | None:
    """Return the cost of the shortest tour starting at node 0.

    A zero off-diagonal entry means there is no edge. Neighbours are tried
    cheapest first. Returns ``None`` when no closed tour exists.
    """
    n = _size(adj)
    costs = min_costs(adj)
    first, second = costs.first, costs.second
    path = [0]
    visited = [False] * n
    visited[0] = True
    best: float = math.inf

    def explore(bound: int, weight: int) -> None:
        nonlocal best
        u = path[-1]
        level = len(path)
        if level == n:
            closing = adj[u][path[0]]
            if closing != 0:
                best = min(best, weight + closing)
            return

        neighbours = sorted(
            (cost, v) for v, cost in enumerate(adj[u]) if not visited[v] and cost != 0
        )
        for cost, v in neighbours:
            reduction = first[u] + first[v] if level == 1 else second[u] + first[v]
            child_bound = bound - _half(reduction)
            child_weight = weight + cost
            if child_bound + child_weight < best:
                path.append(v)
                visited[v] = True
                explore(child_bound, child_weight)
                visited[v] = False
                path.pop()

    explore(initial_bound(costs), 0)
    return None if best == math.inf else int(best)


def solve_classic(adj: Matrix) -> int | None:
    """Run the index-ordered branch and bound variant.

    Neighbours are tried in index order. A node chosen by one branch stays
    marked as visited for the branches tried after it at the same level, so
    the result is the cost of a real tour that may exceed the optimum.
    Returns ``None`` when no closed tour is found.
    """
    n = _size(adj)
    firsts = tuple(first_min(adj, i) for i in range(n))
    seconds = tuple(second_min(adj, i) for i in range(n))
    best: float = math.inf

    def explore(bound: int, weight: int, path: list[int], visited: list[bool]) -> None:
        nonlocal best
        u = path[-1]
        level = len(path)
        if level == n:
            closing = adj[u][path[0]]
            if closing != 0:
                best = min(best, weight + closing)
            return

        for v, cost in enumerate(adj[u]):
            if cost == 0 or visited[v]:
                continue
            reduction = firsts[u] + firsts[v] if level == 1 else seconds[u] + firsts[v]
            child_bound = bound - _half(reduction)
            child_weight = weight + cost
            if child_bound + child_weight < best:
                visited[v] = True
                explore(child_bound, child_weight, path + [v], visited.copy())

    start_visited = [False] * n
    start_visited[0] = True
    explore(initial_bound(MinCosts(firsts, seconds)), 0, [0], start_visited)
    return None if best == math.inf else int(best)