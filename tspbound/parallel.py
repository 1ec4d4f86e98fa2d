"""Branch and bound split into independent subtrees handed out to workers."""

from __future__ import annotations

import math
import os
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Sequence

from tspbound.solver import initial_bound, min_costs

Matrix = Sequence[Sequence[int]]


def _half(value: int) -> int:
    """Halve an integer, truncating toward zero."""
    quotient = abs(value) // 2
    return quotient if value >= 0 else -quotient


def assign_subtrees(n: int, workers: int) -> list[list[int]]:
    """Deal the second tour nodes ``1 .. n-1`` round-robin to ``workers`` workers.

    Worker ``k`` receives every node ``i`` with ``(i - 1) % workers == k``.
    """
    if workers < 1:
        raise ValueError("at least one worker is required")
    if n < 0:
        raise ValueError("the number of nodes cannot be negative")
    return [[i for i in range(1, n) if (i - 1) % workers == rank] for rank in range(workers)]


def solve_subtrees(adj: Matrix, starts: Iterable[int]) -> int | None:
    """Search the subtrees whose tours begin with node 0 followed by each start.

    The best cost found in one subtree prunes the ones searched after it.
    Neighbours are tried cheapest first. Returns ``None`` when none of the
    subtrees holds a closed tour.
    """
    costs = min_costs(adj)
    n = len(adj)
    start_nodes = list(starts)
    for node in start_nodes:
        if not 1 <= node < n:
            raise ValueError(f"start node {node} is outside 1..{n - 1}")

    first, second = costs.first, costs.second
    root_bound = initial_bound(costs)
    best: float = math.inf

    def explore(path: list[int], visited: list[bool], bound: int, weight: int) -> None:
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
                explore(path, visited, child_bound, child_weight)
                visited[v] = False
                path.pop()

    for node in start_nodes:
        cost = adj[0][node]
        if cost == 0:
            continue
        visited = [False] * n
        visited[0] = visited[node] = True
        bound = root_bound - _half(first[0] + first[node])
        explore([0, node], visited, bound, cost)

    return None if best == math.inf else int(best)


def solve_parallel(adj: Matrix, workers: int | None = None) -> int | None:
    """Split the search over worker threads and keep the cheapest tour found.

    Each worker searches its statically assigned subtrees on its own; the
    results are reduced to their minimum. ``workers`` defaults to the CPU
    count. Returns ``None`` when no closed tour is found.
    """
    count = workers if workers is not None else (os.cpu_count() or 1)
    assignments = assign_subtrees(len(adj), count)
    with ThreadPoolExecutor(max_workers=count) as pool:
        results = list(pool.map(lambda starts: solve_subtrees(adj, starts), assignments))
    found = [result for result in results if result is not None]
    return min(found) if found else None