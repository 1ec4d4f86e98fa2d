"""Command line entry point: solve the tour of a TSPLIB file and report timing."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Sequence

from tspbound.parallel import solve_parallel
from tspbound.solver import NO_COST, solve
from tspbound.tsplib import distance_matrix, parse_tsplib

_PROG = "tspbound"


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=_PROG, description="Shortest travelling-salesman tour by branch and bound."
    )
    parser.add_argument("file", nargs="?", help="TSPLIB file with NODE_COORD_SECTION")
    parser.add_argument(
        "-j",
        "--workers",
        type=int,
        default=None,
        help="split the search over this many workers",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the solver on the file named in ``argv`` and print the result."""
    args = _parser().parse_args(argv)
    if args.file is None:
        print(f"Uso: {_PROG} archivo.tsp", file=sys.stderr)
        return 1

    try:
        adj = distance_matrix(parse_tsplib(args.file))
        start = time.perf_counter()
        if args.workers is None:
            cost = solve(adj)
        else:
            cost = solve_parallel(adj, args.workers)
        elapsed = time.perf_counter() - start
    except (OSError, ValueError) as exc:
        print(f"{_PROG}: {exc}", file=sys.stderr)
        return 1

    print(f"Archivo: {args.file}")
    print(f"Distancia mínima del TSP: {NO_COST if cost is None else cost}")
    if args.workers is None:
        print(f"Tiempo de ejecución: {elapsed} segundos")
    else:
        print(f"Tiempo de ejecución (paralelo, {args.workers} procesos): {elapsed} segundos")
    return 0


if __name__ == "__main__":
    sys.exit(main())