"""Reading TSPLIB coordinate files and building rounded distance matrices."""

from __future__ import annotations

import math
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence

_SECTION_MARKER = "NODE_COORD_SECTION"
_DIMENSION_MARKER = "DIMENSION"
_LEADING_DIGITS = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class Point:
    """A node position in the plane."""

    x: float
    y: float


def parse_tsplib(path: str | os.PathLike[str]) -> list[Point]:
    """Read the node coordinates of a TSPLIB file."""
    text = Path(path).read_text(encoding="utf-8", errors="replace")
    return parse_tsplib_text(text)


def _dimension_from(line: str) -> int | None:
    """Return the first whitespace token of the line that starts with a digit."""
    for token in line.split():
        if token[0] in "0123456789":
            match = _LEADING_DIGITS.match(token)
            if match is not None:
                return int(match.group())
    return None


def parse_tsplib_text(text: str) -> list[Point]:
    """Parse TSPLIB text, returning as many points as its DIMENSION declares.

    The header is scanned up to the ``NODE_COORD_SECTION`` line; each line
    mentioning ``DIMENSION`` sets the node count from its first numeric token.
    The section then holds ``index x y`` triples, read as whitespace-separated
    tokens.
    """
    lines = iter(text.splitlines())
    dimension = 0
    for line in lines:
        if _SECTION_MARKER in line:
            break
        if _DIMENSION_MARKER in line:
            value = _dimension_from(line)
            if value is not None:
                dimension = value

    if dimension == 0:
        return []

    tokens = iter(" ".join(lines).split())
    points: list[Point] = []
    for number in range(1, dimension + 1):
        triple = [token for _, token in zip(range(3), tokens)]
        if len(triple) < 3:
            raise ValueError(
                f"expected {dimension} node coordinates, found only {number - 1}"
            )
        index, x, y = triple
        try:
            int(index)
            points.append(Point(float(x), float(y)))
        except ValueError as exc:
            raise ValueError(f"malformed coordinate line for node {number}: {triple}") from exc
    return points


def _round_half_away(value: float) -> int:
    """Round a non-negative value to the nearest integer, halves upwards."""
    return int(math.floor(value + 0.5))


def distance_matrix(points: Iterable[Point]) -> list[list[int]]:
    """Return the matrix of Euclidean distances rounded to integers."""
    pts: Sequence[Point] = list(points)
    return [
        [
            0
            if i == j
            else _round_half_away(
                math.sqrt((a.x - b.x) * (a.x - b.x) + (a.y - b.y) * (a.y - b.y))
            )
            for j, b in enumerate(pts)
        ]
        for i, a in enumerate(pts)
    ]