"""Shortest paths over a dense cost matrix."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

DEFAULT_COST: tuple[tuple[int, ...], ...] = (
    (0, 50, 10, 1000, 45, 1000),
    (1000, 0, 15, 1000, 10, 1000),
    (20, 1000, 0, 15, 1000, 1000),
    (1000, 20, 1000, 0, 35, 1000),
    (1000, 1000, 30, 1000, 0, 1000),
    (1000, 1000, 1000, 3, 1000, 0),
)

# Vertices whose tentative distance reaches this value are never chosen.
UNREACHABLE_LIMIT = 9999


def _square(cost: Sequence[Sequence[int]]) -> list[list[int]]:
    rows = [list(row) for row in cost]
    size = len(rows)
    if any(len(row) != size for row in rows):
        raise ValueError("cost matrix must be square")
    return rows


def all_pairs_shortest(cost: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the matrix of shortest distances between every pair of vertices."""
    dist = _square(cost)
    for k, via in enumerate(dist):
        for row in dist:
            through = row[k]
            for j, weight in enumerate(via):
                if through + weight < row[j]:
                    row[j] = through + weight
    return dist


def single_source_shortest(cost: Sequence[Sequence[int]], source: int) -> list[int]:
    """Return the shortest distance from ``source`` to every vertex."""
    matrix = _square(cost)
    size = len(matrix)
    if not 0 <= source < size:
        raise ValueError(f"source {source} is outside 0..{size - 1}")
    distance = list(matrix[source])
    distance[source] = 0
    found = {source}
    for _ in range(size - 2):
        candidates = [
            (dist, vertex)
            for vertex, dist in enumerate(distance)
            if vertex not in found and dist < UNREACHABLE_LIMIT
        ]
        if not candidates:
            continue
        _, nearest = min(candidates)
        found.add(nearest)
        for vertex, weight in enumerate(matrix[nearest]):
            if vertex not in found and distance[nearest] + weight < distance[vertex]:
                distance[vertex] = distance[nearest] + weight
    return distance


def main(argv: Sequence[str] | None = None) -> int:
    """Print shortest distances for the built-in cost matrix."""
    parser = argparse.ArgumentParser(
        prog="shortest",
        description="Shortest paths over the built-in six-vertex graph.",
    )
    parser.add_argument(
        "--source",
        type=int,
        default=None,
        help="print distances from this vertex only",
    )
    args = parser.parse_args(argv)
    if args.source is None:
        for row in all_pairs_shortest(DEFAULT_COST):
            print(" ".join(map(str, row)))
    else:
        try:
            distances = single_source_shortest(DEFAULT_COST, args.source)
        except ValueError as exc:
            parser.error(str(exc))
        print(" ".join(map(str, distances)))
    return 0