"""Breadth- and depth-first search exercises."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Sequence

LIMIT = 100_000
MAX_DIGITS = 19

# Clockwise from "up", as (row, column) offsets.
_DIRECTIONS = (
    (-1, 0), (-1, -1), (0, -1), (1, -1),
    (1, 0), (1, 1), (0, 1), (-1, 1),
)


def min_steps(start: int, end: int) -> int:
    """Fewest moves from ``start`` to ``end`` stepping by one or doubling.

    Both positions and every intermediate one must lie in 0..100000.
    """
    for value in (start, end):
        if not 0 <= value <= LIMIT:
            raise ValueError(f"position {value} is outside 0..{LIMIT}")
    seen = bytearray(LIMIT + 1)
    seen[start] = 1
    queue = deque([(start, 0)])
    while queue:
        position, moves = queue.popleft()
        if position == end:
            return moves
        for following in (position * 2, position - 1, position + 1):
            if 0 <= following <= LIMIT and not seen[following]:
                seen[following] = 1
                queue.append((following, moves + 1))
    raise ValueError(f"{end} cannot be reached from {start}")


def binary_multiple(n: int) -> int:
    """Return a multiple of ``n`` written only with the digits 0 and 1.

    Candidates of up to 19 digits are explored depth first, appending 0
    before 1. Once a multiple is found no candidate is extended further, but
    candidates already pending are still checked and the last multiple among
    them wins.
    """
    if n < 1:
        raise ValueError("n must be positive")
    result = None
    found = False
    pending = [(1, 1)]
    while pending:
        value, digits = pending.pop()
        if value % n == 0:
            found = True
            result = value
            continue
        if digits >= MAX_DIGITS or found:
            continue
        pending.append((value * 10 + 1, digits + 1))
        pending.append((value * 10, digits + 1))
    if result is None:
        raise ValueError(f"no multiple of {n} within {MAX_DIGITS} digits")
    return result


def solve_maze(
    maze: Sequence[Sequence[int]],
    entry: tuple[int, int],
    exit: tuple[int, int],
) -> list[tuple[int, int]] | None:
    """Find a path through ``maze`` (0 open, non-zero wall) moving in 8 directions.

    Returns the cells from ``entry`` to ``exit`` inclusive, or None if there is
    no path. The exit may be entered even when it is marked as a wall.
    """
    grid = [list(row) for row in maze]
    if not grid or not grid[0] or any(len(row) != len(grid[0]) for row in grid):
        raise ValueError("maze must be a non-empty rectangle")
    rows, cols = len(grid), len(grid[0])
    entry, exit = tuple(entry), tuple(exit)
    for cell in (entry, exit):
        if not (0 <= cell[0] < rows and 0 <= cell[1] < cols):
            raise ValueError(f"cell {cell} is outside the maze")
    visited = [[False] * cols for _ in range(rows)]
    visited[entry[0]][entry[1]] = True
    stack = [(entry[0], entry[1], 0)]
    while stack:
        x, y, direction = stack.pop()
        while direction < len(_DIRECTIONS):
            dx, dy = _DIRECTIONS[direction]
            nx, ny = x + dx, y + dy
            if not (0 <= nx < rows and 0 <= ny < cols):
                direction += 1
                continue
            if (nx, ny) == exit:
                stack.append((x, y, direction))
                return [(r, c) for r, c, _ in stack] + [exit]
            if not grid[nx][ny] and not visited[nx][ny]:
                visited[x][y] = True
                stack.append((x, y, direction + 1))
                x, y, direction = nx, ny, 0
            else:
                direction += 1
    return None


def main(argv: Sequence[str] | None = None) -> int:
    """Answer search queries read from standard input."""
    parser = argparse.ArgumentParser(prog="search", description="Search exercises.")
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("steps", help="read 'start end' pairs, print fewest moves")
    commands.add_parser("multiple", help="read n until 0, print a 0/1 multiple")
    args = parser.parse_args(argv)
    try:
        numbers = [int(token) for token in sys.stdin.read().split()]
    except ValueError:
        parser.error("input must hold integers only")
    try:
        if args.command == "steps":
            for start, end in zip(numbers[::2], numbers[1::2]):
                print(min_steps(start, end))
        else:
            for n in numbers:
                if n == 0:
                    break
                print(binary_multiple(n))
    except ValueError as exc:
        parser.error(str(exc))
    return 0