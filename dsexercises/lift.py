"""Three characters on a ray who move, lift and throw to reach the farthest point."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

PARTY_SIZE = 3


@dataclass(frozen=True)
class Character:
    """Starting position, movement range and throwing range of one character."""

    position: int
    move_range: int
    throw_range: int


def max_reach(characters: Iterable[Character]) -> int:
    """Return the largest position any of the three characters can reach.

    Each character may move, lift and throw at most once. Moves must end on a
    free point and, unless they use the full range, next to someone. A lift
    takes a character one step away, who then shares the lifter's position;
    a character already held may be taken over by another lifter, and the
    previous holder can still throw it. Throws land on a free point that is
    next to someone or exactly the full throwing range away.
    """
    party = list(characters)
    if len(party) != PARTY_SIZE:
        raise ValueError(f"exactly {PARTY_SIZE} characters are needed")
    if len({c.position for c in party}) != PARTY_SIZE:
        raise ValueError("characters must start on different positions")
    if any(c.move_range < 0 or c.throw_range < 0 for c in party):
        raise ValueError("ranges must not be negative")

    pos = [c.position for c in party]
    can_move = [True] * PARTY_SIZE
    can_lift = [True] * PARTY_SIZE
    can_throw = [True] * PARTY_SIZE
    carried_by: list[int | None] = [None] * PARTY_SIZE
    carrying: list[int | None] = [None] * PARTY_SIZE
    best = max(pos)

    def someone_near(point: int) -> bool:
        return any(abs(p - point) <= 1 for p in pos)

    def explore() -> None:
        nonlocal best
        best = max(best, *pos)

        for i, person in enumerate(party):
            if not (can_move[i] and carried_by[i] is None and carrying[i] is None):
                continue
            reach = person.move_range
            for step in range(-reach, reach + 1):
                target = pos[i] + step
                if target in pos:
                    continue
                if not someone_near(target) and step != reach:
                    continue
                can_move[i] = False
                pos[i] += step
                explore()
                can_move[i] = True
                pos[i] -= step

        for i in range(PARTY_SIZE):
            for j in range(PARTY_SIZE):
                if i == j:
                    continue
                if (
                    can_lift[i]
                    and abs(pos[i] - pos[j]) == 1
                    and carried_by[i] is None
                    and carrying[i] is None
                ):
                    held_at = pos[j]
                    can_lift[i] = False
                    carrying[i] = j
                    carried_by[j] = i
                    pos[j] = pos[i]
                    explore()
                    can_lift[i] = True
                    carrying[i] = None
                    carried_by[j] = None
                    pos[j] = held_at

        for i, person in enumerate(party):
            if not (can_throw[i] and carrying[i] is not None and carried_by[i] is None):
                continue
            reach = person.throw_range
            for step in range(-reach, reach + 1):
                held = carrying[i]
                target = pos[held] + step
                if target in pos:
                    continue
                if not (someone_near(target) or step == reach):
                    continue
                can_throw[i] = False
                carrying[i] = None
                carried_by[held] = None
                pos[held] += step
                explore()
                can_throw[i] = True
                carrying[i] = held
                carried_by[held] = i
                pos[held] -= step

    explore()
    return best


def main(argv: Sequence[str] | None = None) -> int:
    """Read three 'position move throw' lines from standard input, print the reach."""
    parser = argparse.ArgumentParser(
        prog="lift",
        description="Farthest point three characters can reach by moving, lifting and throwing.",
    )
    parser.parse_args(argv)
    try:
        numbers = [int(token) for token in sys.stdin.read().split()]
    except ValueError:
        parser.error("input must hold integers only")
    if len(numbers) < 3 * PARTY_SIZE:
        parser.error(f"expected {3 * PARTY_SIZE} integers")
    party = [
        Character(*numbers[index : index + 3]) for index in range(0, 3 * PARTY_SIZE, 3)
    ]
    try:
        print(max_reach(party))
    except ValueError as exc:
        parser.error(str(exc))
    return 0