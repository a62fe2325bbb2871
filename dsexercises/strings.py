"""String algorithms: two KMP variants, digit conversion and power sets."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

_DIGITS = "0123456789"


def failure_function(pattern: Sequence) -> list[int]:
    """Return the KMP failure table of ``pattern``.

    Entry ``j`` is the index of the last character of the longest proper
    prefix of ``pattern[:j + 1]`` that is also its suffix, or -1 if none.
    """
    failure = [-1] * len(pattern)
    for j in range(1, len(pattern)):
        i = failure[j - 1]
        while i >= 0 and pattern[j] != pattern[i + 1]:
            i = failure[i]
        failure[j] = i + 1 if pattern[j] == pattern[i + 1] else -1
    return failure


def kmp_search(text: Sequence, pattern: Sequence) -> int:
    """Return the index of the first occurrence of ``pattern`` in ``text``, or -1."""
    failure = failure_function(pattern)
    i = j = 0
    while i < len(text) and j < len(pattern):
        if text[i] == pattern[j]:
            i += 1
            j += 1
        elif j == 0:
            i += 1
        else:
            j = failure[j - 1] + 1
    return i - len(pattern) if j == len(pattern) else -1


def next_values(pattern: Sequence) -> list[int]:
    """Return the improved "nextval" table used by :func:`kmp_index`.

    Position 0 doubles as the restart marker, so the table starts with 0.
    """
    if not len(pattern):
        return []
    values = [0] * len(pattern)
    i, j = 1, 0
    while i < len(pattern):
        if j == 0 or pattern[i] == pattern[j]:
            values[i] = j if pattern[i] != pattern[j] else values[j]
            i += 1
            j += 1
        else:
            j = values[j]
    return values


def kmp_index(text: Sequence, pattern: Sequence, start: int = 0) -> int:
    """Search for ``pattern`` in ``text`` from ``start`` using :func:`next_values`.

    Whenever the match restarts at pattern position 0 the current text
    character is accepted without comparison, so the first pattern character
    acts as a wildcard. Returns the match index or -1.
    """
    if start < 0:
        raise ValueError("start must not be negative")
    table = next_values(pattern)
    i, j = start, 0
    while i < len(text) and j < len(pattern):
        if j == 0 or text[i] == pattern[j]:
            i += 1
            j += 1
        else:
            j = table[j]
    return i - len(pattern) if j >= len(pattern) else -1


def convert_digits(text: str) -> int:
    """Read the decimal digits of ``text`` by position, right to left.

    Every character occupies one decimal position; non-digits count as zero.
    A leading minus sign negates the result and also shifts every position
    down by one, so the last character falls below the units and is dropped.
    """
    negative = text.startswith("-")
    power = -1 if negative else 0
    total = 0
    for char in reversed(text):
        if char in _DIGITS and power >= 0:
            total += int(char) * 10**power
        power += 1
    return -total if negative else total


def power_set(items: Iterable) -> Iterator[tuple]:
    """Yield every subset of ``items`` as a tuple, leaving elements out first."""
    elements = tuple(items)

    def walk(index: int, chosen: tuple) -> Iterator[tuple]:
        if index >= len(elements):
            yield chosen
            return
        yield from walk(index + 1, chosen)
        yield from walk(index + 1, chosen + (elements[index],))

    yield from walk(0, ())