"""Singly linked lists and in-place reversal."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class Node:
    """One cell of a singly linked list."""

    data: Any
    next: Node | None = None

    def __iter__(self) -> Iterator[Any]:
        node: Node | None = self
        while node is not None:
            yield node.data
            node = node.next


def from_iterable(values: Iterable[Any]) -> Node | None:
    """Link the values in order and return the head, or None if there are none."""
    head: Node | None = None
    tail: Node | None = None
    for value in values:
        node = Node(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def to_list(head: Node | None) -> list[Any]:
    """Return the values of the list starting at ``head``."""
    return [] if head is None else list(head)


def reverse(head: Node | None) -> Node | None:
    """Reverse the list in place and return its new head."""
    previous: Node | None = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous