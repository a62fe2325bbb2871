"""Minimum spanning trees: Kruskal with disjoint sets and Prim on a matrix."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence
from dataclasses import dataclass

# Matrix weights at or above this value mean "no edge".
INFINITY = 1000


@dataclass(frozen=True)
class Edge:
    """An undirected weighted edge between two numbered vertices."""

    start: int
    end: int
    weight: int


class DisjointSet:
    """Union-find over a collection of hashable items."""

    def __init__(self, items: Iterable[Hashable] = ()) -> None:
        self._parent: dict[Hashable, Hashable] = {item: item for item in items}

    def __contains__(self, item: Hashable) -> bool:
        return item in self._parent

    def add(self, item: Hashable) -> None:
        self._parent.setdefault(item, item)

    def find(self, item: Hashable) -> Hashable:
        """Return the representative of the set holding ``item``."""
        if item not in self._parent:
            raise KeyError(item)
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, a: Hashable, b: Hashable) -> bool:
        """Merge the sets of ``a`` and ``b``; return False if already joined."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        self._parent[root_b] = root_a
        return True


def _as_edges(vertex_count: int, edges: Iterable[Edge | Sequence[int]]) -> list[Edge]:
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    result = []
    for edge in edges:
        if not isinstance(edge, Edge):
            edge = Edge(*edge)
        for vertex in (edge.start, edge.end):
            if not 1 <= vertex <= vertex_count:
                raise ValueError(f"vertex {vertex} is outside 1..{vertex_count}")
        result.append(edge)
    return sorted(result, key=lambda e: e.weight)


def kruskal(vertex_count: int, edges: Iterable[Edge | Sequence[int]]) -> list[Edge]:
    """Return the edges of a minimum spanning forest, lightest first.

    Vertices are numbered from 1 to ``vertex_count``.
    """
    ordered = _as_edges(vertex_count, edges)
    sets = DisjointSet(range(1, vertex_count + 1))
    tree: list[Edge] = []
    for edge in ordered:
        if len(tree) >= vertex_count - 1:
            break
        if sets.union(edge.start, edge.end):
            tree.append(edge)
    return tree


def kruskal_components(
    vertex_count: int, edges: Iterable[Edge | Sequence[int]]
) -> tuple[list[list[int]], list[Edge]]:
    """Run Kruskal with vertex lists that are appended on every merge.

    Returns the surviving vertex lists, in the order of the set that absorbed
    them, and the chosen tree edges.
    """
    ordered = _as_edges(vertex_count, edges)
    members: dict[int, list[int]] = {i: [i + 1] for i in range(vertex_count)}
    owner = {i + 1: i for i in range(vertex_count)}
    tree: list[Edge] = []
    for edge in ordered:
        first, second = owner[edge.start], owner[edge.end]
        if first == second:
            continue
        tree.append(edge)
        absorbed = members.pop(second)
        for vertex in absorbed:
            owner[vertex] = first
        members[first].extend(absorbed)
    components = [members[index] for index in sorted(members)]
    return components, tree


def prim(matrix: Sequence[Sequence[int]], start: int = 0) -> list[int | None]:
    """Return, for each vertex, its parent in a minimum spanning tree.

    Vertices are the 0-based matrix indices; the start vertex has no parent.
    Raises ValueError if the graph is not connected.
    """
    rows = [list(row) for row in matrix]
    size = len(rows)
    if any(len(row) != size for row in rows):
        raise ValueError("adjacency matrix must be square")
    if not 0 <= start < size:
        raise ValueError(f"start {start} is outside 0..{size - 1}")
    parent: list[int | None] = [start] * size
    parent[start] = None
    lowcost = list(rows[start])
    in_tree = {start}
    for _ in range(size - 1):
        candidates = [
            (cost, vertex)
            for vertex, cost in enumerate(lowcost)
            if vertex not in in_tree and cost < INFINITY
        ]
        if not candidates:
            raise ValueError("graph is not connected")
        _, nearest = min(candidates)
        in_tree.add(nearest)
        for vertex, weight in enumerate(rows[nearest]):
            if vertex not in in_tree and weight < lowcost[vertex]:
                lowcost[vertex] = weight
                parent[vertex] = nearest
    return parent