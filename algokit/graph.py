"""Minimum-cost spanning trees by Kruskal's method over a cost matrix."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

# Weights at or above this value are treated as "no edge", as is a zero.
NO_EDGE = 999


@dataclass(frozen=True)
class Edge:
    """An edge between two 1-based vertices with its weight."""

    u: int
    v: int
    weight: int


@dataclass(frozen=True)
class SpanningTree:
    """The edges of a spanning tree in the order they were chosen."""

    edges: tuple[Edge, ...]

    @property
    def cost(self) -> int:
        """Total weight of the tree."""
        return sum(edge.weight for edge in self.edges)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self.edges)

    def __len__(self) -> int:
        return len(self.edges)


def kruskal(cost: Sequence[Sequence[int]]) -> SpanningTree:
    """Build a minimum-cost spanning tree from a square cost matrix.

    Vertices are numbered from 1. A zero entry, or one of ``NO_EDGE`` or
    more, means the two vertices are not joined. Among equal weights the
    entry that comes first in row-major order is taken first, and taking
    entry (i, j) also discards entry (j, i).
    """
    n = len(cost)
    if any(len(row) != n for row in cost):
        raise ValueError("cost matrix must be square")

    candidates = sorted(
        (weight, i, j)
        for i, row in enumerate(cost, start=1)
        for j, weight in enumerate(row, start=1)
        if weight != 0 and weight < NO_EDGE
    )

    parent: dict[int, int] = {}

    def find(vertex: int) -> int:
        while vertex in parent:
            vertex = parent[vertex]
        return vertex

    needed = max(n - 1, 0)
    discarded: set[tuple[int, int]] = set()
    edges: list[Edge] = []
    for weight, i, j in candidates:
        if len(edges) >= needed:
            break
        if (i, j) in discarded:
            continue
        discarded.add((j, i))
        root_u, root_v = find(i), find(j)
        if root_u != root_v:
            parent[root_v] = root_u
            edges.append(Edge(i, j, weight))

    if len(edges) < needed:
        raise ValueError("graph is not connected")
    return SpanningTree(tuple(edges))