"""Graph stored as linked edge lists (forward star representation)."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass
class _Edge:
    to: int
    nxt: int
    cost: int


class ForwardStarGraph:
    """Edges kept in one array, each node pointing at its latest edge.

    Nodes are ``0..n``; edge ids start at 1 and neighbours come out newest first.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self.n = n
        self._head = [-1] * (n + 1)
        self._edges: list[_Edge] = [_Edge(0, -1, 0)]

    def _check(self, u: int) -> None:
        if not 0 <= u <= self.n:
            raise IndexError(f"node {u} is outside 0..{self.n}")

    def add_edge(self, u: int, v: int, cost: int = 0) -> int:
        """Add the edge ``u -> v`` and return its id."""
        self._check(u)
        self._check(v)
        self._edges.append(_Edge(v, self._head[u], cost))
        edge_id = len(self._edges) - 1
        self._head[u] = edge_id
        return edge_id

    def add_bi_edge(self, u: int, v: int, cost: int = 0) -> tuple[int, int]:
        """Add ``u -> v`` and ``v -> u``; return both ids."""
        return self.add_edge(u, v, cost), self.add_edge(v, u, cost)

    def neighbors(self, u: int) -> Iterator[tuple[int, int, int]]:
        """Yield ``(edge_id, target, cost)`` for every edge leaving ``u``."""
        self._check(u)
        edge_id = self._head[u]
        while edge_id != -1:
            edge = self._edges[edge_id]
            yield edge_id, edge.to, edge.cost
            edge_id = edge.nxt

    def __len__(self) -> int:
        return len(self._edges) - 1