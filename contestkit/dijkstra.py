"""Single-source shortest paths with non-negative weights."""

from __future__ import annotations

import heapq
from collections.abc import Iterable


class WeightedGraph:
    """Weighted graph over nodes ``0..n-1``; edges are undirected by default."""

    def __init__(
        self,
        n: int,
        edges: Iterable[tuple[int, int, int]] = (),
        undirected: bool = True,
    ) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self.n = n
        self.undirected = undirected
        self._adj: list[list[tuple[int, int]]] = [[] for _ in range(n)]
        for u, v, w in edges:
            self.add_edge(u, v, w)

    def _check(self, u: int) -> None:
        if not 0 <= u < self.n:
            raise IndexError(f"node {u} is outside 0..{self.n - 1}")

    def add_edge(self, u: int, v: int, w: int) -> None:
        """Add an edge of weight ``w`` (both ways unless the graph is directed)."""
        self._check(u)
        self._check(v)
        if w < 0:
            raise ValueError("weights must be non-negative")
        self._adj[u].append((v, w))
        if self.undirected:
            self._adj[v].append((u, w))

    def distances(self, source: int) -> list[int | None]:
        """Shortest distance from ``source`` to every node; None if unreachable."""
        self._check(source)
        dist: list[int | None] = [None] * self.n
        dist[source] = 0
        heap = [(0, source)]
        while heap:
            cost, u = heapq.heappop(heap)
            if cost != dist[u]:
                continue
            for v, w in self._adj[u]:
                candidate = cost + w
                if dist[v] is None or candidate < dist[v]:
                    dist[v] = candidate
                    heapq.heappush(heap, (candidate, v))
        return dist

    def min_cost(self, source: int, target: int) -> int:
        """Shortest distance from ``source`` to ``target``, or -1 if unreachable."""
        self._check(target)
        cost = self.distances(source)[target]
        return -1 if cost is None else cost