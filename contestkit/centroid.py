"""Centroid decomposition of a tree."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


class CentroidDecomposition:
    """Splits a tree recursively at centroids, building the centroid tree."""

    def __init__(self, n: int, adj: Sequence[Iterable[int]], root: int = 1) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self.n = n
        self.adj = [list(neighbours) for neighbours in adj]
        if not 0 <= root < len(self.adj):
            raise IndexError(f"root {root} is outside the adjacency list")
        self.root = root
        self._removed = [False] * len(self.adj)
        self._size = [0] * len(self.adj)

    def _component_size(self, u: int) -> int:
        order: list[tuple[int, int | None]] = [(u, None)]
        for node, par in order:
            self._size[node] = 1
            for v in self.adj[node]:
                if v != par and not self._removed[v]:
                    order.append((v, node))
        for node, par in reversed(order):
            if par is not None:
                self._size[par] += self._size[node]
        return self._size[u]

    def _centroid(self, u: int, target: int) -> int:
        par = None
        while True:
            for v in self.adj[u]:
                if v != par and not self._removed[v] and self._size[v] * 2 > target:
                    par, u = u, v
                    break
            else:
                return u

    def decompose(self) -> dict[int, int | None]:
        """Parent of every centroid in the centroid tree, in the order found.

        The first centroid, of the whole tree, has parent None.
        """
        self._removed = [False] * len(self.adj)
        parents: dict[int, int | None] = {}
        stack: list[tuple[int, int | None]] = [(self.root, None)]
        while stack:
            u, parent_centroid = stack.pop()
            centroid = self._centroid(u, self._component_size(u))
            self._removed[centroid] = True
            parents[centroid] = parent_centroid
            stack.extend(
                (v, centroid) for v in reversed(self.adj[centroid]) if not self._removed[v]
            )
        return parents