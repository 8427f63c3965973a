"""Lowest common ancestors by binary lifting."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any


class LCA:
    """Binary-lifting ancestor tables for a tree over nodes ``1..n``.

    Node 0 serves as the sentinel above the root.
    """

    def __init__(self, n: int = 0, adj: Sequence[Iterable[int]] | None = None) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self.n = n
        capacity = n + 10
        self._log = capacity.bit_length()
        self._adj: list[list[Any]] = [list(x) for x in adj] if adj is not None else []
        self._adj.extend([] for _ in range(capacity - len(self._adj)))
        self._reset()

    def _reset(self) -> None:
        size = len(self._adj)
        self.depth = [0] * size
        self._up = [[0] * self._log for _ in range(size)]

    def _check(self, u: int) -> None:
        if not 0 <= u < len(self._adj):
            raise IndexError(f"node {u} is outside 0..{len(self._adj) - 1}")

    def add_edge(self, u: int, v: int) -> None:
        """Add the undirected edge ``u - v``."""
        self._check(u)
        self._check(v)
        self._adj[u].append(v)
        self._adj[v].append(u)

    def _edges(self, u: int) -> Iterator[tuple[int, Any]]:
        return ((v, None) for v in self._adj[u])

    def _link(self, v: int, u: int, weight: Any) -> None:
        up = self._up
        up[v][0] = u
        for bit in range(1, self._log):
            up[v][bit] = up[up[v][bit - 1]][bit - 1]

    def build(self, root: int = 1) -> None:
        """Fill the ancestor tables for the tree rooted at ``root``."""
        self._check(root)
        self._reset()
        stack = [(root, 0)]
        while stack:
            u, p = stack.pop()
            for v, weight in self._edges(u):
                if v == p:
                    continue
                self.depth[v] = self.depth[u] + 1
                self._link(v, u, weight)
                stack.append((v, u))

    def kth_ancestor(self, u: int, k: int) -> int | None:
        """The ancestor ``k`` levels above ``u``; None if ``u`` is not that deep."""
        self._check(u)
        if k < 0:
            raise ValueError("k must be non-negative")
        if self.depth[u] < k:
            return None
        for bit in range(self._log - 1, -1, -1):
            if k >> bit & 1:
                u = self._up[u][bit]
        return u

    def lca(self, u: int, v: int) -> int:
        """Lowest common ancestor of ``u`` and ``v``."""
        self._check(u)
        self._check(v)
        if self.depth[u] < self.depth[v]:
            u, v = v, u
        u = self.kth_ancestor(u, self.depth[u] - self.depth[v])
        if u == v:
            return u
        up = self._up
        for bit in range(self._log - 1, -1, -1):
            if up[u][bit] != up[v][bit]:
                u, v = up[u][bit], up[v][bit]
        return up[u][0]

    def distance(self, u: int, v: int) -> int:
        """Number of edges on the path between ``u`` and ``v``."""
        top = self.lca(u, v)
        return self.depth[u] + self.depth[v] - 2 * self.depth[top]