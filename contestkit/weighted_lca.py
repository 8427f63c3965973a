"""Binary lifting over a weighted tree, summing edge weights along paths."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from contestkit.lca import LCA


class WeightedLCA(LCA):
    """Ancestor and path-cost tables for a weighted tree over nodes ``1..n``."""

    def __init__(self, n: int) -> None:
        super().__init__(n)

    def _reset(self) -> None:
        super()._reset()
        self._cost = [[0] * self._log for _ in range(len(self._adj))]

    def add_edge(self, u: int, v: int, w: Any) -> None:
        """Add the undirected edge ``u - v`` of weight ``w``."""
        self._check(u)
        self._check(v)
        self._adj[u].append((v, w))
        self._adj[v].append((u, w))

    def _edges(self, u: int) -> Iterator[tuple[int, Any]]:
        return iter(self._adj[u])

    def _link(self, v: int, u: int, weight: Any) -> None:
        super()._link(v, u, weight)
        up, cost = self._up, self._cost
        cost[v][0] = weight
        for bit in range(1, self._log):
            cost[v][bit] = cost[v][bit - 1] + cost[up[v][bit - 1]][bit - 1]

    def build(self, root: int = 1) -> None:
        """Fill the ancestor and cost tables for the tree rooted at ``root``."""
        super().build(root)

    def kth_ancestor(self, u: int, k: int) -> Any:
        """The ancestor ``k`` levels above ``u``."""
        return super().kth_ancestor(u, k)

    def lca(self, u: int, v: int) -> int:
        """Lowest common ancestor of ``u`` and ``v``."""
        return super().lca(u, v)

    def climb_cost(self, u: int, steps: int) -> Any:
        """Total weight of the ``steps`` edges above ``u``; None if too few."""
        self._check(u)
        if steps < 0:
            raise ValueError("steps must be non-negative")
        if self.depth[u] < steps:
            return None
        total = 0
        for bit in range(self._log):
            if steps >> bit & 1:
                total += self._cost[u][bit]
                u = self._up[u][bit]
        return total

    def path_cost(self, u: int, v: int) -> Any:
        """Total weight of the path between ``u`` and ``v``."""
        top = self.lca(u, v)
        return self.climb_cost(u, self.depth[u] - self.depth[top]) + self.climb_cost(
            v, self.depth[v] - self.depth[top]
        )