"""Heavy-light decomposition of a rooted tree into position ranges."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


class HeavyLightDecomposition:
    """Splits a tree into heavy chains laid out on consecutive positions.

    Nodes are numbered from 1; positions start at 1 in the order of a
    depth-first walk that always visits the heavy child first.
    """

    def __init__(
        self,
        n: int,
        adj: Sequence[Iterable[int]],
        root: int = 1,
        values_on_edges: bool = False,
    ) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self.n = n
        self.values_on_edges = values_on_edges
        self.adj = [list(neighbours) for neighbours in adj]
        size = max(n + 1, len(self.adj))
        self.adj.extend([] for _ in range(size - len(self.adj)))
        if not 0 <= root < size:
            raise IndexError(f"root {root} is outside the tree")
        self.root = root
        self.depth = [0] * size
        self.parent: list[int | None] = [None] * size
        self.subtree_size = [0] * size
        self.heavy: list[int | None] = [None] * size
        self.head = [0] * size
        self.position = [0] * size
        self._measure()
        self._lay_out()

    def _measure(self) -> None:
        order = []
        stack = [self.root]
        while stack:
            u = stack.pop()
            order.append(u)
            for v in self.adj[u]:
                if v == self.parent[u]:
                    continue
                self.parent[v] = u
                self.depth[v] = self.depth[u] + 1
                stack.append(v)
        for u in reversed(order):
            total, best = 1, 0
            for v in self.adj[u]:
                if v == self.parent[u]:
                    continue
                total += self.subtree_size[v]
                if self.subtree_size[v] > best:
                    best = self.subtree_size[v]
                    self.heavy[u] = v
            self.subtree_size[u] = total

    def _lay_out(self) -> None:
        next_position = 1
        self.head[self.root] = self.root
        stack = [self.root]
        while stack:
            u = stack.pop()
            self.position[u] = next_position
            next_position += 1
            heavy = self.heavy[u]
            light = [v for v in self.adj[u] if v != self.parent[u] and v != heavy]
            for v in reversed(light):
                self.head[v] = v
                stack.append(v)
            if heavy is not None:
                self.head[heavy] = self.head[u]
                stack.append(heavy)

    def _check(self, u: int) -> None:
        if not 0 <= u < len(self.position) or self.position[u] == 0:
            raise IndexError(f"node {u} is not in the tree")

    def lca(self, u: int, v: int) -> int:
        """Lowest common ancestor of ``u`` and ``v``."""
        self._check(u)
        self._check(v)
        head, depth, parent = self.head, self.depth, self.parent
        while head[u] != head[v]:
            if depth[head[u]] < depth[head[v]]:
                u, v = v, u
            u = parent[head[u]]
        return u if depth[u] < depth[v] else v

    def _lower_first(self, u: int, v: int) -> tuple[int, int]:
        head, depth = self.head, self.depth
        if depth[head[u]] < depth[head[v]] or (head[u] == head[v] and depth[u] < depth[v]):
            return v, u
        return u, v

    def path_ranges(self, u: int, v: int) -> list[tuple[int, int]]:
        """Position ranges ``(low, high)`` that together cover the path ``u..v``.

        With values on edges the lowest common ancestor is left out.
        """
        self._check(u)
        self._check(v)
        ranges = []
        while self.head[u] != self.head[v]:
            u, v = self._lower_first(u, v)
            ranges.append((self.position[self.head[u]], self.position[u]))
            u = self.parent[self.head[u]]
        u, v = self._lower_first(u, v)
        if not self.values_on_edges:
            ranges.append((self.position[v], self.position[u]))
        elif u != v:
            ranges.append((self.position[v] + 1, self.position[u]))
        return ranges

    def edge_child(self, u: int, v: int) -> int:
        """The lower endpoint of the edge between ``u`` and ``v``."""
        self._check(u)
        self._check(v)
        return u if self.parent[u] == v else v