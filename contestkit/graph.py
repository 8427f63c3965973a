"""Unweighted graph over nodes ``1..n`` with the classic traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Mapping


class Graph:
    """Adjacency-list graph; edges are undirected unless asked otherwise."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self.n = n
        self._adj: list[list[int]] = [[] for _ in range(n + 1)]
        self._deg = [0] * (n + 1)

    def _check(self, u: int) -> None:
        if not 1 <= u <= self.n:
            raise IndexError(f"node {u} is outside 1..{self.n}")

    def add_edge(self, u: int, v: int, directed: bool = False) -> None:
        """Add the edge ``u -> v``, and ``v -> u`` unless ``directed``."""
        self._check(u)
        self._check(v)
        self._adj[u].append(v)
        self._deg[u] += 1
        if not directed:
            self._adj[v].append(u)
            self._deg[v] += 1

    def remove_edge(self, u: int, v: int) -> None:
        """Remove one undirected edge between ``u`` and ``v``."""
        self._check(u)
        self._check(v)
        if v not in self._adj[u] or u not in self._adj[v]:
            raise ValueError(f"no edge between {u} and {v}")
        self._adj[u].remove(v)
        self._adj[v].remove(u)
        self._deg[u] -= 1
        self._deg[v] -= 1

    def neighbors(self, u: int) -> list[int]:
        """Neighbours of ``u`` in insertion order."""
        self._check(u)
        return list(self._adj[u])

    def dfs(self, root: int) -> tuple[dict[int, int | None], dict[int, int]]:
        """Depth-first search from ``root``: parent and depth of every reached node.

        Both dictionaries list nodes in visiting order; the root's parent is None.
        """
        self._check(root)
        parent: dict[int, int | None] = {root: None}
        depth = {root: 0}
        path = [root]
        stack = [iter(self._adj[root])]
        while stack:
            for nxt in stack[-1]:
                if nxt not in parent:
                    parent[nxt] = path[-1]
                    depth[nxt] = depth[path[-1]] + 1
                    path.append(nxt)
                    stack.append(iter(self._adj[nxt]))
                    break
            else:
                stack.pop()
                path.pop()
        return parent, depth

    def has_cycle(self, start: int) -> bool:
        """Whether the undirected component of ``start`` holds a cycle."""
        self._check(start)
        visited = {start}
        stack = [(start, None, iter(self._adj[start]))]
        while stack:
            node, par, neighbours = stack[-1]
            for nxt in neighbours:
                if nxt not in visited:
                    visited.add(nxt)
                    stack.append((nxt, node, iter(self._adj[nxt])))
                    break
                if nxt != par:
                    return True
            else:
                stack.pop()
        return False

    def path_to_root(self, node: int, parents: Mapping[int, int | None]) -> list[int]:
        """Nodes from ``node`` up to its root, following ``parents``."""
        if node not in parents:
            raise KeyError(node)
        path = [node]
        while True:
            par = parents[path[-1]]
            if par is None or par == path[-1]:
                return path
            if len(path) > len(parents):
                raise ValueError("parents contain a cycle")
            path.append(par)

    def leaf_peel_order(self) -> list[int]:
        """Nodes removed leaf by leaf, reversed so the innermost come first."""
        deg = list(self._deg)
        queue: deque[int] = deque()
        for node in range(1, self.n + 1):
            if deg[node] == 1:
                queue.append(node)
                deg[node] -= 1
        order = []
        while queue:
            node = queue.popleft()
            order.append(node)
            for nxt in self._adj[node]:
                deg[nxt] -= 1
                if deg[nxt] == 1:
                    queue.append(nxt)
        order.reverse()
        return order

    def bfs_distance(self, source: int, target: int) -> int | None:
        """Fewest edges from ``source`` to ``target``; None if unreachable."""
        self._check(source)
        self._check(target)
        if source == target:
            return 0
        depth = {source: 0}
        queue = deque([source])
        while queue:
            node = queue.popleft()
            for nxt in self._adj[node]:
                if nxt not in depth:
                    depth[nxt] = depth[node] + 1
                    if nxt == target:
                        return depth[nxt]
                    queue.append(nxt)
        return None

    def is_bipartite(self) -> bool:
        """Whether the nodes can be two-coloured with no edge inside a colour."""
        colour: dict[int, int] = {}
        for start in range(1, self.n + 1):
            if start in colour:
                continue
            colour[start] = -1
            queue = deque([start])
            while queue:
                node = queue.popleft()
                for nxt in self._adj[node]:
                    if nxt not in colour:
                        colour[nxt] = -colour[node]
                        queue.append(nxt)
                    elif colour[nxt] == colour[node]:
                        return False
        return True