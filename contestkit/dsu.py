"""Disjoint-set union that also tracks the members of every component."""

from __future__ import annotations


class DisjointSet:
    """Union by size with path compression over nodes ``base..base+max_nodes-1``.

    Besides the usual queries it keeps, for every component, a linked list
    of its members, so all components can be listed in linear time.
    """

    def __init__(self, max_nodes: int, base: int = 1) -> None:
        if max_nodes < 0:
            raise ValueError("max_nodes must be non-negative")
        self.base = base
        self.max_nodes = max_nodes
        total = max_nodes + base
        self._parent = list(range(total))
        self._size = [1] * total
        self._next = [-1] * total
        self._tail = list(range(total))
        self._roots = list(range(base, total))
        self._pos = [0] * total
        for slot, node in enumerate(self._roots):
            self._pos[node] = slot

    def _check(self, node: int) -> None:
        if not self.base <= node < self.base + self.max_nodes:
            raise IndexError(
                f"node {node} is outside {self.base}..{self.base + self.max_nodes - 1}"
            )

    def find(self, node: int) -> int:
        """The leader of the component holding ``node``."""
        self._check(node)
        root = node
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[node] != root:
            self._parent[node], node = root, self._parent[node]
        return root

    def same(self, u: int, v: int) -> bool:
        """Whether ``u`` and ``v`` are in the same component."""
        return self.find(u) == self.find(v)

    def union(self, u: int, v: int) -> bool:
        """Merge the components of ``u`` and ``v``; False if already merged."""
        leader_u, leader_v = self.find(u), self.find(v)
        if leader_u == leader_v:
            return False
        if self._size[leader_u] < self._size[leader_v]:
            leader_u, leader_v = leader_v, leader_u
        slot = self._pos[leader_v]
        self._size[leader_u] += self._size[leader_v]
        self._parent[leader_v] = leader_u
        self._roots[slot] = self._roots[-1]
        self._pos[self._roots[slot]] = slot
        self._roots.pop()
        self._next[self._tail[leader_u]] = leader_v
        self._tail[leader_u] = self._tail[leader_v]
        return True

    def size_of(self, u: int) -> int:
        """Number of nodes in the component holding ``u``."""
        return self._size[self.find(u)]

    def components(self) -> list[list[int]]:
        """Members of every component, each list starting with its leader."""
        result = []
        for root in self._roots:
            members = []
            node = root
            while node != -1:
                members.append(node)
                node = self._next[node]
            result.append(members)
        return result

    def component_count(self) -> int:
        """Number of components."""
        return len(self._roots)