"""Offline path queries on a tree with Mo's ordering over an Euler tour."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Sequence
from typing import Any

from contestkit.lca import LCA


class TreeMo:
    """Answers path queries by walking an entry/exit Euler tour of the tree."""

    def __init__(self, n: int, adj: Sequence[Iterable[int]], root: int = 1) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self.n = n
        self.adj = [list(neighbours) for neighbours in adj]
        size = max(n + 1, len(self.adj))
        self.adj.extend([] for _ in range(size - len(self.adj)))
        if not 0 <= root < size:
            raise IndexError(f"root {root} is outside the tree")
        self.root = root
        self._lca = LCA(n, self.adj)
        self._lca.build(root)
        self.start = [0] * size
        self.end = [0] * size
        self.tour = [0] * (2 * size + 1)
        self._euler_tour()

    def _euler_tour(self) -> None:
        timer = 1
        self.start[self.root] = timer
        self.tour[timer] = self.root
        timer += 1
        stack = [(self.root, None, iter(self.adj[self.root]))]
        while stack:
            u, p, neighbours = stack[-1]
            for v in neighbours:
                if v != p:
                    self.start[v] = timer
                    self.tour[timer] = v
                    timer += 1
                    stack.append((v, u, iter(self.adj[v])))
                    break
            else:
                stack.pop()
                self.end[u] = timer
                self.tour[timer] = u
                timer += 1

    def _check(self, u: int) -> None:
        if not 1 <= u < len(self.adj) or self.start[u] == 0:
            raise IndexError(f"node {u} is not in the tree")

    def kth_ancestor(self, u: int, k: int) -> int | None:
        """The ancestor ``k`` levels above ``u``; None if ``u`` is not that deep."""
        self._check(u)
        return self._lca.kth_ancestor(u, k)

    def lca(self, u: int, v: int) -> int:
        """Lowest common ancestor of ``u`` and ``v``."""
        self._check(u)
        self._check(v)
        return self._lca.lca(u, v)

    def process(
        self,
        queries: Iterable[tuple[int, int]],
        include: Callable[[int], None],
        exclude: Callable[[int], None],
        answer: Callable[[], Any],
    ) -> list[Any]:
        """Answer queries on the paths ``u..v``.

        ``include`` and ``exclude`` are called with a node entering or leaving
        the current path; ``answer`` reads the result for it. Answers come
        back in the order the queries were given.
        """
        ranges = []
        for u, v in queries:
            top = self.lca(u, v)
            if self.start[u] > self.start[v]:
                u, v = v, u
            if top == u:
                ranges.append((self.start[u], self.start[v], None))
            else:
                ranges.append((self.end[u], self.start[v], top))
        if not ranges:
            return []
        block = max(1, math.isqrt(self.n))
        order = sorted(range(len(ranges)), key=lambda i: (ranges[i][0] // block, ranges[i][1]))
        freq = [0] * len(self.adj)

        def toggle_in(idx: int) -> None:
            u = self.tour[idx]
            freq[u] += 1
            if freq[u] == 1:
                include(u)
            else:
                exclude(u)

        def toggle_out(idx: int) -> None:
            u = self.tour[idx]
            freq[u] -= 1
            if freq[u] == 1:
                include(u)
            else:
                exclude(u)

        answers: list[Any] = [None] * len(ranges)
        cur_l = ranges[order[0]][0]
        cur_r = cur_l - 1
        for i in order:
            l, r, top = ranges[i]
            while cur_r < r:
                cur_r += 1
                toggle_in(cur_r)
            while cur_l > l:
                cur_l -= 1
                toggle_in(cur_l)
            while cur_r > r:
                toggle_out(cur_r)
                cur_r -= 1
            while cur_l < l:
                toggle_out(cur_l)
                cur_l += 1
            if top is not None:
                toggle_in(self.start[top])
            answers[i] = answer()
            if top is not None:
                toggle_out(self.start[top])
        return answers