"""All-pairs shortest paths by the Floyd-Warshall method."""

from __future__ import annotations

import math
from collections.abc import Iterable


def floyd_warshall(n: int, edges: Iterable[tuple[int, int, float]]) -> list[list[float]]:
    """Shortest distances between nodes ``1..n`` over undirected weighted edges.

    The result is indexed ``dist[u][v]`` for ``u, v`` in ``1..n`` (row and
    column 0 are unused). Unreachable pairs hold ``math.inf``; a node's
    distance to itself is 0 only when it is the endpoint of some edge.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    dist = [[math.inf] * (n + 1) for _ in range(n + 1)]
    for u, v, w in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise IndexError(f"edge ({u}, {v}) has a node outside 1..{n}")
        dist[u][u] = dist[v][v] = 0
        best = min(dist[u][v], dist[v][u], w)
        dist[u][v] = dist[v][u] = best
    nodes = range(1, n + 1)
    for k in nodes:
        row_k = dist[k]
        for u in nodes:
            row_u = dist[u]
            through = row_u[k]
            if through == math.inf:
                continue
            for v in nodes:
                candidate = through + row_k[v]
                if candidate < row_u[v]:
                    row_u[v] = candidate
    return dist