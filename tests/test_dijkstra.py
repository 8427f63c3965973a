import random

import pytest

from contestkit.dijkstra import WeightedGraph


def test_min_cost_prefers_cheaper_detour():
    g = WeightedGraph(3, [(0, 1, 4), (1, 2, 1), (0, 2, 10)])
    assert g.min_cost(0, 2) == 5


def test_unreachable():
    g = WeightedGraph(3, [(0, 1, 2)])
    assert g.min_cost(0, 2) == -1
    assert g.distances(0)[2] is None


def test_directed_edges_go_one_way():
    g = WeightedGraph(2, [(0, 1, 3)], undirected=False)
    assert g.min_cost(0, 1) == 3
    assert g.min_cost(1, 0) == -1


def test_negative_weight_rejected():
    g = WeightedGraph(2)
    with pytest.raises(ValueError):
        g.add_edge(0, 1, -1)


def test_bad_node():
    g = WeightedGraph(2)
    with pytest.raises(IndexError):
        g.add_edge(0, 2, 1)
    with pytest.raises(IndexError):
        g.distances(5)


def test_distances_are_tight_on_random_graph():
    rng = random.Random(7)
    n = 12
    edges = [(rng.randrange(n), rng.randrange(n), rng.randrange(20)) for _ in range(30)]
    g = WeightedGraph(n, edges)
    dist = g.distances(0)
    assert dist[0] == 0
    for u, v, w in edges:
        if dist[u] is not None:
            assert dist[v] is not None and dist[v] <= dist[u] + w
        if dist[v] is not None:
            assert dist[u] is not None and dist[u] <= dist[v] + w
    for node, d in enumerate(dist):
        if d is not None:
            assert g.min_cost(0, node) == d
            assert g.min_cost(node, 0) == d