import pytest

from contestkit.graph import Graph


def path_graph(n):
    g = Graph(n)
    for u in range(1, n):
        g.add_edge(u, u + 1)
    return g


def test_add_edge_undirected_and_directed():
    g = Graph(3)
    g.add_edge(1, 2)
    g.add_edge(2, 3, directed=True)
    assert g.neighbors(1) == [2]
    assert g.neighbors(2) == [1, 3]
    assert g.neighbors(3) == []


def test_node_out_of_range():
    g = Graph(3)
    with pytest.raises(IndexError):
        g.add_edge(0, 1)
    with pytest.raises(IndexError):
        g.neighbors(4)


def test_remove_edge():
    g = path_graph(3)
    g.remove_edge(1, 2)
    assert g.neighbors(1) == []
    assert g.neighbors(2) == [3]
    with pytest.raises(ValueError):
        g.remove_edge(1, 2)


def test_dfs_parents_and_depths_consistent():
    g = Graph(6)
    for u, v in [(1, 2), (1, 3), (2, 4), (2, 5), (3, 6)]:
        g.add_edge(u, v)
    parent, depth = g.dfs(1)
    assert set(parent) == set(range(1, 7))
    assert parent[1] is None and depth[1] == 0
    for node, par in parent.items():
        if par is not None:
            assert depth[node] == depth[par] + 1
            assert node in g.neighbors(par)


def test_dfs_visits_in_depth_first_order():
    g = Graph(4)
    for u, v in [(1, 2), (1, 3), (2, 4)]:
        g.add_edge(u, v)
    parent, _ = g.dfs(1)
    assert list(parent) == [1, 2, 4, 3]


def test_dfs_only_reaches_component():
    g = Graph(4)
    g.add_edge(1, 2)
    g.add_edge(3, 4)
    parent, _ = g.dfs(3)
    assert set(parent) == {3, 4}


def test_path_to_root_follows_parents():
    g = path_graph(5)
    parent, _ = g.dfs(1)
    path = g.path_to_root(5, parent)
    assert path[0] == 5
    assert path[-1] == 1
    assert path == sorted(path, reverse=True)


def test_path_to_root_unknown_node():
    g = path_graph(3)
    with pytest.raises(KeyError):
        g.path_to_root(3, {1: None})


def test_has_cycle():
    tree = path_graph(4)
    assert tree.has_cycle(1) is False
    tree.add_edge(4, 1)
    assert tree.has_cycle(1) is True


def test_leaf_peel_order_path():
    assert path_graph(3).leaf_peel_order() == [2, 3, 1]


def test_leaf_peel_order_star_puts_centre_first():
    g = Graph(5)
    for leaf in range(2, 6):
        g.add_edge(1, leaf)
    order = g.leaf_peel_order()
    assert order[0] == 1
    assert sorted(order) == [1, 2, 3, 4, 5]


def test_bfs_distance():
    g = path_graph(5)
    assert g.bfs_distance(1, 5) == 4
    assert g.bfs_distance(3, 3) == 0
    g.add_edge(1, 5)
    assert g.bfs_distance(1, 5) == 1


def test_bfs_distance_unreachable():
    g = Graph(3)
    g.add_edge(1, 2)
    assert g.bfs_distance(1, 3) is None


def test_is_bipartite():
    even = path_graph(4)
    even.add_edge(4, 1)
    assert even.is_bipartite() is True
    odd = path_graph(3)
    odd.add_edge(3, 1)
    assert odd.is_bipartite() is False