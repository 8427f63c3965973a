import random

import pytest

from contestkit.mo_tree import TreeMo


def random_tree(n, seed):
    rng = random.Random(seed)
    adj = [[] for _ in range(n + 1)]
    for i in range(2, n + 1):
        p = rng.randint(1, i - 1)
        adj[p].append(i)
        adj[i].append(p)
    return adj


def naive_parents(adj, root):
    parent, depth = {root: None}, {root: 0}
    stack = [root]
    while stack:
        u = stack.pop()
        for v in adj[u]:
            if v not in parent:
                parent[v], depth[v] = u, depth[u] + 1
                stack.append(v)
    return parent, depth


def naive_path(parent, depth, u, v):
    nodes = set()
    while depth[u] > depth[v]:
        nodes.add(u)
        u = parent[u]
    while depth[v] > depth[u]:
        nodes.add(v)
        v = parent[v]
    while u != v:
        nodes.update((u, v))
        u, v = parent[u], parent[v]
    nodes.add(u)
    return nodes


def random_pairs(n, m, seed):
    rng = random.Random(seed)
    return [(rng.randint(1, n), rng.randint(1, n)) for _ in range(m)]


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_path_node_sets(seed):
    n = 35
    adj = random_tree(n, seed)
    mo = TreeMo(n, adj)
    parent, depth = naive_parents(adj, 1)
    queries = random_pairs(n, 80, seed)
    on_path = set()
    result = mo.process(queries, on_path.add, on_path.remove, lambda: frozenset(on_path))
    assert result == [frozenset(naive_path(parent, depth, u, v)) for u, v in queries]


def test_path_value_sums():
    n = 30
    adj = random_tree(n, 4)
    mo = TreeMo(n, adj, root=5)
    parent, depth = naive_parents(adj, 5)
    values = [0] + [random.Random(4).randint(1, 50) * i for i in range(1, n + 1)]
    total = [0]

    def include(u):
        total[0] += values[u]

    def exclude(u):
        total[0] -= values[u]

    queries = random_pairs(n, 60, 5)
    result = mo.process(queries, include, exclude, lambda: total[0])
    assert result == [sum(values[x] for x in naive_path(parent, depth, u, v)) for u, v in queries]


def test_single_node_path():
    adj = [[], [2], [1, 3], [2]]
    mo = TreeMo(3, adj)
    seen = set()
    assert mo.process([(3, 3)], seen.add, seen.remove, lambda: sorted(seen)) == [[3]]


def test_lca_and_kth_ancestor():
    n = 25
    adj = random_tree(n, 6)
    mo = TreeMo(n, adj)
    parent, depth = naive_parents(adj, 1)
    for u in range(1, n + 1):
        assert mo.kth_ancestor(u, depth[u]) == 1
        assert mo.kth_ancestor(u, depth[u] + 1) is None
        if parent[u] is not None:
            assert mo.lca(u, parent[u]) == parent[u]


def test_no_queries_and_bad_node():
    mo = TreeMo(3, [[], [2], [1, 3], [2]])
    assert mo.process([], print, print, lambda: 0) == []
    with pytest.raises(IndexError):
        mo.process([(1, 9)], print, print, lambda: 0)