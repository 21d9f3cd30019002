import math

import pytest

from cpalgos.graph import (
    add_edge,
    bfs,
    bfs_disconnected,
    dfs,
    dijkstra,
    topological_sort,
)

BFS_ADJ = [[1, 2], [0], [0], [4], [3, 5], [4]]


def _dfs_example_adj():
    adj = [[] for _ in range(6)]
    for s, t in [(1, 2), (2, 0), (0, 3), (4, 5)]:
        add_edge(adj, s, t)
    return adj


def test_bfs_disconnected_worked_example():
    assert bfs_disconnected(BFS_ADJ) == [0, 1, 2, 3, 4, 5]


def test_bfs_from_source_reaches_only_component():
    visited = set()
    order = bfs(BFS_ADJ, 3, visited)
    assert sorted(order) == [3, 4, 5]
    assert order[0] == 3
    assert visited == set(order)


def test_bfs_respects_already_visited():
    visited = {1}
    order = bfs(BFS_ADJ, 0, visited)
    assert 1 not in order
    assert order[0] == 0


def test_bfs_order_is_by_distance():
    adj = [[1], [0, 2], [1, 3], [2]]
    order = bfs(adj, 0)
    assert order == [0, 1, 2, 3]


def test_add_edge_is_symmetric():
    adj = [[] for _ in range(3)]
    add_edge(adj, 0, 2)
    assert adj[0] == [2]
    assert adj[2] == [0]
    assert adj[1] == []


def test_dfs_worked_example():
    assert dfs(_dfs_example_adj()) == [0, 2, 1, 3, 4, 5]


def test_dfs_visits_every_vertex_once():
    adj = _dfs_example_adj()
    order = dfs(adj)
    assert sorted(order) == list(range(len(adj)))


def test_dfs_deep_path():
    n = 5000
    adj = [[] for _ in range(n)]
    for i in range(n - 1):
        add_edge(adj, i, i + 1)
    assert dfs(adj) == list(range(n))


def test_traversals_of_empty_graph():
    assert bfs_disconnected([]) == []
    assert dfs([]) == []


EDGES = [
    ("A", "B", 4),
    ("A", "C", 1),
    ("C", "B", 2),
    ("B", "D", 5),
    ("C", "D", 8),
    ("E", "A", 3),
]


def test_dijkstra_source_is_zero_and_keys_sorted():
    dist = dijkstra(EDGES, "A")
    assert dist["A"] == 0
    assert list(dist) == sorted({n for e in EDGES for n in e[:2]})


def test_dijkstra_distances_are_tight():
    dist = dijkstra(EDGES, "A")
    for s, d, w in EDGES:
        assert dist[d] <= dist[s] + w
    for node, value in dist.items():
        if node != "A" and value != math.inf:
            assert any(d == node and dist[s] + w == value for s, d, w in EDGES)


def test_dijkstra_unreachable_is_infinite():
    dist = dijkstra(EDGES, "A")
    assert dist["E"] == math.inf


def test_dijkstra_prefers_indirect_shorter_path():
    dist = dijkstra(EDGES, "A")
    assert dist["B"] == 1 + 2


def test_dijkstra_missing_source():
    with pytest.raises(KeyError):
        dijkstra(EDGES, "Z")


def _assert_topological(graph, order):
    position = {node: i for i, node in enumerate(order)}
    assert len(position) == len(order)
    for node, targets in graph.items():
        for target in targets:
            assert position[node] < position[target]


def test_topological_sort_orders_edges_forward():
    graph = {"A": ["B", "C"], "B": ["D"], "C": ["D"], "E": ["A"]}
    order = topological_sort(graph)
    assert set(order) == {"A", "B", "C", "D", "E"}
    _assert_topological(graph, order)


def test_topological_sort_chain():
    graph = {"C": ["D"], "B": ["C"], "A": ["B"]}
    assert topological_sort(graph) == ["A", "B", "C", "D"]


def test_topological_sort_empty():
    assert topological_sort({}) == []