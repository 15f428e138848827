import math

import pytest

from algokit.graphs import (
    adjacency_list,
    adjacency_matrix,
    bfs_order,
    dfs_order,
    dijkstra,
    manhattan_graph,
    max_spanning_tree_weight,
)

SAMPLE_EDGES = [(0, 1), (0, 2), (1, 3), (2, 3), (3, 4), (3, 5)]

WEIGHTED = [(0, 1, 4), (0, 2, 1), (2, 1, 2), (1, 3, 5), (2, 3, 8), (3, 4, 3)]


def weighted_adjacency(n, edges):
    adjacency = [[] for _ in range(n)]
    for u, v, w in edges:
        adjacency[u].append((v, w))
        adjacency[v].append((u, w))
    return adjacency


def test_bfs_sample_graph():
    matrix = adjacency_matrix(6, SAMPLE_EDGES)
    assert bfs_order(matrix, 0) == [0, 1, 2, 3, 4, 5]


def test_dfs_sample_graph():
    matrix = adjacency_matrix(6, SAMPLE_EDGES)
    assert dfs_order(matrix, 0) == [0, 1, 3, 2, 4, 5]


@pytest.mark.parametrize("walk", [bfs_order, dfs_order])
def test_walks_visit_component_once(walk):
    matrix = adjacency_matrix(8, SAMPLE_EDGES + [(6, 7)])
    order = walk(matrix, 3)
    assert order[0] == 3
    assert sorted(order) == [0, 1, 2, 3, 4, 5]
    assert walk(matrix, 6) == [6, 7]


def test_dfs_on_path_follows_path():
    matrix = adjacency_matrix(5, [(0, 1), (1, 2), (2, 3), (3, 4)])
    assert dfs_order(matrix, 0) == [0, 1, 2, 3, 4]
    assert dfs_order(matrix, 4) == [4, 3, 2, 1, 0]


@pytest.mark.parametrize("walk", [bfs_order, dfs_order])
def test_walk_rejects_bad_start(walk):
    with pytest.raises(ValueError):
        walk(adjacency_matrix(3, []), 3)


def test_adjacency_matrix_symmetric():
    matrix = adjacency_matrix(6, SAMPLE_EDGES)
    for u in range(6):
        for v in range(6):
            expected = int((u, v) in SAMPLE_EDGES or (v, u) in SAMPLE_EDGES)
            assert matrix[u][v] == expected


def test_adjacency_list_matches_edges():
    neighbours = adjacency_list(6, SAMPLE_EDGES)
    assert sum(len(row) for row in neighbours) == 2 * len(SAMPLE_EDGES)
    for u, v in SAMPLE_EDGES:
        assert v in neighbours[u]
        assert u in neighbours[v]


def test_adjacency_rejects_out_of_range_vertex():
    with pytest.raises(ValueError):
        adjacency_list(3, [(0, 3)])
    with pytest.raises(ValueError):
        adjacency_matrix(3, [(-1, 0)])


def test_dijkstra_invariants():
    adjacency = weighted_adjacency(6, WEIGHTED)
    distances, parents = dijkstra(adjacency, 0)
    assert distances[0] == 0
    assert parents[0] is None
    for u, v, w in WEIGHTED:
        assert distances[v] <= distances[u] + w
        assert distances[u] <= distances[v] + w
    for vertex, parent in enumerate(parents):
        if parent is not None:
            weight = min(w for n, w in adjacency[parent] if n == vertex)
            assert distances[vertex] == distances[parent] + weight
    assert distances[1] < 4


def test_dijkstra_unreachable():
    distances, parents = dijkstra(weighted_adjacency(6, WEIGHTED), 0)
    assert distances[5] == math.inf
    assert parents[5] is None


def test_dijkstra_errors():
    with pytest.raises(ValueError):
        dijkstra(weighted_adjacency(2, [(0, 1, 1)]), 2)
    with pytest.raises(ValueError):
        dijkstra(weighted_adjacency(2, [(0, 1, -1)]), 0)


def test_manhattan_graph():
    graph = manhattan_graph([(0, 0), (1, 2), (5, -1)])
    assert graph[0][1] == 3
    for i in range(3):
        assert graph[i][i] == 0
        for j in range(3):
            assert graph[i][j] == graph[j][i]


def test_manhattan_graph_rejects_ragged_points():
    with pytest.raises(ValueError):
        manhattan_graph([(0, 0), (1, 2, 3)])


def test_max_spanning_tree_of_tree_is_total_weight():
    edges = [(0, 1, 7), (1, 2, 2), (1, 3, 9)]
    graph = [[0] * 4 for _ in range(4)]
    for u, v, w in edges:
        graph[u][v] = graph[v][u] = w
    assert max_spanning_tree_weight(graph) == sum(w for _, _, w in edges)


def test_max_spanning_tree_of_triangle_drops_lightest_edge():
    weights = [4, 9, 6]
    graph = [[0, 4, 9], [4, 0, 6], [9, 6, 0]]
    assert max_spanning_tree_weight(graph) == sum(weights) - min(weights)


def test_max_spanning_tree_at_least_any_path():
    points = [(0, 0), (3, 1), (-2, 5), (4, 4), (1, -3)]
    graph = manhattan_graph(points)
    best = max_spanning_tree_weight(graph)
    path = sum(graph[i][i + 1] for i in range(len(points) - 1))
    assert best >= path


def test_max_spanning_tree_trivial_graphs():
    assert max_spanning_tree_weight([]) == 0
    assert max_spanning_tree_weight([[0]]) == 0


def test_max_spanning_tree_disconnected_raises():
    with pytest.raises(ValueError):
        max_spanning_tree_weight([[0, 1, 0], [1, 0, 0], [0, 0, 0]])


def test_max_spanning_tree_rejects_non_square():
    with pytest.raises(ValueError):
        max_spanning_tree_weight([[0, 1], [1, 0, 2]])