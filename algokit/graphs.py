"""Graph building, traversal, shortest paths and maximum spanning trees.

Vertices are numbered from 0.
"""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable, Iterator, Sequence

__all__ = [
    "dijkstra",
    "manhattan_graph",
    "max_spanning_tree_weight",
    "adjacency_matrix",
    "adjacency_list",
    "bfs_order",
    "dfs_order",
]


def dijkstra(
    adjacency: Sequence[Iterable[tuple[int, int]]], source: int
) -> tuple[list[float], list[int | None]]:
    """Shortest distances from ``source`` and the predecessor of each vertex.

    ``adjacency[v]`` lists ``(neighbour, weight)`` pairs. Unreachable vertices
    get ``math.inf`` as distance and None as predecessor.
    """
    size = len(adjacency)
    if not 0 <= source < size:
        raise ValueError(f"source {source} is not a vertex")
    distances: list[float] = [math.inf] * size
    parents: list[int | None] = [None] * size
    settled = [False] * size
    distances[source] = 0
    heap: list[tuple[float, int]] = [(0, source)]
    while heap:
        distance, vertex = heapq.heappop(heap)
        if settled[vertex]:
            continue
        settled[vertex] = True
        for neighbour, weight in adjacency[vertex]:
            if weight < 0:
                raise ValueError("edge weights must not be negative")
            candidate = distance + weight
            if candidate < distances[neighbour]:
                distances[neighbour] = candidate
                parents[neighbour] = vertex
                heapq.heappush(heap, (candidate, neighbour))
    return distances, parents


def manhattan_graph(points: Sequence[Sequence[int]]) -> list[list[int]]:
    """Complete graph whose edge weights are Manhattan distances between points."""
    if points and any(len(p) != len(points[0]) for p in points):
        raise ValueError("all points must have the same number of coordinates")
    return [
        [sum(abs(a - b) for a, b in zip(p, q)) for q in points] for p in points
    ]


def _check_square(matrix: Sequence[Sequence[int]]) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    return size


def max_spanning_tree_weight(graph: Sequence[Sequence[int]]) -> int:
    """Total weight of a maximum spanning tree, grown from vertex 0 by Prim's method.

    A zero entry means no edge. Raises ValueError if the graph is not connected.
    """
    size = _check_square(graph)
    if size == 0:
        return 0
    keys: list[float] = [-math.inf] * size
    parents: list[int | None] = [None] * size
    in_tree = [False] * size
    keys[0] = 0
    for _ in range(size - 1):
        outside = [v for v in range(size) if not in_tree[v]]
        vertex = max(outside, key=keys.__getitem__)
        if keys[vertex] == -math.inf:
            raise ValueError("graph is not connected")
        in_tree[vertex] = True
        for neighbour, weight in enumerate(graph[vertex]):
            if weight and not in_tree[neighbour] and weight > keys[neighbour]:
                parents[neighbour] = vertex
                keys[neighbour] = weight
    total = 0
    for vertex in range(1, size):
        parent = parents[vertex]
        if parent is None:
            raise ValueError("graph is not connected")
        total += graph[vertex][parent]
    return total


def _check_edges(n: int, edges: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    if n < 0:
        raise ValueError("vertex count must not be negative")
    checked = list(edges)
    for u, v in checked:
        if not (0 <= u < n and 0 <= v < n):
            raise ValueError(f"edge ({u}, {v}) has a vertex outside 0..{n - 1}")
    return checked


def adjacency_matrix(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Symmetric 0/1 matrix of an undirected graph with ``n`` vertices."""
    matrix = [[0] * n for _ in range(n)]
    for u, v in _check_edges(n, edges):
        matrix[u][v] = matrix[v][u] = 1
    return matrix


def adjacency_list(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Neighbour lists of an undirected graph, in the order edges were given."""
    neighbours: list[list[int]] = [[] for _ in range(n)]
    for u, v in _check_edges(n, edges):
        neighbours[u].append(v)
        neighbours[v].append(u)
    return neighbours


def _check_start(matrix: Sequence[Sequence[int]], start: int) -> int:
    size = _check_square(matrix)
    if not 0 <= start < size:
        raise ValueError(f"start {start} is not a vertex")
    return size


def bfs_order(matrix: Sequence[Sequence[int]], start: int) -> list[int]:
    """Vertices reached from ``start`` in breadth-first order.

    Neighbours are visited in increasing vertex order.
    """
    size = _check_start(matrix, start)
    visited = [False] * size
    visited[start] = True
    order = [start]
    queue = deque([start])
    while queue:
        vertex = queue.popleft()
        for neighbour in range(size):
            if not visited[neighbour] and matrix[vertex][neighbour]:
                visited[neighbour] = True
                order.append(neighbour)
                queue.append(neighbour)
    return order


def dfs_order(matrix: Sequence[Sequence[int]], start: int) -> list[int]:
    """Vertices reached from ``start`` in depth-first order.

    Neighbours are tried in increasing vertex order.
    """
    size = _check_start(matrix, start)
    visited = [False] * size
    visited[start] = True
    order = [start]
    stack: list[tuple[int, Iterator[int]]] = [(start, iter(range(size)))]
    while stack:
        vertex, candidates = stack[-1]
        for neighbour in candidates:
            if not visited[neighbour] and matrix[vertex][neighbour]:
                visited[neighbour] = True
                order.append(neighbour)
                stack.append((neighbour, iter(range(size))))
                break
        else:
            stack.pop()
    return order