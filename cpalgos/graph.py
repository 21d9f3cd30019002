"""Graph traversals, shortest paths and topological ordering."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Hashable, Iterable, Mapping, Sequence


def bfs(
    adj: Sequence[Sequence[int]], source: int, visited: set[int] | None = None
) -> list[int]:
    """Breadth-first order of the vertices reachable from ``source``.

    ``visited`` holds vertices already seen; it is updated in place so that
    several searches can share it.
    """
    if visited is None:
        visited = set()
    order: list[int] = []
    visited.add(source)
    queue = deque([source])
    while queue:
        current = queue.popleft()
        order.append(current)
        for neighbour in adj[current]:
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return order


def bfs_disconnected(adj: Sequence[Sequence[int]]) -> list[int]:
    """Breadth-first order of every vertex, starting a new search at each unseen one."""
    visited: set[int] = set()
    order: list[int] = []
    for vertex in range(len(adj)):
        if vertex not in visited:
            order.extend(bfs(adj, vertex, visited))
    return order


def add_edge(adj: list[list[int]], s: int, t: int) -> None:
    """Add an undirected edge between ``s`` and ``t``."""
    adj[s].append(t)
    adj[t].append(s)


def dfs(adj: Sequence[Sequence[int]]) -> list[int]:
    """Depth-first preorder of every vertex, covering disconnected parts."""
    visited: set[int] = set()
    order: list[int] = []
    for start in range(len(adj)):
        if start in visited:
            continue
        visited.add(start)
        order.append(start)
        stack = [iter(adj[start])]
        while stack:
            for neighbour in stack[-1]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    order.append(neighbour)
                    stack.append(iter(adj[neighbour]))
                    break
            else:
                stack.pop()
    return order


def dijkstra(
    edges: Iterable[tuple[str, str, int]], source: str
) -> dict[str, float]:
    """Shortest distances from ``source`` over directed weighted ``edges``.

    Returns every node mentioned by an edge, in sorted order, mapped to its
    distance; unreachable nodes map to ``math.inf``. Raises ``KeyError`` if
    ``source`` is not a node of the graph.
    """
    graph: dict[str, list[tuple[str, int]]] = {}
    nodes: set[str] = set()
    for start, end, weight in edges:
        graph.setdefault(start, []).append((end, weight))
        nodes.update((start, end))
    if source not in nodes:
        raise KeyError(f"source node {source!r} does not exist in the graph")

    dist: dict[str, float] = {node: math.inf for node in sorted(nodes)}
    dist[source] = 0
    heap: list[tuple[float, str]] = [(0, source)]
    while heap:
        d, u = heapq.heappop(heap)
        if d > dist[u]:
            continue
        for v, weight in graph.get(u, ()):
            candidate = dist[u] + weight
            if candidate < dist[v]:
                dist[v] = candidate
                heapq.heappush(heap, (candidate, v))
    return dist


def topological_sort(graph: Mapping[Hashable, Sequence[Hashable]]) -> list[Hashable]:
    """Order the nodes of a directed acyclic graph so every edge points forward.

    Roots are taken in the mapping's iteration order; nodes that appear only
    as targets are included.
    """
    visited: set[Hashable] = set()
    finished: list[Hashable] = []
    for root in graph:
        if root in visited:
            continue
        visited.add(root)
        stack = [(root, iter(graph.get(root, ())))]
        while stack:
            node, children = stack[-1]
            for child in children:
                if child not in visited:
                    visited.add(child)
                    stack.append((child, iter(graph.get(child, ()))))
                    break
            else:
                stack.pop()
                finished.append(node)
    finished.reverse()
    return finished