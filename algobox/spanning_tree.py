"""Minimum spanning trees by Kruskal's and Prim's algorithms."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from operator import attrgetter

from algobox.disjoint_set import DisjointSet


@dataclass(frozen=True)
class Edge:
    """An undirected weighted edge."""

    source: int
    target: int
    weight: int


def _as_edge(edge: Edge | Sequence[int]) -> Edge:
    if isinstance(edge, Edge):
        return edge
    source, target, weight = edge
    return Edge(source, target, weight)


def kruskal(num_vertices: int, edges: Iterable[Edge | Sequence[int]]) -> list[Edge]:
    """Return the edges of a minimum spanning forest, lightest first.

    Edges of equal weight are taken in the order given.
    """
    ordered = sorted((_as_edge(edge) for edge in edges), key=attrgetter("weight"))
    sets = DisjointSet(range(num_vertices))
    tree: list[Edge] = []
    for edge in ordered:
        if len(tree) >= num_vertices - 1:
            break
        if sets.union(edge.source, edge.target):
            tree.append(edge)
    return tree


def prim_matrix(matrix: Sequence[Sequence[int]]) -> list[Edge]:
    """Return the minimum spanning tree of an adjacency matrix grown from vertex 0.

    A zero entry means there is no edge. Each result edge runs from the
    parent to the vertex, for vertices 1 onwards in order.
    """
    n = len(matrix)
    if n == 0:
        return []
    inf = float("inf")
    dist = [inf] * n
    dist[0] = 0
    parent: list[int | None] = [None] * n
    visited = [False] * n
    for _ in range(n):
        candidates = [v for v in range(n) if not visited[v] and dist[v] < inf]
        if not candidates:
            raise ValueError("graph is not connected")
        node = min(candidates, key=dist.__getitem__)
        visited[node] = True
        for target, weight in enumerate(matrix[node]):
            if weight != 0 and not visited[target] and weight < dist[target]:
                dist[target] = weight
                parent[target] = node
    return [
        Edge(parent[v], v, matrix[v][parent[v]])  # type: ignore[arg-type, index]
        for v in range(1, n)
    ]


def _adjacency_edges(adjacency: Sequence[Sequence[Sequence[int]]]) -> list[Edge]:
    return [
        Edge(source, target, weight)
        for source, neighbours in enumerate(adjacency)
        for target, weight in neighbours
    ]


def mst_weight_kruskal(adjacency: Sequence[Sequence[Sequence[int]]]) -> int:
    """Return the minimum spanning tree weight of a weighted adjacency list.

    ``adjacency[v]`` holds ``(to, weight)`` pairs. Raise ValueError when
    the graph is not connected.
    """
    n = len(adjacency)
    tree = kruskal(n, _adjacency_edges(adjacency))
    if n > 0 and len(tree) != n - 1:
        raise ValueError("graph is not connected")
    return sum(edge.weight for edge in tree)


def mst_weight_prim(adjacency: Sequence[Sequence[Sequence[int]]]) -> int:
    """Return the minimum spanning tree weight using a heap-driven Prim's search.

    ``adjacency[v]`` holds ``(to, weight)`` pairs. Raise ValueError when
    the graph is not connected.
    """
    n = len(adjacency)
    if n == 0:
        return 0
    visited = [False] * n
    best: list[float] = [float("inf")] * n
    best[0] = 0
    heap = [(0, 0)]
    total = 0
    reached = 0
    while heap and reached < n:
        weight, node = heapq.heappop(heap)
        if visited[node]:
            continue
        visited[node] = True
        reached += 1
        total += weight
        for target, edge_weight in adjacency[node]:
            if not visited[target] and edge_weight < best[target]:
                best[target] = edge_weight
                heapq.heappush(heap, (edge_weight, target))
    if reached < n:
        raise ValueError("graph is not connected")
    return total