"""Single-source and all-pairs shortest paths.

Weighted adjacency lists hold ``(to, weight)`` pairs: ``adjacency[v]`` lists
the edges leaving ``v``, with vertices numbered from 0. Edge lists hold
``(source, target, weight)`` triples. A vertex that cannot be reached has
distance ``math.inf``.
"""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable, Sequence

from algobox.traversal import topological_sort

INF = math.inf

WeightedAdjacency = Sequence[Sequence[Sequence[int]]]


class NegativeCycleError(ValueError):
    """Raised when a graph holds a cycle of negative total weight."""


def dijkstra(adjacency: WeightedAdjacency, source: int) -> list[float]:
    """Return distances from ``source`` using a binary heap.

    Edge weights must not be negative.
    """
    dist: list[float] = [INF] * len(adjacency)
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        d, node = heapq.heappop(heap)
        if d > dist[node]:
            continue
        for to, weight in adjacency[node]:
            candidate = d + weight
            if candidate < dist[to]:
                dist[to] = candidate
                heapq.heappush(heap, (candidate, to))
    return dist


def dijkstra_matrix(
    matrix: Sequence[Sequence[int]],
) -> tuple[list[float], list[int | None]]:
    """Return distances and parents from vertex 0 of an adjacency matrix.

    A zero entry means there is no edge. The parent of vertex 0 and of
    unreachable vertices is None.
    """
    n = len(matrix)
    dist: list[float] = [INF] * n
    parent: list[int | None] = [None] * n
    if n == 0:
        return dist, parent
    dist[0] = 0
    visited = [False] * n
    for _ in range(n - 1):
        candidates = [v for v in range(n) if not visited[v] and dist[v] < INF]
        if not candidates:
            break
        node = min(candidates, key=dist.__getitem__)
        visited[node] = True
        for target, weight in enumerate(matrix[node]):
            if (
                not visited[target]
                and weight != 0
                and dist[node] + weight < dist[target]
            ):
                dist[target] = dist[node] + weight
                parent[target] = node
    return dist, parent


def bellman_ford(
    num_vertices: int, edges: Iterable[Sequence[int]]
) -> tuple[list[float], list[int | None]]:
    """Return distances and parents from vertex 0, allowing negative weights.

    Raise NegativeCycleError when a negative cycle is reachable from vertex 0.
    """
    edge_list = [tuple(edge) for edge in edges]
    dist: list[float] = [INF] * num_vertices
    parent: list[int | None] = [None] * num_vertices
    if num_vertices == 0:
        return dist, parent
    dist[0] = 0
    for _ in range(num_vertices - 1):
        updated = False
        for src, dst, weight in edge_list:
            if dist[src] != INF and dist[src] + weight < dist[dst]:
                dist[dst] = dist[src] + weight
                parent[dst] = src
                updated = True
        if not updated:
            break
    if any(
        dist[src] != INF and dist[src] + weight < dist[dst]
        for src, dst, weight in edge_list
    ):
        raise NegativeCycleError("graph contains a negative edge weight cycle")
    return dist, parent


def has_negative_cycle(num_vertices: int, edges: Iterable[Sequence[int]]) -> bool:
    """Return whether a negative cycle is reachable from vertex 0."""
    try:
        bellman_ford(num_vertices, edges)
    except NegativeCycleError:
        return True
    return False


def floyd_warshall(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return all-pairs distances of an adjacency matrix.

    An entry of -1 means there is no edge, and in the result that the target
    cannot be reached. Raise NegativeCycleError when a vertex reaches itself
    at negative cost.
    """
    d: list[list[float]] = [
        [INF if value == -1 else value for value in row] for row in matrix
    ]
    n = len(d)
    for k in range(n):
        via = d[k]
        for i in range(n):
            to_k = d[i][k]
            if to_k == INF:
                continue
            row = d[i]
            for j in range(n):
                if via[j] != INF and to_k + via[j] < row[j]:
                    row[j] = to_k + via[j]
    if any(d[i][i] < 0 for i in range(n)):
        raise NegativeCycleError("graph contains a negative edge weight cycle")
    return [[-1 if value == INF else int(value) for value in row] for row in d]


def unit_distances(adjacency: Sequence[Sequence[int]], source: int) -> list[float]:
    """Return edge counts from ``source`` in an unweighted graph."""
    dist: list[float] = [INF] * len(adjacency)
    dist[source] = 0
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for neighbour in adjacency[node]:
            if dist[node] + 1 < dist[neighbour]:
                dist[neighbour] = dist[node] + 1
                queue.append(neighbour)
    return dist


def spfa(adjacency: WeightedAdjacency, source: int) -> list[float]:
    """Return distances from ``source`` by queue-driven relaxation.

    Negative weights are allowed; raise NegativeCycleError when a negative
    cycle is reachable from ``source``.
    """
    n = len(adjacency)
    dist: list[float] = [INF] * n
    dist[source] = 0
    in_queue = [False] * n
    relaxed = [0] * n
    queue = deque([source])
    in_queue[source] = True
    while queue:
        node = queue.popleft()
        in_queue[node] = False
        for to, weight in adjacency[node]:
            if dist[node] + weight < dist[to]:
                dist[to] = dist[node] + weight
                relaxed[to] += 1
                if relaxed[to] >= n:
                    raise NegativeCycleError(
                        "graph contains a negative edge weight cycle"
                    )
                if not in_queue[to]:
                    in_queue[to] = True
                    queue.append(to)
    return dist


def dag_shortest_paths(adjacency: WeightedAdjacency, source: int) -> list[float]:
    """Return distances from ``source`` in a weighted directed acyclic graph."""
    order = topological_sort([[to for to, _ in edges] for edges in adjacency])
    dist: list[float] = [INF] * len(adjacency)
    dist[source] = 0
    for node in order:
        if dist[node] == INF:
            continue
        for to, weight in adjacency[node]:
            if dist[node] + weight < dist[to]:
                dist[to] = dist[node] + weight
    return dist


def network_delay_time(times: Iterable[Sequence[int]], n: int, k: int) -> int:
    """Return the time for a signal from node ``k`` to reach all nodes ``1..n``.

    Each entry of ``times`` is ``(source, target, delay)``. The result is -1
    when some node is never reached.
    """
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for src, dst, delay in times:
        adjacency[src].append((dst, delay))
    dist = dijkstra(adjacency, k)
    longest = max(dist[1:], default=0)
    return -1 if longest == INF else int(longest)


def cheapest_price(
    n: int, flights: Iterable[Sequence[int]], src: int, dst: int, k: int
) -> int:
    """Return the cheapest price from ``src`` to ``dst`` with at most ``k`` stops.

    Each flight is ``(from, to, price)``; the result is -1 when no route fits.
    """
    flight_list = [tuple(flight) for flight in flights]
    cost: list[float] = [INF] * n
    cost[src] = 0
    for _ in range(max(k + 1, 0)):
        following = cost[:]
        for origin, target, price in flight_list:
            if cost[origin] + price < following[target]:
                following[target] = cost[origin] + price
        cost = following
    return -1 if cost[dst] == INF else int(cost[dst])


def find_the_city(n: int, edges: Iterable[Sequence[int]], threshold: int) -> int:
    """Return the city with fewest others within ``threshold``.

    Edges are undirected ``(a, b, weight)`` triples. Ties go to the city with
    the largest number.
    """
    dist: list[list[float]] = [
        [0 if i == j else INF for j in range(n)] for i in range(n)
    ]
    for a, b, weight in edges:
        shortest = min(dist[a][b], weight)
        dist[a][b] = dist[b][a] = shortest
    for k in range(n):
        for i in range(n):
            if dist[i][k] == INF:
                continue
            for j in range(n):
                candidate = dist[i][k] + dist[k][j]
                if candidate < dist[i][j]:
                    dist[i][j] = candidate
    best_city, best_count = -1, math.inf
    for city, row in enumerate(dist):
        count = sum(
            1 for other, d in enumerate(row) if other != city and d <= threshold
        )
        if count <= best_count:
            best_city, best_count = city, count
    return best_city