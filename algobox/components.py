"""Strongly connected components and two-colouring of graphs."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

from algobox.traversal import topological_sort


def strongly_connected_count(adjacency: Sequence[Sequence[int]]) -> int:
    """Return the number of strongly connected components of a directed graph."""
    n = len(adjacency)
    reverse: list[list[int]] = [[] for _ in range(n)]
    for vertex, neighbours in enumerate(adjacency):
        for neighbour in neighbours:
            reverse[neighbour].append(vertex)
    seen = [False] * n
    count = 0
    # Reverse finishing order of the first pass drives the second pass.
    for start in topological_sort(adjacency):
        if seen[start]:
            continue
        count += 1
        seen[start] = True
        stack = [start]
        while stack:
            node = stack.pop()
            for neighbour in reverse[node]:
                if not seen[neighbour]:
                    seen[neighbour] = True
                    stack.append(neighbour)
    return count


def is_bipartite(graph: Sequence[Sequence[int]]) -> bool:
    """Return whether an undirected graph can be coloured with two colours."""
    colour = [-1] * len(graph)
    for start in range(len(graph)):
        if colour[start] != -1:
            continue
        colour[start] = 1
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for neighbour in graph[node]:
                if colour[neighbour] == -1:
                    colour[neighbour] = 1 - colour[node]
                    queue.append(neighbour)
                elif colour[neighbour] == colour[node]:
                    return False
    return True


def possible_bipartition(n: int, dislikes: Iterable[Sequence[int]]) -> bool:
    """Return whether people ``1..n`` split into two groups with no dislikes inside."""
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in dislikes:
        adjacency[a].append(b)
        adjacency[b].append(a)
    return is_bipartite(adjacency)