"""Cycle detection, course scheduling, Euler classification and safe states.

Graphs are adjacency lists: ``adjacency[v]`` lists the vertices reachable
from ``v`` by one edge, with vertices numbered from 0. Undirected graphs list
every edge at both of its ends.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from enum import IntEnum


class EulerKind(IntEnum):
    """How an undirected graph admits an Euler walk."""

    NOT_EULERIAN = 0
    PATH = 1
    CIRCUIT = 2


def has_cycle_directed(adjacency: Sequence[Sequence[int]]) -> bool:
    """Return whether a directed graph has a cycle, by depth-first search."""
    n = len(adjacency)
    visited = [False] * n
    on_path = [False] * n
    for start in range(n):
        if visited[start]:
            continue
        visited[start] = on_path[start] = True
        stack = [(start, iter(adjacency[start]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if on_path[neighbour]:
                    return True
                if not visited[neighbour]:
                    visited[neighbour] = on_path[neighbour] = True
                    stack.append((neighbour, iter(adjacency[neighbour])))
                    break
            else:
                on_path[node] = False
                stack.pop()
    return False


def _kahn_order(adjacency: Sequence[Sequence[int]]) -> list[int]:
    indegree = [0] * len(adjacency)
    for neighbours in adjacency:
        for neighbour in neighbours:
            indegree[neighbour] += 1
    queue = deque(vertex for vertex, degree in enumerate(indegree) if degree == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adjacency[node]:
            indegree[neighbour] -= 1
            if indegree[neighbour] == 0:
                queue.append(neighbour)
    return order


def has_cycle_directed_kahn(adjacency: Sequence[Sequence[int]]) -> bool:
    """Return whether a directed graph has a cycle, by removing sources."""
    return len(_kahn_order(adjacency)) != len(adjacency)


def has_cycle_undirected(adjacency: Sequence[Sequence[int]]) -> bool:
    """Return whether an undirected graph has a cycle, by depth-first search."""
    n = len(adjacency)
    visited = [False] * n
    for start in range(n):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, -1, iter(adjacency[start]))]
        while stack:
            node, parent, neighbours = stack[-1]
            for neighbour in neighbours:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append((neighbour, node, iter(adjacency[neighbour])))
                    break
                if neighbour != parent:
                    return True
            else:
                stack.pop()
    return False


def has_cycle_undirected_bfs(adjacency: Sequence[Sequence[int]]) -> bool:
    """Return whether an undirected graph has a cycle, by breadth-first search."""
    n = len(adjacency)
    visited = [False] * n
    for start in range(n):
        if visited[start]:
            continue
        visited[start] = True
        queue = deque([(start, -1)])
        while queue:
            node, parent = queue.popleft()
            for neighbour in adjacency[node]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    queue.append((neighbour, node))
                elif neighbour != parent:
                    return True
    return False


def _course_graph(
    num_courses: int, prerequisites: Iterable[Sequence[int]]
) -> list[list[int]]:
    adjacency: list[list[int]] = [[] for _ in range(num_courses)]
    for course, prerequisite in prerequisites:
        adjacency[prerequisite].append(course)
    return adjacency


def can_finish(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> bool:
    """Return whether every course can be taken.

    Each prerequisite is a pair ``[course, required]``: ``required`` must be
    taken before ``course``.
    """
    return not has_cycle_directed(_course_graph(num_courses, prerequisites))


def find_order(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> list[int]:
    """Return an order in which to take every course, or ``[]`` if none exists."""
    order = _kahn_order(_course_graph(num_courses, prerequisites))
    return order if len(order) == num_courses else []


def _components_with_edges(adjacency: Sequence[Sequence[int]]) -> int:
    visited = [False] * len(adjacency)
    components = 0
    for start, neighbours in enumerate(adjacency):
        if visited[start] or not neighbours:
            continue
        components += 1
        visited[start] = True
        stack = [start]
        while stack:
            node = stack.pop()
            for neighbour in adjacency[node]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append(neighbour)
    return components


def euler_kind(adjacency: Sequence[Sequence[int]]) -> EulerKind:
    """Classify an undirected graph by the Euler walk it admits."""
    components = _components_with_edges(adjacency)
    if components == 0:
        return EulerKind.CIRCUIT
    if components > 1:
        return EulerKind.NOT_EULERIAN
    odd = sum(len(neighbours) % 2 for neighbours in adjacency)
    if odd == 0:
        return EulerKind.CIRCUIT
    if odd == 2:
        return EulerKind.PATH
    return EulerKind.NOT_EULERIAN


_UNVISITED, _UNSAFE, _SAFE = 0, -1, 1


def eventual_safe_nodes(graph: Sequence[Sequence[int]]) -> list[int]:
    """Return, in ascending order, the nodes from which every walk terminates."""
    state = [_UNVISITED] * len(graph)
    for start in range(len(graph)):
        if state[start] != _UNVISITED:
            continue
        # A node under exploration stays unsafe unless all its edges prove safe.
        state[start] = _UNSAFE
        stack = [(start, iter(graph[start]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if state[neighbour] == _UNVISITED:
                    state[neighbour] = _UNSAFE
                    stack.append((neighbour, iter(graph[neighbour])))
                    break
                if state[neighbour] == _UNSAFE:
                    # Everything on the current path reaches an unsafe node.
                    stack.clear()
                    break
            else:
                state[node] = _SAFE
                stack.pop()
    return [node for node, value in enumerate(state) if value == _SAFE]