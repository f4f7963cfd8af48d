"""Graph traversals and the puzzles built on them.

Graphs are adjacency lists: ``adjacency[v]`` lists the vertices reachable
from ``v`` by one edge, with vertices numbered from 0.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field


def bfs(adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Return the breadth-first visiting order starting from vertex 0."""
    if not adjacency:
        return []
    visited = [False] * len(adjacency)
    visited[0] = True
    queue = deque([0])
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adjacency[node]:
            if not visited[neighbour]:
                visited[neighbour] = True
                queue.append(neighbour)
    return order


def dfs(adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Return the depth-first visiting order starting from vertex 0."""
    if not adjacency:
        return []
    visited = [False] * len(adjacency)
    visited[0] = True
    order = [0]
    stack = [iter(adjacency[0])]
    while stack:
        for neighbour in stack[-1]:
            if not visited[neighbour]:
                visited[neighbour] = True
                order.append(neighbour)
                stack.append(iter(adjacency[neighbour]))
                break
        else:
            stack.pop()
    return order


def adjacency_rows(adjacency: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return one row per vertex: the vertex followed by its neighbours."""
    return [[vertex, *neighbours] for vertex, neighbours in enumerate(adjacency)]


def _postorder(adjacency: Sequence[Sequence[int]]) -> list[int]:
    visited = [False] * len(adjacency)
    finished: list[int] = []
    for start in range(len(adjacency)):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, iter(adjacency[start]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append((neighbour, iter(adjacency[neighbour])))
                    break
            else:
                stack.pop()
                finished.append(node)
    return finished


def topological_sort(adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Order the vertices of a DAG by reverse depth-first finishing time."""
    return _postorder(adjacency)[::-1]


def kahn_topological_sort(adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Order the vertices of a DAG by repeatedly removing sources.

    Vertices on or behind a cycle never become sources and are left out.
    """
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


def can_visit_all_rooms(rooms: Sequence[Sequence[int]]) -> bool:
    """Return whether every room is reachable from room 0 using found keys."""
    visited: set[int] = set()
    pending = [0]
    while pending:
        room = pending.pop()
        visited.add(room)
        pending.extend(key for key in rooms[room] if key not in visited)
    return len(visited) == len(rooms)


@dataclass
class Employee:
    """An employee with an importance value and direct subordinates."""

    id: int
    importance: int
    subordinates: list[int] = field(default_factory=list)


def employee_importance(employees: Iterable[Employee], employee_id: int) -> int:
    """Return the importance of an employee and all of their subordinates."""
    by_id = {employee.id: employee for employee in employees}
    total = 0
    pending = [employee_id]
    while pending:
        current = by_id.get(pending.pop())
        if current is None:
            raise KeyError(f"unknown employee id")
        total += current.importance
        pending.extend(current.subordinates)
    return total


def find_judge(n: int, trust: Iterable[Sequence[int]]) -> int:
    """Return the person trusted by everyone else who trusts nobody, or -1.

    People are numbered from 1 to ``n``.
    """
    trusted_by = [0] * (n + 1)
    trusts = [0] * (n + 1)
    for truster, trustee in trust:
        trusts[truster] += 1
        trusted_by[trustee] += 1
    for person in range(1, n + 1):
        if trusts[person] == 0 and trusted_by[person] == n - 1:
            return person
    return -1


def time_to_inform(
    n: int,
    head_id: int,
    manager: Sequence[int],
    inform_time: Sequence[int],
) -> int:
    """Return the minutes until news from the head reaches every employee."""
    reports: list[list[int]] = [[] for _ in range(n)]
    for employee, boss in enumerate(manager[:n]):
        if boss != -1:
            reports[boss].append(employee)
    longest = 0
    pending = [(head_id, 0)]
    while pending:
        employee, elapsed = pending.pop()
        if inform_time[employee] == 0:
            longest = max(longest, elapsed)
            continue
        reached = elapsed + inform_time[employee]
        pending.extend((report, reached) for report in reports[employee])
    return longest