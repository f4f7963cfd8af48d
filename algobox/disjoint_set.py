"""A disjoint-set forest and the puzzles solved with it."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence
from typing import Any


class DisjointSet:
    """Union-find over hashable items, with union by rank and path compression."""

    def __init__(self, elements: Iterable[Hashable] = ()) -> None:
        self._parent: dict[Hashable, Hashable] = {}
        self._rank: dict[Hashable, int] = {}
        self._count = 0
        for element in elements:
            self.add(element)

    def __contains__(self, item: object) -> bool:
        return item in self._parent

    def __len__(self) -> int:
        return len(self._parent)

    def __repr__(self) -> str:
        return f"DisjointSet(elements={len(self)}, sets={self._count})"

    @property
    def count(self) -> int:
        """The number of disjoint sets."""
        return self._count

    def add(self, item: Hashable) -> None:
        """Add ``item`` as a set of its own; known items are left alone."""
        if item not in self._parent:
            self._parent[item] = item
            self._rank[item] = 0
            self._count += 1

    def find(self, item: Hashable) -> Hashable:
        """Return the representative of the set holding ``item``."""
        if item not in self._parent:
            raise KeyError(item)
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, a: Hashable, b: Hashable) -> bool:
        """Merge the sets of ``a`` and ``b``; return False if already merged."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        if self._rank[root_a] < self._rank[root_b]:
            self._parent[root_a] = root_b
        elif self._rank[root_b] < self._rank[root_a]:
            self._parent[root_b] = root_a
        else:
            self._parent[root_a] = root_b
            self._rank[root_b] += 1
        self._count -= 1
        return True

    def connected(self, a: Hashable, b: Hashable) -> bool:
        """Return whether ``a`` and ``b`` are in the same set."""
        return self.find(a) == self.find(b)


def has_cycle(num_vertices: int, edges: Iterable[Sequence[int]]) -> bool:
    """Return whether an undirected edge list on ``0..num_vertices-1`` has a cycle."""
    sets = DisjointSet(range(num_vertices))
    return any(not sets.union(a, b) for a, b in edges)


def find_circle_num(is_connected: Sequence[Sequence[int]]) -> int:
    """Count the provinces of a symmetric connection matrix."""
    n = len(is_connected)
    sets = DisjointSet(range(n))
    for i, row in enumerate(is_connected):
        for j in range(i + 1, n):
            if row[j]:
                sets.union(i, j)
    return sets.count


def find_redundant_connection(edges: Sequence[Sequence[int]]) -> list[int]:
    """Return the first edge that closes a cycle, or ``[]`` when none does.

    Vertices are numbered from 1 to ``len(edges)``.
    """
    sets = DisjointSet(range(len(edges) + 1))
    for a, b in edges:
        if not sets.union(a, b):
            return [a, b]
    return []


def remove_stones(stones: Sequence[Sequence[int]]) -> int:
    """Return how many stones can go when each shares a row or column with another."""
    sets = DisjointSet(range(len(stones)))
    first_in_row: dict[int, int] = {}
    first_in_col: dict[int, int] = {}
    for index, (row, col) in enumerate(stones):
        if row in first_in_row:
            sets.union(index, first_in_row[row])
        else:
            first_in_row[row] = index
        if col in first_in_col:
            sets.union(index, first_in_col[col])
        else:
            first_in_col[col] = index
    return len(stones) - sets.count


def make_connected(n: int, connections: Sequence[Sequence[int]]) -> int:
    """Return the cables to move so all ``n`` computers connect, or -1 if impossible."""
    if len(connections) < n - 1:
        return -1
    sets = DisjointSet(range(n))
    for a, b in connections:
        sets.union(a, b)
    return sets.count - 1


def equations_possible(equations: Iterable[str]) -> bool:
    """Return whether equations like ``"a==b"`` and ``"a!=b"`` can all hold."""
    items = list(equations)
    for equation in items:
        if len(equation) != 4 or equation[1:3] not in ("==", "!="):
            raise ValueError(f"malformed equation: {equation!r}")
    sets = DisjointSet()
    for equation in items:
        sets.add(equation[0])
        sets.add(equation[3])
    for equation in items:
        if equation[1] == "!":
            if equation[0] == equation[3]:
                return False
        else:
            sets.union(equation[0], equation[3])
    return not any(
        equation[1] == "!" and sets.connected(equation[0], equation[3])
        for equation in items
    )


def accounts_merge(accounts: Sequence[Sequence[str]]) -> list[list[Any]]:
    """Merge accounts sharing an e-mail address.

    Each account is a name followed by addresses. Each result is the name
    followed by the group's distinct addresses in sorted order.
    """
    sets = DisjointSet(range(len(accounts)))
    owner: dict[str, int] = {}
    for index, (_name, *emails) in enumerate(accounts):
        for email in emails:
            if email in owner:
                sets.union(index, owner[email])
            else:
                owner[email] = index
    grouped: dict[Hashable, list[str]] = {}
    for email, index in owner.items():
        grouped.setdefault(sets.find(index), []).append(email)
    return [
        [accounts[root][0], *sorted(emails)]  # type: ignore[index]
        for root, emails in grouped.items()
    ]