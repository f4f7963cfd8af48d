"""Breadth-first distances over rectangular grids.

Grids are sequences of rows; no function changes its argument.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence

Cell = tuple[int, int]

_STEPS4 = ((-1, 0), (0, 1), (1, 0), (0, -1))
_STEPS8 = _STEPS4 + ((-1, -1), (-1, 1), (1, 1), (1, -1))


def _neighbours(
    row: int, col: int, rows: int, cols: int, steps=_STEPS4
) -> Iterator[Cell]:
    for dr, dc in steps:
        nr, nc = row + dr, col + dc
        if 0 <= nr < rows and 0 <= nc < cols:
            yield nr, nc


def _multi_source(
    rows: int, cols: int, sources: list[Cell]
) -> list[list[int | None]]:
    """Return grid distances from the nearest source; unreached cells are None."""
    dist: list[list[int | None]] = [[None] * cols for _ in range(rows)]
    queue = deque(sources)
    for r, c in sources:
        dist[r][c] = 0
    while queue:
        r, c = queue.popleft()
        step = dist[r][c] + 1  # type: ignore[operator]
        for nr, nc in _neighbours(r, c, rows, cols):
            if dist[nr][nc] is None:
                dist[nr][nc] = step
                queue.append((nr, nc))
    return dist


def nearest_zero(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return, for each cell, the step distance to the nearest ``0`` cell."""
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    zeros = [
        (r, c)
        for r, line in enumerate(matrix)
        for c, value in enumerate(line)
        if value == 0
    ]
    if not zeros and rows and cols:
        raise ValueError("matrix has no zero cell")
    return _multi_source(rows, cols, zeros)  # type: ignore[return-value]


def max_distance_from_land(grid: Sequence[Sequence[int]]) -> int:
    """Return the largest distance from a water cell to its nearest land.

    Land cells are ``1`` and water cells ``0``. The result is -1 when the
    grid holds no land or no water.
    """
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    land = [
        (r, c)
        for r, line in enumerate(grid)
        for c, value in enumerate(line)
        if value
    ]
    if not land or len(land) == rows * cols:
        return -1
    dist = _multi_source(rows, cols, land)
    return max(value for line in dist for value in line if value is not None)


def oranges_rotting(grid: Sequence[Sequence[int]]) -> int:
    """Return the minutes until no fresh orange is left, or -1 if never.

    Cells are ``0`` (empty), ``1`` (fresh) or ``2`` (rotten); each minute
    rot spreads to fresh oranges next to rotten ones.
    """
    state = [list(line) for line in grid]
    rows = len(state)
    cols = len(state[0]) if rows else 0
    fresh = sum(line.count(1) for line in state)
    queue = deque(
        (r, c)
        for r, line in enumerate(state)
        for c, value in enumerate(line)
        if value == 2
    )
    minutes = 0
    while queue and fresh:
        minutes += 1
        for _ in range(len(queue)):
            r, c = queue.popleft()
            for nr, nc in _neighbours(r, c, rows, cols):
                if state[nr][nc] == 1:
                    state[nr][nc] = 2
                    fresh -= 1
                    queue.append((nr, nc))
    return minutes if fresh == 0 else -1


def shortest_path_binary_matrix(grid: Sequence[Sequence[int]]) -> int:
    """Return the cell count of the shortest clear 8-connected path.

    The path runs from the top-left to the bottom-right cell through ``0``
    cells; the result is -1 when there is none.
    """
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    if not rows or not cols:
        return -1
    target = (rows - 1, cols - 1)
    if grid[0][0] != 0 or grid[target[0]][target[1]] != 0:
        return -1
    seen = {(0, 0)}
    queue = deque([((0, 0), 1)])
    while queue:
        (r, c), length = queue.popleft()
        if (r, c) == target:
            return length
        for cell in _neighbours(r, c, rows, cols, _STEPS8):
            if cell not in seen and grid[cell[0]][cell[1]] == 0:
                seen.add(cell)
                queue.append((cell, length + 1))
    return -1