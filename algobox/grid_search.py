"""Depth-first style searches over rectangular grids.

Grids are sequences of rows. Cells are addressed as ``(row, column)`` and
neighbours are the four cells sharing an edge. Functions that change cells
return a new grid and leave their argument untouched.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterator, Sequence
from typing import Any

Cell = tuple[int, int]

# Up, right, down, left.
_STEPS = ((-1, 0), (0, 1), (1, 0), (0, -1))

# Maze moves in the order they are explored: down, left, right, up.
_MOVES = (("D", 1, 0), ("L", 0, -1), ("R", 0, 1), ("U", -1, 0))


def _shape(grid: Sequence[Sequence[Any]]) -> tuple[int, int]:
    rows = len(grid)
    return rows, (len(grid[0]) if rows else 0)


def _neighbours(row: int, col: int, rows: int, cols: int) -> Iterator[Cell]:
    for dr, dc in _STEPS:
        nr, nc = row + dr, col + dc
        if 0 <= nr < rows and 0 <= nc < cols:
            yield nr, nc


def _region(
    grid: Sequence[Sequence[Any]],
    row: int,
    col: int,
    belongs: Callable[[Any], bool],
) -> set[Cell]:
    """Return the cells connected to ``(row, col)`` through cells that belong."""
    rows, cols = _shape(grid)
    if not belongs(grid[row][col]):
        return set()
    seen = {(row, col)}
    queue = deque([(row, col)])
    while queue:
        r, c = queue.popleft()
        for cell in _neighbours(r, c, rows, cols):
            if cell not in seen and belongs(grid[cell[0]][cell[1]]):
                seen.add(cell)
                queue.append(cell)
    return seen


def _islands(
    grid: Sequence[Sequence[Any]], is_land: Callable[[Any], bool]
) -> Iterator[set[Cell]]:
    """Yield each connected group of land cells."""
    claimed: set[Cell] = set()
    for r, line in enumerate(grid):
        for c, value in enumerate(line):
            if (r, c) in claimed or not is_land(value):
                continue
            island = _region(grid, r, c, is_land)
            claimed |= island
            yield island


def _touches_border(cells: set[Cell], rows: int, cols: int) -> bool:
    return any(
        r in (0, rows - 1) or c in (0, cols - 1) for r, c in cells
    )


def flood_fill(
    image: Sequence[Sequence[Any]], row: int, col: int, new_color: Any
) -> list[list[Any]]:
    """Repaint the region of equal colour around ``(row, col)``."""
    result = [list(line) for line in image]
    original = result[row][col]
    if original == new_color:
        return result
    for r, c in _region(result, row, col, lambda value: value == original):
        result[r][c] = new_color
    return result


def num_islands(grid: Sequence[Sequence[str]]) -> int:
    """Count the islands of ``'1'`` cells in a grid of ``'1'`` and ``'0'``."""
    return sum(1 for _ in _islands(grid, lambda value: value == "1"))


def max_area_of_island(grid: Sequence[Sequence[int]]) -> int:
    """Return the size of the largest island of ``1`` cells, or 0."""
    return max(
        (len(island) for island in _islands(grid, lambda value: value == 1)),
        default=0,
    )


def capture_surrounded(board: Sequence[Sequence[str]]) -> list[list[str]]:
    """Turn every ``'O'`` region that does not reach the edge into ``'X'``.

    Cells of the result are ``'O'`` where an edge-connected ``'O'`` region
    lies and ``'X'`` everywhere else.
    """
    rows, cols = _shape(board)
    result = [["X"] * cols for _ in range(rows)]
    for island in _islands(board, lambda value: value == "O"):
        if _touches_border(island, rows, cols):
            for r, c in island:
                result[r][c] = "O"
    return result


def num_enclaves(grid: Sequence[Sequence[int]]) -> int:
    """Count the land cells (any non-zero cell) that cannot walk off the grid."""
    rows, cols = _shape(grid)
    return sum(
        len(island)
        for island in _islands(grid, lambda value: value != 0)
        if not _touches_border(island, rows, cols)
    )


def closed_islands(grid: Sequence[Sequence[int]]) -> int:
    """Count islands of ``0`` cells entirely surrounded by ``1`` cells."""
    rows, cols = _shape(grid)
    return sum(
        1
        for island in _islands(grid, lambda value: value == 0)
        if not _touches_border(island, rows, cols)
    )


def color_border(
    grid: Sequence[Sequence[Any]], row: int, col: int, color: Any
) -> list[list[Any]]:
    """Colour the border of the component containing ``(row, col)``.

    A component cell is on the border when it lies on the grid edge or has
    a neighbour outside the component.
    """
    result = [list(line) for line in grid]
    original = result[row][col]
    if original == color:
        return result
    rows, cols = _shape(grid)
    component = _region(grid, row, col, lambda value: value == original)
    for r, c in component:
        inside = sum(
            1 for cell in _neighbours(r, c, rows, cols) if cell in component
        )
        if inside < 4:
            result[r][c] = color
    return result


def find_paths(maze: Sequence[Sequence[int]]) -> list[str]:
    """Return every simple path from the top-left to the bottom-right cell.

    Open cells hold ``1``. Paths are strings of the moves ``D``, ``L``,
    ``R`` and ``U`` and come out in lexicographic order.
    """
    rows, cols = _shape(maze)
    if rows == 0 or cols == 0 or maze[0][0] != 1:
        return []
    target = (rows - 1, cols - 1)
    on_path: set[Cell] = set()

    def walk(r: int, c: int, path: str) -> Iterator[str]:
        if (r, c) == target:
            yield path
            return
        on_path.add((r, c))
        for letter, dr, dc in _MOVES:
            nr, nc = r + dr, c + dc
            if (
                0 <= nr < rows
                and 0 <= nc < cols
                and maze[nr][nc] == 1
                and (nr, nc) not in on_path
            ):
                yield from walk(nr, nc, path + letter)
        on_path.discard((r, c))

    return list(walk(0, 0, ""))