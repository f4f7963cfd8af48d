import pytest

from algobox.grid_distance import (
    max_distance_from_land,
    nearest_zero,
    oranges_rotting,
    shortest_path_binary_matrix,
)


def check_distance_field(matrix, dist):
    rows, cols = len(matrix), len(matrix[0])
    for r in range(rows):
        for c in range(cols):
            if matrix[r][c] == 0:
                assert dist[r][c] == 0
                continue
            around = [
                dist[r + dr][c + dc]
                for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1))
                if 0 <= r + dr < rows and 0 <= c + dc < cols
            ]
            assert dist[r][c] == 1 + min(around)


def test_nearest_zero_field_is_consistent():
    matrix = [[0, 1, 1, 1], [1, 1, 1, 1], [1, 1, 0, 1], [1, 1, 1, 1]]
    dist = nearest_zero(matrix)
    check_distance_field(matrix, dist)


def test_nearest_zero_all_zero():
    matrix = [[0, 0], [0, 0]]
    assert nearest_zero(matrix) == matrix


def test_nearest_zero_does_not_mutate():
    matrix = [[0, 1], [1, 1]]
    nearest_zero(matrix)
    assert matrix == [[0, 1], [1, 1]]


def test_nearest_zero_without_zero_raises():
    with pytest.raises(ValueError):
        nearest_zero([[1, 1], [1, 1]])


def test_nearest_zero_single_row_example():
    assert nearest_zero([[0, 1, 1]]) == [[0, 1, 2]]


@pytest.mark.parametrize("grid", [[[1, 1], [1, 1]], [[0, 0], [0, 0]]])
def test_max_distance_all_land_or_all_water(grid):
    assert max_distance_from_land(grid) == -1


def test_max_distance_matches_nearest_zero():
    grid = [[1, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 1], [0, 0, 0, 0]]
    inverted = [[0 if value else 1 for value in row] for row in grid]
    expected = max(max(row) for row in nearest_zero(inverted))
    assert max_distance_from_land(grid) == expected


def test_oranges_no_fresh():
    assert oranges_rotting([[2, 0], [0, 2]]) == 0


def test_oranges_fresh_without_rotten():
    assert oranges_rotting([[1, 1], [0, 0]]) == -1


def test_oranges_unreachable_fresh():
    assert oranges_rotting([[2, 1, 0, 1]]) == -1


def test_oranges_row_example():
    assert oranges_rotting([[2, 1, 1, 1]]) == 3


def test_oranges_match_nearest_zero_without_empty_cells():
    grid = [[2, 1, 1], [1, 1, 1], [1, 1, 2]]
    as_zero = [[0 if value == 2 else 1 for value in row] for row in grid]
    expected = max(max(row) for row in nearest_zero(as_zero))
    assert oranges_rotting(grid) == expected
    assert grid == [[2, 1, 1], [1, 1, 1], [1, 1, 2]]


def test_shortest_path_single_cell():
    assert shortest_path_binary_matrix([[0]]) == 1


def test_shortest_path_diagonal():
    assert shortest_path_binary_matrix([[0, 1], [1, 0]]) == 2


@pytest.mark.parametrize("size", [2, 3, 5])
def test_shortest_path_open_square_is_diagonal(size):
    grid = [[0] * size for _ in range(size)]
    assert shortest_path_binary_matrix(grid) == size


@pytest.mark.parametrize(
    "grid",
    [
        [[1, 0], [0, 0]],
        [[0, 0], [0, 1]],
        [[0, 1, 0], [1, 1, 0], [0, 0, 0]],
    ],
)
def test_shortest_path_blocked(grid):
    assert shortest_path_binary_matrix(grid) == -1


def test_shortest_path_not_shorter_than_chebyshev_distance():
    grid = [[0, 0, 0, 0], [1, 1, 1, 0], [0, 0, 0, 0], [0, 1, 1, 1], [0, 0, 0, 0]]
    rows, cols = len(grid), len(grid[0])
    result = shortest_path_binary_matrix(grid)
    assert result >= max(rows, cols)
    assert result <= rows * cols