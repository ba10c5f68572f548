import pytest

from drillbox.maze import find_paths

STEPS = {"D": (1, 0), "U": (-1, 0), "L": (0, -1), "R": (0, 1)}

SAMPLE = [
    [1, 0, 0, 0],
    [1, 1, 0, 1],
    [1, 1, 0, 0],
    [0, 1, 1, 1],
]


def _assert_valid_path(grid, path):
    size = len(grid)
    row, col = 0, 0
    seen = {(row, col)}
    for move in path:
        d_row, d_col = STEPS[move]
        row, col = row + d_row, col + d_col
        assert 0 <= row < size and 0 <= col < size
        assert grid[row][col] == 1
        assert (row, col) not in seen
        seen.add((row, col))
    assert (row, col) == (size - 1, size - 1)


def test_sample_maze_paths():
    assert find_paths(SAMPLE) == ["DDRDRR", "DRDDRR"]


def test_every_path_is_valid_and_paths_are_sorted():
    grid = [[1, 1, 1], [1, 1, 1], [1, 1, 1]]
    paths = find_paths(grid)
    assert paths
    for path in paths:
        _assert_valid_path(grid, path)
    assert paths == sorted(paths)
    assert len(set(paths)) == len(paths)


def test_open_two_by_two():
    assert find_paths([[1, 1], [1, 1]]) == ["DR", "RD"]


def test_blocked_start_has_no_paths():
    assert find_paths([[0, 1], [1, 1]]) == []


def test_blocked_end_has_no_paths():
    assert find_paths([[1, 1], [1, 0]]) == []


def test_single_open_cell_yields_empty_route():
    assert find_paths([[1]]) == [""]


def test_walled_off_maze_has_no_paths():
    assert find_paths([[1, 0], [0, 1]]) == []


@pytest.mark.parametrize("grid", [[], [[1, 1]], [[1], [1, 1]]])
def test_non_square_grid_rejected(grid):
    with pytest.raises(ValueError):
        find_paths(grid)