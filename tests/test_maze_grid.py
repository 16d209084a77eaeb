import numpy as np
import pytest

from maze_pathfinding.errors import InvalidCoordinate
from maze_pathfinding.maze_grid import CellState, MazeGrid, default_maze


def test_new_grid_is_all_open():
    grid = MazeGrid(3, 4)
    assert grid.shape == (3, 4)
    assert grid.rows == 3 and grid.cols == 4
    assert all(grid.is_open((r, c)) for r in range(3) for c in range(4))
    assert grid.obstacles() == []


def test_non_positive_dimensions_rejected():
    with pytest.raises(ValueError):
        MazeGrid(0, 3)


def test_from_strings_marks_obstacles():
    grid = MazeGrid.from_strings([".#.", "..#"])
    assert grid.shape == (2, 3)
    assert grid.obstacles() == [(0, 1), (1, 2)]
    assert grid.state_at((0, 1)) == CellState.OBSTACLE
    assert grid.state_at((0, 0)) == CellState.OPEN
    assert grid.to_strings() == [".#.", "..#"]


def test_from_strings_rejects_unknown_character():
    with pytest.raises(ValueError):
        MazeGrid.from_strings(["..x"])


def test_from_rows_accepts_mixed_cell_values():
    grid = MazeGrid.from_rows([[0, True], [CellState.OBSTACLE, False]])
    assert grid.obstacles() == [(0, 1), (1, 0)]


def test_ragged_rows_rejected():
    with pytest.raises(ValueError):
        MazeGrid.from_rows([[0, 0, 0], [0, 0]])


def test_empty_rows_rejected():
    with pytest.raises(ValueError):
        MazeGrid.from_rows([])


def test_is_open_is_false_outside_bounds():
    grid = MazeGrid(2, 2)
    for pos in [(-1, 0), (0, -1), (2, 0), (0, 2), (5, 5)]:
        assert not grid.in_bounds(pos)
        assert not grid.is_open(pos)


def test_mutators_report_changes():
    grid = MazeGrid(2, 2)
    assert grid.add_obstacle((1, 1)) is True
    assert grid.add_obstacle((1, 1)) is False
    assert not grid.is_open((1, 1))
    assert grid.remove_obstacle((1, 1)) is True
    assert grid.remove_obstacle((1, 1)) is False
    assert grid.toggle((0, 0)) == CellState.OBSTACLE
    assert grid.toggle((0, 0)) == CellState.OPEN


def test_out_of_bounds_mutation_raises():
    grid = MazeGrid(2, 2)
    with pytest.raises(InvalidCoordinate) as excinfo:
        grid.add_obstacle((2, 0))
    assert excinfo.value.position == (2, 0)
    assert excinfo.value.shape == (2, 2)


def test_snapshot_is_frozen_and_detached():
    grid = MazeGrid(3, 3)
    snap = grid.snapshot()
    assert snap.read_only
    assert snap == grid

    grid.add_obstacle((1, 1))
    assert snap.is_open((1, 1))
    assert not grid.is_open((1, 1))

    with pytest.raises(ValueError):
        snap.add_obstacle((0, 0))
    assert snap.snapshot() is snap


def test_as_array_is_a_copy():
    grid = MazeGrid(2, 2)
    arr = grid.as_array()
    arr[0, 0] = 1
    assert grid.is_open((0, 0))
    assert isinstance(arr, np.ndarray)


def test_default_maze_layout():
    grid = default_maze()
    assert grid.shape == (10, 10)
    assert grid.obstacles() == [(r, 3) for r in (0, 1, 2, 6, 7, 8)]
