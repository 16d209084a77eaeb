import types

import matplotlib.pyplot as plt
import pytest

from maze_pathfinding.controller import MazeController
from maze_pathfinding.maze_grid import CellState, MazeGrid
from maze_pathfinding.viewer import GOAL_KEY, LEFT_BUTTON, RIGHT_BUTTON, START_KEY, MazeViewer, ViewConfig


@pytest.fixture
def viewer():
    controller = MazeController(MazeGrid(5, 5), start=(0, 0), goal=(4, 4))
    v = MazeViewer(controller)
    v.draw()
    yield v
    plt.close(v.fig)


def _event(viewer, row, col, **kwargs):
    return types.SimpleNamespace(inaxes=viewer.ax, xdata=float(col), ydata=float(row), **kwargs)


def test_event_to_cell_rounds_to_nearest_center(viewer):
    assert viewer.event_to_cell(_event(viewer, 2, 3)) == (2, 3)
    ev = types.SimpleNamespace(inaxes=viewer.ax, xdata=1.4, ydata=0.6)
    assert viewer.event_to_cell(ev) == (1, 1)


def test_event_outside_axes_or_grid_is_ignored(viewer):
    assert viewer.event_to_cell(types.SimpleNamespace(inaxes=None, xdata=None, ydata=None)) is None
    assert viewer.event_to_cell(_event(viewer, 7, 1)) is None


def test_left_click_adds_obstacle(viewer):
    viewer.on_click(_event(viewer, 2, 2, button=LEFT_BUTTON))
    assert viewer.controller.grid.state_at((2, 2)) == CellState.OBSTACLE
    assert (2, 2) not in viewer.controller.path


def test_right_click_removes_obstacle(viewer):
    viewer.controller.add_obstacle((1, 1))
    viewer.on_click(_event(viewer, 1, 1, button=RIGHT_BUTTON))
    assert viewer.controller.grid.state_at((1, 1)) == CellState.OPEN


def test_right_click_on_open_cell_does_nothing(viewer):
    viewer.on_click(_event(viewer, 3, 3, button=RIGHT_BUTTON))
    assert viewer.controller.grid.obstacles() == []


def test_keys_move_start_and_goal(viewer):
    viewer.on_key(_event(viewer, 4, 0, key=START_KEY))
    assert viewer.controller.start == (4, 0)
    viewer.on_key(_event(viewer, 0, 4, key=GOAL_KEY))
    assert viewer.controller.goal == (0, 4)
    assert viewer.controller.path[0] == (4, 0)
    assert viewer.controller.path[-1] == (0, 4)


def test_other_keys_are_ignored(viewer):
    viewer.on_key(_event(viewer, 3, 3, key='x'))
    assert viewer.controller.start == (0, 0)
    assert viewer.controller.goal == (4, 4)


def test_draw_shows_path_status(viewer):
    assert viewer.ax.get_title() == "A* Pathfinding (5 cells)"
    assert len(viewer.ax.lines) == 1

    for row in range(5):
        viewer.controller.grid.add_obstacle((row, 2))
    viewer.controller.replan()
    viewer.draw()
    assert viewer.ax.get_title() == "A* Pathfinding (no path)"
    assert len(viewer.ax.lines) == 0


def test_connect_is_idempotent():
    v = MazeViewer(MazeController(MazeGrid(3, 3), goal=(2, 2)), ViewConfig(window_title="Maze"))
    v.connect()
    v.connect()
    assert len(v._connections) == 2
    v.disconnect()
    assert v._connections == []
    plt.close(v.fig)
