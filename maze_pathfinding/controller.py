"""
Maze controller
Owns the grid, start and goal, and re-runs the search on every change
"""

import logging
from typing import List, Optional

from .astar_maze import AStarMaze
from .errors import InvalidCoordinate
from .maze_grid import CellState, Coord, MazeGrid, default_maze

logger = logging.getLogger(__name__)

DEFAULT_START: Coord = (0, 0)
DEFAULT_GOAL: Coord = (7, 6)


class MazeController:
    """
    Keeps the current path in sync with the maze

    The path is recomputed whenever an obstacle is added or removed,
    or the start or goal moves. Obstacle edits that leave the cell
    unchanged do not trigger a search.
    """

    def __init__(self, grid: Optional[MazeGrid] = None,
                 start: Coord = DEFAULT_START,
                 goal: Coord = DEFAULT_GOAL,
                 planner: Optional[AStarMaze] = None):
        self.grid = grid if grid is not None else default_maze()
        self.start = tuple(start)
        self.goal = tuple(goal)
        self.planner = planner if planner is not None else AStarMaze()

        self.path: List[Coord] = []
        self.replan()

    @property
    def has_path(self) -> bool:
        return len(self.path) > 0

    def replan(self) -> List[Coord]:
        """Search again from the current start to the current goal"""
        self.path = self.planner.find_path(self.grid, self.start, self.goal)
        if not self.path:
            logger.info("No path from %s to %s", self.start, self.goal)
        return self.path

    def add_obstacle(self, position: Coord) -> bool:
        """Block a cell. Returns True if the cell was open."""
        changed = self.grid.add_obstacle(position)
        if changed:
            logger.debug("Obstacle added at %s", position)
            self.replan()
        return changed

    def remove_obstacle(self, position: Coord) -> bool:
        """Clear a cell. Returns True if the cell was blocked."""
        changed = self.grid.remove_obstacle(position)
        if changed:
            logger.debug("Obstacle removed at %s", position)
            self.replan()
        return changed

    def toggle_obstacle(self, position: Coord) -> CellState:
        """Flip a cell and return its new state"""
        state = self.grid.toggle(position)
        logger.debug("Cell %s is now %s", position, state.name)
        self.replan()
        return state

    def move_start(self, position: Coord) -> List[Coord]:
        self.start = self._checked(position)
        return self.replan()

    def move_goal(self, position: Coord) -> List[Coord]:
        self.goal = self._checked(position)
        return self.replan()

    def _checked(self, position: Coord) -> Coord:
        position = (int(position[0]), int(position[1]))
        if not self.grid.in_bounds(position):
            raise InvalidCoordinate(position, self.grid.shape)
        return position
