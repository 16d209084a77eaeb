"""
A* algorithm implementation for 2D maze pathfinding
Best-first search over an 8-connected grid with unit step cost
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from .errors import InvalidCoordinate
from .maze_grid import Coord, GridInterface
from .search_node import SearchNode

logger = logging.getLogger(__name__)

# Orthogonal moves first, then diagonals. Child insertion order follows this.
NEIGHBOR_OFFSETS: Tuple[Coord, ...] = (
    (0, -1), (0, 1), (-1, 0), (1, 0),
    (-1, -1), (-1, 1), (1, -1), (1, 1),
)

STEP_COST = 1


def squared_euclidean_heuristic(position: Coord, goal: Coord) -> int:
    """
    Squared Euclidean distance

    Not admissible for unit step cost, so the search behaves greedily
    and the result is not guaranteed to be a shortest path.
    """
    dr = position[0] - goal[0]
    dc = position[1] - goal[1]
    return dr * dr + dc * dc


def chebyshev_heuristic(position: Coord, goal: Coord) -> int:
    """Chebyshev distance, admissible for 8-directional unit-cost moves"""
    return max(abs(position[0] - goal[0]), abs(position[1] - goal[1]))


HEURISTICS: Dict[str, Callable[[Coord, Coord], int]] = {
    'squared_euclidean': squared_euclidean_heuristic,
    'chebyshev': chebyshev_heuristic,
}


@dataclass
class SearchConfig:
    """Configuration parameters for maze A* search"""
    heuristic: str = 'squared_euclidean'
    validate_coordinates: bool = False  # raise InvalidCoordinate for out-of-bounds start/goal

    def __post_init__(self):
        if self.heuristic not in HEURISTICS:
            raise ValueError(
                f"Unknown heuristic {self.heuristic!r}, expected one of {sorted(HEURISTICS)}"
            )


class AStarMaze:
    """
    2D A* pathfinding over a maze grid

    Features:
    - 8-directional movement, each step costing 1
    - Linear-scan open list with a first-inserted-wins tie-break,
      so repeated searches return identical paths
    - Reads a grid snapshot, never the live grid
    - No state kept between searches
    """

    def __init__(self, config: SearchConfig = None):
        self.config = config if config is not None else SearchConfig()
        self.heuristic = HEURISTICS[self.config.heuristic]

    def validate(self, grid: GridInterface, start: Coord, goal: Coord):
        """Raise InvalidCoordinate if start or goal is outside the grid"""
        for position in (start, goal):
            if not grid.in_bounds(position):
                raise InvalidCoordinate(position, grid.shape)

    @staticmethod
    def select_next(open_list: List[SearchNode]) -> int:
        """
        Index of the open node with the lowest f

        A later node only wins if its f is strictly smaller, so among
        ties the earliest inserted node is chosen.
        """
        best_index = 0
        best_f = open_list[0].f
        for i, node in enumerate(open_list):
            if node.f < best_f:
                best_index = i
                best_f = node.f
        return best_index

    def get_children(self, grid: GridInterface, current: SearchNode, goal: Coord) -> List[SearchNode]:
        """Open neighbors of current, with costs filled in"""
        children = []
        g = current.g + STEP_COST

        for dr, dc in NEIGHBOR_OFFSETS:
            position = (current.position[0] + dr, current.position[1] + dc)

            # Covers both out-of-bounds and obstacle cells
            if not grid.is_open(position):
                continue

            children.append(SearchNode(position, current, g, self.heuristic(position, goal)))

        return children

    def reconstruct_path(self, current: SearchNode) -> List[Coord]:
        """Walk parent links back to the start and return start-to-goal order"""
        path = []
        while current is not None:
            path.append(current.position)
            current = current.parent
        path.reverse()
        return path

    def search(self, grid: GridInterface, start: Coord,
               goal: Coord) -> Tuple[bool, List[Coord], dict]:
        """
        Perform A* search from start to goal

        Args:
            grid: Maze to search; only its snapshot is read
            start: Starting cell (row, col)
            goal: Goal cell (row, col)

        Returns:
            success: Whether a path was found
            path: Cells from start to goal inclusive (empty on failure)
            stats: Search statistics
        """
        start_time = time.time()
        start = (int(start[0]), int(start[1]))
        goal = (int(goal[0]), int(goal[1]))

        if self.config.validate_coordinates:
            self.validate(grid, start, goal)

        grid = grid.snapshot()
        logger.debug("Searching %s -> %s on grid %s", start, goal, grid.shape)

        open_list = [SearchNode(start)]
        closed = set()

        num_iterations = 0
        nodes_explored = 0

        while open_list:
            num_iterations += 1

            current = open_list.pop(self.select_next(open_list))

            # Stale duplicate of a position that was already expanded
            if current.position in closed:
                continue
            closed.add(current.position)

            if current.position == goal:
                path = self.reconstruct_path(current)
                stats = {
                    "iterations": num_iterations,
                    "nodes_explored": nodes_explored,
                    "path_length": len(path),
                    "time": time.time() - start_time
                }
                logger.debug("Path found %s -> %s: %s", start, goal, stats)
                return True, path, stats

            nodes_explored += 1

            for child in self.get_children(grid, current, goal):
                if child.position in closed:
                    continue

                # Only admit a child that beats every open entry at its position
                if any(node == child and node.g <= child.g for node in open_list):
                    continue

                open_list.append(child)

        stats = {
            "error": "No path found",
            "iterations": num_iterations,
            "nodes_explored": nodes_explored,
            "time": time.time() - start_time
        }
        logger.debug("No path %s -> %s: %s", start, goal, stats)
        return False, [], stats

    def find_path(self, grid: GridInterface, start: Coord, goal: Coord) -> List[Coord]:
        """Cells from start to goal inclusive, or an empty list if unreachable"""
        _, path, _ = self.search(grid, start, goal)
        return path


def find_path(grid: GridInterface, start: Coord, goal: Coord,
              config: Optional[SearchConfig] = None) -> List[Coord]:
    """Run a one-off search with a fresh planner"""
    return AStarMaze(config).find_path(grid, start, goal)
