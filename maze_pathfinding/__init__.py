"""
Maze Pathfinding Package

A Python implementation of grid A* pathfinding for an interactive maze
visualizer, where obstacle edits and start/goal moves re-run the search live.

Key Features:
- 8-directional A* search with unit step cost
- Deterministic tie-breaking (first inserted node wins)
- numpy-backed maze grid with read-only snapshots
- Controller that re-plans on every maze change
- matplotlib viewer with mouse and keyboard editing
"""

from .errors import InvalidCoordinate
from .maze_grid import CellState, GridInterface, MazeGrid, default_maze
from .search_node import SearchNode
from .astar_maze import AStarMaze, SearchConfig, find_path
from .controller import MazeController

__version__ = "1.0.0"

__all__ = [
    'InvalidCoordinate',
    'CellState',
    'GridInterface',
    'MazeGrid',
    'default_maze',
    'SearchNode',
    'AStarMaze',
    'SearchConfig',
    'find_path',
    'MazeController'
]
