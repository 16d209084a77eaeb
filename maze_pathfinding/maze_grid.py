"""
Maze grid model for A* pathfinding
Holds the obstacle mask and the (row, col) coordinate system
"""

import numpy as np
from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterable, List, Sequence, Tuple

from .errors import InvalidCoordinate

Coord = Tuple[int, int]

OBSTACLE_CHAR = '#'
OPEN_CHAR = '.'


class CellState(Enum):
    """Per-cell state of the maze"""
    OPEN = 0
    OBSTACLE = 1


class GridInterface(ABC):
    """Abstract interface for grids the search engine can read"""

    @property
    @abstractmethod
    def shape(self) -> Tuple[int, int]:
        """Grid dimensions as (rows, cols)"""
        pass

    @abstractmethod
    def in_bounds(self, position: Coord) -> bool:
        """Check if a coordinate lies inside the grid"""
        pass

    @abstractmethod
    def is_open(self, position: Coord) -> bool:
        """Check if a coordinate is inside the grid and not an obstacle"""
        pass

    @abstractmethod
    def snapshot(self) -> 'GridInterface':
        """Return a view that will not change for the duration of a search"""
        pass


class MazeGrid(GridInterface):
    """
    Rectangular 2D maze backed by a numpy array

    Cells are addressed as (row, col). Each cell is either
    CellState.OPEN or CellState.OBSTACLE. Grids returned by snapshot()
    are read-only.
    """

    def __init__(self, rows: int, cols: int):
        """
        Initialize an all-open grid

        Args:
            rows: Number of rows (must be positive)
            cols: Number of columns (must be positive)
        """
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}")

        self._cells = np.full((rows, cols), CellState.OPEN.value, dtype=np.int8)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence]) -> 'MazeGrid':
        """
        Build a grid from nested rows

        Each cell may be a CellState, a bool (True = obstacle) or an
        int (1 = obstacle, 0 = open).
        """
        rows = [list(row) for row in rows]
        if not rows or not rows[0]:
            raise ValueError("Grid must have at least one row and one column")

        width = len(rows[0])
        for i, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"Grid is not rectangular: row {i} has {len(row)} cells, expected {width}")

        grid = cls(len(rows), width)
        for r, row in enumerate(rows):
            for c, cell in enumerate(row):
                grid._cells[r, c] = _cell_value(cell)
        return grid

    @classmethod
    def from_strings(cls, lines: Iterable[str]) -> 'MazeGrid':
        """Build a grid from text rows where '#' is an obstacle and '.' is open"""
        rows = []
        for line in lines:
            row = []
            for ch in line:
                if ch == OBSTACLE_CHAR:
                    row.append(CellState.OBSTACLE)
                elif ch == OPEN_CHAR:
                    row.append(CellState.OPEN)
                else:
                    raise ValueError(f"Unexpected maze character {ch!r}")
            rows.append(row)
        return cls.from_rows(rows)

    @property
    def shape(self) -> Tuple[int, int]:
        return self._cells.shape

    @property
    def rows(self) -> int:
        return self._cells.shape[0]

    @property
    def cols(self) -> int:
        return self._cells.shape[1]

    @property
    def read_only(self) -> bool:
        return not self._cells.flags.writeable

    def as_array(self) -> np.ndarray:
        """Return a copy of the obstacle mask (1 = obstacle)"""
        return self._cells.copy()

    def in_bounds(self, position: Coord) -> bool:
        row, col = position
        return 0 <= row < self._cells.shape[0] and 0 <= col < self._cells.shape[1]

    def state_at(self, position: Coord) -> CellState:
        """Get the state of an in-bounds cell"""
        self._check_bounds(position)
        return CellState(int(self._cells[position[0], position[1]]))

    def is_open(self, position: Coord) -> bool:
        if not self.in_bounds(position):
            return False
        return self._cells[position[0], position[1]] == CellState.OPEN.value

    def set_state(self, position: Coord, state: CellState) -> bool:
        """
        Set a cell's state

        Returns:
            True if the cell changed
        """
        self._check_bounds(position)
        if self.read_only:
            raise ValueError("Cannot modify a grid snapshot")

        row, col = position
        if self._cells[row, col] == state.value:
            return False
        self._cells[row, col] = state.value
        return True

    def add_obstacle(self, position: Coord) -> bool:
        return self.set_state(position, CellState.OBSTACLE)

    def remove_obstacle(self, position: Coord) -> bool:
        return self.set_state(position, CellState.OPEN)

    def toggle(self, position: Coord) -> CellState:
        """Flip a cell between open and obstacle, returning the new state"""
        if self.state_at(position) == CellState.OPEN:
            new_state = CellState.OBSTACLE
        else:
            new_state = CellState.OPEN
        self.set_state(position, new_state)
        return new_state

    def snapshot(self) -> 'MazeGrid':
        if self.read_only:
            return self

        frozen = MazeGrid.__new__(MazeGrid)
        frozen._cells = self._cells.copy()
        frozen._cells.setflags(write=False)
        return frozen

    def obstacles(self) -> List[Coord]:
        """List obstacle coordinates in row-major order"""
        rows, cols = np.nonzero(self._cells == CellState.OBSTACLE.value)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def to_strings(self) -> List[str]:
        return [
            ''.join(OBSTACLE_CHAR if cell == CellState.OBSTACLE.value else OPEN_CHAR for cell in row)
            for row in self._cells
        ]

    def _check_bounds(self, position: Coord):
        if not self.in_bounds(position):
            raise InvalidCoordinate(position, self.shape)

    def __eq__(self, other):
        if not isinstance(other, MazeGrid):
            return False
        return np.array_equal(self._cells, other._cells)

    def __repr__(self):
        return f"MazeGrid(shape={self.shape}, obstacles={len(self.obstacles())}, read_only={self.read_only})"


def _cell_value(cell) -> int:
    if isinstance(cell, CellState):
        return cell.value
    if cell in (0, 1):
        return int(cell)
    raise ValueError(f"Unsupported cell value {cell!r}")


def default_maze() -> MazeGrid:
    """
    The 10x10 starting maze of the interactive visualizer

    Column 3 is blocked in rows 0-2 and rows 6-8, leaving gaps in
    rows 3-5 and row 9.
    """
    grid = MazeGrid(10, 10)
    for row in (0, 1, 2, 6, 7, 8):
        grid.add_obstacle((row, 3))
    return grid
