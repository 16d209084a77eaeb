"""
Exceptions raised by the maze pathfinding package
"""

from typing import Optional, Tuple


class InvalidCoordinate(ValueError):
    """Raised when a coordinate lies outside the grid it is used with"""

    def __init__(self, position, shape: Optional[Tuple[int, int]] = None):
        self.position = position
        self.shape = shape
        if shape is None:
            message = f"Invalid coordinate {position}"
        else:
            message = f"Coordinate {position} is outside grid of shape {shape}"
        super().__init__(message)
