"""
Search node for maze A* pathfinding
Represents one expansion step in the 2D search
"""

from typing import Optional, Tuple


class SearchNode:
    """
    Represents a single node discovered during one A* search

    Attributes:
        position: Grid coordinates (row, col)
        parent: Node this one was expanded from (None for the start node)
        g: Cost from start to this node
        h: Heuristic estimate from this node to the goal
        f: Priority used to pick the next node (g + h)
    """

    def __init__(self, position: Tuple[int, int], parent: Optional['SearchNode'] = None,
                 g: int = 0, h: int = 0):
        self.position = position
        self.parent = parent

        self.g = g
        self.h = h
        self.f = g + h

    def __lt__(self, other):
        """Comparison for priority ordering (lower f has higher priority)"""
        return self.f < other.f

    def __eq__(self, other):
        """Equality comparison based on grid position only"""
        if not isinstance(other, SearchNode):
            return False
        return self.position == other.position

    def __hash__(self):
        return hash(self.position)

    def __repr__(self):
        return f"SearchNode(position={self.position}, g={self.g}, h={self.h}, f={self.f})"
