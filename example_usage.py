#!/usr/bin/env python3
"""
Example usage of the maze A* pathfinding package
Demonstrates searching, obstacle toggling and re-planning without a window
"""

import time

from maze_pathfinding import (
    AStarMaze,
    SearchConfig,
    MazeController,
    MazeGrid,
    default_maze
)


def print_maze(grid, path, start, goal):
    """Print the maze with the path overlaid"""
    on_path = set(path)
    for r, line in enumerate(grid.to_strings()):
        row = []
        for c, ch in enumerate(line):
            if (r, c) == start:
                row.append('S')
            elif (r, c) == goal:
                row.append('G')
            elif (r, c) in on_path:
                row.append('*')
            else:
                row.append(ch)
        print("  " + ''.join(row))


def example_default_maze():
    """Search the default maze"""
    print("=== Default Maze Example ===")

    planner = AStarMaze()
    grid = default_maze()
    start, goal = (0, 0), (7, 6)

    success, path, stats = planner.search(grid, start, goal)

    if success:
        print(f"Path found with {len(path)} cells")
        print(f"Search stats: {stats}")
        print_maze(grid, path, start, goal)
    else:
        print(f"No path found: {stats.get('error', 'Unknown error')}")


def example_live_replanning():
    """Close and reopen the only gap in a wall"""
    print("\n=== Live Re-planning Example ===")

    grid = MazeGrid.from_strings([
        "..#..",
        "..#..",
        ".....",
        "..#..",
        "..#..",
    ])
    controller = MazeController(grid, start=(2, 0), goal=(2, 4))
    print(f"Initial path: {controller.path}")

    controller.add_obstacle((2, 2))
    print(f"Gap closed:   {controller.path or 'no path'}")

    controller.remove_obstacle((2, 2))
    print(f"Gap reopened: {controller.path}")


def example_heuristic_comparison():
    """Compare the default heuristic with the admissible one"""
    print("\n=== Heuristic Comparison ===")

    grid = default_maze()
    start, goal = (0, 0), (8, 9)

    print("Heuristic         | Path Length | Nodes Explored | Time(ms)")
    print("-" * 62)

    for name in ('squared_euclidean', 'chebyshev'):
        planner = AStarMaze(SearchConfig(heuristic=name))

        start_time = time.time()
        success, path, stats = planner.search(grid, start, goal)
        elapsed_time = (time.time() - start_time) * 1000

        path_length = len(path) if success else 0
        print(f"{name:17} | {path_length:11} | {stats['nodes_explored']:14} | {elapsed_time:8.2f}")


if __name__ == "__main__":
    example_default_maze()
    example_live_replanning()
    example_heuristic_comparison()

    print("\nRun `python -m maze_pathfinding` for the interactive window.")
