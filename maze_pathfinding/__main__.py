"""
Open the interactive maze window

    python -m maze_pathfinding [--heuristic chebyshev] [--start 0,0] [--goal 7,6]
"""

import argparse
import logging
import sys

from .astar_maze import HEURISTICS, AStarMaze, SearchConfig
from .controller import DEFAULT_GOAL, DEFAULT_START, MazeController


def parse_cell(text: str):
    """Parse 'row,col' into a coordinate"""
    try:
        row, col = (int(part) for part in text.split(','))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected ROW,COL but got {text!r}")
    return row, col


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="maze_pathfinding",
                                 description="Toggle maze obstacles and watch A* re-plan live.")
    ap.add_argument("--heuristic", choices=sorted(HEURISTICS), default="squared_euclidean",
                    help="Heuristic used by the search.")
    ap.add_argument("--validate", action="store_true",
                    help="Reject out-of-bounds start/goal instead of returning no path.")
    ap.add_argument("--start", type=parse_cell, default=DEFAULT_START, help="Start cell as ROW,COL.")
    ap.add_argument("--goal", type=parse_cell, default=DEFAULT_GOAL, help="Goal cell as ROW,COL.")
    ap.add_argument("--log-level", default="INFO", help="Logging level name.")
    return ap


def configure_logging(level_name: str):
    level = getattr(logging, level_name.upper(), None)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    # Imported here so --help works without a display backend
    from .viewer import MazeViewer

    config = SearchConfig(heuristic=args.heuristic, validate_coordinates=args.validate)
    controller = MazeController(start=args.start, goal=args.goal, planner=AStarMaze(config))
    MazeViewer(controller).show()
    return 0


if __name__ == "__main__":
    sys.exit(main())
