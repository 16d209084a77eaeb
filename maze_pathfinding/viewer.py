"""
Interactive matplotlib view of the maze

Left click blocks a cell, right click clears it, space moves the start
to the cell under the pointer and enter moves the goal there.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import ListedColormap

from .controller import MazeController
from .maze_grid import CellState, Coord

logger = logging.getLogger(__name__)

LEFT_BUTTON = 1
RIGHT_BUTTON = 3
START_KEY = ' '
GOAL_KEY = 'enter'


@dataclass
class ViewConfig:
    """Display settings for the maze window"""
    window_title: str = "A* Pathfinding"
    figsize: Tuple[float, float] = (8, 8)
    open_color: str = 'white'
    obstacle_color: str = 'black'
    background_color: str = 'gray'
    path_color: str = 'lime'
    path_width: float = 4.0
    start_color: str = 'darkblue'
    goal_color: str = 'saddlebrown'
    marker_size: float = 300.0


class MazeViewer:
    """Draws a MazeController's state and forwards input to it"""

    def __init__(self, controller: MazeController, config: ViewConfig = None):
        self.controller = controller
        self.config = config if config is not None else ViewConfig()

        self.fig, self.ax = plt.subplots(figsize=self.config.figsize)
        self.fig.patch.set_facecolor(self.config.background_color)
        self.cmap = ListedColormap([self.config.open_color, self.config.obstacle_color])
        self._connections = []

    def event_to_cell(self, event) -> Optional[Coord]:
        """Map a mouse or key event to the grid cell under the pointer"""
        if event.inaxes is not self.ax or event.xdata is None or event.ydata is None:
            return None

        # imshow puts cell centers on integer data coordinates
        cell = (int(np.floor(event.ydata + 0.5)), int(np.floor(event.xdata + 0.5)))
        if not self.controller.grid.in_bounds(cell):
            return None
        return cell

    def on_click(self, event):
        cell = self.event_to_cell(event)
        if cell is None:
            return

        grid = self.controller.grid
        changed = False
        if event.button == LEFT_BUTTON and grid.state_at(cell) == CellState.OPEN:
            changed = self.controller.add_obstacle(cell)
        elif event.button == RIGHT_BUTTON and grid.state_at(cell) == CellState.OBSTACLE:
            changed = self.controller.remove_obstacle(cell)

        if changed:
            self.draw()

    def on_key(self, event):
        cell = self.event_to_cell(event)
        if cell is None:
            return

        if event.key == START_KEY:
            self.controller.move_start(cell)
        elif event.key == GOAL_KEY:
            self.controller.move_goal(cell)
        else:
            return
        self.draw()

    def draw(self):
        """Redraw cells, path and endpoints"""
        cfg = self.config
        controller = self.controller
        ax = self.ax

        ax.clear()
        ax.imshow(controller.grid.as_array(), cmap=self.cmap, vmin=0, vmax=1,
                  interpolation='nearest', origin='upper')

        if len(controller.path) > 1:
            path_rows = [r for r, _ in controller.path]
            path_cols = [c for _, c in controller.path]
            ax.plot(path_cols, path_rows, color=cfg.path_color, linewidth=cfg.path_width, zorder=3)

        ax.scatter([controller.start[1]], [controller.start[0]], s=cfg.marker_size,
                   c=cfg.start_color, zorder=4)
        ax.scatter([controller.goal[1]], [controller.goal[0]], s=cfg.marker_size,
                   c=cfg.goal_color, zorder=4)

        rows, cols = controller.grid.shape
        ax.set_xlim(-0.5, cols - 0.5)
        ax.set_ylim(rows - 0.5, -0.5)
        ax.set_xticks([])
        ax.set_yticks([])

        status = f"{len(controller.path)} cells" if controller.has_path else "no path"
        ax.set_title(f"{cfg.window_title} ({status})")
        self.fig.canvas.draw_idle()

    def connect(self):
        if self._connections:
            return
        canvas = self.fig.canvas
        self._connections = [
            canvas.mpl_connect('button_press_event', self.on_click),
            canvas.mpl_connect('key_press_event', self.on_key),
        ]

    def disconnect(self):
        for cid in self._connections:
            self.fig.canvas.mpl_disconnect(cid)
        self._connections = []

    def show(self):
        """Open the window and block until it is closed"""
        self.connect()
        self.draw()
        manager = self.fig.canvas.manager
        if manager is not None:
            manager.set_window_title(self.config.window_title)
        logger.info("Viewer opened for a %dx%d maze", *self.controller.grid.shape)
        plt.show()
