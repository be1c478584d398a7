"""Rectangular grid topology: each cell joined to its up-to-4 axis neighbors."""

import logging

from mazeplay.maze.layout import RectangularLayout, check_dimensions, full_grid_index
from mazeplay.maze.types import Maze, Topology

log = logging.getLogger(__name__)


def build_rectangular(rows: int, columns: int) -> Maze:
    """Build an uncarved rows x columns rectangular maze.

    Each cell links north and west; south and east are implied by the
    neighbors that come later in row-major order.
    """
    check_dimensions(rows=rows, columns=columns)
    layout = RectangularLayout.from_index(full_grid_index(rows, columns))
    maze = Maze(Topology.RECTANGULAR, rows * columns, layout)

    for row in range(rows):
        for column in range(columns):
            cell = layout.cell_at(row, column)
            for neighbor in (
                layout.cell_at(row - 1, column),
                layout.cell_at(row, column - 1),
            ):
                if neighbor is not None:
                    maze.link(cell, neighbor)

    log.info(
        "Built rectangular maze %dx%d (%d cells, %d walls)",
        rows,
        columns,
        maze.cell_count,
        len(maze.walls),
    )
    return maze
