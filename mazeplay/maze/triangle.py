"""Triangle topology: alternating up- and down-pointing cells in rows."""

import logging

from mazeplay.maze.layout import GridLayout, check_dimensions, full_grid_index
from mazeplay.maze.types import Maze, Topology

log = logging.getLogger(__name__)


def is_pointing_up(row: int, column: int) -> bool:
    """The top-left cell points up and orientation alternates along rows and columns."""
    return (row + column) % 2 == 0


def check_triangle_shape(rows: int, columns: int) -> None:
    """Reject shapes whose triangles cannot all be connected.

    In a single column every up-pointing cell below the first row has no
    left neighbor and no shared edge above, so it would be isolated.
    """
    check_dimensions(rows=rows, columns=columns)
    if columns == 1 and rows > 2:
        raise ValueError(
            f"triangle mazes with a single column need at most 2 rows, got {rows}"
        )


def build_triangle(rows: int, columns: int) -> Maze:
    """Build an uncarved rows x columns triangle maze.

    Every cell links to its left neighbor. Down-pointing cells share their
    flat top edge with the up-pointing cell above, so only they link upward.

    Raises:
        ValueError: On non-positive dimensions or a single column with
            more than 2 rows.
    """
    check_triangle_shape(rows, columns)
    layout = GridLayout.from_index(full_grid_index(rows, columns))
    maze = Maze(Topology.TRIANGLE, rows * columns, layout)

    for row in range(rows):
        for column in range(columns):
            cell = layout.cell_at(row, column)
            left = layout.cell_at(row, column - 1)
            if left is not None:
                maze.link(cell, left)
            if not is_pointing_up(row, column):
                above = layout.cell_at(row - 1, column)
                if above is not None:
                    maze.link(cell, above)

    log.info(
        "Built triangle maze %dx%d (%d cells, %d walls)",
        rows,
        columns,
        maze.cell_count,
        len(maze.walls),
    )
    return maze
