"""Hex topology in offset coordinates.

Columns are straight and every odd column is shifted half a cell down,
with the first cell at the top left. Each cell links to the neighbors
already created in row-major order (north-west, north, north-east and,
for the shifted parity, south-west); the other directions come from the
reverse links those neighbors create.
"""

import logging

from mazeplay.maze.layout import GridLayout, check_dimensions, full_grid_index
from mazeplay.maze.types import Maze, Topology

log = logging.getLogger(__name__)


def hex_earlier_neighbors(row: int, column: int) -> list[tuple[int, int]]:
    """Positions of the neighbors linked when (row, column) is created."""
    shifted = column % 2 == 1
    upper_row = row if shifted else row - 1
    lower_row = row + 1 if shifted else row
    return [
        (upper_row, column - 1),  # north-west
        (row - 1, column),  # north
        (upper_row, column + 1),  # north-east
        (lower_row, column - 1),  # south-west
    ]


def build_hex(rows: int, columns: int) -> Maze:
    """Build an uncarved rows x columns hex maze."""
    check_dimensions(rows=rows, columns=columns)
    layout = GridLayout.from_index(full_grid_index(rows, columns))
    maze = Maze(Topology.HEX, rows * columns, layout)

    for row in range(rows):
        for column in range(columns):
            cell = layout.cell_at(row, column)
            for n_row, n_column in hex_earlier_neighbors(row, column):
                neighbor = layout.cell_at(n_row, n_column)
                # Only link cells created earlier in row-major order
                if neighbor is not None and neighbor < cell:
                    maze.link(cell, neighbor)

    log.info(
        "Built hex maze %dx%d (%d cells, %d walls)",
        rows,
        columns,
        maze.cell_count,
        len(maze.walls),
    )
    return maze
