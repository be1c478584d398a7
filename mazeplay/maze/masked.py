"""Masked topology: a rectangular grid keeping only the cells a mask selects."""

import logging
from collections.abc import Sequence

import numpy as np

from mazeplay.maze.layout import GridLayout, check_dimensions
from mazeplay.maze.types import Maze, Topology
from mazeplay.maze.validation import ensure_structurally_connected

log = logging.getLogger(__name__)


def parse_mask(lines: Sequence[str], filled: str = "X") -> tuple[int, int, tuple[bool, ...]]:
    """Convert text rows into (rows, columns, flat row-major mask).

    A position is part of the maze when its character equals ``filled``.

    Raises:
        ValueError: If there are no rows or the rows differ in length.
    """
    if not lines:
        raise ValueError("Mask must have at least one row")
    columns = len(lines[0])
    for number, line in enumerate(lines):
        if len(line) != columns:
            raise ValueError(
                f"Mask row {number} has {len(line)} columns, expected {columns}"
            )
    mask = tuple(ch == filled for line in lines for ch in line)
    return len(lines), columns, mask


def build_masked(rows: int, columns: int, mask: Sequence[bool]) -> Maze:
    """Build an uncarved maze over the masked-in cells of a rows x columns grid.

    Structural walls only join two masked-in, axis-adjacent cells.

    Raises:
        ValueError: On bad dimensions, a mask of the wrong size, or a mask
            selecting no cells.
        DisconnectedMazeError: If the selected cells are not all connected.
    """
    check_dimensions(rows=rows, columns=columns)
    if len(mask) != rows * columns:
        raise ValueError(
            f"Expected mask to have {rows * columns} values, instead had {len(mask)}"
        )

    selected = np.array([bool(m) for m in mask], dtype=bool).reshape(rows, columns)
    count = int(selected.sum())
    if count == 0:
        raise ValueError("Mask does not select any cells")

    index = np.full((rows, columns), -1, dtype=np.int64)
    index[selected] = np.arange(count, dtype=np.int64)
    layout = GridLayout.from_index(index)
    maze = Maze(Topology.MASKED, count, layout)

    for cell in maze.all_cells():
        row, column = layout.position_of(cell)
        for neighbor in (
            layout.cell_at(row - 1, column),
            layout.cell_at(row, column - 1),
        ):
            if neighbor is not None:
                maze.link(cell, neighbor)

    ensure_structurally_connected(maze)

    log.info(
        "Built masked maze %dx%d (%d of %d cells, %d walls)",
        rows,
        columns,
        count,
        rows * columns,
        len(maze.walls),
    )
    return maze
