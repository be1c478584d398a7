"""Coordinate layouts attached to built mazes.

A layout is the coordinate capability of a maze: grid-like topologies get
row/column lookup, circular mazes get ring/angle positions. The narrower
``RectangularLayout`` additionally names a single "straight" (east) and
"turn" (north) wall per cell, which is what BinaryTree and Sidewinder need.
"""

from dataclasses import dataclass

import numpy as np

from mazeplay.maze.types import Maze, Wall


def check_dimensions(**dimensions: int) -> None:
    """Raise ValueError naming the first non-positive dimension."""
    for name, value in dimensions.items():
        if value < 1:
            raise ValueError(f"{name} must be >= 1, got {value}")


def full_grid_index(rows: int, columns: int) -> np.ndarray:
    """Row-major cell ids for a grid with every position filled."""
    return np.arange(rows * columns, dtype=np.int64).reshape(rows, columns)


@dataclass(frozen=True)
class GridLayout:
    """Row/column lookup for grid-like mazes.

    Omits slots=True since the numpy index array doesn't interact well
    with __slots__.
    """

    rows: int
    columns: int
    index: np.ndarray  # int array (rows x columns), cell id or -1 if no cell
    positions: tuple[tuple[int, int], ...]  # cell id -> (row, column)

    @classmethod
    def from_index(cls, index: np.ndarray) -> "GridLayout":
        rows, columns = index.shape
        count = int((index >= 0).sum())
        positions: list[tuple[int, int]] = [(0, 0)] * count
        for row in range(rows):
            for column in range(columns):
                cell = int(index[row, column])
                if cell >= 0:
                    positions[cell] = (row, column)
        return cls(rows=rows, columns=columns, index=index, positions=tuple(positions))

    def position_of(self, cell: int) -> tuple[int, int]:
        return self.positions[cell]

    def cell_at(self, row: int, column: int) -> int | None:
        if row < 0 or column < 0 or row >= self.rows or column >= self.columns:
            return None
        cell = int(self.index[row, column])
        return cell if cell >= 0 else None

    def cells_in_row(self, row: int) -> list[int]:
        return [int(c) for c in self.index[row] if c >= 0]

    def cells_in_column(self, column: int) -> list[int]:
        return [int(c) for c in self.index[:, column] if c >= 0]


@dataclass(frozen=True)
class RectangularLayout(GridLayout):
    """Full rectangular grid with a straight/turn direction per cell."""

    def straight_wall(self, maze: Maze, cell: int) -> Wall | None:
        """Wall to the eastern neighbor, if any."""
        row, column = self.position_of(cell)
        neighbor = self.cell_at(row, column + 1)
        return None if neighbor is None else maze.wall_between(cell, neighbor)

    def turn_wall(self, maze: Maze, cell: int) -> Wall | None:
        """Wall to the northern neighbor (previous row), if any."""
        row, column = self.position_of(cell)
        neighbor = self.cell_at(row - 1, column)
        return None if neighbor is None else maze.wall_between(cell, neighbor)


@dataclass(frozen=True, slots=True)
class CircularPosition:
    ring: int
    index: int  # position within the ring, clockwise from 0 degrees
    start_degree: float
    end_degree: float


@dataclass(frozen=True, slots=True)
class RingLayout:
    """Ring/angle positions for circular mazes. Ring 0 is the center cell."""

    ring_sizes: tuple[int, ...]
    positions: tuple[CircularPosition, ...]

    @property
    def ring_count(self) -> int:
        return len(self.ring_sizes)

    def position_of(self, cell: int) -> CircularPosition:
        return self.positions[cell]

    def first_cell_of_ring(self, ring: int) -> int:
        return sum(self.ring_sizes[:ring])

    def cells_in_ring(self, ring: int) -> list[int]:
        first = self.first_cell_of_ring(ring)
        return list(range(first, first + self.ring_sizes[ring]))
