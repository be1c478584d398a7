"""Maze graph primitives: cells, shared walls, and the owning maze arena.

Cells are plain integer handles in ``range(maze.cell_count)``. Every
structural connection is a single ``Wall`` object referenced from the
incidence lists of both of its cells, so passability can never disagree
between the two sides.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

import numpy as np
import scipy.sparse

if TYPE_CHECKING:
    from mazeplay.maze.layout import GridLayout, RingLayout


class Topology(StrEnum):
    """Shape/adjacency scheme a maze was built with."""

    RECTANGULAR = "rectangular"
    HEX = "hex"
    TRIANGLE = "triangle"
    CIRCULAR = "circular"
    MASKED = "masked"


@dataclass(slots=True)
class Wall:
    """Undirected connection between two distinct cells.

    ``passable`` starts False and is flipped at most once, by the carver,
    through ``Maze.open_wall``.
    """

    first: int
    second: int
    passable: bool = False

    def other(self, cell: int) -> int:
        """Return the cell on the far side of this wall from ``cell``."""
        if cell == self.first:
            return self.second
        if cell == self.second:
            return self.first
        raise ValueError(
            f"Cell {cell} is not incident to wall ({self.first}, {self.second})"
        )


class Maze:
    """Arena owning all cells and walls of one topology instance.

    Builders create the maze and call ``link`` to add structural walls;
    carvers flip passability with ``open_wall``; the factory finally sets
    the starting and finishing cells. Everything else is read-only.
    """

    def __init__(
        self,
        topology: Topology,
        cell_count: int,
        layout: "GridLayout | RingLayout | None" = None,
    ):
        if cell_count < 0:
            raise ValueError(f"cell_count must be >= 0, got {cell_count}")
        self.topology = topology
        self.cell_count = cell_count
        self.layout: "GridLayout | RingLayout | None" = layout
        self.algorithm: str | None = None
        self.walls: list[Wall] = []
        self._incidence: list[list[Wall]] = [[] for _ in range(cell_count)]
        self._pairs: dict[tuple[int, int], Wall] = {}
        self._start: int | None = None
        self._finish: int | None = None

    def __repr__(self) -> str:
        return (
            f"Maze(topology={self.topology!s}, cells={self.cell_count}, "
            f"walls={len(self.walls)}, passable={self.passable_wall_count()})"
        )

    # -- construction -------------------------------------------------

    def link(self, a: int, b: int) -> bool:
        """Create the structural wall between ``a`` and ``b``.

        Returns False without changing anything when the pair is already
        linked.
        """
        self._check_cell(a)
        self._check_cell(b)
        if a == b:
            raise ValueError(f"Cannot link cell {a} to itself")
        key = (a, b) if a < b else (b, a)
        if key in self._pairs:
            return False
        wall = Wall(a, b)
        self._pairs[key] = wall
        self.walls.append(wall)
        self._incidence[a].append(wall)
        self._incidence[b].append(wall)
        return True

    def open_wall(self, wall: Wall) -> None:
        """Mark ``wall`` passable. Opening the same wall twice is an error."""
        if wall.passable:
            raise ValueError(
                f"Wall ({wall.first}, {wall.second}) is already passable"
            )
        wall.passable = True

    def set_endpoints(self, start: int, finish: int) -> None:
        self._check_cell(start)
        self._check_cell(finish)
        self._start = start
        self._finish = finish

    # -- queries ------------------------------------------------------

    def all_cells(self) -> range:
        return range(self.cell_count)

    @property
    def starting_cell(self) -> int:
        if self._start is None:
            raise ValueError("Starting cell has not been placed yet")
        return self._start

    @property
    def finishing_cell(self) -> int:
        if self._finish is None:
            raise ValueError("Finishing cell has not been placed yet")
        return self._finish

    def incident_walls(self, cell: int) -> list[Wall]:
        """Walls touching ``cell`` in creation order (generic carver view)."""
        self._check_cell(cell)
        return self._incidence[cell]

    def walls_of(self, cell: int) -> list[tuple[int, bool]]:
        """(neighbor, passable) pairs for every structural wall of ``cell``."""
        return [(w.other(cell), w.passable) for w in self.incident_walls(cell)]

    def neighbors(self, cell: int, passable_only: bool = True) -> list[int]:
        return [
            w.other(cell)
            for w in self.incident_walls(cell)
            if w.passable or not passable_only
        ]

    def wall_between(self, a: int, b: int) -> Wall | None:
        key = (a, b) if a < b else (b, a)
        return self._pairs.get(key)

    def passable_wall_count(self) -> int:
        return sum(1 for w in self.walls if w.passable)

    def dead_ends(self) -> list[int]:
        """Cells with exactly one passable wall."""
        return [
            cell
            for cell in self.all_cells()
            if sum(1 for w in self._incidence[cell] if w.passable) == 1
        ]

    def adjacency(self, passable_only: bool = True) -> scipy.sparse.csr_matrix:
        """Symmetric 0/1 adjacency matrix (cell_count x cell_count)."""
        chosen = [w for w in self.walls if w.passable or not passable_only]
        rows = np.array(
            [w.first for w in chosen] + [w.second for w in chosen], dtype=np.int64
        )
        cols = np.array(
            [w.second for w in chosen] + [w.first for w in chosen], dtype=np.int64
        )
        data = np.ones(len(rows), dtype=np.float64)
        return scipy.sparse.csr_matrix(
            (data, (rows, cols)), shape=(self.cell_count, self.cell_count)
        )

    def _check_cell(self, cell: int) -> None:
        if not 0 <= cell < self.cell_count:
            raise IndexError(
                f"Cell {cell} out of range for maze with {self.cell_count} cells"
            )
