"""Unbiased random-walk carvers: AldousBroder and Wilson.

Both produce a uniformly random spanning tree as long as every step picks
an incident wall uniformly at random, which is why all choices go through
``pick`` on the full incident wall list.
"""

import logging

from mazeplay.carve.types import RandomSource, pick
from mazeplay.maze.types import Maze, Wall

log = logging.getLogger(__name__)


def carve_aldous_broder(maze: Maze, rng: RandomSource) -> None:
    """Random walk until every cell is visited, opening first-entry walls.

    The walk moves through already-visited cells freely; a wall is only
    opened the first time its far cell is entered.
    """
    current = pick(maze.all_cells(), rng)
    visited = {current}
    steps = 0

    while len(visited) < maze.cell_count:
        wall = pick(maze.incident_walls(current), rng)
        neighbor = wall.other(current)
        if neighbor not in visited:
            maze.open_wall(wall)
            visited.add(neighbor)
        current = neighbor
        steps += 1

    log.debug("AldousBroder finished after %d steps", steps)


class _CellPool:
    """Unordered set of cells supporting uniform random picks and O(1) removal."""

    def __init__(self, cells: range):
        self._cells = list(cells)
        self._slot = {cell: i for i, cell in enumerate(self._cells)}

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, cell: int) -> bool:
        return cell in self._slot

    def pick(self, rng: RandomSource) -> int:
        return pick(self._cells, rng)

    def remove(self, cell: int) -> None:
        slot = self._slot.pop(cell)
        last = self._cells.pop()
        if last != cell:
            self._cells[slot] = last
            self._slot[last] = slot


def carve_wilson(maze: Maze, rng: RandomSource) -> None:
    """Loop-erased random walks from unvisited cells into the visited tree.

    One random cell seeds the tree. Each walk starts at a random unvisited
    cell and wanders until it hits the tree; whenever it crosses its own
    path the loop is erased. The surviving path is then opened and joins
    the tree.
    """
    unvisited = _CellPool(maze.all_cells())
    unvisited.remove(unvisited.pick(rng))
    walks = 0

    while unvisited:
        start = unvisited.pick(rng)
        path_cells = [start]
        path_walls: list[Wall] = []  # path_walls[k] joins path_cells[k] and [k + 1]
        position = {start: 0}
        current = start

        while True:
            wall = pick(maze.incident_walls(current), rng)
            neighbor = wall.other(current)
            if neighbor not in unvisited:
                path_walls.append(wall)
                break
            if neighbor in position:
                # Erase the loop back to the first visit of neighbor
                cut = position[neighbor]
                for erased in path_cells[cut + 1 :]:
                    del position[erased]
                del path_cells[cut + 1 :]
                del path_walls[cut:]
            else:
                path_walls.append(wall)
                position[neighbor] = len(path_cells)
                path_cells.append(neighbor)
            current = neighbor

        for wall in path_walls:
            maze.open_wall(wall)
        for cell in path_cells:
            unvisited.remove(cell)
        walks += 1

    log.debug("Wilson finished after %d loop-erased walks", walks)
