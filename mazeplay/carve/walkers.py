"""Carvers that only ever step into unvisited cells: HuntAndKill and RecursiveBackTracker.

They differ in how they recover when the walk gets stuck. HuntAndKill scans
the cells in a fixed order for the first unvisited cell bordering the
visited region, which tends to leave many short dead ends.
RecursiveBackTracker backs up along its own path, giving long corridors.
"""

import logging

from mazeplay.carve.types import RandomSource, pick
from mazeplay.maze.types import Maze, Wall
from mazeplay.maze.validation import DisconnectedMazeError

log = logging.getLogger(__name__)


def _walls_to(maze: Maze, cell: int, visited: set[int], want_visited: bool) -> list[Wall]:
    """Incident walls of ``cell`` whose far cell is (or is not) visited."""
    return [
        wall
        for wall in maze.incident_walls(cell)
        if (wall.other(cell) in visited) == want_visited
    ]


def carve_hunt_and_kill(maze: Maze, rng: RandomSource) -> None:
    """Random walk through unvisited cells, hunting for a new start when stuck."""
    current = pick(maze.all_cells(), rng)
    visited = {current}
    hunts = 0

    while len(visited) < maze.cell_count:
        walls = _walls_to(maze, current, visited, want_visited=False)
        if walls:
            wall = pick(walls, rng)
            maze.open_wall(wall)
            current = wall.other(current)
            visited.add(current)
            continue

        for cell in maze.all_cells():
            if cell in visited:
                continue
            bordering = _walls_to(maze, cell, visited, want_visited=True)
            if bordering:
                maze.open_wall(pick(bordering, rng))
                visited.add(cell)
                current = cell
                hunts += 1
                break
        else:
            raise DisconnectedMazeError(
                f"Hunt found no unvisited cell next to the {len(visited)} "
                f"visited cells"
            )

    log.debug("HuntAndKill finished after %d hunts", hunts)


def carve_recursive_back_tracker(maze: Maze, rng: RandomSource) -> None:
    """Depth-first carve with an explicit stack instead of recursion."""
    start = pick(maze.all_cells(), rng)
    visited = {start}
    stack = [start]
    deepest = 1

    while stack:
        current = stack[-1]
        walls = _walls_to(maze, current, visited, want_visited=False)
        if walls:
            wall = pick(walls, rng)
            maze.open_wall(wall)
            neighbor = wall.other(current)
            visited.add(neighbor)
            stack.append(neighbor)
            deepest = max(deepest, len(stack))
        else:
            stack.pop()

    log.debug("RecursiveBackTracker reached stack depth %d", deepest)
