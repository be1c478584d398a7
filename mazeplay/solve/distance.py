"""Breadth-first distance solver over passable (or structural) walls."""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING

from mazeplay.solve.types import DistanceInfo

if TYPE_CHECKING:
    from mazeplay.maze.types import Maze

log = logging.getLogger(__name__)


def distances_from(maze: Maze, cell: int, structural: bool = False) -> DistanceInfo:
    """Compute BFS distances from ``cell``.

    Distances are assigned when a cell is first discovered, so the
    farthest cell is the first one seen at a strictly new maximum.

    Args:
        maze: Maze to traverse.
        cell: Starting cell (distance 0).
        structural: If True, traverse every structural wall regardless of
            passability. Used to check connectivity before carving.

    Returns:
        DistanceInfo covering exactly the reachable cells.
    """
    distances = {cell: 0}
    farthest = cell
    farthest_distance = 0
    queue = deque([cell])

    while queue:
        current = queue.popleft()
        next_distance = distances[current] + 1
        for wall in maze.incident_walls(current):
            if not (structural or wall.passable):
                continue
            neighbor = wall.other(current)
            if neighbor in distances:
                continue
            distances[neighbor] = next_distance
            queue.append(neighbor)
            if next_distance > farthest_distance:
                farthest = neighbor
                farthest_distance = next_distance

    log.debug(
        "BFS from cell %d (%s): reached %d/%d cells, max distance %d",
        cell,
        "structural" if structural else "passable",
        len(distances),
        maze.cell_count,
        farthest_distance,
    )
    return DistanceInfo(start=cell, distances=distances, farthest_cell=farthest)
