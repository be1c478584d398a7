"""Shortest-path reconstruction by descending a BFS distance gradient."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mazeplay.solve.distance import distances_from
from mazeplay.solve.types import (
    DistanceInfo,
    ShortestPathInfo,
    Solution,
    SolverInvariantError,
)

if TYPE_CHECKING:
    from mazeplay.maze.types import Maze

log = logging.getLogger(__name__)


def shortest_path(
    maze: Maze, finish: int, distance_info: DistanceInfo
) -> ShortestPathInfo:
    """Walk from ``finish`` back to the distance map's start.

    At each step moves to the passable neighbor whose distance is exactly
    one less than the current cell's. In a perfect maze there is exactly
    one such neighbor along the path.

    Args:
        maze: Carved maze the distance map was computed on.
        finish: Cell the path ends at.
        distance_info: Distances rooted at the path's start.

    Returns:
        ShortestPathInfo ordered start -> finish.

    Raises:
        SolverInvariantError: If ``finish`` is not in the map or a cell
            has no lower-distance passable neighbor.
    """
    reversed_path = [finish]
    current = finish
    distance = distance_info.distance_to(finish)

    while distance > 0:
        previous = None
        for neighbor in maze.neighbors(current):
            if distance_info.distances.get(neighbor) == distance - 1:
                previous = neighbor
                break
        if previous is None:
            raise SolverInvariantError(
                f"Cell {current} at distance {distance} has no passable "
                f"neighbor at distance {distance - 1}"
            )
        reversed_path.append(previous)
        current = previous
        distance -= 1

    reversed_path.reverse()
    return ShortestPathInfo(path=tuple(reversed_path))


def solve(maze: Maze) -> Solution:
    """Distances from the maze start and the path to its finish."""
    distance_info = distances_from(maze, maze.starting_cell)
    path = shortest_path(maze, maze.finishing_cell, distance_info)
    log.debug(
        "Solved maze: path length %d, farthest distance %d",
        len(path),
        distance_info.max_distance,
    )
    return Solution(distance_info=distance_info, shortest_path=path)
