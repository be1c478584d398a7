"""Maze solving: BFS distance maps and shortest-path reconstruction."""

from mazeplay.solve.distance import distances_from
from mazeplay.solve.shortest_path import shortest_path, solve
from mazeplay.solve.types import (
    DistanceInfo,
    ShortestPathInfo,
    Solution,
    SolverInvariantError,
)

__all__ = [
    "DistanceInfo",
    "ShortestPathInfo",
    "Solution",
    "SolverInvariantError",
    "distances_from",
    "shortest_path",
    "solve",
]
