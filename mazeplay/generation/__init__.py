"""Maze generation pipeline: topology build, carving, and endpoint placement."""

from mazeplay.generation.factory import (
    boundary_cells,
    build_topology,
    generate_maze,
    new_maze,
    place_endpoints,
)
from mazeplay.generation.types import GeneratedMaze

__all__ = [
    "GeneratedMaze",
    "boundary_cells",
    "build_topology",
    "generate_maze",
    "new_maze",
    "place_endpoints",
]
