"""Maze graph module: primitives, layouts, topology builders, and validation."""

from mazeplay.maze.circular import build_circular, overlapping_indices, ring_sizes
from mazeplay.maze.hex import build_hex
from mazeplay.maze.layout import (
    CircularPosition,
    GridLayout,
    RectangularLayout,
    RingLayout,
)
from mazeplay.maze.masked import build_masked, parse_mask
from mazeplay.maze.rectangular import build_rectangular
from mazeplay.maze.triangle import build_triangle, check_triangle_shape, is_pointing_up
from mazeplay.maze.types import Maze, Topology, Wall
from mazeplay.maze.validation import (
    DisconnectedMazeError,
    ensure_structurally_connected,
    validate_perfect_maze,
)

__all__ = [
    "CircularPosition",
    "DisconnectedMazeError",
    "GridLayout",
    "Maze",
    "RectangularLayout",
    "RingLayout",
    "Topology",
    "Wall",
    "build_circular",
    "build_hex",
    "build_masked",
    "build_rectangular",
    "build_triangle",
    "check_triangle_shape",
    "ensure_structurally_connected",
    "is_pointing_up",
    "overlapping_indices",
    "parse_mask",
    "ring_sizes",
    "validate_perfect_maze",
]
