"""Generation result container."""

from dataclasses import dataclass

from mazeplay.config.maze import MazeConfig
from mazeplay.maze.types import Maze


@dataclass(frozen=True)
class GeneratedMaze:
    """A carved maze with the config that produced it and how long it took.

    Frozen at the container level only; the maze itself is the owned,
    already-carved graph.
    """

    maze: Maze
    config: MazeConfig
    generation_seconds: float
