"""Default configuration: single source of truth for default maze parameters."""

from mazeplay.config.maze import MazeConfig

# 20x20 rectangular maze carved with RecursiveBackTracker, unseeded.
DEFAULT_CONFIG = MazeConfig()
