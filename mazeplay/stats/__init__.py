"""Maze statistics for display."""

from mazeplay.stats.summary import MazeStats, maze_stats, split_camel_case

__all__ = [
    "MazeStats",
    "maze_stats",
    "split_camel_case",
]
