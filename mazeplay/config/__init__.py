"""Maze configuration system with frozen, serializable dataclasses."""

from mazeplay.config.maze import CircularConfig, GridConfig, MazeConfig
from mazeplay.config.defaults import DEFAULT_CONFIG
from mazeplay.config.serialization import (
    config_from_dict,
    config_from_json,
    config_to_dict,
    config_to_json,
)

__all__ = [
    "MazeConfig",
    "GridConfig",
    "CircularConfig",
    "DEFAULT_CONFIG",
    "config_to_json",
    "config_from_json",
    "config_to_dict",
    "config_from_dict",
]
