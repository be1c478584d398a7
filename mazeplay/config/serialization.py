"""JSON serialization and deserialization for maze configs."""

import json
from dataclasses import asdict
from typing import Any

from dacite import from_dict, Config as DaciteConfig

from mazeplay.carve.types import Algorithm
from mazeplay.config.maze import MazeConfig
from mazeplay.maze.types import Topology

# cast converts JSON arrays back to tuples and plain strings to the enums
_DACITE_CONFIG = DaciteConfig(
    cast=[tuple, Topology, Algorithm],
    check_types=True,
    strict=True,
)


def config_to_json(config: MazeConfig) -> str:
    """Serialize a MazeConfig to a JSON string.

    Uses sorted keys and 2-space indent for human readability and diffability.
    """
    return json.dumps(config_to_dict(config), indent=2, sort_keys=True)


def config_from_json(json_str: str) -> MazeConfig:
    """Deserialize a JSON string to a MazeConfig.

    Uses dacite with strict=True to reject unknown keys (catches typos in
    hand-written configs).
    """
    return config_from_dict(json.loads(json_str))


def config_to_dict(config: MazeConfig) -> dict[str, Any]:
    """Convert a MazeConfig to a plain dictionary of JSON-compatible values."""
    d = asdict(config)
    d["topology"] = str(config.topology)
    d["algorithm"] = str(config.algorithm)
    if config.mask is not None:
        d["mask"] = list(config.mask)
    return d


def config_from_dict(d: dict[str, Any]) -> MazeConfig:
    """Reconstruct a MazeConfig from a plain dictionary."""
    return from_dict(data_class=MazeConfig, data=d, config=_DACITE_CONFIG)
