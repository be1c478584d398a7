"""Wall-setup algorithms that carve perfect mazes into built topologies."""

from mazeplay.carve.rectangular import (
    carve_binary_tree,
    carve_sidewinder,
    require_rectangular_layout,
)
from mazeplay.carve.registry import CARVERS, GEOMETRY_AWARE, carve
from mazeplay.carve.types import Algorithm, RandomSource, UnsupportedAlgorithmError
from mazeplay.carve.uniform import carve_aldous_broder, carve_wilson
from mazeplay.carve.walkers import carve_hunt_and_kill, carve_recursive_back_tracker

__all__ = [
    "Algorithm",
    "CARVERS",
    "GEOMETRY_AWARE",
    "RandomSource",
    "UnsupportedAlgorithmError",
    "carve",
    "carve_aldous_broder",
    "carve_binary_tree",
    "carve_hunt_and_kill",
    "carve_recursive_back_tracker",
    "carve_sidewinder",
    "carve_wilson",
    "require_rectangular_layout",
]
