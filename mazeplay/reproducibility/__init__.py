"""Reproducibility infrastructure: random source construction and seeded-maze checks."""

from mazeplay.reproducibility.seed import (
    make_rng,
    maze_fingerprint,
    verify_seed_determinism,
)

__all__ = [
    "make_rng",
    "maze_fingerprint",
    "verify_seed_determinism",
]
