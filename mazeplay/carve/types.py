"""Carver identifiers, errors, and the shared random-choice helper."""

from collections.abc import Callable, Sequence
from enum import StrEnum
from typing import Protocol, TypeVar

from mazeplay.maze.types import Maze

T = TypeVar("T")


class Algorithm(StrEnum):
    """Wall-setup algorithms that carve a perfect maze."""

    ALDOUS_BRODER = "aldous_broder"
    BINARY_TREE = "binary_tree"
    HUNT_AND_KILL = "hunt_and_kill"
    RECURSIVE_BACK_TRACKER = "recursive_back_tracker"
    SIDEWINDER = "sidewinder"
    WILSON = "wilson"

    @property
    def display_name(self) -> str:
        """CamelCase name, e.g. ``RecursiveBackTracker``."""
        return "".join(part.capitalize() for part in self.value.split("_"))


class UnsupportedAlgorithmError(Exception):
    """Raised when an algorithm cannot carve the given topology."""


class RandomSource(Protocol):
    """The part of ``numpy.random.Generator`` the carvers use."""

    def integers(self, low: int, high: int) -> int: ...


Carver = Callable[[Maze, RandomSource], None]


def pick(items: Sequence[T], rng: RandomSource) -> T:
    """Uniformly random element of a non-empty sequence."""
    if not items:
        raise ValueError("Cannot pick from an empty sequence")
    return items[int(rng.integers(0, len(items)))]


def coin_flip(rng: RandomSource) -> bool:
    """Fair coin: True with probability 1/2."""
    return int(rng.integers(0, 2)) == 0
