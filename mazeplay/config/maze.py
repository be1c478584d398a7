"""Maze generation configuration dataclasses, all frozen and slotted for immutability."""

from dataclasses import dataclass, field

from mazeplay.carve.types import Algorithm
from mazeplay.maze.triangle import check_triangle_shape
from mazeplay.maze.types import Topology


@dataclass(frozen=True, slots=True)
class GridConfig:
    """Shape of grid-like mazes (rectangular, hex, triangle, masked)."""

    rows: int = 20
    columns: int = 20


@dataclass(frozen=True, slots=True)
class CircularConfig:
    """Shape of circular mazes."""

    rings: int = 8  # including the center cell
    scale_factor: int = 6  # cells in ring 1
    halve_factor: int = 3  # cell count doubles every halve_factor rings


@dataclass(frozen=True, slots=True)
class MazeConfig:
    """Top-level maze generation configuration.

    Only the sub-config matching ``topology`` is used. Dimension and mask
    validation runs in __post_init__ to reject invalid configurations
    before any building starts. Whether ``algorithm`` suits ``topology``
    is checked by the carver itself.
    """

    topology: Topology = Topology.RECTANGULAR
    algorithm: Algorithm = Algorithm.RECURSIVE_BACK_TRACKER
    grid: GridConfig = field(default_factory=GridConfig)
    circular: CircularConfig = field(default_factory=CircularConfig)
    mask: tuple[bool, ...] | None = None  # row-major, rows * columns entries
    seed: int | None = None  # None draws fresh entropy per generation
    description: str = ""

    def __post_init__(self) -> None:
        """Cross-parameter validation (uses object.__setattr__ since frozen)."""
        object.__setattr__(self, "topology", Topology(self.topology))
        object.__setattr__(self, "algorithm", Algorithm(self.algorithm))

        if self.topology == Topology.CIRCULAR:
            for name in ("rings", "scale_factor", "halve_factor"):
                value = getattr(self.circular, name)
                if value < 1:
                    raise ValueError(f"circular.{name} must be >= 1, got {value}")
        else:
            for name in ("rows", "columns"):
                value = getattr(self.grid, name)
                if value < 1:
                    raise ValueError(f"grid.{name} must be >= 1, got {value}")
            if self.topology == Topology.TRIANGLE:
                check_triangle_shape(self.grid.rows, self.grid.columns)

        if self.topology == Topology.MASKED:
            if self.mask is None:
                raise ValueError("masked topology requires a mask")
            expected = self.grid.rows * self.grid.columns
            if len(self.mask) != expected:
                raise ValueError(
                    f"mask has {len(self.mask)} values, expected "
                    f"rows * columns ({expected})"
                )
        elif self.mask is not None:
            raise ValueError(f"mask is only valid for the masked topology, not {self.topology}")
