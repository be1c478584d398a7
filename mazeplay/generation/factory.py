"""Maze factory: build the topology, carve it, then place start and finish.

Implements the full generation pipeline:
1. Build the uncarved topology from the config's shape parameters
2. Carve it with the configured algorithm (connectivity and geometry
   checks happen before any wall opens)
3. Place the starting cell and pick the farthest boundary cell as finish
"""

import logging
import time

from mazeplay.carve.registry import carve
from mazeplay.carve.types import RandomSource, pick
from mazeplay.config.maze import MazeConfig
from mazeplay.generation.types import GeneratedMaze
from mazeplay.maze.circular import build_circular
from mazeplay.maze.hex import build_hex
from mazeplay.maze.layout import GridLayout
from mazeplay.maze.masked import build_masked
from mazeplay.maze.rectangular import build_rectangular
from mazeplay.maze.triangle import build_triangle
from mazeplay.maze.types import Maze, Topology
from mazeplay.maze.validation import validate_perfect_maze
from mazeplay.reproducibility.seed import make_rng
from mazeplay.solve.distance import distances_from

log = logging.getLogger(__name__)


def build_topology(config: MazeConfig) -> Maze:
    """Build the uncarved maze described by ``config``."""
    grid = config.grid
    if config.topology == Topology.RECTANGULAR:
        return build_rectangular(grid.rows, grid.columns)
    if config.topology == Topology.HEX:
        return build_hex(grid.rows, grid.columns)
    if config.topology == Topology.TRIANGLE:
        return build_triangle(grid.rows, grid.columns)
    if config.topology == Topology.MASKED:
        return build_masked(grid.rows, grid.columns, config.mask)
    if config.topology == Topology.CIRCULAR:
        circular = config.circular
        return build_circular(
            circular.rings, circular.scale_factor, circular.halve_factor
        )
    raise ValueError(f"Unsupported topology {config.topology!r}")


def boundary_cells(layout: GridLayout) -> list[int]:
    """Cells of the outermost non-empty columns and rows.

    Ordered left column, right column, top row, bottom row, without
    duplicates. For masked grids the outermost non-empty lines are used.
    """
    columns = [c for c in range(layout.columns) if layout.cells_in_column(c)]
    rows = [r for r in range(layout.rows) if layout.cells_in_row(r)]
    ordered = (
        layout.cells_in_column(columns[0])
        + layout.cells_in_column(columns[-1])
        + layout.cells_in_row(rows[0])
        + layout.cells_in_row(rows[-1])
    )
    return list(dict.fromkeys(ordered))


def place_endpoints(maze: Maze, rng: RandomSource) -> None:
    """Choose the starting and finishing cells of a carved maze.

    Grid-like mazes start at a random cell of the leftmost non-empty column
    and finish at the boundary cell farthest from the start (first
    candidate wins ties). Circular mazes start at the center and finish at
    the farthest cell.
    """
    layout = maze.layout
    if isinstance(layout, GridLayout):
        column = 0
        while not layout.cells_in_column(column):
            column += 1
        start = pick(layout.cells_in_column(column), rng)
        distance_info = distances_from(maze, start)

        finish = start
        best = -1
        for cell in boundary_cells(layout):
            distance = distance_info.distance_to(cell)
            if distance > best:
                finish = cell
                best = distance
    else:
        start = 0
        finish = distances_from(maze, start).farthest_cell

    maze.set_endpoints(start, finish)
    log.debug("Placed start at cell %d and finish at cell %d", start, finish)


def new_maze(config: MazeConfig, rng: RandomSource | None = None) -> Maze:
    """Build, carve and place endpoints for the maze ``config`` describes.

    Args:
        config: Maze configuration.
        rng: Random source; defaults to one built from ``config.seed``.

    Returns:
        The carved maze with starting and finishing cells set.

    Raises:
        ValueError: Bad dimensions or mask.
        DisconnectedMazeError: Mask selects disconnected cells.
        UnsupportedAlgorithmError: Algorithm cannot carve this topology.
    """
    if rng is None:
        rng = make_rng(config.seed)
    maze = build_topology(config)
    carve(maze, config.algorithm, rng)

    # Full spanning-tree check only when someone is listening at DEBUG
    if log.isEnabledFor(logging.DEBUG):
        errors = validate_perfect_maze(maze)
        for error in errors:
            log.debug("Perfect-maze check: %s", error)
        log.debug(
            "Perfect-maze check on %d cells found %d problems",
            maze.cell_count,
            len(errors),
        )

    place_endpoints(maze, rng)
    return maze


def generate_maze(
    config: MazeConfig, rng: RandomSource | None = None
) -> GeneratedMaze:
    """Run ``new_maze`` and record how long generation took."""
    t0 = time.monotonic()
    maze = new_maze(config, rng)
    elapsed = time.monotonic() - t0

    log.info(
        "Generated %s maze with %s in %.1f ms (%d cells)",
        config.topology,
        config.algorithm.display_name,
        elapsed * 1000.0,
        maze.cell_count,
    )
    return GeneratedMaze(maze=maze, config=config, generation_seconds=elapsed)
