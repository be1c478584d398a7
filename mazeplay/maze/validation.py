"""Connectivity and perfect-maze validation.

``ensure_structurally_connected`` guards construction and carving: every
carver assumes it can reach all cells through structural walls, so a
disconnected graph must be rejected before any wall is opened.
``validate_perfect_maze`` checks a carved maze is a spanning tree.
"""

import logging

from scipy.sparse.csgraph import connected_components

from mazeplay.maze.types import Maze
from mazeplay.solve.distance import distances_from

log = logging.getLogger(__name__)


class DisconnectedMazeError(Exception):
    """Raised when some cells cannot be reached through structural walls."""


def ensure_structurally_connected(maze: Maze) -> None:
    """Raise unless every cell is reachable ignoring passability.

    Raises:
        DisconnectedMazeError: If the maze has no cells or any cell is
            unreachable from cell 0.
    """
    if maze.cell_count == 0:
        raise DisconnectedMazeError(f"{maze.topology} maze has no cells")

    reach = distances_from(maze, 0, structural=True)
    if len(reach) != maze.cell_count:
        unreachable = maze.cell_count - len(reach)
        raise DisconnectedMazeError(
            f"Not all cells are reachable: {unreachable} of {maze.cell_count} "
            f"cells cannot be reached from cell 0 in the {maze.topology} maze"
        )


def validate_perfect_maze(maze: Maze) -> list[str]:
    """Validate that the passable walls form a spanning tree.

    Checks (cheapest first):
    1. Every wall joins two distinct cells and no pair is duplicated
    2. Passable wall count equals cell_count - 1
    3. Passable subgraph is a single connected component

    Connected with n - 1 edges implies acyclic, so 2 and 3 together mean
    exactly one simple path between any two cells.

    Returns:
        List of error strings (empty = perfect maze).
    """
    errors: list[str] = []
    n = maze.cell_count

    seen: set[tuple[int, int]] = set()
    for wall in maze.walls:
        if wall.first == wall.second:
            errors.append(f"Self-loop wall on cell {wall.first}")
        key = (min(wall.first, wall.second), max(wall.first, wall.second))
        if key in seen:
            errors.append(f"Duplicate wall between cells {key[0]} and {key[1]}")
        seen.add(key)

    passable = maze.passable_wall_count()
    expected = max(n - 1, 0)
    if passable != expected:
        errors.append(
            f"Passable wall count {passable} != cell_count - 1 ({expected})"
        )

    if n > 0:
        n_components, _ = connected_components(
            maze.adjacency(passable_only=True), directed=False
        )
        if n_components != 1:
            errors.append(
                f"Passable walls not connected: {n_components} components found"
            )

    if errors:
        log.debug("Maze validation found %d problems", len(errors))
    return errors
