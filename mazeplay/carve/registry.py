"""Algorithm dispatch with the checks every carve must pass first."""

import logging

from mazeplay.carve.rectangular import carve_binary_tree, carve_sidewinder
from mazeplay.carve.types import Algorithm, Carver, RandomSource
from mazeplay.carve.uniform import carve_aldous_broder, carve_wilson
from mazeplay.carve.walkers import carve_hunt_and_kill, carve_recursive_back_tracker
from mazeplay.maze.types import Maze
from mazeplay.maze.validation import ensure_structurally_connected
from mazeplay.reproducibility.seed import make_rng

log = logging.getLogger(__name__)

CARVERS: dict[Algorithm, Carver] = {
    Algorithm.ALDOUS_BRODER: carve_aldous_broder,
    Algorithm.BINARY_TREE: carve_binary_tree,
    Algorithm.HUNT_AND_KILL: carve_hunt_and_kill,
    Algorithm.RECURSIVE_BACK_TRACKER: carve_recursive_back_tracker,
    Algorithm.SIDEWINDER: carve_sidewinder,
    Algorithm.WILSON: carve_wilson,
}

# Algorithms that need a RectangularLayout; the rest only use the generic graph view
GEOMETRY_AWARE: frozenset[Algorithm] = frozenset(
    {Algorithm.BINARY_TREE, Algorithm.SIDEWINDER}
)


def carve(
    maze: Maze,
    algorithm: Algorithm | str,
    rng: RandomSource | None = None,
) -> Maze:
    """Carve a perfect maze into ``maze`` in place.

    Args:
        maze: Freshly built maze with no passable walls.
        algorithm: Algorithm or its string value.
        rng: Random source; a fresh unseeded numpy Generator if None.

    Returns:
        The same maze, for chaining.

    Raises:
        ValueError: Unknown algorithm name or a maze that was already carved.
        DisconnectedMazeError: Structural graph empty or disconnected.
        UnsupportedAlgorithmError: Geometry-aware algorithm on an
            incompatible topology.
    """
    algorithm = Algorithm(algorithm)
    if maze.passable_wall_count() > 0:
        raise ValueError(
            f"Maze already has {maze.passable_wall_count()} passable walls; "
            f"each maze can only be carved once"
        )
    ensure_structurally_connected(maze)

    if rng is None:
        rng = make_rng()

    CARVERS[algorithm](maze, rng)
    maze.algorithm = algorithm

    log.info(
        "Carved %s maze with %s: opened %d of %d walls, %d dead ends",
        maze.topology,
        algorithm.display_name,
        maze.passable_wall_count(),
        len(maze.walls),
        len(maze.dead_ends()),
    )
    return maze
