"""Geometry-aware carvers for full rectangular grids: BinaryTree and Sidewinder.

Both rely on a single "straight" (east) and "turn" (north) wall per cell.
Every cell except one corner (top-right, which has neither) opens exactly
one wall heading straight or turning, so the result is a spanning tree
rooted at that corner.
"""

import logging

from mazeplay.carve.types import RandomSource, UnsupportedAlgorithmError, coin_flip, pick
from mazeplay.maze.layout import RectangularLayout
from mazeplay.maze.types import Maze

log = logging.getLogger(__name__)


def require_rectangular_layout(maze: Maze, algorithm: str) -> RectangularLayout:
    """Return the maze's rectangular layout or reject the maze.

    Raises:
        UnsupportedAlgorithmError: If the maze has no straight/turn
            capability or not exactly one cell lacks both walls.
    """
    layout = maze.layout
    if not isinstance(layout, RectangularLayout):
        raise UnsupportedAlgorithmError(
            f"{algorithm} is not supported for {maze.topology} mazes: "
            f"it requires rectangular coordinates"
        )

    corners = [
        cell
        for cell in maze.all_cells()
        if layout.straight_wall(maze, cell) is None
        and layout.turn_wall(maze, cell) is None
    ]
    if len(corners) != 1:
        raise UnsupportedAlgorithmError(
            f"{algorithm} requires exactly one corner cell without straight "
            f"or turn walls, found {len(corners)}"
        )
    return layout


def carve_binary_tree(maze: Maze, rng: RandomSource) -> None:
    """Open one of straight/turn per cell, by fair coin when both exist."""
    layout = require_rectangular_layout(maze, "BinaryTree")

    for cell in maze.all_cells():
        straight = layout.straight_wall(maze, cell)
        turn = layout.turn_wall(maze, cell)
        if straight is not None and turn is not None:
            maze.open_wall(straight if coin_flip(rng) else turn)
        elif straight is not None:
            maze.open_wall(straight)
        elif turn is not None:
            maze.open_wall(turn)
        # neither: the final corner


def carve_sidewinder(maze: Maze, rng: RandomSource) -> None:
    """Carve row runs, closing each run by turning from a random member.

    Cells are processed row-major. The first row has nowhere to turn, so
    it always goes straight. Elsewhere a cell joins the current run; at the
    end of a row, or when the coin says turn, one run member opens its
    turn wall and the run is cleared, otherwise the straight wall opens.
    """
    layout = require_rectangular_layout(maze, "Sidewinder")
    run: list[int] = []
    runs_closed = 0

    for cell in maze.all_cells():
        straight = layout.straight_wall(maze, cell)
        if layout.turn_wall(maze, cell) is None:
            if straight is not None:
                maze.open_wall(straight)
            continue

        run.append(cell)
        if straight is None or coin_flip(rng):
            chosen = pick(run, rng)
            maze.open_wall(layout.turn_wall(maze, chosen))
            run.clear()
            runs_closed += 1
        else:
            maze.open_wall(straight)

    log.debug("Sidewinder closed %d runs", runs_closed)
