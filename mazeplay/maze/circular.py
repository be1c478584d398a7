"""Circular topology: concentric rings around a single center cell.

Ring 0 is the center. Ring ``r >= 1`` holds
``2 ** (r // halve_factor) * scale_factor`` cells, so the cell count
doubles every ``halve_factor`` rings and outer cells stay roughly the
same width. Cells in adjacent rings are linked when their angular spans
overlap.
"""

import logging

from mazeplay.maze.layout import CircularPosition, RingLayout, check_dimensions
from mazeplay.maze.types import Maze, Topology

log = logging.getLogger(__name__)


def ring_sizes(rings: int, scale_factor: int, halve_factor: int) -> tuple[int, ...]:
    check_dimensions(rings=rings, scale_factor=scale_factor, halve_factor=halve_factor)
    return tuple(
        1 if ring == 0 else 2 ** (ring // halve_factor) * scale_factor
        for ring in range(rings)
    )


def overlapping_indices(index: int, size: int, other_size: int) -> range:
    """Indices in a ring of ``other_size`` cells whose span overlaps cell ``index``.

    Cell ``i`` of a ring with ``n`` cells spans ``[i/n, (i+1)/n)`` of the
    circle. Spans that only touch at an endpoint do not overlap. Integer
    arithmetic keeps the comparison exact.
    """
    low = (index * other_size) // size
    high = ((index + 1) * other_size - 1) // size
    return range(low, high + 1)


def build_circular(rings: int, scale_factor: int = 6, halve_factor: int = 3) -> Maze:
    """Build an uncarved circular maze with ``rings`` rings including the center."""
    sizes = ring_sizes(rings, scale_factor, halve_factor)

    positions: list[CircularPosition] = []
    for ring, size in enumerate(sizes):
        degrees_per_cell = 360.0 / size
        for index in range(size):
            positions.append(
                CircularPosition(
                    ring=ring,
                    index=index,
                    start_degree=index * degrees_per_cell,
                    end_degree=(index + 1) * degrees_per_cell,
                )
            )

    layout = RingLayout(ring_sizes=sizes, positions=tuple(positions))
    maze = Maze(Topology.CIRCULAR, len(positions), layout)
    firsts = [layout.first_cell_of_ring(ring) for ring in range(len(sizes))]

    for ring in range(1, len(sizes)):
        size = sizes[ring]
        for index in range(size):
            cell = firsts[ring] + index

            # inward
            for other in overlapping_indices(index, size, sizes[ring - 1]):
                maze.link(cell, firsts[ring - 1] + other)

            # outward
            if ring + 1 < len(sizes):
                for other in overlapping_indices(index, size, sizes[ring + 1]):
                    maze.link(cell, firsts[ring + 1] + other)

            # lateral
            if size > 1:
                for other in ((index + 1) % size, (index - 1) % size):
                    maze.link(cell, firsts[ring] + other)

    log.info(
        "Built circular maze with %d rings (%d cells, %d walls)",
        rings,
        maze.cell_count,
        len(maze.walls),
    )
    return maze
