"""Tests for the maze arena: walls, linking, passability, and adjacency views."""

import typing

import numpy as np
import pytest

from mazeplay.maze import (
    GridLayout,
    RectangularLayout,
    RingLayout,
    build_circular,
    build_rectangular,
)
from mazeplay.maze.types import Maze, Topology, Wall


def _make_path_maze(n: int = 3) -> Maze:
    """Cells 0..n-1 joined in a line, all walls closed."""
    maze = Maze(Topology.RECTANGULAR, n)
    for cell in range(1, n):
        maze.link(cell, cell - 1)
    return maze


class TestWall:
    """Wall endpoint lookup."""

    def test_other_returns_far_cell(self) -> None:
        wall = Wall(2, 5)
        assert wall.other(2) == 5
        assert wall.other(5) == 2

    def test_other_rejects_non_incident_cell(self) -> None:
        with pytest.raises(ValueError, match="not incident"):
            Wall(2, 5).other(3)

    def test_new_wall_is_impassable(self) -> None:
        assert Wall(0, 1).passable is False


class TestLinking:
    """Structural wall creation."""

    def test_link_shares_one_wall_between_both_cells(self) -> None:
        maze = Maze(Topology.RECTANGULAR, 2)
        assert maze.link(0, 1) is True
        assert maze.incident_walls(0)[0] is maze.incident_walls(1)[0]
        assert len(maze.walls) == 1

    def test_duplicate_link_is_ignored(self) -> None:
        maze = Maze(Topology.RECTANGULAR, 2)
        maze.link(0, 1)
        assert maze.link(1, 0) is False
        assert len(maze.walls) == 1
        assert len(maze.incident_walls(0)) == 1

    def test_self_link_rejected(self) -> None:
        maze = Maze(Topology.RECTANGULAR, 2)
        with pytest.raises(ValueError, match="itself"):
            maze.link(1, 1)

    def test_out_of_range_cell_rejected(self) -> None:
        maze = Maze(Topology.RECTANGULAR, 2)
        with pytest.raises(IndexError):
            maze.link(0, 2)

    def test_wall_between(self) -> None:
        maze = _make_path_maze(3)
        assert maze.wall_between(2, 1) is maze.wall_between(1, 2)
        assert maze.wall_between(0, 2) is None


class TestPassability:
    """Opening walls and the views that depend on passability."""

    def test_open_wall_sets_passable(self) -> None:
        maze = _make_path_maze(2)
        wall = maze.walls[0]
        maze.open_wall(wall)
        assert wall.passable
        assert maze.passable_wall_count() == 1

    def test_open_wall_twice_rejected(self) -> None:
        maze = _make_path_maze(2)
        maze.open_wall(maze.walls[0])
        with pytest.raises(ValueError, match="already passable"):
            maze.open_wall(maze.walls[0])

    def test_walls_of_reports_neighbor_and_flag(self) -> None:
        maze = _make_path_maze(3)
        maze.open_wall(maze.wall_between(0, 1))
        assert maze.walls_of(1) == [(0, True), (2, False)]

    def test_walls_of_is_stable_between_calls(self) -> None:
        maze = _make_path_maze(4)
        maze.open_wall(maze.wall_between(1, 2))
        assert maze.walls_of(1) == maze.walls_of(1)
        assert maze.walls_of(2) == maze.walls_of(2)

    def test_neighbors_filters_on_passability(self) -> None:
        maze = _make_path_maze(3)
        maze.open_wall(maze.wall_between(1, 2))
        assert maze.neighbors(1) == [2]
        assert maze.neighbors(1, passable_only=False) == [0, 2]

    def test_dead_ends(self) -> None:
        maze = _make_path_maze(3)
        for wall in maze.walls:
            maze.open_wall(wall)
        assert maze.dead_ends() == [0, 2]


class TestAdjacency:
    """Sparse adjacency export."""

    def test_adjacency_is_symmetric(self) -> None:
        maze = _make_path_maze(4)
        maze.open_wall(maze.wall_between(0, 1))
        adj = maze.adjacency(passable_only=True).toarray()
        assert np.array_equal(adj, adj.T)
        assert adj.sum() == 2

    def test_structural_adjacency_includes_closed_walls(self) -> None:
        maze = _make_path_maze(4)
        adj = maze.adjacency(passable_only=False)
        assert adj.shape == (4, 4)
        assert adj.nnz == 6


class TestEndpoints:
    """Start and finish placement."""

    def test_endpoints_unset_raise(self) -> None:
        maze = _make_path_maze(2)
        with pytest.raises(ValueError, match="not been placed"):
            _ = maze.starting_cell

    def test_set_endpoints(self) -> None:
        maze = _make_path_maze(3)
        maze.set_endpoints(0, 2)
        assert maze.starting_cell == 0
        assert maze.finishing_cell == 2


class TestLayoutCapability:
    """Layouts attached by the builders match the declared capability types."""

    def test_layout_annotation_names_layout_classes(self) -> None:
        hints = typing.get_type_hints(
            Maze.__init__,
            localns={"GridLayout": GridLayout, "RingLayout": RingLayout},
        )
        assert hints["layout"] == GridLayout | RingLayout | None

    def test_bare_maze_has_no_layout(self) -> None:
        assert Maze(Topology.RECTANGULAR, 1).layout is None

    def test_builders_attach_layouts(self) -> None:
        assert isinstance(build_rectangular(2, 2).layout, RectangularLayout)
        assert isinstance(build_circular(2).layout, RingLayout)
