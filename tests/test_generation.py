"""Tests for the maze factory: build, carve and endpoint placement."""

import logging

import pytest

from mazeplay.carve import UnsupportedAlgorithmError
from mazeplay.config import CircularConfig, GridConfig, MazeConfig
from mazeplay.generation import (
    GeneratedMaze,
    boundary_cells,
    build_topology,
    generate_maze,
    new_maze,
)
from mazeplay.maze import DisconnectedMazeError, Maze, Topology, validate_perfect_maze
from mazeplay.maze.masked import parse_mask
from mazeplay.solve import distances_from

PLUS_ROWS, PLUS_COLUMNS, PLUS_MASK = parse_mask([".X.", "XXX", ".X."])


def _passable_pairs(maze: Maze) -> set[frozenset[int]]:
    return {frozenset((w.first, w.second)) for w in maze.walls if w.passable}


SMALL_CONFIGS = {
    "rectangular": MazeConfig(grid=GridConfig(6, 8), seed=1),
    "hex": MazeConfig(topology="hex", algorithm="wilson", grid=GridConfig(5, 5), seed=2),
    "triangle": MazeConfig(
        topology="triangle", algorithm="hunt_and_kill", grid=GridConfig(4, 9), seed=3
    ),
    "circular": MazeConfig(
        topology="circular",
        algorithm="aldous_broder",
        circular=CircularConfig(rings=5),
        seed=4,
    ),
    "masked": MazeConfig(
        topology="masked",
        grid=GridConfig(PLUS_ROWS, PLUS_COLUMNS),
        mask=PLUS_MASK,
        seed=5,
    ),
}


class TestBuildTopology:
    """Config shape parameters reach the right builder."""

    @pytest.mark.parametrize("name", list(SMALL_CONFIGS))
    def test_topology_matches_config(self, name):
        config = SMALL_CONFIGS[name]
        maze = build_topology(config)
        assert maze.topology == config.topology
        assert maze.passable_wall_count() == 0

    def test_circular_cell_count(self):
        maze = build_topology(SMALL_CONFIGS["circular"])
        assert maze.cell_count == 1 + 6 + 6 + 12 + 12


class TestNewMaze:
    """Full pipeline results."""

    @pytest.mark.parametrize("name", list(SMALL_CONFIGS))
    def test_perfect_with_endpoints(self, name):
        maze = new_maze(SMALL_CONFIGS[name])
        assert validate_perfect_maze(maze) == []
        assert 0 <= maze.starting_cell < maze.cell_count
        assert 0 <= maze.finishing_cell < maze.cell_count

    @pytest.mark.parametrize("topology", ["rectangular", "hex", "triangle"])
    def test_grid_start_in_first_column(self, topology):
        maze = new_maze(MazeConfig(topology=topology, grid=GridConfig(5, 6), seed=8))
        _, column = maze.layout.position_of(maze.starting_cell)
        assert column == 0

    @pytest.mark.parametrize("topology", ["rectangular", "hex", "triangle"])
    def test_grid_finish_is_farthest_boundary_cell(self, topology):
        maze = new_maze(MazeConfig(topology=topology, grid=GridConfig(5, 6), seed=9))
        info = distances_from(maze, maze.starting_cell)
        candidates = boundary_cells(maze.layout)
        assert maze.finishing_cell in candidates
        best = max(info.distance_to(cell) for cell in candidates)
        assert info.distance_to(maze.finishing_cell) == best
        # ties go to the first boundary cell in order
        first_best = next(c for c in candidates if info.distance_to(c) == best)
        assert maze.finishing_cell == first_best

    def test_circular_endpoints(self):
        maze = new_maze(SMALL_CONFIGS["circular"])
        assert maze.starting_cell == 0
        assert maze.finishing_cell == distances_from(maze, 0).farthest_cell

    def test_masked_start_uses_leftmost_non_empty_column(self):
        maze = new_maze(SMALL_CONFIGS["masked"])
        # the plus shape has one cell in column 0
        assert maze.starting_cell == maze.layout.cell_at(1, 0)

    def test_debug_logging_runs_perfect_maze_check(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="mazeplay.generation.factory"):
            new_maze(SMALL_CONFIGS["hex"])
        assert "Perfect-maze check on 25 cells found 0 problems" in caplog.text

    def test_perfect_maze_check_skipped_above_debug(self, caplog):
        with caplog.at_level(logging.INFO, logger="mazeplay.generation.factory"):
            new_maze(SMALL_CONFIGS["hex"])
        assert "Perfect-maze check" not in caplog.text

    def test_single_cell(self):
        maze = new_maze(MazeConfig(grid=GridConfig(1, 1), seed=0))
        assert maze.starting_cell == 0
        assert maze.finishing_cell == 0

    @pytest.mark.parametrize("name", list(SMALL_CONFIGS))
    def test_seed_reproducible(self, name):
        first = new_maze(SMALL_CONFIGS[name])
        second = new_maze(SMALL_CONFIGS[name])
        assert _passable_pairs(first) == _passable_pairs(second)
        assert first.starting_cell == second.starting_cell
        assert first.finishing_cell == second.finishing_cell

    def test_different_seeds_differ(self):
        a = new_maze(MazeConfig(grid=GridConfig(10, 10), seed=1))
        b = new_maze(MazeConfig(grid=GridConfig(10, 10), seed=2))
        assert _passable_pairs(a) != _passable_pairs(b)


class TestNewMazeErrors:
    """Errors surface from the pipeline unchanged."""

    def test_unsupported_pair(self):
        config = MazeConfig(topology="hex", algorithm="binary_tree", grid=GridConfig(3, 3))
        with pytest.raises(UnsupportedAlgorithmError):
            new_maze(config)

    def test_disconnected_mask(self):
        rows, columns, mask = parse_mask(["X.X", "...", "X.X"])
        config = MazeConfig(topology="masked", grid=GridConfig(rows, columns), mask=mask)
        with pytest.raises(DisconnectedMazeError):
            new_maze(config)


class TestBoundaryCells:
    """Boundary ordering: left, right, top, bottom."""

    def test_rectangular_order(self):
        maze = build_topology(MazeConfig(grid=GridConfig(3, 3)))
        assert boundary_cells(maze.layout) == [0, 3, 6, 2, 5, 8, 1, 7]

    def test_masked_outermost_cells(self):
        maze = build_topology(SMALL_CONFIGS["masked"])
        layout = maze.layout
        assert boundary_cells(layout) == [
            layout.cell_at(1, 0),
            layout.cell_at(1, 2),
            layout.cell_at(0, 1),
            layout.cell_at(2, 1),
        ]


class TestGenerateMaze:
    """Timed generation wrapper."""

    def test_result_fields(self):
        config = SMALL_CONFIGS["rectangular"]
        generated = generate_maze(config)
        assert isinstance(generated, GeneratedMaze)
        assert generated.config is config
        assert generated.generation_seconds >= 0.0
        assert generated.maze.topology is Topology.RECTANGULAR
        assert generated.maze.cell_count == 48
