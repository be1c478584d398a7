#!/usr/bin/env python3
"""Entry point for generating and solving a single maze.

Chains the core stages into one command:
config loading -> generation (build + carve) -> validation -> solving
-> seeded reproducibility check -> stats.

Usage:
    python generate_maze.py
    python generate_maze.py --config maze.json
    python generate_maze.py --config maze.json --seed 7 --verbose
"""

import argparse
import logging
import sys
import time
from contextlib import contextmanager
from dataclasses import replace
from pathlib import Path
from typing import Generator

from mazeplay.config import DEFAULT_CONFIG, MazeConfig, config_from_json

log = logging.getLogger(__name__)


@contextmanager
def stage_timer(name: str) -> Generator[None, None, None]:
    """Context manager that prints stage banners with elapsed time."""
    print(f"\n=== {name} ===")
    log.info("Starting: %s", name)
    t0 = time.monotonic()
    yield
    elapsed = time.monotonic() - t0
    print(f"... done in {elapsed * 1000.0:.1f} ms")
    log.info("Completed: %s in %.3fs", name, elapsed)


def run(config: MazeConfig) -> int:
    """Generate, validate and solve one maze; print its stats.

    Returns:
        Process exit code (0 on success, 1 if validation or the seeded
        reproducibility check found problems).
    """
    from mazeplay.generation import generate_maze
    from mazeplay.maze import validate_perfect_maze
    from mazeplay.reproducibility import verify_seed_determinism
    from mazeplay.solve import solve
    from mazeplay.stats import maze_stats

    with stage_timer("Generation"):
        generated = generate_maze(config)
        maze = generated.maze

    with stage_timer("Validation"):
        errors = validate_perfect_maze(maze)
        for error in errors:
            log.error("Validation: %s", error)

    with stage_timer("Solving"):
        solution = solve(maze)
        log.info(
            "Path from %d to %d: %d cells",
            maze.starting_cell,
            maze.finishing_cell,
            len(solution.shortest_path),
        )

    if config.seed is not None:
        with stage_timer("Reproducibility"):
            if not verify_seed_determinism(config.seed, config):
                errors.append(f"seed {config.seed} is not reproducible")

    stats = maze_stats(generated)
    stats.add("Solution Length", str(len(solution.shortest_path)))

    width = max(len(name) for name, _ in stats.entries)
    print(f"\n{'=' * 40}")
    for name, value in stats.entries:
        print(f"  {name:<{width}}  {value}")
    print(f"{'=' * 40}")

    return 1 if errors else 0


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate and solve a maze")
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to maze config JSON file (defaults to a 20x20 rectangular maze)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Override the config seed for reproducible generation",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable DEBUG-level logging",
    )
    args = parser.parse_args()

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = DEFAULT_CONFIG
    if args.config is not None:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: config file not found: {config_path}", file=sys.stderr)
            sys.exit(1)
        config = config_from_json(config_path.read_text())
    if args.seed is not None:
        config = replace(config, seed=args.seed)

    print(f"Topology:  {config.topology}")
    print(f"Algorithm: {config.algorithm.display_name}")
    print(f"Seed:      {config.seed if config.seed is not None else 'unseeded'}")

    try:
        code = run(config)
    except Exception:
        log.exception("Maze generation failed")
        sys.exit(1)
    sys.exit(code)


if __name__ == "__main__":
    main()
