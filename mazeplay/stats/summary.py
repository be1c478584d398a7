"""Display-only maze statistics as ordered string key/value pairs."""

from mazeplay.generation.types import GeneratedMaze
from mazeplay.maze.layout import GridLayout, RingLayout


def split_camel_case(text: str) -> str:
    """Insert a space before each capital that follows a lowercase/digit.

    ``"RecursiveBackTracker"`` -> ``"Recursive Back Tracker"``.
    """
    if not text.strip():
        return text
    out = [text[0]]
    for prev, ch in zip(text, text[1:]):
        if not prev.isspace() and not prev.isupper() and ch.isupper():
            out.append(" ")
        out.append(ch)
    return "".join(out)


class MazeStats:
    """Ordered (name, value) entries; re-adding a name replaces its value."""

    def __init__(self) -> None:
        self._entries: list[tuple[str, str]] = []

    @property
    def entries(self) -> list[tuple[str, str]]:
        return list(self._entries)

    def add(self, name: str, value: str) -> None:
        for i, (existing, _) in enumerate(self._entries):
            if existing == name:
                self._entries[i] = (name, value)
                return
        self._entries.append((name, value))

    def get(self, name: str) -> str | None:
        return dict(self._entries).get(name)

    def as_dict(self) -> dict[str, str]:
        return dict(self._entries)


def maze_stats(generated: GeneratedMaze) -> MazeStats:
    """Summarize a generated maze for display.

    Entries: Maze Type, Algorithm, shape parameters, Total Cells,
    Dead Ends (count and truncated percentage), Generation Time.
    """
    maze = generated.maze
    config = generated.config
    stats = MazeStats()

    stats.add("Maze Type", split_camel_case(config.topology.capitalize() + "Maze"))
    stats.add("Algorithm", split_camel_case(config.algorithm.display_name))

    if isinstance(maze.layout, GridLayout):
        stats.add("Rows", str(maze.layout.rows))
        stats.add("Columns", str(maze.layout.columns))
    elif isinstance(maze.layout, RingLayout):
        stats.add("Rings", str(maze.layout.ring_count))
        stats.add("Scale Factor", str(config.circular.scale_factor))
        stats.add("Halve Factor", str(config.circular.halve_factor))

    total = maze.cell_count
    dead_ends = len(maze.dead_ends())
    percentage = (dead_ends * 100) // total if total else 0
    stats.add("Total Cells", str(total))
    stats.add("Dead Ends", f"{dead_ends} ({percentage}%)")
    stats.add("Generation Time", f"{generated.generation_seconds * 1000.0:.1f} ms")
    return stats
