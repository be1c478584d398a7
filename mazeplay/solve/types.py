"""Solver result structures."""

from dataclasses import dataclass, field


class SolverInvariantError(RuntimeError):
    """Raised when a distance map or path walk contradicts a tree-shaped maze.

    This signals a corrupted or non-perfect maze, never a recoverable
    condition.
    """


@dataclass(frozen=True, slots=True)
class DistanceInfo:
    """BFS hop counts from ``start`` over the traversed edge set.

    The mapping's domain is exactly the set of cells reachable from
    ``start``. ``farthest_cell`` is the first cell discovered at the
    maximum distance.
    """

    start: int
    distances: dict[int, int]
    farthest_cell: int

    def distance_to(self, cell: int) -> int:
        try:
            return self.distances[cell]
        except KeyError:
            raise SolverInvariantError(
                f"Cell {cell} is not reachable from cell {self.start}"
            ) from None

    @property
    def max_distance(self) -> int:
        return self.distances[self.farthest_cell]

    def __contains__(self, cell: int) -> bool:
        return cell in self.distances

    def __len__(self) -> int:
        return len(self.distances)


@dataclass(frozen=True)
class ShortestPathInfo:
    """Ordered cells from the start to the finish, both inclusive."""

    path: tuple[int, ...]
    _members: frozenset[int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_members", frozenset(self.path))

    def contains(self, cell: int) -> bool:
        return cell in self._members

    def __len__(self) -> int:
        return len(self.path)


@dataclass(frozen=True, slots=True)
class Solution:
    """Distance map rooted at the maze start plus the path to its finish."""

    distance_info: DistanceInfo
    shortest_path: ShortestPathInfo
