"""Grid geometry for a walled valley."""

from __future__ import annotations

from dataclasses import dataclass
import math

Cell = tuple[int, int]


@dataclass(frozen=True)
class Grid:
    """A rectangular valley with a one-cell wall border.

    The interior is the rectangle `1 <= x <= width - 2`, `1 <= y <= height - 2`.
    `start` is the single opening in the top row and `goal` the single opening
    in the bottom row.
    """

    width: int
    height: int
    walls: frozenset[Cell]
    start: Cell
    goal: Cell

    def __post_init__(self) -> None:
        if self.interior_width < 1 or self.interior_height < 1:
            raise ValueError("grid interior must be at least 1x1")
        if self.start in self.walls or self.goal in self.walls:
            raise ValueError("start and goal cannot be walls")

    @property
    def interior_width(self) -> int:
        return self.width - 2

    @property
    def interior_height(self) -> int:
        return self.height - 2

    @property
    def period(self) -> int:
        return math.lcm(self.interior_width, self.interior_height)

    def in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def in_interior(self, cell: Cell) -> bool:
        x, y = cell
        return 1 <= x <= self.interior_width and 1 <= y <= self.interior_height

    def is_open(self, cell: Cell) -> bool:
        if not self.in_bounds(cell):
            return False
        return cell not in self.walls


def manhattan(a: Cell, b: Cell) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def neighbors(cell: Cell) -> tuple[Cell, ...]:
    """The cell itself (waiting) followed by its four orthogonal neighbours."""
    x, y = cell
    return ((x, y), (x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1))
