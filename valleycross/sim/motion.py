"""Deterministic obstacle motion with interior wraparound."""

from __future__ import annotations

from dataclasses import dataclass, replace

from valleycross.sim.contracts import Heading
from valleycross.sim.geometry import Cell, Grid

HEADING_VECTORS: dict[Heading, Cell] = {
    Heading.UP: (0, -1),
    Heading.DOWN: (0, 1),
    Heading.LEFT: (-1, 0),
    Heading.RIGHT: (1, 0),
}


@dataclass(frozen=True)
class Obstacle:
    obstacle_id: int
    cell: Cell
    heading: Heading


def step_obstacle(obstacle: Obstacle, grid: Grid) -> Obstacle:
    """Advance one minute, teleporting to the opposite interior edge on exit."""
    dx, dy = HEADING_VECTORS[obstacle.heading]
    x, y = obstacle.cell
    nx, ny = x + dx, y + dy
    if not grid.in_interior((nx, ny)):
        if dx:
            nx = 1 if nx > grid.interior_width else grid.interior_width
        if dy:
            ny = 1 if ny > grid.interior_height else grid.interior_height
    return replace(obstacle, cell=(nx, ny))


def position_at(obstacle: Obstacle, minute: int, grid: Grid) -> Cell:
    """Closed-form position of `obstacle` after `minute` steps from its current cell."""
    if minute < 0:
        raise ValueError("minute must be >= 0")
    dx, dy = HEADING_VECTORS[obstacle.heading]
    x, y = obstacle.cell
    return (
        (x - 1 + dx * minute) % grid.interior_width + 1,
        (y - 1 + dy * minute) % grid.interior_height + 1,
    )
