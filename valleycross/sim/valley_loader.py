"""Load valleys from ASCII maps."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from valleycross.sim.contracts import Heading
from valleycross.sim.geometry import Cell, Grid
from valleycross.sim.motion import Obstacle
from valleycross.sim.valley_state import Valley

WALL = "#"
FLOOR = "."
HEADING_SYMBOLS: set[str] = {heading.value for heading in Heading}


class MalformedValleyError(ValueError):
    """Raised when an ASCII map does not describe a valid valley."""


def load_valley(path: Path) -> Valley:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"Missing valley map file: {path}") from exc
    return parse_valley(text)


def parse_valley(text: str | Iterable[str]) -> Valley:
    lines = text.splitlines() if isinstance(text, str) else list(text)
    lines = [line.rstrip("\r\n") for line in lines]
    while lines and not lines[-1].strip():
        lines.pop()
    if not lines:
        raise MalformedValleyError("Valley map is empty.")

    width = len(lines[0])
    height = len(lines)
    for y, line in enumerate(lines):
        if len(line) != width:
            raise MalformedValleyError(
                f"Row {y} has width {len(line)}, expected {width}."
            )
        for x, ch in enumerate(line):
            if ch != WALL and ch != FLOOR and ch not in HEADING_SYMBOLS:
                raise MalformedValleyError(f"Unknown symbol {ch!r} at ({x}, {y}).")
    if width < 3 or height < 3:
        raise MalformedValleyError(
            f"Valley {width}x{height} has no interior; need at least 3x3."
        )

    start = _single_opening(lines[0], 0)
    goal = _single_opening(lines[-1], height - 1)
    _validate_side_walls(lines)

    walls: set[Cell] = set()
    obstacles: list[Obstacle] = []
    for y, line in enumerate(lines):
        for x, ch in enumerate(line):
            if ch == WALL:
                walls.add((x, y))
            elif ch in HEADING_SYMBOLS:
                # Border rows and columns were checked above, so this is interior.
                obstacles.append(
                    Obstacle(
                        obstacle_id=len(obstacles), cell=(x, y), heading=Heading(ch)
                    )
                )

    grid = Grid(
        width=width,
        height=height,
        walls=frozenset(walls),
        start=start,
        goal=goal,
    )
    return Valley(grid=grid, obstacles=tuple(obstacles))


def _single_opening(line: str, y: int) -> Cell:
    openings = [x for x, ch in enumerate(line) if ch != WALL]
    if len(openings) != 1:
        raise MalformedValleyError(
            f"Row {y} must have exactly one opening, found {len(openings)}."
        )
    x = openings[0]
    if line[x] != FLOOR:
        raise MalformedValleyError(f"Opening at ({x}, {y}) must be floor.")
    if x == 0 or x == len(line) - 1:
        raise MalformedValleyError(f"Opening at ({x}, {y}) cannot be a corner.")
    return (x, y)


def _validate_side_walls(lines: list[str]) -> None:
    for y, line in enumerate(lines[1:-1], start=1):
        if line[0] != WALL or line[-1] != WALL:
            raise MalformedValleyError(f"Row {y} must start and end with a wall.")
