"""Parsed valley: fixed geometry plus the time-0 obstacle field."""

from __future__ import annotations

from dataclasses import dataclass

from valleycross.sim.geometry import Grid
from valleycross.sim.motion import Obstacle


@dataclass(frozen=True)
class Valley:
    grid: Grid
    obstacles: tuple[Obstacle, ...]

    @property
    def period(self) -> int:
        return self.grid.period
