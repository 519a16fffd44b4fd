"""Per-minute occupancy snapshots with memoised, incremental construction."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from types import MappingProxyType
from typing import Iterable, Mapping

from valleycross.sim.geometry import Cell, Grid
from valleycross.sim.motion import Obstacle, step_obstacle

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshot:
    """Every obstacle at one instant, indexed by the cell it occupies."""

    obstacles: tuple[Obstacle, ...]
    cells: Mapping[Cell, frozenset[int]] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        grouped: dict[Cell, set[int]] = {}
        for obstacle in self.obstacles:
            grouped.setdefault(obstacle.cell, set()).add(obstacle.obstacle_id)
        cells = {cell: frozenset(ids) for cell, ids in grouped.items()}
        object.__setattr__(self, "cells", MappingProxyType(cells))

    def is_occupied(self, cell: Cell) -> bool:
        return cell in self.cells

    def occupants(self, cell: Cell) -> frozenset[int]:
        return self.cells.get(cell, frozenset())


class SnapshotCache:
    """Occupancy by minute, derived step by step from the time-0 field.

    With `wrap_period` the cache is keyed by `minute % period`, so at most
    one full period of snapshots is ever materialised. Otherwise it is keyed
    by the raw minute and grows with the latest minute requested.
    """

    def __init__(
        self,
        grid: Grid,
        obstacles: Iterable[Obstacle],
        *,
        wrap_period: bool = True,
    ) -> None:
        self._grid = grid
        self._wrap_period = wrap_period
        self._snapshots: dict[int, Snapshot] = {
            0: Snapshot(obstacles=tuple(obstacles))
        }

    @property
    def period(self) -> int:
        return self._grid.period

    def __len__(self) -> int:
        return len(self._snapshots)

    def __contains__(self, minute: int) -> bool:
        return self._key(minute) in self._snapshots

    def occupancy_at(self, minute: int) -> Snapshot:
        if minute < 0:
            raise ValueError("minute must be >= 0")
        key = self._key(minute)
        cached = self._snapshots.get(key)
        if cached is not None:
            return cached

        # Keys are always filled contiguously from 0.
        latest = max(self._snapshots)
        snapshot = self._snapshots[latest]
        for step in range(latest + 1, key + 1):
            snapshot = Snapshot(
                obstacles=tuple(
                    step_obstacle(obstacle, self._grid)
                    for obstacle in snapshot.obstacles
                )
            )
            self._snapshots[step] = snapshot
        LOGGER.debug(
            "Materialised snapshots %d..%d (%d cached)",
            latest + 1,
            key,
            len(self._snapshots),
        )
        return snapshot

    def _key(self, minute: int) -> int:
        if self._wrap_period:
            return minute % self.period
        return minute
