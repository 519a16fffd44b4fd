"""Time-expanded breadth-first search through a valley of moving obstacles."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Sequence

from valleycross.sim.contracts import SearchOutcome, SearchResult, TripResult
from valleycross.sim.geometry import Cell, manhattan, neighbors
from valleycross.sim.snapshots import SnapshotCache
from valleycross.sim.valley_state import Valley

LOGGER = logging.getLogger(__name__)

StateKey = tuple[Cell, int]


@dataclass(frozen=True)
class SearchConfig:
    """Knobs for one search engine.

    `frontier_cap` bounds each BFS layer; when a layer grows past it only the
    states closest to the goal are kept and the answer is no longer
    guaranteed optimal. `None` disables pruning. `bound` caps the elapsed
    minutes explored and defaults to `bound_factor * width * height`.
    """

    frontier_cap: int | None = None
    bound: int | None = None
    bound_factor: int = 5
    periodic_dedup: bool = True
    periodic_cache: bool = True

    def __post_init__(self) -> None:
        if self.frontier_cap is not None and self.frontier_cap < 1:
            raise ValueError("frontier_cap must be >= 1")
        if self.bound is not None and self.bound < 1:
            raise ValueError("bound must be >= 1")
        if self.bound_factor < 1:
            raise ValueError("bound_factor must be >= 1")


class ValleySearch:
    """Shortest-time search over (position, minute) states.

    Every action costs one minute, so BFS layer `n` holds exactly the states
    reached after `n` minutes and the first layer containing the goal is
    optimal (absent pruning). The snapshot cache outlives individual
    searches since occupancy depends on the minute alone.
    """

    def __init__(
        self,
        valley: Valley,
        config: SearchConfig | None = None,
        *,
        cache: SnapshotCache | None = None,
    ) -> None:
        self._valley = valley
        self.config = config or SearchConfig()
        self.cache = cache or SnapshotCache(
            valley.grid,
            valley.obstacles,
            wrap_period=self.config.periodic_cache,
        )
        self.visited: set[StateKey] = set()

    @property
    def bound(self) -> int:
        if self.config.bound is not None:
            return self.config.bound
        grid = self._valley.grid
        return self.config.bound_factor * grid.width * grid.height

    def search(
        self,
        start: Cell | None = None,
        goal: Cell | None = None,
        *,
        start_minute: int = 0,
    ) -> SearchResult:
        grid = self._valley.grid
        start = grid.start if start is None else start
        goal = grid.goal if goal is None else goal
        if start_minute < 0:
            raise ValueError("start_minute must be >= 0")
        if not grid.is_open(start):
            raise ValueError(f"start {start} is not an open cell")
        if not grid.is_open(goal):
            raise ValueError(f"goal {goal} is not an open cell")
        if self.cache.occupancy_at(start_minute).is_occupied(start):
            raise ValueError(f"start {start} is occupied at minute {start_minute}")

        bound = self.bound
        LOGGER.info(
            "Searching %s -> %s from minute %d (bound %d)",
            start,
            goal,
            start_minute,
            bound,
        )
        start_key = self._state_key(start, start_minute)
        self.visited = {start_key}
        parents: dict[StateKey, Cell | None] = {start_key: None}
        frontier: list[Cell] = [start]
        frontier_sizes = [1]
        pruned = False

        if start == goal:
            return self._found(
                start, goal, start_minute, 0, bound, frontier_sizes, pruned, [start]
            )

        for elapsed in range(1, bound + 1):
            minute = start_minute + elapsed
            snapshot = self.cache.occupancy_at(minute)
            next_frontier: list[Cell] = []
            reached_goal = False
            for position in frontier:
                for candidate in neighbors(position):
                    if not grid.is_open(candidate) or snapshot.is_occupied(candidate):
                        continue
                    key = self._state_key(candidate, minute)
                    if key in self.visited:
                        continue
                    self.visited.add(key)
                    parents[key] = position
                    next_frontier.append(candidate)
                    if candidate == goal:
                        reached_goal = True

            if not next_frontier:
                LOGGER.info("Frontier emptied at minute %d; goal unreachable", minute)
                return self._failed(
                    SearchOutcome.UNREACHABLE,
                    start,
                    goal,
                    start_minute,
                    bound,
                    frontier_sizes,
                    pruned,
                )
            frontier_sizes.append(len(next_frontier))
            if reached_goal:
                path = self._reconstruct_path(parents, goal, minute)
                return self._found(
                    start,
                    goal,
                    start_minute,
                    elapsed,
                    bound,
                    frontier_sizes,
                    pruned,
                    path,
                )

            cap = self.config.frontier_cap
            if cap is not None and len(next_frontier) > cap:
                LOGGER.warning(
                    "Pruning frontier at minute %d: keeping %d of %d states; "
                    "the result may not be optimal",
                    minute,
                    cap,
                    len(next_frontier),
                )
                next_frontier = prune_frontier(next_frontier, goal, cap)
                pruned = True
            frontier = next_frontier

        LOGGER.info("Search bound of %d minutes exhausted", bound)
        return self._failed(
            SearchOutcome.EXHAUSTED,
            start,
            goal,
            start_minute,
            bound,
            frontier_sizes,
            pruned,
        )

    def _state_key(self, cell: Cell, minute: int) -> StateKey:
        if self.config.periodic_dedup:
            return (cell, minute % self._valley.period)
        return (cell, minute)

    def _reconstruct_path(
        self, parents: dict[StateKey, Cell | None], goal: Cell, minute: int
    ) -> list[Cell]:
        path = [goal]
        current: Cell | None = parents[self._state_key(goal, minute)]
        while current is not None:
            minute -= 1
            path.append(current)
            current = parents[self._state_key(current, minute)]
        path.reverse()
        return path

    def _found(
        self,
        start: Cell,
        goal: Cell,
        start_minute: int,
        elapsed: int,
        bound: int,
        frontier_sizes: list[int],
        pruned: bool,
        path: list[Cell],
    ) -> SearchResult:
        LOGGER.info("Reached %s after %d minutes", goal, elapsed)
        return SearchResult(
            outcome=SearchOutcome.FOUND,
            start=start,
            goal=goal,
            start_minute=start_minute,
            minute=start_minute + elapsed,
            elapsed=elapsed,
            bound=bound,
            visited_states=len(self.visited),
            frontier_sizes=frontier_sizes,
            pruned=pruned,
            path=path,
        )

    def _failed(
        self,
        outcome: SearchOutcome,
        start: Cell,
        goal: Cell,
        start_minute: int,
        bound: int,
        frontier_sizes: list[int],
        pruned: bool,
    ) -> SearchResult:
        return SearchResult(
            outcome=outcome,
            start=start,
            goal=goal,
            start_minute=start_minute,
            bound=bound,
            visited_states=len(self.visited),
            frontier_sizes=frontier_sizes,
            pruned=pruned,
        )


def prune_frontier(frontier: Sequence[Cell], goal: Cell, cap: int) -> list[Cell]:
    """Keep the `cap` cells closest to `goal`; equal distances keep their order."""
    return sorted(frontier, key=lambda cell: manhattan(cell, goal))[:cap]


def find_crossing_time(
    valley: Valley, config: SearchConfig | None = None
) -> SearchResult:
    """Search from the valley's top opening to its bottom opening at minute 0."""
    return ValleySearch(valley, config).search()


def plan_trip(
    valley: Valley,
    waypoints: Sequence[Cell],
    config: SearchConfig | None = None,
) -> TripResult:
    """Visit `waypoints` in order, each leg departing when the previous arrives."""
    if len(waypoints) < 2:
        raise ValueError("a trip needs at least two waypoints")
    engine = ValleySearch(valley, config)
    legs = []
    minute = 0
    for origin, destination in zip(waypoints, waypoints[1:]):
        result = engine.search(origin, destination, start_minute=minute)
        legs.append(result)
        if not result.succeeded:
            LOGGER.info("Trip leg %d failed: %s", len(legs), result.outcome.value)
            return TripResult(legs=legs)
        minute = result.minute
        LOGGER.info("Trip leg %d arrived at minute %d", len(legs), minute)
    return TripResult(legs=legs, total_minutes=minute)


def round_trip_waypoints(valley: Valley) -> list[Cell]:
    """Start to goal, back to start, then to the goal again."""
    grid = valley.grid
    return [grid.start, grid.goal, grid.start, grid.goal]
