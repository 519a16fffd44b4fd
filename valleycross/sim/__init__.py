"""Valley model, obstacle simulation and time-expanded search."""

from valleycross.sim.contracts import (
    Heading,
    SearchOutcome,
    SearchResult,
    TripResult,
)
from valleycross.sim.geometry import Cell, Grid, manhattan
from valleycross.sim.motion import Obstacle, position_at, step_obstacle
from valleycross.sim.search import (
    SearchConfig,
    ValleySearch,
    find_crossing_time,
    plan_trip,
    prune_frontier,
    round_trip_waypoints,
)
from valleycross.sim.snapshots import Snapshot, SnapshotCache
from valleycross.sim.valley_loader import (
    MalformedValleyError,
    load_valley,
    parse_valley,
)
from valleycross.sim.valley_state import Valley

__all__ = [
    "Cell",
    "Grid",
    "Heading",
    "MalformedValleyError",
    "Obstacle",
    "SearchConfig",
    "SearchOutcome",
    "SearchResult",
    "Snapshot",
    "SnapshotCache",
    "TripResult",
    "Valley",
    "ValleySearch",
    "find_crossing_time",
    "load_valley",
    "manhattan",
    "parse_valley",
    "plan_trip",
    "prune_frontier",
    "position_at",
    "round_trip_waypoints",
    "step_obstacle",
]
