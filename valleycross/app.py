"""Application entry for solving valley crossings."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from rich.logging import RichHandler

from valleycross.sim.contracts import SearchResult, TripResult
from valleycross.sim.search import (
    SearchConfig,
    ValleySearch,
    plan_trip,
    round_trip_waypoints,
)
from valleycross.sim.valley_loader import load_valley

DEFAULT_LOG_LEVEL = "WARNING"


def solve_valley(
    path: Path,
    *,
    trip: bool = False,
    frontier_cap: int | None = None,
    bound: int | None = None,
    raw_time: bool = False,
) -> SearchResult | TripResult:
    valley = load_valley(path)
    config = resolve_search_config(
        frontier_cap=frontier_cap, bound=bound, raw_time=raw_time
    )
    if trip:
        return plan_trip(valley, round_trip_waypoints(valley), config)
    return ValleySearch(valley, config).search()


def resolve_search_config(
    *,
    frontier_cap: int | None = None,
    bound: int | None = None,
    raw_time: bool = False,
) -> SearchConfig:
    return SearchConfig(
        frontier_cap=_resolve_int(frontier_cap, "VALLEYCROSS_FRONTIER_CAP"),
        bound=_resolve_int(bound, "VALLEYCROSS_BOUND"),
        periodic_dedup=not raw_time,
        periodic_cache=not raw_time,
    )


def configure_logging(level: str | None = None) -> None:
    name = (level or os.getenv("VALLEYCROSS_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.WARNING),
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )


def _resolve_int(value: int | None, env_var: str) -> int | None:
    if value is not None:
        return value
    raw = os.getenv(env_var)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{env_var} must be an integer, got {raw!r}") from exc
