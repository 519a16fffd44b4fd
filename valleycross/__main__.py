"""Module entry point for `python -m valleycross`."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console

from valleycross.app import configure_logging, solve_valley
from valleycross.render.viewer import render_result, render_trip, render_valley
from valleycross.sim.contracts import TripResult
from valleycross.sim.snapshots import SnapshotCache
from valleycross.sim.valley_loader import load_valley


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Find the fastest way through a valley of drifting obstacles."
    )
    parser.add_argument("valley", type=Path, help="ASCII valley map to solve.")
    parser.add_argument(
        "--trip",
        action="store_true",
        help="Cross, return to the start, then cross again.",
    )
    parser.add_argument(
        "--frontier-cap",
        type=int,
        default=None,
        help="Keep at most this many states per minute (approximate when hit).",
    )
    parser.add_argument(
        "--bound",
        type=int,
        default=None,
        help="Give up after this many minutes (defaults to 5 x width x height).",
    )
    parser.add_argument(
        "--raw-time",
        action="store_true",
        help="Key caches and visited states by raw minute instead of the period.",
    )
    parser.add_argument(
        "--show",
        type=int,
        default=None,
        metavar="MINUTE",
        help="Render the obstacle field at MINUTE before solving.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Python logging level (defaults to VALLEYCROSS_LOG_LEVEL or WARNING).",
    )
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    console = Console()

    try:
        if args.show is not None:
            _show_minute(console, args.valley, args.show, raw_time=args.raw_time)
        result = solve_valley(
            args.valley,
            trip=args.trip,
            frontier_cap=args.frontier_cap,
            bound=args.bound,
            raw_time=args.raw_time,
        )
    except (FileNotFoundError, ValueError) as exc:
        raise SystemExit(str(exc)) from exc

    if args.json:
        console.print_json(result.model_dump_json())
    elif isinstance(result, TripResult):
        console.print(render_trip(result))
    else:
        console.print(render_result(result))

    if not result.succeeded:
        raise SystemExit(1)


def _show_minute(console: Console, path: Path, minute: int, *, raw_time: bool) -> None:
    if minute < 0:
        raise SystemExit("--show minute must be >= 0")
    valley = load_valley(path)
    cache = SnapshotCache(valley.grid, valley.obstacles, wrap_period=not raw_time)
    console.print(render_valley(valley, cache.occupancy_at(minute), minute=minute))


if __name__ == "__main__":
    main()
