from pathlib import Path

from rich.console import Console

from valleycross.render.viewer import render_result, render_trip, render_valley
from valleycross.sim.search import ValleySearch, plan_trip, round_trip_waypoints
from valleycross.sim.snapshots import SnapshotCache
from valleycross.sim.valley_loader import load_valley, parse_valley

CROSSING = """\
#.###
#>.<#
###.#
"""

BASIN_PATH = Path(__file__).resolve().parents[1] / "valleys" / "basin.txt"


def _export(renderable) -> str:
    console = Console(width=80, record=True)
    console.print(renderable)
    return console.export_text()


def test_render_valley_shows_headings_and_crowds() -> None:
    valley = parse_valley(CROSSING)
    cache = SnapshotCache(valley.grid, valley.obstacles)

    initial = _export(render_valley(valley, cache.occupancy_at(0), minute=0))
    crowded = _export(
        render_valley(valley, cache.occupancy_at(1), traveler=(1, 0), minute=1)
    )

    assert "Valley at minute 0" in initial
    assert "#>.<#" in initial
    assert "#@###" in crowded
    assert "#.2.#" in crowded


def test_render_result_contains_statistics() -> None:
    valley = load_valley(BASIN_PATH)
    result = ValleySearch(valley).search()

    output = _export(render_result(result))

    assert "Crossing" in output
    assert "found" in output
    assert "18" in output
    assert "Visited states" in output
    assert "Pruned" in output


def test_render_trip_lists_legs() -> None:
    valley = load_valley(BASIN_PATH)
    trip = plan_trip(valley, round_trip_waypoints(valley))

    output = _export(render_trip(trip))

    assert "Total minutes: 54" in output
    assert "Legs" in output
    assert "(6, 5)" in output
