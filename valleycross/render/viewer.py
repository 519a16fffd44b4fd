"""Rich rendering for valleys and search results."""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from valleycross.sim.contracts import SearchResult, TripResult
from valleycross.sim.geometry import Cell
from valleycross.sim.snapshots import Snapshot
from valleycross.sim.valley_state import Valley

TILE_STYLES = {
    "#": "bright_magenta",
    ".": "grey70",
    "^": "bright_white",
    "v": "bright_white",
    "<": "bright_white",
    ">": "bright_white",
}

CROWD_STYLE = "bold cyan"
TRAVELER_STYLE = "bold bright_green"
OPENING_STYLE = "yellow"


def render_valley(
    valley: Valley,
    snapshot: Snapshot,
    *,
    traveler: Cell | None = None,
    minute: int | None = None,
) -> RenderableType:
    grid = valley.grid
    headings = {
        obstacle.obstacle_id: obstacle.heading for obstacle in snapshot.obstacles
    }
    title = "Valley" if minute is None else f"Valley at minute {minute}"
    lines: list[Text] = [Text(title, style="bold")]
    for y in range(grid.height):
        line = Text()
        for x in range(grid.width):
            cell = (x, y)
            if cell == traveler:
                line.append("@", style=TRAVELER_STYLE)
            elif cell in grid.walls:
                line.append("#", style=TILE_STYLES["#"])
            elif snapshot.is_occupied(cell):
                occupants = snapshot.occupants(cell)
                if len(occupants) == 1:
                    symbol = headings[next(iter(occupants))].value
                    line.append(symbol, style=TILE_STYLES[symbol])
                else:
                    line.append(str(min(len(occupants), 9)), style=CROWD_STYLE)
            elif cell in (grid.start, grid.goal):
                line.append(".", style=OPENING_STYLE)
            else:
                line.append(".", style=TILE_STYLES["."])
        lines.append(line)
    return Panel(Group(*lines), expand=False)


def render_result(result: SearchResult) -> RenderableType:
    return Panel(_result_table(result), title="Crossing", expand=False)


def render_trip(trip: TripResult) -> RenderableType:
    table = Table(title="Legs", show_header=True, header_style="bold")
    table.add_column("Leg")
    table.add_column("From")
    table.add_column("To")
    table.add_column("Depart")
    table.add_column("Arrive")
    table.add_column("Outcome")
    for index, leg in enumerate(trip.legs, start=1):
        table.add_row(
            str(index),
            _format_cell(leg.start),
            _format_cell(leg.goal),
            str(leg.start_minute),
            "-" if leg.minute is None else str(leg.minute),
            leg.outcome.value,
        )
    total = "-" if trip.total_minutes is None else str(trip.total_minutes)
    header = Text(f"Total minutes: {total}", style="bold")
    return Panel(Group(header, table), title="Trip", expand=False)


def _result_table(result: SearchResult) -> Table:
    table = Table(show_header=False)
    table.add_column("Field")
    table.add_column("Value")
    table.add_row("Outcome", result.outcome.value)
    table.add_row("Minutes", "-" if result.elapsed is None else str(result.elapsed))
    route = f"{_format_cell(result.start)} -> {_format_cell(result.goal)}"
    table.add_row("Route", route)
    table.add_row("Bound", str(result.bound))
    table.add_row("Visited states", str(result.visited_states))
    table.add_row("Peak frontier", str(max(result.frontier_sizes, default=0)))
    table.add_row("Pruned", "yes" if result.pruned else "no")
    return table


def _format_cell(cell: Cell) -> str:
    return f"({cell[0]}, {cell[1]})"
