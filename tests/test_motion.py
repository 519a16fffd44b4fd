import pytest

from valleycross.sim.contracts import Heading
from valleycross.sim.motion import Obstacle, position_at, step_obstacle
from valleycross.sim.valley_loader import parse_valley

VALLEY = """\
#.#####
#.....#
#.....#
#.....#
#####.#
"""


def test_step_wraps_to_opposite_interior_edge() -> None:
    grid = parse_valley(VALLEY).grid

    right = step_obstacle(Obstacle(0, (5, 2), Heading.RIGHT), grid)
    left = step_obstacle(Obstacle(1, (1, 2), Heading.LEFT), grid)
    up = step_obstacle(Obstacle(2, (1, 1), Heading.UP), grid)
    down = step_obstacle(Obstacle(3, (4, 3), Heading.DOWN), grid)

    assert right.cell == (1, 2)
    assert left.cell == (5, 2)
    assert up.cell == (1, 3)
    assert down.cell == (4, 1)


def test_step_preserves_identity_and_heading() -> None:
    grid = parse_valley(VALLEY).grid
    obstacle = Obstacle(7, (2, 2), Heading.DOWN)

    moved = step_obstacle(obstacle, grid)

    assert moved.obstacle_id == 7
    assert moved.heading == Heading.DOWN
    assert moved.cell == (2, 3)
    assert obstacle.cell == (2, 2)


@pytest.mark.parametrize("heading", list(Heading))
def test_closed_form_matches_repeated_steps(heading: Heading) -> None:
    grid = parse_valley(VALLEY).grid
    obstacle = Obstacle(0, (3, 2), heading)

    current = obstacle
    for minute in range(1, 2 * grid.period + 1):
        current = step_obstacle(current, grid)
        assert position_at(obstacle, minute, grid) == current.cell


@pytest.mark.parametrize("heading", list(Heading))
def test_obstacle_returns_home_after_one_period(heading: Heading) -> None:
    grid = parse_valley(VALLEY).grid
    obstacle = Obstacle(0, (2, 3), heading)

    assert grid.period == 15
    assert position_at(obstacle, grid.period, grid) == obstacle.cell
    assert position_at(obstacle, 0, grid) == obstacle.cell


def test_position_at_rejects_negative_minutes() -> None:
    grid = parse_valley(VALLEY).grid

    with pytest.raises(ValueError):
        position_at(Obstacle(0, (1, 1), Heading.UP), -1, grid)
