import pytest

from valleycross.sim.geometry import Grid, manhattan, neighbors


def _build_grid(width: int = 6, height: int = 5) -> Grid:
    walls = {(x, 0) for x in range(width) if x != 1}
    walls |= {(x, height - 1) for x in range(width) if x != width - 2}
    walls |= {(0, y) for y in range(height)}
    walls |= {(width - 1, y) for y in range(height)}
    return Grid(
        width=width,
        height=height,
        walls=frozenset(walls),
        start=(1, 0),
        goal=(width - 2, height - 1),
    )


def test_is_open_rejects_walls_and_out_of_range() -> None:
    grid = _build_grid()

    assert grid.is_open(grid.start)
    assert grid.is_open(grid.goal)
    assert grid.is_open((2, 2))
    assert not grid.is_open((0, 2))
    assert not grid.is_open((2, 0))
    assert not grid.is_open((1, -1))
    assert not grid.is_open((6, 2))
    assert not grid.is_open((100, 100))


def test_interior_extent_and_period() -> None:
    grid = _build_grid(width=6, height=5)

    assert grid.interior_width == 4
    assert grid.interior_height == 3
    assert grid.period == 12
    assert grid.in_interior((1, 1))
    assert grid.in_interior((4, 3))
    assert not grid.in_interior(grid.start)
    assert not grid.in_interior((5, 1))


def test_grid_rejects_empty_interior_and_walled_openings() -> None:
    with pytest.raises(ValueError):
        Grid(width=2, height=5, walls=frozenset(), start=(0, 0), goal=(0, 4))

    with pytest.raises(ValueError):
        Grid(width=5, height=5, walls=frozenset({(1, 0)}), start=(1, 0), goal=(3, 4))


def test_manhattan_and_neighbors() -> None:
    assert manhattan((1, 0), (4, 4)) == 7
    assert manhattan((4, 4), (1, 0)) == 7

    options = neighbors((2, 2))
    assert options[0] == (2, 2)
    assert set(options[1:]) == {(3, 2), (1, 2), (2, 3), (2, 1)}
