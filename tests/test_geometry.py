import math

import pytest

from hex_playground.geometry import (
    NEIGHBOR_DIRECTIONS,
    GridCoordinate,
    PlacementPoint,
    hex_half_height,
    neighbor_cells,
    neighbor_step,
    points_close,
)


def test_points_close_within_epsilon():
    a = PlacementPoint(1.0, 2.0, 3.0)
    assert points_close(a, PlacementPoint(1.0009, 1.9991, 3.0))
    assert not points_close(a, PlacementPoint(1.002, 2.0, 3.0))
    assert not points_close(a, PlacementPoint(1.0, 2.0, 3.5))


@pytest.mark.parametrize("other", [None, (1.0, 2.0, 3.0), "hex0", GridCoordinate(1, 2, 3)])
def test_points_close_non_points_compare_unequal(other):
    a = PlacementPoint(1.0, 2.0, 3.0)
    assert points_close(a, other) is False
    assert points_close(other, a) is False


def test_hex_half_height_is_sin60():
    assert hex_half_height() == pytest.approx(math.sqrt(3) / 2)
    assert neighbor_step(0.25) == pytest.approx(math.sqrt(3) + 0.25)


def test_neighbor_directions_keep_cube_invariant():
    for direction in NEIGHBOR_DIRECTIONS:
        assert sum(direction.grid_delta) == 0
        assert math.hypot(direction.unit_dx, direction.unit_dy) == pytest.approx(1.0)


def test_neighbor_cells_order_and_z():
    origin = PlacementPoint(0.0, 0.0, 5.0)
    neighbors = neighbor_cells(origin, GridCoordinate(0, 0, 0), step=2.0)

    grids = [grid.as_tuple() for _, grid in neighbors]
    assert grids == [(0, 1, -1), (1, 0, -1), (1, -1, 0), (0, -1, 1), (-1, 0, 1), (-1, 1, 0)]

    up, upper_right = neighbors[0][0], neighbors[1][0]
    assert up.as_tuple() == pytest.approx((0.0, 2.0, 5.0))
    assert upper_right.as_tuple() == pytest.approx((math.sqrt(3), 1.0, 5.0))
    assert all(point.z == 5.0 for point, _ in neighbors)
