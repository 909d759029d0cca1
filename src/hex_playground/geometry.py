"""Placement and cube-grid primitives for flat-sided hex playgrounds."""

from __future__ import annotations

import math
from dataclasses import dataclass

from hex_playground.config import HEX_SIZE, PLACEMENT_EPSILON


@dataclass(frozen=True)
class PlacementPoint:
    """World-space position of a cell center."""

    x: float
    y: float
    z: float

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def distance_to(self, other: PlacementPoint) -> float:
        """Euclidean distance to another placement point."""

        return math.dist(self.as_tuple(), other.as_tuple())


@dataclass(frozen=True)
class GridCoordinate:
    """Cube coordinate of a cell; generated cells satisfy x + y + z == 0."""

    x: int
    y: int
    z: int

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.x, self.y, self.z)

    def offset(self, dx: int, dy: int, dz: int) -> GridCoordinate:
        return GridCoordinate(self.x + dx, self.y + dy, self.z + dz)

    def is_cube(self) -> bool:
        return self.x + self.y + self.z == 0


ORIGIN_GRID = GridCoordinate(0, 0, 0)


@dataclass(frozen=True)
class NeighborDirection:
    """Unit placement direction paired with its cube-grid delta."""

    unit_dx: float
    unit_dy: float
    grid_delta: tuple[int, int, int]


_COS30 = math.cos(math.radians(30))
_SIN30 = math.sin(math.radians(30))

# Up, then clockwise in 60 degree steps.
NEIGHBOR_DIRECTIONS: tuple[NeighborDirection, ...] = (
    NeighborDirection(0.0, 1.0, (0, 1, -1)),
    NeighborDirection(_COS30, _SIN30, (1, 0, -1)),
    NeighborDirection(_COS30, -_SIN30, (1, -1, 0)),
    NeighborDirection(0.0, -1.0, (0, -1, 1)),
    NeighborDirection(-_COS30, -_SIN30, (-1, 0, 1)),
    NeighborDirection(-_COS30, _SIN30, (-1, 1, 0)),
)


def points_close(a, b, epsilon: float = PLACEMENT_EPSILON) -> bool:
    """Return True when both are placement points within epsilon on every axis.

    Anything that is not a PlacementPoint, None included, compares unequal.
    """

    if not isinstance(a, PlacementPoint) or not isinstance(b, PlacementPoint):
        return False
    return (
        abs(a.x - b.x) < epsilon
        and abs(a.y - b.y) < epsilon
        and abs(a.z - b.z) < epsilon
    )


def hex_half_height(hex_size: float = HEX_SIZE) -> float:
    """Half the flat-to-flat height of a hex with the given circumradius."""

    return hex_size * math.sin(math.radians(60))


def neighbor_step(spacing: float, hex_size: float = HEX_SIZE) -> float:
    """Center-to-center distance between adjacent cells."""

    return 2 * hex_half_height(hex_size) + spacing


def neighbor_cells(
    placement: PlacementPoint,
    grid: GridCoordinate,
    step: float,
) -> list[tuple[PlacementPoint, GridCoordinate]]:
    """Return the six (placement, grid) neighbors in the fixed direction order."""

    neighbors = []
    for direction in NEIGHBOR_DIRECTIONS:
        point = PlacementPoint(
            placement.x + step * direction.unit_dx,
            placement.y + step * direction.unit_dy,
            placement.z,
        )
        neighbors.append((point, grid.offset(*direction.grid_delta)))
    return neighbors


__all__ = [
    "PlacementPoint",
    "GridCoordinate",
    "ORIGIN_GRID",
    "NeighborDirection",
    "NEIGHBOR_DIRECTIONS",
    "points_close",
    "hex_half_height",
    "neighbor_step",
    "neighbor_cells",
]
