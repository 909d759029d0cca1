"""Hexagonal playground generation."""

from .geometry import GridCoordinate, PlacementPoint, points_close
from .playground import Cell, Playground, generate
from .point_index import LinearPointIndex, SpatialHashPointIndex
from .validation import InvalidArgumentError

__version__ = "0.1.0"

__all__ = [
    "Cell",
    "GridCoordinate",
    "InvalidArgumentError",
    "LinearPointIndex",
    "PlacementPoint",
    "Playground",
    "SpatialHashPointIndex",
    "generate",
    "points_close",
]
