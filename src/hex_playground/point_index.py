"""Approximate-membership indexes over placement points."""

from __future__ import annotations

import itertools
import math
from typing import Callable, Protocol

from hex_playground.config import PLACEMENT_EPSILON
from hex_playground.geometry import PlacementPoint, points_close

BucketKey = tuple[int, int, int]


class PointIndex(Protocol):
    def add(self, point: PlacementPoint) -> None: ...

    def contains(self, point: PlacementPoint) -> bool: ...

    def __len__(self) -> int: ...


class LinearPointIndex:
    """Scan every stored point; quadratic over a whole generation run."""

    def __init__(self, epsilon: float = PLACEMENT_EPSILON):
        self.epsilon = epsilon
        self._points: list[PlacementPoint] = []

    def add(self, point):
        self._points.append(point)

    def contains(self, point):
        return any(points_close(point, stored, self.epsilon) for stored in self._points)

    def __len__(self):
        return len(self._points)


def _bucket_key(point: PlacementPoint, bucket_size: float) -> BucketKey:
    return (
        math.floor(point.x / bucket_size),
        math.floor(point.y / bucket_size),
        math.floor(point.z / bucket_size),
    )


_NEIGHBOR_BUCKETS = tuple(itertools.product((-1, 0, 1), repeat=3))


class SpatialHashPointIndex:
    """Bucket points on an epsilon-sized lattice.

    A point within epsilon of a stored point always lies in the same or an
    adjacent bucket, so probing the 27 surrounding buckets and confirming
    with points_close answers exactly like LinearPointIndex.
    """

    def __init__(self, epsilon: float = PLACEMENT_EPSILON):
        if epsilon <= 0:
            raise ValueError("epsilon must be positive")
        self.epsilon = epsilon
        self._buckets: dict[BucketKey, list[PlacementPoint]] = {}
        self._count = 0

    def add(self, point):
        key = _bucket_key(point, self.epsilon)
        self._buckets.setdefault(key, []).append(point)
        self._count += 1

    def contains(self, point):
        if not isinstance(point, PlacementPoint):
            return False
        bx, by, bz = _bucket_key(point, self.epsilon)
        for dx, dy, dz in _NEIGHBOR_BUCKETS:
            for stored in self._buckets.get((bx + dx, by + dy, bz + dz), ()):
                if points_close(point, stored, self.epsilon):
                    return True
        return False

    def __len__(self):
        return self._count


PointIndexFactory = Callable[[], PointIndex]

DEFAULT_POINT_INDEX: PointIndexFactory = SpatialHashPointIndex

__all__ = [
    "PointIndex",
    "PointIndexFactory",
    "LinearPointIndex",
    "SpatialHashPointIndex",
    "DEFAULT_POINT_INDEX",
]
