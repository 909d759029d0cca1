"""Argument validation for playground generation."""

from __future__ import annotations

import math

from hex_playground.geometry import PlacementPoint


class InvalidArgumentError(ValueError):
    """Raised before generation when an argument violates a precondition."""


def normalize_radius(value, label="radius"):
    """Validate a ring count and return it as an int."""

    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{label} must be an integer, got {value!r}")
    if value < 0:
        raise InvalidArgumentError(f"{label} cannot be negative ({value})")
    return int(value)


def normalize_spacing(value, label="spacing"):
    """Validate a gap between adjacent hexes and return it as a float."""

    try:
        spacing = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"{label} must be a number, got {value!r}") from exc
    if not math.isfinite(spacing):
        raise InvalidArgumentError(f"{label} must be finite, got {value!r}")
    return spacing


def normalize_center(value, label="center"):
    """Return the center as a PlacementPoint with finite coordinates."""

    if isinstance(value, PlacementPoint):
        point = value
    else:
        try:
            coords = tuple(float(axis) for axis in value)
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError(f"{label} must be three numbers, got {value!r}") from exc
        if len(coords) != 3:
            raise InvalidArgumentError(f"{label} must be three numbers, got {value!r}")
        point = PlacementPoint(*coords)

    if not all(math.isfinite(axis) for axis in point.as_tuple()):
        raise InvalidArgumentError(f"{label} must be finite, got {value!r}")
    return point


__all__ = ["InvalidArgumentError", "normalize_radius", "normalize_spacing", "normalize_center"]
