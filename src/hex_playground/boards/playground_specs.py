"""Playground presets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from hex_playground.config import DEFAULT_RADIUS, DEFAULT_SPACING
from hex_playground.geometry import PlacementPoint
from hex_playground.playground import Playground, generate
from hex_playground.validation import normalize_center, normalize_radius, normalize_spacing


@dataclass(frozen=True)
class PlaygroundSpec:
    """Parameters for a playground of concentric hex rings."""

    center: PlacementPoint
    radius: int
    spacing: float

    def __post_init__(self):
        object.__setattr__(self, "center", normalize_center(self.center, "spec center"))
        object.__setattr__(self, "radius", normalize_radius(self.radius, "spec radius"))
        object.__setattr__(self, "spacing", normalize_spacing(self.spacing, "spec spacing"))

    @property
    def cell_count(self) -> int:
        """Number of cells the preset produces."""

        return 1 + 3 * self.radius * (self.radius + 1)

    def build(self, **kwargs) -> Playground:
        return generate(self.center, self.radius, self.spacing, **kwargs)


PLAYGROUND_STANDARD: Final[PlaygroundSpec] = PlaygroundSpec(
    center=PlacementPoint(0.0, 0.0, 0.0),
    radius=DEFAULT_RADIUS,
    spacing=DEFAULT_SPACING,
)

PLAYGROUND_SINGLE: Final[PlaygroundSpec] = PlaygroundSpec(
    center=PlacementPoint(0.0, 0.0, 0.0),
    radius=0,
    spacing=0.0,
)

__all__ = [
    "PlaygroundSpec",
    "PLAYGROUND_STANDARD",
    "PLAYGROUND_SINGLE",
]
