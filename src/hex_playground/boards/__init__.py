"""Playground presets."""

from .playground_specs import PLAYGROUND_SINGLE, PLAYGROUND_STANDARD, PlaygroundSpec

__all__ = [
    "PLAYGROUND_SINGLE",
    "PLAYGROUND_STANDARD",
    "PlaygroundSpec",
]
