"""Runtime helpers for hex playground."""

from .helpers import configure_logging

__all__ = ["configure_logging"]
