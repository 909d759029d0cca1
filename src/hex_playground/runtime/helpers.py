"""Process-level helpers for applications embedding the generator."""

from __future__ import annotations

import logging

from hex_playground.config import LOG_FORMAT, LOG_LEVEL_DEFAULT


def configure_logging(level=LOG_LEVEL_DEFAULT, stream=None):
    """Install a stream handler on the root logger; returns the resolved level."""

    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"unknown log level: {level!r}")
    else:
        resolved = int(level)

    logging.basicConfig(level=resolved, format=LOG_FORMAT, stream=stream, force=True)
    return resolved
