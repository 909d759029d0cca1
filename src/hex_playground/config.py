"""Constants shared by playground generation."""

from typing import Final

# Hex circumradius in world units.
HEX_SIZE: Final[float] = 1.0

# Per-axis tolerance under which two placement points are the same location.
PLACEMENT_EPSILON: Final[float] = 0.001

CELL_ID_PREFIX: Final[str] = "hex"

DEFAULT_RADIUS: Final[int] = 3
DEFAULT_SPACING: Final[float] = 0.1

LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVEL_DEFAULT: Final[str] = "WARNING"
