"""Ring-expansion generation of hexagonal playgrounds."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from hex_playground.config import CELL_ID_PREFIX, HEX_SIZE
from hex_playground.geometry import (
    ORIGIN_GRID,
    GridCoordinate,
    PlacementPoint,
    neighbor_cells,
    neighbor_step,
)
from hex_playground.point_index import DEFAULT_POINT_INDEX, PointIndexFactory
from hex_playground.validation import normalize_center, normalize_radius, normalize_spacing

logger = logging.getLogger(__name__)

CellPair = tuple[PlacementPoint, GridCoordinate]


@dataclass(frozen=True)
class Cell:
    id: str
    grid: GridCoordinate
    placement: PlacementPoint


@dataclass(frozen=True)
class Playground:
    """Generated cells in discovery order, center first."""

    cells: tuple[Cell, ...]
    center: PlacementPoint
    radius: int
    spacing: float
    hex_size: float = HEX_SIZE
    _by_id: dict[str, Cell] = field(init=False, repr=False, compare=False)
    _by_grid: dict[GridCoordinate, Cell] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "_by_id", {cell.id: cell for cell in self.cells})
        object.__setattr__(self, "_by_grid", {cell.grid: cell for cell in self.cells})

    @property
    def grid_coordinates(self) -> tuple[GridCoordinate, ...]:
        return tuple(cell.grid for cell in self.cells)

    @property
    def placements(self) -> tuple[PlacementPoint, ...]:
        return tuple(cell.placement for cell in self.cells)

    def get_cell(self, cell_id):
        return self._by_id.get(cell_id)

    def cell_at(self, grid):
        return self._by_grid.get(grid)

    def __len__(self):
        return len(self.cells)

    def __iter__(self):
        return iter(self.cells)

    def __getitem__(self, index):
        return self.cells[index]


def _expand_ring(
    frontier: list[CellPair],
    step: float,
    point_index_factory: PointIndexFactory,
) -> list[CellPair]:
    candidates = []
    seen = point_index_factory()
    for placement, grid in frontier:
        for neighbor_placement, neighbor_grid in neighbor_cells(placement, grid, step):
            if seen.contains(neighbor_placement):
                continue
            seen.add(neighbor_placement)
            candidates.append((neighbor_placement, neighbor_grid))
    return candidates


def generate(
    center,
    radius: int,
    spacing: float,
    point_index_factory: PointIndexFactory = DEFAULT_POINT_INDEX,
) -> Playground:
    """Build a hex playground of `radius` rings around `center`.

    Every ring re-expands the whole previous frontier and keeps only
    placements not already produced, so a cell reached along several paths
    appears once, in the position where it was first found. Placement and
    grid coordinates are appended as pairs and stay index-aligned.

    Raises InvalidArgumentError for a negative or non-integer radius before
    any cell is produced.
    """

    radius = normalize_radius(radius)
    spacing = normalize_spacing(spacing)
    center = normalize_center(center)
    if radius == 0:
        spacing = 0.0

    step = neighbor_step(spacing, HEX_SIZE)
    produced: list[CellPair] = [(center, ORIGIN_GRID)]
    produced_index = point_index_factory()
    produced_index.add(center)
    frontier = list(produced)

    for ring in range(1, radius + 1):
        frontier = _expand_ring(frontier, step, point_index_factory)
        added = 0
        for placement, grid in frontier:
            if produced_index.contains(placement):
                continue
            produced_index.add(placement)
            produced.append((placement, grid))
            added += 1
        logger.debug("Ring %d: %d candidates, %d new cells", ring, len(frontier), added)

    cells = []
    for i, (placement, grid) in enumerate(produced):
        cell = Cell(id=f"{CELL_ID_PREFIX}{i}", grid=grid, placement=placement)
        logger.debug("Hexagon %s: %s", cell.id, placement.as_tuple())
        cells.append(cell)

    logger.debug(
        "Generated playground radius=%d spacing=%s cells=%d",
        radius,
        spacing,
        len(cells),
    )
    return Playground(
        cells=tuple(cells),
        center=center,
        radius=radius,
        spacing=spacing,
        hex_size=HEX_SIZE,
    )


__all__ = ["Cell", "Playground", "generate"]
