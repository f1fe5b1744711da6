# hexgrid.py - brick-offset hex layout: cell enumeration, centers, extent
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Tuple

from .errors import ConfigurationError
from .geometry import CellFootprint

GRID_ROWS = 32
GRID_COLS = 32
ROW_SPACING = 0.75  # flat-top hexes overlap by a quarter along the row axis


@dataclass(frozen=True)
class GridExtent:
    width: float
    height: float


def offset_to_world(row: int, col: int, cell_w: float, cell_d: float,
                    extent: GridExtent, row_spacing: float = ROW_SPACING) -> Tuple[float, float]:
    """Offset (row, col) -> world (x, z), centered on the origin.

    Odd rows are shifted half a cell along z; rows are compressed by
    ``row_spacing`` along x.
    """
    x = cell_w * row * row_spacing - extent.width / 2.0
    z = cell_d * col + (cell_d * 0.5 if row % 2 == 1 else 0.0) - extent.height / 2.0
    return x, z


class GridLayout:
    """Fixed-size offset-hex grid sized from a cell footprint."""

    def __init__(self, footprint: CellFootprint, rows: int = GRID_ROWS,
                 cols: int = GRID_COLS, row_spacing: float = ROW_SPACING):
        if rows <= 0 or cols <= 0:
            raise ConfigurationError(f"grid dimensions must be positive, got {rows}x{cols}")
        w, d = footprint.width, footprint.depth
        if not (math.isfinite(w) and math.isfinite(d)) or w <= 0 or d <= 0:
            raise ConfigurationError(f"cell dimensions must be positive and finite, got {w}x{d}")
        self.footprint = footprint
        self.rows = rows
        self.cols = cols
        self.row_spacing = row_spacing
        self.extent = GridExtent(w * rows * row_spacing, d * cols)

    @property
    def boundary_radius(self) -> float:
        return min(self.extent.width, self.extent.height) / 2.0

    def cells(self) -> Iterator[Tuple[int, int]]:
        # every row of a column before moving on to the next column
        for col in range(self.cols):
            for row in range(self.rows):
                yield row, col

    def center(self, row: int, col: int) -> Tuple[float, float]:
        return offset_to_world(row, col, self.footprint.width, self.footprint.depth,
                               self.extent, self.row_spacing)

    def __len__(self) -> int:
        return self.rows * self.cols
