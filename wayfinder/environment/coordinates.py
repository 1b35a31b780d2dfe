"""Pixel and grid coordinate conversion."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from wayfinder.schemas import Position


def cell_key(grid_x: int, grid_y: int) -> str:
    """Render a cell as the ``"x,y"`` text key used in logs and map tooling."""
    return f"{grid_x},{grid_y}"


@dataclass(frozen=True)
class CoordinateConverter:
    """Maps pixels to fixed-size grid cells and back to cell centres."""

    cell_size: float

    def to_cell(self, x: float, y: float) -> Tuple[int, int]:
        return math.floor(x / self.cell_size), math.floor(y / self.cell_size)

    def cell_center(self, grid_x: int, grid_y: int) -> Position:
        half = self.cell_size / 2
        return Position(
            x=grid_x * self.cell_size + half,
            y=grid_y * self.cell_size + half,
            grid_x=grid_x,
            grid_y=grid_y,
        )

    def pixel_to_grid(self, x: float, y: float) -> Position:
        """Return the cell containing ``(x, y)`` with its centre as pixel coordinates.

        Feeding the returned pixel coordinates back in yields the same Position.
        """
        return self.cell_center(*self.to_cell(x, y))
