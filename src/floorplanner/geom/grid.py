"""Grid snapping.

Snapping quantizes coordinates and sizes to the nearest multiple of the
configured grid cell. Halfway values round away from zero.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .. import config
from .primitives import Point


def snap_value(value: float, grid_size: float) -> float:
    """Round a scalar to the nearest multiple of ``grid_size``.

    NaN and infinite values are returned unchanged.

    Raises:
        ValueError: If ``grid_size`` is not positive.
    """
    if grid_size <= 0:
        raise ValueError(f"Grid size must be positive, got {grid_size}")

    if not math.isfinite(value):
        return value

    cells = value / grid_size
    return math.copysign(math.floor(abs(cells) + 0.5), cells) * grid_size


@dataclass(frozen=True)
class GridSettings:
    """Grid configuration of a canvas.

    Attributes:
        grid_size: Size of a grid cell, must be positive.
        show_grid: Whether the grid is drawn.
        snap_to_grid: Whether positions and sizes are snapped.
    """

    grid_size: float = config.DEFAULT_GRID_SIZE
    show_grid: bool = config.DEFAULT_SHOW_GRID
    snap_to_grid: bool = config.DEFAULT_SNAP_TO_GRID

    def __post_init__(self) -> None:
        if not self.grid_size > 0:
            raise ValueError(f"Grid size must be positive, got {self.grid_size}")

    def snap_point(self, point: Point) -> Point:
        """Snap each coordinate of a point independently."""
        if not self.snap_to_grid:
            return point
        return Point(snap_value(point.x, self.grid_size), snap_value(point.y, self.grid_size))

    def snap_size(self, width: float, height: float) -> tuple[float, float]:
        """Snap a width/height pair."""
        if not self.snap_to_grid:
            return width, height
        return snap_value(width, self.grid_size), snap_value(height, self.grid_size)


def snap_point(point: Point, grid_size: float) -> Point:
    """Snap a point to a grid of the given size."""
    return GridSettings(grid_size=grid_size).snap_point(point)


def snap_size(width: float, height: float, grid_size: float) -> tuple[float, float]:
    """Snap a size to a grid of the given size."""
    return GridSettings(grid_size=grid_size).snap_size(width, height)
