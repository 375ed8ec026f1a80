"""Elevation views.

An elevation looks at the plan from one compass direction and shows the
walls that face the viewer, i.e. walls perpendicular to the view direction.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import TYPE_CHECKING, Iterable, List, Tuple

from .. import config

if TYPE_CHECKING:
    from ..core.model import Wall


class ElevationDirection(str, Enum):
    NORTH = "North"
    SOUTH = "South"
    EAST = "East"
    WEST = "West"

    @property
    def angle(self) -> float:
        return _DIRECTION_ANGLES[self]


_DIRECTION_ANGLES = {
    ElevationDirection.NORTH: 0.0,
    ElevationDirection.SOUTH: math.pi,
    ElevationDirection.EAST: math.pi / 2,
    ElevationDirection.WEST: -math.pi / 2,
}


def _normalize(angle: float) -> float:
    return angle % (2 * math.pi)


def faces_direction(
    wall: Wall, direction: ElevationDirection, tolerance: float = config.ELEVATION_ANGLE_TOLERANCE
) -> bool:
    """Check if a wall is perpendicular to the view direction within a tolerance."""
    diff = abs(_normalize(wall.angle) - _normalize(direction.angle))
    diff = min(diff, abs(diff - 2 * math.pi))
    return abs(diff - math.pi / 2) < tolerance or abs(diff - 3 * math.pi / 2) < tolerance


def visible_walls(
    walls: Iterable[Wall],
    direction: ElevationDirection,
    tolerance: float = config.ELEVATION_ANGLE_TOLERANCE,
) -> List[Wall]:
    """Filter the walls shown in an elevation, keeping plan order."""
    return [wall for wall in walls if faces_direction(wall, direction, tolerance)]


def elevation_extent(wall: Wall, scale: float) -> Tuple[float, float]:
    """Screen width and height of a wall drawn in elevation."""
    return wall.length * scale, wall.height * scale
