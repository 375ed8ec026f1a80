"""Geometry utilities for floor plan editing.

This module provides the planar primitives and grid snapping used by the
editor. Hit-testing, collision and elevation helpers live in their own
submodules since they operate on plan entities.
"""

from .grid import GridSettings, snap_point, snap_size, snap_value
from .primitives import Point, Rect, distance, rotate_around_origin, segment_contains_point

__all__ = [
    "GridSettings",
    "Point",
    "Rect",
    "distance",
    "rotate_around_origin",
    "segment_contains_point",
    "snap_point",
    "snap_size",
    "snap_value",
]
