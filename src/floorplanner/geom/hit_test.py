"""Hit-testing for canvas selection.

Wall endpoints take priority over wall bodies so that a user can grab an
endpoint to resize a wall even when the body would also match. Ties are
broken by insertion order: the earliest-added wall wins.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterable, Sequence, Union

from shapely.geometry import Point as ShapelyPoint

from .. import config
from .primitives import Point, segment_contains_point

if TYPE_CHECKING:
    from ..core.model import FloorPlan, FurnitureItem, Wall


class WallHandle(str, Enum):
    START = "start"
    END = "end"
    BODY = "body"


@dataclass(frozen=True)
class WallHit:
    """A wall under the cursor and the part of it that was hit."""

    wall: Wall
    handle: WallHandle


def _check_zoom(zoom: float) -> None:
    if not zoom > 0:
        raise ValueError(f"Zoom must be positive, got {zoom}")


def find_wall_at(
    point: Point,
    walls: Sequence[Wall],
    zoom: float = 1.0,
    endpoint_radius: float = config.ENDPOINT_HIT_RADIUS,
    body_radius: float = config.BODY_HIT_RADIUS,
) -> WallHit | None:
    """Find the wall under a point.

    Args:
        point: Query point in plan coordinates.
        walls: Candidate walls in insertion order.
        zoom: Current canvas zoom; hit radii shrink as zoom grows.
        endpoint_radius: Endpoint hit radius at zoom 1.
        body_radius: Body hit radius at zoom 1.

    Returns:
        The first wall whose endpoint is in range, otherwise the first wall
        whose body is in range, otherwise None.
    """
    _check_zoom(zoom)
    endpoint_tolerance = endpoint_radius / zoom
    body_tolerance = body_radius / zoom

    for wall in walls:
        if wall.is_near_start(point, endpoint_tolerance):
            return WallHit(wall, WallHandle.START)
        if wall.is_near_end(point, endpoint_tolerance):
            return WallHit(wall, WallHandle.END)

    for wall in walls:
        if segment_contains_point(wall.start, wall.end, point, body_tolerance):
            return WallHit(wall, WallHandle.BODY)

    return None


def find_furniture_at(point: Point, items: Iterable[FurnitureItem]) -> FurnitureItem | None:
    """Find the topmost furniture item whose rotated footprint covers a point.

    Later items are drawn above earlier ones, so the last match wins.
    """
    query = ShapelyPoint(point.x, point.y)
    hit = None
    for item in items:
        if item.footprint.covers(query):
            hit = item
    return hit


Entity = Union[WallHit, "FurnitureItem"]


def find_entity_at(point: Point, plan: FloorPlan, zoom: float = 1.0) -> Entity | None:
    """Find the entity under a point: wall endpoints, then wall bodies, then furniture."""
    wall_hit = find_wall_at(point, plan.walls, zoom)
    if wall_hit is not None:
        return wall_hit
    return find_furniture_at(point, plan.furniture_items)
