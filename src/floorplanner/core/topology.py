"""Topology analysis for room outlines.

This module reconstructs the outline of a room from the walls it
references, decides whether the outline is closed and derives the room's
bounds and area.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, List, Tuple

import networkx as nx
from shapely.geometry import Polygon

from ..geom.primitives import Rect
from .model import FloorPlan, Room, Wall

# Decimal places used to merge wall endpoints into graph nodes
NODE_PRECISION = 6
MIN_POLYGON_AREA = 1e-6

Node = Tuple[float, float]


def _node(x: float, y: float) -> Node:
    return (round(x, NODE_PRECISION), round(y, NODE_PRECISION))


def build_wall_graph(walls: Iterable[Wall]) -> nx.MultiGraph:
    """Build a graph whose nodes are wall endpoints and edges are walls.

    Endpoints closer than the node precision are merged. Parallel walls
    between the same endpoints are kept as separate edges.

    Args:
        walls: Walls to include.

    Returns:
        NetworkX MultiGraph keyed by wall ID.
    """
    G = nx.MultiGraph()
    for wall in walls:
        G.add_edge(
            _node(wall.start.x, wall.start.y),
            _node(wall.end.x, wall.end.y),
            key=wall.id,
            wall_id=wall.id,
        )
    return G


def is_closed_outline(walls: Iterable[Wall]) -> bool:
    """Check whether walls form exactly one closed loop.

    Every endpoint must be shared by exactly two walls and the walls must
    be connected. Fewer than three walls never enclose an area.
    """
    G = build_wall_graph(walls)
    if G.number_of_edges() < 3:
        return False
    if any(degree != 2 for _, degree in G.degree()):
        return False
    return nx.is_connected(G)


def room_walls(plan: FloorPlan, room: Room) -> List[Wall]:
    """Get the walls referenced by a room, in outline order.

    Unknown wall IDs are skipped.
    """
    walls = []
    for wall_id in room.wall_ids:
        wall = plan.wall(wall_id)
        if wall is not None:
            walls.append(wall)
    return walls


def room_outline(plan: FloorPlan, room: Room) -> Polygon | None:
    """Reconstruct the room polygon from its walls.

    Returns:
        The outline as a shapely Polygon, or None if the walls do not form a
        closed loop with a positive area.
    """
    walls = room_walls(plan, room)
    if not is_closed_outline(walls):
        return None

    G = build_wall_graph(walls)
    cycle = nx.find_cycle(G)
    polygon = Polygon([edge[0] for edge in cycle])
    if not polygon.is_valid or polygon.area < MIN_POLYGON_AREA:
        return None
    return polygon


def room_bounds(plan: FloorPlan, room: Room) -> Rect:
    """Bounding rectangle of every endpoint of the room's walls."""
    points = [p for wall in room_walls(plan, room) for p in (wall.start, wall.end)]
    if not points:
        return Rect(0.0, 0.0, 0.0, 0.0)

    min_x = min(p.x for p in points)
    max_x = max(p.x for p in points)
    min_y = min(p.y for p in points)
    max_y = max(p.y for p in points)
    return Rect(min_x, min_y, max_x - min_x, max_y - min_y)


def room_area(plan: FloorPlan, room: Room) -> float:
    """Calculate the floor area of a room.

    A closed outline yields its polygon area; an open polyline falls back to
    the area of its bounding rectangle.
    """
    outline = room_outline(plan, room)
    if outline is not None:
        return float(outline.area)
    return room_bounds(plan, room).area


def with_computed_area(plan: FloorPlan, room: Room) -> Room:
    """Return the room with its ``area`` recomputed from the plan's walls."""
    return replace(room, area=room_area(plan, room))
