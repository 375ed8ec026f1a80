"""Planar geometry primitives.

This module defines the coordinate types shared by every entity of a floor
plan together with the small set of pure functions the editor relies on:
point distance, point-to-segment projection and rotation about the origin.
NaN inputs propagate through the arithmetic and are not handled specially.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """Represents a 2D point in real-world units.

    Attributes:
        x: The x-coordinate of the point.
        y: The y-coordinate of the point.
    """

    x: float
    y: float

    def distance_to(self, other: Point) -> float:
        """Euclidean distance to another point."""
        return distance(self, other)

    def offset(self, dx: float, dy: float) -> Point:
        """Return this point translated by (dx, dy)."""
        return Point(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle anchored at its minimum corner.

    Attributes:
        x: Minimum x-coordinate.
        y: Minimum y-coordinate.
        width: Extent along x.
        height: Extent along y.
    """

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def centered(cls, center: Point, width: float, height: float) -> Rect:
        """Build the rectangle of the given size centered on a point."""
        return cls(center.x - width / 2, center.y - height / 2, width, height)

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2, self.y + self.height / 2)

    @property
    def area(self) -> float:
        return self.width * self.height

    def intersects(self, other: Rect) -> bool:
        """Check whether two rectangles overlap.

        Rectangles that only share an edge or a corner do not intersect.
        """
        return (
            self.min_x < other.max_x
            and other.min_x < self.max_x
            and self.min_y < other.max_y
            and other.min_y < self.max_y
        )

    def contains(self, point: Point) -> bool:
        """Check whether a point lies inside the rectangle or on its border."""
        return self.min_x <= point.x <= self.max_x and self.min_y <= point.y <= self.max_y


def distance(a: Point, b: Point) -> float:
    """Calculate Euclidean distance between two points."""
    return math.hypot(b.x - a.x, b.y - a.y)


def project_onto_segment(seg_start: Point, seg_end: Point, point: Point) -> Point:
    """Project a point onto a segment, clamping to the segment's endpoints.

    Args:
        seg_start: First endpoint of the segment.
        seg_end: Second endpoint of the segment.
        point: The point to project.

    Returns:
        The closest point of the segment to ``point``. For a degenerate
        segment this is ``seg_start``.
    """
    dx = seg_end.x - seg_start.x
    dy = seg_end.y - seg_start.y
    length_squared = dx * dx + dy * dy

    if length_squared == 0:
        return seg_start

    t = ((point.x - seg_start.x) * dx + (point.y - seg_start.y) * dy) / length_squared
    t = max(0.0, min(1.0, t))
    return Point(seg_start.x + t * dx, seg_start.y + t * dy)


def point_segment_distance(seg_start: Point, seg_end: Point, point: Point) -> float:
    """Distance from a point to the closest point of a segment."""
    return distance(project_onto_segment(seg_start, seg_end, point), point)


def segment_contains_point(
    seg_start: Point, seg_end: Point, point: Point, tolerance: float
) -> bool:
    """Check if a point lies on a segment within a tolerance.

    Args:
        seg_start: First endpoint of the segment.
        seg_end: Second endpoint of the segment.
        point: The query point.
        tolerance: Maximum accepted distance, inclusive.

    Returns:
        True if the distance from ``point`` to its clamped projection on the
        segment is at most ``tolerance``. A degenerate segment falls back to
        a plain point-distance test.
    """
    return point_segment_distance(seg_start, seg_end, point) <= tolerance


def rotate_around_origin(point: Point, angle: float) -> Point:
    """Rotate a point counter-clockwise around the origin.

    Args:
        point: The point to rotate.
        angle: Rotation angle in radians.

    Returns:
        The rotated point.
    """
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return Point(
        point.x * cos_a - point.y * sin_a,
        point.x * sin_a + point.y * cos_a,
    )
