"""Furniture collision detection.

Collisions use each item's axis-aligned bounds and ignore rotation. Item
counts are small, so every check is a linear scan.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List, Tuple

if TYPE_CHECKING:
    from ..core.model import FurnitureItem


def intersects(a: FurnitureItem, b: FurnitureItem) -> bool:
    """Check whether the bounds of two items overlap."""
    return a.bounds.intersects(b.bounds)


def check_collision(
    candidate: FurnitureItem,
    existing: Iterable[FurnitureItem],
    excluding_id: str | None = None,
) -> bool:
    """Check if a candidate placement overlaps any existing item.

    Args:
        candidate: The item being placed or moved.
        existing: Items already on the plan.
        excluding_id: Additional item ID to ignore, e.g. the item being dragged.

    Returns:
        True if the candidate overlaps an item other than itself and the
        excluded one.
    """
    for item in existing:
        if item.id == candidate.id or item.id == excluding_id:
            continue
        if intersects(candidate, item):
            return True
    return False


def colliding_pairs(items: Iterable[FurnitureItem]) -> List[Tuple[FurnitureItem, FurnitureItem]]:
    """List every pair of overlapping items, in insertion order."""
    items = list(items)
    pairs = []
    for i, first in enumerate(items):
        for second in items[i + 1 :]:
            if intersects(first, second):
                pairs.append((first, second))
    return pairs
