"""Reversible furniture commands.

Each command captures, by value, everything it needs to run in both
directions, and receives the target store as a parameter. Running a
command twice in the same direction leaves the plan as after a single run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from ..core.model import FurnitureItem
from ..geom.primitives import Point
from .store import PlanStore


class Command(Protocol):
    """Protocol for undoable plan mutations."""

    def execute(self, store: PlanStore) -> None:
        """Apply the forward action to the store."""
        ...

    def undo(self, store: PlanStore) -> None:
        """Apply the reverse action to the store."""
        ...


@dataclass
class AddFurniture:
    """Insert an item.

    An item already stored under the same ID is replaced in place and
    captured on execute, so undo puts it back instead of removing the ID.
    """

    item: FurnitureItem
    replaced: FurnitureItem | None = field(default=None, init=False, compare=False)

    def execute(self, store: PlanStore) -> None:
        existing = store.get().furniture(self.item.id)
        if existing != self.item:
            self.replaced = existing
        store.apply(lambda plan: plan.with_furniture(self.item))

    def undo(self, store: PlanStore) -> None:
        if self.replaced is not None:
            replaced = self.replaced
            store.apply(lambda plan: plan.with_furniture(replaced))
        else:
            store.apply(lambda plan: plan.without_furniture(self.item.id))


@dataclass(frozen=True)
class RemoveFurniture:
    """Remove an item by ID; undo re-inserts the captured item at its old index."""

    item: FurnitureItem
    index: int | None = None

    def execute(self, store: PlanStore) -> None:
        store.apply(lambda plan: plan.without_furniture(self.item.id))

    def undo(self, store: PlanStore) -> None:
        store.apply(lambda plan: plan.with_furniture(self.item, self.index))


@dataclass(frozen=True)
class MoveFurniture:
    """Set an item's position; undo restores the captured old position."""

    item_id: str
    old_position: Point
    new_position: Point

    def execute(self, store: PlanStore) -> None:
        store.apply(lambda plan: plan.with_furniture_position(self.item_id, self.new_position))

    def undo(self, store: PlanStore) -> None:
        store.apply(lambda plan: plan.with_furniture_position(self.item_id, self.old_position))
