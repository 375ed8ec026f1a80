"""Plan store.

The store holds the committed floor plan of an editing session. All
mutations go through :meth:`PlanStore.apply`, which swaps in a new plan
value and notifies subscribers.
"""

from __future__ import annotations

import logging
from typing import Callable, List

from ..core.model import FloorPlan

LOGGER = logging.getLogger(__name__)

Mutation = Callable[[FloorPlan], FloorPlan]
Listener = Callable[[FloorPlan], None]


class PlanStore:
    """Owns the current plan and the listeners interested in its changes."""

    def __init__(self, plan: FloorPlan | None = None) -> None:
        self._plan = plan if plan is not None else FloorPlan()
        self._listeners: List[Listener] = []

    def get(self) -> FloorPlan:
        return self._plan

    def apply(self, mutation: Mutation) -> FloorPlan:
        """Apply a mutation and notify listeners if the plan changed.

        Args:
            mutation: Function returning the new plan from the current one.

        Returns:
            The plan after the mutation.
        """
        updated = mutation(self._plan)
        if updated is not self._plan:
            self._set(updated)
        return self._plan

    def replace(self, plan: FloorPlan) -> None:
        """Swap in a different document."""
        self._set(plan)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called with the new plan after each change.

        Returns:
            A callable that unsubscribes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set(self, plan: FloorPlan) -> None:
        self._plan = plan
        for listener in list(self._listeners):
            listener(plan)
