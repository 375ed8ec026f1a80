"""Undo/redo history.

Executed commands go on the undo stack and any new command discards the
redo branch. The undo stack is bounded: when it grows past ``max_size``
the oldest command is evicted, so the most recent ``max_size`` commands
can still be undone in order.
"""

from __future__ import annotations

import logging
from typing import List, Tuple

from .. import config
from .commands import Command
from .store import PlanStore

LOGGER = logging.getLogger(__name__)


class UndoHistory:
    """Undo and redo stacks of commands applied to a store."""

    def __init__(self, store: PlanStore, max_size: int = config.MAX_HISTORY) -> None:
        if max_size < 1:
            raise ValueError(f"History size must be at least 1, got {max_size}")
        self.store = store
        self.max_size = max_size
        self._done: List[Command] = []
        self._undone: List[Command] = []

    @property
    def can_undo(self) -> bool:
        return bool(self._done)

    @property
    def can_redo(self) -> bool:
        return bool(self._undone)

    @property
    def undo_stack(self) -> Tuple[Command, ...]:
        """Commands that can be undone, oldest first."""
        return tuple(self._done)

    @property
    def redo_stack(self) -> Tuple[Command, ...]:
        """Commands that can be redone, next-to-redo last."""
        return tuple(self._undone)

    def execute(self, command: Command) -> None:
        """Run a command and record it."""
        command.execute(self.store)
        self._done.append(command)
        self._undone.clear()

        if len(self._done) > self.max_size:
            evicted = self._done.pop(0)
            LOGGER.debug("History full, evicted oldest command %r", evicted)

    def undo(self) -> bool:
        """Reverse the most recent command.

        Returns:
            False if there was nothing to undo.
        """
        if not self._done:
            return False
        command = self._done.pop()
        command.undo(self.store)
        self._undone.append(command)
        return True

    def redo(self) -> bool:
        """Re-run the most recently undone command.

        Returns:
            False if there was nothing to redo.
        """
        if not self._undone:
            return False
        command = self._undone.pop()
        command.execute(self.store)
        self._done.append(command)
        return True

    def clear(self) -> None:
        self._done.clear()
        self._undone.clear()
