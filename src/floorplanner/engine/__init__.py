"""Editing engine for floor plans.

This module provides the plan store, the undoable furniture commands, the
bounded undo/redo history and the editing session built on top of them.
"""

from .commands import AddFurniture, Command, MoveFurniture, RemoveFurniture
from .editor import EditorSession, InvalidOperation
from .history import UndoHistory
from .store import PlanStore

__all__ = [
    "AddFurniture",
    "Command",
    "EditorSession",
    "InvalidOperation",
    "MoveFurniture",
    "PlanStore",
    "RemoveFurniture",
    "UndoHistory",
]
