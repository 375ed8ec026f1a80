"""Editing session for a floor plan.

An EditorSession holds the committed plan in a PlanStore together with the
transient editing state: undo history, grid settings, zoom, selection, the
wall being drawn and the furniture drag in progress. Drag and wall-drawing
state stays outside the committed plan until it is finished, so an aborted
gesture leaves the plan untouched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Mapping

from .. import config
from ..core.catalog import FurnitureDragData
from ..core.model import FloorPlan, FurnitureItem, Opening, Room, RoomType, Wall
from ..core.topology import with_computed_area
from ..geom.collision import check_collision
from ..geom.grid import GridSettings
from ..geom.hit_test import WallHit, find_entity_at
from ..geom.primitives import Point
from ..io.document import decode_plan, encode_plan
from .commands import AddFurniture, MoveFurniture, RemoveFurniture
from .history import UndoHistory
from .store import PlanStore

LOGGER = logging.getLogger(__name__)


class InvalidOperation(Exception):
    """Raised when an edit references an entity that does not exist."""

    pass


@dataclass(frozen=True)
class DragState:
    """A furniture drag in progress.

    Attributes:
        item_id: ID of the dragged item.
        preview: Snapped position the item would be dropped at.
    """

    item_id: str
    preview: Point


class EditorSession:
    """A single-user editing session over one floor plan."""

    def __init__(
        self,
        plan: FloorPlan | None = None,
        grid: GridSettings | None = None,
        max_history: int = config.MAX_HISTORY,
    ) -> None:
        self.store = PlanStore(plan)
        self.history = UndoHistory(self.store, max_size=max_history)
        plan = self.store.get()
        self.grid = grid or GridSettings(grid_size=plan.grid_size, show_grid=plan.show_grid)
        self.zoom = 1.0
        self.selected_id: str | None = None
        self.wall_start: Point | None = None
        self.drag: DragState | None = None

    @property
    def plan(self) -> FloorPlan:
        return self.store.get()

    # ------------------------------------------------------------------ #
    # Furniture
    # ------------------------------------------------------------------ #

    def _require_furniture(self, item_id: str) -> FurnitureItem:
        item = self.plan.furniture(item_id)
        if item is None:
            raise InvalidOperation(f"Furniture item '{item_id}' does not exist")
        return item

    def add_furniture(self, item: FurnitureItem, use_undo: bool = True) -> None:
        if use_undo:
            self.history.execute(AddFurniture(item))
        else:
            self.store.apply(lambda plan: plan.with_furniture(item))

    def remove_furniture(self, item_id: str, use_undo: bool = True) -> None:
        """Remove an item; unknown IDs are ignored."""
        plan = self.plan
        item = plan.furniture(item_id)
        if item is None:
            return

        if use_undo:
            self.history.execute(RemoveFurniture(item, plan.furniture_index(item_id)))
        else:
            self.store.apply(lambda p: p.without_furniture(item_id))
        if self.selected_id == item_id:
            self.selected_id = None

    def move_furniture(self, item_id: str, position: Point, use_undo: bool = False) -> None:
        item = self._require_furniture(item_id)
        if use_undo:
            self.history.execute(MoveFurniture(item_id, item.position, position))
        else:
            self.store.apply(lambda plan: plan.with_furniture_position(item_id, position))

    def rotate_furniture(self, item_id: str, rotation: float) -> None:
        """Set an item's rotation, in degrees."""
        self._require_furniture(item_id)
        self.store.apply(lambda plan: plan.with_furniture_rotation(item_id, rotation))

    def place_from_drop(
        self, payload: FurnitureDragData | Mapping[str, Any], location: Point
    ) -> FurnitureItem | None:
        """Create a furniture item from a palette drop.

        The drop location is snapped to the grid. A placement that would
        overlap an existing item is rejected.

        Returns:
            The placed item, or None if the placement was rejected.
        """
        if not isinstance(payload, FurnitureDragData):
            payload = FurnitureDragData.from_dict(payload)

        item = payload.to_item(self.grid.snap_point(location))
        if check_collision(item, self.plan.furniture_items):
            LOGGER.debug("Rejected drop of %s at %s: collision", payload.name, item.position)
            return None

        self.add_furniture(item)
        return item

    # ------------------------------------------------------------------ #
    # Dragging
    # ------------------------------------------------------------------ #

    def begin_drag(self, item_id: str) -> None:
        item = self._require_furniture(item_id)
        self.drag = DragState(item_id, item.position)
        self.selected_id = item_id

    def drag_to(self, location: Point) -> Point:
        """Update the drag preview; the committed plan is not modified.

        Returns:
            The snapped preview position.
        """
        if self.drag is None:
            raise InvalidOperation("No drag in progress")
        preview = self.grid.snap_point(location)
        self.drag = replace(self.drag, preview=preview)
        return preview

    def end_drag(self) -> bool:
        """Commit the drag as an undoable move.

        Returns:
            True if the item was moved; False if the drag did not change the
            position, the item no longer exists, or the new position collides.
        """
        drag, self.drag = self.drag, None
        if drag is None:
            return False

        item = self.plan.furniture(drag.item_id)
        if item is None or drag.preview == item.position:
            return False

        if check_collision(item.moved_to(drag.preview), self.plan.furniture_items, excluding_id=item.id):
            LOGGER.debug("Rejected move of %s to %s: collision", item.id, drag.preview)
            return False

        self.history.execute(MoveFurniture(item.id, item.position, drag.preview))
        return True

    def cancel_drag(self) -> None:
        self.drag = None

    # ------------------------------------------------------------------ #
    # Selection and zoom
    # ------------------------------------------------------------------ #

    def select(self, entity_id: str | None) -> None:
        self.selected_id = entity_id

    def select_at(self, point: Point) -> WallHit | FurnitureItem | None:
        """Select the entity under a point, clearing the selection on a miss."""
        hit = find_entity_at(point, self.plan, self.zoom)
        if hit is None:
            self.selected_id = None
        elif isinstance(hit, WallHit):
            self.selected_id = hit.wall.id
        else:
            self.selected_id = hit.id
        return hit

    def delete_selected(self) -> None:
        """Delete the selected furniture item or wall."""
        selected = self.selected_id
        if selected is None:
            return
        if self.plan.furniture(selected) is not None:
            self.remove_furniture(selected)
        elif self.plan.wall(selected) is not None:
            self.remove_wall(selected)
        self.selected_id = None

    def zoom_in(self) -> float:
        self.zoom = min(self.zoom + config.ZOOM_STEP, config.MAX_ZOOM)
        return self.zoom

    def zoom_out(self) -> float:
        self.zoom = max(self.zoom - config.ZOOM_STEP, config.MIN_ZOOM)
        return self.zoom

    def fit_to_window(self) -> float:
        self.zoom = 1.0
        return self.zoom

    # ------------------------------------------------------------------ #
    # Walls
    # ------------------------------------------------------------------ #

    def _require_wall(self, wall_id: str) -> Wall:
        wall = self.plan.wall(wall_id)
        if wall is None:
            raise InvalidOperation(f"Wall '{wall_id}' does not exist")
        return wall

    def start_wall(self, point: Point) -> Point:
        self.wall_start = self.grid.snap_point(point)
        return self.wall_start

    def finish_wall(self, point: Point) -> Wall | None:
        """Finish the wall being drawn.

        Returns:
            The new wall, or None when no wall was started or the wall would
            be shorter than the minimum length.
        """
        start, self.wall_start = self.wall_start, None
        if start is None:
            return None

        end = self.grid.snap_point(point)
        if start.distance_to(end) <= config.MIN_WALL_LENGTH:
            LOGGER.debug("Discarded wall from %s to %s: too short", start, end)
            return None

        wall = Wall(start=start, end=end)
        self.add_wall(wall)
        return wall

    def cancel_wall(self) -> None:
        self.wall_start = None

    def add_wall(self, wall: Wall) -> None:
        self.store.apply(lambda plan: plan.with_wall(wall))

    def remove_wall(self, wall_id: str) -> None:
        self._require_wall(wall_id)
        self.store.apply(lambda plan: plan.without_wall(wall_id))
        if self.selected_id == wall_id:
            self.selected_id = None

    def update_wall(self, wall: Wall) -> None:
        self._require_wall(wall.id)
        self.store.apply(lambda plan: plan.with_updated_wall(wall))

    def move_wall(self, wall_id: str, dx: float, dy: float) -> Wall:
        wall = self._require_wall(wall_id).move_by(dx, dy)
        self.update_wall(wall)
        return wall

    def set_wall_material(self, wall_id: str, material_id: str | None) -> None:
        if material_id is not None and self.plan.material_library.find(material_id) is None:
            raise InvalidOperation(f"Material '{material_id}' does not exist")
        self.update_wall(replace(self._require_wall(wall_id), material_id=material_id))

    def place_door(self, wall_id: str, door: Opening | None) -> None:
        self.update_wall(replace(self._require_wall(wall_id), door=door))

    def place_window(self, wall_id: str, window: Opening | None) -> None:
        self.update_wall(replace(self._require_wall(wall_id), window=window))

    # ------------------------------------------------------------------ #
    # Rooms
    # ------------------------------------------------------------------ #

    def add_room(self, room: Room) -> Room:
        """Add a room with its area computed from its walls."""
        room = with_computed_area(self.plan, room)
        self.store.apply(lambda plan: plan.with_room(room))
        self.selected_id = room.id
        return room

    def remove_room(self, room_id: str) -> None:
        self.store.apply(lambda plan: plan.without_room(room_id))
        if self.selected_id == room_id:
            self.selected_id = None

    def set_room_type(self, room_id: str, room_type: RoomType) -> None:
        room = self.plan.room(room_id)
        if room is None:
            raise InvalidOperation(f"Room '{room_id}' does not exist")
        updated = replace(room, room_type=room_type)
        self.store.apply(lambda plan: plan.with_updated_room(updated))

    def recompute_room_areas(self) -> None:
        def mutation(plan: FloorPlan) -> FloorPlan:
            for room in plan.rooms:
                plan = plan.with_updated_room(with_computed_area(plan, room))
            return plan

        self.store.apply(mutation)

    # ------------------------------------------------------------------ #
    # Documents
    # ------------------------------------------------------------------ #

    def _reset(self, plan: FloorPlan) -> None:
        self.store.replace(plan)
        self.history.clear()
        self.grid = replace(self.grid, grid_size=plan.grid_size, show_grid=plan.show_grid)
        self.selected_id = None
        self.wall_start = None
        self.drag = None

    def new_document(self) -> None:
        self._reset(FloorPlan())

    def open_document(self, data: Any) -> FloorPlan:
        """Replace the current plan with a decoded document.

        The document is fully decoded before anything changes, so a decode
        failure leaves the session as it was.

        Raises:
            DocumentError: If the document is malformed.
        """
        plan = decode_plan(data)
        self._reset(plan)
        LOGGER.info("Opened plan '%s' (%d walls, %d items)", plan.name, len(plan.walls), len(plan.furniture_items))
        return plan

    def to_document(self) -> dict[str, Any]:
        plan = replace(self.plan, grid_size=self.grid.grid_size, show_grid=self.grid.show_grid)
        return encode_plan(plan)
