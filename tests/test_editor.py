import math

import pytest

from floorplanner.core.catalog import FurnitureType, catalog_entry_for
from floorplanner.core.model import FloorPlan, FurnitureItem, Opening, Room, RoomType, Wall
from floorplanner.engine.editor import EditorSession, InvalidOperation
from floorplanner.geom.hit_test import WallHandle, WallHit
from floorplanner.geom.primitives import Point
from floorplanner.io.document import DocumentError, encode_plan


def make_item(x, y, width=40, height=20):
    return FurnitureItem("cat", "Table", Point(x, y), width, height)


@pytest.fixture
def session():
    return EditorSession()


def test_add_and_remove_furniture_with_undo(session):
    item = make_item(100, 100)
    session.add_furniture(item)
    session.remove_furniture(item.id)
    assert session.plan.furniture_items == ()
    session.history.undo()
    assert session.plan.furniture_items == (item,)


def test_add_without_undo_is_not_recorded(session):
    session.add_furniture(make_item(0, 0), use_undo=False)
    assert not session.history.can_undo


def test_remove_unknown_item_is_ignored(session):
    session.remove_furniture("missing")
    assert not session.history.can_undo


def test_move_and_rotate(session):
    item = make_item(0, 0)
    session.add_furniture(item)
    session.move_furniture(item.id, Point(20, 20), use_undo=True)
    session.rotate_furniture(item.id, 45)
    moved = session.plan.furniture(item.id)
    assert moved.position == Point(20, 20)
    assert moved.rotation == 45
    session.history.undo()
    assert session.plan.furniture(item.id).position == Point(0, 0)

    with pytest.raises(InvalidOperation):
        session.move_furniture("missing", Point(0, 0))


def test_drop_is_snapped_and_added(session):
    payload = catalog_entry_for(FurnitureType.CHAIR).to_drag_data()
    item = session.place_from_drop(payload.to_dict(), Point(103, 97))
    assert item is not None
    assert item.position == Point(100, 100)
    assert (item.width, item.height) == (50, 50)
    assert item.category == "Seating"
    assert session.plan.furniture_items == (item,)
    assert session.history.can_undo


def test_colliding_drop_is_rejected(session):
    payload = catalog_entry_for(FurnitureType.TABLE).to_drag_data()
    assert session.place_from_drop(payload, Point(100, 100)) is not None
    assert session.place_from_drop(payload, Point(120, 120)) is None
    assert len(session.plan.furniture_items) == 1


def test_drag_is_staged_until_committed(session):
    item = make_item(100, 100)
    session.add_furniture(item)
    session.begin_drag(item.id)
    assert session.drag_to(Point(205, 195)) == Point(200, 200)
    assert session.plan.furniture(item.id).position == Point(100, 100)

    assert session.end_drag() is True
    assert session.plan.furniture(item.id).position == Point(200, 200)
    session.history.undo()
    assert session.plan.furniture(item.id).position == Point(100, 100)


def test_drag_undo_returns_to_position_at_commit(session):
    item = make_item(100, 100)
    session.add_furniture(item)
    session.begin_drag(item.id)
    session.move_furniture(item.id, Point(140, 140))
    session.drag_to(Point(200, 200))

    assert session.end_drag() is True
    session.history.undo()
    assert session.plan.furniture(item.id).position == Point(140, 140)


def test_start_wall_at_infinity_is_not_snapped(session):
    assert session.start_wall(Point(math.inf, 31)) == Point(math.inf, 40)


def test_cancelled_drag_leaves_plan_untouched(session):
    item = make_item(100, 100)
    session.add_furniture(item)
    plan = session.plan
    session.begin_drag(item.id)
    session.drag_to(Point(300, 300))
    session.cancel_drag()
    assert session.end_drag() is False
    assert session.plan is plan


def test_colliding_drag_is_rejected(session):
    a, b = make_item(100, 100), make_item(300, 100)
    session.add_furniture(a)
    session.add_furniture(b)
    session.begin_drag(b.id)
    session.drag_to(Point(120, 100))
    assert session.end_drag() is False
    assert session.plan.furniture(b.id).position == Point(300, 100)


def test_drag_to_without_drag_fails(session):
    with pytest.raises(InvalidOperation):
        session.drag_to(Point(0, 0))


def test_draw_wall(session):
    session.start_wall(Point(3, 2))
    wall = session.finish_wall(Point(98, 1))
    assert wall.start == Point(0, 0)
    assert wall.end == Point(100, 0)
    assert session.plan.walls == (wall,)


def test_short_wall_is_discarded(session):
    session.start_wall(Point(0, 0))
    assert session.finish_wall(Point(9, 0)) is None
    assert session.finish_wall(Point(100, 0)) is None
    assert session.plan.walls == ()


def test_select_at_and_delete_selected(session):
    wall = Wall(Point(0, 0), Point(200, 0))
    session.add_wall(wall)
    hit = session.select_at(Point(0, 3))
    assert isinstance(hit, WallHit)
    assert hit.handle is WallHandle.START
    assert session.selected_id == wall.id

    session.delete_selected()
    assert session.plan.walls == ()
    assert session.selected_id is None

    assert session.select_at(Point(500, 500)) is None


def test_zoom_is_clamped(session):
    for _ in range(20):
        session.zoom_in()
    assert session.zoom == 3.0
    for _ in range(20):
        session.zoom_out()
    assert session.zoom == 0.25
    assert session.fit_to_window() == 1.0


def test_wall_edits(session):
    wall = Wall(Point(0, 0), Point(100, 0))
    session.add_wall(wall)
    moved = session.move_wall(wall.id, 0, 50)
    assert session.plan.wall(wall.id).start == Point(0, 50)
    assert moved.end == Point(100, 50)

    session.place_door(wall.id, Opening(position=0.5, width=30, style="Single"))
    assert session.plan.wall(wall.id).door.width == 30
    session.place_window(wall.id, Opening(position=0.25, width=24))
    window = session.plan.wall(wall.id).window
    assert window.location_on(session.plan.wall(wall.id)) == Point(25, 50)

    material = session.plan.material_library.wall_materials[0]
    session.set_wall_material(wall.id, material.id)
    assert session.plan.wall(wall.id).material_id == material.id
    with pytest.raises(InvalidOperation):
        session.set_wall_material(wall.id, "missing")
    with pytest.raises(InvalidOperation):
        session.remove_wall("missing")


def test_rooms(session):
    corners = [Point(0, 0), Point(100, 0), Point(100, 50), Point(0, 50)]
    walls = [Wall(corners[i], corners[(i + 1) % 4]) for i in range(4)]
    for wall in walls:
        session.add_wall(wall)

    room = session.add_room(Room(name="Kitchen", wall_ids=tuple(w.id for w in walls)))
    assert room.area == pytest.approx(5000)
    session.set_room_type(room.id, RoomType.KITCHEN)
    assert session.plan.room(room.id).room_type is RoomType.KITCHEN

    session.move_wall(walls[2].id, 0, 50)
    session.remove_wall(walls[1].id)
    session.recompute_room_areas()
    assert session.plan.room(room.id).area == pytest.approx(100 * 100)

    session.remove_room(room.id)
    assert session.plan.rooms == ()


def test_open_document_replaces_plan_and_clears_history(session):
    session.add_furniture(make_item(0, 0))
    document = encode_plan(FloorPlan(name="Loaded", grid_size=10))
    plan = session.open_document(document)
    assert session.plan is plan
    assert session.plan.name == "Loaded"
    assert session.grid.grid_size == 10
    assert not session.history.can_undo


def test_failed_open_leaves_session_unchanged(session):
    item = make_item(0, 0)
    session.add_furniture(item)
    plan = session.plan
    with pytest.raises(DocumentError):
        session.open_document({"name": "Broken"})
    assert session.plan is plan
    assert session.history.can_undo


def test_new_document(session):
    session.add_wall(Wall(Point(0, 0), Point(100, 0)))
    session.new_document()
    assert session.plan.walls == ()


def test_to_document_carries_grid_settings(session):
    document = session.to_document()
    assert document["gridSize"] == 20
    assert document["showGrid"] is True
