import math

import pytest

from floorplanner.core.model import (
    FloorPlan,
    FurnitureItem,
    MeasurementUnit,
    Opening,
    Room,
    RoomType,
    Wall,
)
from floorplanner.geom.primitives import Point


def make_item(x, y, width=40, height=20, **kwargs):
    return FurnitureItem(furniture_id="cat", name="Table", position=Point(x, y), width=width, height=height, **kwargs)


def test_wall_derived_properties():
    wall = Wall(Point(0, 0), Point(30, 40))
    assert wall.length == 50
    assert wall.center == Point(15, 20)
    assert wall.angle == pytest.approx(math.atan2(40, 30))
    assert wall.thickness == 6.0
    assert wall.height == 96.0


def test_wall_hit_checks():
    wall = Wall(Point(0, 0), Point(100, 0), thickness=6)
    assert wall.is_on_wall(Point(50, 3), hit_radius=10)
    assert not wall.is_on_wall(Point(50, 20), hit_radius=10)
    assert wall.is_near_start(Point(5, 5))
    assert wall.is_near_end(Point(95, 0))
    assert not wall.is_near_end(Point(50, 0))


def test_wall_move_by_keeps_identity():
    wall = Wall(Point(0, 0), Point(10, 0))
    moved = wall.move_by(5, -5)
    assert moved.id == wall.id
    assert (moved.start, moved.end) == (Point(5, -5), Point(15, -5))
    assert wall.start == Point(0, 0)


def test_opening_position_must_be_a_fraction():
    with pytest.raises(ValueError):
        Opening(position=1.5)
    with pytest.raises(ValueError):
        Opening(position=-0.1)
    door = Opening(position=0.25, width=30)
    assert door.location_on(Wall(Point(0, 0), Point(100, 0))) == Point(25, 0)


def test_room_area_must_be_non_negative():
    with pytest.raises(ValueError):
        Room(name="Bad", area=-1)
    assert RoomType.LIVING_ROOM.display_name == "Living Room"


def test_furniture_bounds_and_corners():
    item = make_item(100, 100)
    bounds = item.bounds
    assert (bounds.x, bounds.y, bounds.width, bounds.height) == (80, 90, 40, 20)
    assert item.corners[0] == Point(80, 90)
    assert item.corners[2] == Point(120, 110)


def test_furniture_rotation_is_in_degrees():
    item = make_item(0, 0, width=40, height=20, rotation=90)
    xs = sorted(round(c.x, 9) for c in item.corners)
    ys = sorted(round(c.y, 9) for c in item.corners)
    assert xs == [-10, -10, 10, 10]
    assert ys == [-20, -20, 20, 20]
    assert item.footprint.area == pytest.approx(800)
    # Bounds ignore rotation.
    assert item.bounds.width == 40


def test_plan_scale_must_be_positive():
    with pytest.raises(ValueError):
        FloorPlan(scale=0)


def test_plan_helpers_return_new_values():
    plan = FloorPlan()
    wall = Wall(Point(0, 0), Point(10, 0))
    updated = plan.with_wall(wall)
    assert plan.walls == ()
    assert updated.wall(wall.id) == wall


def test_removing_wall_detaches_it_from_rooms():
    wall = Wall(Point(0, 0), Point(10, 0))
    room = Room(name="Hall", wall_ids=(wall.id, "other"))
    plan = FloorPlan().with_wall(wall).with_room(room).without_wall(wall.id)
    assert plan.walls == ()
    assert plan.room(room.id).wall_ids == ("other",)


def test_with_furniture_insert_and_replace():
    a, b, c = make_item(0, 0), make_item(100, 0), make_item(200, 0)
    plan = FloorPlan().with_furniture(a).with_furniture(c).with_furniture(b, index=1)
    assert [f.id for f in plan.furniture_items] == [a.id, b.id, c.id]
    moved = plan.with_furniture(a.moved_to(Point(5, 5)))
    assert len(moved.furniture_items) == 3
    assert moved.furniture_items[0].position == Point(5, 5)


def test_furniture_position_for_unknown_item_is_noop():
    plan = FloorPlan()
    assert plan.with_furniture_position("missing", Point(1, 1)) is plan


def test_unit_conversion():
    plan = FloorPlan(scale=4.0)
    assert plan.to_screen(12) == 48
    assert plan.to_real_world(48) == 12


def test_format_measurement():
    imperial = FloorPlan(unit=MeasurementUnit.IMPERIAL)
    assert imperial.format_measurement(66) == "5' 6.0\""
    assert imperial.format_measurement(6) == "6.0\""
    metric = FloorPlan(unit=MeasurementUnit.METRIC)
    assert metric.format_measurement(60) == "1.52 m"
    assert metric.format_measurement(6) == "15.2 cm"
    assert MeasurementUnit.METRIC.small_display_unit == "cm"
