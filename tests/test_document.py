import json

import pytest

from floorplanner.core.materials import Color, MaterialLibrary
from floorplanner.core.model import (
    FloorPlan,
    FurnitureItem,
    FurnitureStyle,
    MeasurementUnit,
    Opening,
    Room,
    RoomType,
    Wall,
)
from floorplanner.geom.primitives import Point
from floorplanner.io.document import (
    DocumentError,
    decode_plan,
    dumps,
    encode_plan,
    load_plan,
    loads,
    save_plan,
)


@pytest.fixture
def full_plan():
    wall = Wall(
        Point(0, 0),
        Point(120, 0),
        thickness=8,
        height=100,
        wall_type="load-bearing",
        material_id="paint-1",
        color=Color(0.5, 0.25, 1.0),
        door=Opening(position=0.25, width=32, style="Single"),
        window=Opening(position=0.75, width=48),
    )
    plain = Wall(Point(120, 0), Point(120, 90))
    room = Room(name="Study", room_type=RoomType.OFFICE, wall_ids=(wall.id, plain.id), area=10800, color="#FFFACC")
    item = FurnitureItem(
        furniture_id="desk",
        name="desk",
        position=Point(60.5, 45.25),
        width=100,
        height=50,
        rotation=30,
        category="Tables",
        style=FurnitureStyle.MODERN,
        color=Color(0.1, 0.2, 0.3, 0.5),
        custom_name="My desk",
    )
    return FloorPlan(
        name="House",
        scale=2.5,
        unit=MeasurementUnit.METRIC,
        walls=(wall, plain),
        rooms=(room,),
        furniture_items=(item,),
        grid_size=12,
        show_grid=False,
    )


def test_round_trip(full_plan):
    assert decode_plan(encode_plan(full_plan)) == full_plan
    assert loads(dumps(full_plan)) == full_plan


def test_round_trip_of_empty_plan():
    plan = FloorPlan(material_library=MaterialLibrary())
    assert decode_plan(encode_plan(plan)) == plan


def test_points_are_explicit_objects(full_plan):
    data = encode_plan(full_plan)
    assert data["walls"][0]["startPoint"] == {"x": 0, "y": 0}
    assert data["furnitureItems"][0]["position"] == {"x": 60.5, "y": 45.25}
    assert data["unit"] == "Metric (m/cm)"


def test_unset_optionals_are_omitted(full_plan):
    plain = encode_plan(full_plan)["walls"][1]
    assert set(plain) == {"id", "startPoint", "endPoint", "thickness", "height"}


def test_legacy_document_decodes_with_defaults():
    legacy = {
        "name": "Old plan",
        "scale": 4.0,
        "unit": "Imperial (ft/in)",
        "walls": [
            {
                "id": "w1",
                "startPoint": {"x": 0, "y": 0},
                "endPoint": {"x": 100, "y": 0},
                "thickness": 6,
                "height": 96,
            }
        ],
    }
    plan = decode_plan(legacy)
    assert plan.name == "Old plan"
    assert plan.walls[0].end == Point(100, 0)
    assert plan.rooms == ()
    assert plan.furniture_items == ()
    assert plan.grid_size == 20
    assert plan.show_grid is True
    assert len(plan.material_library.wall_materials) == 8
    assert plan.id
    assert decode_plan(encode_plan(plan)) == plan


@pytest.mark.parametrize(
    "mutate",
    [
        lambda d: d.pop("scale"),
        lambda d: d.pop("walls"),
        lambda d: d.update(scale=0),
        lambda d: d.update(scale="big"),
        lambda d: d.update(unit="Furlongs"),
        lambda d: d.update(walls={}),
        lambda d: d["walls"][0].pop("startPoint"),
        lambda d: d["walls"][0].update(door={"position": 2, "width": 30}),
        lambda d: d["furnitureItems"][0].update(style="Baroque"),
        lambda d: d["rooms"][0].update(area=-5),
        lambda d: d.update(showGrid="yes"),
    ],
)
def test_malformed_documents_raise(full_plan, mutate):
    data = json.loads(dumps(full_plan))
    mutate(data)
    with pytest.raises(DocumentError):
        decode_plan(data)


def test_non_object_document():
    with pytest.raises(DocumentError):
        decode_plan([1, 2, 3])
    with pytest.raises(DocumentError):
        loads("{not json")


def test_save_and_load(tmp_path, full_plan):
    path = tmp_path / "nested" / "plan.json"
    save_plan(full_plan, path)
    assert load_plan(path) == full_plan


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_plan(tmp_path / "missing.json")


@pytest.mark.parametrize(
    "text",
    [
        b'{"name": "\xff\xfe"}',
        "[" * 100000 + "]" * 100000,
    ],
)
def test_undecodable_text_raises_document_error(text):
    with pytest.raises(DocumentError):
        loads(text)


def test_load_file_with_invalid_utf8(tmp_path):
    path = tmp_path / "broken.json"
    path.write_bytes(b'{"name": "\xff"}')
    with pytest.raises(DocumentError):
        load_plan(path)
