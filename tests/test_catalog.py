import pytest

from floorplanner.core.catalog import (
    CATALOG,
    FurnitureCategory,
    FurnitureDragData,
    FurnitureType,
    catalog_entry,
    catalog_entry_for,
)
from floorplanner.geom.primitives import Point


def test_catalog_covers_every_type():
    assert {e.furniture_type for e in CATALOG} == set(FurnitureType)
    assert FurnitureType.BED.default_size == (80, 120)
    assert FurnitureType.DESK.category is FurnitureCategory.TABLES


def test_catalog_ids_are_stable():
    entry = catalog_entry_for(FurnitureType.SOFA)
    assert catalog_entry(entry.id) is entry
    assert catalog_entry("unknown") is None


def test_drag_payload_round_trip():
    payload = catalog_entry_for(FurnitureType.CABINET).to_drag_data()
    data = payload.to_dict()
    assert set(data) == {"furnitureId", "name", "width", "height", "category"}
    assert FurnitureDragData.from_dict(data) == payload


def test_drag_payload_missing_field():
    data = catalog_entry_for(FurnitureType.CHAIR).to_drag_data().to_dict()
    del data["width"]
    with pytest.raises(ValueError):
        FurnitureDragData.from_dict(data)


def test_payload_creates_new_item():
    payload = catalog_entry_for(FurnitureType.TABLE).to_drag_data()
    first = payload.to_item(Point(10, 10))
    second = payload.to_item(Point(10, 10))
    assert first.id != second.id
    assert first.furniture_id == payload.furniture_id
    assert (first.width, first.height) == (100, 60)
