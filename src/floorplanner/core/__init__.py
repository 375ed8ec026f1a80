"""Core data models for floor plan editing."""

from .catalog import CATALOG, CatalogEntry, FurnitureDragData, FurnitureType
from .materials import Color, FloorMaterial, MaterialLibrary, WallMaterial
from .model import FloorPlan, FurnitureItem, MeasurementUnit, Opening, Room, RoomType, Wall
from .topology import build_wall_graph, is_closed_outline, room_area, room_bounds

__all__ = [
    "CATALOG",
    "CatalogEntry",
    "Color",
    "FloorMaterial",
    "FloorPlan",
    "FurnitureDragData",
    "FurnitureItem",
    "FurnitureType",
    "MaterialLibrary",
    "MeasurementUnit",
    "Opening",
    "Room",
    "RoomType",
    "Wall",
    "WallMaterial",
    "build_wall_graph",
    "is_closed_outline",
    "room_area",
    "room_bounds",
]
