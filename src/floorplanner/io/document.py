"""Floor plan document format.

This module converts FloorPlan objects to and from the JSON document
format. Coordinates are stored as explicit ``{"x", "y"}`` objects, keys are
camelCase and unset optional fields are omitted. Fields added by later
schema versions decode with defaults when absent.
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Mapping, Type, TypeVar

from .. import config
from ..core.materials import (
    Color,
    FloorDirection,
    FloorMaterial,
    FloorPattern,
    FloorType,
    MaterialLibrary,
    WallFinish,
    WallMaterial,
    WallMaterialType,
    WallPattern,
)
from ..core.model import (
    FloorPlan,
    FurnitureItem,
    FurnitureStyle,
    MeasurementUnit,
    Opening,
    Room,
    RoomType,
    Wall,
    new_id,
)
from ..geom.primitives import Point

LOGGER = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


class DocumentError(ValueError):
    """Raised when a document cannot be decoded into a floor plan."""


# --------------------------------------------------------------------------- #
# Encoding
# --------------------------------------------------------------------------- #


def _encode_point(point: Point) -> Dict[str, float]:
    return {"x": point.x, "y": point.y}


def _encode_color(color: Color) -> Dict[str, float]:
    return {"red": color.red, "green": color.green, "blue": color.blue, "opacity": color.opacity}


def _encode_opening(opening: Opening) -> Dict[str, Any]:
    data: Dict[str, Any] = {"position": opening.position, "width": opening.width}
    if opening.style is not None:
        data["style"] = opening.style
    return data


def _encode_wall(wall: Wall) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "id": wall.id,
        "startPoint": _encode_point(wall.start),
        "endPoint": _encode_point(wall.end),
        "thickness": wall.thickness,
        "height": wall.height,
    }
    if wall.wall_type is not None:
        data["type"] = wall.wall_type
    if wall.material_id is not None:
        data["material"] = wall.material_id
    if wall.color is not None:
        data["color"] = _encode_color(wall.color)
    if wall.door is not None:
        data["door"] = _encode_opening(wall.door)
    if wall.window is not None:
        data["window"] = _encode_opening(wall.window)
    return data


def _encode_room(room: Room) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "id": room.id,
        "name": room.name,
        "type": room.room_type.value,
        "walls": list(room.wall_ids),
        "area": room.area,
        "color": room.color,
    }
    if room.floor_material_id is not None:
        data["floorMaterial"] = room.floor_material_id
    return data


def _encode_furniture(item: FurnitureItem) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "id": item.id,
        "furnitureId": item.furniture_id,
        "name": item.name,
        "position": _encode_point(item.position),
        "rotation": item.rotation,
        "width": item.width,
        "height": item.height,
    }
    if item.category is not None:
        data["category"] = item.category
    if item.style is not None:
        data["style"] = item.style.value
    if item.color is not None:
        data["color"] = _encode_color(item.color)
    if item.custom_name is not None:
        data["customName"] = item.custom_name
    return data


def _encode_wall_material(material: WallMaterial) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "id": material.id,
        "name": material.name,
        "type": material.material_type.value,
        "color": _encode_color(material.color),
        "finish": material.finish.value,
    }
    if material.pattern is not None:
        data["pattern"] = material.pattern.value
    if material.custom_texture is not None:
        data["customTexture"] = material.custom_texture
    return data


def _encode_floor_material(material: FloorMaterial) -> Dict[str, Any]:
    return {
        "id": material.id,
        "name": material.name,
        "type": material.floor_type.value,
        "color": _encode_color(material.color),
        "pattern": material.pattern.value,
        "direction": material.direction.value,
    }


def encode_plan(plan: FloorPlan) -> Dict[str, Any]:
    """Convert a floor plan into a JSON-compatible dictionary.

    Args:
        plan: The plan to encode.

    Returns:
        The document as nested dictionaries and lists.
    """
    return {
        "id": plan.id,
        "name": plan.name,
        "scale": plan.scale,
        "unit": plan.unit.value,
        "walls": [_encode_wall(w) for w in plan.walls],
        "rooms": [_encode_room(r) for r in plan.rooms],
        "furnitureItems": [_encode_furniture(f) for f in plan.furniture_items],
        "materialLibrary": {
            "wallMaterials": [_encode_wall_material(m) for m in plan.material_library.wall_materials],
            "floorMaterials": [_encode_floor_material(m) for m in plan.material_library.floor_materials],
        },
        "gridSize": plan.grid_size,
        "showGrid": plan.show_grid,
    }


# --------------------------------------------------------------------------- #
# Decoding
# --------------------------------------------------------------------------- #


def _number(data: Mapping[str, Any], key: str) -> float:
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"'{key}' must be a number, got {value!r}")
    return float(value)


def _string(data: Mapping[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise ValueError(f"'{key}' must be a string, got {value!r}")
    return value


def _optional_string(data: Mapping[str, Any], key: str) -> str | None:
    return _string(data, key) if data.get(key) is not None else None


def _enum(enum_type: Type[E], value: Any) -> E:
    try:
        return enum_type(value)
    except ValueError:
        raise ValueError(f"Unknown {enum_type.__name__} value: {value!r}") from None


def _decode_point(data: Mapping[str, Any], key: str) -> Point:
    raw = data[key]
    if not isinstance(raw, Mapping):
        raise ValueError(f"'{key}' must be an object with x and y, got {raw!r}")
    return Point(_number(raw, "x"), _number(raw, "y"))


def _decode_color(raw: Any) -> Color:
    if not isinstance(raw, Mapping):
        raise ValueError(f"Color must be an object, got {raw!r}")
    return Color(
        red=_number(raw, "red"),
        green=_number(raw, "green"),
        blue=_number(raw, "blue"),
        opacity=_number(raw, "opacity") if "opacity" in raw else 1.0,
    )


def _decode_opening(raw: Any) -> Opening:
    if not isinstance(raw, Mapping):
        raise ValueError(f"Opening must be an object, got {raw!r}")
    return Opening(
        position=_number(raw, "position"),
        width=_number(raw, "width"),
        style=_optional_string(raw, "style"),
    )


def _decode_wall(data: Mapping[str, Any]) -> Wall:
    return Wall(
        id=_string(data, "id"),
        start=_decode_point(data, "startPoint"),
        end=_decode_point(data, "endPoint"),
        thickness=_number(data, "thickness"),
        height=_number(data, "height"),
        wall_type=_optional_string(data, "type"),
        material_id=_optional_string(data, "material"),
        color=_decode_color(data["color"]) if data.get("color") is not None else None,
        door=_decode_opening(data["door"]) if data.get("door") is not None else None,
        window=_decode_opening(data["window"]) if data.get("window") is not None else None,
    )


def _decode_room(data: Mapping[str, Any]) -> Room:
    wall_ids = data.get("walls", [])
    if not isinstance(wall_ids, list) or not all(isinstance(w, str) for w in wall_ids):
        raise ValueError(f"'walls' must be a list of wall IDs, got {wall_ids!r}")
    return Room(
        id=_string(data, "id"),
        name=_string(data, "name"),
        room_type=_enum(RoomType, data.get("type", RoomType.OTHER.value)),
        wall_ids=tuple(wall_ids),
        area=_number(data, "area") if "area" in data else 0.0,
        color=_string(data, "color") if "color" in data else "#FFFFFF",
        floor_material_id=_optional_string(data, "floorMaterial"),
    )


def _decode_furniture(data: Mapping[str, Any]) -> FurnitureItem:
    return FurnitureItem(
        id=_string(data, "id"),
        furniture_id=_string(data, "furnitureId"),
        name=_string(data, "name"),
        position=_decode_point(data, "position"),
        rotation=_number(data, "rotation") if "rotation" in data else 0.0,
        width=_number(data, "width"),
        height=_number(data, "height"),
        category=_optional_string(data, "category"),
        style=_enum(FurnitureStyle, data["style"]) if data.get("style") is not None else None,
        color=_decode_color(data["color"]) if data.get("color") is not None else None,
        custom_name=_optional_string(data, "customName"),
    )


def _decode_wall_material(data: Mapping[str, Any]) -> WallMaterial:
    return WallMaterial(
        id=_string(data, "id"),
        name=_string(data, "name"),
        material_type=_enum(WallMaterialType, data["type"]),
        color=_decode_color(data["color"]),
        finish=_enum(WallFinish, data.get("finish", WallFinish.MATTE.value)),
        pattern=_enum(WallPattern, data["pattern"]) if data.get("pattern") is not None else None,
        custom_texture=_optional_string(data, "customTexture"),
    )


def _decode_floor_material(data: Mapping[str, Any]) -> FloorMaterial:
    return FloorMaterial(
        id=_string(data, "id"),
        name=_string(data, "name"),
        floor_type=_enum(FloorType, data["type"]),
        color=_decode_color(data["color"]),
        pattern=_enum(FloorPattern, data.get("pattern", FloorPattern.SOLID.value)),
        direction=_enum(FloorDirection, data.get("direction", FloorDirection.HORIZONTAL.value)),
    )


def _decode_list(data: Mapping[str, Any], key: str, decoder, required: bool = False) -> tuple:
    if key not in data:
        if required:
            raise KeyError(key)
        return ()
    entries = data[key]
    if not isinstance(entries, list):
        raise ValueError(f"'{key}' must be a list, got {type(entries).__name__}")

    decoded = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, Mapping):
            raise ValueError(f"'{key}[{index}]' must be an object")
        try:
            decoded.append(decoder(entry))
        except (KeyError, TypeError, ValueError) as e:
            entity_id = entry.get("id", index)
            raise ValueError(f"Invalid {key} entry {entity_id}: {e}") from e
    return tuple(decoded)


def _decode_library(data: Mapping[str, Any]) -> MaterialLibrary:
    raw = data.get("materialLibrary")
    if raw is None:
        return MaterialLibrary.default()
    if not isinstance(raw, Mapping):
        raise ValueError("'materialLibrary' must be an object")
    return MaterialLibrary(
        wall_materials=_decode_list(raw, "wallMaterials", _decode_wall_material),
        floor_materials=_decode_list(raw, "floorMaterials", _decode_floor_material),
    )


def decode_plan(data: Any) -> FloorPlan:
    """Build a floor plan from a decoded JSON document.

    Args:
        data: The document as returned by ``json.load``.

    Returns:
        The decoded FloorPlan.

    Raises:
        DocumentError: If the document is malformed or incompatible.
    """
    if not isinstance(data, Mapping):
        raise DocumentError(f"Document must be a JSON object, got {type(data).__name__}")

    try:
        show_grid = data.get("showGrid", True)
        if not isinstance(show_grid, bool):
            raise ValueError(f"'showGrid' must be a boolean, got {show_grid!r}")

        return FloorPlan(
            id=_string(data, "id") if "id" in data else new_id(),
            name=_string(data, "name"),
            scale=_number(data, "scale"),
            unit=_enum(MeasurementUnit, data["unit"]),
            walls=_decode_list(data, "walls", _decode_wall, required=True),
            rooms=_decode_list(data, "rooms", _decode_room),
            furniture_items=_decode_list(data, "furnitureItems", _decode_furniture),
            material_library=_decode_library(data),
            grid_size=_number(data, "gridSize") if "gridSize" in data else config.DEFAULT_GRID_SIZE,
            show_grid=show_grid,
        )
    except KeyError as e:
        raise DocumentError(f"Missing required field: {e}") from e
    except (TypeError, ValueError) as e:
        raise DocumentError(f"Invalid document: {e}") from e


def dumps(plan: FloorPlan, indent: int | None = 2) -> str:
    """Serialize a plan to JSON text."""
    return json.dumps(encode_plan(plan), indent=indent)


def loads(text: str | bytes) -> FloorPlan:
    """Parse JSON text into a plan.

    Raises:
        DocumentError: If the text is not valid JSON or not a valid document.
    """
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as e:
        raise DocumentError(f"Invalid JSON: {e}") from e
    return decode_plan(data)


def save_plan(plan: FloorPlan, output_path: str | Path) -> None:
    """Save a plan to a JSON file, creating parent directories as needed."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(dumps(plan))
    LOGGER.debug("Saved plan %s to %s", plan.id, path)


def load_plan(path: str | Path) -> FloorPlan:
    """Load a plan from a JSON file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        DocumentError: If the file content is not a valid document.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    plan = loads(file_path.read_bytes())
    LOGGER.debug("Loaded plan %s from %s", plan.id, file_path)
    return plan
