"""Wall and floor finishes.

Material presets are static catalogs shared by every plan; a plan only
stores the library it was saved with.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Sequence, TypeVar

from .. import config


def _new_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class Color:
    """sRGB color with components in [0, 1].

    Attributes:
        red: Red component.
        green: Green component.
        blue: Blue component.
        opacity: Alpha component.
    """

    red: float
    green: float
    blue: float
    opacity: float = 1.0

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "opacity"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"Color component '{name}' must be in [0, 1], got {value}")

    @classmethod
    def from_hex(cls, value: str) -> Color:
        """Parse ``#RRGGBB`` or ``#RRGGBBAA``."""
        digits = value.lstrip("#")
        if len(digits) not in (6, 8):
            raise ValueError(f"Invalid hex color: {value}")
        try:
            channels = [int(digits[i : i + 2], 16) / 255.0 for i in range(0, len(digits), 2)]
        except ValueError as e:
            raise ValueError(f"Invalid hex color: {value}") from e
        return cls(*channels)

    def to_hex(self) -> str:
        channels = [self.red, self.green, self.blue]
        if self.opacity < 1.0:
            channels.append(self.opacity)
        return "#" + "".join(f"{round(c * 255):02X}" for c in channels)


WHITE = Color(1.0, 1.0, 1.0)
GRAY = Color(0.5, 0.5, 0.5)


class WallMaterialType(str, Enum):
    PAINT = "Paint"
    WALLPAPER = "Wallpaper"
    TILE = "Tile"
    WOOD_PANELING = "Wood Paneling"
    BRICK = "Brick"
    STONE = "Stone"
    FABRIC = "Fabric"
    METAL = "Metal"


class WallFinish(str, Enum):
    MATTE = "Matte"
    EGGSHELL = "Eggshell"
    SATIN = "Satin"
    SEMI_GLOSS = "Semi-Gloss"
    GLOSS = "Gloss"
    METALLIC = "Metallic"


class WallPattern(str, Enum):
    SOLID = "Solid"
    STRIPES = "Stripes"
    DOTS = "Dots"
    GEOMETRIC = "Geometric"
    FLORAL = "Floral"
    TEXTURED = "Textured"


class FloorType(str, Enum):
    HARDWOOD = "Hardwood"
    LAMINATE = "Laminate"
    TILE = "Tile"
    CARPET = "Carpet"
    VINYL = "Vinyl"
    CONCRETE = "Concrete"
    STONE = "Stone"
    BAMBOO = "Bamboo"


class FloorPattern(str, Enum):
    SOLID = "Solid"
    WOOD = "Wood Grain"
    TILES = "Tiles"
    HERRINGBONE = "Herringbone"
    CHEVRON = "Chevron"
    BASKET_WEAVE = "Basket Weave"


class FloorDirection(str, Enum):
    HORIZONTAL = "Horizontal"
    VERTICAL = "Vertical"
    DIAGONAL = "Diagonal"


@dataclass(frozen=True)
class WallMaterial:
    """A wall finish (paint, wallpaper, tile, ...).

    Attributes:
        name: Display name.
        material_type: Kind of finish.
        color: Base color.
        finish: Sheen of the surface.
        pattern: Optional surface pattern.
        custom_texture: Optional asset name or file path.
        id: Unique identifier.
    """

    name: str
    material_type: WallMaterialType
    color: Color
    finish: WallFinish = WallFinish.MATTE
    pattern: WallPattern | None = None
    custom_texture: str | None = None
    id: str = field(default_factory=_new_id)


@dataclass(frozen=True)
class FloorMaterial:
    """A flooring material.

    Attributes:
        name: Display name.
        floor_type: Kind of flooring.
        color: Base color.
        pattern: Laying pattern.
        direction: Orientation of planks or tiles.
        id: Unique identifier.
    """

    name: str
    floor_type: FloorType
    color: Color
    pattern: FloorPattern = FloorPattern.SOLID
    direction: FloorDirection = FloorDirection.HORIZONTAL
    id: str = field(default_factory=_new_id)


class Surface(str, Enum):
    WALL = "wall"
    FLOOR = "floor"
    CEILING = "ceiling"


class Finish(str, Enum):
    MATTE = "Matte"
    GLOSSY = "Glossy"
    SATIN = "Satin"


@dataclass(frozen=True)
class Material:
    """A generic swatch offered by the material picker."""

    surface: Surface
    name: str
    color: Color
    finish: Finish = Finish.MATTE
    texture: str | None = None
    id: str = field(default_factory=_new_id)

    @classmethod
    def default_for(cls, surface: Surface) -> Material:
        if surface is Surface.FLOOR:
            return cls(Surface.FLOOR, "Wood Floor", Color(0.65, 0.5, 0.39), Finish.SATIN, "wood")
        if surface is Surface.CEILING:
            return cls(Surface.CEILING, "White Ceiling", WHITE)
        return cls(Surface.WALL, "White Wall", WHITE)


PRESET_MATERIALS: dict[Surface, tuple[Material, ...]] = {
    Surface.WALL: (
        Material(Surface.WALL, "White", WHITE),
        Material(Surface.WALL, "Beige", Color(0.96, 0.96, 0.86)),
        Material(Surface.WALL, "Light Gray", Color(0.83, 0.83, 0.83)),
        Material(Surface.WALL, "Brick", Color(0.7, 0.3, 0.2), texture="brick"),
    ),
    Surface.FLOOR: (
        Material(Surface.FLOOR, "Oak Wood", Color(0.65, 0.5, 0.39), Finish.SATIN, "wood"),
        Material(Surface.FLOOR, "Dark Wood", Color(0.3, 0.2, 0.1), Finish.GLOSSY, "wood"),
        Material(Surface.FLOOR, "White Tile", WHITE, Finish.GLOSSY, "tile"),
        Material(Surface.FLOOR, "Gray Carpet", GRAY, Finish.MATTE, "carpet"),
    ),
    Surface.CEILING: (
        Material(Surface.CEILING, "White", WHITE),
        Material(Surface.CEILING, "Off-White", Color(0.98, 0.98, 0.95)),
        Material(Surface.CEILING, "Popcorn", WHITE, texture="popcorn"),
    ),
}


def _default_wall_materials() -> tuple[WallMaterial, ...]:
    return (
        WallMaterial("White Matte", WallMaterialType.PAINT, WHITE, WallFinish.MATTE),
        WallMaterial("Warm Beige", WallMaterialType.PAINT, Color(0.96, 0.92, 0.84), WallFinish.EGGSHELL),
        WallMaterial("Light Gray", WallMaterialType.PAINT, Color(0.85, 0.85, 0.85), WallFinish.SATIN),
        WallMaterial("Navy Blue", WallMaterialType.PAINT, Color(0.0, 0.2, 0.4), WallFinish.MATTE),
        WallMaterial("Sage Green", WallMaterialType.PAINT, Color(0.7, 0.8, 0.7), WallFinish.EGGSHELL),
        WallMaterial("White Subway Tile", WallMaterialType.TILE, WHITE, WallFinish.GLOSS),
        WallMaterial("Exposed Brick", WallMaterialType.BRICK, Color(0.7, 0.4, 0.3), WallFinish.MATTE),
        WallMaterial("Light Oak Paneling", WallMaterialType.WOOD_PANELING, Color(0.82, 0.71, 0.55), WallFinish.SATIN),
    )


def _default_floor_materials() -> tuple[FloorMaterial, ...]:
    return (
        FloorMaterial("Light Oak Hardwood", FloorType.HARDWOOD, Color(0.82, 0.71, 0.55), FloorPattern.WOOD),
        FloorMaterial("Dark Walnut", FloorType.HARDWOOD, Color(0.4, 0.3, 0.2), FloorPattern.WOOD),
        FloorMaterial("Gray Laminate", FloorType.LAMINATE, Color(0.6, 0.6, 0.6), FloorPattern.WOOD),
        FloorMaterial("White Marble Tile", FloorType.TILE, WHITE, FloorPattern.TILES),
        FloorMaterial("Beige Carpet", FloorType.CARPET, Color(0.9, 0.85, 0.75), FloorPattern.SOLID),
        FloorMaterial("Gray Concrete", FloorType.CONCRETE, GRAY, FloorPattern.SOLID),
        FloorMaterial("Natural Bamboo", FloorType.BAMBOO, Color(0.85, 0.75, 0.55), FloorPattern.WOOD),
    )


@dataclass(frozen=True)
class MaterialLibrary:
    """Wall and floor materials available to a plan.

    Attributes:
        wall_materials: Ordered wall finishes.
        floor_materials: Ordered floor finishes.
    """

    wall_materials: tuple[WallMaterial, ...] = ()
    floor_materials: tuple[FloorMaterial, ...] = ()

    @classmethod
    def default(cls) -> MaterialLibrary:
        """Library pre-loaded with the preset catalog."""
        return cls(_default_wall_materials(), _default_floor_materials())

    def with_wall_material(self, material: WallMaterial) -> MaterialLibrary:
        return replace(self, wall_materials=self.wall_materials + (material,))

    def without_wall_material(self, material_id: str) -> MaterialLibrary:
        return replace(
            self, wall_materials=tuple(m for m in self.wall_materials if m.id != material_id)
        )

    def with_floor_material(self, material: FloorMaterial) -> MaterialLibrary:
        return replace(self, floor_materials=self.floor_materials + (material,))

    def without_floor_material(self, material_id: str) -> MaterialLibrary:
        return replace(
            self, floor_materials=tuple(m for m in self.floor_materials if m.id != material_id)
        )

    def find(self, material_id: str) -> WallMaterial | FloorMaterial | None:
        for material in (*self.wall_materials, *self.floor_materials):
            if material.id == material_id:
                return material
        return None


M = TypeVar("M", Material, WallMaterial, FloorMaterial)


def remember_recent(
    recent: Sequence[M], material: M, limit: int = config.RECENT_MATERIALS_LIMIT
) -> list[M]:
    """Return the recently-used list with ``material`` moved to the front.

    The list holds distinct materials (by id), most recent first, and is
    truncated to ``limit`` entries.
    """
    updated = [material] + [m for m in recent if m.id != material.id]
    return updated[:limit]
