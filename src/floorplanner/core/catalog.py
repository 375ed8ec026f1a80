"""Furniture catalog and the palette drag-and-drop payload."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from ..geom.primitives import Point
from .model import FurnitureItem


class FurnitureCategory(str, Enum):
    SEATING = "Seating"
    TABLES = "Tables"
    BEDROOM = "Bedroom"
    STORAGE = "Storage"


class FurnitureType(str, Enum):
    CHAIR = "chair"
    TABLE = "table"
    BED = "bed"
    SOFA = "sofa"
    DESK = "desk"
    CABINET = "cabinet"

    @property
    def default_size(self) -> tuple[float, float]:
        return _DEFAULT_SIZES[self]

    @property
    def category(self) -> FurnitureCategory:
        return _CATEGORIES[self]


_DEFAULT_SIZES = {
    FurnitureType.CHAIR: (50.0, 50.0),
    FurnitureType.TABLE: (100.0, 60.0),
    FurnitureType.BED: (80.0, 120.0),
    FurnitureType.SOFA: (120.0, 60.0),
    FurnitureType.DESK: (100.0, 50.0),
    FurnitureType.CABINET: (60.0, 40.0),
}

_CATEGORIES = {
    FurnitureType.CHAIR: FurnitureCategory.SEATING,
    FurnitureType.SOFA: FurnitureCategory.SEATING,
    FurnitureType.TABLE: FurnitureCategory.TABLES,
    FurnitureType.DESK: FurnitureCategory.TABLES,
    FurnitureType.BED: FurnitureCategory.BEDROOM,
    FurnitureType.CABINET: FurnitureCategory.STORAGE,
}


@dataclass(frozen=True)
class CatalogEntry:
    """A piece of furniture offered by the palette."""

    id: str
    furniture_type: FurnitureType
    name: str
    width: float
    height: float

    @property
    def category(self) -> FurnitureCategory:
        return self.furniture_type.category

    def to_drag_data(self) -> FurnitureDragData:
        return FurnitureDragData(
            furniture_id=self.id,
            name=self.name,
            width=self.width,
            height=self.height,
            category=self.category.value,
        )


def _entry_id(furniture_type: FurnitureType) -> str:
    # Stable across sessions so saved plans keep resolving their catalog entries.
    return str(uuid.uuid5(uuid.NAMESPACE_URL, f"floorplanner:furniture:{furniture_type.value}"))


CATALOG: tuple[CatalogEntry, ...] = tuple(
    CatalogEntry(
        id=_entry_id(t),
        furniture_type=t,
        name=t.value,
        width=t.default_size[0],
        height=t.default_size[1],
    )
    for t in FurnitureType
)


def catalog_entry(furniture_id: str) -> CatalogEntry | None:
    """Look up a catalog entry by ID."""
    return next((e for e in CATALOG if e.id == furniture_id), None)


def catalog_entry_for(furniture_type: FurnitureType) -> CatalogEntry:
    return next(e for e in CATALOG if e.furniture_type is furniture_type)


@dataclass(frozen=True)
class FurnitureDragData:
    """Payload carried from the furniture palette to the canvas.

    Attributes:
        furniture_id: ID of the catalog entry being dragged.
        name: Display name of the entry.
        width: Width of the item to create.
        height: Height (depth) of the item to create.
        category: Category name of the entry.
    """

    furniture_id: str
    name: str
    width: float
    height: float
    category: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "furnitureId": self.furniture_id,
            "name": self.name,
            "width": self.width,
            "height": self.height,
            "category": self.category,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FurnitureDragData:
        """Parse a payload dictionary.

        Raises:
            ValueError: If a field is missing or has the wrong type.
        """
        try:
            return cls(
                furniture_id=str(data["furnitureId"]),
                name=str(data["name"]),
                width=float(data["width"]),
                height=float(data["height"]),
                category=str(data["category"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid furniture drag payload: {e}") from e

    def to_item(self, position: Point) -> FurnitureItem:
        """Instantiate a new furniture item centered at ``position``."""
        return FurnitureItem(
            furniture_id=self.furniture_id,
            name=self.name,
            position=position,
            width=self.width,
            height=self.height,
            category=self.category,
        )
