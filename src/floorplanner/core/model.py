"""Core data models for floor plan editing.

This module defines the fundamental data structures used to represent
a floor plan: walls, rooms, placed furniture and the plan aggregate that
owns them. Every model is an immutable value; editing helpers return new
instances.
"""

from __future__ import annotations

import math
import uuid
from dataclasses import dataclass, field, replace
from enum import Enum

from shapely.geometry import Polygon

from .. import config
from ..geom.primitives import Point, Rect, distance, rotate_around_origin, segment_contains_point
from .materials import Color, MaterialLibrary


def new_id() -> str:
    """Generate a unique entity identifier."""
    return str(uuid.uuid4())


@dataclass(frozen=True)
class Opening:
    """Represents a door or window placed on a wall.

    Attributes:
        position: Fraction along the wall, from start (0) to end (1), of the
            opening center.
        width: Width of the opening in real-world units.
        style: Free-form style name (e.g. "Single", "Sliding", "Blinds").
    """

    position: float = 0.5
    width: float = 36.0
    style: str | None = None

    def __post_init__(self) -> None:
        if not 0.0 <= self.position <= 1.0:
            raise ValueError(f"Opening position must be in [0, 1], got {self.position}")
        if self.width < 0:
            raise ValueError(f"Opening width must be non-negative, got {self.width}")

    def location_on(self, wall: Wall) -> Point:
        """Center of the opening in plan coordinates."""
        return Point(
            wall.start.x + (wall.end.x - wall.start.x) * self.position,
            wall.start.y + (wall.end.y - wall.start.y) * self.position,
        )


@dataclass(frozen=True)
class Wall:
    """Represents a straight wall segment.

    Attributes:
        start: Starting point of the wall.
        end: Ending point of the wall.
        thickness: Wall thickness in real-world units.
        height: Wall height in real-world units.
        wall_type: Optional classification (e.g. "partition", "load-bearing").
        material_id: ID of the wall material applied to this wall, if any.
        color: Optional paint color overriding the material.
        door: Door placed on this wall, if any.
        window: Window placed on this wall, if any.
        id: Unique identifier for the wall.
    """

    start: Point
    end: Point
    thickness: float = config.DEFAULT_WALL_THICKNESS
    height: float = config.DEFAULT_WALL_HEIGHT
    wall_type: str | None = None
    material_id: str | None = None
    color: Color | None = None
    door: Opening | None = None
    window: Opening | None = None
    id: str = field(default_factory=new_id)

    @property
    def length(self) -> float:
        return distance(self.start, self.end)

    @property
    def angle(self) -> float:
        """Direction of the wall in radians."""
        return math.atan2(self.end.y - self.start.y, self.end.x - self.start.x)

    @property
    def center(self) -> Point:
        return Point((self.start.x + self.end.x) / 2, (self.start.y + self.end.y) / 2)

    def is_near_start(self, point: Point, hit_radius: float = config.ENDPOINT_HIT_RADIUS) -> bool:
        return distance(self.start, point) <= hit_radius

    def is_near_end(self, point: Point, hit_radius: float = config.ENDPOINT_HIT_RADIUS) -> bool:
        return distance(self.end, point) <= hit_radius

    def is_on_wall(self, point: Point, hit_radius: float = config.WALL_HIT_RADIUS) -> bool:
        """Check if a point lies within ``hit_radius`` of the wall segment."""
        return segment_contains_point(self.start, self.end, point, hit_radius)

    def move_by(self, dx: float, dy: float) -> Wall:
        return replace(self, start=self.start.offset(dx, dy), end=self.end.offset(dx, dy))


class RoomType(str, Enum):
    BEDROOM = "bedroom"
    BATHROOM = "bathroom"
    KITCHEN = "kitchen"
    LIVING_ROOM = "livingRoom"
    DINING_ROOM = "diningRoom"
    OFFICE = "office"
    HALLWAY = "hallway"
    CLOSET = "closet"
    GARAGE = "garage"
    OTHER = "other"

    @property
    def display_name(self) -> str:
        return _ROOM_DISPLAY_NAMES[self]

    @property
    def default_color(self) -> str:
        return _ROOM_COLORS.get(self, "#FFFFFF")


_ROOM_DISPLAY_NAMES = {
    RoomType.BEDROOM: "Bedroom",
    RoomType.BATHROOM: "Bathroom",
    RoomType.KITCHEN: "Kitchen",
    RoomType.LIVING_ROOM: "Living Room",
    RoomType.DINING_ROOM: "Dining Room",
    RoomType.OFFICE: "Office",
    RoomType.HALLWAY: "Hallway",
    RoomType.CLOSET: "Closet",
    RoomType.GARAGE: "Garage",
    RoomType.OTHER: "Other",
}

_ROOM_COLORS = {
    RoomType.LIVING_ROOM: "#CCE0FF",
    RoomType.BEDROOM: "#E6CCFF",
    RoomType.KITCHEN: "#CCF2CC",
    RoomType.BATHROOM: "#CCF5FF",
    RoomType.DINING_ROOM: "#FFE6CC",
    RoomType.OFFICE: "#FFFACC",
    RoomType.HALLWAY: "#EEEEEE",
}


@dataclass(frozen=True)
class Room:
    """Represents a named area bounded by walls.

    Attributes:
        name: Human-readable name of the room.
        room_type: Category of the room.
        wall_ids: IDs of the walls outlining the room, in drawing order.
        area: Last computed floor area, in square real-world units.
        color: Fill color code (e.g. "#FFFFFF").
        floor_material_id: ID of the floor material, if any.
        id: Unique identifier for the room.
    """

    name: str
    room_type: RoomType = RoomType.OTHER
    wall_ids: tuple[str, ...] = ()
    area: float = 0.0
    color: str = "#FFFFFF"
    floor_material_id: str | None = None
    id: str = field(default_factory=new_id)

    def __post_init__(self) -> None:
        if self.area < 0:
            raise ValueError(f"Room area must be non-negative, got {self.area}")


class FurnitureStyle(str, Enum):
    MODERN = "Modern"
    TRADITIONAL = "Traditional"
    MINIMALIST = "Minimalist"
    INDUSTRIAL = "Industrial"
    SCANDINAVIAN = "Scandinavian"
    RUSTIC = "Rustic"
    CONTEMPORARY = "Contemporary"


@dataclass(frozen=True)
class FurnitureItem:
    """A placed, sized and rotatable piece of furniture.

    Attributes:
        furniture_id: ID of the catalog entry this item was created from.
        name: Catalog name of the item.
        position: Center of the item in real-world coordinates.
        width: Extent along the item's local x axis.
        height: Extent along the item's local y axis (depth on the floor).
        rotation: Rotation in degrees, counter-clockwise.
        category: Catalog category name, if known.
        style: Optional furniture style.
        color: Optional color.
        custom_name: Optional user-given label.
        id: Unique identifier for the placed item.
    """

    furniture_id: str
    name: str
    position: Point
    width: float
    height: float
    rotation: float = 0.0
    category: str | None = None
    style: FurnitureStyle | None = None
    color: Color | None = None
    custom_name: str | None = None
    id: str = field(default_factory=new_id)

    @property
    def display_name(self) -> str:
        return self.custom_name or self.name

    @property
    def bounds(self) -> Rect:
        """Axis-aligned rectangle centered on the position, ignoring rotation."""
        return Rect.centered(self.position, self.width, self.height)

    @property
    def corners(self) -> tuple[Point, ...]:
        """Rotated corners of the item in plan coordinates."""
        half_w = self.width / 2
        half_h = self.height / 2
        angle = math.radians(self.rotation)
        local = (
            Point(-half_w, -half_h),
            Point(half_w, -half_h),
            Point(half_w, half_h),
            Point(-half_w, half_h),
        )
        return tuple(
            rotate_around_origin(corner, angle).offset(self.position.x, self.position.y)
            for corner in local
        )

    @property
    def footprint(self) -> Polygon:
        """Rotated outline of the item as a shapely polygon."""
        return Polygon([(c.x, c.y) for c in self.corners])

    def moved_to(self, position: Point) -> FurnitureItem:
        return replace(self, position=position)


class MeasurementUnit(str, Enum):
    IMPERIAL = "Imperial (ft/in)"
    METRIC = "Metric (m/cm)"

    @property
    def display_unit(self) -> str:
        return "ft" if self is MeasurementUnit.IMPERIAL else "m"

    @property
    def small_display_unit(self) -> str:
        return "in" if self is MeasurementUnit.IMPERIAL else "cm"


@dataclass(frozen=True)
class FloorPlan:
    """Represents a complete floor plan document.

    Attributes:
        name: Document name.
        scale: Pixels per real-world unit, must be positive.
        unit: Measurement system used for display.
        walls: Walls in insertion order.
        rooms: Rooms in insertion order.
        furniture_items: Placed furniture in insertion order.
        material_library: Materials available to this plan.
        grid_size: Grid cell size of the canvas.
        show_grid: Whether the canvas grid is shown.
        id: Unique identifier for the plan.
    """

    name: str = config.DEFAULT_PLAN_NAME
    scale: float = config.DEFAULT_SCALE
    unit: MeasurementUnit = MeasurementUnit.IMPERIAL
    walls: tuple[Wall, ...] = ()
    rooms: tuple[Room, ...] = ()
    furniture_items: tuple[FurnitureItem, ...] = ()
    material_library: MaterialLibrary = field(default_factory=MaterialLibrary.default)
    grid_size: float = config.DEFAULT_GRID_SIZE
    show_grid: bool = config.DEFAULT_SHOW_GRID
    id: str = field(default_factory=new_id)

    def __post_init__(self) -> None:
        if not self.scale > 0:
            raise ValueError(f"Scale must be positive, got {self.scale}")
        if not self.grid_size > 0:
            raise ValueError(f"Grid size must be positive, got {self.grid_size}")

    # Walls

    def wall(self, wall_id: str) -> Wall | None:
        return next((w for w in self.walls if w.id == wall_id), None)

    def with_wall(self, wall: Wall) -> FloorPlan:
        return replace(self, walls=self.walls + (wall,))

    def without_wall(self, wall_id: str) -> FloorPlan:
        """Remove a wall and drop it from every room outline."""
        rooms = tuple(
            replace(r, wall_ids=tuple(w for w in r.wall_ids if w != wall_id))
            if wall_id in r.wall_ids
            else r
            for r in self.rooms
        )
        return replace(self, walls=tuple(w for w in self.walls if w.id != wall_id), rooms=rooms)

    def with_updated_wall(self, wall: Wall) -> FloorPlan:
        return replace(self, walls=tuple(wall if w.id == wall.id else w for w in self.walls))

    # Rooms

    def room(self, room_id: str) -> Room | None:
        return next((r for r in self.rooms if r.id == room_id), None)

    def with_room(self, room: Room) -> FloorPlan:
        return replace(self, rooms=self.rooms + (room,))

    def without_room(self, room_id: str) -> FloorPlan:
        return replace(self, rooms=tuple(r for r in self.rooms if r.id != room_id))

    def with_updated_room(self, room: Room) -> FloorPlan:
        return replace(self, rooms=tuple(room if r.id == room.id else r for r in self.rooms))

    # Furniture

    def furniture(self, item_id: str) -> FurnitureItem | None:
        return next((f for f in self.furniture_items if f.id == item_id), None)

    def furniture_index(self, item_id: str) -> int | None:
        for index, item in enumerate(self.furniture_items):
            if item.id == item_id:
                return index
        return None

    def with_furniture(self, item: FurnitureItem, index: int | None = None) -> FloorPlan:
        """Insert an item, replacing any item with the same ID in place.

        Args:
            item: The item to insert.
            index: Position to insert at; appended when None.
        """
        if self.furniture_index(item.id) is not None:
            return self.with_updated_furniture(item)
        items = list(self.furniture_items)
        if index is None:
            items.append(item)
        else:
            items.insert(index, item)
        return replace(self, furniture_items=tuple(items))

    def without_furniture(self, item_id: str) -> FloorPlan:
        return replace(
            self, furniture_items=tuple(f for f in self.furniture_items if f.id != item_id)
        )

    def with_updated_furniture(self, item: FurnitureItem) -> FloorPlan:
        return replace(
            self,
            furniture_items=tuple(item if f.id == item.id else f for f in self.furniture_items),
        )

    def with_furniture_position(self, item_id: str, position: Point) -> FloorPlan:
        item = self.furniture(item_id)
        if item is None:
            return self
        return self.with_updated_furniture(item.moved_to(position))

    def with_furniture_rotation(self, item_id: str, rotation: float) -> FloorPlan:
        item = self.furniture(item_id)
        if item is None:
            return self
        return self.with_updated_furniture(replace(item, rotation=rotation))

    def cleared(self) -> FloorPlan:
        """Drop all walls, rooms and furniture, keeping document settings."""
        return replace(self, walls=(), rooms=(), furniture_items=())

    # Units

    def to_real_world(self, screen_distance: float) -> float:
        return screen_distance / self.scale

    def to_screen(self, real_world_distance: float) -> float:
        return real_world_distance * self.scale

    def format_measurement(self, inches: float) -> str:
        """Format a length given in inches for display in the plan's unit system."""
        if self.unit is MeasurementUnit.IMPERIAL:
            feet = int(inches / 12)
            remaining = math.fmod(inches, 12)
            if feet > 0:
                return f"{feet}' {remaining:.1f}\""
            return f"{remaining:.1f}\""

        cm = inches * 2.54
        meters = cm / 100
        if meters >= 1.0:
            return f"{meters:.2f} m"
        return f"{cm:.1f} cm"
