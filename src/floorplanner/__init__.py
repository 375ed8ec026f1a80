"""Floor Planner - A Python library for editing 2D floor plans."""

__version__ = "0.1.0"
__author__ = "Marco"
__email__ = "marco@example.com"

from .core.model import FloorPlan, FurnitureItem, Room, Wall
from .geom.primitives import Point

__all__ = ["FloorPlan", "FurnitureItem", "Point", "Room", "Wall"]
