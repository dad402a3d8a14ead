"""Domain layer - module geometry and front-view generation."""

from .dispatcher import GENERATORS, ShapeDispatcher, generate_module_shapes
from .entities import ModuleConfig, PanelsEnabled, WardrobeSection
from .section_allocator import SectionAllocation, allocate_sections
from .value_objects import (
    DimensionOrientation,
    DimensionShape,
    LineShape,
    PanelSide,
    Point2D,
    RectShape,
    SectionType,
    Shape,
    UnitType,
)

__all__ = [
    "DimensionOrientation",
    "DimensionShape",
    "GENERATORS",
    "LineShape",
    "ModuleConfig",
    "PanelSide",
    "PanelsEnabled",
    "Point2D",
    "RectShape",
    "SectionAllocation",
    "SectionType",
    "Shape",
    "ShapeDispatcher",
    "UnitType",
    "WardrobeSection",
    "allocate_sections",
    "generate_module_shapes",
]
