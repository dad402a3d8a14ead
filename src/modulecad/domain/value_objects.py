"""Value objects for the module drawing domain."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Union


class UnitType(str, Enum):
    """Furniture unit types with a dedicated front-view generator.

    Any tag outside this set is drawn by the generic fallback generator.

    Attributes:
        WARDROBE_CARCASS: Panel-accurate carcass with posts and shelves.
        WARDROBE: Drafting-style wardrobe with typed sections and a loft.
        OTHER: Generic outline with shelves and shutters.
    """

    WARDROBE_CARCASS = "wardrobe_carcass"
    WARDROBE = "wardrobe"
    OTHER = "other"

    @classmethod
    def from_tag(cls, tag: str | None) -> UnitType:
        """Parse a unit-type tag, falling back to OTHER for unknown tags."""
        try:
            return cls(tag)
        except ValueError:
            return cls.OTHER


class SectionType(str, Enum):
    """Behavioral zone types for wardrobe sections.

    Attributes:
        LONG_HANG: Full-height hanging rod.
        SHORT_HANG: Short hanging rod with shelves below.
        SHELVES: Evenly spaced shelves.
        DRAWERS: Stack of drawers with handles.
        OPEN: Empty open section.
    """

    LONG_HANG = "long_hang"
    SHORT_HANG = "short_hang"
    SHELVES = "shelves"
    DRAWERS = "drawers"
    OPEN = "open"


class PanelSide(str, Enum):
    """Carcass panels that can be individually enabled or disabled."""

    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"
    BACK = "back"


class DimensionOrientation(str, Enum):
    """Direction a dimension callout is measured in."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True)
class Point2D:
    """A point in drawing space (mm, Y grows downward)."""

    x: float
    y: float


@dataclass(frozen=True)
class LineStyle:
    """Stroke settings for a line shape.

    Attributes:
        color: CSS color string.
        thickness: Stroke width in drawing units.
    """

    color: str
    thickness: float


@dataclass(frozen=True)
class RectStyle:
    """Fill and stroke settings for a rectangle shape."""

    fill: str
    stroke: str
    stroke_width: float


@dataclass(frozen=True)
class LineShape:
    """A straight line segment."""

    id: str
    x1: float
    y1: float
    x2: float
    y2: float
    color: str
    thickness: float

    kind: ClassVar[str] = "line"

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.kind,
            "id": self.id,
            "x1": self.x1,
            "y1": self.y1,
            "x2": self.x2,
            "y2": self.y2,
            "color": self.color,
            "thickness": self.thickness,
        }


@dataclass(frozen=True)
class RectShape:
    """An axis-aligned rectangle anchored at its top-left corner.

    Panels, posts and shelves are rectangles with stable identifiers;
    see ``modulecad.domain.generators.carcass`` for the naming scheme.

    Attributes:
        id: Stable identifier (``MOD-LEFT``) or an opaque generated one.
        x: Left edge.
        y: Top edge.
        w: Width.
        h: Height.
        fill: Fill color, or ``"none"`` for an outline.
        stroke: Stroke color.
        stroke_width: Stroke width in drawing units.
    """

    id: str
    x: float
    y: float
    w: float
    h: float
    fill: str
    stroke: str
    stroke_width: float

    kind: ClassVar[str] = "rect"

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    @property
    def is_filled(self) -> bool:
        return self.fill != "none"

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.kind,
            "id": self.id,
            "x": self.x,
            "y": self.y,
            "w": self.w,
            "h": self.h,
            "fill": self.fill,
            "stroke": self.stroke,
            "strokeWidth": self.stroke_width,
        }


@dataclass(frozen=True)
class DimensionShape:
    """A dimension callout between two points.

    Attributes:
        id: Opaque generated identifier.
        x1: Start X.
        y1: Start Y.
        x2: End X.
        y2: End Y.
        label: Text shown on the callout (usually the length in mm).
        orientation: Whether the callout measures horizontally or vertically.
        offset: Distance the callout line is pushed away from the measured
            edge. Negative values push left/up.
    """

    id: str
    x1: float
    y1: float
    x2: float
    y2: float
    label: str
    orientation: DimensionOrientation
    offset: float

    kind: ClassVar[str] = "dimension"

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.kind,
            "id": self.id,
            "x1": self.x1,
            "y1": self.y1,
            "x2": self.x2,
            "y2": self.y2,
            "label": self.label,
            "orientation": self.orientation.value,
            "offset": self.offset,
        }


Shape = Union[LineShape, RectShape, DimensionShape]
