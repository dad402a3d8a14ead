"""Shape factories and drafting line-weight presets.

Every generator builds its drawing from the functions in this module. The
factories never fail: composite helpers silently emit nothing for
degenerate (zero or negative) sizes.

Line weights follow the AutoCAD convention used on the design canvas:

- CARCASS: thick outer walls
- PARTITION: internal dividers
- FITTING: shelves, rods, drawer and shutter outlines
- HANDLE: handles (cyan accent)
- HATCH: hangers, garments and other light detail
"""

from __future__ import annotations

import math
from uuid import uuid4

from .value_objects import (
    DimensionOrientation,
    DimensionShape,
    LineShape,
    LineStyle,
    RectShape,
    RectStyle,
    Shape,
)

CARCASS = LineStyle(color="#e0e0e0", thickness=3)
PARTITION = LineStyle(color="#b0b0b0", thickness=2)
FITTING = LineStyle(color="#808080", thickness=1)
HANDLE = LineStyle(color="#00e5ff", thickness=2.5)
HATCH = LineStyle(color="#555", thickness=0.5)

DEFAULT_RECT = RectStyle(fill="none", stroke="#e0e0e0", stroke_width=2)

# Offsets of the overall width/height callouts from the bounding box
WIDTH_DIMENSION_GAP = 40.0
HEIGHT_DIMENSION_GAP = 50.0
DEFAULT_DIMENSION_OFFSET = 30.0

DRAWER_PAD = 6.0
SHELF_INSET = 4.0
SHUTTER_GAP = 4.0
SHUTTER_FRAME = 6.0
SHUTTER_HANDLE_INSET = 15.0


def new_shape_id() -> str:
    """Generate an opaque identifier for a decorative shape."""
    return f"MOD-{uuid4().hex[:8]}"


def mm_label(value: float) -> str:
    """Format a length as a whole-millimetre label (halves round up)."""
    return str(int(math.floor(value + 0.5)))


def is_degenerate(w: float, h: float) -> bool:
    return not (w > 0 and h > 0)


def line(
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    style: LineStyle = PARTITION,
    shape_id: str | None = None,
) -> LineShape:
    return LineShape(
        id=shape_id or new_shape_id(),
        x1=x1,
        y1=y1,
        x2=x2,
        y2=y2,
        color=style.color,
        thickness=style.thickness,
    )


def rect(
    x: float,
    y: float,
    w: float,
    h: float,
    style: RectStyle = DEFAULT_RECT,
    shape_id: str | None = None,
) -> RectShape:
    return RectShape(
        id=shape_id or new_shape_id(),
        x=x,
        y=y,
        w=w,
        h=h,
        fill=style.fill,
        stroke=style.stroke,
        stroke_width=style.stroke_width,
    )


def dimension(
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    label: str,
    orientation: DimensionOrientation,
    offset: float = DEFAULT_DIMENSION_OFFSET,
) -> DimensionShape:
    return DimensionShape(
        id=new_shape_id(),
        x1=x1,
        y1=y1,
        x2=x2,
        y2=y2,
        label=label,
        orientation=orientation,
        offset=offset,
    )


def outline(x: float, y: float, w: float, h: float) -> list[Shape]:
    """Four carcass-weight boundary lines: top, right, bottom, left."""
    if is_degenerate(w, h):
        return []
    return [
        line(x, y, x + w, y, CARCASS),
        line(x + w, y, x + w, y + h, CARCASS),
        line(x + w, y + h, x, y + h, CARCASS),
        line(x, y + h, x, y, CARCASS),
    ]


def dimension_pair(x: float, y: float, w: float, h: float) -> list[Shape]:
    """Overall width callout below the box and height callout to its left."""
    if is_degenerate(w, h):
        return []
    return [
        dimension(
            x,
            y + h + WIDTH_DIMENSION_GAP,
            x + w,
            y + h + WIDTH_DIMENSION_GAP,
            mm_label(w),
            DimensionOrientation.HORIZONTAL,
            DEFAULT_DIMENSION_OFFSET,
        ),
        dimension(
            x - HEIGHT_DIMENSION_GAP,
            y,
            x - HEIGHT_DIMENSION_GAP,
            y + h,
            mm_label(h),
            DimensionOrientation.VERTICAL,
            -DEFAULT_DIMENSION_OFFSET,
        ),
    ]


def even_shelves(x: float, y: float, w: float, h: float, count: int) -> list[Shape]:
    """``count`` fitting lines with equal gaps above, between and below."""
    if count <= 0 or is_degenerate(w, h):
        return []
    spacing = h / (count + 1)
    left = x + SHELF_INSET
    right = x + w - SHELF_INSET
    return [
        line(left, y + spacing * i, right, y + spacing * i, FITTING)
        for i in range(1, count + 1)
    ]


def stacked_drawers(x: float, y: float, w: float, h: float, count: int) -> list[Shape]:
    """A vertical stack of drawer outlines, each with a centered handle."""
    if count <= 0 or is_degenerate(w, h):
        return []
    drawer_h = h / count
    if is_degenerate(w - DRAWER_PAD * 2, drawer_h - DRAWER_PAD * 2):
        return []

    shapes: list[Shape] = []
    left = x + DRAWER_PAD
    right = x + w - DRAWER_PAD
    handle_w = min(50.0, w * 0.25)
    hx = x + w / 2
    for i in range(count):
        top = y + drawer_h * i + DRAWER_PAD
        bottom = y + drawer_h * (i + 1) - DRAWER_PAD
        shapes.extend(
            [
                line(left, top, right, top, FITTING),
                line(right, top, right, bottom, FITTING),
                line(right, bottom, left, bottom, FITTING),
                line(left, bottom, left, top, FITTING),
            ]
        )
        hy = y + drawer_h * i + drawer_h / 2
        shapes.append(line(hx - handle_w / 2, hy, hx + handle_w / 2, hy, HANDLE))
    return shapes


def shutter_grid(
    x: float, y: float, w: float, h: float, cols: int, rows: int
) -> list[Shape]:
    """A cols x rows grid of shutter outlines with vertical handles.

    Even columns carry the handle near their right edge and odd columns
    near their left edge, so neighbouring doors open away from each other.
    """
    if cols <= 0 or rows <= 0:
        return []
    shutter_w = (w - SHUTTER_FRAME * 2 - SHUTTER_GAP * (cols - 1)) / cols
    shutter_h = (h - SHUTTER_FRAME * 2 - SHUTTER_GAP * (rows - 1)) / rows
    if is_degenerate(shutter_w, shutter_h):
        return []

    shapes: list[Shape] = []
    handle_len = min(40.0, shutter_h * 0.2)
    for col in range(cols):
        for row in range(rows):
            sx = x + SHUTTER_FRAME + col * (shutter_w + SHUTTER_GAP)
            sy = y + SHUTTER_FRAME + row * (shutter_h + SHUTTER_GAP)
            shapes.extend(
                [
                    line(sx, sy, sx + shutter_w, sy, FITTING),
                    line(sx + shutter_w, sy, sx + shutter_w, sy + shutter_h, FITTING),
                    line(sx + shutter_w, sy + shutter_h, sx, sy + shutter_h, FITTING),
                    line(sx, sy + shutter_h, sx, sy, FITTING),
                ]
            )
            if col % 2 == 0:
                hx = sx + shutter_w - SHUTTER_HANDLE_INSET
            else:
                hx = sx + SHUTTER_HANDLE_INSET
            hcy = sy + shutter_h / 2
            half = handle_len / 2
            shapes.append(line(hx, hcy - half, hx, hcy + half, HANDLE))
    return shapes
