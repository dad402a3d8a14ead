"""AutoCAD-style front view of a wardrobe with typed sections.

Unlike the carcass view, sections here are behavioral zones (hanging,
shelves, drawers) drawn with drafting line weights, separated by
full-thickness partitions. An optional loft sits above the main cavity.
"""

from __future__ import annotations

import math

from ..entities import ModuleConfig, WardrobeSection
from ..primitives import (
    FITTING,
    HANDLE,
    HATCH,
    PARTITION,
    dimension,
    dimension_pair,
    even_shelves,
    line,
    mm_label,
    rect,
    stacked_drawers,
)
from ..section_allocator import allocate_sections
from ..value_objects import DimensionOrientation, RectStyle, SectionType, Shape
from .limits import (
    DEFAULT_LOFT_HEIGHT,
    MAX_DRAWER_COUNT,
    MAX_SHELF_COUNT,
    carcass_dimensions,
    clamp,
    safe,
    safe_count,
)

PANEL_STYLE = RectStyle(fill="#d4d4d4", stroke="#333", stroke_width=1)
PARTITION_STYLE = RectStyle(fill="#c0c0c0", stroke="#333", stroke_width=1)

MAX_LOFT_DOORS = 4
DEFAULT_LOFT_DOORS = 3
DEFAULT_ROD_HEIGHT_PCT = 60.0
DEFAULT_SHORT_HANG_SHELVES = 2
DEFAULT_SHELVES = 4
DEFAULT_DRAWERS = 3
MAX_SECTIONS = 10

DEFAULT_WARDROBE_SECTIONS: tuple[WardrobeSection, ...] = (
    WardrobeSection(type=SectionType.LONG_HANG),
    WardrobeSection(type=SectionType.SHELVES, shelf_count=4),
    WardrobeSection(type=SectionType.DRAWERS, drawer_count=3),
    WardrobeSection(type=SectionType.SHELVES, shelf_count=3),
    WardrobeSection(type=SectionType.SHORT_HANG, rod_height_pct=60, shelf_count=2),
)


def default_sections(section_count: int) -> tuple[WardrobeSection, ...]:
    """Built-in section progression used when none are configured."""
    count = max(1, section_count)
    if count == 1:
        return (WardrobeSection(type=SectionType.SHELVES, shelf_count=4),)
    if count == 2:
        return (
            WardrobeSection(type=SectionType.LONG_HANG),
            WardrobeSection(type=SectionType.SHELVES, shelf_count=3),
        )
    if count == 3:
        return (
            WardrobeSection(type=SectionType.LONG_HANG),
            WardrobeSection(type=SectionType.SHELVES, shelf_count=3),
            WardrobeSection(type=SectionType.DRAWERS, drawer_count=3),
        )
    return DEFAULT_WARDROBE_SECTIONS[:count]


def _hangers(
    x: float,
    rod_y: float,
    w: float,
    count: int,
    margin: float,
    hook: float,
    shoulder: float,
    garment_lengths: list[float],
) -> list[Shape]:
    """Hanger hooks, shoulders and garment silhouettes along a rod."""
    shapes: list[Shape] = []
    spacing = (w - margin * 2) / (count + 1)
    hook_y = rod_y + hook
    shoulder_y = rod_y + hook * 2
    for i in range(1, count + 1):
        hx = x + margin + spacing * i
        hem_y = rod_y + garment_lengths[i - 1]
        # garment sides taper by 2mm from shoulder to hem
        outer = shoulder - 2
        inner = shoulder - 4
        shapes.extend(
            [
                line(hx, rod_y, hx, hook_y, HATCH),
                line(hx - shoulder, shoulder_y, hx, hook_y, HATCH),
                line(hx + shoulder, shoulder_y, hx, hook_y, HATCH),
                line(hx - outer, shoulder_y + 6, hx - inner, hem_y, HATCH),
                line(hx + outer, shoulder_y + 6, hx + inner, hem_y, HATCH),
                line(hx - inner, hem_y, hx + inner, hem_y, HATCH),
            ]
        )
    return shapes


def _rod(x: float, rod_y: float, w: float, bracket: float) -> list[Shape]:
    return [
        line(x + 8, rod_y, x + w - 8, rod_y, FITTING),
        line(x + 8, rod_y - bracket, x + 8, rod_y + bracket, FITTING),
        line(x + w - 8, rod_y - bracket, x + w - 8, rod_y + bracket, FITTING),
    ]


def draw_long_hang(x: float, y: float, w: float, h: float) -> list[Shape]:
    """Rod near the top with 2-5 hangers, alternate garments longer."""
    rod_y = y + 50
    count = max(2, min(5, math.floor(w / 100)))
    lengths = [h * 0.5 + (40 if i % 2 == 0 else 0) for i in range(1, count + 1)]
    return _rod(x, rod_y, w, 6) + _hangers(
        x, rod_y, w, count, margin=20, hook=8, shoulder=18, garment_lengths=lengths
    )


def draw_short_hang(
    x: float, y: float, w: float, h: float, rod_pct: float, shelf_count: int
) -> list[Shape]:
    """Upper rod zone with 1-3 short hangers over a lower shelf zone."""
    rod_area_h = h * (rod_pct / 100)
    shelf_top = y + rod_area_h
    rod_y = y + 45
    count = max(1, min(3, math.floor(w / 120)))
    lengths = [rod_area_h * 0.55] * count

    shapes: list[Shape] = [line(x + 4, shelf_top, x + w - 4, shelf_top, PARTITION)]
    shapes.extend(_rod(x, rod_y, w, 5))
    shapes.extend(
        _hangers(
            x, rod_y, w, count, margin=15, hook=6, shoulder=14, garment_lengths=lengths
        )
    )
    shapes.extend(
        even_shelves(x, shelf_top, w, h - rod_area_h, max(1, shelf_count))
    )
    return shapes


def draw_section(
    section: WardrobeSection, x: float, y: float, w: float, h: float
) -> list[Shape]:
    """Interior drawing for one typed section. Open sections draw nothing."""
    if section.type == SectionType.LONG_HANG:
        return draw_long_hang(x, y, w, h)
    if section.type == SectionType.SHORT_HANG:
        rod_pct = clamp(safe(section.rod_height_pct, DEFAULT_ROD_HEIGHT_PCT), 10, 90)
        shelves = safe_count(
            section.shelf_count, DEFAULT_SHORT_HANG_SHELVES, MAX_SHELF_COUNT
        )
        return draw_short_hang(x, y, w, h, rod_pct, shelves)
    if section.type == SectionType.SHELVES:
        shelves = safe_count(section.shelf_count, DEFAULT_SHELVES, MAX_SHELF_COUNT)
        return even_shelves(x, y, w, h, shelves)
    if section.type == SectionType.DRAWERS:
        drawers = safe_count(section.drawer_count, DEFAULT_DRAWERS, MAX_DRAWER_COUNT)
        return stacked_drawers(x, y, w, h, drawers)
    return []


def _loft(
    config: ModuleConfig, ox: float, oy: float, W: float, H: float, T: float
) -> tuple[list[Shape], float]:
    """Loft floor, door dividers, handles and height callout.

    Returns the shapes and the Y of the loft floor's top edge.
    """
    loft_h = clamp(safe(config.loft_height_mm, DEFAULT_LOFT_HEIGHT), T * 2, H - T * 4)
    loft_y = oy + loft_h
    floor_y = loft_y - T
    inner_w = W - T * 2

    shapes: list[Shape] = [rect(ox + T, floor_y, inner_w, T, PANEL_STYLE)]

    doors = safe_count(config.shutter_count, 0, MAX_LOFT_DOORS) or DEFAULT_LOFT_DOORS
    door_w = inner_w / doors
    for i in range(1, doors):
        lx = ox + T + door_w * i
        shapes.append(line(lx, oy + T, lx, floor_y, FITTING))

    handle_w = min(40.0, door_w * 0.3)
    door_cy = oy + T + (loft_h - T * 2) / 2
    for i in range(doors):
        cx = ox + T + door_w * i + door_w / 2
        shapes.append(
            line(cx - handle_w / 2, door_cy, cx + handle_w / 2, door_cy, HANDLE)
        )

    dim_x = ox + W + 20
    label = mm_label(loft_h)
    shapes.append(
        dimension(dim_x, oy, dim_x, loft_y, label, DimensionOrientation.VERTICAL, 30)
    )
    return shapes, floor_y


def generate_sectioned_shapes(
    config: ModuleConfig | None, ox: float = 0.0, oy: float = 0.0
) -> list[Shape]:
    """Generate the wardrobe front view with typed sections.

    Sections without an explicit width share the inner width left after
    partitions. A partition is drawn after every section except the last.

    Args:
        config: Module configuration. ``None`` yields an empty drawing.
        ox: Origin X of the module's top-left corner.
        oy: Origin Y of the module's top-left corner.

    Returns:
        Shapes in draw order.
    """
    if config is None:
        return []

    shapes: list[Shape] = []
    W, H, T = carcass_dimensions(
        config.width_mm, config.height_mm, config.carcass_thickness_mm
    )

    shapes.append(rect(ox, oy, T, H, PANEL_STYLE))
    shapes.append(rect(ox + W - T, oy, T, H, PANEL_STYLE))
    shapes.append(rect(ox + T, oy, W - T * 2, T, PANEL_STYLE))
    shapes.append(rect(ox + T, oy + H - T, W - T * 2, T, PANEL_STYLE))

    cavity_top = oy + T
    loft_h = config.loft_height_mm
    if config.loft_enabled and (loft_h is None or loft_h > 0):
        loft_shapes, floor_y = _loft(config, ox, oy, W, H, T)
        shapes.extend(loft_shapes)
        cavity_top = floor_y + T
    cavity_h = oy + H - T - cavity_top

    sections = config.sections[:MAX_SECTIONS] or default_sections(
        safe_count(config.section_count, 1, MAX_SECTIONS)
    )
    total = len(sections)
    allocation = allocate_sections(W, T, total - 1)

    cursor = ox + T
    for idx, section in enumerate(sections):
        if section.width_mm > 0:
            section_w = section.width_mm
        else:
            section_w = allocation.section_widths[idx]
        # no room left after partitions
        if section_w <= 0:
            continue
        is_last = idx == total - 1

        if not is_last:
            shapes.append(
                rect(cursor + section_w, cavity_top, T, cavity_h, PARTITION_STYLE)
            )

        shapes.extend(draw_section(section, cursor, cavity_top, section_w, cavity_h))

        if total > 1:
            dim_y = oy + H + 10
            shapes.append(
                dimension(
                    cursor,
                    dim_y,
                    cursor + section_w,
                    dim_y,
                    mm_label(section_w),
                    DimensionOrientation.HORIZONTAL,
                    20,
                )
            )

        cursor += section_w + (0 if is_last else T)

    shapes.extend(dimension_pair(ox, oy, W, H))
    shapes.append(
        dimension(
            ox - 30, oy, ox - 30, oy + T, f"{T:g}", DimensionOrientation.VERTICAL, -20
        )
    )
    return shapes
