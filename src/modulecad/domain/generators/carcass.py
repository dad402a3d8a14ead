"""Panel-accurate front view of a wardrobe carcass.

Draws real panel thickness, per-panel enable/disable, optional skirting,
an inset back panel, center posts, per-section shelves and partial posts
hanging below the lowest shelf of a section.

Shapes are emitted in drafting order, which is also the z-order:
panels, skirting, back, posts, shelves, partial posts, dimensions.

Stable identifiers read by the restore-panel UI, the cut-list extractor
and the inner-dimension overlay:

    MOD-LEFT, MOD-RIGHT, MOD-TOP, MOD-BOTTOM   enabled carcass panels
    MOD-<PANEL>-DISABLED                        the same panel, outline only
    MOD-BACK                                    inset back panel
    MOD-SKIRTING                                skirting band
    MOD-POST-{n}                                center post, 1-indexed
    MOD-SHELF-{section}-{index}                 shelf, both 1-indexed
    MOD-PARTIAL-POST-{section}-{index}          partial post, both 1-indexed
"""

from __future__ import annotations

from dataclasses import dataclass

from ..entities import ModuleConfig, WardrobeSection
from ..primitives import dimension_pair, is_degenerate, rect
from ..section_allocator import allocate_sections
from ..value_objects import PanelSide, RectStyle, Shape
from .limits import (
    DEFAULT_SKIRTING_HEIGHT,
    MAX_POST_COUNT,
    MAX_SHELF_COUNT,
    MAX_SKIRTING_HEIGHT,
    MIN_SKIRTING_HEIGHT,
    carcass_dimensions,
    clamp,
    safe,
    safe_count,
)

PANEL_STYLE = RectStyle(fill="#d4d4d4", stroke="#333", stroke_width=1)
DISABLED_STYLE = RectStyle(fill="none", stroke="#ccc", stroke_width=0.5)
POST_STYLE = RectStyle(fill="#c0c0c0", stroke="#333", stroke_width=1)
PARTIAL_POST_STYLE = RectStyle(fill="#a8d4a8", stroke="#4a8f4a", stroke_width=1)
BACK_STYLE = RectStyle(fill="#f0f0f0", stroke="#999", stroke_width=0.5)
SKIRTING_STYLE = RectStyle(fill="#b8b8b8", stroke="#333", stroke_width=1)

BACK_INSET = 5.0
MIN_SHELF_PCT = 5.0
MAX_SHELF_PCT = 95.0

PANEL_IDS = {
    PanelSide.LEFT: "MOD-LEFT",
    PanelSide.RIGHT: "MOD-RIGHT",
    PanelSide.TOP: "MOD-TOP",
    PanelSide.BOTTOM: "MOD-BOTTOM",
    PanelSide.BACK: "MOD-BACK",
}
SKIRTING_ID = "MOD-SKIRTING"
DISABLED_SUFFIX = "-DISABLED"


def post_id(index: int) -> str:
    return f"MOD-POST-{index}"


def shelf_id(section: int, index: int) -> str:
    return f"MOD-SHELF-{section}-{index}"


def partial_post_id(section: int, index: int) -> str:
    return f"MOD-PARTIAL-POST-{section}-{index}"


@dataclass(frozen=True)
class _SectionBand:
    """Horizontal extent of one section plus where its partial posts start."""

    number: int
    section: WardrobeSection
    x: float
    width: float
    partial_top: float


def shelf_y(
    section: WardrobeSection,
    index: int,
    count: int,
    top: float,
    height: float,
    thickness: float,
) -> float:
    """Absolute Y of the top edge of shelf ``index`` (1-based) of ``count``.

    Custom positions are percentages of the section height, clamped to
    [5, 95]. Otherwise shelves are spaced evenly after reserving room for
    their own thickness so thick shelves never overlap.
    """
    count = max(1, count)
    index = int(clamp(index, 1, count))
    positions = section.shelf_positions
    if index <= len(positions):
        pct = clamp(positions[index - 1], MIN_SHELF_PCT, MAX_SHELF_PCT)
        return top + (pct / 100) * height

    available = max(thickness * 2, height - count * thickness)
    spacing = available / (count + 1)
    return top + spacing * index + thickness * (index - 1)


def _panel(
    x: float, y: float, w: float, h: float, side: PanelSide, enabled: bool
) -> Shape:
    if enabled:
        return rect(x, y, w, h, PANEL_STYLE, PANEL_IDS[side])
    return rect(x, y, w, h, DISABLED_STYLE, PANEL_IDS[side] + DISABLED_SUFFIX)


def generate_carcass_shapes(
    config: ModuleConfig | None, ox: float = 0.0, oy: float = 0.0
) -> list[Shape]:
    """Generate the carcass front view.

    Never raises: missing or invalid numbers are replaced by defaults and
    clamped to safety bounds before any geometry is produced.

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
    post_count = safe_count(config.center_post_count, 0, MAX_POST_COUNT)
    skirting_h = 0.0
    if config.skirting_enabled:
        skirting_h = clamp(
            safe(config.skirting_height_mm, DEFAULT_SKIRTING_HEIGHT),
            MIN_SKIRTING_HEIGHT,
            MAX_SKIRTING_HEIGHT,
        )
        # keep at least one panel thickness of cavity above the bottom panel
        skirting_h = min(skirting_h, max(0.0, H - T * 3))
    panels = config.panels_enabled

    # Carcass panels
    bottom_y = oy + H - T - skirting_h
    shapes.append(_panel(ox, oy, T, H, PanelSide.LEFT, panels.left))
    shapes.append(_panel(ox + W - T, oy, T, H, PanelSide.RIGHT, panels.right))
    shapes.append(_panel(ox + T, oy, W - T * 2, T, PanelSide.TOP, panels.top))
    shapes.append(
        _panel(ox + T, bottom_y, W - T * 2, T, PanelSide.BOTTOM, panels.bottom)
    )

    if skirting_h > 0:
        shapes.append(
            rect(ox, oy + H - skirting_h, W, skirting_h, SKIRTING_STYLE, SKIRTING_ID)
        )

    cavity_top = oy + T
    cavity_h = H - T * 2 - skirting_h

    if panels.back:
        back_w = W - T * 2 - BACK_INSET * 2
        back_h = cavity_h - BACK_INSET * 2
        if not is_degenerate(back_w, back_h):
            shapes.append(
                rect(
                    ox + T + BACK_INSET,
                    cavity_top + BACK_INSET,
                    back_w,
                    back_h,
                    BACK_STYLE,
                    PANEL_IDS[PanelSide.BACK],
                )
            )

    if is_degenerate(T, cavity_h):
        shapes.extend(dimension_pair(ox, oy, W, H))
        return shapes

    allocation = allocate_sections(W, T, post_count, config.center_post_positions)
    for i, position in enumerate(allocation.post_positions, start=1):
        shapes.append(
            rect(ox + T + position, cavity_top, T, cavity_h, POST_STYLE, post_id(i))
        )

    # Shelves, left to right; partial posts are drawn afterwards so they
    # sit above every shelf.
    bands: list[_SectionBand] = []
    cavity_bottom = cavity_top + cavity_h
    cursor = ox + T
    for number, section in enumerate(config.sections[: post_count + 1], start=1):
        if section.width_mm > 0:
            section_w = section.width_mm
        else:
            section_w = allocation.section_widths[number - 1]
        shelf_count = safe_count(section.shelf_count, 0, MAX_SHELF_COUNT)

        lowest_bottom = cavity_top
        if section_w > 0:
            for j in range(1, shelf_count + 1):
                y = shelf_y(section, j, shelf_count, cavity_top, cavity_h, T)
                # shelves must start inside the [top, bottom) cavity band
                if not cavity_top <= y < cavity_bottom:
                    continue
                shapes.append(
                    rect(cursor, y, section_w, T, PANEL_STYLE, shelf_id(number, j))
                )
                lowest_bottom = max(lowest_bottom, y + T)

        bands.append(_SectionBand(number, section, cursor, section_w, lowest_bottom))
        cursor += section_w + T

    for band in bands:
        shapes.extend(_partial_posts(band, bottom_y, T))

    shapes.extend(dimension_pair(ox, oy, W, H))
    return shapes


def _partial_posts(
    band: _SectionBand, floor_y: float, thickness: float
) -> list[Shape]:
    count = safe_count(band.section.posts_below, 0, MAX_POST_COUNT)
    post_h = floor_y - band.partial_top
    if count == 0 or post_h <= thickness or band.width <= 0:
        return []

    spacing = (band.width - count * thickness) / (count + 1)
    return [
        rect(
            band.x + spacing * (p + 1) + thickness * p,
            band.partial_top,
            thickness,
            post_h,
            PARTIAL_POST_STYLE,
            partial_post_id(band.number, p + 1),
        )
        for p in range(count)
    ]
