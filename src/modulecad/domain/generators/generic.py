"""Generic front view for unit types without a dedicated generator."""

from __future__ import annotations

from ..entities import ModuleConfig
from ..primitives import dimension_pair, even_shelves, outline, shutter_grid
from ..value_objects import Shape
from .limits import carcass_dimensions, safe_count

MAX_SECTION_COUNT = 10
MAX_SHUTTER_COUNT = 10


def generate_generic_shapes(
    config: ModuleConfig | None, ox: float = 0.0, oy: float = 0.0
) -> list[Shape]:
    """Outline, evenly spaced shelves and a bottom row of shutters.

    The shutter row occupies the bottom ``H / (sections + 1)`` of the box
    and is drawn only when the shutter count is positive.
    """
    if config is None:
        return []

    W, H, _ = carcass_dimensions(
        config.width_mm, config.height_mm, config.carcass_thickness_mm
    )
    sections = max(1, safe_count(config.section_count, 1, MAX_SECTION_COUNT))
    shutters = safe_count(config.shutter_count, 0, MAX_SHUTTER_COUNT)

    shapes: list[Shape] = []
    shapes.extend(outline(ox, oy, W, H))
    shapes.extend(even_shelves(ox, oy, W, H, sections))
    if shutters > 0:
        band_h = H / (sections + 1)
        shapes.extend(shutter_grid(ox, oy + H - band_h, W, band_h, shutters, 1))
    shapes.extend(dimension_pair(ox, oy, W, H))
    return shapes
