"""Section width and center post allocation for carcass layouts.

Given the overall carcass width, the panel thickness and a number of
center posts, this module works out where each post sits and how wide
each section between them is. Posts share the carcass thickness, so:

    sum(section_widths) + post_count * thickness == width - 2 * thickness

holds for both equal spacing and explicit post positions.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class SectionAllocation:
    """Result of a section allocation.

    Attributes:
        inner_width: Width between the left and right panels.
        section_widths: Usable width of each section, left to right.
        post_positions: X offset of each post's left edge, measured from
            the inner-left face of the carcass.
    """

    inner_width: float
    section_widths: tuple[float, ...]
    post_positions: tuple[float, ...]

    @property
    def section_count(self) -> int:
        return len(self.section_widths)

    def section_offset(self, index: int, thickness: float) -> float:
        """X offset of a section's left edge from the inner-left face."""
        return sum(self.section_widths[:index]) + thickness * index


def allocate_sections(
    width: float,
    thickness: float,
    post_count: int,
    custom_positions: Sequence[float] | None = None,
) -> SectionAllocation:
    """Compute post offsets and section widths for a carcass.

    The post count must already be a valid non-negative integer; this
    function does not validate it.

    Args:
        width: Overall carcass width in mm.
        thickness: Panel (and post) thickness in mm.
        post_count: Number of center posts.
        custom_positions: Optional explicit post offsets in mm from the
            inner-left face. Used only when there is one per post and every
            resulting section is wider than zero; otherwise posts are
            spaced equally.

    Returns:
        The allocation. With no posts there is a single section spanning
        the whole inner width.

    Example:
        >>> allocate_sections(1200, 18, 2).section_widths
        (376.0, 376.0, 376.0)
    """
    inner_width = width - 2 * thickness
    if post_count <= 0:
        return SectionAllocation(inner_width, (inner_width,), ())

    if custom_positions is not None and len(custom_positions) == post_count:
        allocation = _allocate_custom(inner_width, thickness, custom_positions)
        if allocation is not None:
            return allocation

    band = (inner_width - post_count * thickness) / (post_count + 1)
    positions = tuple(band * i + thickness * (i - 1) for i in range(1, post_count + 1))
    return SectionAllocation(inner_width, (band,) * (post_count + 1), positions)


def _allocate_custom(
    inner_width: float, thickness: float, custom_positions: Sequence[float]
) -> SectionAllocation | None:
    try:
        positions = sorted(float(p) for p in custom_positions)
    except (TypeError, ValueError):
        return None
    if not all(math.isfinite(p) for p in positions):
        return None

    widths: list[float] = []
    edge = 0.0
    for position in positions:
        widths.append(position - edge)
        edge = position + thickness
    widths.append(inner_width - edge)

    if any(w <= 0 for w in widths):
        return None
    return SectionAllocation(inner_width, tuple(widths), tuple(positions))
