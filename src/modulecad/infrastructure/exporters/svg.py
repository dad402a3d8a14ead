"""SVG exporter for module front views.

Shapes are written in draw order so later shapes sit on top, matching
the design canvas. Every element carries the shape identifier as its
``id`` so stable panel, post and shelf ids survive the export.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import ClassVar
from xml.sax.saxutils import escape, quoteattr

from modulecad.domain.value_objects import (
    DimensionOrientation,
    DimensionShape,
    LineShape,
    RectShape,
    Shape,
)
from modulecad.infrastructure.exporters.base import (
    ExporterRegistry,
    compute_bounds,
    dimension_line,
)

DIMENSION_COLOR = "#666"
TICK_SIZE = 6.0


def _num(value: float) -> str:
    """Format a coordinate with at most three decimals."""
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


@ExporterRegistry.register("svg")
class SvgExporter:
    """SVG exporter for module drawings.

    Attributes:
        format_name: Identifier for this export format.
        file_extension: File extension for SVG files.
    """

    format_name: ClassVar[str] = "svg"
    file_extension: ClassVar[str] = "svg"

    def __init__(
        self,
        margin: float = 80.0,
        font_size: float = 24.0,
        background: str | None = None,
    ) -> None:
        """Initialize the SVG exporter.

        Args:
            margin: Space around the drawing's bounds, in mm.
            font_size: Dimension label size, in mm.
            background: Optional fill color drawn behind everything.
        """
        self.margin = margin
        self.font_size = font_size
        self.background = background

    def export(self, shapes: Sequence[Shape], path: Path) -> None:
        path.write_text(self.export_string(shapes), encoding="utf-8")

    def export_string(self, shapes: Sequence[Shape]) -> str:
        bounds = compute_bounds(shapes).expanded(self.margin)
        parts = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            f'<svg xmlns="http://www.w3.org/2000/svg" '
            f'width="{_num(bounds.width)}mm" height="{_num(bounds.height)}mm" '
            f'viewBox="{_num(bounds.min_x)} {_num(bounds.min_y)} '
            f'{_num(bounds.width)} {_num(bounds.height)}">',
        ]
        if self.background:
            parts.append(
                f'  <rect x="{_num(bounds.min_x)}" y="{_num(bounds.min_y)}" '
                f'width="{_num(bounds.width)}" height="{_num(bounds.height)}" '
                f"fill={quoteattr(self.background)}/>"
            )
        for shape in shapes:
            parts.append(self._render(shape))
        parts.append("</svg>")
        return "\n".join(parts) + "\n"

    def _render(self, shape: Shape) -> str:
        if isinstance(shape, RectShape):
            return (
                f"  <rect id={quoteattr(shape.id)} "
                f'x="{_num(shape.x)}" y="{_num(shape.y)}" '
                f'width="{_num(shape.w)}" height="{_num(shape.h)}" '
                f"fill={quoteattr(shape.fill)} stroke={quoteattr(shape.stroke)} "
                f'stroke-width="{_num(shape.stroke_width)}"/>'
            )
        if isinstance(shape, LineShape):
            return (
                f"  <line id={quoteattr(shape.id)} "
                f'x1="{_num(shape.x1)}" y1="{_num(shape.y1)}" '
                f'x2="{_num(shape.x2)}" y2="{_num(shape.y2)}" '
                f"stroke={quoteattr(shape.color)} "
                f'stroke-width="{_num(shape.thickness)}"/>'
            )
        return self._render_dimension(shape)

    def _render_dimension(self, shape: DimensionShape) -> str:
        """Extension lines, the callout line, end ticks and a centered label."""
        x1, y1, x2, y2 = dimension_line(shape)
        mid_x = (x1 + x2) / 2
        mid_y = (y1 + y2) / 2
        t = TICK_SIZE / 2

        segments = [
            (shape.x1, shape.y1, x1, y1),
            (shape.x2, shape.y2, x2, y2),
            (x1, y1, x2, y2),
            (x1 - t, y1 + t, x1 + t, y1 - t),
            (x2 - t, y2 + t, x2 + t, y2 - t),
        ]
        if shape.orientation == DimensionOrientation.HORIZONTAL:
            text = (
                f'    <text x="{_num(mid_x)}" y="{_num(mid_y - 4)}" '
                f'text-anchor="middle" stroke="none">'
            )
        else:
            text = (
                f'    <text x="{_num(mid_x - 4)}" y="{_num(mid_y)}" '
                f'text-anchor="middle" stroke="none" '
                f'transform="rotate(-90 {_num(mid_x - 4)} {_num(mid_y)})">'
            )

        lines = [
            f"  <g id={quoteattr(shape.id)} class=\"dimension\" "
            f'stroke="{DIMENSION_COLOR}" stroke-width="0.5" '
            f'fill="{DIMENSION_COLOR}" font-size="{_num(self.font_size)}">'
        ]
        for sx1, sy1, sx2, sy2 in segments:
            lines.append(
                f'    <line x1="{_num(sx1)}" y1="{_num(sy1)}" '
                f'x2="{_num(sx2)}" y2="{_num(sy2)}"/>'
            )
        lines.append(f"{text}{escape(shape.label)}</text>")
        lines.append("  </g>")
        return "\n".join(lines)
