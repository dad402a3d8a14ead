"""DXF format exporter for module front views.

Generates 2D DXF files (R2010 format) for CAD hand-off. The drawing is
in millimetres. DXF is Y-up while shapes are Y-down, so every Y
coordinate is negated.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from io import StringIO
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

import ezdxf
from ezdxf import units
from ezdxf.enums import TextEntityAlignment

from modulecad.domain.value_objects import (
    DimensionOrientation,
    DimensionShape,
    LineShape,
    RectShape,
    Shape,
)
from modulecad.infrastructure.exporters.base import ExporterRegistry, dimension_line

if TYPE_CHECKING:
    from ezdxf.document import Drawing
    from ezdxf.layouts import Modelspace


logger = logging.getLogger(__name__)


# Layer configuration for DXF output
LAYERS = {
    "PANELS": {"color": 7},  # White - panels, posts, shelves
    "LINES": {"color": 8},  # Grey - fittings, hangers, handles
    "DIMENSIONS": {"color": 3},  # Green - callouts and labels
}


@ExporterRegistry.register("dxf")
class DxfExporter:
    """Exports module drawings to DXF.

    Rectangles become closed polylines on PANELS, lines go to LINES and
    dimension callouts are drawn as lines plus a text label on DIMENSIONS.

    Attributes:
        format_name: "dxf"
        file_extension: "dxf"
    """

    format_name: ClassVar[str] = "dxf"
    file_extension: ClassVar[str] = "dxf"

    def __init__(self, text_height: float = 24.0) -> None:
        """Initialize the DXF exporter.

        Args:
            text_height: Dimension label height in mm.
        """
        if text_height <= 0:
            raise ValueError(f"Invalid text_height: {text_height}. Must be positive")
        self.text_height = text_height

    def export(self, shapes: Sequence[Shape], path: Path) -> None:
        doc = self.build_document(shapes)
        doc.saveas(path)
        logger.info(f"Exported DXF to {path}")

    def export_string(self, shapes: Sequence[Shape]) -> str:
        stream = StringIO()
        self.build_document(shapes).write(stream)
        return stream.getvalue()

    def build_document(self, shapes: Sequence[Shape]) -> Drawing:
        """Create a DXF document containing ``shapes`` in draw order."""
        doc = ezdxf.new("R2010")
        doc.units = units.MM
        for name, props in LAYERS.items():
            doc.layers.add(name, color=props["color"])

        msp = doc.modelspace()
        for shape in shapes:
            if isinstance(shape, RectShape):
                self._draw_rect(msp, shape)
            elif isinstance(shape, LineShape):
                msp.add_line(
                    (shape.x1, -shape.y1),
                    (shape.x2, -shape.y2),
                    dxfattribs={"layer": "LINES"},
                )
            else:
                self._draw_dimension(msp, shape)
        logger.debug(f"Built DXF document with {len(shapes)} shapes")
        return doc

    def _draw_rect(self, msp: Modelspace, shape: RectShape) -> None:
        points = [
            (shape.x, -shape.y),
            (shape.right, -shape.y),
            (shape.right, -shape.bottom),
            (shape.x, -shape.bottom),
        ]
        msp.add_lwpolyline(points, close=True, dxfattribs={"layer": "PANELS"})

    def _draw_dimension(self, msp: Modelspace, shape: DimensionShape) -> None:
        x1, y1, x2, y2 = dimension_line(shape)
        attribs = {"layer": "DIMENSIONS"}
        msp.add_line((shape.x1, -shape.y1), (x1, -y1), dxfattribs=attribs)
        msp.add_line((shape.x2, -shape.y2), (x2, -y2), dxfattribs=attribs)
        msp.add_line((x1, -y1), (x2, -y2), dxfattribs=attribs)

        mid = ((x1 + x2) / 2, -(y1 + y2) / 2)
        rotation = 90 if shape.orientation == DimensionOrientation.VERTICAL else 0
        text = msp.add_text(
            shape.label,
            height=self.text_height,
            rotation=rotation,
            dxfattribs=attribs,
        )
        text.set_placement(mid, align=TextEntityAlignment.BOTTOM_CENTER)


__all__ = ["DxfExporter", "LAYERS"]
