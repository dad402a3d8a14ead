"""JSON exporter for module drawings.

The document carries a schema version, the drawing bounds and the shape
list in draw order. Each shape is a flat object tagged with ``type``
(``line``, ``rect`` or ``dimension``) using the canvas field names.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any, ClassVar

from modulecad.domain.value_objects import Shape
from modulecad.infrastructure.exporters.base import ExporterRegistry, compute_bounds

logger = logging.getLogger(__name__)


# Current schema version for JSON drawing output
SCHEMA_VERSION = "1.0"


@ExporterRegistry.register("json")
class JsonExporter:
    """JSON exporter for module drawings.

    Attributes:
        format_name: "json"
        file_extension: "json"
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, indent: int | None = 2) -> None:
        self.indent = indent

    def export(self, shapes: Sequence[Shape], path: Path) -> None:
        path.write_text(self.export_string(shapes), encoding="utf-8")
        logger.info(f"Exported JSON to {path}")

    def export_string(self, shapes: Sequence[Shape]) -> str:
        return json.dumps(self.build(shapes), indent=self.indent)

    def build(self, shapes: Sequence[Shape]) -> dict[str, Any]:
        bounds = compute_bounds(shapes)
        return {
            "schema_version": SCHEMA_VERSION,
            "bounds": {
                "x": bounds.min_x,
                "y": bounds.min_y,
                "w": bounds.width,
                "h": bounds.height,
            },
            "shapes": [shape.to_dict() for shape in shapes],
        }
