"""Exporter framework for module drawings.

This package provides:
- Exporter Protocol: Defines the interface for all exporters
- ExporterRegistry: Central registry for format discovery
- ExportManager: Coordinates multi-format export operations

Registered exporters:
- dxf: DXF (R2010) for CAD hand-off
- json: Shape list with bounds, for other tools
- svg: Scalable vector front view

Usage:
    from modulecad.infrastructure.exporters import ExportManager, ExporterRegistry

    svg = ExporterRegistry.get("svg")().export_string(shapes)

    manager = ExportManager(output_dir=Path("./output"))
    manager.export_all(["svg", "dxf"], shapes, project_name="wardrobe")
"""

from modulecad.infrastructure.exporters.base import (
    Bounds,
    Exporter,
    ExporterRegistry,
    ExportManager,
    compute_bounds,
)
from modulecad.infrastructure.exporters.dxf import DxfExporter
from modulecad.infrastructure.exporters.json_exporter import JsonExporter
from modulecad.infrastructure.exporters.svg import SvgExporter

__all__ = [
    "Bounds",
    "DxfExporter",
    "Exporter",
    "ExporterRegistry",
    "ExportManager",
    "JsonExporter",
    "SvgExporter",
    "compute_bounds",
]
