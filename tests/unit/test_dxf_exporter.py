"""Unit tests for the DXF exporter."""

from __future__ import annotations

from io import StringIO
from pathlib import Path

import ezdxf
import pytest

from modulecad.domain.entities import ModuleConfig
from modulecad.domain.generators import generate_carcass_shapes
from modulecad.domain.primitives import dimension, line, rect
from modulecad.domain.value_objects import DimensionOrientation, RectShape, Shape
from modulecad.infrastructure.exporters import DxfExporter, ExporterRegistry
from modulecad.infrastructure.exporters.dxf import LAYERS


@pytest.fixture
def carcass_shapes(carcass_config: ModuleConfig) -> list[Shape]:
    return generate_carcass_shapes(carcass_config)


class TestDxfExporterRegistration:
    """Tests for DXF exporter registration."""

    def test_registered(self) -> None:
        assert ExporterRegistry.get("dxf") is DxfExporter

    def test_invalid_text_height(self) -> None:
        with pytest.raises(ValueError):
            DxfExporter(text_height=0)


class TestDxfDocument:
    """Tests for the generated DXF document."""

    def test_layers(self, carcass_shapes: list[Shape]) -> None:
        doc = DxfExporter().build_document(carcass_shapes)
        for name, props in LAYERS.items():
            assert doc.layers.has_entry(name)
            assert doc.layers.get(name).color == props["color"]

    def test_entity_counts(self, carcass_shapes: list[Shape]) -> None:
        msp = DxfExporter().build_document(carcass_shapes).modelspace()
        rect_count = sum(isinstance(s, RectShape) for s in carcass_shapes)

        assert len(msp.query("LWPOLYLINE")) == rect_count
        # three lines per dimension callout
        assert len(msp.query("LINE")) == 2 * 3
        assert len(msp.query("TEXT")) == 2

    def test_rects_are_closed_and_y_flipped(self) -> None:
        shapes = [rect(18, 0, 1164, 18, shape_id="MOD-TOP")]
        msp = DxfExporter().build_document(shapes).modelspace()
        polyline = msp.query("LWPOLYLINE").first

        assert polyline.closed
        assert polyline.dxf.layer == "PANELS"
        points = list(polyline.get_points("xy"))
        assert points == [(18, 0), (1182, 0), (1182, -18), (18, -18)]

    def test_lines_on_lines_layer(self) -> None:
        msp = DxfExporter().build_document([line(0, 10, 100, 10)]).modelspace()
        entity = msp.query("LINE").first
        assert entity.dxf.layer == "LINES"
        assert entity.dxf.start.y == -10

    def test_vertical_dimension_text(self) -> None:
        callout = dimension(0, 0, 0, 400, "400", DimensionOrientation.VERTICAL, -30)
        msp = DxfExporter(text_height=10).build_document([callout]).modelspace()
        text = msp.query("TEXT").first

        assert text.dxf.text == "400"
        assert text.dxf.rotation == 90
        assert text.dxf.height == 10
        assert text.dxf.layer == "DIMENSIONS"

    def test_units_are_millimetres(self) -> None:
        doc = DxfExporter().build_document([])
        assert doc.units == ezdxf.units.MM


class TestDxfOutput:
    """Tests for writing DXF files and strings."""

    def test_export_round_trip(
        self, tmp_path: Path, carcass_shapes: list[Shape]
    ) -> None:
        path = tmp_path / "carcass.dxf"
        DxfExporter().export(carcass_shapes, path)

        doc = ezdxf.readfile(path)
        assert doc.dxfversion == "AC1024"
        assert len(doc.modelspace().query("LWPOLYLINE")) == 10

    def test_export_string(self, carcass_shapes: list[Shape]) -> None:
        text = DxfExporter().export_string(carcass_shapes)
        doc = ezdxf.read(StringIO(text))
        assert len(doc.modelspace().query("TEXT")) == 2
