"""Unit tests for shape factories and composite drafting helpers."""

from __future__ import annotations

import pytest

from modulecad.domain.primitives import (
    CARCASS,
    DEFAULT_RECT,
    FITTING,
    HANDLE,
    PARTITION,
    dimension,
    dimension_pair,
    even_shelves,
    line,
    mm_label,
    new_shape_id,
    outline,
    rect,
    shutter_grid,
    stacked_drawers,
)
from modulecad.domain.value_objects import (
    DimensionOrientation,
    DimensionShape,
    LineShape,
    RectShape,
)


class TestShapeIds:
    """Tests for generated shape identifiers."""

    def test_generated_id_format(self) -> None:
        """Generated ids use the MOD- prefix and eight hex digits."""
        shape_id = new_shape_id()
        assert shape_id.startswith("MOD-")
        assert len(shape_id) == 12
        int(shape_id[4:], 16)

    def test_generated_ids_are_unique(self) -> None:
        ids = {new_shape_id() for _ in range(200)}
        assert len(ids) == 200

    def test_explicit_id_is_kept(self) -> None:
        assert rect(0, 0, 10, 10, shape_id="MOD-LEFT").id == "MOD-LEFT"
        assert line(0, 0, 10, 0, shape_id="MOD-X").id == "MOD-X"


class TestMmLabel:
    """Tests for millimetre labels."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(1200, "1200"), (2.4, "2"), (2.5, "3"), (375.99, "376"), (0, "0")],
    )
    def test_rounds_to_whole_millimetres(self, value: float, expected: str) -> None:
        assert mm_label(value) == expected


class TestFactories:
    """Tests for the line, rect and dimension factories."""

    def test_line_defaults_to_partition_weight(self) -> None:
        shape = line(0, 0, 100, 0)
        assert isinstance(shape, LineShape)
        assert shape.color == PARTITION.color
        assert shape.thickness == PARTITION.thickness

    def test_line_uses_given_style(self) -> None:
        shape = line(0, 0, 100, 0, HANDLE)
        assert shape.color == "#00e5ff"
        assert shape.thickness == 2.5

    def test_rect_defaults_to_outline_style(self) -> None:
        shape = rect(10, 20, 30, 40)
        assert isinstance(shape, RectShape)
        assert shape.fill == DEFAULT_RECT.fill == "none"
        assert shape.right == 40
        assert shape.bottom == 60
        assert not shape.is_filled

    def test_dimension_fields(self) -> None:
        shape = dimension(0, 0, 100, 0, "100", DimensionOrientation.HORIZONTAL, 25)
        assert isinstance(shape, DimensionShape)
        assert shape.label == "100"
        assert shape.offset == 25

    def test_to_dict_is_tagged(self) -> None:
        """Shape dictionaries carry a type tag and canvas field names."""
        data = rect(0, 0, 10, 10, shape_id="MOD-TOP").to_dict()
        assert data["type"] == "rect"
        assert data["id"] == "MOD-TOP"
        assert "strokeWidth" in data

        data = dimension(
            0, 0, 0, 10, "10", DimensionOrientation.VERTICAL
        ).to_dict()
        assert data["type"] == "dimension"
        assert data["orientation"] == "vertical"


class TestOutline:
    """Tests for the four-line outline helper."""

    def test_four_carcass_lines(self) -> None:
        shapes = outline(0, 0, 900, 1800)
        assert len(shapes) == 4
        assert all(s.color == CARCASS.color for s in shapes)
        assert (shapes[0].x1, shapes[0].y1, shapes[0].x2, shapes[0].y2) == (
            0,
            0,
            900,
            0,
        )

    def test_degenerate_outline_is_empty(self) -> None:
        assert outline(0, 0, 0, 100) == []
        assert outline(0, 0, 100, -5) == []


class TestDimensionPair:
    """Tests for the overall width and height callouts."""

    def test_width_below_and_height_left(self) -> None:
        width, height = dimension_pair(100, 50, 1200, 2400)

        assert width.orientation == DimensionOrientation.HORIZONTAL
        assert width.label == "1200"
        assert width.y1 == width.y2 == 50 + 2400 + 40
        assert (width.x1, width.x2) == (100, 1300)
        assert width.offset == 30

        assert height.orientation == DimensionOrientation.VERTICAL
        assert height.label == "2400"
        assert height.x1 == height.x2 == 100 - 50
        assert (height.y1, height.y2) == (50, 2450)
        assert height.offset == -30

    def test_degenerate_box_has_no_callouts(self) -> None:
        assert dimension_pair(0, 0, 0, 2400) == []
        assert dimension_pair(0, 0, 1200, -1) == []


class TestEvenShelves:
    """Tests for evenly spaced shelf lines."""

    def test_equal_gaps(self) -> None:
        shapes = even_shelves(0, 0, 200, 400, 3)
        assert [s.y1 for s in shapes] == [100, 200, 300]
        assert all(s.x1 == 4 and s.x2 == 196 for s in shapes)
        assert all(s.color == FITTING.color for s in shapes)

    def test_zero_count_or_degenerate_is_empty(self) -> None:
        assert even_shelves(0, 0, 200, 400, 0) == []
        assert even_shelves(0, 0, 0, 400, 3) == []


class TestStackedDrawers:
    """Tests for drawer stacks."""

    def test_outline_and_handle_per_drawer(self) -> None:
        shapes = stacked_drawers(0, 0, 200, 300, 3)
        assert len(shapes) == 15

        handles = [s for s in shapes if s.color == HANDLE.color]
        assert len(handles) == 3
        assert [h.y1 for h in handles] == [50, 150, 250]
        assert all(h.x2 - h.x1 == 50 for h in handles)

    def test_too_small_for_padding_is_empty(self) -> None:
        assert stacked_drawers(0, 0, 10, 300, 3) == []
        assert stacked_drawers(0, 0, 200, 30, 3) == []


class TestShutterGrid:
    """Tests for shutter grids."""

    def test_handles_face_away_from_each_other(self) -> None:
        shapes = shutter_grid(0, 0, 200, 100, 2, 1)
        handles = [s for s in shapes if s.color == HANDLE.color]

        assert len(shapes) == 10
        assert len(handles) == 2
        # shutter width (200 - 12 - 4) / 2 = 92
        assert handles[0].x1 == pytest.approx(6 + 92 - 15)
        assert handles[1].x1 == pytest.approx(6 + 96 + 15)
        assert all(h.x1 == h.x2 for h in handles)

    def test_handle_length_is_capped(self) -> None:
        shapes = shutter_grid(0, 0, 600, 1000, 1, 1)
        handle = shapes[-1]
        assert handle.y2 - handle.y1 == pytest.approx(40)

    def test_invalid_grid_is_empty(self) -> None:
        assert shutter_grid(0, 0, 200, 100, 0, 1) == []
        assert shutter_grid(0, 0, 10, 100, 3, 1) == []
