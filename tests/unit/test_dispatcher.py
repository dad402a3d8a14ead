"""Unit tests for routing configurations to generators."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from modulecad.domain.dispatcher import (
    GENERATORS,
    ShapeDispatcher,
    generate_module_shapes,
)
from modulecad.domain.entities import ModuleConfig
from modulecad.domain.generators import (
    generate_carcass_shapes,
    generate_generic_shapes,
    generate_sectioned_shapes,
)
from modulecad.domain.primitives import line
from modulecad.domain.value_objects import Point2D, RectShape, Shape, UnitType


def geometry(shapes: list[Shape]) -> list[dict[str, Any]]:
    """Shape dictionaries without generated identifiers."""
    result = []
    for shape in shapes:
        data = shape.to_dict()
        if not data["id"].startswith(("MOD-LEFT", "MOD-RIGHT", "MOD-POST")):
            data.pop("id")
        result.append(data)
    return result


class TestGeneratorTable:
    """Tests for the built-in generator table."""

    def test_table_covers_every_unit_type(self) -> None:
        assert set(GENERATORS) == set(UnitType)
        assert GENERATORS[UnitType.WARDROBE_CARCASS] is generate_carcass_shapes
        assert GENERATORS[UnitType.WARDROBE] is generate_sectioned_shapes
        assert GENERATORS[UnitType.OTHER] is generate_generic_shapes

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            GENERATORS[UnitType.OTHER] = generate_carcass_shapes  # type: ignore[index]


class TestShapeDispatcher:
    """Tests for ShapeDispatcher."""

    def test_none_config(self) -> None:
        assert ShapeDispatcher().generate(None) == []
        assert generate_module_shapes(None) == []

    def test_routes_carcass(self) -> None:
        config = ModuleConfig(unit_type="wardrobe_carcass", center_post_count=1)
        shapes = generate_module_shapes(config)
        assert any(s.id == "MOD-POST-1" for s in shapes)

    def test_routes_wardrobe(self) -> None:
        config = ModuleConfig(unit_type="wardrobe", width_mm=1800)
        assert geometry(generate_module_shapes(config)) == geometry(
            generate_sectioned_shapes(config)
        )

    @pytest.mark.parametrize("tag", ["kitchen", "tv_unit", ""])
    def test_unknown_tag_uses_generic(self, tag: str) -> None:
        config = ModuleConfig(
            unit_type=tag, width_mm=900, height_mm=1800, shutter_count=2
        )
        assert geometry(generate_module_shapes(config)) == geometry(
            generate_generic_shapes(config)
        )

    def test_unknown_tag_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="modulecad.domain.dispatcher"):
            ShapeDispatcher().generator_for("kitchen")
        assert "kitchen" in caplog.text

    def test_origin_is_passed_through(self) -> None:
        config = ModuleConfig(unit_type="wardrobe_carcass")
        shapes = generate_module_shapes(config, Point2D(100, 50))
        left = next(s for s in shapes if s.id == "MOD-LEFT")
        assert (left.x, left.y) == (100, 50)


class TestDispatcherDefaults:
    """Tests for unit-type default injection."""

    def test_missing_fields_filled(self) -> None:
        dispatcher = ShapeDispatcher({"wardrobe_carcass": {"width_mm": 1500}})
        shapes = dispatcher.generate(ModuleConfig(unit_type="wardrobe_carcass"))
        right = next(s for s in shapes if s.id == "MOD-RIGHT")
        assert isinstance(right, RectShape)
        assert right.x == 1500 - 18

    def test_explicit_fields_win(self) -> None:
        dispatcher = ShapeDispatcher({"wardrobe_carcass": {"width_mm": 1500}})
        config = ModuleConfig(unit_type="wardrobe_carcass", width_mm=1000)
        assert dispatcher.resolve(config).width_mm == 1000

    def test_unknown_tag_uses_other_defaults(self) -> None:
        dispatcher = ShapeDispatcher({"other": {"width_mm": 900}})
        assert dispatcher.defaults_for("kitchen") == {"width_mm": 900}
        resolved = dispatcher.resolve(ModuleConfig(unit_type="kitchen"))
        assert resolved.width_mm == 900
        assert resolved.unit_type == "kitchen"

    def test_tag_specific_defaults_take_precedence(self) -> None:
        dispatcher = ShapeDispatcher(
            {"kitchen": {"width_mm": 600}, "other": {"width_mm": 900}}
        )
        assert dispatcher.defaults_for("kitchen") == {"width_mm": 600}

    def test_no_defaults(self) -> None:
        assert ShapeDispatcher().defaults_for("wardrobe") == {}


class TestCustomGenerators:
    """Tests for replacing the generator table."""

    def test_custom_generator_receives_origin(self) -> None:
        calls: list[tuple[ModuleConfig | None, float, float]] = []

        def marker(config: ModuleConfig | None, ox: float, oy: float) -> list[Shape]:
            calls.append((config, ox, oy))
            return [line(ox, oy, ox + 1, oy, shape_id="MARK")]

        dispatcher = ShapeDispatcher(generators={UnitType.WARDROBE: marker})
        shapes = dispatcher.generate(
            ModuleConfig(unit_type="wardrobe"), Point2D(5, 7)
        )

        assert [s.id for s in shapes] == ["MARK"]
        assert calls[0][1:] == (5, 7)
        assert dispatcher.unit_types == (UnitType.WARDROBE,)

    def test_missing_entry_falls_back_to_other(self) -> None:
        def marker(config: ModuleConfig | None, ox: float, oy: float) -> list[Shape]:
            return [line(0, 0, 1, 0, shape_id="OTHER")]

        dispatcher = ShapeDispatcher(generators={UnitType.OTHER: marker})
        shapes = dispatcher.generate(ModuleConfig(unit_type="wardrobe_carcass"))
        assert [s.id for s in shapes] == ["OTHER"]

    def test_empty_table_falls_back_to_generic(self) -> None:
        dispatcher = ShapeDispatcher(generators={})
        assert dispatcher.generator_for("wardrobe") is generate_generic_shapes
