"""Unit tests for domain entities, unit types and generator safety limits."""

from __future__ import annotations

import math

import pytest

from modulecad.domain.entities import ModuleConfig, PanelsEnabled
from modulecad.domain.generators.limits import (
    carcass_dimensions,
    clamp,
    safe,
    safe_count,
)
from modulecad.domain.value_objects import PanelSide, UnitType


class TestUnitType:
    """Tests for unit-type tag parsing."""

    def test_known_tags(self) -> None:
        assert UnitType.from_tag("wardrobe") == UnitType.WARDROBE
        assert UnitType.from_tag("wardrobe_carcass") == UnitType.WARDROBE_CARCASS

    @pytest.mark.parametrize("tag", ["kitchen", "", None, "WARDROBE"])
    def test_unknown_tags_map_to_other(self, tag: str | None) -> None:
        assert UnitType.from_tag(tag) == UnitType.OTHER


class TestPanelsEnabled:
    """Tests for panel enable flags."""

    def test_all_enabled_by_default(self) -> None:
        panels = PanelsEnabled()
        assert all(panels.is_enabled(side) for side in PanelSide)
        assert panels.disabled == ()

    def test_from_mapping_only_false_disables(self) -> None:
        panels = PanelsEnabled.from_mapping({"left": False, "top": None, "back": 0})
        assert not panels.left
        assert panels.top
        assert panels.back
        assert panels.disabled == (PanelSide.LEFT,)

    def test_from_missing_mapping(self) -> None:
        assert PanelsEnabled.from_mapping(None) == PanelsEnabled()


class TestModuleConfigDefaults:
    """Tests for filling missing fields from unit-type defaults."""

    def test_fills_only_missing_fields(self) -> None:
        config = ModuleConfig(unit_type="wardrobe", width_mm=1500)
        filled = config.with_defaults({"width_mm": 1829, "height_mm": 2134})
        assert filled.width_mm == 1500
        assert filled.height_mm == 2134

    def test_ignores_unknown_keys(self) -> None:
        config = ModuleConfig()
        assert config.with_defaults({"colour": "walnut"}) is config

    def test_booleans_are_never_filled(self) -> None:
        config = ModuleConfig()
        filled = config.with_defaults({"loft_enabled": True, "loft_height_mm": 457})
        assert filled.loft_enabled is False
        assert filled.loft_height_mm == 457

    def test_original_is_unchanged(self) -> None:
        config = ModuleConfig()
        config.with_defaults({"width_mm": 900})
        assert config.width_mm is None


class TestLimits:
    """Tests for the drawing safety helpers."""

    @pytest.mark.parametrize(
        "value", [None, 0, -5, math.nan, math.inf, "wide", True]
    )
    def test_safe_substitutes_default(self, value: object) -> None:
        assert safe(value, 42.0) == 42.0

    def test_safe_keeps_positive_numbers(self) -> None:
        assert safe(12.5, 42.0) == 12.5

    def test_clamp(self) -> None:
        assert clamp(5, 10, 20) == 10
        assert clamp(25, 10, 20) == 20
        assert clamp(15, 10, 20) == 15

    def test_safe_count_keeps_explicit_zero(self) -> None:
        assert safe_count(0, 3, 10) == 0

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(None, 3), (math.nan, 3), (-2, 0), (25, 10), (4.9, 4)],
    )
    def test_safe_count(self, value: float | None, expected: int) -> None:
        assert safe_count(value, 3, 10) == expected

    def test_carcass_dimensions_defaults_and_bounds(self) -> None:
        assert carcass_dimensions(None, None, None) == (1200.0, 2400.0, 18.0)
        assert carcass_dimensions(100, 99999, 2) == (300.0, 3000.0, 8.0)
        assert carcass_dimensions(9000, 100, 80) == (6000.0, 300.0, 50.0)
