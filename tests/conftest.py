"""Pytest configuration and shared fixtures for module drawing tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from modulecad.application.factory import reset_factory
from modulecad.domain.entities import ModuleConfig, WardrobeSection
from modulecad.domain.value_objects import SectionType

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "configs"


@pytest.fixture(autouse=True)
def _fresh_factory() -> Iterator[None]:
    """Give every test its own default ServiceFactory."""
    reset_factory()
    yield
    reset_factory()
    # the CLI callback sets the package log level
    logging.getLogger("modulecad").setLevel(logging.NOTSET)


@pytest.fixture
def fixtures_path() -> Path:
    return FIXTURES_PATH


@pytest.fixture
def carcass_config() -> ModuleConfig:
    """1200 x 2400 carcass with two posts and three sections.

    The middle section holds drawers, which the carcass view ignores, so
    only the outer sections get shelves.
    """
    return ModuleConfig(
        unit_type="wardrobe_carcass",
        name="Test carcass",
        width_mm=1200,
        height_mm=2400,
        depth_mm=560,
        carcass_thickness_mm=18,
        center_post_count=2,
        sections=(
            WardrobeSection(type=SectionType.SHELVES, shelf_count=2),
            WardrobeSection(type=SectionType.DRAWERS, drawer_count=3),
            WardrobeSection(type=SectionType.SHELVES, shelf_count=1),
        ),
    )


@pytest.fixture
def wardrobe_config() -> ModuleConfig:
    """1800 x 2400 wardrobe with a 400mm loft and three shutters."""
    return ModuleConfig(
        unit_type="wardrobe",
        name="Test wardrobe",
        width_mm=1800,
        height_mm=2400,
        depth_mm=600,
        carcass_thickness_mm=18,
        loft_enabled=True,
        loft_height_mm=400,
        shutter_count=3,
    )
