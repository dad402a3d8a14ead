"""Adapter converting validated configuration models to domain objects."""

from modulecad.application.config.schema import (
    DrawingConfiguration,
    ModuleConfigSchema,
    PanelsEnabledConfig,
    SectionConfig,
)
from modulecad.domain.entities import ModuleConfig, PanelsEnabled, WardrobeSection
from modulecad.domain.value_objects import Point2D


def config_to_panels(config: PanelsEnabledConfig) -> PanelsEnabled:
    return PanelsEnabled(
        top=config.top,
        bottom=config.bottom,
        left=config.left,
        right=config.right,
        back=config.back,
    )


def config_to_section(config: SectionConfig) -> WardrobeSection:
    return WardrobeSection(
        type=config.type,
        width_mm=config.width_mm,
        shelf_count=config.shelf_count,
        drawer_count=config.drawer_count,
        rod_height_pct=config.rod_height_pct,
        shelf_positions=tuple(config.shelf_positions),
        posts_below=config.posts_below,
    )


def config_to_module(config: ModuleConfigSchema | DrawingConfiguration) -> ModuleConfig:
    """Convert a module schema (or a whole drawing configuration) to a ModuleConfig.

    Fields left out of the file stay ``None`` so that unit-type defaults can
    fill them in later.

    Args:
        config: The validated ``module`` block, or the root configuration.

    Returns:
        The equivalent domain ModuleConfig.
    """
    if isinstance(config, DrawingConfiguration):
        config = config.module

    positions = config.center_post_positions
    return ModuleConfig(
        unit_type=config.unit_type,
        name=config.name,
        width_mm=config.width_mm,
        height_mm=config.height_mm,
        depth_mm=config.depth_mm,
        carcass_thickness_mm=config.carcass_thickness_mm,
        center_post_count=config.center_post_count,
        center_post_positions=tuple(positions) if positions is not None else None,
        skirting_enabled=config.skirting_enabled,
        skirting_height_mm=config.skirting_height_mm,
        panels_enabled=config_to_panels(config.panels_enabled),
        sections=tuple(config_to_section(s) for s in config.sections),
        loft_enabled=config.loft_enabled,
        loft_height_mm=config.loft_height_mm,
        shutter_count=config.shutter_count,
        section_count=config.section_count,
        carcass_material=config.carcass_material,
        shutter_material=config.shutter_material,
    )


def config_to_origin(config: DrawingConfiguration) -> Point2D:
    return Point2D(config.origin.x, config.origin.y)
