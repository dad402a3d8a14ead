"""Domain entities describing a furniture module configuration."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from typing import Any

from .value_objects import PanelSide, SectionType


@dataclass(frozen=True)
class PanelsEnabled:
    """Enable flags for the five carcass panels.

    Missing flags default to enabled; only an explicit ``False`` disables
    a panel.
    """

    top: bool = True
    bottom: bool = True
    left: bool = True
    right: bool = True
    back: bool = True

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any] | None) -> PanelsEnabled:
        raw = raw or {}
        return cls(
            **{side.value: raw.get(side.value) is not False for side in PanelSide}
        )

    def is_enabled(self, side: PanelSide) -> bool:
        return bool(getattr(self, side.value))

    @property
    def disabled(self) -> tuple[PanelSide, ...]:
        return tuple(side for side in PanelSide if not self.is_enabled(side))


@dataclass(frozen=True)
class WardrobeSection:
    """A horizontal subdivision of the module interior.

    The carcass generator reads ``width_mm``, ``shelf_count``,
    ``shelf_positions`` and ``posts_below``. The sectioned generator reads
    ``type`` plus the counts relevant to it.

    Attributes:
        type: Behavioral zone type.
        width_mm: Explicit width in mm, or 0 to auto-split among siblings.
        shelf_count: Number of shelves (None means generator default).
        drawer_count: Number of drawers (None means generator default).
        rod_height_pct: Share of the section height used by the rod zone
            of a short-hang section.
        shelf_positions: Optional shelf Y positions as a percentage (0-100)
            of the section height, indexed by shelf.
        posts_below: Partial posts anchored under the lowest shelf.
    """

    type: SectionType = SectionType.SHELVES
    width_mm: float = 0.0
    shelf_count: int | None = None
    drawer_count: int | None = None
    rod_height_pct: float | None = None
    shelf_positions: tuple[float, ...] = ()
    posts_below: int = 0


@dataclass(frozen=True)
class ModuleConfig:
    """Numeric and structural configuration of a furniture module.

    Numeric fields may be ``None`` on a partially built configuration;
    generators substitute safe defaults for anything missing.

    Attributes:
        unit_type: Unit-type tag used to select a generator.
        name: Display name.
        width_mm: Overall width in mm.
        height_mm: Overall height in mm.
        depth_mm: Overall depth in mm.
        carcass_thickness_mm: Carcass panel thickness in mm.
        center_post_count: Number of full-height center posts.
        center_post_positions: Explicit post offsets in mm from the inner
            left face (left edge of each post).
        skirting_enabled: Whether a skirting band raises the bottom panel.
        skirting_height_mm: Skirting band height in mm.
        panels_enabled: Per-panel enable flags.
        sections: Ordered section descriptors, left to right.
        loft_enabled: Whether the wardrobe has a loft compartment.
        loft_height_mm: Loft height measured from the top, in mm.
        shutter_count: Number of shutters (doors).
        section_count: Number of sections when no descriptors are given.
        carcass_material: Carcass material name.
        shutter_material: Shutter material name.
    """

    unit_type: str = "other"
    name: str = ""
    width_mm: float | None = None
    height_mm: float | None = None
    depth_mm: float | None = None
    carcass_thickness_mm: float | None = None
    center_post_count: int | None = None
    center_post_positions: tuple[float, ...] | None = None
    skirting_enabled: bool = False
    skirting_height_mm: float | None = None
    panels_enabled: PanelsEnabled = field(default_factory=PanelsEnabled)
    sections: tuple[WardrobeSection, ...] = ()
    loft_enabled: bool = False
    loft_height_mm: float | None = None
    shutter_count: int | None = None
    section_count: int | None = None
    carcass_material: str | None = None
    shutter_material: str | None = None

    def with_defaults(self, defaults: Mapping[str, Any]) -> ModuleConfig:
        """Return a copy with ``None`` fields filled from ``defaults``.

        Keys that are not fields of ModuleConfig are ignored.
        """
        known = {f.name for f in fields(self)}
        updates = {
            key: value
            for key, value in defaults.items()
            if key in known and getattr(self, key) is None
        }
        if not updates:
            return self
        return replace(self, **updates)
