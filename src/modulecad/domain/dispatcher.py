"""Routing of module configurations to their front-view generator.

The generator table is closed over :class:`UnitType`; any tag outside it
is drawn by the generic generator. Unit-type defaults are injected at
construction instead of being read from module-level state.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from .entities import ModuleConfig
from .generators import (
    generate_carcass_shapes,
    generate_generic_shapes,
    generate_sectioned_shapes,
)
from .value_objects import Point2D, Shape, UnitType

logger = logging.getLogger(__name__)

Generator = Callable[[ModuleConfig | None, float, float], list[Shape]]

GENERATORS: Mapping[UnitType, Generator] = MappingProxyType(
    {
        UnitType.WARDROBE_CARCASS: generate_carcass_shapes,
        UnitType.WARDROBE: generate_sectioned_shapes,
        UnitType.OTHER: generate_generic_shapes,
    }
)

ORIGIN = Point2D(0.0, 0.0)


class ShapeDispatcher:
    """Selects and runs the generator for a module configuration.

    Args:
        defaults: Unit-type tag to ``{field_name: value}``. Fields that are
            ``None`` on a configuration are filled from the entry for its
            tag, or from the ``other`` entry when the tag has none.
        generators: Replacement generator table. Unit types missing from it
            fall back to its ``OTHER`` entry, then to the generic generator.

    Example:
        >>> dispatcher = ShapeDispatcher({"wardrobe": {"width_mm": 1829}})
        >>> shapes = dispatcher.generate(ModuleConfig(unit_type="wardrobe"))
    """

    def __init__(
        self,
        defaults: Mapping[str, Mapping[str, Any]] | None = None,
        generators: Mapping[UnitType, Generator] | None = None,
    ) -> None:
        self._defaults = dict(defaults or {})
        self._generators = dict(generators if generators is not None else GENERATORS)

    @property
    def unit_types(self) -> tuple[UnitType, ...]:
        return tuple(self._generators)

    def defaults_for(self, unit_type: str) -> Mapping[str, Any]:
        if unit_type in self._defaults:
            return self._defaults[unit_type]
        return self._defaults.get(UnitType.from_tag(unit_type).value, {})

    def resolve(self, config: ModuleConfig) -> ModuleConfig:
        """Fill missing fields of ``config`` from its unit-type defaults."""
        return config.with_defaults(self.defaults_for(config.unit_type))

    def generator_for(self, unit_type: str) -> Generator:
        kind = UnitType.from_tag(unit_type)
        generator = self._generators.get(kind)
        if generator is None:
            generator = self._generators.get(UnitType.OTHER, generate_generic_shapes)
        if kind == UnitType.OTHER and unit_type != UnitType.OTHER.value:
            logger.debug(f"No generator for unit type {unit_type!r}, using fallback")
        return generator

    def generate(
        self, config: ModuleConfig | None, origin: Point2D = ORIGIN
    ) -> list[Shape]:
        """Generate the front view of ``config`` with its top-left at ``origin``.

        Returns:
            The generator's shapes in draw order, or an empty list when
            there is no configuration.
        """
        if config is None:
            return []
        generator = self.generator_for(config.unit_type)
        shapes = generator(self.resolve(config), origin.x, origin.y)
        logger.debug(
            f"Generated {len(shapes)} shapes for {config.unit_type!r} "
            f"at ({origin.x}, {origin.y})"
        )
        return shapes


def generate_module_shapes(
    config: ModuleConfig | None, origin: Point2D = ORIGIN
) -> list[Shape]:
    """Generate shapes with the built-in generator table and no defaults."""
    return ShapeDispatcher().generate(config, origin)
