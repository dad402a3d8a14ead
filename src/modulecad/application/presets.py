"""Default field values for each unit type.

Passed to :class:`~modulecad.domain.dispatcher.ShapeDispatcher` so that a
configuration which only names its unit type still draws at a realistic
size. Keys are ModuleConfig field names.
"""

from types import MappingProxyType
from typing import Any, Mapping

from modulecad.domain.value_objects import UnitType

UNIT_PRESETS: Mapping[str, Mapping[str, Any]] = MappingProxyType(
    {
        UnitType.WARDROBE.value: {
            "width_mm": 1829,
            "height_mm": 2134,
            "depth_mm": 610,
            "carcass_thickness_mm": 18,
            "shutter_count": 3,
            "section_count": 3,
            "loft_height_mm": 457,
            "carcass_material": "plywood",
            "shutter_material": "laminate",
        },
        UnitType.WARDROBE_CARCASS.value: {
            "width_mm": 2400,
            "height_mm": 2100,
            "depth_mm": 560,
            "carcass_thickness_mm": 18,
            "center_post_count": 2,
            "shutter_count": 0,
            "section_count": 3,
            "skirting_height_mm": 115,
            "carcass_material": "plywood",
            "shutter_material": "laminate",
        },
        UnitType.OTHER.value: {
            "width_mm": 900,
            "height_mm": 1800,
            "depth_mm": 450,
            "carcass_thickness_mm": 18,
            "shutter_count": 2,
            "section_count": 3,
            "carcass_material": "plywood",
            "shutter_material": "laminate",
        },
    }
)

