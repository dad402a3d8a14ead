"""Front-view generators, one per drawing style."""

from .carcass import generate_carcass_shapes
from .generic import generate_generic_shapes
from .sectioned import DEFAULT_WARDROBE_SECTIONS, generate_sectioned_shapes

__all__ = [
    "DEFAULT_WARDROBE_SECTIONS",
    "generate_carcass_shapes",
    "generate_generic_shapes",
    "generate_sectioned_shapes",
]
