"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass

from modulecad.application.config.validator import ValidationResult
from modulecad.domain.entities import ModuleConfig
from modulecad.domain.value_objects import RectShape, Shape


@dataclass
class DrawingOutput:
    """Output DTO containing a generated front-view drawing.

    Attributes:
        shapes: Shapes in draw order (later shapes draw on top).
        validation: Result of checking the configuration before drawing.
        config: The configuration actually drawn, after unit-type defaults
            and, when enabled, sanitization.
    """

    shapes: list[Shape]
    validation: ValidationResult
    config: ModuleConfig

    @property
    def is_valid(self) -> bool:
        return self.validation.is_valid

    @property
    def shape_ids(self) -> list[str]:
        return [shape.id for shape in self.shapes]

    def find(self, shape_id: str) -> Shape | None:
        """Look up a shape by its identifier (e.g. ``MOD-POST-1``)."""
        for shape in self.shapes:
            if shape.id == shape_id:
                return shape
        return None

    def rects_with_prefix(self, prefix: str) -> list[RectShape]:
        """Rectangles whose identifier starts with ``prefix``, in draw order."""
        return [
            shape
            for shape in self.shapes
            if isinstance(shape, RectShape) and shape.id.startswith(prefix)
        ]
