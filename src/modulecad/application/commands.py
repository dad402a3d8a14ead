"""Application commands (use cases) for module drawings."""

from __future__ import annotations

import logging

from modulecad.application.config.validator import (
    sanitize_module_config,
    validate_module_config,
)
from modulecad.domain.dispatcher import ORIGIN, ShapeDispatcher
from modulecad.domain.entities import ModuleConfig
from modulecad.domain.value_objects import Point2D

from .dtos import DrawingOutput

logger = logging.getLogger(__name__)


class GenerateDrawingCommand:
    """Command to generate the front-view drawing of a module.

    The configuration is completed from unit-type defaults, validated,
    optionally clamped into the product limits, and drawn. Validation
    problems are reported on the output; they never stop the drawing.
    """

    def __init__(
        self, dispatcher: ShapeDispatcher | None = None, sanitize: bool = True
    ) -> None:
        self.dispatcher = dispatcher or ShapeDispatcher()
        self.sanitize = sanitize

    def execute(
        self, config: ModuleConfig, origin: Point2D = ORIGIN
    ) -> DrawingOutput:
        """Execute the drawing command.

        Args:
            config: Module configuration, possibly incomplete.
            origin: Drawing position of the module's top-left corner.

        Returns:
            DrawingOutput with the shapes, the validation result and the
            configuration that was drawn.
        """
        resolved = self.dispatcher.resolve(config)
        validation = validate_module_config(resolved)
        if validation.errors:
            logger.debug(
                f"Config {config.name!r} has "
                f"{len(validation.errors)} validation error(s)"
            )

        drawn = sanitize_module_config(resolved) if self.sanitize else resolved
        shapes = self.dispatcher.generate(drawn, origin)
        return DrawingOutput(shapes=shapes, validation=validation, config=drawn)
