"""Service factory for dependency injection."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from modulecad.application.presets import UNIT_PRESETS

if TYPE_CHECKING:
    from modulecad.application.commands import GenerateDrawingCommand
    from modulecad.domain.dispatcher import ShapeDispatcher
    from modulecad.infrastructure.exporters import ExportManager


@dataclass
class ServiceFactory:
    """Factory for creating service instances.

    Attributes:
        presets: Unit-type defaults handed to the dispatcher.
    """

    presets: Mapping[str, Mapping[str, Any]] = field(
        default_factory=lambda: UNIT_PRESETS
    )

    _dispatcher: "ShapeDispatcher | None" = field(
        default=None, init=False, repr=False
    )

    def get_dispatcher(self) -> "ShapeDispatcher":
        """Get or create the shape dispatcher."""
        if self._dispatcher is None:
            from modulecad.domain.dispatcher import ShapeDispatcher

            self._dispatcher = ShapeDispatcher(defaults=self.presets)
        return self._dispatcher

    def create_generate_command(
        self, sanitize: bool = True
    ) -> "GenerateDrawingCommand":
        from modulecad.application.commands import GenerateDrawingCommand

        return GenerateDrawingCommand(self.get_dispatcher(), sanitize=sanitize)

    def create_export_manager(
        self, output_dir: Path | None = None
    ) -> "ExportManager":
        from modulecad.infrastructure.exporters import ExportManager

        return ExportManager(output_dir or Path.cwd())


# Default factory instance
_default_factory: ServiceFactory | None = None


def get_factory() -> ServiceFactory:
    """Get the default service factory."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ServiceFactory()
    return _default_factory


def set_factory(factory: ServiceFactory | None) -> None:
    """Set a custom factory (for testing)."""
    global _default_factory
    _default_factory = factory


def reset_factory() -> None:
    """Reset the factory to default (for testing cleanup)."""
    global _default_factory
    _default_factory = None
