"""Base exporter framework with Protocol, Registry, and Manager."""

from __future__ import annotations

import logging
from abc import abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Protocol, runtime_checkable

from modulecad.domain.value_objects import (
    DimensionOrientation,
    DimensionShape,
    LineShape,
    RectShape,
    Shape,
)

logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """Protocol for all exporters.

    Exporters render a shape list, in draw order, to a specific format.

    Attributes:
        format_name: Registry name of the export format (e.g., "svg").
        file_extension: File extension without leading dot.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    @abstractmethod
    def export(self, shapes: Sequence[Shape], path: Path) -> None:
        """Write the drawing to ``path``."""
        ...

    def export_string(self, shapes: Sequence[Shape]) -> str:
        """Render the drawing as text.

        Raises:
            NotImplementedError: If the format does not support string export.
        """
        raise NotImplementedError(
            f"Format '{self.format_name}' does not support string export"
        )


class ExporterRegistry:
    """Registry for exporter classes.

    Exporters register themselves with the @ExporterRegistry.register
    decorator.

    Example:
        @ExporterRegistry.register("json")
        class JsonExporter:
            format_name = "json"
            file_extension = "json"
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str):
        """Decorator to register an exporter class under ``format_name``."""

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            if format_name in cls._exporters:
                logger.warning(
                    f"Overwriting existing exporter for format '{format_name}'"
                )
            cls._exporters[format_name] = exporter_class
            logger.debug(
                f"Registered exporter '{format_name}': {exporter_class.__name__}"
            )
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Get an exporter class by format name.

        Raises:
            KeyError: If no exporter is registered for the format.
        """
        if format_name not in cls._exporters:
            available = ", ".join(sorted(cls._exporters.keys()))
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {available or 'none'}"
            )
        return cls._exporters[format_name]

    @classmethod
    def available_formats(cls) -> list[str]:
        return sorted(cls._exporters.keys())

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned extent of a drawing, Y growing downward."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def expanded(self, margin: float) -> Bounds:
        return Bounds(
            self.min_x - margin,
            self.min_y - margin,
            self.max_x + margin,
            self.max_y + margin,
        )


def dimension_line(shape: DimensionShape) -> tuple[float, float, float, float]:
    """End points of a dimension's callout line after applying its offset."""
    if shape.orientation == DimensionOrientation.HORIZONTAL:
        y = shape.y1 + shape.offset
        return shape.x1, y, shape.x2, y
    x = shape.x1 + shape.offset
    return x, shape.y1, x, shape.y2


def shape_points(shape: Shape) -> list[tuple[float, float]]:
    if isinstance(shape, RectShape):
        return [(shape.x, shape.y), (shape.right, shape.bottom)]
    if isinstance(shape, LineShape):
        return [(shape.x1, shape.y1), (shape.x2, shape.y2)]
    x1, y1, x2, y2 = dimension_line(shape)
    return [(shape.x1, shape.y1), (shape.x2, shape.y2), (x1, y1), (x2, y2)]


def compute_bounds(shapes: Sequence[Shape]) -> Bounds:
    """Bounding box of every shape, dimension callouts included.

    An empty drawing has zero-size bounds at the origin.
    """
    points = [point for shape in shapes for point in shape_points(shape)]
    if not points:
        return Bounds(0.0, 0.0, 0.0, 0.0)
    xs = [x for x, _ in points]
    ys = [y for _, y in points]
    return Bounds(min(xs), min(ys), max(xs), max(ys))


class ExportManager:
    """Manages export operations to multiple formats.

    Attributes:
        output_dir: Directory where exported files will be saved.
    """

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)

    def export_all(
        self,
        formats: list[str],
        shapes: Sequence[Shape],
        project_name: str = "module",
    ) -> dict[str, Path]:
        """Export a drawing to several formats.

        Files are named ``{project_name}_{format}.{ext}``.

        Returns:
            Dictionary mapping format names to output file paths.

        Raises:
            KeyError: If any format is not registered.
            OSError: If file operations fail.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)

        results: dict[str, Path] = {}
        for format_name in formats:
            exporter = ExporterRegistry.get(format_name)()
            filepath = (
                self.output_dir
                / f"{project_name}_{format_name}.{exporter.file_extension}"
            )
            logger.info(f"Exporting to {format_name}: {filepath}")
            exporter.export(shapes, filepath)
            results[format_name] = filepath
        return results

    def export_single(
        self,
        format_name: str,
        shapes: Sequence[Shape],
        project_name: str = "module",
    ) -> Path:
        return self.export_all([format_name], shapes, project_name)[format_name]
