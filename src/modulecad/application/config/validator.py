"""Business-rule validation and sanitization of module configurations.

The drawing engine accepts anything and draws something reasonable. This
module is the stricter collaborator in front of it: it reports values
outside the product's limits as errors, flags questionable layouts as
warnings, and can clamp a configuration into range.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Any

from modulecad.domain.entities import ModuleConfig
from modulecad.domain.value_objects import UnitType


@dataclass(frozen=True)
class ValidationLimits:
    """Product limits for module configurations (lengths in mm)."""

    min_width: float = 200
    max_width: float = 10000
    min_height: float = 300
    max_height: float = 5000
    min_depth: float = 100
    max_depth: float = 1000

    min_loft_height: float = 100
    max_loft_height_ratio: float = 0.4

    min_section_count: int = 1
    max_section_count: int = 10
    min_shutter_count: int = 0
    max_shutter_count: int = 10
    min_center_post_count: int = 0
    max_center_post_count: int = 9

    min_carcass_thickness: float = 12
    max_carcass_thickness: float = 25

    min_shelf_pct: float = 5
    max_shelf_pct: float = 95


VALIDATION_LIMITS = ValidationLimits()


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: Configuration key of the invalid field (e.g. "widthMm")
        message: Human-readable description of the error
        value: The invalid value
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: Configuration key of the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """CLI exit code: 1 for errors, 2 for warnings only, otherwise 0."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> ValidationResult:
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> ValidationResult:
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self


def _is_number(value: Any) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


def _check_dimension(
    result: ValidationResult, path: str, value: Any, low: float, high: float
) -> None:
    if not _is_number(value):
        result.add_error(path, f"{path} must be a valid number", value)
    elif value < low:
        result.add_error(path, f"{path} must be at least {low:g}mm", value)
    elif value > high:
        result.add_error(path, f"{path} must be at most {high:g}mm", value)


def _check_count(
    result: ValidationResult, path: str, value: Any, low: int, high: int
) -> None:
    if not _is_number(value):
        result.add_error(path, f"{path} must be a valid number", value)
    elif value != int(value):
        result.add_error(path, f"{path} must be a whole number", value)
    elif value < low:
        result.add_error(path, f"{path} must be at least {low}", value)
    elif value > high:
        result.add_error(path, f"{path} must be at most {high}", value)


def validate_module_config(
    config: ModuleConfig, limits: ValidationLimits = VALIDATION_LIMITS
) -> ValidationResult:
    """Check a configuration against the product limits.

    Width, height and depth are required. Counts, thickness and loft
    height are checked only when present.

    Args:
        config: Configuration to check, usually after unit-type defaults
            have been applied.
        limits: Limits to check against.

    Returns:
        A ValidationResult; errors block, warnings advise.
    """
    result = ValidationResult()

    if not config.unit_type:
        result.add_error("unitType", "Unit type is required")
    if not config.name:
        result.add_warning(
            "name", "Name not specified", suggestion="Give the module a name"
        )

    _check_dimension(
        result, "widthMm", config.width_mm, limits.min_width, limits.max_width
    )
    _check_dimension(
        result, "heightMm", config.height_mm, limits.min_height, limits.max_height
    )
    _check_dimension(
        result, "depthMm", config.depth_mm, limits.min_depth, limits.max_depth
    )

    if config.section_count is not None:
        _check_count(
            result,
            "sectionCount",
            config.section_count,
            limits.min_section_count,
            limits.max_section_count,
        )
    if config.shutter_count is not None:
        _check_count(
            result,
            "shutterCount",
            config.shutter_count,
            limits.min_shutter_count,
            limits.max_shutter_count,
        )
    if config.center_post_count is not None:
        _check_count(
            result,
            "centerPostCount",
            config.center_post_count,
            limits.min_center_post_count,
            limits.max_center_post_count,
        )
    if config.carcass_thickness_mm is not None:
        _check_dimension(
            result,
            "carcassThicknessMm",
            config.carcass_thickness_mm,
            limits.min_carcass_thickness,
            limits.max_carcass_thickness,
        )

    if config.loft_enabled:
        _check_loft(result, config, limits)

    _check_sections(result, config, limits)

    if not config.carcass_material:
        result.add_warning(
            "carcassMaterial", "Carcass material not specified, using default"
        )
    if not config.shutter_material:
        result.add_warning(
            "shutterMaterial", "Shutter material not specified, using default"
        )

    return result


def _check_loft(
    result: ValidationResult, config: ModuleConfig, limits: ValidationLimits
) -> None:
    loft_h = config.loft_height_mm
    if not _is_number(loft_h) or loft_h <= 0:
        result.add_error(
            "loftHeightMm",
            "Loft height must be greater than 0 when loft is enabled",
            loft_h,
        )
    elif loft_h < limits.min_loft_height:
        result.add_error(
            "loftHeightMm",
            f"Loft height must be at least {limits.min_loft_height:g}mm",
            loft_h,
        )
    elif (
        _is_number(config.height_mm)
        and loft_h > config.height_mm * limits.max_loft_height_ratio
    ):
        result.add_warning(
            "loftHeightMm",
            f"Loft height exceeds {limits.max_loft_height_ratio * 100:g}% "
            "of total height",
        )


def _check_sections(
    result: ValidationResult, config: ModuleConfig, limits: ValidationLimits
) -> None:
    sections = config.sections
    if not sections:
        return

    if UnitType.from_tag(config.unit_type) == UnitType.WARDROBE_CARCASS:
        post_count = config.center_post_count or 0
        if _is_number(post_count) and len(sections) > post_count + 1:
            result.add_warning(
                "sections",
                f"{len(sections)} sections configured but {post_count} center "
                f"post(s) only make {int(post_count) + 1}; extra sections are "
                "not drawn",
                suggestion="Add center posts or remove sections",
            )

    for i, section in enumerate(sections):
        for j, pct in enumerate(section.shelf_positions):
            if not limits.min_shelf_pct <= pct <= limits.max_shelf_pct:
                result.add_warning(
                    f"sections[{i}].shelfPositions[{j}]",
                    f"Shelf position {pct:g}% will be clamped to "
                    f"{limits.min_shelf_pct:g}-{limits.max_shelf_pct:g}%",
                )

    explicit = sum(s.width_mm for s in sections if s.width_mm > 0)
    thickness = config.carcass_thickness_mm or 18
    if _is_number(config.width_mm) and _is_number(thickness):
        inner = config.width_mm - thickness * 2
        if explicit > inner:
            result.add_warning(
                "sections",
                f"Explicit section widths ({explicit:g}mm) exceed the inner "
                f"width ({inner:g}mm)",
                suggestion="Use widthMm 0 to split the remaining width evenly",
            )


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _round(value: float) -> int:
    """Round halves up."""
    return int(math.floor(value + 0.5))


def sanitize_module_config(
    config: ModuleConfig, limits: ValidationLimits = VALIDATION_LIMITS
) -> ModuleConfig:
    """Return a copy with every present value clamped into the product limits.

    Counts are rounded to whole numbers. Fields that are absent (``None``)
    stay absent, as do values that are not numbers.
    """
    updates: dict[str, Any] = {}

    def clamp_field(name: str, low: float, high: float, whole: bool = False) -> None:
        value = getattr(config, name)
        if not _is_number(value):
            return
        if whole:
            updates[name] = int(_clamp(_round(value), low, high))
        else:
            updates[name] = _clamp(value, low, high)

    clamp_field("width_mm", limits.min_width, limits.max_width)
    clamp_field("height_mm", limits.min_height, limits.max_height)
    clamp_field("depth_mm", limits.min_depth, limits.max_depth)
    clamp_field(
        "section_count",
        limits.min_section_count,
        limits.max_section_count,
        whole=True,
    )
    clamp_field(
        "shutter_count",
        limits.min_shutter_count,
        limits.max_shutter_count,
        whole=True,
    )
    clamp_field(
        "center_post_count",
        limits.min_center_post_count,
        limits.max_center_post_count,
        whole=True,
    )
    clamp_field(
        "carcass_thickness_mm",
        limits.min_carcass_thickness,
        limits.max_carcass_thickness,
    )

    height = updates.get("height_mm", config.height_mm)
    if (
        config.loft_enabled
        and _is_number(config.loft_height_mm)
        and _is_number(height)
    ):
        ceiling = height * limits.max_loft_height_ratio
        updates["loft_height_mm"] = max(
            limits.min_loft_height, min(ceiling, config.loft_height_mm)
        )

    return replace(config, **updates)
