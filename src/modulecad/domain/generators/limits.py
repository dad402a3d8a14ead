"""Defensive defaults and safety bounds shared by the generators.

These bounds are deliberately wider than the business limits enforced by
``modulecad.application.config.validator``. Their only job is to keep a
half-edited configuration drawable.
"""

from __future__ import annotations

import math

DEFAULT_WIDTH = 1200.0
DEFAULT_HEIGHT = 2400.0
DEFAULT_THICKNESS = 18.0
DEFAULT_SKIRTING_HEIGHT = 115.0
DEFAULT_LOFT_HEIGHT = 400.0

MIN_WIDTH = 300.0
MAX_WIDTH = 6000.0
MIN_HEIGHT = 300.0
MAX_HEIGHT = 3000.0
MIN_THICKNESS = 8.0
MAX_THICKNESS = 50.0
MIN_SKIRTING_HEIGHT = 50.0
MAX_SKIRTING_HEIGHT = 300.0
MAX_POST_COUNT = 10
MAX_SHELF_COUNT = 10
MAX_DRAWER_COUNT = 10


def safe(value: float | None, default: float) -> float:
    """Return ``value`` unless it is missing, not finite, or not positive."""
    if value is None or isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(number) or number <= 0:
        return default
    return number


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def safe_count(value: int | float | None, default: int, maximum: int) -> int:
    """A whole count in ``[0, maximum]``; missing or non-finite gives ``default``.

    Unlike :func:`safe`, an explicit zero is kept.
    """
    if value is None or isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(number):
        return default
    return int(clamp(number, 0, maximum))


def carcass_dimensions(
    width: float | None, height: float | None, thickness: float | None
) -> tuple[float, float, float]:
    """Width, height and thickness after substitution and clamping."""
    return (
        clamp(safe(width, DEFAULT_WIDTH), MIN_WIDTH, MAX_WIDTH),
        clamp(safe(height, DEFAULT_HEIGHT), MIN_HEIGHT, MAX_HEIGHT),
        clamp(safe(thickness, DEFAULT_THICKNESS), MIN_THICKNESS, MAX_THICKNESS),
    )
