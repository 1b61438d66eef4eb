"""Scalar maths constants and helpers."""

from __future__ import annotations

import math
from typing import TypeVar

T = TypeVar("T")

DPI = math.pi
DPI2 = DPI * 2.0

PI = math.pi
PI2 = PI * 2.0

D2R = PI / 180.0
R2D = 180.0 / PI


def sqrt(value: float) -> float:
    """Square root of a non-negative value."""
    return math.sqrt(value)


def clamp(value: T, min_value: T, max_value: T) -> T:
    """Limit ``value`` to the closed range [min_value, max_value]."""
    if value < min_value:
        return min_value
    if value > max_value:
        return max_value
    return value


def clamp_max(value: T, max_value: T) -> T:
    """Limit ``value`` from above."""
    return max_value if value > max_value else value


def clamp_min(value: T, min_value: T) -> T:
    """Limit ``value`` from below."""
    return min_value if value < min_value else value


def lerp(a, b, alpha):
    """Linear interpolation between ``a`` and ``b``; alpha is not clamped."""
    return a * (1 - alpha) + b * alpha