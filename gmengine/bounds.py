"""Bounding volumes (sphere, axis-aligned box, oriented box) and their overlap tests.

Touching volumes count as intersecting.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Union

from gmengine.matrix import Matrix, Quat

Vec3 = tuple[float, float, float]

_AXIS_ALIGNED: tuple[Vec3, Vec3, Vec3] = (
    (1.0, 0.0, 0.0),
    (0.0, 1.0, 0.0),
    (0.0, 0.0, 1.0),
)
_DEGENERATE_AXIS = 1e-12


def _vec3(values: Iterable[float]) -> Vec3:
    result = tuple(float(value) for value in values)
    if len(result) != 3:
        raise ValueError(f"expected three components, got {len(result)}")
    return result  # type: ignore[return-value]


def _sub(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _dot(a: Vec3, b: Vec3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _cross(a: Vec3, b: Vec3) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _check_extents(extents: Vec3) -> None:
    if any(extent < 0.0 for extent in extents):
        raise ValueError(f"box extents must not be negative: {extents}")


@dataclass(frozen=True)
class BoundingSphere:
    """A sphere given by its centre and radius."""

    center: Vec3 = (0.0, 0.0, 0.0)
    radius: float = 1.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "center", _vec3(self.center))
        object.__setattr__(self, "radius", float(self.radius))
        if self.radius < 0.0:
            raise ValueError(f"sphere radius must not be negative: {self.radius}")

    def intersects(self, other: Volume) -> bool:
        """True if this sphere touches or overlaps ``other``."""
        return _intersects(self, other)


@dataclass(frozen=True)
class BoundingBox:
    """An axis-aligned box given by its centre and half sizes."""

    center: Vec3 = (0.0, 0.0, 0.0)
    extents: Vec3 = (1.0, 1.0, 1.0)

    def __post_init__(self) -> None:
        object.__setattr__(self, "center", _vec3(self.center))
        object.__setattr__(self, "extents", _vec3(self.extents))
        _check_extents(self.extents)

    def intersects(self, other: Volume) -> bool:
        """True if this box touches or overlaps ``other``."""
        return _intersects(self, other)


@dataclass(frozen=True)
class BoundingOrientedBox:
    """A box given by its centre, half sizes and a rotation from box to world space."""

    center: Vec3 = (0.0, 0.0, 0.0)
    extents: Vec3 = (1.0, 1.0, 1.0)
    orientation: Quat = field(default_factory=Quat)

    def __post_init__(self) -> None:
        object.__setattr__(self, "center", _vec3(self.center))
        object.__setattr__(self, "extents", _vec3(self.extents))
        _check_extents(self.extents)
        length = math.sqrt(sum(c * c for c in self.orientation))
        if length == 0.0:
            raise ValueError("box orientation must not be a zero quaternion")
        object.__setattr__(self, "orientation", Quat(*(c / length for c in self.orientation)))

    def axes(self) -> tuple[Vec3, Vec3, Vec3]:
        """The box's local x, y and z axes in world space, each of unit length."""
        rows = Matrix.rotation_quat(self.orientation).rows
        return tuple(_vec3(row[:3]) for row in rows[:3])  # type: ignore[return-value]

    def intersects(self, other: Volume) -> bool:
        """True if this box touches or overlaps ``other``."""
        return _intersects(self, other)


Volume = Union[BoundingSphere, BoundingBox, BoundingOrientedBox]
_Box = Union[BoundingBox, BoundingOrientedBox]


def _box_frame(box: _Box) -> tuple[Vec3, tuple[Vec3, Vec3, Vec3], Vec3]:
    if isinstance(box, BoundingOrientedBox):
        return box.center, box.axes(), box.extents
    return box.center, _AXIS_ALIGNED, box.extents


def _distance_sq_to_box(point: Vec3, box: _Box) -> float:
    center, axes, extents = _box_frame(box)
    offset = _sub(point, center)
    total = 0.0
    for axis, extent in zip(axes, extents):
        excess = abs(_dot(offset, axis)) - extent
        if excess > 0.0:
            total += excess * excess
    return total


def _boxes_overlap(first: _Box, second: _Box) -> bool:
    """Separating axis test over the face normals and edge cross products."""
    center_a, axes_a, extents_a = _box_frame(first)
    center_b, axes_b, extents_b = _box_frame(second)
    offset = _sub(center_b, center_a)
    candidates = [*axes_a, *axes_b, *(_cross(a, b) for a in axes_a for b in axes_b)]
    for axis in candidates:
        if _dot(axis, axis) < _DEGENERATE_AXIS:
            continue
        radius_a = sum(extent * abs(_dot(a, axis)) for a, extent in zip(axes_a, extents_a))
        radius_b = sum(extent * abs(_dot(b, axis)) for b, extent in zip(axes_b, extents_b))
        if abs(_dot(offset, axis)) > radius_a + radius_b:
            return False
    return True


def _intersects(first: Volume, second: Volume) -> bool:
    boxes = (BoundingBox, BoundingOrientedBox)
    if isinstance(first, BoundingSphere) and isinstance(second, BoundingSphere):
        offset = _sub(first.center, second.center)
        reach = first.radius + second.radius
        return _dot(offset, offset) <= reach * reach
    if isinstance(first, BoundingSphere) and isinstance(second, boxes):
        return _distance_sq_to_box(first.center, second) <= first.radius * first.radius
    if isinstance(first, boxes) and isinstance(second, BoundingSphere):
        return _distance_sq_to_box(second.center, first) <= second.radius * second.radius
    if isinstance(first, boxes) and isinstance(second, boxes):
        return _boxes_overlap(first, second)
    raise TypeError(
        f"cannot test {type(first).__name__} against {type(second).__name__}"
    )