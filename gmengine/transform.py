"""Scale, rotation and location of an object, its matrices and collision tests."""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass, field
from typing import Callable

from gmengine.bounds import BoundingBox, BoundingOrientedBox, BoundingSphere, Vec3
from gmengine.debug import EngineError
from gmengine.matrix import Matrix, Quat
from gmengine.vector import Vector


class CollisionType(enum.Enum):
    """Shapes a transform can be treated as when testing collisions."""

    POINT = 0
    RECT = 1
    CIRCLE = 2
    OBB2D = 3
    SPHERE = 4
    AABB = 5
    OBB = 6


@dataclass(frozen=True)
class CollisionData:
    """World centre, half sizes and orientation, seen as a sphere, an AABB or an OBB.

    The sphere's radius is the half size along x.
    """

    center: Vec3 = (0.0, 0.0, 0.0)
    extents: Vec3 = (0.0, 0.0, 0.0)
    orientation: Quat = field(default_factory=Quat)

    @property
    def sphere(self) -> BoundingSphere:
        return BoundingSphere(self.center, self.extents[0])

    @property
    def aabb(self) -> BoundingBox:
        return BoundingBox(self.center, self.extents)

    @property
    def obb(self) -> BoundingOrientedBox:
        return BoundingOrientedBox(self.center, self.extents, self.orientation)

    def flattened(self) -> CollisionData:
        """The same data with the centre moved onto the z = 0 plane."""
        x, y, _ = self.center
        return dataclasses.replace(self, center=(x, y, 0.0))


def _one() -> Vector:
    return Vector(1.0, 1.0, 1.0, 1.0)


@dataclass
class Transform:
    """Local scale, rotation (degrees) and location plus the derived matrices.

    ``update`` rebuilds the matrices and the relative and world values.
    """

    scale: Vector = field(default_factory=_one)
    rotation: Vector = field(default_factory=Vector)
    quat: Quat = field(default_factory=Quat)
    location: Vector = field(default_factory=Vector)

    relative_scale: Vector = field(default_factory=Vector)
    relative_rotation: Vector = field(default_factory=Vector)
    relative_quat: Quat = field(default_factory=Quat)
    relative_location: Vector = field(default_factory=Vector)

    world_scale: Vector = field(default_factory=Vector)
    world_rotation: Vector = field(default_factory=Vector)
    world_quat: Quat = field(default_factory=Quat)
    world_location: Vector = field(default_factory=Vector)

    scale_mat: Matrix = field(default_factory=Matrix)
    rotation_mat: Matrix = field(default_factory=Matrix)
    location_mat: Matrix = field(default_factory=Matrix)
    revolve_mat: Matrix = field(default_factory=Matrix)
    parent_mat: Matrix = field(default_factory=Matrix)
    local_world: Matrix = field(default_factory=Matrix)
    world: Matrix = field(default_factory=Matrix)
    view: Matrix = field(default_factory=Matrix)
    projection: Matrix = field(default_factory=Matrix)
    wvp: Matrix = field(default_factory=Matrix)

    def update(self, absolute: bool = False) -> None:
        """Rebuild the matrices from scale, rotation and location.

        With ``absolute`` the local values are taken as the final world placement
        and the local matrix is found by removing the parent; otherwise the
        revolve and parent matrices are applied on top of the local one.
        """
        self.scale_mat = Matrix.scaling(self.scale)
        self.rotation_mat = Matrix.rotation_deg(self.rotation)
        self.location_mat = Matrix.translation(self.location)

        combined = self.scale_mat @ self.rotation_mat @ self.location_mat
        if absolute:
            self.world = combined
            self.local_world = combined @ self.parent_mat.inverse()
        else:
            self.local_world = combined
            self.world = combined @ self.revolve_mat @ self.parent_mat

        self.decompose()

    def decompose(self) -> None:
        """Recover world and relative scale, rotation and location from the matrices."""
        self.world_scale, self.world_quat, self.world_location = self.world.decompose()
        self.relative_scale, self.relative_quat, self.relative_location = self.local_world.decompose()

    def world_forward(self) -> Vector:
        return self.world.forward()

    def world_right(self) -> Vector:
        return self.world.right()

    def world_up(self) -> Vector:
        return self.world.up()

    def local_forward(self) -> Vector:
        return self.local_world.forward()

    def local_right(self) -> Vector:
        return self.local_world.right()

    def local_up(self) -> Vector:
        return self.local_world.up()

    def collision_data(self) -> CollisionData:
        """Collision volumes built from the world location, half scale and rotation."""
        location = self.world_location
        extents = (self.world_scale * 0.5).abs()
        return CollisionData(
            center=(location.x, location.y, location.z),
            extents=(extents.x, extents.y, extents.z),
            orientation=Quat(*self.world_quat),
        )

    # Edges of the local rectangle in the xy plane.

    def left_top(self) -> Vector:
        return Vector(self.location.x - self.scale.half().x, self.location.y + self.scale.half().y)

    def left_bottom(self) -> Vector:
        return Vector(self.location.x - self.scale.hx(), self.location.y + self.scale.hy())

    def right_top(self) -> Vector:
        return Vector(self.location.x + self.scale.hx(), self.location.y + self.scale.hy())

    def right_bottom(self) -> Vector:
        return Vector(self.location.x + self.scale.half().x, self.location.y - self.scale.half().y)

    def left(self) -> float:
        return self.location.x - self.scale.hx()

    def right(self) -> float:
        return self.location.x + self.scale.hx()

    def top(self) -> float:
        return self.location.y + self.scale.hy()

    def bottom(self) -> float:
        return self.location.y - self.scale.hy()


def _flat_pair(left: Transform, right: Transform) -> tuple[CollisionData, CollisionData]:
    return left.collision_data().flattened(), right.collision_data().flattened()


def _pair(left: Transform, right: Transform) -> tuple[CollisionData, CollisionData]:
    return left.collision_data(), right.collision_data()


def point_to_circle(left: Transform, right: Transform) -> bool:
    """Treat ``left`` as a point with a cleared local scale against a circle."""
    point = dataclasses.replace(left, scale=Vector(*Vector.ZERO))
    return circle_to_circle(point, right)


def point_to_rect(left: Transform, right: Transform) -> bool:
    """Treat ``left`` as a point with a cleared local scale against a rectangle."""
    point = dataclasses.replace(left, scale=Vector(*Vector.ZERO))
    return rect_to_rect(point, right)


def rect_to_rect(left: Transform, right: Transform) -> bool:
    a, b = _flat_pair(left, right)
    return a.aabb.intersects(b.aabb)


def rect_to_circle(left: Transform, right: Transform) -> bool:
    return circle_to_rect(right, left)


def circle_to_circle(left: Transform, right: Transform) -> bool:
    a, b = _flat_pair(left, right)
    return a.sphere.intersects(b.sphere)


def circle_to_rect(left: Transform, right: Transform) -> bool:
    a, b = _flat_pair(left, right)
    return a.sphere.intersects(b.aabb)


def obb2d_to_obb2d(left: Transform, right: Transform) -> bool:
    a, b = _flat_pair(left, right)
    return a.obb.intersects(b.obb)


def obb2d_to_rect(left: Transform, right: Transform) -> bool:
    a, b = _flat_pair(left, right)
    return a.obb.intersects(b.aabb)


def obb2d_to_point(left: Transform, right: Transform) -> bool:
    """Oriented rectangle against the centre of ``right``; its size is ignored."""
    a, b = _flat_pair(left, right)
    point = dataclasses.replace(b, extents=(0.0, 0.0, 0.0))
    return a.obb.intersects(point.aabb)


def obb2d_to_circle(left: Transform, right: Transform) -> bool:
    a, b = _flat_pair(left, right)
    return a.obb.intersects(b.sphere)


def obb_to_sphere(left: Transform, right: Transform) -> bool:
    a, b = _pair(left, right)
    return a.obb.intersects(b.sphere)


def obb_to_obb(left: Transform, right: Transform) -> bool:
    a, b = _pair(left, right)
    return a.obb.intersects(b.obb)


def obb_to_aabb(left: Transform, right: Transform) -> bool:
    a, b = _pair(left, right)
    return a.obb.intersects(b.aabb)


def sphere_to_sphere(left: Transform, right: Transform) -> bool:
    a, b = _pair(left, right)
    return a.sphere.intersects(b.sphere)


def sphere_to_obb(left: Transform, right: Transform) -> bool:
    a, b = _pair(left, right)
    return a.sphere.intersects(b.obb)


def sphere_to_aabb(left: Transform, right: Transform) -> bool:
    a, b = _pair(left, right)
    return a.sphere.intersects(b.aabb)


def aabb_to_sphere(left: Transform, right: Transform) -> bool:
    a, b = _pair(left, right)
    return a.aabb.intersects(b.sphere)


def aabb_to_obb(left: Transform, right: Transform) -> bool:
    a, b = _pair(left, right)
    return a.aabb.intersects(b.obb)


def aabb_to_aabb(left: Transform, right: Transform) -> bool:
    a, b = _pair(left, right)
    return a.aabb.intersects(b.aabb)


_CollisionTest = Callable[[Transform, Transform], bool]

_COLLISIONS: dict[tuple[CollisionType, CollisionType], _CollisionTest] = {
    (CollisionType.RECT, CollisionType.RECT): rect_to_rect,
    (CollisionType.CIRCLE, CollisionType.CIRCLE): circle_to_circle,
    (CollisionType.RECT, CollisionType.CIRCLE): rect_to_circle,
    (CollisionType.CIRCLE, CollisionType.RECT): circle_to_rect,
    (CollisionType.OBB2D, CollisionType.OBB2D): obb2d_to_obb2d,
    (CollisionType.OBB2D, CollisionType.RECT): obb2d_to_rect,
    (CollisionType.OBB2D, CollisionType.CIRCLE): obb2d_to_circle,
    (CollisionType.OBB2D, CollisionType.POINT): obb2d_to_point,
    (CollisionType.OBB, CollisionType.SPHERE): obb_to_sphere,
    (CollisionType.OBB, CollisionType.AABB): obb_to_aabb,
    (CollisionType.OBB, CollisionType.OBB): obb_to_obb,
    (CollisionType.SPHERE, CollisionType.SPHERE): sphere_to_sphere,
    (CollisionType.SPHERE, CollisionType.AABB): sphere_to_aabb,
    (CollisionType.SPHERE, CollisionType.OBB): sphere_to_obb,
    (CollisionType.AABB, CollisionType.SPHERE): aabb_to_sphere,
    (CollisionType.AABB, CollisionType.AABB): aabb_to_aabb,
    (CollisionType.AABB, CollisionType.OBB): aabb_to_obb,
}


def collide(
    left_type: CollisionType,
    left: Transform,
    right_type: CollisionType,
    right: Transform,
) -> bool:
    """Test two transforms as the given shapes.

    Raises EngineError for a pair of shapes that has no test.
    """
    test = _COLLISIONS.get((left_type, right_type))
    if test is None:
        raise EngineError(
            f"no collision test between {left_type.name} and {right_type.name}"
        )
    return test(left, right)