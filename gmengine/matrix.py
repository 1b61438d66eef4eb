"""Row-major 4x4 matrices, quaternions and the vector transforms built on them.

Vectors are row vectors: a point is transformed with ``vector @ matrix``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Optional

from gmengine import mathutil
from gmengine.vector import Vector

_Row3 = tuple[float, float, float]

_IDENTITY_ROWS = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)

_SINGULAR_EPSILON = 1e-12
_DEGENERATE_SCALE = 1e-6
_ASIN_THRESHOLD = 0.4999995


@dataclass
class Quat:
    """A rotation quaternion; the default is the identity rotation."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def __iter__(self) -> Iterator[float]:
        yield from (self.x, self.y, self.z, self.w)

    @staticmethod
    def from_euler_deg(angles: Vector) -> Quat:
        """Quaternion from pitch (x), yaw (y) and roll (z) in degrees."""
        return Quat.from_euler_rad(angles * mathutil.D2R)

    @staticmethod
    def from_euler_rad(angles: Vector) -> Quat:
        """Quaternion from pitch (x), yaw (y) and roll (z) in radians.

        Roll is applied first, then pitch, then yaw.
        """
        sp, cp = math.sin(angles.x * 0.5), math.cos(angles.x * 0.5)
        sy, cy = math.sin(angles.y * 0.5), math.cos(angles.y * 0.5)
        sr, cr = math.sin(angles.z * 0.5), math.cos(angles.z * 0.5)
        return Quat(
            cr * sp * cy + sr * cp * sy,
            cr * cp * sy - sr * sp * cy,
            sr * cp * cy - cr * sp * sy,
            cr * cp * cy + sr * sp * sy,
        )

    def to_euler_deg(self) -> Vector:
        """Pitch, yaw and roll in degrees."""
        return self.to_euler_rad() * mathutil.R2D

    def to_euler_rad(self) -> Vector:
        """Pitch, yaw and roll in radians; pitch is pinned at +-pi/2 near the poles."""
        x, y, z, w = self
        roll = math.atan2(2.0 * (w * z + x * y), 1.0 - 2.0 * (z * z + x * x))

        pitch_test = w * x - y * z
        if pitch_test < -_ASIN_THRESHOLD:
            pitch = -(0.5 * mathutil.PI)
        elif pitch_test > _ASIN_THRESHOLD:
            pitch = 0.5 * mathutil.PI
        else:
            pitch = math.asin(2.0 * pitch_test)

        yaw = math.atan2(2.0 * (w * y + x * z), 1.0 - 2.0 * (x * x + y * y))
        return Vector(pitch, yaw, roll)


def _dot3(a: _Row3, b: _Row3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _cross3(a: _Row3, b: _Row3) -> _Row3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _normalize3(a: _Row3) -> _Row3:
    length = math.sqrt(_dot3(a, a))
    if length == 0.0:
        return a
    return (a[0] / length, a[1] / length, a[2] / length)


def _det3(rows: list[_Row3]) -> float:
    return _dot3(rows[0], _cross3(rows[1], rows[2]))


def _least_aligned_axis(a: _Row3) -> _Row3:
    index = min(range(3), key=lambda i: abs(a[i]))
    return tuple(1.0 if i == index else 0.0 for i in range(3))  # type: ignore[return-value]


def _complete_basis(units: list[Optional[_Row3]]) -> list[_Row3]:
    """Fill in axes whose scale collapsed so the rows form a right-handed basis."""
    missing = [i for i, unit in enumerate(units) if unit is None]
    if len(missing) == 3:
        return [row[:3] for row in _IDENTITY_ROWS[:3]]  # type: ignore[misc]
    if len(missing) == 2:
        (valid,) = (i for i, unit in enumerate(units) if unit is not None)
        follower = (valid + 1) % 3
        units[follower] = _normalize3(_cross3(units[valid], _least_aligned_axis(units[valid])))
        missing = [(valid + 2) % 3]
    for i in missing:
        units[i] = _normalize3(_cross3(units[(i + 1) % 3], units[(i + 2) % 3]))
    return units  # type: ignore[return-value]


def _quat_from_rotation(m: list[_Row3]) -> Quat:
    trace = m[0][0] + m[1][1] + m[2][2]
    if trace > 0.0:
        s = math.sqrt(trace + 1.0) * 2.0
        quat = Quat((m[1][2] - m[2][1]) / s, (m[2][0] - m[0][2]) / s, (m[0][1] - m[1][0]) / s, 0.25 * s)
    elif m[0][0] > m[1][1] and m[0][0] > m[2][2]:
        s = math.sqrt(1.0 + m[0][0] - m[1][1] - m[2][2]) * 2.0
        quat = Quat(0.25 * s, (m[0][1] + m[1][0]) / s, (m[2][0] + m[0][2]) / s, (m[1][2] - m[2][1]) / s)
    elif m[1][1] > m[2][2]:
        s = math.sqrt(1.0 + m[1][1] - m[0][0] - m[2][2]) * 2.0
        quat = Quat((m[0][1] + m[1][0]) / s, 0.25 * s, (m[1][2] + m[2][1]) / s, (m[2][0] - m[0][2]) / s)
    else:
        s = math.sqrt(1.0 + m[2][2] - m[0][0] - m[1][1]) * 2.0
        quat = Quat((m[2][0] + m[0][2]) / s, (m[1][2] + m[2][1]) / s, 0.25 * s, (m[0][1] - m[1][0]) / s)
    length = math.sqrt(sum(c * c for c in quat))
    return Quat(*(c / length for c in quat))


def _ieee_div(numerator: float, denominator: float) -> float:
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


@dataclass(frozen=True)
class Matrix:
    """An immutable 4x4 matrix stored as four rows; the default is the identity."""

    rows: tuple[tuple[float, ...], ...] = _IDENTITY_ROWS

    def __post_init__(self) -> None:
        rows = tuple(tuple(float(value) for value in row) for row in self.rows)
        if len(rows) != 4 or any(len(row) != 4 for row in rows):
            raise ValueError("a matrix needs four rows of four values")
        object.__setattr__(self, "rows", rows)

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, column = index
        return self.rows[row][column]

    def __iter__(self) -> Iterator[tuple[float, ...]]:
        return iter(self.rows)

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        columns = list(zip(*other.rows))
        return Matrix(
            tuple(
                tuple(sum(a * b for a, b in zip(row, column)) for column in columns)
                for row in self.rows
            )
        )

    def __rmatmul__(self, vector):
        if not isinstance(vector, Vector):
            return NotImplemented
        values = tuple(vector)
        return Vector(*(sum(a * b for a, b in zip(values, column)) for column in zip(*self.rows)))

    # --- construction ---------------------------------------------------

    @staticmethod
    def identity() -> Matrix:
        return Matrix(_IDENTITY_ROWS)

    @staticmethod
    def scaling(value: Vector) -> Matrix:
        """Scale along x, y and z."""
        return Matrix(
            (
                (value.x, 0.0, 0.0, 0.0),
                (0.0, value.y, 0.0, 0.0),
                (0.0, 0.0, value.z, 0.0),
                (0.0, 0.0, 0.0, 1.0),
            )
        )

    @staticmethod
    def translation(value: Vector) -> Matrix:
        """Move by x, y and z."""
        return Matrix(
            (
                (1.0, 0.0, 0.0, 0.0),
                (0.0, 1.0, 0.0, 0.0),
                (0.0, 0.0, 1.0, 0.0),
                (value.x, value.y, value.z, 1.0),
            )
        )

    @staticmethod
    def rotation_deg(angles: Vector) -> Matrix:
        """Rotation from pitch (x), yaw (y) and roll (z) in degrees."""
        return Matrix.rotation_rad(angles * mathutil.D2R)

    @staticmethod
    def rotation_rad(angles: Vector) -> Matrix:
        """Rotation from pitch (x), yaw (y) and roll (z) in radians: roll, then pitch, then yaw."""
        sp, cp = math.sin(angles.x), math.cos(angles.x)
        sy, cy = math.sin(angles.y), math.cos(angles.y)
        sr, cr = math.sin(angles.z), math.cos(angles.z)
        return Matrix(
            (
                (cr * cy + sr * sp * sy, sr * cp, sr * sp * cy - cr * sy, 0.0),
                (cr * sp * sy - sr * cy, cr * cp, sr * sy + cr * sp * cy, 0.0),
                (cp * sy, -sp, cp * cy, 0.0),
                (0.0, 0.0, 0.0, 1.0),
            )
        )

    @staticmethod
    def rotation_quat(quat: Quat) -> Matrix:
        """Rotation described by a unit quaternion."""
        x, y, z, w = quat
        return Matrix(
            (
                (1.0 - 2.0 * (y * y + z * z), 2.0 * (x * y + z * w), 2.0 * (x * z - y * w), 0.0),
                (2.0 * (x * y - z * w), 1.0 - 2.0 * (x * x + z * z), 2.0 * (y * z + x * w), 0.0),
                (2.0 * (x * z + y * w), 2.0 * (y * z - x * w), 1.0 - 2.0 * (x * x + y * y), 0.0),
                (0.0, 0.0, 0.0, 1.0),
            )
        )

    @staticmethod
    def _axis_rotation(a: int, b: int, angle: float) -> Matrix:
        c, s = math.cos(angle), math.sin(angle)
        rows = [list(row) for row in _IDENTITY_ROWS]
        rows[a][a] = c
        rows[a][b] = -s
        rows[b][a] = s
        rows[b][b] = c
        return Matrix(tuple(tuple(row) for row in rows))

    @staticmethod
    def rotation_x_deg(angle: float) -> Matrix:
        return Matrix.rotation_x_rad(angle * mathutil.D2R)

    @staticmethod
    def rotation_x_rad(angle: float) -> Matrix:
        """Rotation about x, laid out for column vectors."""
        return Matrix._axis_rotation(1, 2, angle)

    @staticmethod
    def rotation_y_deg(angle: float) -> Matrix:
        return Matrix.rotation_y_rad(angle * mathutil.D2R)

    @staticmethod
    def rotation_y_rad(angle: float) -> Matrix:
        """Rotation about y, laid out for column vectors."""
        return Matrix._axis_rotation(2, 0, angle)

    @staticmethod
    def rotation_z_deg(angle: float) -> Matrix:
        return Matrix.rotation_z_rad(angle * mathutil.D2R)

    @staticmethod
    def rotation_z_rad(angle: float) -> Matrix:
        """Rotation about z, laid out for column vectors."""
        return Matrix._axis_rotation(0, 1, angle)

    @staticmethod
    def look_to_lh(pos: Vector, direction: Vector, up: Vector) -> Matrix:
        """Left-handed view matrix for an eye at ``pos`` looking along ``direction``."""
        forward = _normalize3((direction.x, direction.y, direction.z))
        right = _normalize3(_cross3((up.x, up.y, up.z), forward))
        real_up = _cross3(forward, right)
        neg_eye = (-pos.x, -pos.y, -pos.z)
        return Matrix(
            (
                (right[0], real_up[0], forward[0], 0.0),
                (right[1], real_up[1], forward[1], 0.0),
                (right[2], real_up[2], forward[2], 0.0),
                (_dot3(right, neg_eye), _dot3(real_up, neg_eye), _dot3(forward, neg_eye), 1.0),
            )
        )

    @staticmethod
    def orthographic_lh(width: float, height: float, near: float, far: float) -> Matrix:
        """Left-handed orthographic projection mapping depth [near, far] to [0, 1]."""
        depth_range = 1.0 / (far - near)
        return Matrix(
            (
                (2.0 / width, 0.0, 0.0, 0.0),
                (0.0, 2.0 / height, 0.0, 0.0),
                (0.0, 0.0, depth_range, 0.0),
                (0.0, 0.0, -depth_range * near, 1.0),
            )
        )

    @staticmethod
    def perspective_fov_deg(fov: float, width: float, height: float, near: float, far: float) -> Matrix:
        return Matrix.perspective_fov_rad(fov * mathutil.D2R, width, height, near, far)

    @staticmethod
    def perspective_fov_rad(fov: float, width: float, height: float, near: float, far: float) -> Matrix:
        """Left-handed perspective projection with a vertical field of view."""
        half = fov * 0.5
        y_scale = math.cos(half) / math.sin(half)
        x_scale = y_scale / (width / height)
        depth_range = far / (far - near)
        return Matrix(
            (
                (x_scale, 0.0, 0.0, 0.0),
                (0.0, y_scale, 0.0, 0.0),
                (0.0, 0.0, depth_range, 1.0),
                (0.0, 0.0, -depth_range * near, 0.0),
            )
        )

    @staticmethod
    def viewport(width: float, height: float, left: float, top: float, z_min: float, z_max: float) -> Matrix:
        """Map normalised device coordinates to screen pixels with y pointing down."""
        sx = width * 0.5
        sy = -height * 0.5
        depth = 1.0 if z_max != 0.0 else _ieee_div(z_min, z_max)
        return Matrix(
            (
                (sx, 0.0, 0.0, 0.0),
                (0.0, sy, 0.0, 0.0),
                (0.0, 0.0, depth, 0.0),
                (sx + left, -sy + top, depth, 1.0),
            )
        )

    # --- operations -----------------------------------------------------

    def transposed(self) -> Matrix:
        return Matrix(tuple(zip(*self.rows)))

    def inverse(self) -> Matrix:
        """The inverse matrix; raises ValueError if the matrix is singular."""
        augmented = [
            list(row) + list(unit) for row, unit in zip(self.rows, _IDENTITY_ROWS)
        ]
        for column in range(4):
            pivot = max(range(column, 4), key=lambda r: abs(augmented[r][column]))
            if abs(augmented[pivot][column]) < _SINGULAR_EPSILON:
                raise ValueError("matrix is singular")
            augmented[column], augmented[pivot] = augmented[pivot], augmented[column]
            divisor = augmented[column][column]
            augmented[column] = [value / divisor for value in augmented[column]]
            for r, row in enumerate(augmented):
                factor = row[column]
                if r != column and factor != 0.0:
                    augmented[r] = [a - factor * b for a, b in zip(row, augmented[column])]
        return Matrix(tuple(tuple(row[4:]) for row in augmented))

    def decompose(self) -> tuple[Vector, Quat, Vector]:
        """Split into scale, rotation quaternion and translation."""
        axes = [row[:3] for row in self.rows[:3]]
        scales = [math.sqrt(_dot3(axis, axis)) for axis in axes]
        units: list[Optional[_Row3]] = [
            (axis[0] / scale, axis[1] / scale, axis[2] / scale) if scale > _DEGENERATE_SCALE else None
            for axis, scale in zip(axes, scales)
        ]
        basis = _complete_basis(units)
        if _det3(basis) < 0.0:
            scales[0] = -scales[0]
            basis[0] = (-basis[0][0], -basis[0][1], -basis[0][2])
        quat = _quat_from_rotation(basis)
        return Vector(scales[0], scales[1], scales[2], 0.0), quat, Vector(*self.rows[3])

    def row(self, index: int) -> Vector:
        return Vector(*self.rows[index])

    def forward(self) -> Vector:
        """The normalised z axis row."""
        return self.row(2).normalized()

    def right(self) -> Vector:
        """The normalised x axis row."""
        return self.row(0).normalized()

    def up(self) -> Vector:
        """The normalised y axis row."""
        return self.row(1).normalized()


def transform(vector: Vector, matrix: Matrix) -> Vector:
    """Multiply all four components of ``vector`` by ``matrix``."""
    return vector @ matrix


def transform_coord(vector: Vector, matrix: Matrix) -> Vector:
    """Transform as a point: w is taken as 1, so translation applies."""
    return Vector(vector.x, vector.y, vector.z, 1.0) @ matrix


def transform_normal(vector: Vector, matrix: Matrix) -> Vector:
    """Transform as a direction: w is taken as 0, so translation is ignored."""
    return Vector(vector.x, vector.y, vector.z, 0.0) @ matrix