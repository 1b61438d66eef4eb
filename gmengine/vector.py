"""Four-component vectors, integer grid points and packed RGBA colours."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterator

from gmengine import mathutil


@dataclass(eq=False)
class Vector:
    """A vector of x, y, z and w; w defaults to 1.

    Arithmetic works on x, y and z; equality and division look at x and y only.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    NONE: ClassVar[Vector]
    ZERO: ClassVar[Vector]
    LEFT: ClassVar[Vector]
    RIGHT: ClassVar[Vector]
    UP: ClassVar[Vector]
    DOWN: ClassVar[Vector]
    FORWARD: ClassVar[Vector]
    BACK: ClassVar[Vector]
    WHITE: ClassVar[Vector]
    BLACK: ClassVar[Vector]
    RED: ClassVar[Vector]
    BLUE: ClassVar[Vector]
    GREEN: ClassVar[Vector]

    def __iter__(self) -> Iterator[float]:
        yield from (self.x, self.y, self.z, self.w)

    # --- static helpers -------------------------------------------------

    @staticmethod
    def angle_between_deg(left: Vector, right: Vector) -> float:
        """Angle between two vectors in degrees."""
        return Vector.angle_between_rad(left, right) * mathutil.R2D

    @staticmethod
    def angle_between_rad(left: Vector, right: Vector) -> float:
        """Angle between two vectors in radians."""
        cos_value = Vector.dot(left.normalized(), right.normalized())
        return math.acos(mathutil.clamp(cos_value, -1.0, 1.0))

    @staticmethod
    def cross(left: Vector, right: Vector) -> Vector:
        """Three-dimensional cross product."""
        return Vector(
            left.y * right.z - left.z * right.y,
            left.z * right.x - left.x * right.z,
            left.x * right.y - left.y * right.x,
        )

    @staticmethod
    def dot(left: Vector, right: Vector) -> float:
        """Three-dimensional dot product."""
        return left.x * right.x + left.y * right.y + left.z * right.z

    def dot2d(self, other: Vector) -> float:
        """Dot product of the x and y components."""
        return self.x * other.x + self.y * other.y

    @staticmethod
    def lerp(a: Vector, b: Vector, alpha: float) -> Vector:
        """Interpolate x and y between two vectors; alpha is clamped to [0, 1]."""
        alpha = mathutil.clamp(alpha, 0.0, 1.0)
        return Vector(mathutil.lerp(a.x, b.x, alpha), mathutil.lerp(a.y, b.y, alpha))

    @staticmethod
    def angle_to_vector_deg(angle: float) -> Vector:
        """Unit vector in the xy plane pointing at ``angle`` degrees."""
        return Vector.angle_to_vector_rad(angle * mathutil.D2R)

    @staticmethod
    def angle_to_vector_rad(angle: float) -> Vector:
        """Unit vector in the xy plane pointing at ``angle`` radians."""
        return Vector(math.cos(angle), math.sin(angle))

    # --- components -----------------------------------------------------

    def ix(self) -> int:
        return int(self.x)

    def iy(self) -> int:
        return int(self.y)

    def hx(self) -> float:
        return self.x * 0.5

    def hy(self) -> float:
        return self.y * 0.5

    def is_zeroed(self) -> bool:
        """True if x or y is zero."""
        return self.x == 0.0 or self.y == 0.0

    def half(self) -> Vector:
        return Vector(self.x * 0.5, self.y * 0.5)

    def length(self) -> float:
        return mathutil.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> None:
        """Scale x, y and z to unit length in place; zero vectors are left as is."""
        length = self.length()
        if 0.0 < length:
            self.x /= length
            self.y /= length
            self.z /= length

    def normalized(self) -> Vector:
        result = Vector(*self)
        result.normalize()
        return result

    def abs(self) -> Vector:
        """Vector of the absolute values of all four components."""
        return Vector(abs(self.x), abs(self.y), abs(self.z), abs(self.w))

    def to_int_point(self) -> IntPoint:
        return IntPoint(self.ix(), self.iy())

    def equal_to_int(self, other: Vector) -> bool:
        """Compare the truncated x and y components."""
        return self.ix() == other.ix() and self.iy() == other.iy()

    # --- rotations ------------------------------------------------------

    def rotate_x_deg(self, angle: float) -> None:
        self.rotate_x_rad(angle * mathutil.D2R)

    def rotate_x_rad(self, angle: float) -> None:
        rotated = self.rotated_x_rad(angle)
        self.y, self.z = rotated.y, rotated.z

    def rotated_x_deg(self, angle: float) -> Vector:
        return self.rotated_x_rad(angle * mathutil.D2R)

    def rotated_x_rad(self, angle: float) -> Vector:
        c, s = math.cos(angle), math.sin(angle)
        return Vector(self.x, self.z * s + self.y * c, self.z * c - self.y * s, self.w)

    def rotate_y_deg(self, angle: float) -> None:
        self.rotate_y_rad(angle * mathutil.D2R)

    def rotate_y_rad(self, angle: float) -> None:
        rotated = self.rotated_y_rad(angle)
        self.x, self.z = rotated.x, rotated.z

    def rotated_y_deg(self, angle: float) -> Vector:
        return self.rotated_y_rad(angle * mathutil.D2R)

    def rotated_y_rad(self, angle: float) -> Vector:
        c, s = math.cos(angle), math.sin(angle)
        return Vector(self.x * c - self.z * s, self.y, self.x * s + self.z * c, self.w)

    def rotate_z_deg(self, angle: float) -> None:
        self.rotate_z_rad(angle * mathutil.D2R)

    def rotate_z_rad(self, angle: float) -> None:
        rotated = self.rotated_z_rad(angle)
        self.x, self.y = rotated.x, rotated.y

    def rotated_z_deg(self, angle: float) -> Vector:
        return self.rotated_z_rad(angle * mathutil.D2R)

    def rotated_z_rad(self, angle: float) -> Vector:
        c, s = math.cos(angle), math.sin(angle)
        return Vector(self.x * c - self.y * s, self.x * s + self.y * c, self.z, self.w)

    # --- text -----------------------------------------------------------

    def to_string(self) -> str:
        return f"X : [{self.x:f}] Y : [{self.y:f}] Z : [{self.z:f}] W : [{self.w:f}]"

    def __str__(self) -> str:
        return self.to_string()

    # --- operators ------------------------------------------------------

    def __mul__(self, value):
        if isinstance(value, (int, float)):
            return Vector(self.x * value, self.y * value, self.z * value)
        return NotImplemented

    def __rmul__(self, value):
        return self.__mul__(value)

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    def __truediv__(self, other):
        if isinstance(other, Vector):
            return Vector(self.x / other.x, self.y / other.y)
        if isinstance(other, (int, float)):
            return Vector(self.x / other, self.y / other)
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __iadd__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __isub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    def __imul__(self, other):
        if isinstance(other, Vector):
            self.x *= other.x
            self.y *= other.y
            self.z *= other.z
            return self
        if isinstance(other, (int, float)):
            self.x *= other
            self.y *= other
            self.z *= other
            return self
        return NotImplemented

    def __itruediv__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        self.x /= other.x
        self.y /= other.y
        self.z /= other.z
        return self


Vector.WHITE = Vector(1.0, 1.0, 1.0, 1.0)
Vector.BLACK = Vector(0.0, 0.0, 0.0, 1.0)
Vector.RED = Vector(1.0, 0.0, 0.0, 1.0)
Vector.BLUE = Vector(0.0, 0.0, 1.0, 1.0)
Vector.GREEN = Vector(0.0, 1.0, 0.0, 1.0)
Vector.NONE = Vector(0.0, 0.0, 0.0, 0.0)
Vector.ZERO = Vector(0.0, 0.0, 0.0, 1.0)
Vector.LEFT = Vector(-1.0, 0.0, 0.0, 0.0)
Vector.RIGHT = Vector(1.0, 0.0, 0.0, 0.0)
Vector.UP = Vector(0.0, 1.0, 0.0, 0.0)
Vector.DOWN = Vector(0.0, -1.0, 0.0, 0.0)
Vector.FORWARD = Vector(0.0, 0.0, 1.0, 0.0)
Vector.BACK = Vector(0.0, 0.0, -1.0, 0.0)


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


@dataclass(frozen=True)
class IntPoint:
    """An integer grid position; screen y grows downwards."""

    x: int = 0
    y: int = 0

    LEFT: ClassVar[IntPoint]
    RIGHT: ClassVar[IntPoint]
    UP: ClassVar[IntPoint]
    DOWN: ClassVar[IntPoint]

    def __add__(self, other):
        if not isinstance(other, IntPoint):
            return NotImplemented
        return IntPoint(self.x + other.x, self.y + other.y)

    def __truediv__(self, value):
        """Divide both coordinates, truncating towards zero."""
        if not isinstance(value, int):
            return NotImplemented
        return IntPoint(_trunc_div(self.x, value), _trunc_div(self.y, value))


IntPoint.LEFT = IntPoint(-1, 0)
IntPoint.RIGHT = IntPoint(1, 0)
IntPoint.UP = IntPoint(0, -1)
IntPoint.DOWN = IntPoint(0, 1)


@dataclass(frozen=True, eq=False)
class Color:
    """An 8-bit RGBA colour; packs into 32 bits with red in the lowest byte.

    Equality compares red, green and blue only.
    """

    r: int
    g: int
    b: int
    a: int = 255

    WHITE: ClassVar[Color]
    BLACK: ClassVar[Color]
    RED: ClassVar[Color]
    BLUE: ClassVar[Color]
    GREEN: ClassVar[Color]

    def __post_init__(self) -> None:
        for name, channel in (("r", self.r), ("g", self.g), ("b", self.b), ("a", self.a)):
            if not 0 <= channel <= 0xFF:
                raise ValueError(f"colour channel {name} out of range: {channel}")

    @classmethod
    def from_int(cls, value: int) -> Color:
        """Unpack a 32-bit colour value."""
        if not 0 <= value <= 0xFFFFFFFF:
            raise ValueError(f"colour value out of range: {value}")
        return cls(
            value & 0xFF,
            (value >> 8) & 0xFF,
            (value >> 16) & 0xFF,
            (value >> 24) & 0xFF,
        )

    def to_int(self) -> int:
        """Pack into a 32-bit value."""
        return self.r | (self.g << 8) | (self.b << 16) | (self.a << 24)

    def __eq__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return (self.r, self.g, self.b) == (other.r, other.g, other.b)

    def __hash__(self) -> int:
        return hash((self.r, self.g, self.b))


Color.WHITE = Color(255, 255, 255, 255)
Color.BLACK = Color(0, 0, 0, 255)
Color.RED = Color(255, 0, 0, 255)
Color.BLUE = Color(0, 0, 255, 255)
Color.GREEN = Color(0, 255, 0, 255)