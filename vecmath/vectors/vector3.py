# vecmath/vectors/vector3.py
from __future__ import annotations

from vecmath.interop import Vector3Record
from vecmath.utils.linalg import vec3
from vecmath.utils.types import ArrayLike, Scalar
from vecmath.vectors._base import VectorBase, ieee
from vecmath.vectors.vector2 import Vector2


class Vector3(VectorBase):
    """
    3-component float32 vector.

    Conventions
    -----------
    - Right-handed frame: ``RIGHT x UP == FORWARD`` (x, y, z).
    - Axis rotations apply the `Vector2.rotated_by` formula to the ordered
      axis pairs (y, z), (x, z) and (x, y). Around x and z this follows the
      right-hand rule; around y the (x, z) ordering makes it the opposite
      sense (x turns towards +z).
    - Angles are in radians; scalar results are float32.

    Notes
    -----
    `sin_between` is derived from the cross-product magnitude and therefore
    differs from `Vector2.sin_between`, which goes through the cosine.
    Zero-length operands are not guarded (IEEE NaN/inf propagate).
    """

    __slots__ = ()
    _components = ("x", "y", "z")
    _record = Vector3Record

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        super().__init__(x, y, z)

    @classmethod
    def from_array(cls, a: ArrayLike) -> Vector3:
        return cls._wrap(vec3(a).copy())

    @classmethod
    def from_xy(cls, xy: Vector2, z: float) -> Vector3:
        return cls(xy.x, xy.y, z)

    @classmethod
    def from_xz(cls, xz: Vector2, y: float) -> Vector3:
        return cls(xz.x, y, xz.y)

    @classmethod
    def from_yz(cls, yz: Vector2, x: float) -> Vector3:
        return cls(x, yz.x, yz.y)

    ############################
    # NORMS & PRODUCTS
    ############################

    @ieee
    def length_squared(self) -> Scalar:
        return self.x * self.x + self.y * self.y + self.z * self.z

    @ieee
    def dot(self, other: Vector3) -> Scalar:
        self._require_compatible(other)
        return self.x * other.x + self.y * other.y + self.z * other.z

    @ieee
    def cross(self, other: Vector3) -> Vector3:
        """Right-handed cross product ``self x other``."""
        self._require_compatible(other)
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def cross_in_direction_of(self, other: Vector3, direction: Vector3) -> Vector3:
        """
        Cross product oriented into the half-space of `direction`.

        The result is negated when ``direction . (self x other) < 0``; a dot
        product of exactly zero keeps the unflipped orientation.
        """
        cross = self.cross(other)
        if direction.dot(cross) < 0:
            return -cross
        return cross

    @ieee
    def sin_between(self, other: Vector3) -> Scalar:
        """``|self x other| / (|self| |other|)``, in [0, 1]."""
        return self.cross(other).length() / self.length() / other.length()

    ############################
    # INTERVALS
    ############################

    def is_x_inside_interval(self, lo: float, hi: float) -> bool:
        return bool(lo <= self.x <= hi)

    def is_y_inside_interval(self, lo: float, hi: float) -> bool:
        return bool(lo <= self.y <= hi)

    def is_z_inside_interval(self, lo: float, hi: float) -> bool:
        return bool(lo <= self.z <= hi)

    ############################
    # ROTATIONS
    ############################

    def rotated_around_x_by(self, radians: float) -> Vector3:
        return Vector3.from_yz(self.yz().rotated_by(radians), self.x)

    def rotated_around_y_by(self, radians: float) -> Vector3:
        return Vector3.from_xz(self.xz().rotated_by(radians), self.y)

    def rotated_around_z_by(self, radians: float) -> Vector3:
        return Vector3.from_xy(self.xy().rotated_by(radians), self.z)

    ############################
    # FLIPS & SWIZZLES
    ############################

    def flipped_x(self) -> Vector3:
        return Vector3(-self.x, self.y, self.z)

    def flipped_y(self) -> Vector3:
        return Vector3(self.x, -self.y, self.z)

    def flipped_z(self) -> Vector3:
        return Vector3(self.x, self.y, -self.z)

    def flipped_xy(self) -> Vector3:
        return Vector3(-self.x, -self.y, self.z)

    def flipped_xz(self) -> Vector3:
        return Vector3(-self.x, self.y, -self.z)

    def flipped_yz(self) -> Vector3:
        return Vector3(self.x, -self.y, -self.z)

    def xy(self) -> Vector2:
        return Vector2(self.x, self.y)

    def xz(self) -> Vector2:
        return Vector2(self.x, self.z)

    def yz(self) -> Vector2:
        return Vector2(self.y, self.z)

    def yx(self) -> Vector2:
        return Vector2(self.y, self.x)

    def zx(self) -> Vector2:
        return Vector2(self.z, self.x)

    def zy(self) -> Vector2:
        return Vector2(self.z, self.y)


ZERO = Vector3._constant(0.0, 0.0, 0.0)
IDENTITY = Vector3._constant(1.0, 1.0, 1.0)
RIGHT = Vector3._constant(1.0, 0.0, 0.0)
LEFT = Vector3._constant(-1.0, 0.0, 0.0)
UP = Vector3._constant(0.0, 1.0, 0.0)
DOWN = Vector3._constant(0.0, -1.0, 0.0)
FORWARD = Vector3._constant(0.0, 0.0, 1.0)
# TODO: BACKWARD equals FORWARD, kept for compatibility; confirm whether (0, 0, -1) was intended.
BACKWARD = Vector3._constant(0.0, 0.0, 1.0)
