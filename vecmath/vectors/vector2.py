# vecmath/vectors/vector2.py
from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from vecmath.interop import Vector2Record
from vecmath.utils.linalg import vec2
from vecmath.utils.types import ArrayLike, Scalar
from vecmath.vectors._base import VectorBase, ieee

if TYPE_CHECKING:
    from vecmath.vectors.vector3 import Vector3


class Vector2(VectorBase):
    """
    2-component float32 vector.

    Conventions
    -----------
    - Right-handed, y-up frame: positive angles rotate counter-clockwise.
    - Angles are in radians.
    - Scalar results are float32 (``np.float32``).

    Notes
    -----
    Degenerate inputs (zero-length operands) are not guarded: angles,
    cosines and projections return NaN/inf following IEEE-754. Only
    `normalized` has an explicit failure result (None).
    """

    __slots__ = ()
    _components = ("x", "y")
    _record = Vector2Record

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        super().__init__(x, y)

    @classmethod
    def from_array(cls, a: ArrayLike) -> Vector2:
        return cls._wrap(vec2(a).copy())

    ############################
    # NORMS & PRODUCTS
    ############################

    @ieee
    def length_squared(self) -> Scalar:
        """Squared Euclidean norm; cheaper than `length` for comparisons."""
        return self.x * self.x + self.y * self.y

    @ieee
    def dot(self, other: Vector2) -> Scalar:
        self._require_compatible(other)
        return self.x * other.x + self.y * other.y

    @ieee
    def sin_between(self, other: Vector2) -> Scalar:
        """
        Sine of the angle between the two vectors, from ``sqrt(1 - cos^2)``.

        Always non-negative: the orientation (clockwise or not) is lost.
        """
        return np.sqrt(Scalar(1) - self.cos_between(other) ** 2)

    ############################
    # INTERVALS
    ############################

    def is_x_inside_interval(self, lo: float, hi: float) -> bool:
        return bool(lo <= self.x <= hi)

    def is_y_inside_interval(self, lo: float, hi: float) -> bool:
        return bool(lo <= self.y <= hi)

    ############################
    # TRANSFORMS
    ############################

    @ieee
    def rotated_by(self, radians: float) -> Vector2:
        """Counter-clockwise rotation by `radians`."""
        theta = Scalar(radians)
        c, s = np.cos(theta), np.sin(theta)
        return Vector2(self.x * c - self.y * s, self.x * s + self.y * c)

    def flipped_x(self) -> Vector2:
        return Vector2(-self.x, self.y)

    def flipped_y(self) -> Vector2:
        return Vector2(self.x, -self.y)

    def swapped_xy(self) -> Vector2:
        return Vector2(self.y, self.x)

    def to_vector3(self, z: float) -> Vector3:
        from vecmath.vectors.vector3 import Vector3

        return Vector3(self.x, self.y, z)

    def to_vector3_xy0(self) -> Vector3:
        return self.to_vector3(0.0)


ZERO = Vector2._constant(0.0, 0.0)
IDENTITY = Vector2._constant(1.0, 1.0)
RIGHT = Vector2._constant(1.0, 0.0)
LEFT = Vector2._constant(-1.0, 0.0)
UP = Vector2._constant(0.0, 1.0)
DOWN = Vector2._constant(0.0, -1.0)
