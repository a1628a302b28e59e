# vecmath/vectors/_base.py
from __future__ import annotations

import numbers
from typing import Any, ClassVar, Iterator, List, Optional, Tuple, Type, TypeVar

import numpy as np

from vecmath.utils.linalg import FLOAT32_EPS
from vecmath.utils.types import DTYPE, Scalar, FloatArray

V = TypeVar("V", bound="VectorBase")

# Non-finite inputs and overflow follow IEEE-754 silently; nothing is raised or warned.
ieee = np.errstate(over="ignore", invalid="ignore", divide="ignore")


def _as_scalar(value: Any) -> Optional[Scalar]:
    """Return `value` as a float32 scalar, or None if it is not a real number."""
    if isinstance(value, VectorBase) or not isinstance(value, numbers.Real):
        return None
    return DTYPE(value)


def _component_property(index: int, name: str) -> property:
    def fget(self: VectorBase) -> Scalar:
        return self._data[index]

    @ieee
    def fset(self: VectorBase, value: float) -> None:
        if not self._data.flags.writeable:
            raise ValueError(f"Cannot assign {name!r} on a read-only constant {type(self).__name__}.")
        self._data[index] = value

    return property(fget, fset, doc=f"The {name} component (float32).")


class VectorBase:
    """
    Fixed-size float32 vector carrying the arithmetic operator set.

    Subclasses declare their component names in ``_components`` (and the
    interchange record type in ``_record``) and implement ``length_squared``
    and ``dot`` with their explicit per-component formulas. The component
    properties are generated from ``_components`` when the subclass is
    created; every operator and every geometric operation that only needs
    ``dot``/``length_squared`` is written once here, so all dimensionalities
    share a single definition.

    Operators
    ---------
    - ``a + b``, ``a - b``      : component-wise, operands of the same vector type
    - ``v * s``, ``s * v``      : scale by a real scalar (commutes)
    - ``v / s``                 : scale by the reciprocal, IEEE inf/nan on s == 0
    - ``-v``                    : component-wise sign flip
    - ``+=``, ``-=``, ``*=``, ``/=`` mutate the left operand in place

    Notes
    -----
    - No operation raises or warns on non-finite values or overflow;
      inf/NaN propagate per IEEE-754.
    - Equality is exact per component (NaN != NaN, -0.0 == 0.0).
    - Vectors are unhashable since the in-place operators mutate them.
    - Read-only constants (see ``_constant``) never mutate: an in-place
      operator on one returns a new vector instead.
    """

    __slots__ = ("_data",)

    # numpy scalars on the left-hand side defer to our reflected operators.
    __array_ufunc__ = None
    __hash__ = None  # type: ignore[assignment]

    _components: ClassVar[Tuple[str, ...]] = ()
    _record: ClassVar[Optional[type]] = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        for index, name in enumerate(cls._components):
            setattr(cls, name, _component_property(index, name))

    @ieee
    def __init__(self, *components: float) -> None:
        self._check_arity(components)
        self._data = np.array(components, dtype=DTYPE)

    ############################
    # CONSTRUCTION
    ############################

    @classmethod
    def _check_arity(cls, components: Tuple[float, ...]) -> None:
        if len(components) != len(cls._components):
            raise TypeError(
                f"{cls.__name__} expects {len(cls._components)} components, "
                f"got {len(components)}."
            )

    @classmethod
    def _wrap(cls: Type[V], data: FloatArray) -> V:
        obj = cls.__new__(cls)
        obj._data = np.asarray(data, dtype=DTYPE)
        return obj

    @classmethod
    def _constant(cls: Type[V], *components: float) -> V:
        obj = cls(*components)
        obj._data.flags.writeable = False
        return obj

    @classmethod
    def from_components(cls: Type[V], *components: float) -> V:
        """Build from exactly one value per component."""
        cls._check_arity(components)
        return cls(*components)

    @classmethod
    def from_scalar(cls: Type[V], value: float) -> V:
        """Broadcast a single value to every component."""
        return cls(*([value] * len(cls._components)))

    @classmethod
    def from_interchange(cls: Type[V], record: Any) -> V:
        """Build from any record exposing the component names as attributes."""
        return cls(*(getattr(record, name) for name in cls._components))

    def to_interchange(self) -> Any:
        return self._record(*self.to_list())

    def to_list(self) -> List[float]:
        return self._data.tolist()

    def to_array(self) -> FloatArray:
        return self._data.copy()

    def copy(self: V) -> V:
        return self._wrap(self._data.copy())

    def __copy__(self: V) -> V:
        return self.copy()

    def __deepcopy__(self: V, memo: dict) -> V:
        return self.copy()

    ############################
    # ARITHMETIC OPERATORS
    ############################

    def _is_compatible(self, other: Any) -> bool:
        return isinstance(other, VectorBase) and other._components == self._components

    def _require_compatible(self, other: Any) -> None:
        if not self._is_compatible(other):
            raise TypeError(f"Expected a {type(self).__name__}, got {type(other).__name__}.")

    def _assign(self: V, data: FloatArray) -> V:
        if not self._data.flags.writeable:
            return self._wrap(data)
        self._data[...] = data
        return self

    @ieee
    def __add__(self: V, other: Any) -> V:
        if not self._is_compatible(other):
            return NotImplemented
        return self._wrap(self._data + other._data)

    @ieee
    def __iadd__(self: V, other: Any) -> V:
        if not self._is_compatible(other):
            return NotImplemented
        return self._assign(self._data + other._data)

    @ieee
    def __sub__(self: V, other: Any) -> V:
        if not self._is_compatible(other):
            return NotImplemented
        return self._wrap(self._data - other._data)

    @ieee
    def __isub__(self: V, other: Any) -> V:
        if not self._is_compatible(other):
            return NotImplemented
        return self._assign(self._data - other._data)

    @ieee
    def __mul__(self: V, scalar: Any) -> V:
        s = _as_scalar(scalar)
        if s is None:
            return NotImplemented
        return self._wrap(self._data * s)

    __rmul__ = __mul__

    @ieee
    def __imul__(self: V, scalar: Any) -> V:
        s = _as_scalar(scalar)
        if s is None:
            return NotImplemented
        return self._assign(self._data * s)

    @ieee
    def __truediv__(self: V, scalar: Any) -> V:
        s = _as_scalar(scalar)
        if s is None:
            return NotImplemented
        return self._wrap(self._data / s)

    @ieee
    def __itruediv__(self: V, scalar: Any) -> V:
        s = _as_scalar(scalar)
        if s is None:
            return NotImplemented
        return self._assign(self._data / s)

    def __neg__(self: V) -> V:
        return self._wrap(-self._data)

    def __pos__(self: V) -> V:
        return self.copy()

    def __abs__(self: V) -> V:
        return self.abs()

    ############################
    # NORMS, ANGLES, PROJECTIONS
    ############################

    def length_squared(self) -> Scalar:
        raise NotImplementedError

    def dot(self: V, other: V) -> Scalar:
        raise NotImplementedError

    @ieee
    def length(self) -> Scalar:
        return np.sqrt(self.length_squared())

    @ieee
    def normalized(self: V) -> Optional[V]:
        """Unit vector in the same direction, or None if the length is exactly zero."""
        if self.length_squared() == 0:
            return None
        return self / self.length()

    def normalized_or_zero(self: V) -> V:
        n = self.normalized()
        return self._wrap(np.zeros(len(self._components), dtype=DTYPE)) if n is None else n

    @ieee
    def angle_between(self: V, other: V) -> Scalar:
        """Unsigned angle in [0, pi] radians."""
        return np.arccos(self.cos_between(other))

    @ieee
    def cos_between(self: V, other: V) -> Scalar:
        self._require_compatible(other)
        return self.dot(other) / self.length() / other.length()

    @ieee
    def projected_onto(self: V, other: V) -> V:
        """Projection of `self` onto the direction of `other`."""
        self._require_compatible(other)
        return other * (other.dot(self) / other.length_squared())

    @ieee
    def projection_of(self: V, other: V) -> V:
        """Projection of `other` onto the direction of `self`."""
        self._require_compatible(other)
        return self * (self.dot(other) / self.length_squared())

    def rejection_from(self: V, other: V) -> V:
        """Component of `self` orthogonal to `other`."""
        return self - self.projected_onto(other)

    def rejection_of(self: V, other: V) -> V:
        """Component of `other` orthogonal to `self`."""
        return other - other.projected_onto(self)

    @ieee
    def is_almost_zero(self, *, eps: float = FLOAT32_EPS) -> bool:
        return bool(self.length_squared() <= eps * eps)

    def is_almost_equal_to(self: V, other: V, *, eps: float = FLOAT32_EPS) -> bool:
        self._require_compatible(other)
        return (self - other).is_almost_zero(eps=eps)

    ############################
    # COMPONENT-WISE HELPERS
    ############################

    def abs(self: V) -> V:
        return self._wrap(np.abs(self._data))

    def sign(self: V) -> V:
        """Component-wise signum: -1, 0 or +1 (0 for both zeros, NaN stays NaN)."""
        return self._wrap(np.sign(self._data))

    @ieee
    def element_wise_product(self: V, other: V) -> V:
        """Hadamard product."""
        self._require_compatible(other)
        return self._wrap(self._data * other._data)

    def with_sign_of(self: V, other: V) -> V:
        """Magnitudes of `self` with the signs of `other` (``copysign``, honours -0.0)."""
        self._require_compatible(other)
        return self._wrap(np.copysign(self._data, other._data))

    ############################
    # PROTOCOLS
    ############################

    def __eq__(self, other: Any) -> bool:
        if not self._is_compatible(other):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    def __iter__(self) -> Iterator[Scalar]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._components)

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={value!s}" for name, value in zip(self._components, self._data))
        return f"{type(self).__name__}({fields})"

    def to_display_string(self) -> str:
        """``"(x, y)"`` / ``"(x, y, z)"`` for logs and debugging; not a stable format."""
        return "(" + ", ".join(str(value) for value in self._data) + ")"

    __str__ = to_display_string
