import operator
import warnings

import numpy as np
import pytest

from vecmath import Vector2, Vector3, VectorBase
from vecmath.vectors import vector2


VECTOR_TYPES = [(Vector2, 2), (Vector3, 3)]

OPERATORS = [
    "__add__", "__iadd__", "__sub__", "__isub__",
    "__mul__", "__rmul__", "__imul__",
    "__truediv__", "__itruediv__", "__neg__",
]


@pytest.mark.parametrize("name", OPERATORS)
def test_operators_have_a_single_definition(name):
    assert getattr(Vector2, name) is getattr(VectorBase, name)
    assert getattr(Vector3, name) is getattr(VectorBase, name)


@pytest.mark.parametrize("cls, n", VECTOR_TYPES)
def test_operators_match_float32_reference(cls, n):
    rng = np.random.default_rng(0)
    a = rng.uniform(-100, 100, size=n).astype(np.float32)
    b = rng.uniform(-100, 100, size=n).astype(np.float32)
    s = np.float32(rng.uniform(0.5, 4.0))
    va, vb = cls.from_array(a), cls.from_array(b)

    assert np.array_equal((va + vb).to_array(), a + b)
    assert np.array_equal((va - vb).to_array(), a - b)
    assert np.array_equal((va * s).to_array(), a * s)
    assert np.array_equal((s * va).to_array(), a * s)
    assert np.array_equal((va / s).to_array(), a / s)
    assert np.array_equal((-va).to_array(), -a)


def test_vector2_and_vector3_agree_on_shared_components():
    a, b = Vector2(1.5, -2.25), Vector2(0.125, 8.0)
    lift = Vector2.to_vector3_xy0
    assert lift(a + b) == lift(a) + lift(b)
    assert lift(a - b) == lift(a) - lift(b)
    assert lift(a * 3.0) == lift(a) * 3.0
    assert lift(a / 4.0) == lift(a) / 4.0
    assert lift(-a) == -lift(a)


@pytest.mark.parametrize("cls, n", VECTOR_TYPES)
def test_add_sub_roundtrip_and_commutativity(cls, n):
    a = cls.from_array([0.5, -1.25, 3.0][:n])
    b = cls.from_array([3.0, 8.0, -0.75][:n])
    assert a + b - b == a
    assert a + b == b + a


@pytest.mark.parametrize("cls, n", VECTOR_TYPES)
def test_scale_then_divide_is_close(cls, n):
    v = cls.from_array([0.1, -7.3, 12.9][:n])
    for s in (3.0, -0.7, 1e-3, 250.0):
        assert np.allclose(((v * s) / s).to_array(), v.to_array(), rtol=1e-6)


@pytest.mark.parametrize("cls, n", VECTOR_TYPES)
def test_in_place_operators_mutate_receiver(cls, n):
    v = cls.from_scalar(1.0)
    alias = v
    v += cls.from_scalar(2.0)
    v -= cls.from_scalar(0.5)
    v *= 4
    v /= 2
    assert alias is v
    assert v == cls.from_scalar(5.0)


@pytest.mark.parametrize("cls, n", VECTOR_TYPES)
def test_division_by_zero_propagates_ieee(cls, n):
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        v = cls.from_array([1.0, -1.0, 0.0][:n]) / 0
    assert not caught
    data = v.to_array()
    assert data[0] == np.inf
    assert data[1] == -np.inf
    if n == 3:
        assert np.isnan(data[2])


def test_numpy_scalar_on_the_left_uses_vector_multiplication():
    assert np.float32(2) * Vector2(1, 2) == Vector2(2, 4)
    assert np.float64(0.5) * Vector3(2, 4, 6) == Vector3(1, 2, 3)


@pytest.mark.parametrize(
    "op",
    [operator.add, operator.sub],
)
def test_mixing_dimensions_is_a_type_error(op):
    with pytest.raises(TypeError):
        op(Vector2(1, 2), Vector3(1, 2, 3))


def test_vector_times_vector_is_a_type_error():
    with pytest.raises(TypeError):
        Vector2(1, 2) * Vector2(3, 4)
    with pytest.raises(TypeError):
        Vector3(1, 2, 3) / Vector3(1, 1, 1)


def test_constants_are_not_mutated_by_in_place_operators():
    v = vector2.ZERO
    v += Vector2(1, 1)
    v *= 3
    assert v == Vector2(3, 3)
    assert vector2.ZERO == Vector2(0, 0)
    with pytest.raises(ValueError):
        vector2.UP.x = 4.0


def test_copy_is_independent():
    v = Vector3(1, 2, 3)
    w = v.copy()
    w += Vector3(1, 1, 1)
    assert v == Vector3(1, 2, 3)
    assert w == Vector3(2, 3, 4)


def test_equality_is_exact_and_nan_unequal():
    assert Vector2(0.0, 1.0) == Vector2(-0.0, 1.0)
    assert Vector2(1.0, 1.0) != Vector2(1.0, 1.0 + 1e-6)
    nan = Vector2(float("nan"), 0.0)
    assert nan != nan


def test_vectors_are_unhashable():
    with pytest.raises(TypeError):
        hash(Vector2(1, 2))


def test_unpacking_and_len():
    x, y, z = Vector3(1, 2, 3)
    assert (x, y, z) == (1.0, 2.0, 3.0)
    assert len(Vector2()) == 2
    assert len(Vector3()) == 3


def test_constructor_arity_is_checked():
    with pytest.raises(TypeError):
        Vector2.from_components(1, 2, 3)
    with pytest.raises(TypeError):
        Vector2.from_components(1)
    with pytest.raises(TypeError):
        Vector3.from_components(1, 2)
    with pytest.raises(TypeError):
        Vector3.from_components(1, 2, 3, 4)
    assert Vector3.from_components(1, 2, 3) == Vector3(1, 2, 3)


SHARED_GEOMETRY = [
    "length", "normalized", "normalized_or_zero",
    "angle_between", "cos_between",
    "projected_onto", "projection_of", "rejection_from", "rejection_of",
    "is_almost_zero", "is_almost_equal_to",
]


@pytest.mark.parametrize("name", SHARED_GEOMETRY)
def test_generic_geometry_has_a_single_definition(name):
    assert getattr(Vector2, name) is getattr(VectorBase, name)
    assert getattr(Vector3, name) is getattr(VectorBase, name)


@pytest.mark.parametrize("cls, n", VECTOR_TYPES)
def test_non_finite_and_overflow_propagate_without_warnings(cls, n):
    inf = cls.from_scalar(np.inf)
    huge = cls.from_scalar(3e38)
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        diff = inf - inf
        scaled = huge * 10
        total = huge + huge
        moved = cls.from_scalar(1.0)
        moved -= inf
        moved *= 1e30
        ls = cls.from_scalar(1e30).length_squared()
        n30 = cls.from_scalar(1e30).normalized()
        close = inf.is_almost_equal_to(inf)
        dotted = huge.dot(huge)
        lifted = cls.from_scalar(1e300)
        angle = inf.angle_between(huge)
        proj = huge.projected_onto(inf)
    assert np.all(np.isnan(diff.to_array()))
    assert np.all(np.isposinf(scaled.to_array()))
    assert np.all(np.isposinf(total.to_array()))
    assert np.all(np.isneginf(moved.to_array()))
    assert np.isposinf(ls)
    assert n30 is not None
    assert not close
    assert np.isposinf(dotted)
    assert np.all(np.isposinf(lifted.to_array()))
    assert np.isnan(angle)
    assert np.all(np.isnan(proj.to_array()))


def test_vector3_products_propagate_without_warnings():
    inf = Vector3.from_scalar(np.inf)
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        cross = inf.cross(inf)
        sin = inf.sin_between(Vector3(1, 0, 0))
        turned = Vector3(np.inf, 0, 0).rotated_around_z_by(0.5)
    assert np.all(np.isnan(cross.to_array()))
    assert np.isnan(sin)
    assert np.isinf(turned.x)


@pytest.mark.parametrize(
    "method",
    ["element_wise_product", "with_sign_of", "dot", "projected_onto",
     "projection_of", "cos_between", "is_almost_equal_to"],
)
def test_mixing_dimensions_in_methods_is_a_type_error(method):
    with pytest.raises(TypeError):
        getattr(Vector2(1, 2), method)(Vector3(1, 2, 3))
    with pytest.raises(TypeError):
        getattr(Vector3(1, 2, 3), method)(Vector2(1, 2))
