import numpy as np
import pytest

from softrender.errors import DegenerateGeometryError, DegenerateVectorError
from softrender.models import Matrix3, Triangle, Vector3, cross, midpoint, normalize


def test_vector_arithmetic_returns_new_instances():
    a = Vector3(1, 2, 3)
    b = Vector3(4, 5, 6)
    assert a + b == Vector3(5, 7, 9)
    assert b - a == Vector3(3, 3, 3)
    assert 2 * a == Vector3(2, 4, 6)
    assert a / 2 == Vector3(0.5, 1.0, 1.5)
    assert a == Vector3(1, 2, 3)


def test_vector_is_immutable():
    v = Vector3(1, 2, 3)
    with pytest.raises(AttributeError):
        v.x = 10
    assert v.x == 1.0


def test_midpoint_and_cross():
    assert midpoint(Vector3(0, 0, 0), Vector3(2, -4, 6)) == Vector3(1, -2, 3)
    assert cross(Vector3(1, 0, 0), Vector3(0, 1, 0)) == Vector3(0, 0, 1)
    assert cross(Vector3(0, 1, 0), Vector3(1, 0, 0)) == Vector3(0, 0, -1)


def test_normalize_unit_length():
    n = normalize(Vector3(3, 0, 4))
    assert n.length() == pytest.approx(1.0)
    assert tuple(n) == pytest.approx((0.6, 0.0, 0.8))


def test_normalize_zero_vector_raises():
    with pytest.raises(DegenerateVectorError):
        Vector3(0, 0, 0).normalize()
    # Recoverable per-triangle error family
    assert issubclass(DegenerateVectorError, DegenerateGeometryError)


def test_triangle_iterates_vertices():
    tri = Triangle(Vector3(0, 0, 0), Vector3(1, 0, 0), Vector3(0, 1, 0), (1, 2, 3))
    assert list(tri) == [tri.v1, tri.v2, tri.v3]
    assert tri.color == (1, 2, 3)


def test_matrix_apply_row_major():
    m = Matrix3([1, 2, 3, 4, 5, 6, 7, 8, 9])
    assert m.apply(Vector3(1, 0, 0)) == Vector3(1, 4, 7)
    assert m.apply(Vector3(1, 1, 1)) == Vector3(6, 15, 24)


def test_matrix_compose_applies_right_operand_first():
    a = Matrix3([0, -1, 0, 1, 0, 0, 0, 0, 1])
    b = Matrix3([2, 0, 0, 0, 1, 0, 0, 0, 1])
    v = Vector3(1, 1, 0)
    assert a.compose(b).apply(v) == a.apply(b.apply(v))
    assert not np.allclose(a.compose(b).values, b.compose(a).values)
    assert (a @ b) == a.compose(b)


def test_matrix_identity_and_size_check():
    v = Vector3(-3.5, 2, 9)
    assert Matrix3.identity().apply(v) == v
    with pytest.raises(ValueError):
        Matrix3([1, 2, 3])
