import math
import pickle

import numpy as np
import pytest

from core.errors import DegenerateGeometryError
from core.utils import (random_in_unit_disk, random_in_unit_sphere, random_unit_vector,
                        random_vector, reflect, refract)
from core.vector import Vector3


def approx_vec(v, expected, abs_tol=1e-12):
    return all(math.isclose(a, b, abs_tol=abs_tol) for a, b in zip(v, expected))


P1 = Vector3(35.0, 43.0, 55.0)
P2 = Vector3(43.0, 67.0, 83.0)


def test_arithmetic_is_component_wise():
    assert P1 + P2 == Vector3(78.0, 110.0, 138.0)
    assert P2 - P1 == Vector3(8.0, 24.0, 28.0)
    assert P1 * P2 == Vector3(35.0 * 43.0, 43.0 * 67.0, 55.0 * 83.0)
    assert P1 / P2 == Vector3(35.0 / 43.0, 43.0 / 67.0, 55.0 / 83.0)


def test_scalar_arithmetic():
    assert P1 * 25.0 == Vector3(35.0 * 25.0, 43.0 * 25.0, 55.0 * 25.0)
    assert 2 * P1 == P1 * 2
    assert P1 / 25.0 == Vector3(35.0 / 25.0, 43.0 / 25.0, 55.0 / 25.0)
    assert -P1 == Vector3(-35.0, -43.0, -55.0)


def test_operations_return_new_instances():
    a = Vector3(1, 2, 3)
    b = a + Vector3(0, 0, 0)
    assert b == a
    assert b is not a


def test_dot_and_cross():
    assert P1.dot(P2) == (35.0 * 43.0) + (43.0 * 67.0) + (55.0 * 83.0)
    assert P1.cross(P2) == Vector3(
        (43.0 * 83.0) - (55.0 * 67.0),
        (55.0 * 43.0) - (35.0 * 83.0),
        (35.0 * 67.0) - (43.0 * 43.0),
    )


def test_indexing():
    v = Vector3(1, 2, 3)
    assert (v[0], v[1], v[2]) == (1.0, 2.0, 3.0)
    assert list(v) == [1.0, 2.0, 3.0]
    with pytest.raises(IndexError):
        v[3]


def test_length_and_normalize():
    v = Vector3(3, 4, 12)
    assert v.length_squared() == 169.0
    assert v.length() == 13.0
    assert math.isclose(v.normalize().length(), 1.0)


def test_normalizing_zero_vector_fails():
    with pytest.raises(DegenerateGeometryError):
        Vector3(0, 0, 0).normalize()


def test_near_zero():
    assert Vector3(1e-9, -1e-9, 0).near_zero()
    assert not Vector3(1e-9, 1e-7, 0).near_zero()


def test_pickle_round_trip():
    v = Vector3(1.5, -2.0, 3.25)
    assert pickle.loads(pickle.dumps(v)) == v


def test_reflection_law():
    v = Vector3(1.0, -2.0, 0.5)
    n = Vector3(0.0, 1.0, 0.0)
    r = reflect(v, n)
    assert r == Vector3(1.0, 2.0, 0.5)
    assert math.isclose(r.dot(n), -v.dot(n))
    assert math.isclose(r.length(), v.length())


def test_reflection_law_oblique_normal():
    v = Vector3(0.3, -0.8, 0.2)
    n = Vector3(1.0, 1.0, 0.0).normalize()
    r = reflect(v, n)
    assert math.isclose(r.dot(n), -v.dot(n))
    assert math.isclose(r.length(), v.length())


def test_refract_at_normal_incidence_goes_straight_through():
    uv = Vector3(0, -1, 0)
    n = Vector3(0, 1, 0)
    assert approx_vec(refract(uv, n, 1.0 / 1.5), (0, -1, 0))


def test_refract_obeys_snell():
    s = 1.0 / math.sqrt(2.0)
    uv = Vector3(s, -s, 0)
    n = Vector3(0, 1, 0)
    eta_ratio = 1.0 / 1.5
    out = refract(uv, n, eta_ratio)
    # sin(theta') = eta_ratio * sin(theta), and the refracted ray stays unit length
    assert math.isclose(out.x, eta_ratio * s)
    assert math.isclose(out.length(), 1.0)
    assert out.y < 0


def test_random_vector_bounds(rng):
    for _ in range(100):
        v = random_vector(rng, 0.5, 1.0)
        assert all(0.5 <= c < 1.0 for c in v)


def test_random_in_unit_sphere(rng):
    for _ in range(200):
        assert random_in_unit_sphere(rng).length_squared() < 1.0


def test_random_unit_vector(rng):
    for _ in range(200):
        assert math.isclose(random_unit_vector(rng).length(), 1.0)


def test_random_in_unit_disk(rng):
    for _ in range(200):
        p = random_in_unit_disk(rng)
        assert p.z == 0.0
        assert p.length_squared() < 1.0


def test_rejection_sampling_retries(scripted_rng):
    # First candidate is outside the sphere and must be rejected.
    rng = scripted_rng(uniforms=[0.9, 0.9, 0.9, 0.1, 0.2, 0.3])
    assert random_in_unit_sphere(rng) == Vector3(0.1, 0.2, 0.3)


@pytest.mark.parametrize("scalar", [np.float32(2.0), np.float64(2.0), np.int64(2), 2])
def test_numpy_scalars_scale(scalar):
    assert P1 * scalar == Vector3(70.0, 86.0, 110.0)
    assert P1 / scalar == Vector3(17.5, 21.5, 27.5)


def test_python_scalar_on_the_left():
    assert 2 * P1 == Vector3(70.0, 86.0, 110.0)
    assert 0.5 * P1 == Vector3(17.5, 21.5, 27.5)
