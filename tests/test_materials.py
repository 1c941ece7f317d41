import math

import pytest

from core.ray import Ray
from core.vector import Vector3
from materials.dielectric import Dielectric, schlick
from materials.lambertian import Lambertian
from materials.metal import Metal

ALBEDO = Vector3(0.8, 0.3, 0.2)


def approx_vec(v, expected, abs_tol=1e-12):
    return all(math.isclose(a, b, abs_tol=abs_tol) for a, b in zip(v, expected))


def test_lambertian_scatters_from_hit_point(rng, upward_hit):
    material = Lambertian(ALBEDO)
    ray_in = Ray(Vector3(0, 5, 0), Vector3(0, -1, 0), time=0.3)
    for _ in range(50):
        result = material.scatter(ray_in, upward_hit(material), rng)
        assert result.attenuation is ALBEDO
        assert result.scattered.origin == Vector3(0, 0, 0)
        assert result.scattered.time == 0.3
        # normal + unit vector never points below the surface
        assert result.scattered.direction.dot(Vector3(0, 1, 0)) >= 0
        assert not result.scattered.direction.near_zero()


def test_lambertian_degenerate_direction_falls_back_to_normal(scripted_rng, upward_hit):
    material = Lambertian(ALBEDO)
    # The sampled unit vector is exactly -normal.
    rng = scripted_rng(uniforms=[0.0, -0.5, 0.0])
    result = material.scatter(Ray(Vector3(0, 5, 0), Vector3(0, -1, 0)), upward_hit(material), rng)
    assert result.scattered.direction == Vector3(0, 1, 0)


def test_polished_metal_mirrors(rng, upward_hit):
    material = Metal(ALBEDO, 0.0)
    result = material.scatter(Ray(Vector3(-1, 1, 0), Vector3(1, -1, 0), time=0.7),
                              upward_hit(material), rng)
    s = 1.0 / math.sqrt(2.0)
    assert approx_vec(result.scattered.direction, (s, s, 0))
    assert result.attenuation is ALBEDO
    assert result.scattered.time == 0.7


def test_metal_absorbs_rays_scattered_below_surface(rng, upward_hit):
    material = Metal(ALBEDO, 0.0)
    assert material.scatter(Ray(Vector3(0, -1, 0), Vector3(0, 1, 0)), upward_hit(material), rng) is None


def test_fuzzy_metal_never_scatters_below_surface(rng, upward_hit):
    material = Metal(ALBEDO, 1.0)
    ray_in = Ray(Vector3(-1, 0.05, 0), Vector3(1, -0.05, 0))
    for _ in range(200):
        result = material.scatter(ray_in, upward_hit(material), rng)
        if result is not None:
            assert result.scattered.direction.dot(Vector3(0, 1, 0)) > 0


@pytest.mark.parametrize("fuzz, expected", [(2.0, 1.0), (-0.5, 0.0), (0.25, 0.25)])
def test_metal_fuzz_is_clamped(fuzz, expected):
    assert Metal(ALBEDO, fuzz).fuzz == expected


def test_glass_refracts_straight_through_at_normal_incidence(scripted_rng, upward_hit):
    material = Dielectric(1.5)
    rng = scripted_rng(randoms=[0.99])
    result = material.scatter(Ray(Vector3(0, 1, 0), Vector3(0, -1, 0)), upward_hit(material), rng)
    assert approx_vec(result.scattered.direction, (0, -1, 0))
    assert result.attenuation == Vector3(1, 1, 1)


def test_glass_reflects_when_draw_falls_under_reflectance(scripted_rng, upward_hit):
    material = Dielectric(1.5)
    rng = scripted_rng(randoms=[0.0])
    result = material.scatter(Ray(Vector3(0, 1, 0), Vector3(0, -1, 0)), upward_hit(material), rng)
    assert approx_vec(result.scattered.direction, (0, 1, 0))
    assert result.attenuation == Vector3(1, 1, 1)


def test_total_internal_reflection_needs_no_random_draw(scripted_rng, upward_hit):
    material = Dielectric(1.5)
    # Leaving glass at 60 degrees from the normal: 1.5 * sin(60) > 1.
    d = Vector3(math.sin(math.radians(60)), -math.cos(math.radians(60)), 0)
    rng = scripted_rng()
    result = material.scatter(Ray(Vector3(0, 0, 0) - d, d), upward_hit(material, front_face=False), rng)
    assert approx_vec(result.scattered.direction, (d.x, -d.y, 0))


def test_schlick_at_normal_incidence_is_r0():
    eta_ratio = 1.0 / 1.5
    r0 = ((1 - eta_ratio) / (1 + eta_ratio)) ** 2
    assert math.isclose(schlick(1.0, eta_ratio), r0)
    assert math.isclose(r0, 0.04)


def test_schlick_grows_towards_grazing_incidence():
    eta_ratio = 1.5
    critical_cos = math.sqrt(1 - (1 / eta_ratio) ** 2)
    cosines = [1.0, 0.9, critical_cos, 0.5, 0.1, 0.0]
    values = [schlick(c, eta_ratio) for c in cosines]
    assert values == sorted(values)
    assert math.isclose(values[-1], 1.0)
