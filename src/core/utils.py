# core/utils.py
import math

from core.vector import Vector3


def random_double(rng, low: float = 0.0, high: float = 1.0) -> float:
    """
    Returns a uniform float in [low, high) drawn from rng.
    """
    return float(rng.uniform(low, high))


def random_vector(rng, low: float = 0.0, high: float = 1.0) -> Vector3:
    """
    Returns a vector with each component uniform in [low, high).
    """
    return Vector3(random_double(rng, low, high),
                   random_double(rng, low, high),
                   random_double(rng, low, high))


def random_in_unit_sphere(rng) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    while True:
        p = random_vector(rng, -1.0, 1.0)
        if p.length_squared() < 1.0:
            return p


def random_unit_vector(rng) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    while True:
        p = random_in_unit_sphere(rng)
        # The origin itself cannot be normalized; draw again.
        if p.length_squared() > 0.0:
            return p.normalize()


def random_in_unit_disk(rng) -> Vector3:
    """Random point in the unit disk on the z=0 plane, for lens sampling."""
    while True:
        p = Vector3(random_double(rng, -1.0, 1.0),
                    random_double(rng, -1.0, 1.0),
                    0.0)
        if p.length_squared() < 1.0:
            return p


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)


def refract(uv: Vector3, n: Vector3, eta_ratio: float) -> Vector3:
    """
    Refracts the unit vector uv through a surface with unit normal n
    (facing against uv) using Snell's law.
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * eta_ratio
    r_out_parallel = n * -math.sqrt(abs(1.0 - r_out_perp.length_squared()))
    return r_out_perp + r_out_parallel
