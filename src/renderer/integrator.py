# renderer/integrator.py
"""
Light transport for a single camera ray.

ray_color follows a path through the scene one bounce at a time. Each
scatter multiplies the surface attenuation into the path throughput; the
path ends when it escapes to the sky, is absorbed, or runs out of bounces.
The bounce limit is a hard cap (the path is treated as absorbed), which
biases the estimate slightly in exchange for guaranteed termination.
"""
from core.ray import Ray
from core.vector import Color, Vector3

# Lower bound on hit distance; rejects self-intersections caused by
# floating-point error at the previous hit point.
T_MIN = 0.001
T_MAX = float("inf")

BLACK = Vector3(0.0, 0.0, 0.0)
SKY_WHITE = Vector3(1.0, 1.0, 1.0)
SKY_BLUE = Vector3(0.5, 0.7, 1.0)


def background(ray: Ray) -> Color:
    """Vertical gradient from white at the horizon to sky blue overhead."""
    unit_direction = ray.direction.normalize()
    a = 0.5 * (unit_direction.y + 1.0)
    return SKY_WHITE * (1.0 - a) + SKY_BLUE * a


def ray_color(ray: Ray, world, depth: int, rng) -> Color:
    throughput = Vector3(1.0, 1.0, 1.0)
    while depth > 0:
        rec = world.hit(ray, T_MIN, T_MAX)
        if rec is None:
            return throughput * background(ray)

        result = rec.material.scatter(ray, rec, rng)
        if result is None:
            return BLACK

        throughput = throughput * result.attenuation
        ray = result.scattered
        depth -= 1
    return BLACK
