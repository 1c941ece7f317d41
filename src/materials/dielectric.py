# src/materials/dielectric.py
import math
from core.ray import Ray
from core.vector import Vector3
from core.utils import reflect, refract
from geometry.hittable import HitRecord
from materials.material import Material, ScatterResult

WHITE = Vector3(1.0, 1.0, 1.0)


class Dielectric(Material):
    def __init__(self, refraction_index: float):
        self.refraction_index = refraction_index

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> ScatterResult:
        # Determine if we're entering or exiting the material
        eta_ratio = 1.0 / self.refraction_index if rec.front_face else self.refraction_index

        unit_direction = ray_in.direction.normalize()
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        cannot_refract = eta_ratio * sin_theta > 1.0
        if cannot_refract or schlick(cos_theta, eta_ratio) > rng.random():
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, eta_ratio)

        # Glass doesn't absorb light
        return ScatterResult(WHITE, Ray(rec.p, direction, ray_in.time))

    def __repr__(self) -> str:
        return f"Dielectric({self.refraction_index})"


def schlick(cos_theta: float, eta_ratio: float) -> float:
    """
    Schlick's approximation of Fresnel reflectance.
    """
    r0 = (1.0 - eta_ratio) / (1.0 + eta_ratio)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cos_theta), 5)
