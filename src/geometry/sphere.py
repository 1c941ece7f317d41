# geometry/sphere.py
import math
from typing import Optional
from core.aabb import AABB
from core.errors import DegenerateGeometryError
from core.vector import Vector3
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord


class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Vector3, radius: float, material):
        if not radius > 0:
            raise DegenerateGeometryError(f"sphere radius must be positive, got {radius}")
        self.center = center
        self.radius = radius
        self.material = material

    def center_at(self, time: float) -> Vector3:
        return self.center

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        center = self.center_at(ray.time)
        oc = ray.origin - center
        a = ray.direction.length_squared()
        half_b = oc.dot(ray.direction)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        if discriminant < 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Find the nearest root that lies in the acceptable range
        root = (-half_b - sqrt_disc) / a
        if root < t_min or root > t_max:
            root = (-half_b + sqrt_disc) / a
            if root < t_min or root > t_max:
                return None

        rec = HitRecord()
        rec.t = root
        rec.p = ray.at(rec.t)
        outward_normal = (rec.p - center) / self.radius
        rec.set_face_normal(ray, outward_normal)
        rec.material = self.material
        return rec

    def _box_at(self, center: Vector3) -> AABB:
        # The bounding box of a sphere is center ± radius
        offset = Vector3(self.radius, self.radius, self.radius)
        return AABB(center - offset, center + offset)

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> AABB:
        return self._box_at(self.center)

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius})"


class MovingSphere(Sphere):
    """
    A sphere whose center travels linearly from center0 at time0 to
    center1 at time1. Outside that interval the motion is extrapolated.
    """
    def __init__(self, center0: Vector3, center1: Vector3, time0: float, time1: float,
                 radius: float, material):
        if time0 == time1:
            raise DegenerateGeometryError("moving sphere needs time0 != time1")
        super().__init__(center0, radius, material)
        self.center0 = center0
        self.center1 = center1
        self.time0 = time0
        self.time1 = time1

    def center_at(self, time: float) -> Vector3:
        fraction = (time - self.time0) / (self.time1 - self.time0)
        return self.center0 + (self.center1 - self.center0) * fraction

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> AABB:
        return AABB.surrounding_box(self._box_at(self.center_at(time0)),
                                    self._box_at(self.center_at(time1)))

    def __repr__(self) -> str:
        return (f"MovingSphere({self.center0!r} @ {self.time0}, "
                f"{self.center1!r} @ {self.time1}, {self.radius})")
