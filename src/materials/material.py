# materials/material.py
from typing import NamedTuple, Optional
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import HitRecord


class ScatterResult(NamedTuple):
    attenuation: Vector3
    scattered: Ray


class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    Materials are immutable once built, so one instance can be shared by
    any number of objects and rendered from several processes at once.
    """
    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[ScatterResult]:
        """
        Computes the attenuation and scattered ray for a hit.
        Returns None when the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")
