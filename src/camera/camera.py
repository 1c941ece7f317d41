# camera/camera.py
import math
from dataclasses import dataclass, field
from core.errors import DegenerateGeometryError
from core.vector import Vector3
from core.ray import Ray
from core.utils import random_double, random_in_unit_disk


class Camera:
    """
    Thin-lens camera with a finite shutter. Maps normalized image-plane
    coordinates (s, t) in [0, 1] to world-space rays. The focal plane sits
    at focus_dist, so every ray of a pixel converges there regardless of
    where it leaves the lens.
    """
    def __init__(self, look_from: Vector3, look_at: Vector3, view_up: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float = 0.0,
                 focus_dist: float = 1.0, time_start: float = 0.0, time_end: float = 0.0):
        if not 0.0 < vfov < 180.0:
            raise ValueError(f"vertical field of view must be in (0, 180) degrees, got {vfov}")
        if not aspect_ratio > 0:
            raise ValueError(f"aspect ratio must be positive, got {aspect_ratio}")
        if aperture < 0:
            raise ValueError(f"aperture must not be negative, got {aperture}")
        if not focus_dist > 0:
            raise DegenerateGeometryError(f"focus distance must be positive, got {focus_dist}")
        if time_end < time_start:
            raise ValueError(f"shutter closes ({time_end}) before it opens ({time_start})")

        self.vfov = vfov
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture
        self.focus_dist = focus_dist
        self.lens_radius = aperture / 2.0
        self.time_start = time_start
        self.time_end = time_end

        # Orthonormal frame: w points backwards, u right, v up.
        self.w = (look_from - look_at).normalize()
        right = view_up.cross(self.w)
        if right.near_zero():
            raise DegenerateGeometryError("view_up is parallel to the viewing direction")
        self.u = right.normalize()
        self.v = self.w.cross(self.u)

        # Compute viewport dimensions based on fov
        h = math.tan(math.radians(vfov) / 2)
        viewport_height = 2.0 * h
        viewport_width = aspect_ratio * viewport_height

        # Scale by focus distance
        self.origin = look_from
        self.horizontal = self.u * viewport_width * focus_dist
        self.vertical = self.v * viewport_height * focus_dist
        self.lower_left_corner = (self.origin -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5 -
                                  self.w * focus_dist)

    def get_ray(self, s: float, t: float, rng) -> Ray:
        """Generates a ray with depth of field and a random shutter time."""
        if self.lens_radius > 0:
            rd = random_in_unit_disk(rng) * self.lens_radius
            offset = self.u * rd.x + self.v * rd.y
        else:
            offset = Vector3(0.0, 0.0, 0.0)

        if self.time_end > self.time_start:
            time = random_double(rng, self.time_start, self.time_end)
        else:
            time = self.time_start

        ray_origin = self.origin + offset
        ray_direction = (self.lower_left_corner +
                         self.horizontal * s +
                         self.vertical * t -
                         ray_origin)
        return Ray(ray_origin, ray_direction, time)


@dataclass
class CameraConfig:
    """
    Construction parameters for a Camera. Defaults frame the random
    sphere field from a low angle with a slight depth of field.
    """
    look_from: Vector3 = field(default_factory=lambda: Vector3(13, 2, 3))
    look_at: Vector3 = field(default_factory=lambda: Vector3(0, 0, 0))
    view_up: Vector3 = field(default_factory=lambda: Vector3(0, 1, 0))
    vfov: float = 20.0
    aspect_ratio: float = 3.0 / 2.0
    aperture: float = 0.1
    focus_dist: float = 10.0
    shutter_open: float = 0.0
    shutter_close: float = 0.0

    def build(self) -> Camera:
        return Camera(self.look_from, self.look_at, self.view_up,
                      self.vfov, self.aspect_ratio, self.aperture, self.focus_dist,
                      self.shutter_open, self.shutter_close)
