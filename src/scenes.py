# scenes.py
"""
Example scenes. Each builder returns the world together with the camera
configuration that frames it.
"""
import logging
from typing import Callable, Dict, NamedTuple

from camera.camera import CameraConfig
from core.utils import random_double, random_vector
from core.vector import Vector3
from geometry.sphere import MovingSphere, Sphere
from geometry.world import HittableList
from materials.dielectric import Dielectric
from materials.lambertian import Lambertian
from materials.metal import Metal

logger = logging.getLogger(__name__)


class Scene(NamedTuple):
    world: HittableList
    camera: CameraConfig


def _sphere_field(rng, moving: bool) -> HittableList:
    world = HittableList()

    ground_material = Lambertian(Vector3(0.5, 0.5, 0.5))
    world.add(Sphere(Vector3(0, -1000, 0), 1000, ground_material))

    clearance_point = Vector3(4, 0.2, 0)
    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = random_double(rng)
            center = Vector3(a + 0.9 * random_double(rng), 0.2, b + 0.9 * random_double(rng))
            if (center - clearance_point).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                # diffuse
                albedo = random_vector(rng) * random_vector(rng)
                material = Lambertian(albedo)
                if moving:
                    center1 = center + Vector3(0, random_double(rng, 0, 0.5), 0)
                    world.add(MovingSphere(center, center1, 0.0, 1.0, 0.2, material))
                    continue
            elif choose_mat < 0.95:
                # metal
                albedo = random_vector(rng, 0.5, 1)
                fuzz = random_double(rng, 0, 0.5)
                material = Metal(albedo, fuzz)
            else:
                # glass
                material = Dielectric(1.5)
            world.add(Sphere(center, 0.2, material))

    world.add(Sphere(Vector3(0, 1, 0), 1.0, Dielectric(1.5)))
    world.add(Sphere(Vector3(-4, 1, 0), 1.0, Lambertian(Vector3(0.4, 0.2, 0.1))))
    world.add(Sphere(Vector3(4, 1, 0), 1.0, Metal(Vector3(0.7, 0.6, 0.5), 0.0)))
    return world


def random_scene(rng) -> Scene:
    """Large field of small random spheres around three big ones."""
    world = _sphere_field(rng, moving=False)
    logger.info("Built random scene with %d spheres", len(world))
    return Scene(world, CameraConfig())


def moving_spheres_scene(rng) -> Scene:
    """The random scene with bouncing diffuse spheres and an open shutter."""
    world = _sphere_field(rng, moving=True)
    logger.info("Built moving-spheres scene with %d spheres", len(world))
    return Scene(world, CameraConfig(shutter_open=0.0, shutter_close=1.0))


def simple_scene(rng=None) -> Scene:
    """A ground sphere and one colored sphere, seen straight on."""
    world = HittableList([
        Sphere(Vector3(0, -100.5, -1), 100, Lambertian(Vector3(0.8, 0.8, 0.0))),
        Sphere(Vector3(0, 0, -1), 0.5, Lambertian(Vector3(0.1, 0.2, 0.5))),
    ])
    camera = CameraConfig(look_from=Vector3(0, 0, 0), look_at=Vector3(0, 0, -1),
                          vfov=90.0, aperture=0.0, focus_dist=1.0)
    logger.info("Built simple scene with %d spheres", len(world))
    return Scene(world, camera)


SCENES: Dict[str, Callable[..., Scene]] = {
    "random": random_scene,
    "moving": moving_spheres_scene,
    "simple": simple_scene,
}
