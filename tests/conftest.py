"""Pytest configuration and shared fixtures."""

import numpy as np
import pytest

from core.vector import Vector3
from geometry.hittable import HitRecord


class ScriptedRng:
    """
    Random stream that replays fixed values, for pinning down individual
    sampling decisions. uniform() ignores its bounds.
    """
    def __init__(self, uniforms=(), randoms=()):
        self._uniforms = list(uniforms)
        self._randoms = list(randoms)

    def uniform(self, low, high):
        return self._uniforms.pop(0)

    def random(self):
        return self._randoms.pop(0)


@pytest.fixture
def rng():
    """Seeded generator so stochastic tests stay reproducible."""
    return np.random.default_rng(1234)


@pytest.fixture
def scripted_rng():
    return ScriptedRng


@pytest.fixture
def upward_hit():
    """Front-face hit on a horizontal surface at the origin, normal +y."""
    def make(material=None, front_face=True):
        return HitRecord(p=Vector3(0, 0, 0), normal=Vector3(0, 1, 0), t=1.0,
                         front_face=front_face, material=material)
    return make
