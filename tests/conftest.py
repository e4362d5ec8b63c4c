"""Shared fixtures for the path tracer tests."""

import random

import pytest

from camera.camera import Camera
from core.vector import Vector3
from geometry.sphere import MovingSphere, Sphere
from geometry.world import HittableList
from materials.lambertian import Lambertian


@pytest.fixture(autouse=True)
def seeded_random():
    """Seed the module-level generator so every test sees the same samples."""
    state = random.getstate()
    random.seed(1234)
    yield
    random.setstate(state)


@pytest.fixture
def simple_world():
    """A ground sphere and a unit sphere at the origin."""
    world = HittableList()
    world.add(Sphere(Vector3(0, -100.5, 0), 100, Lambertian(Vector3(0.5, 0.5, 0.5))))
    world.add(Sphere(Vector3(0, 0, 0), 1.0, Lambertian(Vector3(0.7, 0.3, 0.3))))
    return world


@pytest.fixture
def front_camera():
    """Camera on the +z axis looking at the origin."""
    return Camera(
        look_from=Vector3(0, 0, 3),
        look_at=Vector3(0, 0, 0),
        vup=Vector3(0, 1, 0),
        vfov=60.0,
        aspect_ratio=1.0,
    )


@pytest.fixture
def make_spheres():
    """Factory scattering `count` small spheres through a 20x20x20 cube."""
    return _random_spheres


def _random_spheres(count, material=None, moving=False):
    material = material or Lambertian(Vector3(0.5, 0.5, 0.5))
    objects = []
    for _ in range(count):
        center = Vector3.random(-10.0, 10.0)
        radius = random.uniform(0.1, 1.5)
        if moving:
            center1 = center + Vector3.random(-1.0, 1.0)
            objects.append(MovingSphere(center, center1, 0.0, 1.0, radius, material))
        else:
            objects.append(Sphere(center, radius, material))
    return objects
