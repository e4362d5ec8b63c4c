"""Unit tests for the recursive path-trace integrator."""

import math

import pytest

from core.ray import Ray
from core.vector import Vector3
from geometry.bvh import build_bvh
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.diffuse_light import DiffuseLight
from materials.lambertian import Lambertian
from materials.metal import Metal
from renderer.integrator import SHADOW_EPSILON, background_color, ray_color


class TestBackground:

    def test_straight_up_is_sky(self):
        color = ray_color(Ray(Vector3(0, 0, 0), Vector3(0, 1, 0)), HittableList(), 5)
        assert tuple(color) == (0.5, 0.7, 1.0)

    def test_straight_down_is_white(self):
        color = ray_color(Ray(Vector3(0, 0, 0), Vector3(0, -1, 0)), HittableList(), 5)
        assert tuple(color) == (1.0, 1.0, 1.0)

    def test_direction_is_normalized_first(self):
        assert tuple(background_color(Ray(Vector3(0, 0, 0), Vector3(0, 7, 0)))) == (0.5, 0.7, 1.0)

    def test_horizontal_is_midpoint(self):
        color = background_color(Ray(Vector3(0, 0, 0), Vector3(1, 0, 0)))
        assert tuple(color) == pytest.approx((0.75, 0.85, 1.0))


class TestRayColor:

    def test_zero_depth_is_black(self, simple_world):
        world = simple_world.build_bvh()
        for direction in (Vector3(0, 1, 0), Vector3(0, 0, -1), Vector3(0, -1, 0)):
            color = ray_color(Ray(Vector3(0, 0, 3), direction), world, 0)
            assert tuple(color) == (0.0, 0.0, 0.0)

    def test_last_bounce_on_diffuse_is_black(self, simple_world):
        color = ray_color(Ray(Vector3(0, 0, 3), Vector3(0, 0, -1)), simple_world.build_bvh(), 1)
        assert tuple(color) == (0.0, 0.0, 0.0)

    def test_light_returns_emission(self):
        world = build_bvh([Sphere(Vector3(0, 0, -5), 1.0, DiffuseLight(Vector3(4, 3, 2)))])
        color = ray_color(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), world, 1)
        assert tuple(color) == (4, 3, 2)

    def test_mirror_reflects_sky(self):
        """A ray hitting a flat-on mirror comes back up and sees the sky, tinted by the albedo."""
        mirror = Sphere(Vector3(0, -100, 0), 99, Metal(Vector3(0.5, 0.5, 0.5), fuzz=0.0))
        color = ray_color(Ray(Vector3(0, 0, 0), Vector3(0, -1, 0)), build_bvh([mirror]), 2)
        assert tuple(color) == pytest.approx((0.25, 0.35, 0.5))

    def test_diffuse_bounce_is_attenuated_sky(self):
        """One diffuse bounce off a lone sphere: every sample lies between albedo*white and albedo*sky."""
        sphere = Sphere(Vector3(0, 0, -2), 0.5, Lambertian(Vector3(0.5, 0.5, 0.5)))
        world = build_bvh([sphere])
        for _ in range(50):
            color = ray_color(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), world, 2)
            assert 0.25 <= color.x <= 0.5
            assert color.z == pytest.approx(0.5)

    def test_epsilon_avoids_self_intersection(self):
        sphere = Sphere(Vector3(0, 0, 0), 1.0, Lambertian(Vector3(0.5, 0.5, 0.5)))
        world = build_bvh([sphere])
        origin = Vector3(0, 0, 1)
        assert world.hit(Ray(origin, Vector3(0, 0, 1)), SHADOW_EPSILON, math.inf) is None
