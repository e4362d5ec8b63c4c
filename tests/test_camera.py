"""Unit tests for the look-at camera."""

import pytest

from camera.camera import Camera
from core.vector import Vector3


def make_camera(**kwargs):
    params = dict(look_from=Vector3(13, 2, 3), look_at=Vector3(0, 0, 0),
                  vup=Vector3(0, 1, 0), vfov=20.0, aspect_ratio=1.5)
    params.update(kwargs)
    return Camera(**params)


class TestCamera:

    def test_center_ray_points_at_target(self):
        camera = make_camera()
        ray = camera.get_ray(0.5, 0.5)
        expected = (Vector3(0, 0, 0) - Vector3(13, 2, 3)).normalize()
        assert tuple(ray.origin) == pytest.approx((13.0, 2.0, 3.0))
        assert tuple(ray.direction.normalize()) == pytest.approx(tuple(expected))

    def test_top_of_viewport_is_up(self):
        camera = make_camera()
        top = camera.get_ray(0.5, 1.0).direction.normalize()
        bottom = camera.get_ray(0.5, 0.0).direction.normalize()
        assert top.y > bottom.y

    def test_ray_times_within_shutter(self):
        camera = make_camera(time0=0.25, time1=0.75)
        for _ in range(50):
            assert 0.25 <= camera.get_ray(0.3, 0.6).time <= 0.75

    def test_instant_shutter(self):
        assert make_camera().get_ray(0.1, 0.9).time == 0.0

    def test_aperture_jitters_origin(self):
        camera = make_camera(aperture=2.0)
        origins = {tuple(camera.get_ray(0.5, 0.5).origin) for _ in range(10)}
        assert len(origins) > 1
        for origin in origins:
            assert (Vector3(*origin) - Vector3(13, 2, 3)).length() <= 1.0 + 1e-9
