# camera/camera.py
import math
import random
from core.vector import Vector3
from core.ray import Ray

class Camera:
    """
    Thin-lens camera looking from `look_from` towards `look_at`.

    `vfov` is the vertical field of view in degrees. Rays are cast at a
    random instant of the shutter interval [time0, time1].
    """
    def __init__(self, look_from: Vector3, look_at: Vector3, vup: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float = 0.0,
                 focus_dist: float = 10.0, time0: float = 0.0, time1: float = 0.0):
        self.position = look_from
        self.look_at = look_at
        self.vup = vup
        self.vfov = vfov
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture  # Lens aperture for depth of field
        self.focus_dist = focus_dist  # Distance to focus plane
        self.lens_radius = aperture / 2.0
        self.time0 = time0
        self.time1 = time1
        self.update_camera()

    def update_camera(self):
        """Updates the camera's basis vectors and viewport."""
        self.forward = (self.look_at - self.position).normalize()
        self.right = self.forward.cross(self.vup).normalize()
        self.up = self.right.cross(self.forward)

        # Compute viewport dimensions based on fov
        viewport_height = 2.0 * math.tan(math.radians(self.vfov) / 2)
        viewport_width = self.aspect_ratio * viewport_height

        # Scale by focus distance
        self.horizontal = self.right * viewport_width * self.focus_dist
        self.vertical = self.up * viewport_height * self.focus_dist

        self.lower_left_corner = (self.position +
                                  self.forward * self.focus_dist -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5)

    def get_ray(self, u: float, v: float) -> Ray:
        """Generates the ray through viewport coordinates (u, v) in [0, 1]."""
        time = random.uniform(self.time0, self.time1) if self.time1 > self.time0 else self.time0

        if self.lens_radius <= 0:
            direction = (self.lower_left_corner +
                         self.horizontal * u +
                         self.vertical * v -
                         self.position)
            return Ray(self.position, direction, time)

        # Generate random point on lens
        rd = random_in_unit_disk() * self.lens_radius
        offset = self.right * rd.x + self.up * rd.y

        # Update ray origin and direction for depth of field
        ray_origin = self.position + offset
        ray_direction = (self.lower_left_corner +
                         self.horizontal * u +
                         self.vertical * v -
                         ray_origin)

        return Ray(ray_origin, ray_direction, time)

def random_in_unit_disk() -> Vector3:
    """Generate random point in unit disk for DOF."""
    while True:
        p = Vector3(
            random.uniform(-1, 1),
            random.uniform(-1, 1),
            0
        )
        if p.dot(p) < 1:
            return p
