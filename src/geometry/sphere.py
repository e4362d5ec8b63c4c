# geometry/sphere.py
import math
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.uv import UV
from geometry.hittable import Hittable, HitRecord
from core.aabb import AABB

def get_sphere_uv(p: Vector3) -> UV:
    """
    Maps a point on the unit sphere centered at the origin to (u, v):
    u is the angle around the Y axis from X=-1, v the angle from Y=-1 to Y=+1,
    both normalized to [0, 1].
    """
    theta = math.acos(max(-1.0, min(1.0, -p.y)))
    phi = math.atan2(-p.z, p.x) + math.pi
    return UV(phi / (2 * math.pi), theta / math.pi)

def hit_sphere(center: Vector3, radius: float, material,
               ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
    oc = ray.origin - center
    a = ray.direction.dot(ray.direction)
    half_b = oc.dot(ray.direction)
    c = oc.dot(oc) - radius * radius
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
    outward_normal = (rec.p - center) / radius
    rec.set_face_normal(ray, outward_normal)
    rec.uv = get_sphere_uv(outward_normal)
    rec.material = material
    return rec

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Vector3, radius: float, material):
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return hit_sphere(self.center, self.radius, self.material, ray, t_min, t_max)

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> AABB:
        # The bounding box of a sphere is center ± radius
        offset = Vector3(self.radius, self.radius, self.radius)
        return AABB(self.center - offset, self.center + offset)

class MovingSphere(Hittable):
    """
    A sphere whose center moves linearly from center0 at time0 to center1 at
    time1. The ray's time selects where the sphere is when it is tested.
    """
    def __init__(self, center0: Vector3, center1: Vector3,
                 time0: float, time1: float, radius: float, material):
        self.center0 = center0
        self.center1 = center1
        self.time0 = time0
        self.time1 = time1
        self.radius = radius
        self.material = material

    def center(self, time: float) -> Vector3:
        if self.time1 == self.time0:
            return self.center0
        fraction = (time - self.time0) / (self.time1 - self.time0)
        return self.center0 + (self.center1 - self.center0) * fraction

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return hit_sphere(self.center(ray.time), self.radius, self.material,
                          ray, t_min, t_max)

    def bounding_box(self, time0: float, time1: float) -> AABB:
        offset = Vector3(self.radius, self.radius, self.radius)
        c0 = self.center(time0)
        c1 = self.center(time1)
        return AABB.surrounding_box(AABB(c0 - offset, c0 + offset),
                                    AABB(c1 - offset, c1 + offset))
