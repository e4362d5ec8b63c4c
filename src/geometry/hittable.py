# geometry/hittable.py
from typing import Optional
from core.aabb import AABB
from core.uv import UV
from core.vector import Vector3
from core.ray import Ray

class HitRecord:
    """
    Records details of a ray-object intersection.
    """
    def __init__(self, p: Vector3 = None, normal: Vector3 = None,
                 t: float = 0, front_face: bool = True, uv: UV = None,
                 material = None):
        self.p = p              # Intersection point
        self.normal = normal    # Unit surface normal, facing against the ray
        self.t = t              # Ray parameter at intersection
        self.front_face = front_face  # Whether the hit was on the front side
        self.uv = uv if uv is not None else UV(0.0, 0.0)
        self.material = material  # Shared, never owned by the record

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """
        Ensures that the normal always points against the ray.
        """
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal

class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")

    def bounding_box(self, time0: float, time1: float) -> AABB:
        """
        Box enclosing the object at every instant of [time0, time1].
        """
        raise NotImplementedError("bounding_box() must be implemented by subclasses.")
