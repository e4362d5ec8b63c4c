# src/geometry/world.py
from typing import Optional, List
from core.aabb import AABB
from core.errors import ConstructionError
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord
from geometry.bvh import BVHNode, build_bvh

class HittableList(Hittable):
    """
    A list of Hittable objects. The list itself answers queries by a linear
    scan; build_bvh() produces the accelerated tree used for rendering.
    """
    def __init__(self, objects: List[Hittable] = None):
        self.objects: List[Hittable] = list(objects) if objects else []

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def clear(self):
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def build_bvh(self, time0: float = 0.0, time1: float = 0.0) -> BVHNode:
        # The tree is built over a copy so the scene keeps its own ordering.
        return build_bvh(list(self.objects), time0, time1)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self, time0: float, time1: float) -> AABB:
        if not self.objects:
            raise ConstructionError("an empty list has no bounding box")
        box = self.objects[0].bounding_box(time0, time1)
        for obj in self.objects[1:]:
            box = AABB.surrounding_box(box, obj.bounding_box(time0, time1))
        return box
