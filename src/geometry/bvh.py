# src/geometry/bvh.py
import logging
import random
from typing import List, Optional
from core.aabb import AABB
from core.errors import ConstructionError
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord

logger = logging.getLogger(__name__)

def _box_min(obj: Hittable, axis: int, time0: float, time1: float) -> float:
    return obj.bounding_box(time0, time1).minimum[axis]

class BVHNode(Hittable):
    """
    Bounding volume hierarchy over objects[start:end].

    Each split picks a random axis, sorts the span by the minimum corner of
    the objects' boxes on that axis and cuts it at the midpoint index. The
    slice of `objects` is reordered in place. A leaf wraps a single object;
    an internal node owns its two children and the box enclosing both over
    [time0, time1]. Nodes are never modified after construction, so a tree
    can be queried from several threads at once.
    """
    def __init__(self, objects: List[Hittable], start: int, end: int,
                 time0: float = 0.0, time1: float = 0.0):
        object_span = end - start
        if object_span <= 0:
            raise ConstructionError("cannot build a BVH node from zero objects")

        self.time0 = time0
        self.time1 = time1

        if object_span == 1:
            self.is_leaf = True
            self.object = objects[start]
            self.left = self.right = None
            self.box = self.object.bounding_box(time0, time1)
            return

        axis = random.randint(0, 2)
        key = lambda obj: _box_min(obj, axis, time0, time1)

        if object_span == 2:
            first, second = objects[start], objects[start + 1]
            if key(second) < key(first):
                objects[start], objects[start + 1] = second, first
            self.left = BVHNode(objects, start, start + 1, time0, time1)
            self.right = BVHNode(objects, start + 1, end, time0, time1)
        else:
            objects[start:end] = sorted(objects[start:end], key=key)
            mid = start + object_span // 2
            self.left = BVHNode(objects, start, mid, time0, time1)
            self.right = BVHNode(objects, mid, end, time0, time1)

        self.is_leaf = False
        self.object = None
        self.box = AABB.surrounding_box(self.left.box, self.right.box)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if self.is_leaf:
            return self.object.hit(ray, t_min, t_max)

        if not self.box.hit(ray, t_min, t_max):
            return None

        hit_left = self.left.hit(ray, t_min, t_max)
        # A right hit can only come back if it is closer than the left one.
        hit_right = self.right.hit(ray, t_min, hit_left.t if hit_left else t_max)
        return hit_right if hit_right is not None else hit_left

    def bounding_box(self, time0: Optional[float] = None, time1: Optional[float] = None) -> AABB:
        # The box was computed for the interval the tree was built over.
        return self.box

    def depth(self) -> int:
        if self.is_leaf:
            return 1
        return 1 + max(self.left.depth(), self.right.depth())

    def node_count(self) -> int:
        if self.is_leaf:
            return 1
        return 1 + self.left.node_count() + self.right.node_count()

    def leaves(self):
        """Yields the wrapped objects from left to right."""
        if self.is_leaf:
            yield self.object
        else:
            yield from self.left.leaves()
            yield from self.right.leaves()

def build_bvh(objects: List[Hittable], time0: float = 0.0, time1: float = 0.0) -> BVHNode:
    """
    Build a BVH over every object in the list. The list is permuted.

    Raises:
        ConstructionError: If the list is empty.
    """
    if len(objects) == 0:
        raise ConstructionError("cannot build a BVH from an empty object list")
    root = BVHNode(objects, 0, len(objects), time0, time1)
    logger.debug("Built BVH over %d objects: %d nodes, depth %d",
                 len(objects), root.node_count(), root.depth())
    return root
