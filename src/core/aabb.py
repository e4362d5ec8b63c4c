# src/core/aabb.py
from core.vector import Vector3

class AABB:
    """
    Axis-aligned bounding box. Invariant: minimum <= maximum componentwise.
    """
    def __init__(self, minimum: Vector3, maximum: Vector3):
        self.minimum = minimum
        self.maximum = maximum

    def hit(self, ray, t_min: float, t_max: float) -> bool:
        # Slab method: for each axis, find intersection intervals.
        for axis in range(3):
            origin = ray.origin[axis]
            direction = ray.direction[axis]
            lo = self.minimum[axis]
            hi = self.maximum[axis]
            if direction == 0.0:
                # Parallel to the slab: inside it for every t, or never.
                if origin < lo or origin > hi:
                    return False
                continue
            invD = 1.0 / direction
            t0 = (lo - origin) * invD
            t1 = (hi - origin) * invD
            if invD < 0:
                t0, t1 = t1, t0
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max < t_min:
                return False
        return True

    def contains(self, other: "AABB") -> bool:
        return all(self.minimum[a] <= other.minimum[a] and
                   other.maximum[a] <= self.maximum[a] for a in range(3))

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        small = Vector3(
            min(box0.minimum.x, box1.minimum.x),
            min(box0.minimum.y, box1.minimum.y),
            min(box0.minimum.z, box1.minimum.z)
        )
        big = Vector3(
            max(box0.maximum.x, box1.maximum.x),
            max(box0.maximum.y, box1.maximum.y),
            max(box0.maximum.z, box1.maximum.z)
        )
        return AABB(small, big)

    def __repr__(self) -> str:
        return f"AABB({self.minimum}, {self.maximum})"
