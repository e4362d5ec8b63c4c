# materials/metal.py
from typing import Optional, Tuple
from core.ray import Ray
from core.vector import Vector3
from core.utils import reflect, random_unit_vector
from geometry.hittable import HitRecord
from materials.material import Material

class Metal(Material):
    """
    Specular reflector. `fuzz` (clamped to [0, 1]) is the radius of the
    random perturbation added to the mirror direction.
    """
    def __init__(self, albedo: Vector3, fuzz: float = 0.0):
        self.albedo = albedo
        self.fuzz = max(0.0, min(fuzz, 1.0))

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[Tuple[Ray, Vector3]]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        if self.fuzz > 0:
            reflected = reflected + random_unit_vector() * self.fuzz

        if reflected.dot(rec.normal) <= 0:
            return None  # Absorb the ray if it does not scatter forward

        return Ray(rec.p, reflected.normalize(), ray_in.time), self.albedo
