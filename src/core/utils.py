# core/utils.py
import math
import random
from core.vector import Vector3

def random_in_unit_sphere() -> Vector3:
    """
    Returns a random point inside a unit sphere, never at the origin.
    """
    while True:
        p = Vector3(random.uniform(-1, 1),
                    random.uniform(-1, 1),
                    random.uniform(-1, 1))
        if 1e-12 < p.dot(p) < 1.0:
            return p

def random_unit_vector() -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    return random_in_unit_sphere().normalize()

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)

def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """
    Refracts the unit vector uv through a surface with unit normal n.
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * -math.sqrt(abs(1.0 - r_out_perp.length_squared()))
    return r_out_perp + r_out_parallel

def schlick(cos_theta: float, ref_idx: float) -> float:
    """
    Schlick's approximation of the Fresnel reflectance.
    """
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    if r0 == 0.0:
        # Index-matched boundary: there is no interface to reflect from.
        return 0.0
    return r0 + (1.0 - r0) * math.pow((1.0 - cos_theta), 5)
