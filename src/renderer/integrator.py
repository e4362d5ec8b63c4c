# renderer/integrator.py
import math
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import Hittable
from materials.material import BLACK

# Minimum hit distance; keeps a scattered ray from re-hitting its own origin.
SHADOW_EPSILON = 0.01

WHITE = Vector3(1.0, 1.0, 1.0)
SKY_BLUE = Vector3(0.5, 0.7, 1.0)

def background_color(ray: Ray) -> Vector3:
    """
    Vertical gradient seen by rays that miss everything: white looking
    straight down, sky blue looking straight up.
    """
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return WHITE * (1.0 - t) + SKY_BLUE * t

def ray_color(ray: Ray, world: Hittable, depth: int) -> Vector3:
    """
    Radiance carried back along `ray`, following at most `depth` bounces.
    A path that runs out of bounces contributes nothing.
    """
    if depth <= 0:
        return BLACK

    rec = world.hit(ray, SHADOW_EPSILON, math.inf)
    if rec is None:
        return background_color(ray)

    emitted = rec.material.emitted(rec.uv.u, rec.uv.v, rec.p)
    scattered = rec.material.scatter(ray, rec)
    if scattered is None:
        return emitted

    scattered_ray, attenuation = scattered
    return emitted + attenuation * ray_color(scattered_ray, world, depth - 1)
