# materials/lambertian.py

from typing import Tuple, Union
from core.ray import Ray
from core.vector import Vector3
from core.utils import random_unit_vector
from geometry.hittable import HitRecord
from materials.material import Material
from materials.textures import Texture, as_texture

class Lambertian(Material):
    """
    Lambertian diffuse material with optional texture support.
    """

    def __init__(self, albedo: Union[Vector3, Texture]):
        # Store either a solid color or a texture.
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Tuple[Ray, Vector3]:
        """
        Scatter a ray according to a Lambertian reflection model.
        Returns (scattered_ray, attenuation).
        """
        # Pick a random scatter direction by adding a random vector to the normal.
        scatter_direction = rec.normal + random_unit_vector()

        # If scatter_direction is degenerate (very small), just use the normal.
        if scatter_direction.near_zero():
            scatter_direction = rec.normal

        scattered = Ray(rec.p, scatter_direction.normalize(), ray_in.time)
        attenuation = self.texture.sample(rec.uv, rec.p)
        return scattered, attenuation
