# materials/diffuse_light.py
from typing import Union
from core.vector import Vector3
from core.uv import UV
from materials.material import Material
from materials.textures import Texture, as_texture

class DiffuseLight(Material):
    """
    Area light: absorbs every incoming ray and emits the radiance of its
    texture at the hit point. Values above 1 make it brighter than the sky.
    """
    def __init__(self, emit: Union[Vector3, Texture]):
        self.emit = as_texture(emit)

    def scatter(self, ray_in, rec):
        return None

    def emitted(self, u: float, v: float, p: Vector3) -> Vector3:
        return self.emit.sample(UV(u, v), p)
