# materials/textures.py
import math
from typing import Union
from core.vector import Vector3
from core.uv import UV

class Texture:
    """Base class for all textures."""
    def sample(self, uv: UV, point: Vector3) -> Vector3:
        """Sample the texture at the given surface coordinates and hit point."""
        raise NotImplementedError("sample() must be implemented by texture subclasses.")

class SolidTexture(Texture):
    """A solid color texture."""
    def __init__(self, color: Vector3):
        self.color = color

    def sample(self, uv: UV, point: Vector3) -> Vector3:
        return self.color

def as_texture(value: Union[Vector3, Texture]) -> Texture:
    if isinstance(value, Vector3):
        return SolidTexture(value)
    return value

class CheckerTexture(Texture):
    """
    A 3D checker pattern alternating between two textures. The pattern is
    defined in space, so it wraps any surface without seams.
    """
    def __init__(self, even: Union[Vector3, Texture], odd: Union[Vector3, Texture],
                 scale: float = 10.0):
        self.even = as_texture(even)
        self.odd = as_texture(odd)
        self.scale = scale

    def sample(self, uv: UV, point: Vector3) -> Vector3:
        sines = (math.sin(self.scale * point.x) *
                 math.sin(self.scale * point.y) *
                 math.sin(self.scale * point.z))
        if sines < 0:
            return self.odd.sample(uv, point)
        return self.even.sample(uv, point)
