# materials/textures.py
import math
from typing import Union
from core.vector import Vector3
from core.uv import UV

class Texture:
    """Base class for all textures."""
    def sample(self, uv: UV, p: Vector3) -> Vector3:
        """Sample the texture at given UV coordinates and hit point."""
        raise NotImplementedError("sample() must be implemented by texture subclasses.")

class SolidTexture(Texture):
    """A solid color texture."""
    def __init__(self, color: Vector3):
        self.color = color

    def sample(self, uv: UV, p: Vector3) -> Vector3:
        return self.color

class CheckerTexture(Texture):
    """
    A 3D checker pattern. The sign of sin(scale*x)*sin(scale*y)*sin(scale*z)
    picks between the odd and even textures, so the pattern does not depend
    on the surface parametrisation.
    """
    def __init__(self, odd: Union[Vector3, Texture], even: Union[Vector3, Texture],
                 scale: float = 10.0):
        self.odd = as_texture(odd)
        self.even = as_texture(even)
        self.scale = scale

    def sample(self, uv: UV, p: Vector3) -> Vector3:
        sines = (math.sin(self.scale * p.x) *
                 math.sin(self.scale * p.y) *
                 math.sin(self.scale * p.z))
        if sines < 0:
            return self.odd.sample(uv, p)
        return self.even.sample(uv, p)

def as_texture(value: Union[Vector3, Texture]) -> Texture:
    """Wraps a plain color in a SolidTexture; textures pass through."""
    if isinstance(value, Vector3):
        return SolidTexture(value)
    return value
