# materials/diffuse_light.py
from typing import Union
from core.ray import Ray
from core.vector import Vector3
from core.uv import UV
from geometry.hittable import HitRecord
from materials.material import Material, BLACK
from materials.textures import Texture, as_texture

class DiffuseLight(Material):
    """
    One-sided emissive material. Light leaves only through the front face,
    so panels are usually wrapped in FlipFace to shine into the scene.
    """
    def __init__(self, emit: Union[Vector3, Texture]):
        super().__init__()
        self.texture = as_texture(emit)

    def emitted(self, ray_in: Ray, rec: HitRecord, u: float, v: float, p: Vector3) -> Vector3:
        """
        Return the emitted radiance at p, or black when the back face was hit.

        Args:
            ray_in (Ray): The incoming ray.
            rec (HitRecord): The hit being shaded.
            u (float): The horizontal texture coordinate.
            v (float): The vertical texture coordinate.
            p (Vector3): The hit point.

        Returns:
            Vector3: The emission color from the texture.
        """
        if rec.front_face:
            return self.texture.sample(UV(u, v), p)
        return BLACK
