# materials/metal.py
from typing import Optional, Union
from core.ray import Ray
from core.vector import Vector3
from core.uv import UV
from core.utils import reflect, random_in_unit_sphere
from geometry.hittable import HitRecord
from materials.material import Material, ScatterRecord
from materials.textures import Texture, as_texture

class Metal(Material):
    """
    Metal material with reflective properties and optional texture support.
    """
    def __init__(self, albedo: Union[Vector3, Texture], fuzz: float):
        super().__init__()
        self.texture = as_texture(albedo)
        self.fuzz = min(max(fuzz, 0.0), 1.0)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[ScatterRecord]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        scattered = Ray(rec.p, reflected + random_in_unit_sphere(rng) * self.fuzz, ray_in.time)

        if scattered.direction.dot(rec.normal) > 0:
            attenuation = self.texture.sample(UV(rec.u, rec.v), rec.p)
            return ScatterRecord.specular(scattered, attenuation)

        return None  # Absorb the ray if it does not scatter forward
