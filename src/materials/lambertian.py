# materials/lambertian.py

import math
from typing import Union
from core.ray import Ray
from core.vector import Vector3
from core.uv import UV
from geometry.hittable import HitRecord
from materials.material import Material, ScatterRecord
from materials.pdf import CosinePDF
from materials.textures import Texture, as_texture

class Lambertian(Material):
    """
    Lambertian diffuse material with optional texture support.
    """

    def __init__(self, albedo: Union[Vector3, Texture]):
        super().__init__()
        # Store either a solid color or a texture.
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> ScatterRecord:
        """
        Diffuse surfaces never bounce specularly: the integrator samples the
        next direction from a cosine lobe around the normal.
        """
        attenuation = self.texture.sample(UV(rec.u, rec.v), rec.p)
        return ScatterRecord.diffuse(CosinePDF(rec.normal), attenuation)

    def scattering_pdf(self, ray_in: Ray, rec: HitRecord, scattered: Ray) -> float:
        cosine = rec.normal.dot(scattered.direction.normalize())
        return 0.0 if cosine < 0 else cosine / math.pi
