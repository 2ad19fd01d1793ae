# materials/material.py
from typing import Optional
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import HitRecord
from materials.pdf import NoPDF, PlaceholderInvokedError

BLACK = Vector3(0.0, 0.0, 0.0)
NO_PDF = NoPDF()

class ScatterRecord:
    """
    Result of Material.scatter().

    Specular records carry a ready-made specular_ray that the integrator
    follows directly. Other records carry a pdf from which the integrator
    draws the next direction and weights it by Material.scattering_pdf().
    """
    __slots__ = ('specular_ray', 'is_specular', 'attenuation', 'pdf')

    def __init__(self, attenuation: Vector3, specular_ray: Ray = None, pdf = None):
        self.attenuation = attenuation
        self.specular_ray = specular_ray
        self.is_specular = specular_ray is not None
        self.pdf = pdf

    @classmethod
    def specular(cls, ray: Ray, attenuation: Vector3) -> "ScatterRecord":
        # Specular bounces are followed directly; their pdf is never sampled.
        return cls(attenuation, specular_ray=ray, pdf=NO_PDF)

    @classmethod
    def diffuse(cls, pdf, attenuation: Vector3) -> "ScatterRecord":
        return cls(attenuation, pdf=pdf)

class Material:
    """
    Abstract material class. The defaults describe a black, non-scattering
    surface; subclasses override what they need.
    """
    def __init__(self):
        self.texture = None

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[ScatterRecord]:
        """
        Returns how ray_in scatters at rec, or None if it is absorbed.
        """
        return None

    def scattering_pdf(self, ray_in: Ray, rec: HitRecord, scattered: Ray) -> float:
        return 0.0

    def emitted(self, ray_in: Ray, rec: HitRecord, u: float, v: float, p: Vector3) -> Vector3:
        return BLACK

class NoMaterial(Material):
    """
    Placeholder for shapes that exist only as sampling targets (light
    lists). It is never hit by the integrator, so every call is a bug.
    """
    def scatter(self, ray_in, rec, rng):
        raise PlaceholderInvokedError("NoMaterial.scatter() should never be called.")

    def scattering_pdf(self, ray_in, rec, scattered):
        raise PlaceholderInvokedError("NoMaterial.scattering_pdf() should never be called.")

    def emitted(self, ray_in, rec, u, v, p):
        raise PlaceholderInvokedError("NoMaterial.emitted() should never be called.")
