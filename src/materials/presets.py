# materials/presets.py
from core.vector import Vector3
from materials.metal import Metal
from materials.lambertian import Lambertian
from materials.dielectric import Dielectric
from materials.diffuse_light import DiffuseLight
from materials.textures import CheckerTexture

# Refractive indices relative to air.
REFRACTIVE_INDICES = {
    "glass": 1.5,
    "water": 1.33,
    "diamond": 2.42,
}

class MetalPresets:
    """Reflective surfaces, from perfect mirrors to brushed finishes."""

    @staticmethod
    def mirror(albedo: Vector3 = None) -> Metal:
        return Metal(albedo if albedo is not None else Vector3(0.95, 0.95, 0.95), fuzz=0.0)

    @staticmethod
    def aluminum() -> Metal:
        # Polished block of the classic Cornell box variant
        return Metal(Vector3(0.8, 0.85, 0.88), fuzz=0.0)

    @staticmethod
    def brushed_metal() -> Metal:
        return Metal(Vector3(0.8, 0.8, 0.8), fuzz=0.3)

class DielectricPresets:
    """Clear refractive materials, looked up in REFRACTIVE_INDICES."""

    @staticmethod
    def named(name: str) -> Dielectric:
        if name not in REFRACTIVE_INDICES:
            raise ValueError(f"Unknown dielectric {name!r}, expected one of {sorted(REFRACTIVE_INDICES)}")
        return Dielectric(REFRACTIVE_INDICES[name])

    @staticmethod
    def glass() -> Dielectric:
        return DielectricPresets.named("glass")

class LightPresets:
    """One-sided area light emitters. Intensity scales radiance, not albedo."""

    @staticmethod
    def white(intensity: float = 1.0) -> DiffuseLight:
        return DiffuseLight(Vector3(1.0, 1.0, 1.0) * intensity)

class ColorPresets:
    """Diffuse albedos. The first three are the Cornell box walls."""

    RED = Vector3(0.65, 0.05, 0.05)
    GREEN = Vector3(0.12, 0.45, 0.15)
    WHITE = Vector3(0.73, 0.73, 0.73)
    CHECKER_DARK = Vector3(0.2, 0.3, 0.1)
    CHECKER_LIGHT = Vector3(0.9, 0.9, 0.9)

    @staticmethod
    def matte(color: Vector3) -> Lambertian:
        return Lambertian(color)

class TexturePresets:

    @staticmethod
    def checkerboard(odd: Vector3 = None, even: Vector3 = None, scale: float = 10.0) -> CheckerTexture:
        """Green and white solid checker used for ground planes."""
        return CheckerTexture(odd if odd is not None else ColorPresets.CHECKER_DARK,
                              even if even is not None else ColorPresets.CHECKER_LIGHT,
                              scale)
