# renderer/integrator.py
#
# Recursive Monte Carlo estimate of the radiance carried along a ray.
from typing import Callable, Optional, Union
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import Hittable
from materials.pdf import HittablePDF, MixturePDF

# Lower bound of the hit interval, keeps bounces off their own surface.
T_MIN = 0.001
INFINITY = float('inf')

BLACK = Vector3(0.0, 0.0, 0.0)

Background = Union[Vector3, Callable[[Ray], Vector3]]

def sky_gradient(ray: Ray) -> Vector3:
    """Blue-to-white sky used by scenes without emitters."""
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return Vector3(1.0, 1.0, 1.0) * (1.0 - t) + Vector3(0.5, 0.7, 1.0) * t

def background_color(background: Background, ray: Ray) -> Vector3:
    if callable(background):
        return background(ray)
    return background

def estimate_radiance(ray: Ray, background: Background, world: Hittable, depth: int,
                      rng, lights: Optional[Hittable] = None) -> Vector3:
    """
    Radiance arriving along ray, following at most depth bounces.

    Diffuse bounces are importance sampled from the material's pdf, mixed
    50/50 with directions towards lights when a light hittable is given.
    """
    if depth <= 0:
        return BLACK

    rec = world.hit(ray, T_MIN, INFINITY)
    if rec is None:
        return background_color(background, ray)

    emitted = rec.material.emitted(ray, rec, rec.u, rec.v, rec.p)
    srec = rec.material.scatter(ray, rec, rng)
    if srec is None:
        return emitted

    if srec.is_specular:
        return emitted + srec.attenuation * estimate_radiance(
            srec.specular_ray, background, world, depth - 1, rng, lights)

    if lights is not None:
        sampling_pdf = MixturePDF(HittablePDF(lights, rec.p), srec.pdf)
    else:
        sampling_pdf = srec.pdf

    scattered = Ray(rec.p, sampling_pdf.generate(rng), ray.time)
    pdf_value = sampling_pdf.value(scattered.direction)
    if pdf_value <= 0.0:
        return emitted

    scattering_pdf = rec.material.scattering_pdf(ray, rec, scattered)
    incoming = estimate_radiance(scattered, background, world, depth - 1, rng, lights)
    return emitted + srec.attenuation * incoming * (scattering_pdf / pdf_value)
