# core/utils.py
#
# Random sampling and optics helpers. Every sampler takes the caller's random
# stream (a numpy.random.Generator) so that each render worker owns its state.
import math
import numpy as np
from core.vector import Vector3

def make_rng(seed=None) -> np.random.Generator:
    """
    Returns a new random stream. Accepts a seed, a SeedSequence or None.
    """
    return np.random.default_rng(seed)

def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0

def random_double(rng, low: float = 0.0, high: float = 1.0) -> float:
    """
    Returns a uniform float in [low, high).
    """
    return low + (high - low) * float(rng.random())

def random_int(rng, low: int, high: int) -> int:
    """
    Returns a uniform integer in the closed range [low, high].
    """
    return int(rng.integers(low, high + 1))

def random_vector(rng, low: float = 0.0, high: float = 1.0) -> Vector3:
    return Vector3(random_double(rng, low, high),
                   random_double(rng, low, high),
                   random_double(rng, low, high))

def random_in_unit_sphere(rng) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    while True:
        p = random_vector(rng, -1.0, 1.0)
        if p.dot(p) < 1.0:
            return p

def random_unit_vector(rng) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    a = random_double(rng, 0.0, 2.0 * math.pi)
    z = random_double(rng, -1.0, 1.0)
    r = math.sqrt(1.0 - z * z)
    return Vector3(r * math.cos(a), r * math.sin(a), z)

def random_cosine_direction(rng) -> Vector3:
    """
    Cosine-weighted direction in the local frame whose +z is the normal.
    """
    r1 = random_double(rng)
    r2 = random_double(rng)
    z = math.sqrt(1.0 - r2)
    phi = 2.0 * math.pi * r1
    r = math.sqrt(r2)
    return Vector3(math.cos(phi) * r, math.sin(phi) * r, z)

def random_to_sphere(rng, radius: float, distance_squared: float) -> Vector3:
    """
    Uniform direction inside the cone subtended by a sphere of the given
    radius, in the local frame whose +z points at the sphere's center.
    """
    r1 = random_double(rng)
    r2 = random_double(rng)
    cos_theta_max = math.sqrt(max(0.0, 1.0 - radius * radius / distance_squared))
    z = 1.0 + r2 * (cos_theta_max - 1.0)
    phi = 2.0 * math.pi * r1
    s = math.sqrt(max(0.0, 1.0 - z * z))
    return Vector3(math.cos(phi) * s, math.sin(phi) * s, z)

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)

def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """
    Refracts the unit vector uv through a surface with normal n.
    Callers rule out total internal reflection beforehand.
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * (-math.sqrt(abs(1.0 - r_out_perp.length_squared())))
    return r_out_perp + r_out_parallel

def schlick(cos_theta: float, ref_idx: float) -> float:
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cos_theta), 5)
