# geometry/sphere.py
import math
from typing import Optional, Tuple
from core.vector import Vector3
from core.ray import Ray
from core.aabb import AABB
from core.onb import ONB
from core.utils import random_to_sphere
from geometry.hittable import Hittable, HitRecord

INFINITY = float('inf')

def get_sphere_uv(p: Vector3) -> Tuple[float, float]:
    """
    Texture coordinates of a point p on the unit sphere.
    """
    phi = math.atan2(p.z, p.x)
    theta = math.asin(max(-1.0, min(1.0, p.y)))
    u = 1.0 - (phi + math.pi) / (2.0 * math.pi)
    v = (theta + math.pi / 2.0) / math.pi
    return u, v

def _hit_sphere(center: Vector3, radius: float, material, ray: Ray,
                t_min: float, t_max: float) -> Optional[HitRecord]:
    oc = ray.origin - center
    a = ray.direction.dot(ray.direction)
    half_b = oc.dot(ray.direction)
    c = oc.dot(oc) - radius * radius
    discriminant = half_b * half_b - a * c

    if discriminant <= 0:
        return None

    sqrt_disc = math.sqrt(discriminant)
    # Find the nearest root that lies in the acceptable range
    root = (-half_b - sqrt_disc) / a
    if root <= t_min or root >= t_max:
        root = (-half_b + sqrt_disc) / a
        if root <= t_min or root >= t_max:
            return None

    rec = HitRecord()
    rec.t = root
    rec.p = ray.at(rec.t)
    outward_normal = (rec.p - center) / radius
    rec.set_face_normal(ray, outward_normal)
    rec.u, rec.v = get_sphere_uv(outward_normal)
    rec.material = material
    return rec

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Vector3, radius: float, material):
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return _hit_sphere(self.center, self.radius, self.material, ray, t_min, t_max)

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> AABB:
        # The bounding box of a sphere is center ± radius
        offset = Vector3(self.radius, self.radius, self.radius)
        return AABB(self.center - offset, self.center + offset)

    def pdf_value(self, origin: Vector3, direction: Vector3) -> float:
        if self.hit(Ray(origin, direction), 0.001, INFINITY) is None:
            return 0.0
        distance_squared = (self.center - origin).length_squared()
        cos_theta_max = math.sqrt(max(0.0, 1.0 - self.radius * self.radius / distance_squared))
        solid_angle = 2.0 * math.pi * (1.0 - cos_theta_max)
        if solid_angle <= 0.0:
            return 0.0
        return 1.0 / solid_angle

    def random(self, origin: Vector3, rng) -> Vector3:
        direction = self.center - origin
        uvw = ONB.build_from_w(direction)
        return uvw.local(random_to_sphere(rng, self.radius, direction.length_squared()))

class MovingSphere(Hittable):
    """
    A sphere whose center moves linearly from center0 at time0 to center1
    at time1. Rays carry the time at which they sample the motion.
    """
    def __init__(self, center0: Vector3, center1: Vector3, time0: float,
                 time1: float, radius: float, material):
        self.center0 = center0
        self.center1 = center1
        self.time0 = time0
        self.time1 = time1
        self.radius = radius
        self.material = material

    def center(self, time: float) -> Vector3:
        if self.time1 == self.time0:
            return self.center0
        return self.center0 + (self.center1 - self.center0) * (
            (time - self.time0) / (self.time1 - self.time0))

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return _hit_sphere(self.center(ray.time), self.radius, self.material, ray, t_min, t_max)

    def bounding_box(self, time0: float, time1: float) -> AABB:
        offset = Vector3(self.radius, self.radius, self.radius)
        box0 = AABB(self.center(time0) - offset, self.center(time0) + offset)
        box1 = AABB(self.center(time1) - offset, self.center(time1) + offset)
        return AABB.surrounding_box(box0, box1)

    def _sampling_sphere(self) -> Sphere:
        # Light sampling has no ray time, so it targets the mid-shutter position.
        return Sphere(self.center(0.5 * (self.time0 + self.time1)), self.radius, self.material)

    def pdf_value(self, origin: Vector3, direction: Vector3) -> float:
        return self._sampling_sphere().pdf_value(origin, direction)

    def random(self, origin: Vector3, rng) -> Vector3:
        return self._sampling_sphere().random(origin, rng)
