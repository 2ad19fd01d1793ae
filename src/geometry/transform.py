# geometry/transform.py
#
# Instancing decorators. Each one wraps a child hittable, moves the incoming
# ray into the child's frame and moves the resulting hit back to world space.
# Rigid motions keep dot(direction, normal) unchanged, so the child's
# front_face flag stays valid in world space.
import math
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.aabb import AABB
from core.utils import degrees_to_radians
from geometry.hittable import Hittable, HitRecord

class Translate(Hittable):
    def __init__(self, obj: Hittable, offset: Vector3):
        self.obj = obj
        self.offset = offset

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        moved_ray = Ray(ray.origin - self.offset, ray.direction, ray.time)
        rec = self.obj.hit(moved_ray, t_min, t_max)
        if rec is None:
            return None
        rec.p = rec.p + self.offset
        return rec

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        box = self.obj.bounding_box(time0, time1)
        if box is None:
            return None
        return AABB(box.minimum + self.offset, box.maximum + self.offset)

    def pdf_value(self, origin: Vector3, direction: Vector3) -> float:
        return self.obj.pdf_value(origin - self.offset, direction)

    def random(self, origin: Vector3, rng) -> Vector3:
        return self.obj.random(origin - self.offset, rng)

class RotateY(Hittable):
    """
    Rotates a child hittable by a fixed angle (degrees) about the y axis.
    The world-space bounding box is computed once from the eight rotated
    corners of the child's box over the [0, 1] shutter interval.
    """
    def __init__(self, obj: Hittable, angle: float):
        self.obj = obj
        self.angle = angle
        radians = degrees_to_radians(angle)
        self.sin_theta = math.sin(radians)
        self.cos_theta = math.cos(radians)
        self.box = self._rotated_box(obj.bounding_box(0.0, 1.0))

    def _rotated_box(self, box: Optional[AABB]) -> Optional[AABB]:
        if box is None:
            return None
        infinity = float('inf')
        minimum = Vector3(infinity, infinity, infinity)
        maximum = Vector3(-infinity, -infinity, -infinity)
        for i in range(2):
            for j in range(2):
                for k in range(2):
                    x = i * box.maximum.x + (1 - i) * box.minimum.x
                    y = j * box.maximum.y + (1 - j) * box.minimum.y
                    z = k * box.maximum.z + (1 - k) * box.minimum.z
                    corner = self._to_world(Vector3(x, y, z))
                    minimum = Vector3.min(minimum, corner)
                    maximum = Vector3.max(maximum, corner)
        return AABB(minimum, maximum)

    def _to_local(self, v: Vector3) -> Vector3:
        return Vector3(self.cos_theta * v.x - self.sin_theta * v.z,
                       v.y,
                       self.sin_theta * v.x + self.cos_theta * v.z)

    def _to_world(self, v: Vector3) -> Vector3:
        return Vector3(self.cos_theta * v.x + self.sin_theta * v.z,
                       v.y,
                       -self.sin_theta * v.x + self.cos_theta * v.z)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        rotated_ray = Ray(self._to_local(ray.origin), self._to_local(ray.direction), ray.time)
        rec = self.obj.hit(rotated_ray, t_min, t_max)
        if rec is None:
            return None
        rec.p = self._to_world(rec.p)
        rec.normal = self._to_world(rec.normal)
        return rec

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        return self.box

    def pdf_value(self, origin: Vector3, direction: Vector3) -> float:
        return self.obj.pdf_value(self._to_local(origin), self._to_local(direction))

    def random(self, origin: Vector3, rng) -> Vector3:
        return self._to_world(self.obj.random(self._to_local(origin), rng))

class FlipFace(Hittable):
    """
    Inverts the front_face flag of the child's hits. Used to make one-sided
    emitters face into the scene.
    """
    def __init__(self, obj: Hittable):
        self.obj = obj

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        rec = self.obj.hit(ray, t_min, t_max)
        if rec is None:
            return None
        rec.front_face = not rec.front_face
        return rec

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        return self.obj.bounding_box(time0, time1)

    def pdf_value(self, origin: Vector3, direction: Vector3) -> float:
        return self.obj.pdf_value(origin, direction)

    def random(self, origin: Vector3, rng) -> Vector3:
        return self.obj.random(origin, rng)
