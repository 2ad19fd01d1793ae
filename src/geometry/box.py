# geometry/box.py
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.aabb import AABB
from geometry.hittable import Hittable, HitRecord
from geometry.rect import XYRect, XZRect, YZRect
from geometry.transform import FlipFace
from geometry.world import HittableList

class Box(Hittable):
    """
    Axis-aligned rectangular prism spanning p0..p1, assembled from six
    rectangles. Faces on the minimum planes are flipped so that front_face
    always means the ray arrived from outside the box.
    """
    def __init__(self, p0: Vector3, p1: Vector3, material):
        self.box_min = Vector3.min(p0, p1)
        self.box_max = Vector3.max(p0, p1)
        lo, hi = self.box_min, self.box_max

        self.sides = HittableList()
        self.sides.add(XYRect(lo.x, hi.x, lo.y, hi.y, hi.z, material))
        self.sides.add(FlipFace(XYRect(lo.x, hi.x, lo.y, hi.y, lo.z, material)))
        self.sides.add(XZRect(lo.x, hi.x, lo.z, hi.z, hi.y, material))
        self.sides.add(FlipFace(XZRect(lo.x, hi.x, lo.z, hi.z, lo.y, material)))
        self.sides.add(YZRect(lo.y, hi.y, lo.z, hi.z, hi.x, material))
        self.sides.add(FlipFace(YZRect(lo.y, hi.y, lo.z, hi.z, lo.x, material)))

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return self.sides.hit(ray, t_min, t_max)

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> AABB:
        return AABB(self.box_min, self.box_max)

    def pdf_value(self, origin: Vector3, direction: Vector3) -> float:
        return self.sides.pdf_value(origin, direction)

    def random(self, origin: Vector3, rng) -> Vector3:
        return self.sides.random(origin, rng)
