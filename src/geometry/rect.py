# geometry/rect.py
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.aabb import AABB, PLANAR_PADDING
from core.utils import random_double
from geometry.hittable import Hittable, HitRecord

INFINITY = float('inf')

def _axis_vector(axis: int, value: float) -> Vector3:
    components = [0.0, 0.0, 0.0]
    components[axis] = value
    return Vector3(*components)

class AxisAlignedRect(Hittable):
    """
    Rectangle lying in the plane where coordinate `k_axis` equals k.

    a0..a1 bounds the first free axis and b0..b1 the second one. The
    outward normal is the positive k axis.
    """
    a_axis = 0
    b_axis = 1
    k_axis = 2

    def __init__(self, a0: float, a1: float, b0: float, b1: float, k: float, material):
        if a1 <= a0 or b1 <= b0:
            raise ValueError(f"{type(self).__name__} needs a0 < a1 and b0 < b1, "
                             f"got ({a0}, {a1}) x ({b0}, {b1})")
        self.a0 = a0
        self.a1 = a1
        self.b0 = b0
        self.b1 = b1
        self.k = k
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        d = ray.direction[self.k_axis]
        if d == 0.0:
            return None
        t = (self.k - ray.origin[self.k_axis]) / d
        if t <= t_min or t >= t_max:
            return None
        a = ray.origin[self.a_axis] + t * ray.direction[self.a_axis]
        b = ray.origin[self.b_axis] + t * ray.direction[self.b_axis]
        if a < self.a0 or a > self.a1 or b < self.b0 or b > self.b1:
            return None

        rec = HitRecord()
        rec.u = (a - self.a0) / (self.a1 - self.a0)
        rec.v = (b - self.b0) / (self.b1 - self.b0)
        rec.t = t
        rec.set_face_normal(ray, _axis_vector(self.k_axis, 1.0))
        rec.material = self.material
        rec.p = ray.at(t)
        return rec

    def _corner(self, a: float, b: float, k: float) -> Vector3:
        components = [0.0, 0.0, 0.0]
        components[self.a_axis] = a
        components[self.b_axis] = b
        components[self.k_axis] = k
        return Vector3(*components)

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> AABB:
        # Pad the fixed axis so the box keeps a non-zero thickness.
        return AABB(self._corner(self.a0, self.b0, self.k - PLANAR_PADDING),
                    self._corner(self.a1, self.b1, self.k + PLANAR_PADDING))

    def area(self) -> float:
        return (self.a1 - self.a0) * (self.b1 - self.b0)

    def pdf_value(self, origin: Vector3, direction: Vector3) -> float:
        rec = self.hit(Ray(origin, direction), 0.001, INFINITY)
        if rec is None:
            return 0.0
        distance_squared = rec.t * rec.t * direction.length_squared()
        cosine = abs(direction.dot(rec.normal)) / direction.length()
        if cosine == 0.0:
            return 0.0
        return distance_squared / (cosine * self.area())

    def random(self, origin: Vector3, rng) -> Vector3:
        random_point = self._corner(random_double(rng, self.a0, self.a1),
                                    random_double(rng, self.b0, self.b1),
                                    self.k)
        return random_point - origin

    def __repr__(self) -> str:
        return (f"{type(self).__name__}({self.a0}, {self.a1}, {self.b0}, {self.b1}, "
                f"k={self.k})")

class XYRect(AxisAlignedRect):
    """Rectangle x0..x1 by y0..y1 in the plane z = k."""
    a_axis, b_axis, k_axis = 0, 1, 2

    def __init__(self, x0: float, x1: float, y0: float, y1: float, k: float, material):
        super().__init__(x0, x1, y0, y1, k, material)

class XZRect(AxisAlignedRect):
    """Rectangle x0..x1 by z0..z1 in the plane y = k."""
    a_axis, b_axis, k_axis = 0, 2, 1

    def __init__(self, x0: float, x1: float, z0: float, z1: float, k: float, material):
        super().__init__(x0, x1, z0, z1, k, material)

class YZRect(AxisAlignedRect):
    """Rectangle y0..y1 by z0..z1 in the plane x = k."""
    a_axis, b_axis, k_axis = 1, 2, 0

    def __init__(self, y0: float, y1: float, z0: float, z1: float, k: float, material):
        super().__init__(y0, y1, z0, z1, k, material)
