# src/geometry/world.py
import logging
from typing import Optional, List
from core.ray import Ray
from core.aabb import AABB
from core.vector import Vector3
from core.utils import random_int
from geometry.hittable import Hittable, HitRecord
from geometry.bvh import build_bvh

logger = logging.getLogger(__name__)

class HittableList(Hittable):
    """
    A list of Hittable objects. Hits are found by a linear scan until
    build_bvh() compiles the members into a tree, after which the tree is
    used. The list also acts as a light-sampling target over its members.
    """
    def __init__(self, objects: Optional[List[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects else []
        self.bvh_root = None

    def add(self, obj: Hittable):
        self.objects.append(obj)
        self.bvh_root = None

    def __len__(self) -> int:
        return len(self.objects)

    def build_bvh(self, time0: float = 0.0, time1: float = 1.0, rng=None):
        if len(self.objects) == 0:
            self.bvh_root = None
            return
        self.bvh_root = build_bvh(self.objects, time0, time1, rng)
        logger.debug("Built BVH over %d objects", len(self.objects))

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if self.bvh_root is not None:
            return self.bvh_root.hit(ray, t_min, t_max)
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        if not self.objects:
            return None
        output_box = None
        for obj in self.objects:
            box = obj.bounding_box(time0, time1)
            if box is None:
                return None
            output_box = box if output_box is None else AABB.surrounding_box(output_box, box)
        return output_box

    def pdf_value(self, origin: Vector3, direction: Vector3) -> float:
        if not self.objects:
            return 0.0
        weight = 1.0 / len(self.objects)
        return sum(weight * obj.pdf_value(origin, direction) for obj in self.objects)

    def random(self, origin: Vector3, rng) -> Vector3:
        if not self.objects:
            return Vector3(1.0, 0.0, 0.0)
        return self.objects[random_int(rng, 0, len(self.objects) - 1)].random(origin, rng)
