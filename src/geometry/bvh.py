# src/geometry/bvh.py
from typing import Optional
from core.aabb import AABB
from core.utils import make_rng, random_int
from geometry.hittable import Hittable, HitRecord

def _box_of(obj, time0: float, time1: float) -> AABB:
    box = obj.bounding_box(time0, time1)
    if box is None:
        raise ValueError(f"No bounding box for {obj!r} in BVHNode constructor.")
    return box

class BVHNode(Hittable):
    """
    Binary bounding volume hierarchy over objects[start:end].

    The split axis is picked at random for each node and the slice is sorted
    by box minimum along it, then halved. The objects list is sorted in place,
    so callers pass a copy (see build_bvh).
    """
    def __init__(self, objects: list, start: int, end: int,
                 time0: float, time1: float, rng):
        axis = random_int(rng, 0, 2)
        object_span = end - start

        if object_span <= 0:
            raise ValueError("BVHNode needs at least one object.")

        if object_span == 1:
            # Both children alias the same object so hit() stays uniform.
            self.left = self.right = objects[start]
        elif object_span == 2:
            self.left = objects[start]
            self.right = objects[start + 1]
        else:
            objects[start:end] = sorted(objects[start:end],
                                        key=lambda obj: _box_of(obj, time0, time1).minimum[axis])
            mid = start + object_span // 2
            self.left = BVHNode(objects, start, mid, time0, time1, rng)
            self.right = BVHNode(objects, mid, end, time0, time1, rng)

        self.box = AABB.surrounding_box(_box_of(self.left, time0, time1),
                                        _box_of(self.right, time0, time1))

    def hit(self, ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if not self.box.hit(ray, t_min, t_max):
            return None

        hit_left = self.left.hit(ray, t_min, t_max)
        # Only look for right hits nearer than the left one.
        hit_right = self.right.hit(ray, t_min, hit_left.t if hit_left else t_max)
        return hit_right or hit_left

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> AABB:
        return self.box

def build_bvh(objects, time0: float = 0.0, time1: float = 1.0, rng=None) -> BVHNode:
    """
    Compiles a sequence of hittables into a BVH without reordering it.
    """
    objects = list(objects)
    if not objects:
        raise ValueError("Cannot build a BVH over an empty object list.")
    if rng is None:
        rng = make_rng()
    return BVHNode(objects, 0, len(objects), time0, time1, rng)
