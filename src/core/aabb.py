# src/core/aabb.py
from core.vector import Vector3

# Half-thickness given to planar primitives so their boxes never collapse.
PLANAR_PADDING = 0.001

class AABB:
    __slots__ = ('minimum', 'maximum')

    def __init__(self, minimum: Vector3, maximum: Vector3):
        self.minimum = minimum
        self.maximum = maximum

    def hit(self, ray, t_min: float, t_max: float) -> bool:
        # Slab method: for each axis, find intersection intervals.
        for a in range(3):
            d = ray.direction[a]
            o = ray.origin[a]
            if d == 0.0:
                # Parallel to the slab: inside it or never.
                if o < self.minimum[a] or o > self.maximum[a]:
                    return False
                continue
            invD = 1.0 / d
            t0 = (self.minimum[a] - o) * invD
            t1 = (self.maximum[a] - o) * invD
            if invD < 0:
                t0, t1 = t1, t0
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max <= t_min:
                return False
        return True

    def __eq__(self, other) -> bool:
        if not isinstance(other, AABB):
            return NotImplemented
        return self.minimum == other.minimum and self.maximum == other.maximum

    def __hash__(self) -> int:
        return hash((self.minimum, self.maximum))

    def __repr__(self) -> str:
        return f"AABB({self.minimum}, {self.maximum})"

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        return AABB(Vector3.min(box0.minimum, box1.minimum),
                    Vector3.max(box0.maximum, box1.maximum))
