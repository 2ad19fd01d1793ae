# core/onb.py
from core.vector import Vector3

class ONB:
    """
    Orthonormal basis built around a single axis w. Maps vectors sampled in
    the local frame (+z along w) into world space.
    """
    __slots__ = ('axis',)

    def __init__(self, u: Vector3, v: Vector3, w: Vector3):
        self.axis = (u, v, w)

    @classmethod
    def build_from_w(cls, n: Vector3) -> "ONB":
        w = n.normalize()
        a = Vector3(0.0, 1.0, 0.0) if abs(w.x) > 0.9 else Vector3(1.0, 0.0, 0.0)
        v = w.cross(a).normalize()
        u = w.cross(v)
        return cls(u, v, w)

    @property
    def u(self) -> Vector3:
        return self.axis[0]

    @property
    def v(self) -> Vector3:
        return self.axis[1]

    @property
    def w(self) -> Vector3:
        return self.axis[2]

    def local(self, a: Vector3) -> Vector3:
        return self.axis[0] * a.x + self.axis[1] * a.y + self.axis[2] * a.z
