from geometry.hittable import Hittable, HitRecord
from geometry.sphere import Sphere, MovingSphere, get_sphere_uv
from geometry.rect import AxisAlignedRect, XYRect, XZRect, YZRect
from geometry.transform import Translate, RotateY, FlipFace
from geometry.bvh import BVHNode, build_bvh
from geometry.world import HittableList
from geometry.box import Box

__all__ = [
    "Hittable", "HitRecord",
    "Sphere", "MovingSphere", "get_sphere_uv",
    "AxisAlignedRect", "XYRect", "XZRect", "YZRect",
    "Translate", "RotateY", "FlipFace",
    "BVHNode", "build_bvh",
    "HittableList",
    "Box",
]
