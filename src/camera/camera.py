# camera/camera.py
import math
from core.vector import Vector3
from core.ray import Ray
from core.utils import degrees_to_radians, random_double

class Camera:
    """
    Look-at camera with a thin lens (depth of field) and an open shutter
    interval [time0, time1] for motion blur.
    """
    def __init__(self, position: Vector3, look_at: Vector3, vup: Vector3,
                 fov: float, aspect_ratio: float, aperture: float = 0.0,
                 focus_dist: float = 10.0, time0: float = 0.0, time1: float = 0.0):
        self.position = position
        self.look_at = look_at
        self.vup = vup
        self.fov = fov  # Vertical field of view in degrees
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture  # Lens aperture for depth of field
        self.focus_dist = focus_dist  # Distance to focus plane
        self.lens_radius = aperture / 2.0
        self.time0 = time0
        self.time1 = time1
        self.update_camera()

    def update_camera(self):
        """Updates the camera's basis vectors and viewport."""
        viewport_height = 2.0 * math.tan(degrees_to_radians(self.fov) / 2)
        viewport_width = self.aspect_ratio * viewport_height

        self.w = (self.position - self.look_at).normalize()
        self.u = self.vup.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        # Scale by focus distance
        self.horizontal = self.u * viewport_width * self.focus_dist
        self.vertical = self.v * viewport_height * self.focus_dist

        self.lower_left_corner = (self.position -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5 -
                                  self.w * self.focus_dist)

    def get_ray(self, s: float, t: float, rng) -> Ray:
        """Generates a ray through viewport coordinates (s, t) in [0, 1]."""
        time = random_double(rng, self.time0, self.time1) if self.time1 > self.time0 else self.time0
        if self.lens_radius <= 0:
            direction = (self.lower_left_corner +
                         self.horizontal * s +
                         self.vertical * t -
                         self.position)
            return Ray(self.position, direction, time)

        # Generate random point on lens
        rd = random_in_unit_disk(rng) * self.lens_radius
        offset = self.u * rd.x + self.v * rd.y

        ray_origin = self.position + offset
        ray_direction = (self.lower_left_corner +
                         self.horizontal * s +
                         self.vertical * t -
                         ray_origin)
        return Ray(ray_origin, ray_direction, time)

def random_in_unit_disk(rng) -> Vector3:
    """Generate random point in unit disk for DOF."""
    while True:
        p = Vector3(
            random_double(rng, -1, 1),
            random_double(rng, -1, 1),
            0
        )
        if p.dot(p) < 1:
            return p
