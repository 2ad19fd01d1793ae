import math

import pytest

from conftest import assert_vec_close
from core.aabb import AABB, PLANAR_PADDING
from core.ray import Ray
from core.utils import random_unit_vector, random_vector
from core.vector import Vector3
from geometry import (Box, FlipFace, HittableList, MovingSphere, RotateY, Sphere,
                      Translate, XYRect, XZRect, YZRect)
from materials.lambertian import Lambertian

INF = float('inf')
GRAY = Lambertian(Vector3(0.5, 0.5, 0.5))


# --- Spheres ---

def test_sphere_front_hit():
    sphere = Sphere(Vector3(0, 0, -1), 0.5, GRAY)
    rec = sphere.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), 0.001, INF)
    assert rec is not None
    assert math.isclose(rec.t, 0.5)
    assert_vec_close(rec.p, Vector3(0, 0, -0.5))
    assert_vec_close(rec.normal, Vector3(0, 0, 1))
    assert rec.front_face
    assert rec.material is GRAY


def test_sphere_picks_far_root_when_near_root_is_outside_interval():
    sphere = Sphere(Vector3(0, 0, -1), 0.5, GRAY)
    rec = sphere.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), 0.6, INF)
    assert math.isclose(rec.t, 1.5)
    # Leaving the sphere: the stored normal still opposes the ray.
    assert not rec.front_face
    assert_vec_close(rec.normal, Vector3(0, 0, 1))


def test_sphere_misses():
    sphere = Sphere(Vector3(0, 0, -1), 0.5, GRAY)
    # Tangent ray: zero discriminant counts as a miss.
    assert sphere.hit(Ray(Vector3(0.5, 0, 0), Vector3(0, 0, -1)), 0.001, INF) is None
    assert sphere.hit(Ray(Vector3(2, 0, 0), Vector3(0, 0, -1)), 0.001, INF) is None
    # Both roots beyond t_max
    assert sphere.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), 0.001, 0.4) is None


def test_sphere_uv_in_unit_range(rng):
    sphere = Sphere(Vector3(1, 2, 3), 2.0, GRAY)
    for _ in range(100):
        origin = Vector3(1, 2, 3) + random_unit_vector(rng) * 10
        rec = sphere.hit(Ray(origin, Vector3(1, 2, 3) - origin), 0.001, INF)
        assert 0.0 <= rec.u <= 1.0
        assert 0.0 <= rec.v <= 1.0


def test_moving_sphere_center_and_box():
    sphere = MovingSphere(Vector3(0, 0, 0), Vector3(0, 2, 0), 0.0, 1.0, 0.5, GRAY)
    assert sphere.center(0.5) == Vector3(0, 1, 0)
    box = sphere.bounding_box(0.0, 1.0)
    assert box == AABB(Vector3(-0.5, -0.5, -0.5), Vector3(0.5, 2.5, 0.5))

    ray_early = Ray(Vector3(0, 2, 5), Vector3(0, 0, -1), 0.0)
    ray_late = Ray(Vector3(0, 2, 5), Vector3(0, 0, -1), 1.0)
    assert sphere.hit(ray_early, 0.001, INF) is None
    assert sphere.hit(ray_late, 0.001, INF) is not None


def test_moving_sphere_with_zero_interval_stays_put():
    sphere = MovingSphere(Vector3(1, 0, 0), Vector3(5, 0, 0), 2.0, 2.0, 1.0, GRAY)
    assert sphere.center(7.0) == Vector3(1, 0, 0)


def test_sphere_pdf_value_is_inverse_solid_angle():
    sphere = Sphere(Vector3(0, 0, -10), 1.0, GRAY)
    origin = Vector3(0, 0, 0)
    solid_angle = 2 * math.pi * (1 - math.sqrt(1 - 1 / 100))
    assert math.isclose(sphere.pdf_value(origin, Vector3(0, 0, -1)), 1 / solid_angle)
    assert sphere.pdf_value(origin, Vector3(0, 1, 0)) == 0.0


def test_sphere_random_points_at_sphere(rng):
    sphere = Sphere(Vector3(3, 1, -10), 1.5, GRAY)
    origin = Vector3(0, 0, 0)
    for _ in range(200):
        direction = sphere.random(origin, rng)
        assert sphere.pdf_value(origin, direction) > 0.0


# --- Rectangles ---

def test_xy_rect_hit_and_uv():
    rect = XYRect(0, 1, 0, 1, -1, GRAY)
    rec = rect.hit(Ray(Vector3(0.25, 0.5, 0), Vector3(0, 0, -1)), 0.001, INF)
    assert math.isclose(rec.t, 1.0)
    assert math.isclose(rec.u, 0.25)
    assert math.isclose(rec.v, 0.5)
    assert rec.front_face
    assert rec.normal == Vector3(0, 0, 1)


def test_rect_misses():
    rect = XYRect(0, 1, 0, 1, -1, GRAY)
    # Parallel to the plane
    assert rect.hit(Ray(Vector3(0.5, 0.5, 0), Vector3(1, 0, 0)), 0.001, INF) is None
    # Outside the bounds
    assert rect.hit(Ray(Vector3(2, 0.5, 0), Vector3(0, 0, -1)), 0.001, INF) is None
    # Behind the origin
    assert rect.hit(Ray(Vector3(0.5, 0.5, 0), Vector3(0, 0, 1)), 0.001, INF) is None


def test_rect_boxes_are_padded_on_their_fixed_axis():
    xz = XZRect(0, 2, 0, 3, 5, GRAY).bounding_box(0, 1)
    assert xz == AABB(Vector3(0, 5 - PLANAR_PADDING, 0), Vector3(2, 5 + PLANAR_PADDING, 3))
    yz = YZRect(1, 2, 3, 4, -1, GRAY).bounding_box(0, 1)
    assert yz == AABB(Vector3(-1 - PLANAR_PADDING, 1, 3), Vector3(-1 + PLANAR_PADDING, 2, 4))


def test_rect_pdf_value_and_random(rng):
    light = XZRect(-1, 1, -1, 1, 2, GRAY)
    origin = Vector3(0, 0, 0)
    # distance^2 = 4, cosine = 1, area = 4
    assert math.isclose(light.pdf_value(origin, Vector3(0, 1, 0)), 1.0)
    assert light.pdf_value(origin, Vector3(0, -1, 0)) == 0.0
    for _ in range(100):
        direction = light.random(origin, rng)
        assert light.hit(Ray(origin, direction), 0.001, INF) is not None


# --- Box ---

BOX_APPROACHES = [
    (Vector3(0.5, 0.5, -5), Vector3(0, 0, 1), Vector3(0, 0, -1)),
    (Vector3(0.5, 0.5, 5), Vector3(0, 0, -1), Vector3(0, 0, 1)),
    (Vector3(0.5, -5, 0.5), Vector3(0, 1, 0), Vector3(0, -1, 0)),
    (Vector3(0.5, 5, 0.5), Vector3(0, -1, 0), Vector3(0, 1, 0)),
    (Vector3(-5, 0.5, 0.5), Vector3(1, 0, 0), Vector3(-1, 0, 0)),
    (Vector3(5, 0.5, 0.5), Vector3(-1, 0, 0), Vector3(1, 0, 0)),
]


@pytest.mark.parametrize("origin, direction, normal", BOX_APPROACHES)
def test_box_faces_seen_from_outside(origin, direction, normal):
    box = Box(Vector3(0, 0, 0), Vector3(1, 1, 1), GRAY)
    rec = box.hit(Ray(origin, direction), 0.001, INF)
    assert math.isclose(rec.t, 4.0) or math.isclose(rec.t, 5.0)
    assert rec.front_face
    assert rec.normal == normal


def test_box_from_inside_is_back_face():
    box = Box(Vector3(0, 0, 0), Vector3(1, 1, 1), GRAY)
    rec = box.hit(Ray(Vector3(0.5, 0.5, 0.5), Vector3(0, 0, 1)), 0.001, INF)
    assert math.isclose(rec.t, 0.5)
    assert not rec.front_face


def test_box_bounding_box_orders_corners():
    box = Box(Vector3(1, 0, 3), Vector3(0, 2, -1), GRAY)
    assert box.bounding_box(0, 1) == AABB(Vector3(0, 0, -1), Vector3(1, 2, 3))


# --- Instancing ---

def test_translate_matches_moved_sphere():
    moved = Translate(Sphere(Vector3(0, 0, 0), 0.5, GRAY), Vector3(0, 0, -1))
    rec = moved.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), 0.001, INF)
    assert math.isclose(rec.t, 0.5)
    assert_vec_close(rec.p, Vector3(0, 0, -0.5))
    assert_vec_close(rec.normal, Vector3(0, 0, 1))
    assert rec.front_face
    assert moved.bounding_box(0, 1) == AABB(Vector3(-0.5, -0.5, -1.5), Vector3(0.5, 0.5, -0.5))


def test_translate_forwards_light_sampling():
    light = Translate(XZRect(-1, 1, -1, 1, 0, GRAY), Vector3(0, 2, 0))
    assert math.isclose(light.pdf_value(Vector3(0, 0, 0), Vector3(0, 1, 0)), 1.0)


def test_rotate_y_quarter_turn_box():
    rotated = RotateY(Box(Vector3(0, 0, 0), Vector3(1, 1, 1), GRAY), 90)
    box = rotated.bounding_box(0, 1)
    assert_vec_close(box.minimum, Vector3(0, 0, -1))
    assert_vec_close(box.maximum, Vector3(1, 1, 0))

    rec = rotated.hit(Ray(Vector3(0.5, 0.5, 5), Vector3(0, 0, -1)), 0.001, INF)
    assert math.isclose(rec.t, 5.0)
    assert_vec_close(rec.p, Vector3(0.5, 0.5, 0))
    assert_vec_close(rec.normal, Vector3(0, 0, 1))
    assert rec.front_face


def test_rotate_y_keeps_unbounded_child_unbounded():
    assert RotateY(HittableList(), 30).bounding_box(0, 1) is None


def test_flip_face_toggles_only_front_face():
    rect = XZRect(-1, 1, -1, 1, 1, GRAY)
    ray = Ray(Vector3(0, 0, 0), Vector3(0, 1, 0))
    plain = rect.hit(ray, 0.001, INF)
    flipped = FlipFace(rect).hit(ray, 0.001, INF)
    assert plain.front_face is False
    assert flipped.front_face is True
    assert flipped.normal == plain.normal
    assert FlipFace(rect).bounding_box(0, 1) == rect.bounding_box(0, 1)


def test_normals_always_oppose_the_ray(rng):
    objects = [
        Sphere(Vector3(0, 0, 0), 1.0, GRAY),
        XYRect(-1, 1, -1, 1, 0, GRAY),
        Box(Vector3(-1, -1, -1), Vector3(1, 1, 1), GRAY),
        Translate(RotateY(Box(Vector3(0, 0, 0), Vector3(1, 2, 1), GRAY), 30), Vector3(-0.5, -1, 0)),
        FlipFace(Sphere(Vector3(0, 0, 0), 1.0, GRAY)),
    ]
    for obj in objects:
        hits = 0
        for _ in range(200):
            origin = random_vector(rng, -3, 3)
            direction = random_vector(rng, -1, 1) - origin * 0.3
            rec = obj.hit(Ray(origin, direction), 0.001, INF)
            if rec is None:
                continue
            hits += 1
            assert direction.dot(rec.normal) <= 0.0
        assert hits > 0


# --- HittableList ---

def test_list_returns_nearest_hit():
    near = Sphere(Vector3(0, 0, -2), 0.5, GRAY)
    far = Sphere(Vector3(0, 0, -5), 0.5, GRAY)
    world = HittableList([far, near])
    rec = world.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), 0.001, INF)
    assert math.isclose(rec.t, 1.5)


def test_list_bounding_box():
    assert HittableList().bounding_box(0, 1) is None
    world = HittableList([Sphere(Vector3(0, 0, 0), 1, GRAY), Sphere(Vector3(3, 0, 0), 1, GRAY)])
    assert world.bounding_box(0, 1) == AABB(Vector3(-1, -1, -1), Vector3(4, 1, 1))
    world.add(HittableList())
    assert world.bounding_box(0, 1) is None


def test_list_pdf_value_is_member_average():
    light = XZRect(-1, 1, -1, 1, 2, GRAY)
    elsewhere = Sphere(Vector3(50, 0, 0), 1, GRAY)
    lights = HittableList([light, elsewhere])
    assert math.isclose(lights.pdf_value(Vector3(0, 0, 0), Vector3(0, 1, 0)), 0.5)
    assert HittableList().pdf_value(Vector3(0, 0, 0), Vector3(0, 1, 0)) == 0.0


def test_list_random_targets_a_member(rng):
    a = XZRect(-1, 1, -1, 1, 2, GRAY)
    b = Sphere(Vector3(0, -10, 0), 1, GRAY)
    lights = HittableList([a, b])
    origin = Vector3(0, 0, 0)
    targets = set()
    for _ in range(100):
        direction = lights.random(origin, rng)
        if a.pdf_value(origin, direction) > 0:
            targets.add("rect")
        elif b.pdf_value(origin, direction) > 0:
            targets.add("sphere")
        else:
            pytest.fail(f"direction {direction} misses every member")
    assert targets == {"rect", "sphere"}


@pytest.mark.parametrize("rect_type", [XYRect, XZRect, YZRect])
def test_zero_extent_rect_is_rejected(rect_type):
    with pytest.raises(ValueError, match="needs a0 < a1"):
        rect_type(0, 0, -1, 1, 2, GRAY)
    with pytest.raises(ValueError):
        rect_type(-1, 1, 3, 3, 2, GRAY)
    with pytest.raises(ValueError):
        rect_type(1, -1, 0, 1, 2, GRAY)


def test_box_is_sampleable_as_light(rng):
    box = Box(Vector3(-1, 4, -1), Vector3(1, 6, 1), GRAY)
    origin = Vector3(0, 0, 0)
    # Straight up hits the bottom face, distance 4 and area 4.
    assert box.pdf_value(origin, Vector3(0, 1, 0)) > 0.0
    assert box.pdf_value(origin, Vector3(0, -1, 0)) == 0.0
    for _ in range(100):
        direction = box.random(origin, rng)
        assert direction != Vector3(1, 0, 0)
        assert box.hit(Ray(origin, direction), 0.001, INF) is not None


def test_moving_sphere_is_sampleable_as_light(rng):
    sphere = MovingSphere(Vector3(0, 5, 0), Vector3(2, 5, 0), 0.0, 1.0, 1.0, GRAY)
    origin = Vector3(0, 0, 0)
    still = Sphere(Vector3(1, 5, 0), 1.0, GRAY)
    assert sphere.pdf_value(origin, Vector3(1, 5, 0)) == pytest.approx(
        still.pdf_value(origin, Vector3(1, 5, 0)))
    for _ in range(100):
        direction = sphere.random(origin, rng)
        assert sphere.pdf_value(origin, direction) > 0.0
