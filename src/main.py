# main.py
import argparse
import logging
import sys
from PIL import Image
from core.vector import Vector3
from core.utils import make_rng, random_double, random_vector
from camera.camera import Camera
from geometry.world import HittableList
from geometry.sphere import Sphere, MovingSphere
from geometry.rect import XYRect, XZRect, YZRect
from geometry.box import Box
from geometry.transform import Translate, RotateY, FlipFace
from materials.material import NoMaterial
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.dielectric import Dielectric
from materials.presets import MetalPresets, DielectricPresets, LightPresets, ColorPresets, TexturePresets
from renderer.integrator import sky_gradient
from renderer.raytracer import Renderer
from renderer.tone_mapping import reinhard_tone_mapping, to_rgb8

logger = logging.getLogger("pathtracer")

QUALITY_LEVELS = {
    "preview": {"samples": 8, "bounces": 8, "width": 200},
    "balanced": {"samples": 64, "bounces": 25, "width": 400},
    "high_quality": {"samples": 500, "bounces": 50, "width": 600},
}

def create_random_spheres(aspect_ratio: float, rng):
    """
    Field of small random spheres around three large ones, lit by the sky.
    Diffuse spheres bounce vertically during the shutter interval.
    """
    world = HittableList()
    world.add(Sphere(Vector3(0, -1000, 0), 1000, Lambertian(TexturePresets.checkerboard())))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = random_double(rng)
            center = Vector3(a + 0.9 * random_double(rng), 0.2, b + 0.9 * random_double(rng))
            if (center - Vector3(4, 0.2, 0)).length() <= 0.9:
                continue
            if choose_mat < 0.8:
                albedo = random_vector(rng) * random_vector(rng)
                center1 = center + Vector3(0, random_double(rng, 0, 0.5), 0)
                world.add(MovingSphere(center, center1, 0.0, 1.0, 0.2, Lambertian(albedo)))
            elif choose_mat < 0.95:
                albedo = random_vector(rng, 0.5, 1.0)
                world.add(Sphere(center, 0.2, Metal(albedo, random_double(rng, 0, 0.5))))
            else:
                world.add(Sphere(center, 0.2, DielectricPresets.glass()))

    world.add(Sphere(Vector3(0, 1, 0), 1.0, Dielectric(1.5)))
    world.add(Sphere(Vector3(-4, 1, 0), 1.0, Lambertian(Vector3(0.4, 0.2, 0.1))))
    world.add(Sphere(Vector3(4, 1, 0), 1.0, Metal(Vector3(0.7, 0.6, 0.5), 0.0)))
    world.build_bvh(0.0, 1.0, rng)

    camera = Camera(
        position=Vector3(13, 2, 3),
        look_at=Vector3(0, 0, 0),
        vup=Vector3(0, 1, 0),
        fov=20.0,
        aspect_ratio=aspect_ratio,
        aperture=0.1,
        focus_dist=10.0,
        time0=0.0,
        time1=1.0,
    )
    return world, None, camera, sky_gradient

def create_two_spheres(aspect_ratio: float, rng):
    checker = Lambertian(TexturePresets.checkerboard())
    world = HittableList()
    world.add(Sphere(Vector3(0, -10, 0), 10, checker))
    world.add(Sphere(Vector3(0, 10, 0), 10, checker))
    camera = Camera(Vector3(13, 2, 3), Vector3(0, 0, 0), Vector3(0, 1, 0), 20.0, aspect_ratio)
    return world, None, camera, sky_gradient

def create_cornell_box(aspect_ratio: float, rng):
    """
    Cornell box with a ceiling light, a rotated metal block and a glass
    sphere. Both the light and the sphere are importance sampled.
    """
    red = ColorPresets.matte(ColorPresets.RED)
    white = ColorPresets.matte(ColorPresets.WHITE)
    green = ColorPresets.matte(ColorPresets.GREEN)
    light = LightPresets.white(15.0)

    world = HittableList()
    world.add(YZRect(0, 555, 0, 555, 555, green))
    world.add(YZRect(0, 555, 0, 555, 0, red))
    world.add(FlipFace(XZRect(213, 343, 227, 332, 554, light)))
    world.add(XZRect(0, 555, 0, 555, 555, white))
    world.add(XZRect(0, 555, 0, 555, 0, white))
    world.add(XYRect(0, 555, 0, 555, 555, white))

    block = Box(Vector3(0, 0, 0), Vector3(165, 330, 165), MetalPresets.aluminum())
    world.add(Translate(RotateY(block, 15), Vector3(265, 0, 295)))
    world.add(Sphere(Vector3(190, 90, 190), 90, DielectricPresets.glass()))
    world.build_bvh(0.0, 1.0, rng)

    lights = HittableList()
    lights.add(XZRect(213, 343, 227, 332, 554, NoMaterial()))
    lights.add(Sphere(Vector3(190, 90, 190), 90, NoMaterial()))

    camera = Camera(Vector3(278, 278, -800), Vector3(278, 278, 0), Vector3(0, 1, 0),
                    40.0, aspect_ratio, aperture=0.0, focus_dist=10.0)
    return world, lights, camera, Vector3(0, 0, 0)

def create_material_showcase(aspect_ratio: float, rng):
    """
    Row of preset materials on a checker floor: water, diamond, a mirror and
    brushed metal, lit by the sky.
    """
    world = HittableList()
    world.add(Sphere(Vector3(0, -1000, 0), 1000, Lambertian(TexturePresets.checkerboard())))
    world.add(Sphere(Vector3(-3, 1, 0), 1.0, DielectricPresets.named("water")))
    world.add(Sphere(Vector3(-1, 1, 0), 1.0, DielectricPresets.named("diamond")))
    world.add(Sphere(Vector3(1, 1, 0), 1.0, MetalPresets.mirror()))
    world.add(Sphere(Vector3(3, 1, 0), 1.0, MetalPresets.brushed_metal()))
    world.build_bvh(0.0, 1.0, rng)

    camera = Camera(Vector3(0, 3, 12), Vector3(0, 1, 0), Vector3(0, 1, 0), 30.0, aspect_ratio)
    return world, None, camera, sky_gradient

SCENES = {
    "random_spheres": (create_random_spheres, 16.0 / 9.0),
    "two_spheres": (create_two_spheres, 16.0 / 9.0),
    "cornell_box": (create_cornell_box, 1.0),
    "material_showcase": (create_material_showcase, 16.0 / 9.0),
}

TONE_MAPPERS = {
    "gamma": to_rgb8,
    "reinhard": reinhard_tone_mapping,
}

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Monte Carlo path tracer")
    parser.add_argument("--scene", choices=sorted(SCENES), default="cornell_box")
    parser.add_argument("--quality", choices=sorted(QUALITY_LEVELS), default="preview")
    parser.add_argument("--width", type=int, help="image width, overrides the quality level")
    parser.add_argument("--samples", type=int, help="samples per pixel, overrides the quality level")
    parser.add_argument("--depth", type=int, help="maximum bounces, overrides the quality level")
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--workers", type=int, default=None, help="worker processes (default: all CPUs)")
    parser.add_argument("--tone-map", choices=sorted(TONE_MAPPERS), default="gamma",
                        help="clamped gamma encoding or Reinhard compression of highlights")
    parser.add_argument("--output", default="render.png")
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(asctime)s] [%(processName)s] %(levelname)s %(name)s: %(message)s",
    )

    quality = QUALITY_LEVELS[args.quality]
    width = args.width or quality["width"]
    samples = args.samples or quality["samples"]
    depth = args.depth or quality["bounces"]

    create_scene, aspect_ratio = SCENES[args.scene]
    height = max(1, int(width / aspect_ratio))
    world, lights, camera, background = create_scene(aspect_ratio, make_rng(args.seed))
    logger.info("Rendering %s at %dx%d, %d spp, depth %d", args.scene, width, height, samples, depth)

    renderer = Renderer(width, height, N=samples, max_depth=depth, workers=args.workers)
    image = renderer.render_frame(camera, world, lights=lights, background=background, seed=args.seed)

    Image.fromarray(TONE_MAPPERS[args.tone_map](image)).save(args.output)
    logger.info("Wrote %s", args.output)
    return 0

if __name__ == "__main__":
    sys.exit(main())
