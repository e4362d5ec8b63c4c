# main.py
import argparse
import logging
import random
import sys
from typing import List, Optional
import numpy as np
from PIL import Image
from core.errors import RaytracerError
from core.vector import Vector3
from camera.camera import Camera
from geometry.sphere import Sphere, MovingSphere
from geometry.world import HittableList
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.dielectric import Dielectric
from materials.diffuse_light import DiffuseLight
from materials.textures import CheckerTexture
from renderer.raytracer import DEFAULT_THREADS, Renderer

# Named quality levels; command line flags override individual values.
QUALITY_PRESETS = {
    "preview": {"samples": 4, "bounces": 8, "scale": 0.25},
    "balanced": {"samples": 32, "bounces": 20, "scale": 0.5},
    "final": {"samples": 100, "bounces": 50, "scale": 1.0},
}

IMAGE_WIDTH = 1200
IMAGE_HEIGHT = 800
TIME0 = 0.0
TIME1 = 1.0

def random_spheres_scene() -> HittableList:
    """Ground, a grid of small random spheres and three large ones."""
    world = HittableList()

    ground = Lambertian(CheckerTexture(Vector3(0.2, 0.3, 0.1), Vector3(0.9, 0.9, 0.9)))
    world.add(Sphere(Vector3(0, -1000, 0), 1000, ground))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = random.random()
            center = Vector3(a + 0.9 * random.random(), 0.2, b + 0.9 * random.random())

            if (center - Vector3(4, 0.2, 0)).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                albedo = Vector3.random() * Vector3.random()
                center1 = center + Vector3(0, random.random() / 4.0, 0)
                world.add(MovingSphere(center, center1, TIME0, TIME1, 0.2, Lambertian(albedo)))
            elif choose_mat < 0.95:
                albedo = Vector3.random(0.5, 1.0)
                fuzz = random.uniform(0.0, 0.5)
                world.add(Sphere(center, 0.2, Metal(albedo, fuzz)))
            else:
                world.add(Sphere(center, 0.2, Dielectric(1.5)))

    world.add(Sphere(Vector3(0, 1, 0), 1.0, Dielectric(1.5)))
    world.add(Sphere(Vector3(-4, 1, 0), 1.0, Lambertian(Vector3(0.4, 0.2, 0.1))))
    world.add(Sphere(Vector3(4, 1, 0), 1.0, Metal(Vector3(0.7, 0.6, 0.5), 0.0)))
    return world

def simple_scene() -> HittableList:
    """A unit sphere resting above a large ground sphere."""
    world = HittableList()
    world.add(Sphere(Vector3(0, -100.5, 0), 100, Lambertian(Vector3(0.8, 0.8, 0.0))))
    world.add(Sphere(Vector3(0, 0, 0), 1.0, Lambertian(Vector3(0.1, 0.2, 0.5))))
    return world

def lit_scene() -> HittableList:
    """The simple scene with a glowing sphere hanging above it."""
    world = simple_scene()
    world.add(Sphere(Vector3(0, 3, 0), 0.75, DiffuseLight(Vector3(6, 5, 4))))
    return world

SCENES = {
    "random-spheres": random_spheres_scene,
    "simple": simple_scene,
    "lit": lit_scene,
}

def default_camera(aspect_ratio: float, aperture: float = 0.0) -> Camera:
    return Camera(
        look_from=Vector3(13, 2, 3),
        look_at=Vector3(0, 0, 0),
        vup=Vector3(0, 1, 0),
        vfov=20.0,
        aspect_ratio=aspect_ratio,
        aperture=aperture,
        focus_dist=10.0,
        time0=TIME0,
        time1=TIME1,
    )

def save_png(pixels: np.ndarray, path: str):
    Image.fromarray(pixels).save(path, format="PNG")

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render a scene with a CPU path tracer.")
    parser.add_argument("-o", "--output", default="render.png", help="output PNG path")
    parser.add_argument("--scene", choices=sorted(SCENES), default="random-spheres")
    parser.add_argument("--quality", choices=sorted(QUALITY_PRESETS), default="final")
    parser.add_argument("--width", type=int, help="image width (default: preset-scaled 1200)")
    parser.add_argument("--height", type=int, help="image height (default: preset-scaled 800)")
    parser.add_argument("--samples", type=int, help="samples per pixel")
    parser.add_argument("--max-depth", type=int, help="maximum number of bounces")
    parser.add_argument("--threads", type=int, default=DEFAULT_THREADS)
    parser.add_argument("--aperture", type=float, default=0.0)
    parser.add_argument("--seed", type=int, help="seed for scene generation")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    quality = QUALITY_PRESETS[args.quality]
    width = args.width if args.width is not None else max(1, int(IMAGE_WIDTH * quality["scale"]))
    height = args.height if args.height is not None else max(1, int(IMAGE_HEIGHT * quality["scale"]))
    samples = args.samples if args.samples is not None else quality["samples"]
    max_depth = args.max_depth if args.max_depth is not None else quality["bounces"]

    if args.seed is not None:
        random.seed(args.seed)

    try:
        print(f"\n=== Creating World ({args.scene}) ===")
        world = SCENES[args.scene]()
        print(f"Building BVH for {len(world)} objects...")
        bvh = world.build_bvh(TIME0, TIME1)
        print(f"BVH built: {bvh.node_count()} nodes, depth {bvh.depth()}")

        renderer = Renderer(width, height, samples, max_depth, args.threads)
        camera = default_camera(width / height, args.aperture)
        pixels = renderer.render(bvh, camera)
        save_png(pixels, args.output)
    except (RaytracerError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Saved {width}x{height} image to {args.output}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
