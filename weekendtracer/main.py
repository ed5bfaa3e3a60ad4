"""Renders the final scene of random spheres to standard output as PPM."""

from __future__ import annotations

import argparse
import os
import sys

from .camera import Camera, CameraParams
from .color import Color
from .hittable import HittableList
from .material import Dielectric, Lambertian, Material, Metal
from .render import render
from .sphere import Sphere
from .util import random_double
from .vec3 import Vec3


def build_camera() -> Camera:
    """The camera that frames the scene from build_scene()."""
    return Camera(
        CameraParams(
            image_width=400,
            samples_per_pixel=100,
            max_depth=50,
            lookfrom=Vec3(13.0, 2.0, 3.0),
            lookat=Vec3(0.0, 1.0, 0.0),
            vfov=20.0,
            defocus_angle=0.6,
            focus_dist=10.0,
        )
    )


def build_scene() -> HittableList:
    """A ground plane, a grid of small random spheres and three large ones."""
    world = HittableList()
    world.add(Sphere(Vec3(0.0, -1000.0, 0.0), 1000, Lambertian(Color(0.5, 0.5, 0.5))))

    landmark = Vec3(4.0, 0.2, 0.0)
    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = random_double()
            center = Vec3(a + 0.9 * random_double(), 0.2, b + 0.9 * random_double())
            if (center - landmark).length() <= 0.9:
                continue

            material: Material
            center2 = None
            if choose_mat < 0.8:
                material = Lambertian(Color.random() * Color.random())
                center2 = center + Vec3(0.0, random_double(0.0, 0.5), 0.0)
            elif choose_mat < 0.95:
                albedo = Color.random(0.5, 1.0)
                material = Metal(albedo, random_double(0.0, 0.5))
            else:
                material = Dielectric(1.5)
            world.add(Sphere(center, 0.2, material, center2))

    world.add(Sphere(Vec3(0.0, 1.0, 0.0), 1.0, Dielectric(1.5)))
    world.add(Sphere(Vec3(-4.0, 1.0, 0.0), 1.0, Lambertian(Color(0.4, 0.2, 0.1))))
    world.add(Sphere(Vec3(4.0, 1.0, 0.0), 1.0, Metal(Color(0.7, 0.6, 0.5), 0.0)))
    return world


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weekendtracer",
        description="Render a scene of random spheres and write it to standard output as PPM.",
    )
    parser.parse_args(argv)
    render(build_camera(), build_scene(), os.cpu_count() or 1, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())