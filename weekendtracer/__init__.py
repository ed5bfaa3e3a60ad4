"""A small path tracer for scenes of spheres that writes PPM images."""

__version__ = "0.1.0"
__all__ = [
    "camera",
    "color",
    "hittable",
    "image",
    "main",
    "material",
    "ray",
    "render",
    "sphere",
    "thread_pool",
    "util",
    "vec3",
]