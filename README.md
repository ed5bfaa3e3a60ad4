# weekendtracer

A small path tracer for scenes made of spheres. Each sphere has a diffuse
(`Lambertian`), metal (`Metal`) or glass (`Dielectric`) material. The result is
written as a plain-text PPM (`P3`) image. The camera supports field of view and
depth of field. Spheres can move, which gives motion blur. The image is split
into chunks, and a pool of worker threads renders the chunks.

It needs only the Python standard library.

## Installation

```
pip install .
```

## Rendering the demo scene

```
weekendtracer > scene.ppm
```

This renders a 400-pixel-wide image of a ground sphere with three large spheres
on it. A field of small random spheres surrounds them, and many of the diffuse
ones move. Each pixel takes 100 samples, and rays bounce up to 50 times. The
image goes to standard output. The completion percentage is written to standard
error. The command uses one worker thread per CPU. It has no options besides
`--help`. The same render can be started from Python with
`weekendtracer.main.main()`.

Each run builds a different random scene unless the random stream is seeded
first (see below).

## Using it as a library

```python
import sys

from weekendtracer.camera import Camera, CameraParams
from weekendtracer.color import Color
from weekendtracer.hittable import HittableList
from weekendtracer.material import Dielectric, Lambertian, Metal
from weekendtracer.render import render
from weekendtracer.sphere import Sphere
from weekendtracer.vec3 import Vec3

params = CameraParams(
    image_width=160,
    samples_per_pixel=20,
    max_depth=20,
    lookfrom=Vec3(0.0, 0.0, 0.0),
    lookat=Vec3(0.0, 0.0, -1.0),
)
cam = Camera(params)

world = HittableList()
world.add(Sphere(Vec3(0.0, -100.5, -1.0), 100.0, Lambertian(Color(0.8, 0.8, 0.0))))
world.add(Sphere(Vec3(0.0, 0.0, -1.2), 0.5, Lambertian(Color(0.1, 0.2, 0.5))))
world.add(Sphere(Vec3(-1.0, 0.0, -1.0), 0.5, Dielectric(1.5)))
world.add(Sphere(Vec3(1.0, 0.0, -1.0), 0.5, Metal(Color(0.8, 0.6, 0.2), 1.0)))

render(cam, world, 4, sys.stdout)
```

Useful pieces:

- `CameraParams` sets the aspect ratio (16:9 by default), image width, samples
  per pixel, maximum bounce depth, vertical field of view, `lookfrom`, `lookat`,
  `vup`, `defocus_angle` and `focus_dist`. `Camera` derives the image height
  from the width and the aspect ratio.
- `Sphere(center, radius, material, center2=None)` is still when `center2` is
  not given. When it is, the sphere moves from `center` to `center2` over the
  ray time range 0 to 1.
- `Metal` caps its `fuzz` at 1. `Dielectric` takes a refraction index. Use
  `1.0 / 1.5` for an air bubble inside glass.
- `render(cam, scene, num_threads=None, out=None)` uses one thread per CPU when
  `num_threads` is `None`. It writes to standard output when `out` is `None`.
  If rendering a chunk raises an exception, the pool stops and `render`
  re-raises it.
- `weekendtracer.render.ray_color` and `render_chunk` trace single rays and
  single chunks. `weekendtracer.image.Image` holds the pixels, hands out chunks
  with `get()` and writes PPM with `write()`.
- `weekendtracer.thread_pool.ThreadPool` runs the tasks a `TaskGenerator`
  returns until `next()` returns `None`. It can be used as a context manager,
  and it joins its threads on exit.

The image is divided into a 16 × 9 grid of chunks, so the width must split
evenly into 16 columns and the height into 9 rows. The image must also be at
least 16 pixels wide and 9 high. Otherwise `Image` raises `ValueError`.

`weekendtracer.util.seed` seeds the random stream that the package uses. This
makes scene building and sampling repeatable.

## What it does not do

- Spheres are the only kind of shape. There are no triangles, meshes, textures
  or lights. The background is always a white-to-blue sky gradient.
- There is no scene file format. Scenes are built in Python, and the command
  only renders its built-in demo scene.
- Output is plain-text PPM only, and the command always writes to standard
  output.

## Running the tests

```
pip install .[test]
pytest
```