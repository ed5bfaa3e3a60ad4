import pytest

from weekendtracer.camera import Camera, CameraParams
from weekendtracer.util import seed
from weekendtracer.vec3 import Vec3, dot, normalize


def test_default_dimensions():
    cam = Camera()
    assert cam.image_width == 400
    assert cam.image_height == 225
    assert cam.samples_per_pixel == 10
    assert cam.max_depth == 10
    assert cam.pixel_color_scale == pytest.approx(1 / 10)


def test_image_height_is_at_least_one():
    cam = Camera(CameraParams(image_width=1))
    assert cam.image_height == 1


def test_pixel_color_scale_follows_samples():
    cam = Camera(CameraParams(samples_per_pixel=100))
    assert cam.pixel_color_scale == pytest.approx(1 / 100)


def test_pinhole_rays_start_at_lookfrom():
    seed(7)
    params = CameraParams(lookfrom=Vec3(1, 2, 3), lookat=Vec3(0, 0, 0))
    cam = Camera(params)
    for row, col in [(0, 0), (10, 20), (cam.image_height - 1, cam.image_width - 1)]:
        ray = cam.cast_ray_at_pixel_loc(row, col)
        assert ray.origin == params.lookfrom
        assert 0.0 <= ray.time < 1.0


def test_corner_rays_point_to_their_corners():
    seed(11)
    cam = Camera()
    upper_left = cam.cast_ray_at_pixel_loc(0, 0).direction
    assert upper_left.x < 0 and upper_left.y > 0 and upper_left.z < 0
    lower_right = cam.cast_ray_at_pixel_loc(cam.image_height - 1, cam.image_width - 1).direction
    assert lower_right.x > 0 and lower_right.y < 0 and lower_right.z < 0


@pytest.mark.parametrize("defocus_angle", [0.0, 0.6])
def test_rays_end_on_focus_plane(defocus_angle):
    seed(5)
    params = CameraParams(
        lookfrom=Vec3(13, 2, 3),
        lookat=Vec3(0, 1, 0),
        vfov=20.0,
        defocus_angle=defocus_angle,
        focus_dist=10.0,
    )
    cam = Camera(params)
    forward = normalize(params.lookat - params.lookfrom)
    for row, col in [(0, 0), (100, 200), (224, 399)]:
        ray = cam.cast_ray_at_pixel_loc(row, col)
        end = ray.origin + ray.direction
        assert dot(end - params.lookfrom, forward) == pytest.approx(params.focus_dist)


def test_defocus_origins_lie_on_lens_disk():
    seed(9)
    params = CameraParams(
        lookfrom=Vec3(13, 2, 3),
        lookat=Vec3(0, 1, 0),
        defocus_angle=0.6,
        focus_dist=10.0,
    )
    cam = Camera(params)
    forward = normalize(params.lookat - params.lookfrom)
    origins = [cam.cast_ray_at_pixel_loc(50, 50).origin for _ in range(20)]
    assert any(o != params.lookfrom for o in origins)
    for origin in origins:
        offset = origin - params.lookfrom
        assert dot(offset, forward) == pytest.approx(0.0, abs=1e-9)
        assert offset.length() < 0.1