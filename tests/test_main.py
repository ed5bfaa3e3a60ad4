import pytest

from weekendtracer.main import build_camera, build_scene, main
from weekendtracer.material import Dielectric, Lambertian, Metal
from weekendtracer.util import seed
from weekendtracer.vec3 import Vec3


def test_camera_settings():
    cam = build_camera()
    assert cam.image_width == 400
    assert cam.samples_per_pixel == 100
    assert cam.max_depth == 50
    assert cam.pixel_color_scale == pytest.approx(1.0 / 100)


def test_scene_ground_sphere():
    seed(0)
    ground = build_scene().objs[0]
    assert ground.radius == 1000
    assert ground.center_at(0.0) == Vec3(0.0, -1000.0, 0.0)
    assert isinstance(ground.material, Lambertian)


def test_scene_large_spheres_last():
    seed(0)
    glass, diffuse, metal = build_scene().objs[-3:]
    assert [s.radius for s in (glass, diffuse, metal)] == [1.0, 1.0, 1.0]
    assert isinstance(glass.material, Dielectric)
    assert isinstance(diffuse.material, Lambertian)
    assert isinstance(metal.material, Metal)
    assert metal.center_at(0.0) == Vec3(4.0, 1.0, 0.0)


def test_small_spheres_respect_clearance():
    seed(5)
    small = build_scene().objs[1:-3]
    assert 0 < len(small) <= 22 * 22
    for sphere in small:
        assert sphere.radius == 0.2
        assert (sphere.center_at(0.0) - Vec3(4.0, 0.2, 0.0)).length() > 0.9


def test_only_diffuse_spheres_move_upward():
    seed(7)
    for sphere in build_scene().objs[1:-3]:
        rise = sphere.center_at(1.0).y - sphere.center_at(0.0).y
        if isinstance(sphere.material, Lambertian):
            assert 0.0 <= rise < 0.5
        else:
            assert rise == 0.0
            assert isinstance(sphere.material, (Metal, Dielectric))


def test_scene_is_reproducible_with_seed():
    seed(11)
    first = [s.center_at(1.0) for s in build_scene().objs]
    seed(11)
    second = [s.center_at(1.0) for s in build_scene().objs]
    assert first == second


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit):
        main(["--no-such-option"])