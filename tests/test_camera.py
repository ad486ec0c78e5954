import math

import pytest

from raytracer.camera import Camera
from raytracer.vector3 import Vector3


def make_camera(width, height):
    return Camera.looking_at(
        Vector3(0, 0, 0), Vector3(0, 0, -1), Vector3(0, 1, 0), 90.0, width, height, 0.1
    )


def test_camera_initialisation():
    position = Vector3(0, 0, 0)
    look_at = Vector3(0, 0, -1)
    up = Vector3(0, 1, 0)
    camera = Camera.looking_at(position, look_at, up, 90.0, 1200, 800, 0.1)

    assert camera.position == position
    assert camera.forward == (look_at - position).normalise()
    assert camera.right == camera.forward.cross(up).normalise()
    assert camera.up == camera.right.cross(camera.forward).normalise()
    assert camera.exposure == 0.1
    assert camera.fov == pytest.approx(math.pi / 2)
    assert camera.aspect_ratio == pytest.approx(1200 / 800)


def test_generate_ray_centre_pixel():
    camera = make_camera(3, 3)
    ray = camera.generate_ray(float(3 // 2), float(3 // 2))
    assert ray.origin == Vector3(0, 0, 0)
    assert ray.direction == camera.forward


def test_generate_ray_corner_pixel():
    camera = make_camera(4, 4)
    ray = camera.generate_ray(0.0, 0.0)
    assert ray.origin == Vector3(0, 0, 0)
    assert ray.direction == Vector3(0.75, 0.75, -1.0).normalise()


def test_default_camera():
    camera = Camera()
    assert camera.forward == Vector3(0, 0, -1)
    assert camera.right == Vector3(1, 0, 0)
    assert (camera.width, camera.height) == (800, 600)
    assert camera.fov == 45.0


def test_set_resolution_updates_aspect_ratio_and_basis():
    camera = make_camera(4, 4)
    camera.set_resolution(400, 200)
    assert (camera.width, camera.height) == (400, 200)
    assert camera.aspect_ratio == pytest.approx(400 / 200)
    assert camera.right.length() == pytest.approx(1.0)
    assert camera.up.dot(camera.forward) == pytest.approx(0.0, abs=1e-9)