import pytest

from raytracer.material import Material
from raytracer.ray import Ray
from raytracer.triangle import Triangle
from raytracer.vector3 import Vector3


@pytest.fixture
def triangle():
    return Triangle(Vector3(0, 0, 0), Vector3(1, 0, 0), Vector3(0, 1, 0), Material())


def test_ray_hits_triangle(triangle):
    ray = Ray(Vector3(0.25, 0.25, -1), Vector3(0, 0, 1))
    hit = triangle.intersect(ray)
    assert hit is not None
    assert hit.distance > 0


def test_ray_misses_triangle(triangle):
    ray = Ray(Vector3(-1, -1, -1), Vector3(0, 0, 1))
    assert triangle.intersect(ray) is None


def test_hit_details(triangle):
    ray = Ray(Vector3(0.25, 0.25, -1), Vector3(0, 0, 1))
    hit = triangle.intersect(ray)
    assert hit.distance == pytest.approx(1.0)
    assert hit.point == Vector3(0.25, 0.25, 0)
    assert hit.u == pytest.approx(0.25)
    assert hit.v == pytest.approx(0.25)
    assert hit.material is triangle.material


def test_normal_faces_the_ray(triangle):
    for origin, direction in (
        (Vector3(0.2, 0.2, -1), Vector3(0, 0, 1)),
        (Vector3(0.2, 0.2, 1), Vector3(0, 0, -1)),
    ):
        ray = Ray(origin, direction)
        hit = triangle.intersect(ray)
        assert hit.normal.dot(ray.direction) < 0
        assert hit.normal.length() == pytest.approx(1.0)


def test_parallel_ray_misses(triangle):
    assert triangle.intersect(Ray(Vector3(0.2, 0.2, 0), Vector3(1, 0, 0))) is None


def test_triangle_behind_ray_misses(triangle):
    assert triangle.intersect(Ray(Vector3(0.25, 0.25, 1), Vector3(0, 0, 1))) is None


def test_default_uvs():
    tri = Triangle(Vector3(0, 0, 0), Vector3(1, 0, 0), Vector3(0, 1, 0))
    assert (tri.uv0, tri.uv1, tri.uv2) == (Vector3(0, 0, 0), Vector3(1, 0, 0), Vector3(0, 1, 0))


def test_bounding_box_is_padded(triangle):
    box = triangle.bounding_box()
    assert box.min_point == Vector3(-1e-4, -1e-4, -1e-4)
    assert box.max_point == Vector3(1 + 1e-4, 1 + 1e-4, 1e-4)