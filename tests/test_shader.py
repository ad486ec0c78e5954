import math

import pytest

from raytracer.camera import Camera
from raytracer.color import Color
from raytracer.material import Material
from raytracer.plane import Plane
from raytracer.ray import Ray
from raytracer.scene import Light, Scene
from raytracer.shader import BlinnPhongShader
from raytracer.shape import Intersection
from raytracer.sphere import Sphere
from raytracer.texture import CheckerboardTexture
from raytracer.vector3 import Vector3

LIGHT_POSITION = Vector3(5, 10, 5)


@pytest.fixture
def shadow_scene():
    scene = Scene()
    scene.camera = Camera.looking_at(
        Vector3(0, 5, 10), Vector3(0, 0, 0), Vector3(0, 1, 0), 45.0, 800, 600, 1.0
    )
    scene.add_light(Light(LIGHT_POSITION, Color(1, 1, 1)))
    sphere_material = Material(
        diffuse_color=Color(1, 0, 0), kd=0.8, ks=0.2, specular_exponent=50
    )
    scene.add_object(Sphere(Vector3(0, 0, 0), 2.0, sphere_material))
    plane_material = Material(diffuse_color=Color(0.5, 0.5, 0.5), kd=0.8)
    scene.add_object(Plane(Vector3(0, -2, 0), Vector3(0, 1, 0), plane_material))
    scene.build_bvh()
    return scene


def test_shadow_case_colour_stays_dim(shadow_scene):
    hit = shadow_scene.intersect(Ray(Vector3(0, -1.9, 0), Vector3(0, 1, 0)))
    assert hit is not None
    shader = BlinnPhongShader(shadow_scene, shadow_scene.camera.position)
    shaded = shader.shade(hit)
    assert shaded.r < 0.5
    assert shaded.g < 0.5
    assert shaded.b < 0.5


def test_point_under_sphere_is_in_shadow(shadow_scene):
    shader = BlinnPhongShader(shadow_scene, shadow_scene.camera.position)
    point = Vector3(0, -2, 0)
    to_light = LIGHT_POSITION - point
    assert shader.in_shadow(point, to_light.normalise(), to_light.length()) is True


def test_distant_point_is_lit(shadow_scene):
    shader = BlinnPhongShader(shadow_scene, shadow_scene.camera.position)
    point = Vector3(20, -2, 0)
    to_light = LIGHT_POSITION - point
    assert shader.in_shadow(point, to_light.normalise(), to_light.length()) is False


def test_shadowed_plane_gets_only_ambient(shadow_scene):
    hit = shadow_scene.intersect(Ray(Vector3(0, 0, 0), Vector3(0, -1, 0)))
    assert hit is not None
    # The ray from the centre exits the sphere first; look below it instead.
    plane_hit = shadow_scene.intersect(Ray(Vector3(0, -1.99, 0), Vector3(0, -1, 0)))
    assert plane_hit is not None
    assert plane_hit.point == Vector3(0, -2, 0)
    shader = BlinnPhongShader(shadow_scene, shadow_scene.camera.position)
    shaded = shader.shade(plane_hit)
    for channel in shaded:
        assert math.isclose(channel, 0.04, rel_tol=1e-6)


def test_lit_surface_is_brighter_than_ambient(shadow_scene):
    shader = BlinnPhongShader(shadow_scene, shadow_scene.camera.position)
    hit = Intersection(
        Vector3(20, -2, 0), Vector3(0, 1, 0), Material(diffuse_color=Color(0.5, 0.5, 0.5), kd=0.8), 1.0
    )
    shaded = shader.shade(hit)
    assert shaded.r > 0.04
    assert shaded.r == pytest.approx(shaded.g)


def test_texture_replaces_diffuse_colour():
    scene = Scene()
    shader = BlinnPhongShader(scene, Vector3(0, 0, 5))
    material = Material(
        diffuse_color=Color(0, 0, 1),
        texture=CheckerboardTexture(Color(1, 1, 1), Color(0, 0, 0)),
    )
    hit = Intersection(Vector3(0, 0, 0), Vector3(0, 0, 1), material, 5.0, 0.25, 0.25)
    shaded = shader.shade(hit)
    assert shaded.r == pytest.approx(0.1)
    assert shaded.g == pytest.approx(0.1)
    assert shaded.b == pytest.approx(0.1)


def test_empty_scene_casts_no_shadow():
    shader = BlinnPhongShader(Scene(), Vector3(0, 0, 0))
    assert shader.in_shadow(Vector3(0, 0, 0), Vector3(0, 1, 0), 10.0) is False