"""Blinn-Phong shading with hard shadows."""

from __future__ import annotations

from .color import Color
from .ray import Ray
from .scene import Scene
from .shape import Intersection
from .vector3 import Vector3

_AMBIENT_INTENSITY = 0.1
_SHADOW_BIAS = 1e-4


class BlinnPhongShader:
    """Shades hits in a scene as seen from a camera position."""

    def __init__(self, scene: Scene, camera_position: Vector3) -> None:
        self.scene = scene
        self.camera_position = camera_position

    def shade(self, hit: Intersection) -> Color:
        """Return the unclamped colour of a hit from ambient, diffuse and specular light."""
        material = hit.material
        diffuse_color = material.diffuse_color
        if material.texture is not None:
            diffuse_color = material.texture.color_at(hit.u, hit.v)

        view_dir = (self.camera_position - hit.point).normalise()
        normal = hit.normal.normalise()

        final = diffuse_color * material.kd * _AMBIENT_INTENSITY

        for light in self.scene.lights:
            to_light = light.position - hit.point
            light_dir = to_light.normalise()
            light_distance = to_light.length()
            if self.in_shadow(hit.point, light_dir, light_distance):
                continue

            diff = max(normal.dot(light_dir), 0.0)
            diffuse = diffuse_color * material.kd * diff

            half_dir = (light_dir + view_dir).normalise()
            spec_angle = max(normal.dot(half_dir), 0.0)
            spec = spec_angle ** material.specular_exponent
            specular = material.specular_color * material.ks * spec

            attenuation = 1.0 / (light_distance * light_distance + 1.0)
            final = final + (diffuse + specular) * light.intensity * attenuation

        return final

    def in_shadow(self, point: Vector3, light_dir: Vector3, light_distance: float) -> bool:
        """Whether something lies between ``point`` and a light ``light_distance`` away."""
        shadow_ray = Ray(point + light_dir * _SHADOW_BIAS, light_dir)
        hit = self.scene.intersect(shadow_ray)
        return hit is not None and hit.distance < light_distance