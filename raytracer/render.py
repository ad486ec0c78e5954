"""The ray tracer: renders a scene into an image."""

from __future__ import annotations

import math
import os
import time
from typing import Union

from .color import Color
from .image import Image
from .ray import Ray
from .scene import Scene
from .shader import BlinnPhongShader

_BASE_EV = 1.2
_RAY_OFFSET = 1e-4
_HIT_COLOR = Color(1.0, 0.0, 0.0)


class Raytracer:
    """Traces camera rays through a scene and keeps the resulting image."""

    def __init__(self, width: int = 0, height: int = 0) -> None:
        self.image = Image(width, height)

    def render(self, scene: Scene, output_path: Union[str, os.PathLike]) -> None:
        """Render ``scene`` and save it as PPM; raises OSError if it cannot be saved."""
        camera = scene.camera
        width, height = camera.width, camera.height
        self.image = Image(width, height)
        binary = scene.render_mode == "binary"
        shader = BlinnPhongShader(scene, camera.position)
        exposure_scale = 2.0 ** (camera.exposure + _BASE_EV)
        start = time.perf_counter()

        for y in range(height):
            for x in range(width):
                color = self.trace(camera.generate_ray(float(x), float(y)), scene, shader, 0)
                if not binary:
                    color = (color * exposure_scale).clamp(0.0, 1.0)
                self.image.set_pixel(x, y, color)

            if y % 100 == 0 or y == height - 1:
                elapsed = time.perf_counter() - start
                progress = y / height * 100.0
                print(
                    f"\rRendering Progress: {progress}% | Elapsed Time: {elapsed}s",
                    end="",
                    flush=True,
                )
        print()

        self.image.save_ppm(output_path)
        print(f"Rendering completed. Image saved to {output_path}")

    def trace(
        self, ray: Ray, scene: Scene, shader: BlinnPhongShader, depth: int = 0
    ) -> Color:
        """Return the colour seen along ``ray``, following reflections and refractions."""
        if scene.render_mode == "binary":
            return _HIT_COLOR if scene.intersect(ray) is not None else scene.background_color

        if depth >= scene.nbounces:
            return Color()

        hit = scene.intersect(ray)
        if hit is None:
            return scene.background_color

        material = hit.material
        accumulated = shader.shade(hit)

        if material.is_reflective and material.reflectivity > 0.0:
            reflected_dir = ray.direction.reflect(hit.normal).normalise()
            reflected_ray = Ray(hit.point + hit.normal * _RAY_OFFSET, reflected_dir)
            reflected = self.trace(reflected_ray, scene, shader, depth + 1)
            r = material.reflectivity
            accumulated = accumulated * (1.0 - r) + reflected * r

        if material.is_refractive:
            transmission = 1.0 - material.reflectivity
            if transmission > 0.0:
                normal = hit.normal
                cosi = normal.dot(ray.direction)
                etai, etat = 1.0, material.refractive_index
                if cosi > 0:
                    etai, etat = etat, etai
                    normal = -normal
                eta_ratio = etai / etat
                k = 1 - eta_ratio * eta_ratio * (1 - cosi * cosi)
                if k < 0:
                    refracted_dir = ray.direction.reflect(normal)
                else:
                    refracted_dir = ray.direction * eta_ratio + normal * (
                        eta_ratio * cosi - math.sqrt(k)
                    )
                refracted_ray = Ray(hit.point - normal * _RAY_OFFSET, refracted_dir.normalise())
                refracted = self.trace(refracted_ray, scene, shader, depth + 1)
                accumulated = accumulated * (1.0 - transmission) + refracted * transmission

        return accumulated

    def pixel_color(self, x: int, y: int) -> Color:
        """Colour of a rendered pixel; black outside the image."""
        return self.image.get_pixel(x, y)