"""Spheres."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

from .bounding_box import BoundingBox
from .material import Material
from .ray import Ray
from .shape import Intersection, Shape
from .vector3 import Vector3

_MIN_DISTANCE = 1e-4


@dataclass
class Sphere(Shape):
    """A sphere given by centre and radius."""

    center: Vector3
    radius: float
    material: Material = field(default_factory=Material)

    def intersect(self, ray: Ray) -> Optional[Intersection]:
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        b = 2.0 * oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = b * b - 4 * a * c
        if discriminant < 0.0 or a == 0.0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        t0, t1 = sorted(((-b - sqrt_disc) / (2.0 * a), (-b + sqrt_disc) / (2.0 * a)))
        if t0 > _MIN_DISTANCE:
            t = t0
        elif t1 > _MIN_DISTANCE:
            t = t1
        else:
            return None

        point = ray.origin + ray.direction * t
        normal = (point - self.center).normalise()
        u = 0.5 + math.atan2(normal.z, normal.x) / (2.0 * math.pi)
        v = 0.5 - math.asin(max(-1.0, min(1.0, normal.y))) / math.pi
        return Intersection(point, normal, self.material, t, u, v)

    def bounding_box(self) -> BoundingBox:
        r = Vector3(self.radius, self.radius, self.radius)
        return BoundingBox(self.center - r, self.center + r)