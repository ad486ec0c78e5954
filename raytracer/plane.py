"""Infinite planes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

from .bounding_box import BoundingBox
from .material import Material
from .ray import Ray
from .shape import Intersection, Shape
from .vector3 import Vector3


@dataclass
class Plane(Shape):
    """A plane through ``point``; the normal is normalised on creation."""

    point: Vector3
    normal: Vector3
    material: Material = field(default_factory=Material)

    def __post_init__(self) -> None:
        self.normal = self.normal.normalise()

    def intersect(self, ray: Ray) -> Optional[Intersection]:
        denom = self.normal.dot(ray.direction)
        if abs(denom) <= 1e-6:
            return None
        t = (self.point - ray.origin).dot(self.normal) / denom
        if t <= 0:
            return None
        return Intersection(ray.origin + ray.direction * t, self.normal, self.material, t)

    def bounding_box(self) -> BoundingBox:
        """An unbounded box: a plane extends without limit."""
        return BoundingBox(
            Vector3(-math.inf, -math.inf, -math.inf),
            Vector3(math.inf, math.inf, math.inf),
        )