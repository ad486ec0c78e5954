"""Triangles, intersected with the Möller–Trumbore test."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .bounding_box import BoundingBox
from .material import Material
from .ray import Ray
from .shape import Intersection, Shape
from .vector3 import Vector3

_EPSILON = 1e-8
_BOX_PADDING = 1e-4


@dataclass
class Triangle(Shape):
    """A triangle with optional per-vertex UV coordinates."""

    v0: Vector3
    v1: Vector3
    v2: Vector3
    material: Material = field(default_factory=Material)
    uv0: Vector3 = field(default_factory=lambda: Vector3(0.0, 0.0, 0.0))
    uv1: Vector3 = field(default_factory=lambda: Vector3(1.0, 0.0, 0.0))
    uv2: Vector3 = field(default_factory=lambda: Vector3(0.0, 1.0, 0.0))

    def intersect(self, ray: Ray) -> Optional[Intersection]:
        """Hit with the normal facing the ray; ``u``/``v`` are barycentric coordinates."""
        edge1 = self.v1 - self.v0
        edge2 = self.v2 - self.v0
        h = ray.direction.cross(edge2)
        a = edge1.dot(h)
        if abs(a) < _EPSILON:
            return None

        f = 1.0 / a
        s = ray.origin - self.v0
        u = f * s.dot(h)
        if u < 0.0 or u > 1.0:
            return None

        q = s.cross(edge1)
        v = f * ray.direction.dot(q)
        if v < 0.0 or u + v > 1.0:
            return None

        t = f * edge2.dot(q)
        if t <= _EPSILON:
            return None

        normal = edge1.cross(edge2).normalise()
        if ray.direction.dot(normal) > 0:
            normal = -normal
        return Intersection(ray.origin + ray.direction * t, normal, self.material, t, u, v)

    def bounding_box(self) -> BoundingBox:
        """The tight box around the vertices, padded so it is never flat."""
        vertices = (self.v0, self.v1, self.v2)
        pad = Vector3(_BOX_PADDING, _BOX_PADDING, _BOX_PADDING)
        lo = Vector3(*(min(axis) for axis in zip(*vertices)))
        hi = Vector3(*(max(axis) for axis in zip(*vertices)))
        return BoundingBox(lo - pad, hi + pad)