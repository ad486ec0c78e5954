"""Capped cylinders."""

from __future__ import annotations

import math
import warnings
from typing import Optional, Tuple

from .bounding_box import BoundingBox
from .material import Material
from .ray import Ray
from .shape import Intersection, Shape
from .vector3 import Vector3

_MIN_DISTANCE = 1e-4
_PARALLEL_EPSILON = 1e-6


class Cylinder(Shape):
    """A cylinder with flat caps around ``center``.

    ``height`` as given is the half-height; the ``height`` attribute holds the
    full height, twice that value.
    """

    def __init__(
        self,
        center: Vector3,
        axis: Vector3,
        radius: float,
        height: float,
        material: Optional[Material] = None,
    ) -> None:
        self.center = center
        self.axis = axis.normalise()
        self.radius = radius
        self.height = height * 2.0
        self.material = material if material is not None else Material()
        if height <= 0.0:
            warnings.warn(
                "cylinder height must be positive; using 1.0", UserWarning, stacklevel=2
            )
            self.height = 2.0

    def __repr__(self) -> str:
        return (
            f"Cylinder(center={self.center}, axis={self.axis}, "
            f"radius={self.radius}, height={self.height})"
        )

    def _basis(self) -> Tuple[Vector3, Vector3]:
        """Two unit vectors perpendicular to the axis and to each other."""
        orthogonal = Vector3(1.0, 0.0, 0.0).cross(self.axis)
        if orthogonal.length_squared() < 1e-6:
            orthogonal = Vector3(0.0, 1.0, 0.0).cross(self.axis)
        orthogonal = orthogonal.normalise()
        tangent = self.axis.cross(orthogonal).normalise()
        return orthogonal, tangent

    def normal_at(self, point: Vector3) -> Vector3:
        """The outward normal of the side surface at ``point``."""
        projection = self.axis * (point - self.center).dot(self.axis)
        return (point - self.center - projection).normalise()

    def _side_hit(self, ray: Ray) -> Optional[Intersection]:
        axis = self.axis
        d = ray.direction
        oc = ray.origin - self.center
        d_axis = d.dot(axis)
        oc_axis = oc.dot(axis)
        a = d.dot(d) - d_axis * d_axis
        b = 2.0 * (d.dot(oc) - d_axis * oc_axis)
        c = oc.dot(oc) - oc_axis * oc_axis - self.radius * self.radius
        discriminant = b * b - 4.0 * a * c
        if discriminant < 0.0 or a == 0.0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        half = self.height * 0.5
        candidates = ((-b - sqrt_disc) / (2.0 * a), (-b + sqrt_disc) / (2.0 * a))
        valid = [
            t
            for t in candidates
            if t > _MIN_DISTANCE and -half <= (ray.at(t) - self.center).dot(axis) <= half
        ]
        if not valid:
            return None

        t = min(valid)
        point = ray.origin + d * t
        normal = self.normal_at(point)
        orthogonal, tangent = self._basis()
        theta = math.atan2(normal.dot(tangent), normal.dot(orthogonal))
        if theta < 0.0:
            theta += 2.0 * math.pi
        u = theta / (2.0 * math.pi)
        v = (point - self.center).dot(axis) / self.height + 0.5
        return Intersection(point, normal, self.material, t, u, v)

    def _cap_hit(
        self, ray: Ray, cap_center: Vector3, cap_normal: Vector3, limit: float
    ) -> Optional[Intersection]:
        denom = self.axis.dot(ray.direction)
        if abs(denom) <= _PARALLEL_EPSILON:
            return None
        t = (cap_center - ray.origin).dot(self.axis) / denom
        if not _MIN_DISTANCE < t < limit:
            return None
        point = ray.origin + ray.direction * t
        offset = point - cap_center
        if offset.dot(offset) > self.radius * self.radius:
            return None
        orthogonal, tangent = self._basis()
        u = (offset.dot(orthogonal) / self.radius) * 0.5 + 0.5
        v = (offset.dot(tangent) / self.radius) * 0.5 + 0.5
        return Intersection(point, cap_normal, self.material, t, u, v)

    def intersect(self, ray: Ray) -> Optional[Intersection]:
        best = self._side_hit(ray)
        if self.height > 0.0:
            half = self.height * 0.5
            caps = (
                (self.center + self.axis * half, self.axis),
                (self.center - self.axis * half, -self.axis),
            )
            for cap_center, cap_normal in caps:
                limit = best.distance if best is not None else math.inf
                hit = self._cap_hit(ray, cap_center, cap_normal, limit)
                if hit is not None:
                    best = hit
        return best

    def bounding_box(self) -> BoundingBox:
        half = self.height * 0.5
        top = self.center + self.axis * half
        bottom = self.center - self.axis * half
        orthogonal, tangent = self._basis()
        offsets = (
            orthogonal * self.radius,
            -orthogonal * self.radius,
            tangent * self.radius,
            -tangent * self.radius,
        )
        points = [end + offset for end in (top, bottom) for offset in offsets]
        lo = hi = points[0]
        for p in points[1:]:
            lo = Vector3.minimum(lo, p)
            hi = Vector3.maximum(hi, p)
        return BoundingBox(lo, hi)