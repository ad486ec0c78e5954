"""Bounding volume hierarchy over shapes."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .bounding_box import BoundingBox
from .ray import Ray
from .shape import Intersection, Shape
from .vector3 import Vector3

_BOX_T_MIN = 0.001


def _widest_axis(extent: Vector3) -> int:
    if extent.x >= extent.y and extent.x >= extent.z:
        return 0
    if extent.y >= extent.x and extent.y >= extent.z:
        return 1
    return 2


@dataclass
class BVHNode:
    """A node of the hierarchy: a leaf holds one shape, an inner node two children."""

    box: BoundingBox
    left: Optional[BVHNode] = None
    right: Optional[BVHNode] = None
    shape: Optional[Shape] = None

    @classmethod
    def build(cls, shapes: Iterable[Shape]) -> BVHNode:
        """Build a tree over ``shapes``, splitting along the widest axis at the median."""
        items = list(shapes)
        if not items:
            raise ValueError("cannot build a BVH from no shapes")
        return cls._build(items)

    @classmethod
    def _build(cls, shapes: List[Shape]) -> BVHNode:
        box = BoundingBox.empty()
        for shape in shapes:
            box.expand(shape.bounding_box())

        if len(shapes) == 1:
            return cls(box, shape=shapes[0])

        axis = _widest_axis(box.max_point - box.min_point)
        ordered = sorted(shapes, key=lambda s: s.bounding_box().min_point[axis])
        mid = len(ordered) // 2
        return cls(box, left=cls._build(ordered[:mid]), right=cls._build(ordered[mid:]))

    def intersect(self, ray: Ray, max_distance: float = math.inf) -> Optional[Intersection]:
        """Return the nearest hit closer than ``max_distance``, or None."""
        if not self.box.intersect(ray, _BOX_T_MIN, max_distance):
            return None

        if self.shape is not None:
            hit = self.shape.intersect(ray)
            if hit is not None and hit.distance < max_distance:
                return hit
            return None

        best: Optional[Intersection] = None
        for child in (self.left, self.right):
            if child is None:
                continue
            hit = child.intersect(ray, max_distance)
            if hit is not None:
                best = hit
                max_distance = hit.distance
        return best