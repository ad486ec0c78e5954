"""Axis-aligned bounding boxes."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Union

from .ray import Ray
from .vector3 import Vector3


@dataclass
class BoundingBox:
    """An axis-aligned box given by its minimum and maximum corners."""

    min_point: Vector3
    max_point: Vector3

    @classmethod
    def empty(cls) -> BoundingBox:
        """A box that contains nothing and grows to fit whatever is added."""
        big = sys.float_info.max
        return cls(Vector3(big, big, big), Vector3(-big, -big, -big))

    def intersect(self, ray: Ray, t_min: float, t_max: float) -> bool:
        """Slab test: whether the ray meets the box between ``t_min`` and ``t_max``."""
        for axis in range(3):
            d = ray.direction[axis]
            inv_d = 1.0 / d if d != 0.0 else math.copysign(math.inf, d)
            t0 = (self.min_point[axis] - ray.origin[axis]) * inv_d
            t1 = (self.max_point[axis] - ray.origin[axis]) * inv_d
            if inv_d < 0.0:
                t0, t1 = t1, t0
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max < t_min:
                return False
        return True

    def expand(self, item: Union[BoundingBox, Vector3]) -> None:
        """Grow the box to contain another box or a point."""
        if isinstance(item, BoundingBox):
            lo, hi = item.min_point, item.max_point
        elif isinstance(item, Vector3):
            lo = hi = item
        else:
            raise TypeError(f"cannot expand a bounding box by {type(item).__name__}")
        self.min_point = Vector3.minimum(self.min_point, lo)
        self.max_point = Vector3.maximum(self.max_point, hi)