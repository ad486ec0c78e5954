"""Base class for renderable shapes and the record of a ray hit."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from .bounding_box import BoundingBox
from .material import Material
from .ray import Ray
from .vector3 import Vector3


@dataclass
class Intersection:
    """Where a ray met a surface, with the surface's normal, material and UV."""

    point: Vector3
    normal: Vector3
    material: Material
    distance: float
    u: float = 0.0
    v: float = 0.0


class Shape(ABC):
    """A surface that rays can hit."""

    @abstractmethod
    def intersect(self, ray: Ray) -> Optional[Intersection]:
        """Return the nearest hit in front of the ray origin, or None."""

    @abstractmethod
    def bounding_box(self) -> BoundingBox:
        """Return an axis-aligned box that encloses the shape."""