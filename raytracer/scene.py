"""Scenes: shapes, lights, camera and render settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .bvh import BVHNode
from .camera import Camera
from .color import Color
from .ray import Ray
from .shape import Intersection, Shape
from .vector3 import Vector3


@dataclass(frozen=True)
class Light:
    """A point light with a colour intensity."""

    position: Vector3
    intensity: Color


@dataclass
class Scene:
    """Everything to be rendered; ``build_bvh`` must run before rays can hit anything."""

    camera: Camera = field(default_factory=Camera)
    objects: List[Shape] = field(default_factory=list)
    lights: List[Light] = field(default_factory=list)
    background_color: Color = Color(0.25, 0.25, 0.25)
    render_mode: str = "binary"
    nbounces: int = 1
    _bvh_root: Optional[BVHNode] = field(default=None, init=False, repr=False, compare=False)

    def add_object(self, obj: Shape) -> None:
        self.objects.append(obj)

    def add_light(self, light: Light) -> None:
        self.lights.append(light)

    def build_bvh(self) -> None:
        """(Re)build the acceleration structure from the current objects."""
        self._bvh_root = BVHNode.build(self.objects) if self.objects else None

    def intersect(self, ray: Ray) -> Optional[Intersection]:
        """Return the nearest hit, or None; nothing is hit until the BVH is built."""
        if self._bvh_root is None:
            return None
        return self._bvh_root.intersect(ray)