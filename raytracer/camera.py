"""Pinhole camera that turns pixel coordinates into rays."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .ray import Ray
from .vector3 import Vector3


@dataclass
class Camera:
    """A camera with an orthonormal basis; ``fov`` is in radians when built by ``looking_at``."""

    position: Vector3 = field(default_factory=Vector3)
    look_at: Vector3 = field(default_factory=lambda: Vector3(0.0, 0.0, -1.0))
    forward: Vector3 = field(default_factory=lambda: Vector3(0.0, 0.0, -1.0))
    up: Vector3 = field(default_factory=lambda: Vector3(0.0, 1.0, 0.0))
    right: Vector3 = field(default_factory=lambda: Vector3(1.0, 0.0, 0.0))
    fov: float = 45.0
    aspect_ratio: float = 1.0
    exposure: float = 1.0
    width: int = 800
    height: int = 600

    @classmethod
    def looking_at(
        cls,
        position: Vector3,
        look_at: Vector3,
        up: Vector3,
        fov: float,
        width: int,
        height: int,
        exposure: float,
    ) -> Camera:
        """Build a camera at ``position`` aimed at ``look_at``; ``fov`` is given in degrees."""
        forward = (look_at - position).normalise()
        right = forward.cross(up).normalise()
        true_up = right.cross(forward).normalise()
        return cls(
            position=position,
            look_at=look_at,
            forward=forward,
            up=true_up,
            right=right,
            fov=fov * math.pi / 180.0,
            aspect_ratio=width / height,
            exposure=exposure,
            width=width,
            height=height,
        )

    def generate_ray(self, pixel_x: float, pixel_y: float) -> Ray:
        """Return the ray through the centre of the given pixel."""
        scale = math.tan(self.fov / 2.0)
        x = (-2 * (pixel_x + 0.5) / self.width + 1) * self.aspect_ratio * scale
        y = (1 - 2 * (pixel_y + 0.5) / self.height) * scale
        direction = (self.forward + self.right * x + self.up * y).normalise()
        return Ray(self.position, direction)

    def set_resolution(self, width: int, height: int) -> None:
        """Change the image size and recompute the aspect ratio and basis."""
        self.width = width
        self.height = height
        self.aspect_ratio = width / height
        self.right = self.forward.cross(self.up).normalise()
        self.up = self.right.cross(self.forward).normalise()