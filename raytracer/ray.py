"""Rays with a normalised direction."""

from __future__ import annotations

from dataclasses import dataclass

from .vector3 import Vector3


@dataclass(frozen=True)
class Ray:
    """A half-line; the direction is normalised on creation."""

    origin: Vector3
    direction: Vector3

    def __post_init__(self) -> None:
        object.__setattr__(self, "direction", self.direction.normalise())

    def at(self, t: float) -> Vector3:
        """Return the point at distance ``t`` along the ray."""
        return self.origin + self.direction * t