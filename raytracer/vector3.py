"""Three-component vector used for points, directions and normals."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

_EQUALITY_TOLERANCE = 1e-5


@dataclass(frozen=True, eq=False)
class Vector3:
    """An immutable 3D vector whose equality allows a small tolerance."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Union[float, Vector3]) -> Vector3:
        if isinstance(other, Vector3):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        return Vector3(self.x * other, self.y * other, self.z * other)

    def __rmul__(self, scalar: float) -> Vector3:
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __truediv__(self, scalar: float) -> Vector3:
        if scalar == 0.0:
            raise ZeroDivisionError("division of Vector3 by zero")
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __getitem__(self, index: int) -> float:
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        if index == 2:
            return self.z
        raise IndexError("index out of range for Vector3")

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return all(abs(a - b) < _EQUALITY_TOLERANCE for a, b in zip(self, other))

    def __str__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def normalise(self) -> Vector3:
        """Return the unit vector; the zero vector stays zero."""
        length = self.length()
        if length == 0.0:
            return Vector3()
        return self / length

    def clamp(self, min_val: float, max_val: float) -> Vector3:
        return Vector3(*(max(min_val, min(c, max_val)) for c in self))

    def reflect(self, normal: Vector3) -> Vector3:
        return self - normal * (2.0 * self.dot(normal))

    def refract(self, normal: Vector3, eta: float) -> Vector3:
        """Refract by Snell's law; total internal reflection gives the zero vector."""
        cosi = max(-1.0, min(1.0, self.dot(normal)))
        etai, etat = 1.0, eta
        n = normal
        if cosi < 0:
            cosi = -cosi
        else:
            etai, etat = etat, etai
            n = -normal
        eta_ratio = etai / etat
        k = 1.0 - eta_ratio * eta_ratio * (1.0 - cosi * cosi)
        if k < 0:
            return Vector3()
        return self * eta_ratio + n * (eta_ratio * cosi - math.sqrt(k))

    @staticmethod
    def minimum(a: Vector3, b: Vector3) -> Vector3:
        return Vector3(min(a.x, b.x), min(a.y, b.y), min(a.z, b.z))

    @staticmethod
    def maximum(a: Vector3, b: Vector3) -> Vector3:
        return Vector3(max(a.x, b.x), max(a.y, b.y), max(a.z, b.z))