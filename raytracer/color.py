"""RGB colour with floating-point channels."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union


@dataclass(frozen=True)
class Color:
    """An immutable linear RGB colour."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    def __add__(self, other: Color) -> Color:
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __mul__(self, other: Union[float, Color]) -> Color:
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b)
        return Color(self.r * other, self.g * other, self.b * other)

    def __rmul__(self, scalar: float) -> Color:
        return Color(self.r * scalar, self.g * scalar, self.b * scalar)

    def __truediv__(self, other: Union[float, Color]) -> Color:
        if isinstance(other, Color):
            return Color(self.r / other.r, self.g / other.g, self.b / other.b)
        return Color(self.r / other, self.g / other, self.b / other)

    def __iter__(self) -> Iterator[float]:
        yield self.r
        yield self.g
        yield self.b

    def clamp(self, min_val: float, max_val: float) -> Color:
        return Color(*(max(min_val, min(c, max_val)) for c in self))

    def gamma_correct(self, gamma: float) -> Color:
        """Apply gamma correction; negative channels become zero."""
        inv_gamma = 1.0 / gamma
        return Color(*(max(c, 0.0) ** inv_gamma for c in self))