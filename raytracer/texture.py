"""Surface textures addressed by UV coordinates."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

from .color import Color


class Texture(ABC):
    """A colour that varies over a surface."""

    @abstractmethod
    def color_at(self, u: float, v: float) -> Color:
        """Return the colour at texture coordinates ``(u, v)``."""


@dataclass(frozen=True)
class CheckerboardTexture(Texture):
    """Alternating squares of two colours; ``scale`` sets squares per unit."""

    color1: Color
    color2: Color
    scale: float = 1.0

    def color_at(self, u: float, v: float) -> Color:
        u -= math.floor(u)
        v -= math.floor(v)
        check_u = int(math.floor(u * self.scale)) % 2
        check_v = int(math.floor(v * self.scale)) % 2
        return self.color1 if (check_u + check_v) % 2 == 0 else self.color2