"""Surface material parameters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .color import Color
from .texture import Texture


@dataclass
class Material:
    """Shading coefficients, colours and optical flags of a surface."""

    ks: float = 0.0
    kd: float = 1.0
    specular_exponent: float = 1.0
    ambient: Color = Color(0.1, 0.1, 0.1)
    diffuse_color: Color = Color(1.0, 1.0, 1.0)
    specular_color: Color = Color(1.0, 1.0, 1.0)
    is_reflective: bool = False
    reflectivity: float = 0.0
    is_refractive: bool = False
    refractive_index: float = 1.0
    texture: Optional[Texture] = None