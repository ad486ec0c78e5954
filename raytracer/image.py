"""In-memory RGB image with PPM output."""

from __future__ import annotations

import os
from typing import Union

from .color import Color


class Image:
    """A width-by-height grid of colours, initially black."""

    def __init__(self, width: int = 0, height: int = 0) -> None:
        self.width = width
        self.height = height
        self._pixels = [Color()] * (width * height)

    def _contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        """Set a pixel; coordinates outside the image are ignored."""
        if self._contains(x, y):
            self._pixels[y * self.width + x] = color

    def get_pixel(self, x: int, y: int) -> Color:
        """Return a pixel, or black for coordinates outside the image."""
        if self._contains(x, y):
            return self._pixels[y * self.width + x]
        return Color()

    def save_ppm(self, path: Union[str, os.PathLike]) -> None:
        """Write the image as plain-text PPM (P3); raises OSError on failure."""
        with open(path, "w", encoding="ascii") as fh:
            fh.write(f"P3\n{self.width} {self.height}\n255\n")
            for c in self._pixels:
                fh.write(f"{int(255.99 * c.r)} {int(255.99 * c.g)} {int(255.99 * c.b)}\n")