"""RGB pixel values of an image."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PixelRGB:
    """A pixel with red, green and blue channels."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    def _combine(self, other: PixelRGB | float, op) -> PixelRGB:
        if isinstance(other, PixelRGB):
            return PixelRGB(op(self.r, other.r), op(self.g, other.g), op(self.b, other.b))
        if isinstance(other, (int, float)):
            return PixelRGB(op(self.r, other), op(self.g, other), op(self.b, other))
        return NotImplemented

    def __add__(self, other: PixelRGB | float) -> PixelRGB:
        return self._combine(other, lambda a, b: a + b)

    def __sub__(self, other: PixelRGB | float) -> PixelRGB:
        return self._combine(other, lambda a, b: a - b)

    def __mul__(self, other: PixelRGB | float) -> PixelRGB:
        return self._combine(other, lambda a, b: a * b)

    def __rmul__(self, other: float) -> PixelRGB:
        if not isinstance(other, (int, float)):
            return NotImplemented
        return self * other

    def __truediv__(self, other: PixelRGB | float) -> PixelRGB:
        return self._combine(other, lambda a, b: a / b)

    def __str__(self) -> str:
        return f"[{self.r:g}, {self.g:g}, {self.b:g}]"