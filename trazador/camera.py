"""Pinhole camera that lays a grid of pixels over its projection plane."""

from __future__ import annotations

from dataclasses import dataclass

from trazador.direction import Direction
from trazador.pixel import Pixel
from trazador.point3d import Point3D


def _shift(point: Point3D, offset: Direction) -> Point3D:
    return Point3D(point.x + offset.x, point.y + offset.y, point.z + offset.z)


@dataclass(frozen=True)
class Camera:
    """A camera at ``origin`` with up, left and forward vectors and a size in pixels.

    ``size`` is ``(width, height)``: the number of pixels along ``left`` and ``up``.
    """

    origin: Point3D
    up: Direction
    left: Direction
    forward: Direction
    size: tuple[int, int]

    def generate_pixels(self) -> list[Pixel]:
        """Pixels of the projection plane, row by row."""
        width, height = self.size
        if width <= 0 or height <= 0:
            return []
        corner = _shift(self.origin, self.forward + self.up + self.left)
        step_up = self.up / height
        step_left = self.left / width
        step = step_up + step_left
        pixels = []
        for j in range(height, 0, -1):
            for i in range(width, 0, -1):
                base = _shift(corner, Direction() - step_up * (2 * j) - step_left * (2 * i))
                pixels.append(Pixel(_shift(base, step), _shift(base, step * 2)))
        return pixels

    def __str__(self) -> str:
        width, height = self.size
        return (
            f"Camera: (Origin: {self.origin}, Up: {self.up}, Left: {self.left}, "
            f"Forward: {self.forward}, Size: {width}x{height})"
        )