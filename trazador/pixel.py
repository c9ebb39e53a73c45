"""A pixel of the projection plane."""

from __future__ import annotations

from dataclasses import dataclass

from trazador.color import Color
from trazador.point3d import Point3D


@dataclass(frozen=True)
class Pixel:
    """A pixel given by its upper-left and lower-right corners and a colour."""

    up_left: Point3D
    down_right: Point3D
    color: Color = Color(1.0, 1.0, 1.0)

    def __str__(self) -> str:
        return str(self.color)