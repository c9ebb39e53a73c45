"""Rays: an origin and a direction."""

from __future__ import annotations

import math
from dataclasses import dataclass

from trazador.direction import Direction
from trazador.point3d import Point3D


def _reciprocal(value: float) -> float:
    if value == 0:
        return math.copysign(math.inf, value)
    return 1.0 / value


@dataclass(frozen=True)
class Ray:
    """A half-line starting at ``origin`` and following ``direction``."""

    origin: Point3D
    direction: Direction

    def inverse(self) -> Direction:
        """Componentwise reciprocal of the direction; zero components give infinity."""
        d = self.direction
        return Direction(_reciprocal(d.x), _reciprocal(d.y), _reciprocal(d.z))

    def __str__(self) -> str:
        return f"Origin: {self.origin}, Direction: {self.direction}"