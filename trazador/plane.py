"""Infinite planes."""

from __future__ import annotations

from dataclasses import dataclass

from trazador.color import Color
from trazador.direction import Direction
from trazador.intersection import Intersection
from trazador.point3d import Point3D
from trazador.primitive import Primitive
from trazador.ray import Ray


@dataclass(eq=False)
class Plane(Primitive):
    """A plane through ``point`` with the given normal (stored normalized)."""

    point: Point3D
    normal: Direction
    color: Color = Color(1.0, 1.0, 1.0)

    def __post_init__(self) -> None:
        self.normal = self.normal.normalize()

    def intersect(self, ray: Ray) -> Intersection:
        """Hit in front of the ray origin, if any."""
        origin = ray.origin
        direction = ray.direction
        denominator = self.normal.dot(direction)
        if denominator == 0:
            return Intersection(intersects=False)

        distance = -self.normal.dot(origin - self.point) / denominator
        if distance <= 0:
            return Intersection(intersects=False)

        return Intersection(
            intersects=True,
            distances=[distance],
            points=[Point3D.along(origin, direction, distance)],
            normal=self.normal,
        )