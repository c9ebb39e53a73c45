"""Triangles."""

from __future__ import annotations

from dataclasses import dataclass, field

from trazador.color import Color
from trazador.direction import Direction
from trazador.intersection import Intersection
from trazador.point3d import Point3D
from trazador.primitive import Primitive
from trazador.ray import Ray

_EPSILON = 1e-8


@dataclass(eq=False)
class Triangle(Primitive):
    """A triangle with vertices ``a``, ``b`` and ``c``."""

    a: Point3D
    b: Point3D
    c: Point3D
    color: Color = Color(1.0, 1.0, 1.0)
    normal: Direction = field(init=False)

    def __post_init__(self) -> None:
        self.normal = (self.b - self.a).cross(self.c - self.a).normalize()

    def intersect(self, ray: Ray) -> Intersection:
        """Hit of the ray with the triangle, found with barycentric coordinates."""
        miss = Intersection(intersects=False)
        edge1 = self.b - self.a
        edge2 = self.c - self.a

        p = ray.direction.cross(edge2)
        det = edge1.dot(p)
        if -_EPSILON < det < _EPSILON:
            return miss

        inv_det = 1.0 / det
        t = ray.origin - self.a
        u = t.dot(p) * inv_det
        if u < 0.0 or u > 1.0:
            return miss

        q = t.cross(edge1)
        v = ray.direction.dot(q) * inv_det
        if v < 0.0 or u + v > 1.0:
            return miss

        distance = edge2.dot(q) * inv_det
        if distance <= _EPSILON:
            return miss

        o, d = ray.origin, ray.direction
        hit = Point3D(o.x + d.x * distance, o.y + d.y * distance, o.z + d.z * distance)
        return Intersection(
            intersects=True, distances=[distance], points=[hit], normal=self.normal
        )