"""Spheres."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from trazador.color import Color
from trazador.direction import Direction
from trazador.intersection import Intersection
from trazador.point3d import Point3D
from trazador.primitive import Primitive
from trazador.ray import Ray


@dataclass(eq=False)
class Sphere(Primitive):
    """A sphere given by its centre and radius."""

    center: Point3D
    radius: float
    color: Color = Color(1.0, 1.0, 1.0)
    city: Point3D | None = field(default=None, init=False)

    def add_point(self, azimuth: float, altitude: float) -> Point3D:
        """Place a point (a city) on the surface; angles are in degrees."""
        az = math.radians(azimuth)
        alt = math.radians(altitude)
        self.city = Point3D(
            self.center.x + self.radius * math.sin(az),
            self.center.y + self.radius * math.cos(az) * math.sin(alt),
            self.center.z + self.radius * math.cos(az) * math.cos(alt),
        )
        return self.city

    def intersect(self, ray: Ray) -> Intersection:
        """Distances along the normalized ray direction to one or two hits."""
        direction = ray.direction.normalize()
        to_origin: Direction = ray.origin - self.center

        a = direction.dot(direction)
        b = 2 * direction.dot(to_origin)
        c = to_origin.dot(to_origin) - self.radius * self.radius
        discriminant = b * b - 4 * a * c

        if discriminant < 0 or a == 0:
            return Intersection(intersects=False)

        root = math.sqrt(discriminant)
        t1 = (-b - root) / (2 * a)
        t2 = (-b + root) / (2 * a)
        distances = [t1] if t1 == t2 else [t1, t2]
        return Intersection(intersects=True, distances=distances)