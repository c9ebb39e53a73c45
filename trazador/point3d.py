"""Points in three-dimensional space."""

from __future__ import annotations

from dataclasses import dataclass

from trazador.direction import Direction


@dataclass(frozen=True)
class Point3D:
    """A point with x, y and z coordinates."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def along(cls, origin: Point3D, direction: Direction, distance: float) -> Point3D:
        """Point at ``distance`` from ``origin`` following ``direction``."""
        offset = direction.normalize() * distance
        return cls(origin.x + offset.x, origin.y + offset.y, origin.z + offset.z)

    def subtract_points(self, other: Point3D) -> Point3D:
        """Componentwise difference, kept as a point."""
        return Point3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __add__(self, other: Point3D) -> Point3D:
        if not isinstance(other, Point3D):
            return NotImplemented
        return Point3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Point3D) -> Direction:
        if not isinstance(other, Point3D):
            return NotImplemented
        return Direction(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Point3D:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Point3D(self.x * scalar, self.y * scalar, self.z * scalar)

    def __truediv__(self, scalar: float) -> Point3D:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Point3D(self.x / scalar, self.y / scalar, self.z / scalar)

    def __gt__(self, other: Point3D) -> bool:
        if not isinstance(other, Point3D):
            return NotImplemented
        return self.x > other.x and self.y > other.y and self.z > other.z

    def __lt__(self, other: Point3D) -> bool:
        if not isinstance(other, Point3D):
            return NotImplemented
        return self.x < other.x and self.y < other.y and self.z < other.z

    def __ge__(self, other: Point3D) -> bool:
        if not isinstance(other, Point3D):
            return NotImplemented
        return self.x >= other.x and self.y >= other.y and self.z >= other.z

    def __le__(self, other: Point3D) -> bool:
        if not isinstance(other, Point3D):
            return NotImplemented
        return self.x <= other.x and self.y <= other.y and self.z <= other.z

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g}, {self.z:g})"