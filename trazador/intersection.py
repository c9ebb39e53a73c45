"""Result of intersecting a ray with a primitive."""

from __future__ import annotations

from dataclasses import dataclass, field

from trazador.direction import Direction
from trazador.point3d import Point3D


@dataclass
class Intersection:
    """Whether a ray hit, the distances and points of the hits, and the normal."""

    intersects: bool = False
    distances: list[float] = field(default_factory=list)
    points: list[Point3D] = field(default_factory=list)
    normal: Direction = field(default_factory=Direction)

    def __bool__(self) -> bool:
        return self.intersects