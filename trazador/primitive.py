"""Common interface of the geometric primitives a ray can hit."""

from __future__ import annotations

from abc import ABC, abstractmethod

from trazador.color import Color
from trazador.intersection import Intersection
from trazador.ray import Ray


class Primitive(ABC):
    """A coloured shape that can be intersected by a ray."""

    color: Color

    @abstractmethod
    def intersect(self, ray: Ray) -> Intersection:
        """Intersection of ``ray`` with the primitive."""