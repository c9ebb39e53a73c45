"""Colour carried by a pixel or a primitive."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An RGB colour with floating-point channels."""

    r: float
    g: float
    b: float

    def __str__(self) -> str:
        return f"({self.r:g},{self.g:g},{self.b:g})"