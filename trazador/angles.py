"""Conversions between radians and degrees."""

import math


def radians_to_degrees(angle: float) -> float:
    """Convert an angle in radians to degrees."""
    return angle * (180.0 / math.pi)


def degrees_to_radians(angle: float) -> float:
    """Convert an angle in degrees to radians."""
    return angle * (math.pi / 180.0)