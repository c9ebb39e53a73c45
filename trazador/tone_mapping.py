"""Tone-mapping operators for PPM images and single pixels."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import replace

from trazador.pixel_rgb import PixelRGB
from trazador.ppm_format import PPMFormat


def _per_channel(pixel: PixelRGB, op: Callable[[float], float]) -> PixelRGB:
    return PixelRGB(op(pixel.r), op(pixel.g), op(pixel.b))


def _mapped(image: PPMFormat, op: Callable[[PixelRGB], PixelRGB]) -> list[list[PixelRGB]]:
    return [[op(pixel) for pixel in row] for row in image.pixels]


def maximum(a: float, b: float, c: float, d: float) -> float:
    """The largest of four values."""
    if a > b and a > c and a > d:
        return a
    if b > c and b > d:
        return b
    if c > d:
        return c
    return d


def clamp_pixel(pixel: PixelRGB, cutoff: float) -> PixelRGB:
    """Channels above ``cutoff`` are cut down to it."""
    return _per_channel(pixel, lambda v: cutoff if v > cutoff else v)


def clamp(image: PPMFormat, cutoff: float) -> PPMFormat:
    """Clamp every pixel and take ``cutoff`` as the new colour resolution."""
    return replace(
        image,
        color_resolution=cutoff,
        pixels=_mapped(image, lambda p: clamp_pixel(p, cutoff)),
    )


def linear_pixel(image: PPMFormat, pixel: PixelRGB) -> PixelRGB:
    """Scale a pixel from ``[0, max_value]`` to ``[0, color_resolution]``."""
    factor = image.color_resolution
    top = image.max_value
    return _per_channel(pixel, lambda v: v * factor / top)


def linear(image: PPMFormat) -> PPMFormat:
    """Scale every pixel linearly to the colour resolution."""
    return replace(image, pixels=_mapped(image, lambda p: linear_pixel(image, p)))


def linear_clamp_pixel(image: PPMFormat, pixel: PixelRGB, cutoff: float) -> PixelRGB:
    """Clamp channels above ``cutoff``, scale the others linearly."""
    factor = image.color_resolution
    top = image.max_value
    return _per_channel(pixel, lambda v: cutoff if v > cutoff else v * factor / top)


def linear_clamp(image: PPMFormat, cutoff: float) -> PPMFormat:
    """Apply :func:`linear_clamp_pixel` to every pixel."""
    return replace(
        image, pixels=_mapped(image, lambda p: linear_clamp_pixel(image, p, cutoff))
    )


def gamma_pixel(pixel: PixelRGB, gamma_value: float) -> PixelRGB:
    """Raise every channel to ``1 / gamma_value``."""
    exponent = 1 / gamma_value
    return _per_channel(pixel, lambda v: math.pow(v, exponent))


def gamma(image: PPMFormat, gamma_value: float) -> PPMFormat:
    """Gamma-encode every pixel; the new maximum is the largest channel."""
    pixels = _mapped(image, lambda p: gamma_pixel(p, gamma_value))
    new_max = 0.0
    for row in pixels:
        for pixel in row:
            new_max = maximum(new_max, pixel.r, pixel.g, pixel.b)
    return replace(image, max_value=new_max, pixels=pixels)


def gamma_clamp_pixel(pixel: PixelRGB, gamma_value: float, cutoff: float) -> PixelRGB:
    """Clamp channels above ``cutoff``, gamma-encode the others."""
    exponent = 1 / gamma_value
    return _per_channel(pixel, lambda v: cutoff if v > cutoff else math.pow(v, exponent))


def gamma_clamp(image: PPMFormat, gamma_value: float, cutoff: float) -> PPMFormat:
    """Apply :func:`gamma_clamp_pixel` to every pixel."""
    return replace(
        image, pixels=_mapped(image, lambda p: gamma_clamp_pixel(p, gamma_value, cutoff))
    )


def reinhard_pixel(pixel: PixelRGB) -> PixelRGB:
    """Reinhard operator ``v / (1 + v)`` on each channel."""
    return _per_channel(pixel, lambda v: v / (1 + v))


def reinhard(image: PPMFormat) -> PPMFormat:
    """Apply the Reinhard operator to every pixel."""
    return replace(image, pixels=_mapped(image, reinhard_pixel))


def reinhard_clamp_pixel(pixel: PixelRGB, cutoff: float) -> PixelRGB:
    """Extended Reinhard operator with white point ``cutoff``."""
    numerator = pixel * (pixel / (cutoff * cutoff) + 1)
    return numerator / (pixel + 1)


def reinhard_clamp(image: PPMFormat, cutoff: float) -> PPMFormat:
    """Extended Reinhard on every pixel; the result has maximum value 1."""
    return PPMFormat(
        image.width,
        image.height,
        image.color_resolution,
        1.0,
        image.comment,
        _mapped(image, lambda p: reinhard_clamp_pixel(p, cutoff)),
    )