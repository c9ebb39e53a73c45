"""Geometry, primitives, a pinhole camera, PPM images and tone mapping for ray tracing."""

__version__ = "0.1.0"