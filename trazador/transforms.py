"""Affine transformations of homogeneous coordinates."""

from __future__ import annotations

import math

from trazador.angles import degrees_to_radians
from trazador.coordinate import Coordinate
from trazador.matrix4x4 import Matrix4x4


def translation_matrix(x: float, y: float, z: float) -> Matrix4x4:
    """Matrix that displaces points by ``(x, y, z)``."""
    return Matrix4x4(((1, 0, 0, x), (0, 1, 0, y), (0, 0, 1, z), (0, 0, 0, 1)))


def scaling_matrix(x: float, y: float, z: float) -> Matrix4x4:
    """Matrix that scales each axis by the given factor."""
    return Matrix4x4(((x, 0, 0, 0), (0, y, 0, 0), (0, 0, z, 0), (0, 0, 0, 1)))


def rotation_x_matrix(angle: float) -> Matrix4x4:
    """Rotation about the x axis; ``angle`` in degrees."""
    r = degrees_to_radians(angle)
    c, s = math.cos(r), math.sin(r)
    return Matrix4x4(((1, 0, 0, 0), (0, c, -s, 0), (0, s, c, 0), (0, 0, 0, 1)))


def rotation_y_matrix(angle: float) -> Matrix4x4:
    """Rotation about the y axis; ``angle`` in degrees."""
    r = degrees_to_radians(angle)
    c, s = math.cos(r), math.sin(r)
    return Matrix4x4(((c, 0, s, 0), (0, 1, 0, 0), (-s, 0, c, 0), (0, 0, 0, 1)))


def rotation_z_matrix(angle: float) -> Matrix4x4:
    """Rotation about the z axis; ``angle`` in degrees."""
    r = degrees_to_radians(angle)
    c, s = math.cos(r), math.sin(r)
    return Matrix4x4(((c, -s, 0, 0), (s, c, 0, 0), (0, 0, 1, 0), (0, 0, 0, 1)))


def change_basis_matrix(
    o: Coordinate, u: Coordinate, v: Coordinate, w: Coordinate
) -> Matrix4x4:
    """Matrix with the basis vectors as columns and the origin as last column."""
    return Matrix4x4(
        (
            (u.x, v.x, w.x, o.x),
            (u.y, v.y, w.y, o.y),
            (u.z, v.z, w.z, o.z),
            (0, 0, 0, o.is_point),
        )
    )


def apply_matrix(matrix: Matrix4x4, coordinate: Coordinate) -> Coordinate:
    """Multiply ``matrix`` by the coordinate taken as a column vector."""
    components = tuple(coordinate)
    return Coordinate.from_components(
        sum(a * b for a, b in zip(row, components)) for row in matrix.rows
    )


def translate(coordinate: Coordinate, x: float, y: float, z: float) -> Coordinate:
    """Displace a coordinate by ``(x, y, z)``."""
    return apply_matrix(translation_matrix(x, y, z), coordinate)


def scale(coordinate: Coordinate, x: float, y: float, z: float) -> Coordinate:
    """Scale a coordinate by the given factors."""
    return apply_matrix(scaling_matrix(x, y, z), coordinate)


def rotate_x(coordinate: Coordinate, angle: float) -> Coordinate:
    """Rotate about the x axis by ``angle`` degrees."""
    return apply_matrix(rotation_x_matrix(angle), coordinate)


def rotate_y(coordinate: Coordinate, angle: float) -> Coordinate:
    """Rotate about the y axis by ``angle`` degrees."""
    return apply_matrix(rotation_y_matrix(angle), coordinate)


def rotate_z(coordinate: Coordinate, angle: float) -> Coordinate:
    """Rotate about the z axis by ``angle`` degrees."""
    return apply_matrix(rotation_z_matrix(angle), coordinate)


def change_basis(
    coordinate: Coordinate,
    o: Coordinate,
    u: Coordinate,
    v: Coordinate,
    w: Coordinate,
) -> Coordinate:
    """Express a coordinate in the system with origin ``o`` and basis ``u, v, w``."""
    return apply_matrix(change_basis_matrix(o, u, v, w), coordinate)