import pytest

from trazador.camera import Camera
from trazador.color import Color
from trazador.direction import Direction
from trazador.point3d import Point3D


@pytest.fixture
def camera():
    return Camera(
        Point3D(0, 0, -3.5),
        Direction(0, 1, 0),
        Direction(-1, 0, 0),
        Direction(0, 0, 3),
        (8, 8),
    )


def test_pixel_count(camera):
    assert len(camera.generate_pixels()) == 64


def test_pixels_print_default_color(camera):
    white = str(Color(1, 1, 1))
    assert all(str(pixel) == white for pixel in camera.generate_pixels())


def test_pixels_lie_on_projection_plane(camera):
    for pixel in camera.generate_pixels():
        assert pixel.up_left.z == pytest.approx(-0.5)
        assert pixel.down_right.z == pytest.approx(-0.5)
        assert -1 <= pixel.up_left.x <= 1
        assert -1 <= pixel.up_left.y <= 1


def test_first_pixel_corners(camera):
    first = camera.generate_pixels()[0]
    assert first.up_left.x == pytest.approx(0.875)
    assert first.up_left.y == pytest.approx(-0.875)
    assert first.down_right.x == pytest.approx(0.75)
    assert first.down_right.y == pytest.approx(-0.75)


def test_pixels_are_distinct(camera):
    corners = {pixel.up_left for pixel in camera.generate_pixels()}
    assert len(corners) == 64


def test_str(camera):
    text = str(camera)
    assert text.startswith("Camera: (Origin: (0, 0, -3.5)")
    assert text.endswith("Size: 8x8)")


def test_empty_size_gives_no_pixels():
    cam = Camera(Point3D(), Direction(0, 1, 0), Direction(-1, 0, 0), Direction(0, 0, 1), (0, 4))
    assert cam.generate_pixels() == []