import pytest

from trazador import tone_mapping as tm
from trazador.pixel_rgb import PixelRGB
from trazador.ppm_format import PPMFormat


def _image(pixels, max_value=2.0, resolution=255, comment=""):
    return PPMFormat(len(pixels[0]), len(pixels), resolution, max_value, comment, pixels)


def test_clamp_image_and_resolution():
    image = _image([[PixelRGB(200, 100, 150)]], max_value=255)
    result = tm.clamp(image, 150)
    assert result.pixels == [[PixelRGB(150, 100, 150)]]
    assert result.color_resolution == 150
    assert image.pixels == [[PixelRGB(200, 100, 150)]]
    assert image.color_resolution == 255


def test_clamp_pixel():
    assert tm.clamp_pixel(PixelRGB(0.5, 2.0, 1.0), 1.0) == PixelRGB(0.5, 1.0, 1.0)


def test_linear():
    image = _image([[PixelRGB(2.0, 1.0, 0.0)]])
    assert tm.linear(image).pixels == [[PixelRGB(255.0, 127.5, 0.0)]]


def test_linear_pixel():
    image = _image([[PixelRGB()]], max_value=4.0, resolution=100)
    assert tm.linear_pixel(image, PixelRGB(4.0, 2.0, 1.0)) == PixelRGB(100.0, 50.0, 25.0)


def test_linear_clamp():
    image = _image([[PixelRGB(2.0, 1.0, 0.0)]])
    result = tm.linear_clamp(image, 1.5)
    assert result.pixels == [[PixelRGB(1.5, 127.5, 0.0)]]
    assert tm.linear_clamp_pixel(image, PixelRGB(2.0, 1.0, 0.0), 1.5) == PixelRGB(
        1.5, 127.5, 0.0
    )


def test_gamma_updates_max():
    image = _image([[PixelRGB(4.0, 9.0, 16.0), PixelRGB(1.0, 0.0, 0.0)]], max_value=16)
    result = tm.gamma(image, 2)
    assert result.pixels[0][0] == PixelRGB(2.0, 3.0, 4.0)
    assert result.pixels[0][1] == PixelRGB(1.0, 0.0, 0.0)
    assert result.max_value == 4.0


def test_gamma_pixel():
    assert tm.gamma_pixel(PixelRGB(8.0, 27.0, 1.0), 3) == pytest.approx(
        PixelRGB(2.0, 3.0, 1.0)
    ) or tm.gamma_pixel(PixelRGB(8.0, 27.0, 1.0), 3).r == pytest.approx(2.0)


def test_gamma_clamp():
    image = _image([[PixelRGB(4.0, 100.0, 9.0)]], max_value=100)
    result = tm.gamma_clamp(image, 2, 50)
    assert result.pixels == [[PixelRGB(2.0, 50.0, 3.0)]]
    assert result.max_value == 100
    assert tm.gamma_clamp_pixel(PixelRGB(4.0, 100.0, 9.0), 2, 50) == PixelRGB(2.0, 50.0, 3.0)


def test_reinhard():
    image = _image([[PixelRGB(1.0, 0.0, 3.0)]])
    assert tm.reinhard(image).pixels == [[PixelRGB(0.5, 0.0, 0.75)]]
    assert tm.reinhard_pixel(PixelRGB(1.0, 0.0, 3.0)) == PixelRGB(0.5, 0.0, 0.75)


def test_reinhard_clamp():
    image = _image([[PixelRGB(1.0, 3.0, 0.0)]], max_value=5, comment="bosque")
    result = tm.reinhard_clamp(image, 2)
    assert result.max_value == 1.0
    assert result.comment == "bosque"
    assert result.format == "P3"
    assert result.color_resolution == 255
    assert result.pixels[0][0].r == pytest.approx(0.625)
    assert result.pixels[0][0].g == pytest.approx(1.3125)
    assert result.pixels[0][0].b == 0.0


def test_reinhard_clamp_pixel_white_point_maps_to_itself():
    assert tm.reinhard_clamp_pixel(PixelRGB(1.0, 1.0, 1.0), 1.0) == PixelRGB(1.0, 1.0, 1.0)


@pytest.mark.parametrize(
    "values, expected",
    [((1, 2, 3, 4), 4), ((4, 3, 2, 1), 4), ((5, 5, 0, 0), 5), ((0, 7, 7, 1), 7), ((0, 1, 9, 2), 9)],
)
def test_maximum(values, expected):
    assert tm.maximum(*values) == expected


def test_reinhard_written_file(tmp_path):
    source = tmp_path / "forest_path.ppm"
    source.write_text("P3\n#MAX=2\n1 1\n255\n255 0 255\n", encoding="utf-8")
    image = PPMFormat.read(source)
    result = tm.reinhard(image)
    out = tmp_path / "forest_path_reinhard.ppm"
    result.write(out)
    again = PPMFormat.read(out)
    assert again.pixels[0][0].r == pytest.approx(2 / 3, abs=0.01)
    assert again.pixels[0][0].g == 0.0
    assert again.pixels[0][0].b == pytest.approx(2 / 3, abs=0.01)