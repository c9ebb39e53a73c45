"""P3 PPM images whose pixel values are scaled to a ``#MAX=`` maximum."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from os import PathLike

from trazador.pixel_rgb import PixelRGB

Grid = list[list[PixelRGB]]

_LEADING_FLOAT = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class PPMError(ValueError):
    """Raised when a PPM file cannot be read or an image cannot be written."""


def _leading_float(text: str) -> float:
    match = _LEADING_FLOAT.match(text)
    if match is None:
        raise PPMError(f"expected a number, got {text!r}")
    return float(match.group(1))


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise PPMError(f"expected an integer, got {text!r}")
    return int(match.group(1))


def _blank(width: int, height: int) -> Grid:
    return [[PixelRGB() for _ in range(width)] for _ in range(height)]


@dataclass
class PPMFormat:
    """A P3 image: size, colour resolution, maximum value, comment and pixels.

    Pixels are stored in the range ``[0, max_value]``; files hold them in
    ``[0, color_resolution]``.
    """

    width: int
    height: int
    color_resolution: float
    max_value: float = 0.0
    comment: str = ""
    pixels: Grid | None = None
    format: str = field(default="P3")

    def __post_init__(self) -> None:
        if self.pixels is None:
            self.pixels = _blank(self.width, self.height)

    @classmethod
    def blank(
        cls,
        width: int,
        height: int,
        color_resolution: float,
        max_value: float = 0.0,
        comment: str = "",
    ) -> PPMFormat:
        """An image of the given size with every pixel black."""
        return cls(width, height, color_resolution, max_value, comment)

    @classmethod
    def read(cls, path: str | PathLike) -> PPMFormat:
        """Load a P3 file; raises PPMError when it is missing or malformed."""
        try:
            with open(path, encoding="utf-8") as handle:
                text = handle.read()
        except OSError as exc:
            raise PPMError(f"cannot open file: {path}") from exc

        lines = iter(line.rstrip("\r") for line in text.split("\n"))

        magic = next(lines, None)
        if magic is not None and magic != "P3":
            raise PPMError(f"invalid file format: {magic}")
        image_format = "P3"

        max_value: float | None = None
        comment = ""
        line = next(lines, None)
        if line is not None:
            line = line.lstrip(" \t")
            if "#MAX=" in line:
                max_value = _leading_float(line[5:])
                line = next(lines, None)
                if line is None:
                    raise PPMError("missing line after #MAX=")
            if line.startswith("#"):
                comment = line[1:]
                line = next(lines, None)
                if line is None:
                    raise PPMError("missing line after the comment")
        if line is None:
            raise PPMError("missing image dimensions")

        parts = line.split()
        try:
            width, height = int(parts[0]), int(parts[1])
        except (IndexError, ValueError):
            raise PPMError(f"invalid image dimensions: {line!r}") from None

        resolution_line = next(lines, None)
        if resolution_line is None:
            raise PPMError("missing colour resolution")
        color_resolution = float(_leading_int(resolution_line))
        if color_resolution == 0:
            raise PPMError("colour resolution must not be zero")
        if max_value is None:
            max_value = color_resolution

        tokens = iter(" ".join(lines).split())
        scale = max_value / color_resolution
        pixels: Grid = []
        for _ in range(height):
            row = []
            for _ in range(width):
                try:
                    channels = [_leading_float(next(tokens)) for _ in range(3)]
                except StopIteration:
                    raise PPMError("not enough pixel values") from None
                row.append(PixelRGB(*(value * scale for value in channels)))
            pixels.append(row)

        return cls(
            width, height, color_resolution, max_value, comment, pixels, image_format
        )

    def _header(self) -> list[str]:
        lines = [self.format, f"#MAX={self.max_value:f}"]
        if self.comment:
            lines.append("#" + self.comment)
        lines.append(f"{self.width} {self.height}")
        lines.append(f"{self.color_resolution:.0f}")
        return lines

    def _factor(self) -> float:
        if self.max_value == 0:
            raise PPMError("maximum value must not be zero")
        return self.color_resolution / self.max_value

    def render(self) -> str:
        """The image as text, pixels tab-separated, one image row per line."""
        factor = self._factor()
        lines = self._header()
        for row in self.pixels:
            lines.append(
                "".join(
                    f"{p.r * factor:.0f} {p.g * factor:.0f} {p.b * factor:.0f}\t"
                    for p in row
                )
            )
        return "\n".join(lines) + "\n"

    def write(self, path: str | PathLike) -> None:
        """Save the image as a P3 file scaled to the colour resolution."""
        factor = self._factor()
        lines = self._header()
        for row in self.pixels:
            lines.append(
                "".join(
                    f"{p.r * factor:.0f} {p.g * factor:.0f} {p.b * factor:.0f}     "
                    for p in row
                )
            )
        with open(path, "w", encoding="utf-8") as handle:
            handle.write("\n".join(lines) + "\n\n")