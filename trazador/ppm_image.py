"""Plain-text (P3) PPM images with a ``#MAX=`` header line."""

from __future__ import annotations

import itertools
import re
from dataclasses import dataclass, field
from os import PathLike

from trazador.pixel_rgb import PixelRGB

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

Grid = list[list[PixelRGB]]


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"expected an integer, got {text!r}")
    return int(match.group(1))


def _blank(width: int, height: int) -> Grid:
    return [[PixelRGB() for _ in range(width)] for _ in range(height)]


@dataclass
class PPMImage:
    """An image with its size, colour resolution and maximum value."""

    width: int
    height: int
    color_resolution: int
    max_value: int
    comment: str = ""
    pixels: Grid | None = None
    format: str = field(default="P3", init=False)

    def __post_init__(self) -> None:
        if self.pixels is None:
            self.pixels = _blank(self.width, self.height)

    @classmethod
    def read(cls, path: str | PathLike) -> PPMImage:
        """Load a P3 file; raises ValueError when the file is malformed."""
        with open(path, encoding="utf-8") as handle:
            lines = iter(line.rstrip("\r") for line in handle.read().split("\n"))

        magic = next(lines, None)
        if magic is None or magic != "P3":
            raise ValueError(f"unsupported file format: {magic!r}")

        max_value: int | None = None
        pending: list[str] = []
        second = next(lines, None)
        if second is not None:
            if "#MAX=" in second:
                max_value = _leading_int(second[5:])
            else:
                pending.append(second)

        comment = ""
        size: tuple[int, int] | None = None
        for line in itertools.chain(pending, lines):
            if line.startswith("#"):
                comment = line
                continue
            parts = line.split()
            if len(parts) >= 2:
                try:
                    size = (int(parts[0]), int(parts[1]))
                except ValueError:
                    continue
                break
        if size is None:
            raise ValueError("missing image dimensions")
        width, height = size

        resolution_line = next(lines, None)
        if resolution_line is None:
            raise ValueError("missing colour resolution")
        color_resolution = _leading_int(resolution_line)
        if max_value is None:
            max_value = color_resolution

        tokens = iter(" ".join(lines).split())
        pixels: Grid = []
        for _ in range(height):
            row = []
            for _ in range(width):
                try:
                    channels = [float(next(tokens)) for _ in range(3)]
                except StopIteration:
                    raise ValueError("not enough pixel values") from None
                row.append(
                    PixelRGB(*(value * color_resolution / max_value for value in channels))
                )
            pixels.append(row)

        return cls(width, height, color_resolution, max_value, comment, pixels)

    def describe(self) -> str:
        """Size, colour resolution and every pixel, one image row per line."""
        lines = [f"PPM Image: {self.width}x{self.height}, Max Color: {self.color_resolution}"]
        for row in self.pixels:
            lines.append("".join(f"({p.r:g}, {p.g:g}, {p.b:g}) " for p in row))
        return "\n".join(lines) + "\n"

    def write(self, path: str | PathLike) -> None:
        """Save the image as a P3 file, pixel values written as stored."""
        out = ["P3", f"#MAX={int(self.max_value)}"]
        if self.comment:
            out.append(self.comment)
        out.append(f"{self.width} {self.height}")
        out.append(str(self.color_resolution))
        for row in self.pixels:
            out.append("".join(f"{p.r:g} {p.g:g} {p.b:g} " for p in row))
        with open(path, "w", encoding="utf-8") as handle:
            handle.write("\n".join(out) + "\n")

    def to_ldr(self) -> None:
        """Scale every pixel by ``max_value / color_resolution``."""
        ratio = self.max_value / self.color_resolution
        self.pixels = [[pixel * ratio for pixel in row] for row in self.pixels]