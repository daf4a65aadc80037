"""RGBA images held in CPU memory."""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import Sequence, Tuple

from PIL import Image as PILImage
from PIL import UnidentifiedImageError

from quadlite.files import load_file
from quadlite.math import Rect

Color = Tuple[float, float, float, float]
Pixel = Tuple[int, int, int, int]


def _channel_to_byte(value: float) -> int:
    """Convert a 0..1 channel to a byte, truncating and saturating."""
    scaled = value * 255.0
    if scaled != scaled:  # NaN
        return 0
    return max(0, min(255, int(scaled)))


def _color_to_pixel(color: Color) -> Pixel:
    r, g, b, a = color
    return (
        _channel_to_byte(r),
        _channel_to_byte(g),
        _channel_to_byte(b),
        _channel_to_byte(a),
    )


def _pixel_to_color(pixel: Sequence[int]) -> Color:
    r, g, b, a = pixel
    return (r / 255.0, g / 255.0, b / 255.0, a / 255.0)


@dataclass
class Image:
    """Image with 4 bytes (R, G, B, A) per pixel, rows stored top to bottom."""

    width: int = 0
    height: int = 0
    data: bytearray = field(default_factory=bytearray)

    def __repr__(self) -> str:
        return f"Image(width={self.width}, height={self.height}, len={len(self.data)})"

    @classmethod
    def empty(cls) -> Image:
        """An image with no pixels."""
        return cls(0, 0, bytearray())

    @classmethod
    def from_file_with_format(cls, data: bytes, fmt: str | None = None) -> Image:
        """Decode an encoded image; ``fmt`` (e.g. "PNG") or None to guess."""
        formats = [fmt.upper()] if fmt is not None else None
        try:
            with PILImage.open(io.BytesIO(data), formats=formats) as decoded:
                rgba = decoded.convert("RGBA")
        except (UnidentifiedImageError, OSError, ValueError) as error:
            raise ValueError(f"cannot decode image: {error}") from error
        width, height = rgba.size
        return cls(width, height, bytearray(rgba.tobytes()))

    @classmethod
    def gen_image_color(cls, width: int, height: int, color: Color) -> Image:
        """An image of the given size filled with ``color``."""
        pixel = bytes(_color_to_pixel(color))
        return cls(width, height, bytearray(pixel * (width * height)))

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    def update(self, colors: Sequence[Color]) -> None:
        """Replace every pixel from a sequence of colors, one per pixel."""
        if len(colors) != self.pixel_count:
            raise ValueError(
                f"expected {self.pixel_count} colors, got {len(colors)}"
            )
        self.data = bytearray(
            byte for color in colors for byte in _color_to_pixel(color)
        )

    def get_image_data(self) -> list[Pixel]:
        """The pixels as (r, g, b, a) byte tuples in row order."""
        view = self.data
        return [
            (view[i], view[i + 1], view[i + 2], view[i + 3])
            for i in range(0, self.pixel_count * 4, 4)
        ]

    def _offset(self, x: int, y: int) -> int:
        index = y * self.width + x
        if x < 0 or y < 0 or index >= self.pixel_count:
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return index * 4

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        """Set the pixel at (x, y) to ``color``."""
        start = self._offset(x, y)
        self.data[start:start + 4] = bytes(_color_to_pixel(color))

    def get_pixel(self, x: int, y: int) -> Color:
        """The color of the pixel at (x, y)."""
        start = self._offset(x, y)
        return _pixel_to_color(self.data[start:start + 4])

    def sub_image(self, rect: Rect) -> Image:
        """Copy of the area ``rect`` of this image."""
        width = int(rect.w)
        height = int(rect.h)
        left = int(rect.x)
        top = int(rect.y)
        stride = self.width * 4
        out = bytearray()
        for row in range(top, top + height):
            start = row * stride + left * 4
            end = start + width * 4
            if end > len(self.data) or start < 0:
                raise IndexError(f"rect {rect} outside {self.width}x{self.height} image")
            out += self.data[start:end]
        return Image(width, height, out)

    def export_png(self, path: str) -> None:
        """Save as PNG, flipped vertically."""
        stride = self.width * 4
        rows = [
            self.data[row * stride:(row + 1) * stride]
            for row in range(self.height)
        ]
        flipped = b"".join(reversed(rows))
        PILImage.frombytes("RGBA", (self.width, self.height), flipped).save(path, "PNG")


def load_image(path: str) -> Image:
    """Load and decode an image file."""
    return Image.from_file_with_format(load_file(path), None)