"""A growing texture atlas that packs glyph-sized images row by row."""

from __future__ import annotations

from dataclasses import dataclass

from quadlite.image import Image
from quadlite.math import Rect

_TRANSPARENT = (0.0, 0.0, 0.0, 0.0)


@dataclass
class Sprite:
    """Placement of a cached image inside the atlas."""

    rect: Rect


class Atlas:
    """Packs images into one larger image, doubling its size when full."""

    GAP = 2
    UNIQUENESS_OFFSET = 100000
    INITIAL_SIZE = 512

    def __init__(self) -> None:
        self.image = Image.gen_image_color(self.INITIAL_SIZE, self.INITIAL_SIZE, _TRANSPARENT)
        self.sprites: dict[int, Sprite] = {}
        self.dirty = False
        self._cursor_x = 0
        self._cursor_y = 0
        self._max_line_height = 0
        self._unique_id = self.UNIQUENESS_OFFSET

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    def new_unique_id(self) -> int:
        """A fresh sprite key."""
        self._unique_id += 1
        return self._unique_id

    def get(self, key: int) -> Sprite | None:
        """The sprite cached under ``key``, or None."""
        return self.sprites.get(key)

    def get_uv_rect(self, key: int) -> Rect | None:
        """The sprite's rectangle in normalised atlas coordinates."""
        sprite = self.get(key)
        if sprite is None:
            return None
        w = float(self.image.width)
        h = float(self.image.height)
        rect = sprite.rect
        return Rect(rect.x / w, rect.y / h, rect.w / w, rect.h / h)

    def cache_sprite(self, key: int, sprite: Image) -> None:
        """Copy ``sprite`` into the atlas under ``key``, growing when needed."""
        width, height = sprite.width, sprite.height

        if self._cursor_x + width < self.image.width:
            self._max_line_height = max(self._max_line_height, height)
            x = self._cursor_x + self.GAP
            self._cursor_x += width + self.GAP * 2
        else:
            self._cursor_y += self._max_line_height + self.GAP * 2
            self._cursor_x = width + self.GAP
            self._max_line_height = height
            x = self.GAP
        y = self._cursor_y

        if self._cursor_y + height > self.image.height:
            self._grow()
            self.cache_sprite(key, sprite)
            return

        self.dirty = True
        self._blit(sprite, x, y)
        self.sprites[key] = Sprite(Rect(float(x), float(y), float(width), float(height)))

    def _grow(self) -> None:
        old_sprites = list(self.sprites.items())
        self.sprites.clear()
        self._cursor_x = 0
        self._cursor_y = 0
        self._max_line_height = 0

        old_image = self.image
        self.image = Image.gen_image_color(
            old_image.width * 2, old_image.height * 2, _TRANSPARENT
        )
        for key, placed in old_sprites:
            self.cache_sprite(key, old_image.sub_image(placed.rect))

    def _blit(self, sprite: Image, x: int, y: int) -> None:
        row_bytes = sprite.width * 4
        stride = self.image.width * 4
        target = self.image.data
        for row in range(sprite.height):
            start = (y + row) * stride + x * 4
            end = start + row_bytes
            if end > len(target):
                raise IndexError("sprite does not fit inside the atlas image")
            source_start = row * row_bytes
            target[start:end] = sprite.data[source_start:source_start + row_bytes]