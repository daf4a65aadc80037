"""Sprite-sheet animations laid out as rows of equally sized tiles."""

from __future__ import annotations

from dataclasses import dataclass, field

from quadlite.math import Rect, Vec2


@dataclass
class Animation:
    """One animation: a row of the sheet with ``frames`` tiles played at ``fps``."""

    name: str
    row: int
    frames: int
    fps: int


@dataclass
class AnimationFrame:
    """Where to read the current frame from and how large to draw it."""

    source_rect: Rect
    dest_size: Vec2


@dataclass
class AnimatedSprite:
    """Plays animations from a sprite sheet."""

    tile_width: float
    tile_height: float
    animations: list[Animation]
    playing: bool = True
    current_animation: int = field(default=0, init=False)
    current_frame: int = field(default=0, init=False)
    _time: float = field(default=0.0, init=False, repr=False)

    def __post_init__(self) -> None:
        self.tile_width = float(self.tile_width)
        self.tile_height = float(self.tile_height)
        self.animations = list(self.animations)

    def set_animation(self, animation: int) -> None:
        """Switch to the animation at index ``animation``."""
        self.current_animation = animation

    def set_frame(self, frame: int) -> None:
        """Jump to frame ``frame`` of the current animation."""
        self.current_frame = frame

    def update(self, frame_time: float) -> None:
        """Advance by ``frame_time`` seconds while playing."""
        animation = self.animations[self.current_animation]
        if self.playing:
            self._time += frame_time
            threshold = 1.0 / animation.fps if animation.fps else float("inf")
            if self._time > threshold:
                self.current_frame += 1
                self._time = 0.0
        self.current_frame %= animation.frames

    def frame(self) -> AnimationFrame:
        """The sheet rectangle and draw size of the current frame."""
        animation = self.animations[self.current_animation]
        return AnimationFrame(
            source_rect=Rect(
                self.tile_width * self.current_frame,
                self.tile_height * animation.row,
                self.tile_width,
                self.tile_height,
            ),
            dest_size=Vec2(self.tile_width, self.tile_height),
        )