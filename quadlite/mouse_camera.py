"""A 2D camera panned and zoomed with the mouse."""

from __future__ import annotations

from dataclasses import dataclass, field

from quadlite.math import Vec2


@dataclass
class MouseCamera:
    """Camera whose offset and scale follow mouse dragging and the wheel."""

    offset: Vec2 = Vec2(0.0, 0.0)
    scale: float = 1.0
    _last_mouse_pos: Vec2 = field(default=Vec2(0.0, 0.0), init=False, repr=False)

    def scale_wheel(self, mouse_pos: Vec2, wheel_value: float, scale_factor: float) -> None:
        """Zoom in by ``scale_factor`` on positive wheel, out on negative, around ``mouse_pos``."""
        if wheel_value > 0.0:
            self.scale_mul(mouse_pos, scale_factor)
        elif wheel_value < 0.0:
            self.scale_mul(mouse_pos, 1.0 / scale_factor)

    def scale_mul(self, mouse_pos: Vec2, mul_to_scale: float) -> None:
        """Multiply the scale by ``mul_to_scale`` around ``mouse_pos``."""
        self.scale_new(mouse_pos, self.scale * mul_to_scale)

    def scale_new(self, mouse_pos: Vec2, new_scale: float) -> None:
        """Set the scale to ``new_scale``, keeping ``mouse_pos`` fixed."""
        self.offset = (self.offset - mouse_pos) * (new_scale / self.scale) + mouse_pos
        self.scale = new_scale

    def update(self, mouse_pos: Vec2, should_offset: bool) -> None:
        """Record the mouse position, panning by its movement when ``should_offset``."""
        if should_offset:
            self.offset = self.offset + (mouse_pos - self._last_mouse_pos)
        self._last_mouse_pos = mouse_pos