"""Frame timing and elapsed time."""

from __future__ import annotations

import time
from typing import Callable

_I32_MAX = 2**31 - 1


class Clock:
    """Tracks time since start and the duration of the last frame."""

    def __init__(self, now: Callable[[], float] | None = None) -> None:
        self._now = now if now is not None else time.time
        start = self._now()
        self.start_time = start
        self.last_frame_time = start
        self.frame_time = 1.0 / 60.0

    def tick(self) -> None:
        """Mark the end of a frame, measuring its duration."""
        current = self._now()
        self.frame_time = current - self.last_frame_time
        self.last_frame_time = current

    def get_fps(self) -> int:
        """Frames per second implied by the last frame's duration."""
        if self.frame_time <= 0.0:
            return _I32_MAX
        return min(int(1.0 / self.frame_time), _I32_MAX)

    def get_frame_time(self) -> float:
        """Duration of the last frame in seconds."""
        return self.frame_time

    def get_time(self) -> float:
        """Seconds elapsed since the clock was created."""
        return self._now() - self.start_time