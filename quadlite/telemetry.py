"""Frame profiler that records nested, timed zones."""

from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Callable, Iterator


@dataclass
class Zone:
    """A named span of time, possibly holding nested zones."""

    name: str
    start_time: float
    duration: float = 0.0
    children: list[Zone] = field(default_factory=list)

    def copy(self) -> Zone:
        """Deep copy of this zone and its children."""
        return Zone(
            self.name,
            self.start_time,
            self.duration,
            [child.copy() for child in self.children],
        )


@dataclass
class Frame:
    """The zones recorded during one frame."""

    full_frame_time: float = 0.0
    zones: list[Zone] = field(default_factory=list)
    _open: list[Zone] = field(default_factory=list, repr=False, compare=False)

    @property
    def has_open_zone(self) -> bool:
        return bool(self._open)

    def try_clone(self) -> Frame | None:
        """A deep copy of the frame, or None while a zone is still open."""
        if self._open:
            return None
        return Frame(self.full_frame_time, [zone.copy() for zone in self.zones])


class Profiler:
    """Collects zones per frame; enabling or disabling takes effect at the next reset."""

    def __init__(self, now: Callable[[], float] | None = None) -> None:
        self._now = now if now is not None else time.time
        self.frame = Frame()
        self.prev_frame = Frame()
        self.enabled = False
        self._enable_request: bool | None = None

    def enable(self) -> None:
        """Request profiling to start with the next frame."""
        self._enable_request = True

    def disable(self) -> None:
        """Request profiling to stop with the next frame."""
        self._enable_request = False

    def begin_zone(self, name: str) -> None:
        """Open a zone nested in the currently open one, if profiling is enabled."""
        if not self.enabled:
            return
        zone = Zone(name, self._now())
        open_zones = self.frame._open
        siblings = open_zones[-1].children if open_zones else self.frame.zones
        siblings.append(zone)
        open_zones.append(zone)

    def end_zone(self) -> None:
        """Close the innermost open zone, if profiling is enabled."""
        if not self.enabled:
            return
        if not self.frame._open:
            raise RuntimeError("end_zone called without begin_zone")
        zone = self.frame._open.pop()
        zone.duration = self._now() - zone.start_time

    @contextmanager
    def zone(self, name: str) -> Iterator[None]:
        """Context manager that opens a zone on entry and closes it on exit."""
        self.begin_zone(name)
        try:
            yield
        finally:
            self.end_zone()

    def reset(self, frame_time: float) -> None:
        """Finish the current frame with the given duration and start a new one."""
        if self.frame.has_open_zone:
            raise RuntimeError("New frame started with unpaired begin/end zones.")
        self.frame.full_frame_time = frame_time
        self.prev_frame = self.frame
        self.frame = Frame()
        if self._enable_request is not None:
            self.enabled = self._enable_request
            self._enable_request = None

    def next_frame(self) -> Frame:
        """Take the last finished frame, leaving an empty one in its place."""
        finished = self.prev_frame
        self.prev_frame = Frame()
        return finished