"""Cooperative coroutines advanced once per frame, plus timers and tweens."""

from __future__ import annotations

import itertools
import math
import time
from typing import Any, Callable, Iterable, Iterator, Sequence

Clock = Callable[[], float]


class Coroutine:
    """Handle to a coroutine started on a :class:`Coroutines` runner."""

    def __init__(self, runner: Coroutines, coroutine_id: int) -> None:
        self._runner = runner
        self.id = coroutine_id

    def __repr__(self) -> str:
        return f"Coroutine(id={self.id}, done={self.is_done()})"

    def is_done(self) -> bool:
        """True once the coroutine has finished or was stopped."""
        return not self._runner.is_running(self.id)


class Coroutines:
    """Runs generator-based coroutines, each advanced one step per update."""

    def __init__(self) -> None:
        self._tasks: dict[int, Iterator[Any]] = {}
        self._ids = itertools.count()

    def __len__(self) -> int:
        return len(self._tasks)

    def is_running(self, coroutine_id: int) -> bool:
        return coroutine_id in self._tasks

    def start(self, generator: Iterable[Any]) -> Coroutine:
        """Register ``generator``; it first runs at the next update."""
        coroutine_id = next(self._ids)
        self._tasks[coroutine_id] = iter(generator)
        return Coroutine(self, coroutine_id)

    def stop(self, coroutine: Coroutine) -> None:
        """Stop one coroutine; stopping a finished one does nothing."""
        self._tasks.pop(coroutine.id, None)

    def stop_all(self) -> None:
        """Stop every coroutine."""
        self._tasks.clear()

    def update(self) -> None:
        """Advance every running coroutine by one step."""
        for coroutine_id in list(self._tasks):
            task = self._tasks.get(coroutine_id)
            if task is None:
                continue
            try:
                next(task)
            except StopIteration:
                self._tasks.pop(coroutine_id, None)


def _clock(now: Clock | None) -> Clock:
    return now if now is not None else time.time


def wait_seconds(seconds: float, now: Clock | None = None) -> Iterator[None]:
    """A generator that yields until ``seconds`` have passed since this call."""
    clock = _clock(now)
    start_time = clock()

    def _wait() -> Iterator[None]:
        while clock() - start_time < seconds:
            yield

    return _wait()


def linear(
    target: Any,
    attribute: str,
    start: Any,
    end: Any,
    duration: float,
    now: Clock | None = None,
) -> Iterator[None]:
    """Tween ``attribute`` of ``target`` from ``start`` to ``end`` over ``duration`` seconds.

    ``target`` may be a callable returning the object, or None once it is gone;
    the tween then ends early. Timing starts at this call.
    """
    clock = _clock(now)
    start_time = clock()

    def _tween() -> Iterator[None]:
        while True:
            elapsed = clock() - start_time
            progress = elapsed / duration if duration != 0 else math.inf
            obj = target() if callable(target) else target
            if obj is None:
                return
            if progress <= 1.0:
                setattr(obj, attribute, start + (end - start) * progress)
                yield
            else:
                setattr(obj, attribute, end)
                return

    return _tween()


def follow_path(
    target: Any,
    attribute: str,
    path: Sequence[Any],
    duration: float,
    now: Clock | None = None,
) -> Iterator[None]:
    """Tween ``attribute`` along consecutive points of ``path``.

    Each segment takes ``duration / len(path)`` seconds.
    """
    points = list(path)
    if not points:
        return
    step = duration / len(points)
    for begin, finish in zip(points, points[1:]):
        yield from linear(target, attribute, begin, finish, step, now)