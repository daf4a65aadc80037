import pytest

from quadlite.coroutines import (
    Coroutines,
    follow_path,
    linear,
    wait_seconds,
)
from quadlite.math import Vec2


class FakeClock:
    def __init__(self) -> None:
        self.t = 0.0

    def __call__(self) -> float:
        return self.t


class Box:
    def __init__(self, value) -> None:
        self.value = value


def counting(log):
    log.append("a")
    yield
    log.append("b")
    yield
    log.append("c")


def spawning(runner, log):
    runner.start(counting(log))
    yield


def delayed_append(clock, log):
    yield from wait_seconds(1.0, clock)
    log.append("fired")


def test_coroutine_not_run_before_update():
    runner = Coroutines()
    log = []
    runner.start(counting(log))
    assert log == []


def test_coroutine_steps_once_per_update():
    runner = Coroutines()
    log = []
    co = runner.start(counting(log))
    runner.update()
    assert log == ["a"]
    assert not co.is_done()
    runner.update()
    assert log == ["a", "b"]
    assert not co.is_done()
    runner.update()
    assert log == ["a", "b", "c"]
    assert co.is_done()
    assert len(runner) == 0


def test_stop_single_coroutine():
    runner = Coroutines()
    log1, log2 = [], []
    first = runner.start(counting(log1))
    second = runner.start(counting(log2))
    runner.stop(first)
    runner.update()
    assert first.is_done()
    assert not second.is_done()
    assert log1 == []
    assert log2 == ["a"]


def test_stop_all():
    runner = Coroutines()
    handles = [runner.start(counting([])) for _ in range(3)]
    runner.stop_all()
    assert all(h.is_done() for h in handles)
    assert len(runner) == 0


def test_started_during_update_runs_next_frame():
    runner = Coroutines()
    log = []
    runner.start(spawning(runner, log))
    runner.update()
    assert log == []
    runner.update()
    assert log == ["a"]


def test_wait_seconds():
    clock = FakeClock()
    runner = Coroutines()
    co = runner.start(wait_seconds(2.0, clock))
    runner.update()
    assert not co.is_done()
    clock.t = 1.9
    runner.update()
    assert not co.is_done()
    clock.t = 2.0
    runner.update()
    assert co.is_done()


def test_wait_seconds_inside_generator():
    clock = FakeClock()
    runner = Coroutines()
    log = []
    runner.start(delayed_append(clock, log))
    runner.update()
    assert log == []
    clock.t = 1.5
    runner.update()
    assert log == ["fired"]


def test_linear_tween_values():
    clock = FakeClock()
    box = Box(0.0)
    runner = Coroutines()
    co = runner.start(linear(box, "value", 0.0, 10.0, 2.0, clock))
    runner.update()
    assert box.value == pytest.approx(0.0)
    clock.t = 1.0
    runner.update()
    assert box.value == pytest.approx(5.0)
    assert not co.is_done()
    clock.t = 3.0
    runner.update()
    assert box.value == 10.0
    assert co.is_done()


def test_linear_stays_within_bounds():
    clock = FakeClock()
    box = Box(3.0)
    tween = linear(box, "value", 3.0, 7.0, 1.0, clock)
    for step in range(11):
        clock.t = step * 0.1
        next(tween, None)
        assert 3.0 <= box.value <= 7.0


def test_linear_with_vectors():
    clock = FakeClock()
    box = Box(Vec2(0.0, 0.0))
    runner = Coroutines()
    runner.start(linear(box, "value", Vec2(0.0, 0.0), Vec2(4.0, 8.0), 1.0, clock))
    clock.t = 5.0
    runner.update()
    assert box.value == Vec2(4.0, 8.0)


def test_linear_ends_when_target_gone():
    clock = FakeClock()
    runner = Coroutines()
    co = runner.start(linear(lambda: None, "value", 0.0, 1.0, 10.0, clock))
    runner.update()
    assert co.is_done()


def test_linear_zero_duration_jumps_to_end():
    clock = FakeClock()
    box = Box(0.0)
    runner = Coroutines()
    co = runner.start(linear(box, "value", 0.0, 9.0, 0.0, clock))
    runner.update()
    assert box.value == 9.0
    assert co.is_done()


def test_follow_path_reaches_last_point():
    clock = FakeClock()
    box = Box(0.0)
    runner = Coroutines()
    co = runner.start(follow_path(box, "value", [0.0, 10.0, 20.0], 3.0, clock))
    runner.update()
    assert box.value == pytest.approx(0.0)
    clock.t = 2.0
    runner.update()
    assert box.value == 10.0
    assert not co.is_done()
    clock.t = 3.5
    runner.update()
    assert box.value == 20.0
    assert co.is_done()


def test_follow_path_empty_finishes():
    runner = Coroutines()
    box = Box(1.0)
    co = runner.start(follow_path(box, "value", [], 1.0, FakeClock()))
    runner.update()
    assert co.is_done()
    assert box.value == 1.0