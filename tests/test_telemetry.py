import pytest

from quadlite.telemetry import Frame, Profiler, Zone


class FakeClock:
    def __init__(self, times):
        self._times = list(times)

    def __call__(self):
        return self._times.pop(0)


def enabled_profiler(times):
    profiler = Profiler(now=FakeClock(times))
    profiler.enable()
    profiler.reset(0.0)
    profiler.next_frame()
    return profiler


def test_disabled_by_default_records_nothing():
    profiler = Profiler(now=FakeClock([]))
    profiler.begin_zone("a")
    profiler.end_zone()
    profiler.reset(0.5)
    frame = profiler.next_frame()
    assert frame.zones == []
    assert frame.full_frame_time == 0.5


def test_enable_takes_effect_after_reset():
    profiler = Profiler(now=FakeClock([1.0, 2.0]))
    profiler.enable()
    assert profiler.enabled is False
    profiler.reset(0.0)
    assert profiler.enabled is True


def test_nested_zones():
    profiler = enabled_profiler([1.0, 2.0, 3.0, 5.0])
    profiler.begin_zone("outer")
    profiler.begin_zone("inner")
    profiler.end_zone()
    profiler.end_zone()
    profiler.reset(0.25)
    frame = profiler.next_frame()
    assert [zone.name for zone in frame.zones] == ["outer"]
    outer = frame.zones[0]
    assert outer.start_time == 1.0
    assert outer.duration == 5.0 - 1.0
    assert [child.name for child in outer.children] == ["inner"]
    assert outer.children[0].duration == 3.0 - 2.0


def test_zone_context_manager():
    profiler = enabled_profiler([10.0, 12.0])
    with profiler.zone("work"):
        pass
    profiler.reset(0.0)
    frame = profiler.next_frame()
    assert frame.zones == [Zone("work", 10.0, 12.0 - 10.0, [])]


def test_end_zone_without_begin_raises():
    profiler = enabled_profiler([])
    with pytest.raises(RuntimeError):
        profiler.end_zone()


def test_reset_with_open_zone_raises():
    profiler = enabled_profiler([1.0])
    profiler.begin_zone("open")
    with pytest.raises(RuntimeError):
        profiler.reset(0.0)


def test_try_clone_none_while_open_and_deep_copy_otherwise():
    profiler = enabled_profiler([1.0, 2.0])
    profiler.begin_zone("z")
    assert profiler.frame.try_clone() is None
    profiler.end_zone()
    clone = profiler.frame.try_clone()
    assert clone == profiler.frame
    clone.zones[0].name = "changed"
    assert profiler.frame.zones[0].name == "z"


def test_next_frame_leaves_empty_frame():
    profiler = enabled_profiler([1.0, 2.0])
    with profiler.zone("a"):
        pass
    profiler.reset(0.1)
    first = profiler.next_frame()
    second = profiler.next_frame()
    assert len(first.zones) == 1
    assert second == Frame()


def test_disable_stops_recording_next_frame():
    profiler = enabled_profiler([])
    profiler.disable()
    profiler.reset(0.0)
    assert profiler.enabled is False
    profiler.begin_zone("ignored")
    profiler.reset(0.0)
    assert profiler.next_frame().zones == []