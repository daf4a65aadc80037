import pytest

from quadlite.animation import AnimatedSprite, Animation
from quadlite.math import Rect, Vec2


def make_sprite(playing=True):
    return AnimatedSprite(
        16,
        32,
        [Animation("idle", 0, 3, 10), Animation("run", 2, 4, 5)],
        playing,
    )


def test_initial_frame_rect():
    frame = make_sprite().frame()
    assert frame.source_rect == Rect(0.0, 0.0, 16.0, 32.0)
    assert frame.dest_size == Vec2(16.0, 32.0)


def test_update_advances_after_period():
    sprite = make_sprite()
    sprite.update(0.05)
    assert sprite.current_frame == 0
    sprite.update(0.06)
    assert sprite.current_frame == 1
    assert sprite.frame().source_rect.x == 16.0


def test_frames_wrap_around():
    sprite = make_sprite()
    for _ in range(3):
        sprite.update(1.0)
    assert sprite.current_frame == 0


def test_not_playing_keeps_frame_but_wraps_index():
    sprite = make_sprite(playing=False)
    sprite.update(10.0)
    assert sprite.current_frame == 0
    sprite.set_frame(5)
    sprite.update(10.0)
    assert sprite.current_frame == 5 % 3


def test_set_animation_uses_row():
    sprite = make_sprite()
    sprite.set_animation(1)
    sprite.set_frame(3)
    frame = sprite.frame()
    assert frame.source_rect == Rect(16.0 * 3, 32.0 * 2, 16.0, 32.0)


def test_missing_animation_raises():
    sprite = make_sprite()
    sprite.set_animation(7)
    with pytest.raises(IndexError):
        sprite.update(0.1)