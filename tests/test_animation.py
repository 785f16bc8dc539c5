import logging

import pytest

from platformer.animation import (
    DEFAULT_FRAME_TIME,
    Animation,
    AnimationRegistry,
)
from platformer.sprites import Sprite, Texture

TEX = Texture("t.png")
S1 = Sprite(1, 0, 0, 1, 1, TEX)
S2 = Sprite(2, 0, 0, 1, 1, TEX)
S3 = Sprite(3, 0, 0, 1, 1, TEX)


def test_zero_time_uses_default():
    ani = Animation()
    frame = ani.add(S1, 0)
    assert frame.time == DEFAULT_FRAME_TIME == 100


def test_custom_default_and_explicit_time():
    ani = Animation(default_time=40)
    assert ani.add(S1).time == 40
    assert ani.add(S2, 75).time == 75


def test_first_advance_shows_first_frame():
    ani = Animation()
    ani.add(S1, 50)
    ani.add(S2, 50)
    assert ani.current_frame == -1
    assert ani.advance(1000).sprite is S1
    assert ani.current_frame == 0


def test_frame_changes_only_after_its_time_has_passed():
    ani = Animation()
    ani.add(S1, 50)
    ani.add(S2, 50)
    ani.advance(1000)
    assert ani.advance(1050).sprite is S1
    assert ani.advance(1051).sprite is S2


def test_advance_steps_one_frame_at_a_time_and_wraps():
    ani = Animation()
    for sprite in (S1, S2, S3):
        ani.add(sprite, 10)
    ani.advance(0)
    shown = [ani.advance(now).sprite for now in (100, 200, 300, 400)]
    assert shown == [S2, S3, S1, S2]


def test_advance_without_frames_raises():
    with pytest.raises(ValueError):
        Animation().advance(0)


def test_registry_add_get_and_clear():
    registry = AnimationRegistry()
    ani = Animation()
    registry.add(10000, ani)
    assert registry.get(10000) is ani
    registry.clear()
    assert 10000 not in registry
    with pytest.raises(KeyError):
        registry.get(10000)


def test_registry_warns_on_replace(caplog):
    registry = AnimationRegistry()
    first, second = Animation(), Animation()
    registry.add(5, first)
    with caplog.at_level(logging.WARNING, logger="platformer.animation"):
        registry.add(5, second)
    assert "already exists" in caplog.text
    assert registry.get(5) is second
    assert len(registry) == 1