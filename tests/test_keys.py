from types import SimpleNamespace

import pytest

from platformer.keys import Key, SampleKeyHandler
from platformer.mario import (
    MARIO_ACCEL_RUN_X,
    MARIO_ACCEL_WALK_X,
    MARIO_JUMP_SPEED_Y,
    MARIO_LEVEL_BIG,
    MARIO_LEVEL_SMALL,
    MARIO_STATE_DIE,
    MARIO_STATE_IDLE,
    MARIO_STATE_RUNNING_RIGHT,
    MARIO_STATE_WALKING_LEFT,
    MARIO_STATE_WALKING_RIGHT,
    Mario,
)


def _handler():
    mario = Mario(100.0, 50.0, clock=lambda: 0)
    return SampleKeyHandler(SimpleNamespace(player=mario)), mario


def _held(*keys):
    return lambda key: key in keys


def test_run_right():
    handler, mario = _handler()
    handler.key_state(_held(Key.RIGHT, Key.A))
    assert mario.state == MARIO_STATE_RUNNING_RIGHT
    assert mario.ax == MARIO_ACCEL_RUN_X


def test_walk_right_and_left():
    handler, mario = _handler()
    handler.key_state(_held(Key.RIGHT))
    assert mario.state == MARIO_STATE_WALKING_RIGHT
    assert mario.ax == MARIO_ACCEL_WALK_X
    handler.key_state(_held(Key.LEFT))
    assert mario.state == MARIO_STATE_WALKING_LEFT
    assert mario.nx == -1


def test_no_keys_means_idle():
    handler, mario = _handler()
    mario.vx = 0.1
    handler.key_state(_held())
    assert mario.state == MARIO_STATE_IDLE
    assert mario.vx == 0.0


def test_jump_and_release():
    handler, mario = _handler()
    mario.is_on_platform = True
    handler.on_key_down(Key.S)
    assert mario.vy == -MARIO_JUMP_SPEED_Y
    handler.on_key_up(Key.S)
    assert mario.vy == -MARIO_JUMP_SPEED_Y / 2


def test_sit_and_stand():
    handler, mario = _handler()
    mario.is_on_platform = True
    y = mario.y
    handler.on_key_down(Key.DOWN)
    assert mario.is_sitting
    handler.on_key_up(Key.DOWN)
    assert not mario.is_sitting
    assert mario.y == y


def test_level_keys():
    handler, mario = _handler()
    handler.on_key_down(Key.KEY_1)
    assert mario.level == MARIO_LEVEL_SMALL
    handler.on_key_down(Key.KEY_2)
    assert mario.level == MARIO_LEVEL_BIG


def test_die_key_and_reset_key():
    handler, mario = _handler()
    handler.on_key_down(Key.R)
    assert mario.state == -1
    handler.on_key_down(Key.KEY_0)
    assert mario.state == MARIO_STATE_DIE


def test_no_player_raises():
    handler = SampleKeyHandler(SimpleNamespace(player=None))
    with pytest.raises(RuntimeError):
        handler.on_key_down(Key.S)