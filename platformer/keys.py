"""Keyboard handling for play scenes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import IntEnum
from typing import Any

from .mario import (
    MARIO_LEVEL_BIG,
    MARIO_LEVEL_SMALL,
    MARIO_STATE_DIE,
    MARIO_STATE_IDLE,
    MARIO_STATE_JUMP,
    MARIO_STATE_RELEASE_JUMP,
    MARIO_STATE_RUNNING_LEFT,
    MARIO_STATE_RUNNING_RIGHT,
    MARIO_STATE_SIT,
    MARIO_STATE_SIT_RELEASE,
    MARIO_STATE_WALKING_LEFT,
    MARIO_STATE_WALKING_RIGHT,
    Mario,
)


class Key(IntEnum):
    """Keyboard scan codes the game reacts to."""

    KEY_1 = 0x02
    KEY_2 = 0x03
    KEY_0 = 0x0B
    R = 0x13
    A = 0x1E
    S = 0x1F
    LEFT = 0xCB
    RIGHT = 0xCD
    DOWN = 0xD0


class KeyEventHandler(ABC):
    """Receives key presses, releases and the held-key state each frame."""

    @abstractmethod
    def key_state(self, is_key_down: Callable[[int], bool]) -> None:
        """React to the keys currently held."""

    @abstractmethod
    def on_key_down(self, key: int) -> None:
        """React to a key being pressed."""

    @abstractmethod
    def on_key_up(self, key: int) -> None:
        """React to a key being released."""


class SceneKeyHandler(KeyEventHandler, ABC):
    """A key handler that belongs to a scene."""

    def __init__(self, scene: Any) -> None:
        self.scene = scene


class SampleKeyHandler(SceneKeyHandler):
    """Drives the scene's player from the keyboard."""

    @property
    def _mario(self) -> Mario:
        player = self.scene.player
        if player is None:
            raise RuntimeError("scene has no player")
        return player

    def on_key_down(self, key: int) -> None:
        mario = self._mario
        if key == Key.DOWN:
            mario.set_state(MARIO_STATE_SIT)
        elif key == Key.S:
            mario.set_state(MARIO_STATE_JUMP)
        elif key == Key.KEY_1:
            mario.set_level(MARIO_LEVEL_SMALL)
        elif key == Key.KEY_2:
            mario.set_level(MARIO_LEVEL_BIG)
        elif key == Key.KEY_0:
            mario.set_state(MARIO_STATE_DIE)

    def on_key_up(self, key: int) -> None:
        mario = self._mario
        if key == Key.S:
            mario.set_state(MARIO_STATE_RELEASE_JUMP)
        elif key == Key.DOWN:
            mario.set_state(MARIO_STATE_SIT_RELEASE)

    def key_state(self, is_key_down: Callable[[int], bool]) -> None:
        mario = self._mario
        running = is_key_down(Key.A)
        if is_key_down(Key.RIGHT):
            mario.set_state(MARIO_STATE_RUNNING_RIGHT if running else MARIO_STATE_WALKING_RIGHT)
        elif is_key_down(Key.LEFT):
            mario.set_state(MARIO_STATE_RUNNING_LEFT if running else MARIO_STATE_WALKING_LEFT)
        else:
            mario.set_state(MARIO_STATE_IDLE)