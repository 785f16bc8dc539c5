"""Frame-based sprite animations and the animation database."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .sprites import Sprite

logger = logging.getLogger(__name__)

DEFAULT_FRAME_TIME = 100


@dataclass(frozen=True)
class AnimationFrame:
    """One sprite shown for ``time`` milliseconds."""

    sprite: Sprite | None
    time: int


class Animation:
    """A looping sequence of frames."""

    def __init__(self, default_time: int = DEFAULT_FRAME_TIME) -> None:
        self.default_time = default_time
        self.frames: list[AnimationFrame] = []
        self._current = -1
        self._last_frame_time = -1

    @property
    def current_frame(self) -> int:
        """Index of the frame shown last, or -1 before the first advance."""
        return self._current

    def add(self, sprite: Sprite | None, time: int = 0) -> AnimationFrame:
        """Append a frame; a time of 0 means the default frame time."""
        frame = AnimationFrame(sprite, time or self.default_time)
        self.frames.append(frame)
        return frame

    def advance(self, now: int) -> AnimationFrame:
        """Return the frame to show at time ``now`` (ms), stepping at most one frame."""
        if not self.frames:
            raise ValueError("animation has no frames")
        if self._current == -1:
            self._current = 0
            self._last_frame_time = now
        elif now - self._last_frame_time > self.frames[self._current].time:
            self._current = (self._current + 1) % len(self.frames)
            self._last_frame_time = now
        return self.frames[self._current]


class AnimationRegistry:
    """Maps animation ids to animations."""

    def __init__(self) -> None:
        self._animations: dict[int, Animation] = {}

    def add(self, animation_id: int, animation: Animation) -> None:
        """Store ``animation`` under ``animation_id``, warning when one is replaced."""
        if animation_id in self._animations:
            logger.warning("Animation %d already exists", animation_id)
        self._animations[animation_id] = animation

    def get(self, animation_id: int) -> Animation:
        """Return the animation with ``animation_id``; raise KeyError if unknown."""
        try:
            return self._animations[animation_id]
        except KeyError:
            raise KeyError(f"animation id {animation_id} not found") from None

    def clear(self) -> None:
        """Forget all animations."""
        self._animations.clear()

    def __contains__(self, animation_id: object) -> bool:
        return animation_id in self._animations

    def __len__(self) -> int:
        return len(self._animations)