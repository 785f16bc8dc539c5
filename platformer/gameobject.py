"""Base class for everything that lives in a scene."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .collision import CollisionEvent


def now_ms() -> int:
    """Milliseconds from a monotonic clock."""
    return time.monotonic_ns() // 1_000_000


class GameObject(ABC):
    """An object with a position, a speed, a state and a bounding box."""

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.x = x
        self.y = y
        self.vx = 0.0
        self.vy = 0.0
        self.nx = 1
        self.state = -1
        self.is_deleted = False

    @abstractmethod
    def bounding_box(self) -> tuple[float, float, float, float]:
        """Return (left, top, right, bottom)."""

    def update(self, dt: int, co_objects: Sequence[GameObject] | None = None) -> None:
        """Advance the object by ``dt`` ms; the base object stays as it is."""

    def set_state(self, state: int) -> None:
        """Enter ``state``."""
        self.state = state

    def delete(self) -> None:
        """Mark the object for removal from its scene."""
        self.is_deleted = True

    def is_collidable(self) -> bool:
        """Whether collisions are computed for this object when it moves."""
        return False

    def is_blocking(self) -> bool:
        """Whether this object stops others that run into it."""
        return True

    def is_direction_collidable(self, nx: float, ny: float) -> bool:
        """Whether a collision with normal (nx, ny) counts."""
        return True

    def on_no_collision(self, dt: int) -> None:
        """Called when a move of ``dt`` ms met nothing."""

    def on_collision_with(self, event: CollisionEvent) -> None:
        """Called for each collision the move produced."""