"""Scene objects: bricks, coins, platforms, portals and goombas."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from .collision import CollisionEvent, process
from .gameobject import GameObject, now_ms

ID_ANI_BRICK = 10000
BRICK_WIDTH = 16
BRICK_BBOX_WIDTH = 16
BRICK_BBOX_HEIGHT = 16

ID_ANI_COIN = 11000
COIN_WIDTH = 10
COIN_BBOX_WIDTH = 10
COIN_BBOX_HEIGHT = 16

GOOMBA_GRAVITY = 0.002
GOOMBA_WALKING_SPEED = 0.05
GOOMBA_BBOX_WIDTH = 16
GOOMBA_BBOX_HEIGHT = 14
GOOMBA_BBOX_HEIGHT_DIE = 7
GOOMBA_DIE_TIMEOUT = 500
GOOMBA_STATE_WALKING = 100
GOOMBA_STATE_DIE = 200
ID_ANI_GOOMBA_WALKING = 5000
ID_ANI_GOOMBA_DIE = 5001


def _centered_box(x: float, y: float, width: int, height: int) -> tuple[float, float, float, float]:
    left = x - width // 2
    top = y - height // 2
    return left, top, left + width, top + height


class Brick(GameObject):
    """A solid block."""

    def bounding_box(self) -> tuple[float, float, float, float]:
        return _centered_box(self.x, self.y, BRICK_BBOX_WIDTH, BRICK_BBOX_HEIGHT)

    def animation_id(self) -> int:
        """Animation shown for the brick."""
        return ID_ANI_BRICK


class Coin(GameObject):
    """A coin that can be collected; it does not block."""

    def bounding_box(self) -> tuple[float, float, float, float]:
        return _centered_box(self.x, self.y, COIN_BBOX_WIDTH, COIN_BBOX_HEIGHT)

    def animation_id(self) -> int:
        """Animation shown for the coin."""
        return ID_ANI_COIN

    def is_blocking(self) -> bool:
        return False


class Platform(GameObject):
    """A row of cells that can only be landed on from above."""

    def __init__(self, x: float, y: float, cell_width: float, cell_height: float,
                 length: int, sprite_id_begin: int, sprite_id_middle: int,
                 sprite_id_end: int) -> None:
        super().__init__(x, y)
        self.cell_width = cell_width
        self.cell_height = cell_height
        self.length = length
        self.sprite_id_begin = sprite_id_begin
        self.sprite_id_middle = sprite_id_middle
        self.sprite_id_end = sprite_id_end

    def bounding_box(self) -> tuple[float, float, float, float]:
        left = self.x - self.cell_width / 2
        top = self.y - self.cell_height / 2
        return left, top, left + self.cell_width * self.length, top + self.cell_height

    def sprite_layout(self) -> list[tuple[int, float, float]]:
        """Return (sprite id, x, y) for each drawn cell, left to right."""
        if self.length <= 0:
            return []
        ids = [self.sprite_id_begin]
        ids.extend([self.sprite_id_middle] * max(self.length - 2, 0))
        if self.length > 1:
            ids.append(self.sprite_id_end)
        return [(sprite_id, self.x + n * self.cell_width, self.y)
                for n, sprite_id in enumerate(ids)]

    def is_direction_collidable(self, nx: float, ny: float) -> bool:
        return nx == 0 and ny == -1


class Portal(GameObject):
    """A region that asks for a switch to another scene."""

    def __init__(self, left: float, top: float, right: float, bottom: float,
                 scene_id: int) -> None:
        super().__init__(left, top)
        self.scene_id = scene_id
        self.width = right - left
        self.height = bottom - top

    def bounding_box(self) -> tuple[float, float, float, float]:
        half_w = self.width / 2
        half_h = self.height / 2
        return self.x - half_w, self.y - half_h, self.x + half_w, self.y + half_h

    def is_blocking(self) -> bool:
        return False


class Goomba(GameObject):
    """A walking enemy that turns at walls and dies when stomped."""

    def __init__(self, x: float, y: float, clock: Callable[[], int] = now_ms) -> None:
        super().__init__(x, y)
        self.clock = clock
        self.ax = 0.0
        self.ay = GOOMBA_GRAVITY
        self.die_start = -1
        self.set_state(GOOMBA_STATE_WALKING)

    def bounding_box(self) -> tuple[float, float, float, float]:
        height = GOOMBA_BBOX_HEIGHT_DIE if self.state == GOOMBA_STATE_DIE else GOOMBA_BBOX_HEIGHT
        return _centered_box(self.x, self.y, GOOMBA_BBOX_WIDTH, height)

    def animation_id(self) -> int:
        """Animation for the current state."""
        return ID_ANI_GOOMBA_DIE if self.state == GOOMBA_STATE_DIE else ID_ANI_GOOMBA_WALKING

    def update(self, dt: int, co_objects: Sequence[GameObject] | None = None) -> None:
        self.vy += self.ay * dt
        self.vx += self.ax * dt
        if self.state == GOOMBA_STATE_DIE and self.clock() - self.die_start > GOOMBA_DIE_TIMEOUT:
            self.is_deleted = True
            return
        process(self, dt, co_objects)

    def set_state(self, state: int) -> None:
        super().set_state(state)
        if state == GOOMBA_STATE_DIE:
            self.die_start = self.clock()
            self.y += (GOOMBA_BBOX_HEIGHT - GOOMBA_BBOX_HEIGHT_DIE) // 2
            self.vx = 0.0
            self.vy = 0.0
            self.ay = 0.0
        elif state == GOOMBA_STATE_WALKING:
            self.vx = -GOOMBA_WALKING_SPEED

    def is_collidable(self) -> bool:
        return True

    def is_blocking(self) -> bool:
        return False

    def on_no_collision(self, dt: int) -> None:
        self.x += self.vx * dt
        self.y += self.vy * dt

    def on_collision_with(self, event: CollisionEvent) -> None:
        if not event.obj.is_blocking():
            return
        if isinstance(event.obj, Goomba):
            return
        if event.ny != 0:
            self.vy = 0.0
        elif event.nx != 0:
            self.vx = -self.vx