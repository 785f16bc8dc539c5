"""Scenes: loading assets and objects from text files and running them."""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import IntEnum
from pathlib import Path

from .animation import Animation, AnimationRegistry
from .gameobject import GameObject, now_ms
from .keys import KeyEventHandler, SampleKeyHandler
from .mario import Mario
from .objects import Brick, Coin, Goomba, Platform, Portal
from .sprites import SpriteRegistry, TextureRegistry
from .utils import split

logger = logging.getLogger(__name__)

ID_TEX_MARIO = 0
ID_TEX_ENEMY = 10
ID_TEX_MISC = 20

ID_SPRITE_MARIO = 10000
ID_SPRITE_BRICK = 20000
ID_SPRITE_GOOMBA = 30000
ID_SPRITE_COIN = 40000
ID_SPRITE_CLOUD = 50000
ID_SPRITE_CLOUD_BEGIN = ID_SPRITE_CLOUD + 1000
ID_SPRITE_CLOUD_MIDDLE = ID_SPRITE_CLOUD + 2000
ID_SPRITE_CLOUD_END = ID_SPRITE_CLOUD + 3000

_INT_RE = re.compile(r"\s*([+-]?\d+)")
_FLOAT_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class ObjectType(IntEnum):
    """Object type codes used in the [OBJECTS] section of a scene file."""

    MARIO = 0
    BRICK = 1
    GOOMBA = 2
    KOOPAS = 3
    COIN = 4
    PLATFORM = 5
    PORTAL = 50


def _to_int(text: str) -> int:
    """Read a leading integer, 0 when there is none."""
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else 0


def _to_float(text: str) -> float:
    """Read a leading decimal number, 0.0 when there is none."""
    match = _FLOAT_RE.match(text)
    return float(match.group(1)) if match else 0.0


def _data_lines(path: str | Path):
    """Yield (section header or None, line) for each meaningful line of ``path``."""
    with open(path, encoding="utf-8") as handle:
        for raw in handle:
            line = raw.rstrip("\n")
            if line.startswith("#"):
                continue
            yield line


class Scene(ABC):
    """A scene identified by an id and backed by a description file."""

    def __init__(self, scene_id: int, file_path: str | Path) -> None:
        self.id = scene_id
        self.file_path = file_path
        self.key_handler: KeyEventHandler | None = None

    @abstractmethod
    def load(self) -> None:
        """Read the scene file and build the scene."""

    @abstractmethod
    def unload(self) -> None:
        """Drop everything the scene holds."""

    @abstractmethod
    def update(self, dt: int, screen_width: int, screen_height: int) -> None:
        """Advance the scene by ``dt`` ms."""


class PlayScene(Scene):
    """A playable scene: a player plus the objects around it."""

    def __init__(self, scene_id: int, file_path: str | Path,
                 textures: TextureRegistry | None = None,
                 sprites: SpriteRegistry | None = None,
                 animations: AnimationRegistry | None = None,
                 clock: Callable[[], int] = now_ms) -> None:
        super().__init__(scene_id, file_path)
        self.textures = textures if textures is not None else TextureRegistry()
        self.sprites = sprites if sprites is not None else SpriteRegistry()
        self.animations = animations if animations is not None else AnimationRegistry()
        self.clock = clock
        self.player: Mario | None = None
        self.objects: list[GameObject] = []
        self.camera: tuple[float, float] = (0.0, 0.0)
        self.key_handler = SampleKeyHandler(self)

    def _parse_sprite(self, line: str) -> None:
        tokens = split(line)
        if len(tokens) < 6:
            return
        sprite_id, left, top, right, bottom, texture_id = (_to_int(t) for t in tokens[:6])
        if texture_id not in self.textures:
            logger.error("Texture ID %d not found!", texture_id)
            return
        self.sprites.add(sprite_id, left, top, right, bottom, self.textures.get(texture_id))

    def _parse_animation(self, line: str) -> None:
        tokens = split(line)
        if len(tokens) < 3:
            return
        animation = Animation()
        animation_id = _to_int(tokens[0])
        for sprite_text, time_text in zip(tokens[1::2], tokens[2::2]):
            sprite_id = _to_int(sprite_text)
            if sprite_id in self.sprites:
                sprite = self.sprites.get(sprite_id)
            else:
                logger.error("Sprite ID %d not found!", sprite_id)
                sprite = None
            animation.add(sprite, _to_int(time_text))
        self.animations.add(animation_id, animation)

    def _parse_asset(self, line: str) -> None:
        tokens = split(line)
        if tokens and tokens[0]:
            self.load_assets(tokens[0])

    def _parse_object(self, line: str) -> None:
        tokens = split(line)
        if len(tokens) < 3:
            return
        object_type = _to_int(tokens[0])
        x = _to_float(tokens[1])
        y = _to_float(tokens[2])

        obj: GameObject
        if object_type == ObjectType.MARIO:
            if self.player is not None:
                logger.error("MARIO object was created before!")
                return
            obj = self.player = Mario(x, y, self.clock)
            logger.info("Player object has been created!")
        elif object_type == ObjectType.GOOMBA:
            obj = Goomba(x, y, self.clock)
        elif object_type == ObjectType.BRICK:
            obj = Brick(x, y)
        elif object_type == ObjectType.COIN:
            obj = Coin(x, y)
        elif object_type == ObjectType.PLATFORM:
            if len(tokens) < 9:
                raise ValueError(f"platform line needs 9 fields: {line!r}")
            obj = Platform(x, y, _to_float(tokens[3]), _to_float(tokens[4]),
                           _to_int(tokens[5]), _to_int(tokens[6]),
                           _to_int(tokens[7]), _to_int(tokens[8]))
        elif object_type == ObjectType.PORTAL:
            if len(tokens) < 6:
                raise ValueError(f"portal line needs 6 fields: {line!r}")
            obj = Portal(x, y, _to_float(tokens[3]), _to_float(tokens[4]), _to_int(tokens[5]))
        else:
            logger.error("Invalid object type: %d", object_type)
            return

        obj.x, obj.y = x, y
        self.objects.append(obj)

    def load_assets(self, asset_file: str | Path) -> None:
        """Read [SPRITES] and [ANIMATIONS] sections from ``asset_file``."""
        logger.info("Start loading assets from: %s", asset_file)
        parsers = {"[SPRITES]": self._parse_sprite, "[ANIMATIONS]": self._parse_animation}
        parse = None
        for line in _data_lines(asset_file):
            if line.startswith("["):
                parse = parsers.get(line)
                continue
            if parse is not None and line:
                parse(line)
        logger.info("Done loading assets from %s", asset_file)

    def load(self) -> None:
        """Read [ASSETS] and [OBJECTS] sections from the scene file."""
        logger.info("Start loading scene from: %s", self.file_path)
        parsers = {"[ASSETS]": self._parse_asset, "[OBJECTS]": self._parse_object}
        parse = None
        for line in _data_lines(self.file_path):
            if line.startswith("["):
                parse = parsers.get(line)
                continue
            if parse is not None and line:
                parse(line)
        logger.info("Done loading scene %s", self.file_path)

    def update(self, dt: int, screen_width: int, screen_height: int) -> None:
        """Update every object, move the camera after the player and purge deleted objects.

        The player is expected to be the first object; it is left out of the
        objects the others collide with.
        """
        co_objects = self.objects[1:]
        for obj in list(self.objects):
            obj.update(dt, co_objects)

        if self.player is None:
            return

        cx = self.player.x - screen_width // 2
        if cx < 0:
            cx = 0.0
        self.camera = (cx, 0.0)

        self.purge_deleted_objects()

    def unload(self) -> None:
        """Remove all objects and forget the player."""
        self.objects.clear()
        self.player = None
        logger.info("Scene %d unloaded!", self.id)

    def clear(self) -> None:
        """Remove all objects."""
        self.objects.clear()

    def purge_deleted_objects(self) -> None:
        """Drop objects that were marked deleted."""
        self.objects = [obj for obj in self.objects if not obj.is_deleted]