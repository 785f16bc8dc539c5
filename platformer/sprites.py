"""Texture and sprite databases."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Texture:
    """A texture known by the file it was loaded from."""

    path: str
    width: int = -1
    height: int = -1


@dataclass(frozen=True)
class Sprite:
    """A rectangular region of a texture."""

    sprite_id: int
    left: int
    top: int
    right: int
    bottom: int
    texture: Texture


class TextureRegistry:
    """Maps texture ids to textures."""

    def __init__(self) -> None:
        self._textures: dict[int, Texture] = {}

    def add(self, texture_id: int, path: str) -> Texture:
        """Register the texture at ``path`` under ``texture_id``."""
        texture = Texture(path)
        self._textures[texture_id] = texture
        return texture

    def get(self, texture_id: int) -> Texture:
        """Return the texture with ``texture_id``; raise KeyError if unknown."""
        try:
            return self._textures[texture_id]
        except KeyError:
            raise KeyError(f"texture id {texture_id} not found") from None

    def clear(self) -> None:
        """Forget all textures."""
        self._textures.clear()

    def __contains__(self, texture_id: object) -> bool:
        return texture_id in self._textures

    def __len__(self) -> int:
        return len(self._textures)


class SpriteRegistry:
    """Maps sprite ids to sprites."""

    def __init__(self) -> None:
        self._sprites: dict[int, Sprite] = {}

    def add(self, sprite_id: int, left: int, top: int, right: int, bottom: int,
            texture: Texture) -> Sprite:
        """Create a sprite and store it under ``sprite_id``, replacing any previous one."""
        sprite = Sprite(sprite_id, left, top, right, bottom, texture)
        self._sprites[sprite_id] = sprite
        return sprite

    def get(self, sprite_id: int) -> Sprite:
        """Return the sprite with ``sprite_id``; raise KeyError if unknown."""
        try:
            return self._sprites[sprite_id]
        except KeyError:
            raise KeyError(f"sprite id {sprite_id} not found") from None

    def clear(self) -> None:
        """Forget all sprites."""
        self._sprites.clear()

    def __contains__(self, sprite_id: object) -> bool:
        return sprite_id in self._sprites

    def __len__(self) -> int:
        return len(self._sprites)