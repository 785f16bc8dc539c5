import pytest

from platformer.sprites import Sprite, SpriteRegistry, Texture, TextureRegistry


def test_texture_add_and_get():
    textures = TextureRegistry()
    added = textures.add(20, "textures/misc.png")
    assert textures.get(20) is added
    assert added.path == "textures/misc.png"
    assert 20 in textures


def test_texture_unknown_id_raises():
    with pytest.raises(KeyError):
        TextureRegistry().get(7)


def test_texture_clear_forgets_everything():
    textures = TextureRegistry()
    textures.add(0, "a.png")
    textures.add(10, "b.png")
    assert len(textures) == 2
    textures.clear()
    assert len(textures) == 0
    with pytest.raises(KeyError):
        textures.get(0)


def test_sprite_add_and_get_keeps_fields():
    texture = Texture("mario.png")
    sprites = SpriteRegistry()
    sprites.add(10001, 1, 2, 3, 4, texture)
    sprite = sprites.get(10001)
    assert sprite == Sprite(10001, 1, 2, 3, 4, texture)
    assert sprite.texture is texture


def test_sprite_add_replaces_existing():
    texture = Texture("mario.png")
    sprites = SpriteRegistry()
    sprites.add(5, 0, 0, 1, 1, texture)
    sprites.add(5, 8, 8, 9, 9, texture)
    assert sprites.get(5).left == 8
    assert len(sprites) == 1


def test_sprite_unknown_and_clear():
    sprites = SpriteRegistry()
    sprites.add(1, 0, 0, 1, 1, Texture("x.png"))
    sprites.clear()
    assert 1 not in sprites
    with pytest.raises(KeyError):
        sprites.get(1)