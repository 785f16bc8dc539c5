"""A small side-scrolling platformer engine: scenes, sprites, animation and swept-AABB collision."""

__version__ = "0.1.0"
__all__ = [
    "animation",
    "collision",
    "gameobject",
    "keys",
    "mario",
    "objects",
    "scene",
    "sprites",
    "utils",
]