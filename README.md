# platformer

A small engine for side-scrolling platform games that does not depend on any renderer. It
has no dependencies beyond the standard library.

## Modules

- `platformer.utils`
  - `split(line, delimiter="\t")` splits one line of a scene or asset file.
  - Empty fields are kept.

- `platformer.sprites`
  - `Texture` is a texture known by its file path.
  - `Sprite` is a rectangle of a texture.
  - `TextureRegistry` and `SpriteRegistry` each provide `add`, `get` and `clear`.
  - `get` raises `KeyError` for an unknown id.

- `platformer.animation`
  - `AnimationFrame` holds one sprite and a time.
  - `Animation.add(sprite, time=0)` appends a frame. A time of 0 means the default of 100 ms.
  - `Animation.advance(now)` takes a time in milliseconds and returns the frame to show. It moves on at most one frame per call and loops.
  - `AnimationRegistry` logs a warning when an id is added twice.

- `platformer.gameobject`
  - `GameObject` is the abstract base. It has position (`x`, `y`), speed (`vx`, `vy`), `state` and `is_deleted`.
  - Its collision hooks are `is_collidable`, `is_blocking`, `is_direction_collidable`, `on_no_collision` and `on_collision_with`.
  - `now_ms()` is the default monotonic millisecond clock.

- `platformer.collision`
  - `swept_aabb(...)` sweeps one box against another and returns `(t, nx, ny)`. `t` is -1 when there is no hit.
  - `sweep`, `scan` and `filter_events` build and select `CollisionEvent`s.
  - `process(src, dt, co_objects)` moves an object for `dt` ms.
    - It stops the object at blocking objects and pushes it slightly clear.
    - It reports every collision through `on_collision_with`, non-blocking ones included.

- `platformer.objects`
  - `Brick` is solid.
  - `Coin` does not block.
  - `Platform` can only be landed on from above. `sprite_layout()` gives the sprite id and position of each cell.
  - `Portal` does not block and carries a `scene_id`.
  - `Goomba` walks, turns at walls and falls. With state `GOOMBA_STATE_DIE` it flattens and is marked deleted 500 ms later.

- `platformer.mario`
  - `Mario` can walk, run, jump, release a jump, sit and die.
  - He has a small and a big level and a time during which he is untouchable.
  - Jumping on a goomba kills it. Being hit by one shrinks or kills Mario.
  - Touching a coin deletes it and counts it in `coin`.
  - Touching a portal stores its id in `requested_scene`.
  - `animation_id()` returns the animation for his current state.

- `platformer.scene`
  - `ObjectType` lists the object codes.
  - `Scene` is the abstract base.
  - `PlayScene`:
    - reads scene files and asset files;
    - updates every object each frame;
    - moves `camera` to follow the player;
    - removes deleted objects.

- `platformer.keys`
  - `Key` holds the scan codes the game reacts to.
  - `SampleKeyHandler` maps key presses, releases and held keys to Mario states. `PlayScene.key_handler` is one of these.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## File format

Lines are tab separated. A line starting with `#` is a comment. A line starting with `[` opens a section, and an unknown section is skipped.

A scene file has `[ASSETS]` and `[OBJECTS]` sections:

```
[ASSETS]
mario.txt

[OBJECTS]
# type	x	y	...
0	120	10
1	100	180
5	90	136	16	15	16	51000	52000	53000
50	300	100	320	120	2
```

Object types:

| Code | Object | Extra fields |
|------|--------|--------------|
| 0 | Mario | – |
| 1 | brick | – |
| 2 | goomba | – |
| 4 | coin | – |
| 5 | platform | cell width, cell height, length, begin/middle/end sprite ids |
| 50 | portal | right, bottom, target scene id |

Further rules for `[OBJECTS]`:

- A second Mario line is ignored with an error in the log, and so is an unknown type.
- A platform or portal line with too few fields raises `ValueError`.

An asset file has `[SPRITES]` lines and `[ANIMATIONS]` lines:

- `[SPRITES]`: `id left top right bottom texture_id`.
- `[ANIMATIONS]`: `id sprite_id time sprite_id time ...`.

Sprite lines refer to textures that must already be registered in the scene's `TextureRegistry`.

## Using it

```python
from platformer.scene import PlayScene

scene = PlayScene(1, "scene1.txt")
scene.textures.add(0, "mario.png")
scene.load()
scene.update(16, 320, 240)   # elapsed ms, screen width, screen height
print(scene.camera, scene.player.coin)
```

The player should be the first object in the scene file. It is left out of the objects the others collide with.

## What it does not do

- The package draws nothing and opens no window.
- Textures are only recorded by path; no image is read.
- There is no game loop, keyboard polling or game file listing several scenes.
- A portal touch only sets `Mario.requested_scene`. Switching scenes is left to the caller.