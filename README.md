# railshot

Game-side logic for a rail shooter, with no rendering, window or input
backend. Everything is driven one frame at a time from your own loop: you
pass in the names of the keys that are held or pressed, and read positions,
matrices and states back.

## Install

    pip install .

To run the tests:

    pip install .[test]
    pytest

## Modules

### `railshot.vecmath`

`Vector2`, `Vector3`, `Vector4` and an immutable `Matrix4x4`. Matrices use
the row-vector convention, so translation sits in the last row.

- `Vector3` supports `+`, `-`, and `*` and `/` with another `Vector3`
  (component-wise) or with a number. `Vector2 * Vector2` is component-wise.
- `Matrix4x4` supports `+`, `-` and `*` (matrix product).
- Functions: `cot`, `add`, `subtract`, `multiply`, `dot`, `length`,
  `distance_squared`, `normalize`, `inverse`, `transpose`, `make_identity`,
  `make_rotate_x`, `make_rotate_y`, `make_rotate_z`, `make_rotate_xyz`,
  `make_rotate_xyz_from`, `make_translate`, `make_scale`, `make_affine`,
  `transform`, `transform_normal`, `make_perspective_fov`,
  `make_orthographic` and `make_viewport`.
- `normalize` raises `ZeroDivisionError` for the zero vector, `inverse`
  raises `ValueError` for a singular matrix, and `transform` raises
  `ValueError` when the transformed `w` is 0.
- `distance_squared` returns the squared distance; no square root is taken.

### `railshot.shake`

`Shake` moves a position around its origin by random x/y offsets. After
`start()`, every `time + 1` calls to `update()` it takes one step; the offset
range shrinks linearly over `count` steps and the position then snaps back to
the origin. Defaults are `time=2`, `count=25`, `size=60`; change them with
`set_parameters(time, count, size)`. Offsets come from `random_value`, an
integer between the bounds divided by 100. Pass a `random.Random` to the
constructor for repeatable shakes. `attach(target)` shakes
`target.translation`; `set_origin(position)` and `value()` work without a
target.

### `railshot.timed_call`

`TimedCall(callback, timer)` counts down once per `update()` and calls
`callback` when the counter reaches zero; `is_finished()` tells whether it
has run. The counter is an unsigned 32-bit value, so a timer of 0 wraps
around instead of firing at once.

### `railshot.skydome`

`SkyDome` keeps two sky segments, starting at z = -10 and z = 990, that move
toward the camera by `move_speed` (0.5 by default) per `update()`. A segment
that reaches z <= -1010 jumps back to z = 990. `positions()` returns both.

### `railshot.rail_camera`

`RailCamera(position, rotation, is_changing=None)` rolls about Z by 0.05 per
frame while `"A"` or `"D"` is among the keys given to `update(keys)`, unless
`is_changing()` returns true. It owns a `Shake` on its own translation
(`shake_start()` starts it) and exposes `world_matrix()` and `view_matrix()`,
the latter being the inverse of the former.

### `railshot.slots`

- `SlotTable(size)`: a set of bits with `set`, `reset`, `clear`, `test` and
  `find_first`, which returns the lowest clear index (or the capacity rounded
  up to 64 when every bit is set). Indexes out of range raise `IndexError`.
- `TextureRegistry(directory="Resources/", capacity=1024)`: `load(file_name)`
  returns the same handle for the same name and otherwise takes the lowest
  free slot. Names starting with `./` are used as given; others are joined to
  the directory (`full_path`). A missing file raises `FileNotFoundError`, a
  full registry raises `RegistryFullError`. `unload(handle)` returns `False`
  for a handle outside the registry and raises `ValueError` for an empty
  slot. `reset_all()` forgets everything.

### `railshot.enemy_script`

`EnemyPopScript(text)` (or `EnemyPopScript.from_file(path)`) reads one
command per line:

- `POP,z,angle_degrees,hit_point,rotate_speed` spawns an enemy; the angle
  is converted to radians.
- `WAIT,frames` stops reading for that many frames.
- `RETRY` starts the script over from the first line.
- Lines starting with `//` are comments.

Each `update()` returns the list of `EnemySpawn` records produced that frame.
Numbers are read from the leading numeric part of each field, and a missing
number reads as 0.

`GameJudge(kill_count=50)` tracks a session: `record_kill()` counts down
(and returns `False` once a change is under way), and `update(player_hit_point)`
starts a change when the kill count reaches 0 (clear) or the player's hit
points reach 0 (over). After 90 more frames it sets `clear` or `over`.
`restart()` continues after a game over.

### `railshot.flow`

`GameFlow(scene_factory, max_fade=30)` moves between the `Screen` states
`TITLE`, `GAME`, `CLEAR` and `OVER`. Call `update(pressed)` with the keys
pressed this frame:

- On the title and clear screens, `"SPACE"` fades out and moves on (to a new
  game, or back to the title).
- On the game-over screen, `"SPACE"` returns to the title and `"R"` resumes
  the same scene with 3 hit points.

The scene made by `scene_factory` needs `update()`, `is_clear()`,
`is_over()` and `set_hit_point(value)`. `fade_alpha()` gives the overlay
opacity from 0 (clear) to 1 (black).

## Example

```python
from railshot.vecmath import Vector3, make_affine, transform
from railshot.enemy_script import EnemyPopScript

m = make_affine(Vector3(1, 1, 1), Vector3(0, 0, 0), Vector3(0, 0, 10))
print(transform(Vector3(1, 2, 3), m))  # Vector3(x=1.0, y=2.0, z=13.0)

script = EnemyPopScript("POP,50,90,3,0.01\nWAIT,60\n")
spawns = script.update()  # [EnemySpawn(pos_z=50.0, rotate_z=1.5707..., hit_point=3, rotate_speed=0.01)]
```

## What it does not do

- It draws nothing and opens no window: there are no models, sprites or
  screens, only the positions, matrices and states to draw from.
- It reads no keyboard or gamepad; you pass key names in.
- It plays no sound.
- `TextureRegistry` only checks that a file exists and hands out handles; it
  does not decode or upload images.
- There are no enemies, player or boomerang behaviours and no collision
  handling; `EnemyPopScript` only says what to spawn and when.
- There is no command to run; the package is a library.