# pang

This is the simulation core of a Pang-style arcade game. Big balls bounce around a
rectangular world that is centred on the origin. When a bullet hits a big or medium ball,
the ball splits into two balls one size smaller. When a bullet hits a small ball, the ball
is removed. Now and then a critter appears in the upper part of the world and drifts
sideways, and it can be shot too.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `pang.rules`

- `Rules` is a frozen dataclass that holds every tunable value: world size, ball speed,
  gravity, bounce factors, hit radii, the critter spawn odds, and more. It raises
  `ValueError` in any of these cases:
  - the world dimensions are not positive;
  - `num_balls` is negative;
  - `critter_spawn_odds` is below 1.
- Two presets are provided:
  - `CLASSIC`: plain shots that disappear when they leave the world.
  - `CABLE`: harpoon shots (`cable_bullets=True`) with slower physics. A harpoon climbs to
    the ceiling and then retracts to its anchor. Its cable also counts for collisions.
- `Size` is an `IntEnum` with the values `SMALL`, `MEDIUM` and `BIG`. Each value has a
  `color` property.
- `rand_frac(rng)` returns a fraction in [0, 1).
- `rand_dom(rng, lo, hi)` returns an integer in the range [lo, hi].

### `pang.geometry`

- `distance(x1, y1, x2, y2)` returns the distance between two points in the plane.
- `segment_distance_sq(px, py, ax, ay, bx, by)` returns the squared distance from point P to
  the segment AB.

### `pang.texture`

- `load_raw_texture(width, height, path)` reads a raw 24-bit BGR image and returns its
  pixels as RGB `bytes`. It raises `OSError` if the file cannot be opened. It raises
  `ValueError` if the dimensions are negative or the file is too short.

### `pang.shape`

- `Shape` is the abstract base class for world objects. It offers:
  - `move()`: applies velocity, spin and gravity, and bounces off the walls.
  - `distance_to(other)`: the distance to another shape.
  - `hit_radius()`: the radius used for collisions.

### `pang.entities`

- `Ball`
  - `Ball.random(rules, rng)` creates a big ball at a random position.
  - `split()` shrinks the ball and returns the new, smaller ball. It raises `ValueError`
    for a small ball.
  - `reposition()` moves the ball to a random position on a 0.1 grid.
- `Critter` drifts horizontally and wraps around the world.
- `Man` is the player. It offers:
  - `strafe(dx, dy, dz)`
  - `fire()`, which returns a `Bullet`
  - `reset_position()`
- `Bullet` and `BulletState`
  - `BulletState` has the values `INACTIVE`, `UP` and `DOWN`.
  - A bullet has `active`, `state`, `anchor_x`, `anchor_y`, `cable_radius` and
    `cable_length`.
  - `register_hit()` makes the bullet react to a hit. A harpoon retracts; a plain shot
    disappears.

### `pang.world`

- `World(rules=CLASSIC, rng=None)` holds the player (`world.man`) and the starting balls.
  Balls that overlap the player are moved away. Newest shapes come first.
  - A world supports `iter`, `len` and `in`.
  - `add(shape)` and `remove(shape)` put shapes in and take them out.
  - `move()` advances one frame and sometimes spawns a critter.
  - `reposition(man)` moves every ball that overlaps the player.
  - `collisions(bullet, man)` resolves the first collision it finds and returns a
    `Collision`. The possible values are `NONE`, `MAN`, `BIG`, `MEDIUM`, `SMALL` and
    `CRITTER`.

## Example

```python
import random

from pang.rules import CABLE
from pang.world import Collision, World

rng = random.Random(42)
world = World(CABLE, rng)

bullet = world.man.fire()
for _ in range(1000):
    world.move()
    bullet.move()
    result = world.collisions(bullet, world.man)
    if result is not Collision.NONE:
        print("collision:", result.name)
        break
    if not bullet.active:
        bullet = world.man.fire()
```

If you pass a seeded `random.Random`, a run can be repeated exactly.

## What this package does not do

The package does not draw anything, read input or run a game loop. It also has no
command-line program. To use it, you supply your own rendering, controls and timing. Each
frame, call `World.move`, `Bullet.move` and `World.collisions`.