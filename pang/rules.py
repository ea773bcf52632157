"""Game constants, ball sizes and the random helpers shared by every object."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum


class Size(IntEnum):
    """Ball sizes; a ball's radius grows linearly with its size."""

    SMALL = 1
    MEDIUM = 2
    BIG = 3

    @property
    def color(self) -> tuple[float, float, float]:
        """RGB colour a ball of this size is drawn with."""
        return _SIZE_COLORS[self]


_SIZE_COLORS = {
    Size.BIG: (0.9, 0.0, 0.0),
    Size.MEDIUM: (0.9, 0.5, 0.0),
    Size.SMALL: (0.9, 0.9, 0.0),
}


@dataclass(frozen=True)
class Rules:
    """Tunable physics and world parameters for one flavour of the game.

    The world is a rectangle centred on the origin. ``cable_bullets``
    selects harpoon shots that climb to the ceiling on a cable and retract,
    instead of plain shots that vanish when they leave the world.
    """

    cable_bullets: bool = False
    world_width: float = 20.0
    world_height: float = 20.0
    ball_speed: float = 0.1
    bullet_speed: float = 0.9
    num_balls: int = 5
    gravity: float = -9.8
    horizontal_damping: float = 0.3
    spin_rate: float = 0.1
    gravity_rate: float = 0.0007
    left_wall_bounce: float = -0.1
    floor_bounce: float = 0.3
    ceiling_bounce: float = -0.1
    ball_accel: float = 0.0005
    split_ball_accel: float = 0.001
    fire_rate: float = 0.1
    ball_radius_unit: float = 0.3
    man_radius: float = 0.25
    bullet_radius: float = 0.2
    critter_radius: float = 0.4
    cable_radius: float = 0.05
    man_start_y: float = -9.0
    critter_spawn_odds: int = 12000
    critter_speed: float = 0.001
    critter_min_y: float = 2.0

    def __post_init__(self) -> None:
        if self.world_width <= 0 or self.world_height <= 0:
            raise ValueError("world dimensions must be positive")
        if self.num_balls < 0:
            raise ValueError("num_balls must not be negative")
        if self.critter_spawn_odds < 1:
            raise ValueError("critter_spawn_odds must be at least 1")

    @property
    def half_width(self) -> float:
        return self.world_width / 2

    @property
    def half_height(self) -> float:
        return self.world_height / 2

    @property
    def bullet_velocity(self) -> float:
        """Vertical speed of a freshly fired bullet."""
        return self.fire_rate * self.bullet_speed


CLASSIC = Rules()

CABLE = Rules(
    cable_bullets=True,
    spin_rate=0.05,
    gravity_rate=0.00035,
    left_wall_bounce=-0.025,
    floor_bounce=0.075,
    ceiling_bounce=-0.0125,
    ball_accel=0.0001,
    split_ball_accel=0.0005,
    fire_rate=0.015,
)


def rand_frac(rng) -> float:
    """Return a uniformly distributed fraction in [0, 1)."""
    return rng.random()


def rand_dom(rng, lo: int, hi: int) -> int:
    """Return a random integer in the inclusive range [lo, hi]."""
    return int(math.floor(rand_frac(rng) * ((hi - lo) + 0.999999))) + lo