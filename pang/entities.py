"""The concrete world objects: balls, critters, the player and his shots."""

from __future__ import annotations

from enum import Enum

from .rules import Rules, Size, rand_dom, rand_frac
from .shape import Shape


class Ball(Shape):
    """A bouncing ball that splits into two smaller ones when shot."""

    def __init__(
        self,
        rules: Rules,
        rng,
        size: Size | int = Size.BIG,
        x: float = 0.0,
        y: float = 0.0,
        kind: int = 1,
    ) -> None:
        super().__init__(rules, rng)
        self.size = Size(size)
        self.kind = kind
        self.x = float(x)
        self.y = float(y)
        self.z = 0.0
        self.rotation = [0.0, 0.0, 0.0]
        self.spin = [rand_frac(rng) * 0.5 for _ in range(3)]
        self.vx = 2 * (rand_frac(rng) - 0.5) * rules.ball_speed
        self.vy = 0.0
        self.vz = 0.0
        self.color = self.size.color
        self.acc_ratio = rules.split_ball_accel

    @classmethod
    def random(cls, rules: Rules, rng) -> Ball:
        """Create a big ball at a random spot with the initial acceleration."""
        x = rand_dom(rng, 0, int(rules.world_width))
        y = rand_dom(rng, 0, int(rules.world_height))
        ball = cls(rules, rng, Size.BIG, x, y, 1)
        ball.acc_ratio = rules.ball_accel
        return ball

    def split(self) -> Ball:
        """Shrink this ball by one size and return a new ball of the new size.

        Raises ``ValueError`` for a small ball, which cannot be split.
        """
        if self.size == Size.SMALL:
            raise ValueError("a small ball cannot be split")
        smaller = Size(self.size - 1)
        child = Ball(self.rules, self.rng, smaller, self.x, self.y, 1)
        self.size = smaller
        self.color = smaller.color
        return child

    def hit_radius(self) -> float:
        return self.rules.ball_radius_unit * self.size

    def reposition(self) -> None:
        """Move the ball to a random spot on a 0.1 grid inside the world."""
        span_x = int(self.rules.world_width * 10)
        span_y = int(self.rules.world_height * 10)
        self.x = (self.rng.randrange(span_x) - int(self.rules.world_width * 5)) / 10.0
        self.y = (self.rng.randrange(span_y) - int(self.rules.world_height * 5)) / 10.0
        self.z = 0.0


class Critter(Shape):
    """A little bird drifting horizontally and wrapping around the world."""

    def __init__(self, rules: Rules, rng, x: float, y: float, speed: float) -> None:
        super().__init__(rules, rng)
        self.x = float(x)
        self.y = float(y)
        self.z = 0.0
        self.speed = speed
        self.color = (rand_frac(rng), rand_frac(rng), rand_frac(rng))

    def move(self) -> None:
        self.x += self.speed
        half = self.rules.half_width
        if self.x > half:
            self.x = -half
        if self.x < -half:
            self.x = half

    def hit_radius(self) -> float:
        return self.rules.critter_radius


_MAN_COLOR = (0.2, 0.4, 0.3)


class Man(Shape):
    """The player, standing near the floor and firing upwards."""

    def __init__(self, rules: Rules, rng) -> None:
        super().__init__(rules, rng)
        self.reset_position()
        self.acc_ratio = 0.0

    def strafe(self, dx: float, dy: float, dz: float) -> None:
        """Shift the player by the given offsets."""
        self.x += dx
        self.y += dy
        self.z += dz

    def fire(self) -> Bullet:
        """Return a new bullet leaving the player's position upwards."""
        return Bullet(self.rules, self.rng, self.x, self.y, 0.0, self.rules.bullet_velocity)

    def hit_radius(self) -> float:
        return self.rules.man_radius

    def reset_position(self) -> None:
        """Put the player back at the start spot, at rest."""
        self.x = 0.0
        self.y = self.rules.man_start_y
        self.z = 0.0
        self.rotation = [90.0, 0.0, 0.0]
        self.spin = [0.0, 0.0, 0.0]
        self.vx = 0.0
        self.vy = 0.0
        self.vz = 0.0
        self.color = _MAN_COLOR


class BulletState(Enum):
    """Flight phase of a bullet."""

    INACTIVE = 0
    UP = 1
    DOWN = 2


class Bullet(Shape):
    """A shot fired by the player.

    With plain rules it flies straight and dies when it leaves the world.
    With cable rules it climbs to the ceiling, then retracts to its anchor.
    """

    def __init__(
        self, rules: Rules, rng, x: float, y: float, vx: float, vy: float
    ) -> None:
        super().__init__(rules, rng)
        self.state = BulletState.UP
        self.active = True
        self.anchor_x = float(x)
        self.anchor_y = float(y)
        self.x = float(x)
        self.y = float(y)
        self.z = 0.0
        self.rotation = [-90.0, 0.0, 0.0]
        self.spin = [0.0, 0.0, 0.0]
        self.vx = vx
        self.vy = vy
        self.vz = 0.0
        self.color = (0.9, 0.9, 0.0)
        self.acc_ratio = 0.0

    @property
    def cable_radius(self) -> float:
        return self.rules.cable_radius

    @property
    def cable_length(self) -> float:
        """Length of cable between the anchor and the tip, never negative."""
        return max(0.0, self.y - self.anchor_y)

    def move(self) -> None:
        if self.rules.cable_bullets:
            self._move_on_cable()
        else:
            self._move_free()

    def _move_free(self) -> None:
        self.x += self.vx
        self.y += self.vy
        rules = self.rules
        if (
            self.x < -rules.half_width
            or self.x > rules.half_width
            or self.y < -rules.half_height
            or self.y > rules.half_height
        ):
            self._deactivate()

    def _move_on_cable(self) -> None:
        if self.state is BulletState.UP:
            self.x += self.vx
            self.y += self.vy
            if self.y >= self.rules.half_height:
                self.state = BulletState.DOWN
        elif self.state is BulletState.DOWN:
            self.x += self.vx
            self.y -= self.vy
            if self.y <= self.anchor_y:
                self._deactivate()

    def _deactivate(self) -> None:
        self.state = BulletState.INACTIVE
        self.active = False

    def hit_radius(self) -> float:
        return self.rules.bullet_radius

    def register_hit(self) -> None:
        """React to hitting a target: retract on a cable, otherwise vanish."""
        if self.rules.cable_bullets:
            self.state = BulletState.DOWN
        else:
            self._deactivate()