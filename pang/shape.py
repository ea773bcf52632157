"""Base class for every object living in the game world."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .geometry import distance
from .rules import Rules, rand_dom, rand_frac


def _wrap_angle(angle: float) -> float:
    if angle > 360:
        angle -= 360
    if angle < 0:
        angle += 360
    return angle


class Shape(ABC):
    """A world object with a position, velocity, spin and colour."""

    def __init__(self, rules: Rules, rng) -> None:
        self.rules = rules
        self.rng = rng
        self.x = 0.0
        self.y = 0.0
        self.z = 0.0
        self.vx = 0.0
        self.vy = 0.0
        self.vz = 0.0
        self.rotation = [0.0, 0.0, 0.0]
        self.spin = [0.0, 0.0, 0.0]
        self.color = (0.0, 0.0, 0.0)
        self.acc_ratio = 0.0
        self.number = rand_dom(rng, 0, 1_000_000)

    def move(self) -> None:
        """Advance one frame: apply velocity, spin and gravity, bounce off walls."""
        rules = self.rules
        self.x += rules.horizontal_damping * self.vx
        self.y += self.vy
        self.z += self.vz
        self.rotation = [r + rules.spin_rate * s for r, s in zip(self.rotation, self.spin)]

        self.vy += rules.gravity_rate * rules.gravity * self.acc_ratio

        if self.x <= -rules.half_width:
            self.x = -rules.half_width
            self.vx = rules.left_wall_bounce * self.vx
        if self.y <= -rules.half_height:
            self.y = -rules.half_height
            self.vy = rules.floor_bounce * rules.ball_speed * (rand_frac(self.rng) + 0.2)
        if self.x >= rules.half_width:
            self.x = rules.half_width
            self.vx = -self.vx
        if self.y >= rules.half_height:
            self.y = rules.half_height
            self.vy = rules.ceiling_bounce * rules.ball_speed

        self.rotation = [_wrap_angle(r) for r in self.rotation]

    def distance_to(self, other: Shape) -> float:
        """Distance between this shape and another in the x/y plane."""
        return distance(self.x, self.y, other.x, other.y)

    @abstractmethod
    def hit_radius(self) -> float:
        """Radius used for collision tests."""