"""The collection of objects that make up a running game, and their interactions."""

from __future__ import annotations

import random
from enum import IntEnum
from typing import Iterator

from .entities import Ball, Bullet, Critter, Man
from .geometry import segment_distance_sq
from .rules import CLASSIC, Rules, Size, rand_frac
from .shape import Shape


class Collision(IntEnum):
    """Outcome of one collision check."""

    NONE = 0
    MAN = 1
    BIG = 2
    MEDIUM = 3
    SMALL = 4
    CRITTER = 5


_SPLIT_OUTCOME = {Size.BIG: Collision.BIG, Size.MEDIUM: Collision.MEDIUM}


class World:
    """All shapes in play, newest first, with the player among them."""

    def __init__(self, rules: Rules = CLASSIC, rng=None) -> None:
        self.rules = rules
        self.rng = rng if rng is not None else random.Random()
        self._shapes: list[Shape] = []
        self.man = Man(rules, self.rng)
        self.add(self.man)
        for _ in range(rules.num_balls):
            self.add(Ball.random(rules, self.rng))
        self.reposition(self.man)

    def __iter__(self) -> Iterator[Shape]:
        return iter(list(self._shapes))

    def __len__(self) -> int:
        return len(self._shapes)

    def __contains__(self, shape: object) -> bool:
        return any(s is shape for s in self._shapes)

    def add(self, shape: Shape) -> None:
        """Put a shape at the front of the world."""
        self._shapes.insert(0, shape)

    def remove(self, shape: Shape) -> None:
        """Take a shape out of the world; a shape not in it is ignored."""
        index = next((i for i, s in enumerate(self._shapes) if s is shape), None)
        if index is not None:
            del self._shapes[index]

    def move(self) -> None:
        """Advance every shape one frame and now and then spawn a critter."""
        for shape in list(self._shapes):
            shape.move()

        rules = self.rules
        if self.rng.randrange(rules.critter_spawn_odds) == 0:
            x = rand_frac(self.rng) * 2 * rules.half_width - rules.half_width
            y = (
                rand_frac(self.rng) * (rules.half_height - rules.critter_min_y)
                + rules.critter_min_y
            )
            self.add(Critter(rules, self.rng, x, y, rules.critter_speed))

    def reposition(self, man: Man) -> None:
        """Move every ball that overlaps the player somewhere else."""
        for shape in list(self._shapes):
            if isinstance(shape, Ball):
                while shape.distance_to(man) < shape.hit_radius() + man.hit_radius():
                    shape.reposition()

    def _bullet_hits(self, target: Shape, bullet: Bullet) -> bool:
        if target.distance_to(bullet) < target.hit_radius() + bullet.hit_radius():
            return True
        if not self.rules.cable_bullets:
            return False
        reach = target.hit_radius() + bullet.cable_radius
        cable = segment_distance_sq(
            target.x, target.y, bullet.anchor_x, bullet.anchor_y, bullet.x, bullet.y
        )
        return cable < reach * reach

    def collisions(self, bullet: Bullet | None, man: Man) -> Collision:
        """Check the first collision involving the player or the bullet and resolve it.

        A big or medium ball hit by the bullet splits, a small ball or a
        critter hit by it is removed; the bullet then reacts to the hit.
        """
        for shape in list(self._shapes):
            if isinstance(shape, Ball):
                if shape.distance_to(man) < shape.hit_radius() + man.hit_radius():
                    return Collision.MAN
                if bullet is not None and self._bullet_hits(shape, bullet):
                    if shape.size in _SPLIT_OUTCOME:
                        outcome = _SPLIT_OUTCOME[shape.size]
                        self.add(shape.split())
                    else:
                        outcome = Collision.SMALL
                        self.remove(shape)
                    bullet.register_hit()
                    return outcome
            elif isinstance(shape, Critter) and bullet is not None:
                if self._bullet_hits(shape, bullet):
                    self.remove(shape)
                    bullet.register_hit()
                    return Collision.CRITTER
        return Collision.NONE