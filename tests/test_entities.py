import random

import pytest

from pang.entities import Ball, Bullet, BulletState, Critter, Man
from pang.rules import CABLE, CLASSIC, Size


@pytest.fixture
def rng():
    return random.Random(1234)


def test_ball_constructor_uses_size_colour_and_split_accel(rng):
    ball = Ball(CLASSIC, rng, Size.MEDIUM, 1.5, -2.0, 1)
    assert ball.size == Size.MEDIUM
    assert ball.color == Size.MEDIUM.color
    assert ball.acc_ratio == CLASSIC.split_ball_accel
    assert (ball.x, ball.y) == (1.5, -2.0)
    assert abs(ball.vx) <= CLASSIC.ball_speed
    assert ball.vy == 0.0
    assert all(0.0 <= s < 0.5 for s in ball.spin)


def test_random_ball_is_big_and_inside_range(rng):
    for _ in range(50):
        ball = Ball.random(CLASSIC, rng)
        assert ball.size == Size.BIG
        assert ball.color == Size.BIG.color
        assert ball.acc_ratio == CLASSIC.ball_accel
        assert 0 <= ball.x <= CLASSIC.world_width
        assert 0 <= ball.y <= CLASSIC.world_height
        assert abs(ball.vx) <= CLASSIC.ball_speed


def test_random_ball_uses_rules_accel_for_cable_rules(rng):
    ball = Ball.random(CABLE, rng)
    assert ball.acc_ratio == CABLE.ball_accel


@pytest.mark.parametrize("size", [Size.SMALL, Size.MEDIUM, Size.BIG])
def test_hit_radius_scales_with_size(rng, size):
    ball = Ball(CLASSIC, rng, size, 0.0, 0.0)
    assert ball.hit_radius() == pytest.approx(CLASSIC.ball_radius_unit * int(size))


def test_split_big_ball(rng):
    ball = Ball(CLASSIC, rng, Size.BIG, 3.0, 4.0)
    child = ball.split()
    assert ball.size == Size.MEDIUM
    assert child.size == Size.MEDIUM
    assert ball.color == Size.MEDIUM.color
    assert child.color == Size.MEDIUM.color
    assert (child.x, child.y) == (ball.x, ball.y)
    assert child is not ball


def test_split_medium_then_small_refuses(rng):
    ball = Ball(CLASSIC, rng, Size.MEDIUM, 0.0, 0.0)
    child = ball.split()
    assert ball.size == Size.SMALL
    assert child.size == Size.SMALL
    with pytest.raises(ValueError):
        ball.split()


def test_invalid_size_rejected(rng):
    with pytest.raises(ValueError):
        Ball(CLASSIC, rng, 7, 0.0, 0.0)


def test_reposition_lands_on_grid_inside_world(rng):
    ball = Ball(CLASSIC, rng, Size.BIG, 100.0, 100.0)
    for _ in range(100):
        ball.reposition()
        assert -CLASSIC.half_width <= ball.x < CLASSIC.half_width
        assert -CLASSIC.half_height <= ball.y < CLASSIC.half_height
        assert ball.z == 0.0
        assert round(ball.x * 10) == pytest.approx(ball.x * 10)
        assert round(ball.y * 10) == pytest.approx(ball.y * 10)


def test_critter_moves_and_wraps_right(rng):
    critter = Critter(CLASSIC, rng, CLASSIC.half_width, 5.0, CLASSIC.critter_speed)
    critter.move()
    assert critter.x == -CLASSIC.half_width
    assert critter.y == 5.0


def test_critter_wraps_left(rng):
    critter = Critter(CLASSIC, rng, -CLASSIC.half_width, 5.0, -CLASSIC.critter_speed)
    critter.move()
    assert critter.x == CLASSIC.half_width


def test_critter_plain_step_and_radius(rng):
    critter = Critter(CLASSIC, rng, 0.0, 3.0, 0.5)
    critter.move()
    assert critter.x == pytest.approx(0.5)
    assert critter.hit_radius() == CLASSIC.critter_radius
    assert all(0.0 <= c < 1.0 for c in critter.color)


def test_man_starts_at_start_spot(rng):
    man = Man(CLASSIC, rng)
    assert (man.x, man.y, man.z) == (0.0, CLASSIC.man_start_y, 0.0)
    assert man.hit_radius() == CLASSIC.man_radius


def test_man_strafe_and_reset(rng):
    man = Man(CLASSIC, rng)
    man.strafe(1.0, 0.5, 0.0)
    man.strafe(1.0, 0.0, 0.0)
    assert man.x == pytest.approx(2.0)
    assert man.y == pytest.approx(CLASSIC.man_start_y + 0.5)
    man.reset_position()
    assert (man.x, man.y, man.z) == (0.0, CLASSIC.man_start_y, 0.0)
    assert (man.vx, man.vy, man.vz) == (0.0, 0.0, 0.0)


@pytest.mark.parametrize("rules", [CLASSIC, CABLE])
def test_man_fires_bullet_upwards_from_his_position(rng, rules):
    man = Man(rules, rng)
    man.strafe(2.0, 0.0, 0.0)
    bullet = man.fire()
    assert (bullet.x, bullet.y) == (man.x, man.y)
    assert (bullet.anchor_x, bullet.anchor_y) == (man.x, man.y)
    assert bullet.vx == 0.0
    assert bullet.vy == pytest.approx(rules.bullet_velocity)
    assert bullet.state is BulletState.UP
    assert bullet.active


def test_classic_bullet_dies_when_leaving_world(rng):
    bullet = Bullet(CLASSIC, rng, 0.0, 0.0, 0.0, 1.0)
    steps = 0
    while bullet.active and steps < 1000:
        bullet.move()
        steps += 1
    assert not bullet.active
    assert bullet.state is BulletState.INACTIVE
    assert bullet.y > CLASSIC.half_height


def test_classic_bullet_hit_deactivates(rng):
    bullet = Bullet(CLASSIC, rng, 0.0, 0.0, 0.0, 0.1)
    bullet.register_hit()
    assert not bullet.active
    assert bullet.state is BulletState.INACTIVE


def test_cable_bullet_climbs_then_retracts(rng):
    start_y = CABLE.man_start_y
    bullet = Bullet(CABLE, rng, 0.0, start_y, 0.0, CABLE.bullet_velocity)
    highest = bullet.y
    saw_down = False
    for _ in range(20000):
        if not bullet.active:
            break
        bullet.move()
        highest = max(highest, bullet.y)
        saw_down = saw_down or bullet.state is BulletState.DOWN
    assert saw_down
    assert highest >= CABLE.half_height
    assert not bullet.active
    assert bullet.state is BulletState.INACTIVE
    assert bullet.y <= bullet.anchor_y


def test_cable_bullet_hit_retracts_but_stays_active(rng):
    bullet = Bullet(CABLE, rng, 0.0, 0.0, 0.0, 0.5)
    bullet.move()
    bullet.register_hit()
    assert bullet.state is BulletState.DOWN
    assert bullet.active
    bullet.move()
    assert not bullet.active
    assert bullet.y <= bullet.anchor_y


def test_inactive_cable_bullet_does_not_move(rng):
    bullet = Bullet(CABLE, rng, 1.0, 2.0, 0.3, 0.5)
    bullet.state = BulletState.INACTIVE
    bullet.move()
    assert (bullet.x, bullet.y) == (1.0, 2.0)


def test_cable_length_and_radius(rng):
    bullet = Bullet(CABLE, rng, 0.0, 0.0, 0.0, 0.5)
    assert bullet.cable_length == 0.0
    bullet.move()
    bullet.move()
    assert bullet.cable_length == pytest.approx(bullet.y - bullet.anchor_y)
    assert bullet.cable_radius == CABLE.cable_radius
    assert bullet.hit_radius() == CABLE.bullet_radius