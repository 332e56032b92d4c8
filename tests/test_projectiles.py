import math

import pytest

from mazechase.geometry import PI8, distance, rect_make_center
from mazechase.projectiles import (
    PRELOADED_SPEED,
    SPAWNED_SPEED,
    Bullets,
    PreloadedMissiles,
    RotatingMissiles,
    SpawnedMissiles,
    rotation_frame,
)


def test_preloaded_pool_fires_until_exhausted():
    pool = PreloadedMissiles(2, 400, 26, 124)
    assert pool.fire(10, 20) is not None
    assert pool.fire(30, 40) is not None
    assert pool.fire(50, 60) is None
    assert len(pool.active()) == 2


def test_preloaded_moves_up_and_expires():
    pool = PreloadedMissiles(1, PRELOADED_SPEED * 2, 26, 124)
    bullet = pool.fire(100, 200)
    pool.move()
    assert bullet.y == 200 - PRELOADED_SPEED
    assert bullet.x == 100
    pool.move()
    assert bullet.is_fire
    pool.move()
    assert not bullet.is_fire
    assert pool.fire(1, 2) is bullet


def test_projectile_rect_is_centred():
    pool = PreloadedMissiles(1, 400, 26, 124)
    bullet = pool.fire(100, 200)
    assert bullet.rect == rect_make_center(100, 200, 26, 124)


def test_spawned_allows_one_past_maximum():
    missiles = SpawnedMissiles(2, 500, 32, 64)
    results = [missiles.fire(0, 0) for _ in range(5)]
    assert len(missiles.bullets) == 3
    assert results[3] is None


def test_spawned_moves_and_drops_out_of_range():
    missiles = SpawnedMissiles(5, SPAWNED_SPEED, 32, 64)
    missiles.fire(0, 100)
    missiles.move()
    assert missiles.bullets[0].y == 100 - SPAWNED_SPEED
    missiles.move()
    assert missiles.bullets == []


def test_spawned_frames_advance_and_wrap():
    missiles = SpawnedMissiles(5, 500, 32, 64)
    bullet = missiles.fire(0, 0)
    for _ in range(4):
        missiles.advance_frames(2)
    assert bullet.frame == 0
    missiles.advance_frames(2)
    assert bullet.frame == 1
    for _ in range(5):
        missiles.advance_frames(2)
    assert bullet.frame == 0


def test_spawned_remove():
    missiles = SpawnedMissiles(5, 500, 32, 64)
    missiles.fire(1, 1)
    second = missiles.fire(2, 2)
    missiles.remove(0)
    assert missiles.bullets == [second]
    with pytest.raises(IndexError):
        missiles.remove(3)


def test_bullets_travel_along_angle():
    bullets = Bullets(10, 700, 20, 20)
    bullet = bullets.fire(100, 100, 0.0, 7.0)
    assert bullet.radius == 10
    bullets.move()
    assert bullet.x == pytest.approx(107.0)
    assert bullet.y == pytest.approx(100.0)


def test_bullets_up_angle_moves_up_screen():
    bullets = Bullets(10, 700, 20, 20)
    bullet = bullets.fire(100, 100, math.pi / 2, 7.0)
    bullets.move()
    assert bullet.y < 100
    assert bullet.x == pytest.approx(100.0)


def test_bullets_expire_and_remove():
    bullets = Bullets(10, 5, 20, 20)
    bullets.fire(0, 0, 0.0, 3.0)
    bullets.move()
    assert len(bullets.bullets) == 1
    bullets.move()
    assert bullets.bullets == []
    with pytest.raises(IndexError):
        bullets.remove(0)


def test_rotating_missiles_scale_by_elapsed():
    missiles = RotatingMissiles(30, 400, 32, 32)
    bullet = missiles.fire(50, 50, 0.0, 400.0)
    missiles.move(0.01)
    assert distance(50, 50, bullet.x, bullet.y) == pytest.approx(400.0 * 0.01)


def test_rotating_missiles_expire():
    missiles = RotatingMissiles(30, 10, 32, 32)
    missiles.fire(0, 0, 1.0, 400.0)
    missiles.move(1.0)
    assert missiles.bullets == []


@pytest.mark.parametrize("step", range(16))
def test_rotation_frame_matches_heading(step):
    assert rotation_frame(PI8 * step) == step


def test_rotation_frame_wraps_near_full_turn():
    assert rotation_frame(2 * math.pi - 0.01) == rotation_frame(0.0)