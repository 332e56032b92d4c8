"""Bullets and missiles: pooled, spawned, aimed and rotating projectiles."""

from __future__ import annotations

import math
from dataclasses import dataclass

from mazechase.geometry import PI2, PI8, PI16, Rect, distance, rect_make_center

PRELOADED_SPEED = 5.0
SPAWNED_SPEED = 6.0
FRAME_DELAY = 5


@dataclass
class Projectile:
    """One bullet in flight; ``rect`` is centred on its position."""

    x: float = 0.0
    y: float = 0.0
    width: int = 0
    height: int = 0
    angle: float = 0.0
    radius: float = 0.0
    speed: float = 0.0
    fire_x: float = 0.0
    fire_y: float = 0.0
    is_fire: bool = False
    count: int = 0
    frame: int = 0

    @property
    def rect(self) -> Rect:
        return rect_make_center(self.x, self.y, self.width, self.height)

    def travelled(self) -> float:
        """Distance from where the projectile was fired."""
        return distance(self.fire_x, self.fire_y, self.x, self.y)


def _launch(x: float, y: float, width: int, height: int, **fields) -> Projectile:
    return Projectile(x=x, y=y, fire_x=x, fire_y=y, width=width, height=height, **fields)


def _step(projectile: Projectile, scale: float = 1.0) -> None:
    projectile.x += math.cos(projectile.angle) * projectile.speed * scale
    projectile.y += -math.sin(projectile.angle) * projectile.speed * scale


class PreloadedMissiles:
    """A fixed pool of missiles, loaded up front and fired straight up."""

    def __init__(self, count: int, fire_range: float, width: int, height: int):
        self.range = fire_range
        self.bullets = [
            Projectile(width=width, height=height, speed=PRELOADED_SPEED) for _ in range(count)
        ]

    def fire(self, x: float, y: float) -> Projectile | None:
        """Launch the first idle missile; returns it, or None if all are flying."""
        for bullet in self.bullets:
            if bullet.is_fire:
                continue
            bullet.is_fire = True
            bullet.x = bullet.fire_x = x
            bullet.y = bullet.fire_y = y
            return bullet
        return None

    def move(self) -> None:
        for bullet in self.bullets:
            if not bullet.is_fire:
                continue
            bullet.y -= bullet.speed
            if self.range < bullet.travelled():
                bullet.is_fire = False

    def active(self) -> list[Projectile]:
        return [bullet for bullet in self.bullets if bullet.is_fire]


class SpawnedMissiles:
    """Missiles created when fired and dropped once out of range."""

    def __init__(self, maximum: int, fire_range: float, width: int, height: int):
        self.maximum = maximum
        self.range = fire_range
        self.width = width
        self.height = height
        self.bullets: list[Projectile] = []

    def fire(self, x: float, y: float) -> Projectile | None:
        if self.maximum < len(self.bullets):
            return None
        bullet = _launch(x, y, self.width, self.height, speed=SPAWNED_SPEED, is_fire=True)
        self.bullets.append(bullet)
        return bullet

    def move(self) -> None:
        for bullet in self.bullets:
            bullet.y -= bullet.speed
        self.bullets = [b for b in self.bullets if not self.range < b.travelled()]

    def advance_frames(self, max_frame: int) -> None:
        """Count one drawn frame; every fifth one steps the animation frame."""
        for bullet in self.bullets:
            bullet.count += 1
            if bullet.count % FRAME_DELAY == 0:
                bullet.frame = min(bullet.frame + 1, max_frame)
                if bullet.frame >= max_frame:
                    bullet.frame = 0
                bullet.count = 0

    def remove(self, index: int) -> None:
        del self.bullets[index]


class Bullets:
    """Bullets fired along an angle, created on demand."""

    def __init__(self, maximum: int, fire_range: float, width: int, height: int):
        self.maximum = maximum
        self.range = fire_range
        self.width = width
        self.height = height
        self.bullets: list[Projectile] = []

    def fire(self, x: float, y: float, angle: float, speed: float) -> Projectile | None:
        if self.maximum < len(self.bullets):
            return None
        bullet = _launch(x, y, self.width, self.height, angle=angle, speed=speed,
                         radius=self.width // 2, is_fire=True)
        self.bullets.append(bullet)
        return bullet

    def move(self) -> None:
        for bullet in self.bullets:
            _step(bullet)
        self.bullets = [b for b in self.bullets if not self.range < b.travelled()]

    def remove(self, index: int) -> None:
        del self.bullets[index]


class RotatingMissiles:
    """Missiles whose sprite frame follows their heading; speed is per second."""

    def __init__(self, maximum: int, fire_range: float, width: int, height: int):
        self.maximum = maximum
        self.range = fire_range
        self.width = width
        self.height = height
        self.bullets: list[Projectile] = []

    def fire(self, x: float, y: float, angle: float, speed: float) -> Projectile | None:
        if self.maximum < len(self.bullets):
            return None
        bullet = _launch(x, y, self.width, self.height, angle=angle, speed=speed,
                         radius=self.width // 2, is_fire=True,
                         frame=rotation_frame(angle))
        self.bullets.append(bullet)
        return bullet

    def move(self, elapsed: float) -> None:
        for bullet in self.bullets:
            _step(bullet, elapsed)
        self.bullets = [b for b in self.bullets if not self.range < b.travelled()]


def rotation_frame(angle: float) -> int:
    """Which of the 16 direction frames shows a heading of ``angle`` radians."""
    shifted = angle + PI16
    if shifted >= PI2:
        shifted -= PI2
    return int(shifted / PI8)