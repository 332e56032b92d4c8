"""Moving a sprite in a straight line to a point over a set time."""

from __future__ import annotations

import math
from typing import Protocol

from mazechase.geometry import angle, distance


class Positioned(Protocol):
    x: float
    y: float


class MoveAction:
    """Slides a sprite to a destination, arriving after a given duration."""

    def __init__(self) -> None:
        self.sprite: Positioned | None = None
        self.start_x = self.start_y = 0.0
        self.end_x = self.end_y = 0.0
        self.angle = 0.0
        self.travel_range = 0.0
        self.world_time_count = 0.0
        self.duration = 0.0
        self.is_moving = False

    def move_to(self, sprite: Positioned, end_x: float, end_y: float, duration: float,
                world_time: float) -> None:
        """Begin a move; ignored while a move is already under way."""
        if self.is_moving:
            return
        if duration <= 0:
            raise ValueError("duration must be positive")
        self.sprite = sprite
        self.end_x, self.end_y = end_x, end_y
        self.start_x, self.start_y = sprite.x, sprite.y
        self.travel_range = distance(self.start_x, self.start_y, end_x, end_y)
        self.angle = angle(self.start_x, self.start_y, end_x, end_y)
        self.world_time_count = world_time
        self.duration = duration
        self.is_moving = True

    def update(self, elapsed: float, world_time: float) -> None:
        """Advance by ``elapsed`` seconds; snap to the end once the time is up."""
        if not self.is_moving:
            return
        sprite = self.sprite
        speed = (elapsed / self.duration) * self.travel_range
        sprite.x += math.cos(self.angle) * speed
        sprite.y += -math.sin(self.angle) * speed
        if self.duration + self.world_time_count <= world_time:
            self.world_time_count = world_time
            sprite.x, sprite.y = self.end_x, self.end_y
            self.is_moving = False