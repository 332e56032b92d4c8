"""Frame timing: elapsed time per tick, world time and frames per second."""

from __future__ import annotations

import time
from typing import Callable


class Timer:
    """Measures time between ticks and can hold the frame rate down."""

    def __init__(self, clock: Callable[[], float] | None = None):
        self._clock = clock if clock is not None else time.perf_counter
        self._last_time = self._clock()
        self.elapsed_time = 0.0
        self.world_time = 0.0
        self.frame_rate = 0
        self._fps_frame_count = 0
        self._fps_time_elapsed = 0.0

    def tick(self, lock_fps: float = 0.0) -> float:
        """Record one frame; with ``lock_fps`` wait until a frame's time has passed.

        Returns the time elapsed since the previous tick.
        """
        current = self._clock()
        elapsed = current - self._last_time
        if lock_fps > 0.0:
            frame_time = 1.0 / lock_fps
            while elapsed < frame_time:
                current = self._clock()
                elapsed = current - self._last_time

        self._last_time = current
        self.elapsed_time = elapsed
        self._fps_frame_count += 1
        self._fps_time_elapsed += elapsed
        self.world_time += elapsed

        if self._fps_time_elapsed > 1.0:
            self.frame_rate = self._fps_frame_count
            self._fps_frame_count = 0
            self._fps_time_elapsed = 0.0
        return elapsed

    def status_lines(self, debug: bool = False) -> list[str]:
        """Text lines for an on-screen timing display."""
        lines = [f"framePerSec (FPS) : {self.frame_rate}"]
        if debug:
            lines.append(f"worldTime : {self.world_time:f}")
            lines.append(f"elapsedTime : {self.elapsed_time:f}")
        return lines