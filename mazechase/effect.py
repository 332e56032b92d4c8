"""One-shot sprite-sheet effects such as explosions."""

from __future__ import annotations

from mazechase.animation import Animation


class Effect:
    """Plays through a sprite sheet once at a point, then switches off."""

    def __init__(self, image_width: int, image_height: int, frame_width: int, frame_height: int,
                 fps: int, elapsed: float):
        if min(image_width, image_height, frame_width, frame_height) <= 0:
            raise ValueError("image and frame sizes must be positive")
        if fps <= 0:
            raise ValueError("fps must be positive")
        self.x = 0
        self.y = 0
        self.elapsed = elapsed
        self.is_running = False
        self.animation = Animation(image_width, image_height, frame_width, frame_height)
        self.animation.set_default_play_frames(False, False)
        self.animation.set_fps(fps)
        self.animation.stop()

    def start(self, x: int, y: int) -> None:
        """Start playing centred on (x, y)."""
        self.x = int(x) - self.animation.frame_width // 2
        self.y = int(y) - self.animation.frame_height // 2
        self.is_running = True
        self.animation.start()

    def update(self) -> None:
        if not self.is_running:
            return
        self.animation.frame_update(self.elapsed)
        if not self.animation.playing:
            self.kill()

    def kill(self) -> None:
        self.is_running = False

    def frame_position(self) -> tuple[int, int]:
        """Top-left corner of the frame to draw on the sheet."""
        return self.animation.frame_position()