"""Frame sequencing for sprite-sheet animations."""

from __future__ import annotations


class Animation:
    """Steps through frames of a sprite sheet at a fixed rate."""

    def __init__(self, total_width: int, total_height: int, frame_width: int, frame_height: int):
        self.frame_width = frame_width
        self.frame_height = frame_height
        columns = total_width // frame_width
        rows = total_height // frame_height
        self.frame_count = columns * rows
        self.frames: list[tuple[int, int]] = [
            (col * frame_width, row * frame_height)
            for row in range(rows)
            for col in range(columns)
        ]
        self.play_list: list[int] = []
        self.loop = False
        self.frame_update_sec = 0.0
        self.elapsed_sec = 0.0
        self.index = 0
        self.playing = False
        self.set_default_play_frames()

    def set_default_play_frames(self, reverse: bool = False, loop: bool = False) -> None:
        """Play every frame in order; with ``reverse``, play back again afterwards."""
        self.loop = loop
        forward = list(range(self.frame_count))
        self.play_list = forward + forward[::-1] if reverse else forward

    def set_play_frames(self, frames, loop: bool = False) -> None:
        """Play the given frame numbers in the given order."""
        self.loop = loop
        self.play_list = list(frames)

    def set_play_range(self, start: int, end: int, reverse: bool = False, loop: bool = False) -> None:
        """Play frames from ``start`` to ``end``; with ``reverse``, come back again."""
        self.loop = loop
        self.play_list = []
        if start == end:
            self.stop()
            return
        if start > end:
            self.play_list = list(range(start, end - 1, -1))
            if reverse:
                self.play_list += list(range(end + 1, start + 1))
        else:
            self.play_list = list(range(start, end + 1))
            if reverse:
                self.play_list += list(range(end - 1, start - 1, -1))

    def set_fps(self, fps: int) -> None:
        self.frame_update_sec = 1.0 / fps

    def frame_update(self, elapsed: float) -> None:
        """Advance by ``elapsed`` seconds, moving at most one frame."""
        if not self.playing:
            return
        self.elapsed_sec += elapsed
        if self.elapsed_sec >= self.frame_update_sec:
            self.elapsed_sec -= self.frame_update_sec
            self.index += 1
            if self.index == len(self.play_list):
                if self.loop:
                    self.index = 0
                else:
                    self.index -= 1
                    self.playing = False

    def start(self) -> None:
        self.playing = True
        self.index = 0

    def stop(self) -> None:
        self.playing = False
        self.index = 0

    def pause(self) -> None:
        self.playing = False

    def resume(self) -> None:
        self.playing = True

    def frame_position(self) -> tuple[int, int]:
        """Top-left corner of the current frame on the sheet."""
        return self.frames[self.play_list[self.index]]