"""A gauge bar and a clickable button."""

from __future__ import annotations

from enum import Enum
from typing import Callable

from mazechase.geometry import Rect, rect_make, rect_make_center
from mazechase.keys import VK_LBUTTON, KeyState


class ProgressBar:
    """A bar whose filled width shows a current value against a maximum."""

    def __init__(self, x: int, y: int, width: int, height: int):
        self.x = x
        self.y = y
        self.bar_width = width
        self.bar_height = height
        self.rect: Rect = rect_make(x, y, width, height)
        self.width: float = float(width)

    def set_gauge(self, current: float, maximum: float) -> None:
        """Fill the bar in proportion to ``current`` out of ``maximum``."""
        self.width = (current / maximum) * self.bar_width

    def update(self) -> None:
        """Re-centre the bar on its position."""
        self.rect = rect_make_center(self.x, self.y, self.bar_width, self.bar_height)


class ButtonState(Enum):
    NONE = 0
    UP = 1
    DOWN = 2


class Button:
    """Calls ``callback`` when pressed and released inside its rectangle."""

    def __init__(self, x: int, y: int, width: int, height: int,
                 down_frame: tuple[int, int], up_frame: tuple[int, int],
                 callback: Callable[[], object]):
        self.x = x
        self.y = y
        self.down_frame = down_frame
        self.up_frame = up_frame
        self.callback = callback
        self.state = ButtonState.NONE
        self.rect: Rect = rect_make_center(x, y, width, height)

    def update(self, keys: KeyState, mouse: tuple[float, float]) -> None:
        if self.rect.contains(*mouse):
            if keys.is_once_key_down(VK_LBUTTON):
                self.state = ButtonState.DOWN
            elif keys.is_once_key_up(VK_LBUTTON) and self.state is ButtonState.DOWN:
                self.state = ButtonState.UP
                self.callback()
        else:
            self.state = ButtonState.NONE

    def frame(self) -> tuple[int, int]:
        """Sprite frame matching the button's state."""
        if self.state is ButtonState.DOWN:
            return self.down_frame
        return self.up_frame