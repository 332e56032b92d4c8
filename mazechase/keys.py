"""Edge-detecting keyboard and mouse-button state."""

from __future__ import annotations

from typing import Callable

KEY_MAX = 256

VK_LBUTTON = 0x01
VK_ESCAPE = 0x1B
VK_SPACE = 0x20
VK_LEFT = 0x25
VK_UP = 0x26
VK_RIGHT = 0x27
VK_DOWN = 0x28
VK_F1 = 0x70
VK_F2 = 0x71


def key_code(key: int | str) -> int:
    """Accept a key code or a single character such as 'Z'."""
    return ord(key) if isinstance(key, str) else key


class KeyState:
    """Answers press, release, hold and toggle questions about keys.

    ``pressed(key)`` reports whether a key is held right now and
    ``toggled(key)`` whether its toggle state is on.
    """

    def __init__(self, pressed: Callable[[int], bool], toggled: Callable[[int], bool] | None = None):
        self._pressed = pressed
        self._toggled = toggled if toggled is not None else (lambda key: False)
        self._key_down: set[int] = set()
        self._key_up: set[int] = set()

    @staticmethod
    def _check(key: int | str) -> int:
        code = key_code(key)
        if not 0 <= code < KEY_MAX:
            raise ValueError(f"key code out of range: {code}")
        return code

    def is_once_key_down(self, key: int | str) -> bool:
        """True only on the first check after the key goes down."""
        code = self._check(key)
        if self._pressed(code):
            if code not in self._key_down:
                self._key_down.add(code)
                return True
        else:
            self._key_down.discard(code)
        return False

    def is_once_key_up(self, key: int | str) -> bool:
        """True only on the first check after the key is released."""
        code = self._check(key)
        if self._pressed(code):
            self._key_up.add(code)
        elif code in self._key_up:
            self._key_up.discard(code)
            return True
        return False

    def is_stay_key_down(self, key: int | str) -> bool:
        """True for as long as the key is held."""
        return bool(self._pressed(self._check(key)))

    def is_toggle_key(self, key: int | str) -> bool:
        """True while the key's toggle state is on."""
        return bool(self._toggled(self._check(key)))