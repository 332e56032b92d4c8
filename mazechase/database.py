"""Named unit records (hit points, angle, speed) loaded from a token list."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Iterator

SEPARATOR = "|"
RECORD_LENGTH = 7

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _leading_int(text: str) -> int:
    """The integer at the start of ``text``, or 0 when there is none."""
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _leading_float(text: str) -> float:
    """The number at the start of ``text``, or 0.0 when there is none."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


@dataclass
class Element:
    """The stored properties of one kind of unit."""

    name: str = ""
    current_hp: int = 0
    max_hp: int = 0
    angle: float = 0.0
    acceleration: float = 0.0
    max_speed: float = 0.0


class Database:
    """Elements keyed by name.

    Each record in the token list has the form
    ``| name current_hp max_hp angle max_speed acceleration``.
    """

    def __init__(self) -> None:
        self._elements: dict[str, Element] = {}
        self.angle = 0.0

    def load(self, tokens: Iterable[str]) -> None:
        """Read records from ``tokens``; a name seen again updates its element."""
        tokens = list(tokens)
        key: str | None = None
        count = 0
        for index, token in enumerate(tokens):
            if token == SEPARATOR:
                if index + 1 >= len(tokens):
                    raise ValueError("record separator at the end of the data")
                key = tokens[index + 1]
                self._elements.setdefault(key, Element())
                if index != 0:
                    count += RECORD_LENGTH
                continue
            if key is None:
                raise ValueError("data does not start with a record separator")
            element = self._elements[key]
            field = index - count
            if field == 1:
                element.name = token
            elif field == 2:
                element.current_hp = _leading_int(token)
            elif field == 3:
                element.max_hp = _leading_int(token)
            elif field == 4:
                element.angle = _leading_float(token)
            elif field == 5:
                element.max_speed = _leading_float(token)
            elif field == 6:
                element.acceleration = _leading_float(token)

    def __getitem__(self, name: str) -> Element:
        return self._elements[name]

    def __contains__(self, name: object) -> bool:
        return name in self._elements

    def __iter__(self) -> Iterator[str]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)