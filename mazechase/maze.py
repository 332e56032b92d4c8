"""The tile maze: tile kinds, wall artwork selection and the binary file format."""

from __future__ import annotations

import os
import struct
from enum import IntEnum
from pathlib import Path
from typing import Iterable, Iterator

from mazechase.geometry import TILE_SIZE, TILES_X, TILES_Y, Rect, rect_make

_INT = struct.Struct("<i")


class TileKind(IntEnum):
    """What occupies a maze tile."""

    EMPTY = 0
    ITEM = 1
    WALL = 2
    PLAYER = 3
    MOB = 4


# Sprite-sheet frames (column, row) used for tiles that are not walls.
TILE_FRAMES = {
    TileKind.EMPTY: (19, 1),
    TileKind.ITEM: (16, 1),
    TileKind.PLAYER: (19, 1),
    TileKind.MOB: (19, 1),
}

# Wall frames keyed by whether the (left, right, up, down) neighbours are walls.
_T, _F = True, False

_INTERIOR_WALLS = {
    (_F, _F, _F, _F): 0,
    (_T, _F, _F, _F): 1,
    (_F, _F, _T, _F): 2,
    (_F, _T, _F, _F): 3,
    (_F, _F, _F, _T): 4,
    (_T, _F, _T, _F): 5,
    (_T, _T, _F, _F): 6,
    (_T, _F, _F, _T): 7,
    (_F, _T, _T, _F): 8,
    (_F, _F, _T, _T): 9,
    (_F, _T, _F, _T): 10,
    (_F, _T, _T, _T): 11,
    (_T, _T, _F, _T): 12,
    (_T, _F, _T, _T): 13,
    (_T, _T, _T, _F): 14,
    (_T, _T, _T, _T): 15,
}

_TOP_WALLS = {
    (_F, _F, _F, _F): 0,
    (_T, _F, _F, _F): 1,
    (_F, _T, _F, _F): 3,
    (_F, _F, _F, _T): 4,
    (_T, _T, _F, _F): 6,
    (_T, _T, _F, _T): 12,
}

_BOTTOM_WALLS = {
    (_F, _F, _F, _F): 0,
    (_T, _F, _F, _F): 1,
    (_F, _F, _T, _F): 2,
    (_F, _T, _F, _F): 3,
    (_T, _T, _F, _F): 6,
    (_T, _T, _T, _F): 14,
}

_LEFT_EDGE_WALLS = {
    (_T, _F, _F, _F): 0,
    (_T, _F, _T, _F): 2,
    (_T, _T, _F, _F): 3,
    (_T, _F, _F, _T): 4,
    (_T, _T, _T, _F): 8,
    (_T, _F, _T, _T): 9,
    (_T, _T, _F, _T): 10,
    (_T, _T, _T, _T): 11,
}

_RIGHT_EDGE_WALLS = {
    (_F, _T, _F, _F): 0,
    (_T, _T, _F, _F): 1,
    (_F, _T, _T, _F): 2,
    (_F, _T, _F, _T): 4,
    (_T, _T, _T, _F): 5,
    (_T, _T, _F, _T): 7,
    (_F, _T, _T, _T): 9,
    (_T, _T, _T, _T): 13,
}


class Maze:
    """A rectangular grid of tile values, indexed as ``maze[x, y]``."""

    def __init__(self, cells: Iterable[Iterable[int]]):
        rows = [[int(value) for value in row] for row in cells]
        if not rows or not rows[0]:
            raise ValueError("a maze needs at least one tile")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("all maze rows must have the same length")
        self._cells = rows

    @classmethod
    def empty(cls, width: int = TILES_X, height: int = TILES_Y) -> Maze:
        """A maze of the given size filled with empty tiles."""
        return cls([[TileKind.EMPTY] * width for _ in range(height)])

    @property
    def width(self) -> int:
        return len(self._cells[0])

    @property
    def height(self) -> int:
        return len(self._cells)

    def _check(self, pos: tuple[int, int]) -> tuple[int, int]:
        x, y = pos
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"tile ({x}, {y}) is outside the maze")
        return x, y

    def __getitem__(self, pos: tuple[int, int]) -> int:
        x, y = self._check(pos)
        return self._cells[y][x]

    def __setitem__(self, pos: tuple[int, int], value: int) -> None:
        x, y = self._check(pos)
        self._cells[y][x] = int(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Maze):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Maze(width={self.width}, height={self.height})"

    def find(self, kind: int) -> Iterator[tuple[int, int]]:
        """Yield the positions holding ``kind``, row by row."""
        for y, row in enumerate(self._cells):
            for x, value in enumerate(row):
                if value == kind:
                    yield x, y

    def tile_rect(self, x: int, y: int) -> Rect:
        """Screen rectangle covered by the tile at (x, y)."""
        return rect_make(x * TILE_SIZE, y * TILE_SIZE, TILE_SIZE, TILE_SIZE)

    def _wall_beside(self, x: int, y: int, dx: int, dy: int) -> bool:
        # Neighbours are looked up in row-major order, so stepping off the
        # left or right edge lands on the end of the adjacent row.
        index = (y + dy) * self.width + (x + dx)
        if not 0 <= index < self.width * self.height:
            return False
        row, col = divmod(index, self.width)
        return self._cells[row][col] == TileKind.WALL

    def wall_frame(self, x: int, y: int) -> tuple[int, int] | None:
        """Sprite frame for the wall at (x, y), picked from its wall neighbours.

        Returns None for tiles that are not walls or for neighbour layouts
        that have no artwork.
        """
        if self[x, y] != TileKind.WALL:
            return None
        last_x, last_y = self.width - 1, self.height - 1
        corners = {(0, 0): 10, (last_x, 0): 7, (0, last_y): 8, (last_x, last_y): 5}
        if (x, y) in corners:
            return corners[x, y], 0
        key = (
            self._wall_beside(x, y, -1, 0),
            self._wall_beside(x, y, 1, 0),
            self._wall_beside(x, y, 0, -1),
            self._wall_beside(x, y, 0, 1),
        )
        if y == 0:
            table = _TOP_WALLS
        elif y == last_y:
            table = _BOTTOM_WALLS
        elif x == 0:
            table = _LEFT_EDGE_WALLS
        elif x == last_x:
            table = _RIGHT_EDGE_WALLS
        else:
            table = _INTERIOR_WALLS
        frame = table.get(key)
        return None if frame is None else (frame, 0)

    def to_bytes(self) -> bytes:
        """Tiles as little-endian 32-bit integers, row by row."""
        values = [value for row in self._cells for value in row]
        return struct.pack(f"<{len(values)}i", *values)

    @classmethod
    def from_bytes(cls, data: bytes, width: int = TILES_X, height: int = TILES_Y) -> Maze:
        """Read tiles written by :meth:`to_bytes`; missing tiles are empty."""
        needed = width * height * _INT.size
        data = bytes(data[:needed]).ljust(needed, b"\x00")
        values = struct.unpack(f"<{width * height}i", data)
        return cls(values[row * width:(row + 1) * width] for row in range(height))


def load_maze(path: str | os.PathLike, width: int = TILES_X, height: int = TILES_Y) -> Maze:
    """Load a maze file; raises FileNotFoundError when it does not exist."""
    return Maze.from_bytes(Path(path).read_bytes(), width, height)


def save_maze(maze: Maze, path: str | os.PathLike) -> None:
    Path(path).write_bytes(maze.to_bytes())


def load_score(path: str | os.PathLike) -> int:
    """The stored high score, or 0 when none has been saved."""
    try:
        data = Path(path).read_bytes()
    except FileNotFoundError:
        return 0
    return _INT.unpack(data[:_INT.size].ljust(_INT.size, b"\x00"))[0]


def save_score(score: int, path: str | os.PathLike) -> None:
    Path(path).write_bytes(_INT.pack(score))