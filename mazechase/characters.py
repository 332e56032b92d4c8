"""The player and the monsters that chase it through the maze."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from operator import attrgetter

from mazechase.geometry import TILE_SIZE, Rect, distance, rect_make
from mazechase.keys import VK_DOWN, VK_LEFT, VK_RIGHT, VK_UP, KeyState
from mazechase.maze import Maze, TileKind

CHASE_RANGE = 250
_STEP_COST = 10


class Direction(IntEnum):
    NOMOVE = 0
    LEFT = 1
    UP = 2
    RIGHT = 3
    DOWN = 4


def _is_wall(maze: Maze, x: int, y: int) -> bool:
    if 0 <= x < maze.width and 0 <= y < maze.height:
        return maze[x, y] == TileKind.WALL
    return False


class Character(ABC):
    """Something that walks the maze tile by tile."""

    def __init__(self, tile_x: int, tile_y: int, speed: float):
        self.x = float(tile_x * TILE_SIZE)
        self.y = float(tile_y * TILE_SIZE)
        self.tile_x = tile_x
        self.tile_y = tile_y
        self.speed = float(speed)
        self.direction = Direction.NOMOVE
        self.exist = True
        self.rect: Rect = rect_make(self.x, self.y, TILE_SIZE, TILE_SIZE)

    @property
    def aligned(self) -> bool:
        """Whether the character stands exactly on a tile."""
        return int(self.x) % TILE_SIZE == 0 and int(self.y) % TILE_SIZE == 0

    def _locate(self, maze: Maze) -> None:
        tx = round(self.x / TILE_SIZE)
        ty = round(self.y / TILE_SIZE)
        if 0 <= tx < maze.width and 0 <= ty < maze.height:
            rect = maze.tile_rect(tx, ty)
            if distance(self.x, self.y, rect.left, rect.top) < TILE_SIZE / 2:
                self.tile_x, self.tile_y = tx, ty

    def move_tile(self, maze: Maze) -> None:
        """Pick a direction, then take one step, stopping at walls."""
        self.choose_direction()
        self._locate(maze)
        direction = self.direction
        if direction is Direction.LEFT:
            self.x -= self.speed
            if _is_wall(maze, self.tile_x - 1, self.tile_y) and self.tile_x * TILE_SIZE > self.x:
                self.x += 1
        elif direction is Direction.RIGHT:
            self.x += self.speed
            if _is_wall(maze, self.tile_x + 1, self.tile_y) and self.tile_x * TILE_SIZE < self.x:
                self.x -= 1
        elif direction is Direction.UP:
            self.y -= self.speed
            if _is_wall(maze, self.tile_x, self.tile_y - 1) and self.tile_y * TILE_SIZE > self.y:
                self.y += 1
        elif direction is Direction.DOWN:
            self.y += self.speed
            if _is_wall(maze, self.tile_x, self.tile_y + 1) and self.tile_y * TILE_SIZE < self.y:
                self.y -= 1

        if direction is not Direction.NOMOVE:
            rect = maze.tile_rect(self.tile_x, self.tile_y)
            if distance(self.x, self.y, rect.left, rect.top) < self.speed:
                self.x, self.y = float(rect.left), float(rect.top)

    def update_rect(self, width: int, height: int) -> None:
        """Refresh the collision rectangle at the current position."""
        self.rect = rect_make(self.x, self.y, width, height)

    @abstractmethod
    def choose_direction(self) -> None:
        """Set ``direction`` for the next step."""


class Player(Character):
    """Steered by the arrow keys whenever it stands on a tile."""

    def __init__(self, tile_x: int, tile_y: int, speed: float, keys: KeyState):
        super().__init__(tile_x, tile_y, speed)
        self.keys = keys

    def choose_direction(self) -> None:
        if not self.aligned:
            return
        for key, direction in (
            (VK_LEFT, Direction.LEFT),
            (VK_RIGHT, Direction.RIGHT),
            (VK_UP, Direction.UP),
            (VK_DOWN, Direction.DOWN),
        ):
            if self.keys.is_stay_key_down(key):
                self.direction = direction
                return


class _Mark(Enum):
    EMPTY = auto()
    WALL = auto()
    START = auto()
    END = auto()


class _Status(Enum):
    NO = auto()
    OPEN = auto()
    CLOSED = auto()


@dataclass
class _PathNode:
    x: int
    y: int
    mark: _Mark
    parent: tuple[int, int] | None = None
    g: float = 0.0
    h: float = 0.0
    f: float = 0.0


_NEIGHBOUR_ORDER = ((-1, 0), (0, 1), (1, 0), (0, -1))


class PathfindingMonster(Character):
    """Searches the maze with A* for the way to its target."""

    def __init__(self, tile_x: int, tile_y: int, speed: float, maze: Maze, target: Character | None = None):
        super().__init__(tile_x, tile_y, speed)
        self.maze = maze
        self.target = target
        self.open_list: list[tuple[int, int]] = []
        self.closed_list: list[tuple[int, int]] = []
        self.path: list[tuple[int, int]] = []

    def find_path(self) -> list[tuple[int, int]]:
        """Search from the current tile to the target's tile.

        Returns the tiles from the goal (or the last tile examined when the
        goal is unreachable) back to, but not including, the current tile.
        """
        self.open_list, self.closed_list, self.path = [], [], []
        if self.target is None:
            return self.path

        maze = self.maze
        nodes = {
            (x, y): _PathNode(x, y, _Mark.WALL if maze[x, y] == TileKind.WALL else _Mark.EMPTY)
            for y in range(maze.height)
            for x in range(maze.width)
        }
        status = dict.fromkeys(nodes, _Status.NO)
        end = (self.target.tile_x, self.target.tile_y)
        nodes[end].mark = _Mark.END

        start = nodes[self.tile_x, self.tile_y]
        if start.mark is not _Mark.EMPTY:
            return self.path
        start.mark = _Mark.START
        start.h = distance(start.x, start.y, *end) * TILE_SIZE
        start.g = 0.0
        start.f = start.g + start.h
        status[start.x, start.y] = _Status.OPEN

        open_nodes = [start]
        closed_nodes: list[_PathNode] = []

        def visit(current: _PathNode, dx: int, dy: int) -> bool:
            key = (current.x + dx, current.y + dy)
            node = nodes.get(key)
            if node is None or status[key] is not _Status.NO:
                return True
            status[key] = _Status.OPEN
            if node.mark not in (_Mark.EMPTY, _Mark.END):
                return True
            node.parent = (current.x, current.y)
            node.g = current.g + _STEP_COST
            node.h = distance(node.x, node.y, *end) * TILE_SIZE
            node.f = node.h + node.g
            if node.mark is _Mark.EMPTY:
                open_nodes.append(node)
                return True
            closed_nodes.append(node)
            return False

        searching = True
        while open_nodes:
            current = min(open_nodes, key=attrgetter("f"))
            closed_nodes.append(current)
            for dx, dy in _NEIGHBOUR_ORDER:
                if not searching:
                    break
                searching = visit(current, dx, dy)
            status[current.x, current.y] = _Status.CLOSED
            open_nodes.remove(current)
            if not searching:
                break

        node = closed_nodes[-1]
        while node.mark is not _Mark.START:
            self.path.append((node.x, node.y))
            node = nodes[node.parent]

        self.open_list = [(n.x, n.y) for n in open_nodes]
        self.closed_list = [(n.x, n.y) for n in closed_nodes]
        return self.path

    def choose_direction(self) -> None:
        if self.target is None or not self.aligned:
            return
        path = self.find_path()
        if not path:
            return
        step = path[-1]
        moves = {
            (self.tile_x - 1, self.tile_y): Direction.LEFT,
            (self.tile_x + 1, self.tile_y): Direction.RIGHT,
            (self.tile_x, self.tile_y - 1): Direction.UP,
            (self.tile_x, self.tile_y + 1): Direction.DOWN,
        }
        if step in moves:
            self.direction = moves[step]


_WANDER_TURNS = {
    Direction.LEFT: (Direction.UP, Direction.RIGHT, Direction.DOWN),
    Direction.UP: (Direction.LEFT, Direction.RIGHT, Direction.DOWN),
    Direction.RIGHT: (Direction.UP, Direction.LEFT, Direction.DOWN),
    Direction.DOWN: (Direction.UP, Direction.RIGHT, Direction.LEFT),
}


class PursuingMonster(Character):
    """Heads straight for a nearby target and wanders otherwise."""

    def __init__(self, tile_x: int, tile_y: int, speed: float, target: Character | None = None,
                 rng: random.Random | None = None):
        super().__init__(tile_x, tile_y, speed)
        self.target = target
        self.rng = rng if rng is not None else random.Random()

    def choose_direction(self) -> None:
        if self.target is None:
            self.direction = Direction.NOMOVE
            return
        if not self.aligned:
            return
        target = self.target
        if distance(target.x, target.y, self.x, self.y) < CHASE_RANGE:
            dx = target.x - self.x
            dy = target.y - self.y
            if dx != 0:
                tangent = abs(dy / dx)
            else:
                tangent = float("inf") if dy != 0 else float("nan")
            if tangent < 1 and target.x < self.x:
                self.direction = Direction.LEFT
            elif tangent < 1 and target.x > self.x:
                self.direction = Direction.RIGHT
            elif tangent > 1 and target.y < self.y:
                self.direction = Direction.UP
            elif tangent > 1 and target.y > self.y:
                self.direction = Direction.DOWN
            return

        roll = self.rng.randint(0, 9)
        turns = _WANDER_TURNS.get(self.direction)
        if turns is None:
            self.direction = Direction(self.rng.randint(Direction.LEFT, Direction.DOWN))
        elif roll in (7, 8, 9):
            self.direction = turns[roll - 7]


class RandomMonster(Character):
    """Picks a new random direction every fifth tile."""

    def __init__(self, tile_x: int, tile_y: int, speed: float, rng: random.Random | None = None):
        super().__init__(tile_x, tile_y, speed)
        self.rng = rng if rng is not None else random.Random()
        self.count = 0

    def choose_direction(self) -> None:
        if self.count % 5 == 0:
            self.direction = Direction(self.rng.randint(Direction.LEFT, Direction.DOWN))
        if self.aligned:
            self.count += 1