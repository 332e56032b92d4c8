"""Game flow: title menu, play, the maze editor and the options screen."""

from __future__ import annotations

import os
import random
from enum import IntEnum
from itertools import product

from mazechase.characters import (
    Character,
    PathfindingMonster,
    Player,
    PursuingMonster,
    RandomMonster,
)
from mazechase.geometry import Rect, rect_make
from mazechase.keys import VK_DOWN, VK_LBUTTON, VK_UP, KeyState
from mazechase.maze import Maze, TileKind, load_maze, load_score, save_maze, save_score

DEFAULT_SPEED = 2.0
PATHFINDER_SPEED = 1.5
ITEM_SCORE = 10
SPRITE_SIZE = 16
MENU_ITEMS = 4
MIN_PLAYER_SPEED = 1
MAX_PLAYER_SPEED = 5
MAP_TOOL_CELL = 10

SAVE_BUTTON = rect_make(520, 80, 80, 40)
LOAD_BUTTON = rect_make(520, 120, 80, 40)
WALL_BUTTON = rect_make(520, 0, 40, 40)
ITEM_BUTTON = rect_make(560, 0, 40, 40)
MOB_BUTTON = rect_make(520, 40, 40, 40)
PLAYER_BUTTON = rect_make(560, 40, 40, 40)

_TILE_BUTTONS = (
    (ITEM_BUTTON, TileKind.ITEM),
    (WALL_BUTTON, TileKind.WALL),
    (PLAYER_BUTTON, TileKind.PLAYER),
    (MOB_BUTTON, TileKind.MOB),
)


class Screen(IntEnum):
    TITLE = 0
    PLAYING = 1
    MAP_TOOL = 2
    OPTIONS = 3


def _point_in(rect: Rect, point: tuple[float, float]) -> bool:
    # Strictly inside: points on the border do not count.
    x, y = point
    return rect.left < x < rect.right and rect.top < y < rect.bottom


def score_digits(score: int, count: int = 6) -> list[int]:
    """The lowest ``count`` decimal digits of ``score``, least significant first."""
    return [(score // 10 ** i) % 10 for i in range(count)]


class Game:
    """Holds the maze, the characters and the current screen."""

    def __init__(self, keys: KeyState, maze_path: str | os.PathLike = "MAZE.txt",
                 score_path: str | os.PathLike = "MAZESCORE.txt",
                 rng: random.Random | None = None):
        self.keys = keys
        self.maze_path = maze_path
        self.score_path = score_path
        self.rng = rng if rng is not None else random.Random()
        self.maze = Maze.empty()
        self.player: Player | None = None
        self.mobs: list[Character] = []
        self.running = True
        self.reset()

    def reset(self) -> None:
        """Return to the title screen with the maze and high score reloaded."""
        self.screen = Screen.TITLE
        self.select_key = 0
        self.score = 0
        self.mobs = []
        try:
            self.maze = load_maze(self.maze_path)
        except FileNotFoundError:
            pass
        self.high_score = load_score(self.score_path)

        players = list(self.maze.find(TileKind.PLAYER))
        if players:
            self.player = Player(*players[-1], DEFAULT_SPEED, self.keys)
        elif self.player is None:
            self.player = Player(0, 0, DEFAULT_SPEED, self.keys)
            self.player.exist = False

        for index, (x, y) in enumerate(self.maze.find(TileKind.MOB)):
            if index == 0:
                mob: Character = PathfindingMonster(x, y, PATHFINDER_SPEED, self.maze, self.player)
            elif index == 2:
                mob = RandomMonster(x, y, DEFAULT_SPEED, self.rng)
            else:
                mob = PursuingMonster(x, y, DEFAULT_SPEED, self.player, self.rng)
            self.mobs.append(mob)

        self.select_tile = TileKind.WALL

    def update(self, mouse: tuple[float, float] = (0, 0)) -> None:
        """Advance one frame on the current screen."""
        if self.screen is Screen.TITLE:
            self.update_title()
        elif self.screen is Screen.PLAYING:
            self.update_playing()
        elif self.screen is Screen.MAP_TOOL:
            self.update_map_tool(mouse)
        elif self.screen is Screen.OPTIONS:
            self.update_options()

    def update_title(self) -> None:
        keys = self.keys
        if keys.is_once_key_down(VK_UP) and self.select_key > 0:
            self.select_key -= 1
        if keys.is_once_key_down(VK_DOWN) and self.select_key < MENU_ITEMS - 1:
            self.select_key += 1
        if not keys.is_once_key_down("Z"):
            return
        if self.select_key == 0:
            if next(self.maze.find(TileKind.PLAYER), None) is not None:
                self.player.exist = True
                self.screen = Screen.PLAYING
        elif self.select_key == 1:
            self.screen = Screen.MAP_TOOL
        elif self.select_key == 2:
            self.select_key = 0
            self.screen = Screen.OPTIONS
        elif self.select_key == 3:
            self.running = False

    def update_playing(self) -> None:
        keys = self.keys
        if keys.is_stay_key_down("S") and keys.is_stay_key_down("D") and keys.is_stay_key_down("F"):
            self.reset()
        player = self.player
        if player is None:
            return
        for mob in self.mobs:
            if player.rect.intersection(mob.rect) is not None:
                if self.high_score < self.score:
                    save_score(self.score, self.score_path)
                self.reset()
                break
        player = self.player
        player.move_tile(self.maze)
        player.update_rect(SPRITE_SIZE, SPRITE_SIZE)
        for mob in self.mobs:
            mob.move_tile(self.maze)
            mob.update_rect(SPRITE_SIZE, SPRITE_SIZE)

        position = (player.tile_x, player.tile_y)
        if self.maze[position] == TileKind.ITEM:
            self.maze[position] = TileKind.EMPTY
            self.score += ITEM_SCORE

    def _paint(self, x: int, y: int, kind: TileKind) -> None:
        player = self.player
        if kind == TileKind.PLAYER:
            if not player.exist:
                player.exist = True
                self.maze[x, y] = kind
        elif self.maze[x, y] == TileKind.PLAYER:
            player.exist = False
            self.maze[x, y] = kind
        else:
            self.maze[x, y] = kind

    def update_map_tool(self, mouse: tuple[float, float]) -> None:
        keys = self.keys
        if keys.is_once_key_down("X"):
            self.reset()
        if keys.is_stay_key_down(VK_LBUTTON):
            for y, x in product(range(self.maze.height), range(self.maze.width)):
                cell = rect_make(x * MAP_TOOL_CELL, y * MAP_TOOL_CELL, MAP_TOOL_CELL, MAP_TOOL_CELL)
                if _point_in(cell, mouse):
                    self._paint(x, y, self.select_tile)
        if keys.is_once_key_down(VK_LBUTTON):
            for button, kind in _TILE_BUTTONS:
                if _point_in(button, mouse):
                    self.select_tile = kind
            if _point_in(SAVE_BUTTON, mouse):
                save_maze(self.maze, self.maze_path)
            if _point_in(LOAD_BUTTON, mouse):
                try:
                    self.maze = load_maze(self.maze_path)
                except FileNotFoundError:
                    pass

    def update_options(self) -> None:
        keys = self.keys
        if keys.is_once_key_down("X"):
            self.screen = Screen.TITLE
        if keys.is_once_key_down(VK_UP) and self.player.speed < MAX_PLAYER_SPEED:
            self.player.speed += 1
        if keys.is_once_key_down(VK_DOWN) and self.player.speed > MIN_PLAYER_SPEED:
            self.player.speed -= 1