"""The game window: input, the frame loop and drawing."""

from __future__ import annotations

import argparse
import random

import pygame

from mazechase.characters import PathfindingMonster
from mazechase.game import (
    ITEM_BUTTON,
    LOAD_BUTTON,
    MAP_TOOL_CELL,
    MENU_ITEMS,
    MOB_BUTTON,
    PLAYER_BUTTON,
    SAVE_BUTTON,
    WALL_BUTTON,
    Game,
    Screen,
    score_digits,
)
from mazechase.geometry import TILE_SIZE, WIN_HEIGHT, WIN_WIDTH, Rect
from mazechase.keys import (
    VK_DOWN,
    VK_ESCAPE,
    VK_F1,
    VK_F2,
    VK_LBUTTON,
    VK_LEFT,
    VK_RIGHT,
    VK_SPACE,
    VK_UP,
    KeyState,
)
from mazechase.maze import TileKind
from mazechase.timer import Timer

WINDOW_TITLE = "Neptune API"
MENU_LABELS = ("START", "MAP TOOL", "OPTION", "EXIT")

_WHITE = (255, 255, 255)
_BLACK = (0, 0, 0)
_WALL = (33, 33, 222)
_ITEM = (255, 184, 151)
_PLAYER = (255, 255, 0)
_MOB = (255, 0, 0)
_MAP_COLORS = {
    TileKind.EMPTY: (20, 20, 20),
    TileKind.ITEM: (20, 20, 20),
    TileKind.WALL: _WALL,
    TileKind.PLAYER: _PLAYER,
    TileKind.MOB: _MOB,
}

_VK_TO_PYGAME = {
    VK_ESCAPE: pygame.K_ESCAPE,
    VK_SPACE: pygame.K_SPACE,
    VK_LEFT: pygame.K_LEFT,
    VK_UP: pygame.K_UP,
    VK_RIGHT: pygame.K_RIGHT,
    VK_DOWN: pygame.K_DOWN,
    VK_F1: pygame.K_F1,
    VK_F2: pygame.K_F2,
    **{ord("A") + i: pygame.K_a + i for i in range(26)},
}
_PYGAME_TO_VK = {value: key for key, value in _VK_TO_PYGAME.items()}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="mazechase", description="Chase through a tile maze.")
    parser.add_argument("--maze", default="MAZE.txt", help="maze file to load and save")
    parser.add_argument("--score", default="MAZESCORE.txt", help="high score file")
    parser.add_argument("--fps", type=float, default=30.0, help="frame rate limit")
    parser.add_argument("--seed", type=int, default=None, help="seed for monster moves")
    parser.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    return parser.parse_args(argv)


def _pressed(code: int) -> bool:
    if code == VK_LBUTTON:
        return bool(pygame.mouse.get_pressed()[0])
    key = _VK_TO_PYGAME.get(code)
    return key is not None and bool(pygame.key.get_pressed()[key])


def _box(rect: Rect) -> pygame.Rect:
    return pygame.Rect(rect.left, rect.top, rect.width(), rect.height())


def _text(surface, font, text: str, pos, color=_BLACK) -> None:
    surface.blit(font.render(text, True, color), pos)


def _draw_title(surface, game: Game, font) -> None:
    _text(surface, font, "MAZE CHASE", (WIN_WIDTH // 2 - 50, 200))
    for index, label in enumerate(MENU_LABELS[:MENU_ITEMS]):
        _text(surface, font, label, (240, 390 + 41 * index))
    pygame.draw.rect(surface, _BLACK, pygame.Rect(210, 390 + 41 * game.select_key, 20, 20))


def _draw_playing(surface, game: Game, font) -> None:
    surface.fill(_BLACK)
    maze = game.maze
    for y in range(maze.height):
        for x in range(maze.width):
            rect = _box(maze.tile_rect(x, y))
            kind = maze[x, y]
            if kind == TileKind.WALL:
                pygame.draw.rect(surface, _WALL, rect)
            elif kind == TileKind.ITEM:
                pygame.draw.circle(surface, _ITEM, rect.center, 2)
    for mob in game.mobs:
        pygame.draw.rect(surface, _MOB, _box(mob.rect))
    pygame.draw.circle(surface, _PLAYER, _box(game.player.rect).center, TILE_SIZE // 2)
    for index, digit in enumerate(score_digits(game.score, 6)):
        _text(surface, font, str(digit), (WIN_WIDTH // 2 - TILE_SIZE * (index - 3), 0), _WHITE)

    if game.keys.is_toggle_key("A"):
        for mob in game.mobs:
            if not isinstance(mob, PathfindingMonster):
                continue
            for x, y in mob.open_list:
                pygame.draw.rect(surface, _WHITE, (x * TILE_SIZE, y * TILE_SIZE, TILE_SIZE, TILE_SIZE), 1)
            for x, y in mob.closed_list:
                pygame.draw.ellipse(surface, _WHITE, (x * TILE_SIZE, y * TILE_SIZE, TILE_SIZE, TILE_SIZE), 1)
            for x, y in mob.path:
                pygame.draw.rect(surface, _ITEM, (x * TILE_SIZE + 4, y * TILE_SIZE + 4, 8, 8))


def _draw_map_tool(surface, game: Game, font) -> None:
    maze = game.maze
    for y in range(maze.height):
        for x in range(maze.width):
            color = _MAP_COLORS.get(TileKind(maze[x, y]), _MAP_COLORS[TileKind.EMPTY])
            pygame.draw.rect(surface, color,
                             (x * MAP_TOOL_CELL, y * MAP_TOOL_CELL, MAP_TOOL_CELL, MAP_TOOL_CELL))
    buttons = (
        (WALL_BUTTON, _WALL, ""),
        (ITEM_BUTTON, _MAP_COLORS[TileKind.EMPTY], ""),
        (MOB_BUTTON, _MOB, ""),
        (PLAYER_BUTTON, _PLAYER, ""),
        (SAVE_BUTTON, _WHITE, "SAVE"),
        (LOAD_BUTTON, _WHITE, "LOAD"),
    )
    for rect, color, label in buttons:
        box = _box(rect)
        pygame.draw.rect(surface, color, box)
        pygame.draw.rect(surface, _BLACK, box, 1)
        if label:
            _text(surface, font, label, (box.left + 20, box.top + 12))
    _text(surface, font, f"SCORE : {game.high_score}", (20, WIN_HEIGHT - 50))


def _draw(surface, game: Game, font, timer: Timer) -> None:
    surface.fill(_WHITE)
    if game.screen is Screen.TITLE:
        _draw_title(surface, game, font)
    elif game.screen is Screen.PLAYING:
        _draw_playing(surface, game, font)
    elif game.screen is Screen.MAP_TOOL:
        _draw_map_tool(surface, game, font)
    elif game.screen is Screen.OPTIONS:
        _text(surface, font, f"speed : {int(game.player.speed)}", (300, 350))
    color = _WHITE if game.screen is Screen.PLAYING else _BLACK
    for index, line in enumerate(timer.status_lines()):
        _text(surface, font, line, (0, 20 * index), color)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    pygame.init()
    try:
        surface = pygame.display.set_mode((WIN_WIDTH, WIN_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        font = pygame.font.Font(None, 20)
        toggled: set[int] = set()
        keys = KeyState(_pressed, lambda code: code in toggled)
        game = Game(keys, args.maze, args.score, random.Random(args.seed))
        timer = Timer()
        frames = 0
        while game.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        game.running = False
                    code = _PYGAME_TO_VK.get(event.key)
                    if code is not None:
                        toggled ^= {code}
            if not game.running:
                break
            timer.tick(args.fps)
            game.update(pygame.mouse.get_pos())
            _draw(surface, game, font, timer)
            pygame.display.flip()
            frames += 1
            if args.frames is not None and frames >= args.frames:
                break
    finally:
        pygame.quit()
    return 0