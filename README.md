# mazechase

A small tile-based arcade game: steer your character through a maze, pick up
items for points, and keep away from three kinds of monsters. The first monster
in the maze finds its way to you with A* pathfinding, the third wanders at
random, and the others turn toward you once you come within range. A map tool
lets you draw your own mazes.

## Installing

```
pip install .
```

The game window is drawn with pygame, which is installed as a dependency.

## Playing

```
mazechase
```

Command-line options (see `mazechase --help`):

- `--maze PATH`: maze file to load and save (default `MAZE.txt`).
- `--score PATH`: high-score file (default `MAZESCORE.txt`).
- `--fps N`: frame rate limit (default 30).
- `--seed N`: seed for the monsters' random moves.
- `--frames N`: stop after this many frames.

If the maze file does not exist, the game starts with an empty maze. `Escape`
or closing the window quits at any time.

The title screen offers four entries, chosen with the Up and Down arrows and
confirmed with `Z`:

- **Start**: play the current maze. This only works when the maze holds a
  player tile.
- **Map tool**: edit the maze. Pick a brush on the side panel (item, wall,
  player or monster; wall is selected at first) and paint tiles with the left
  mouse button. Only one player tile can be placed; painting over it frees the
  brush for another. The panel's save and load buttons write the maze to its
  file and read it back. The saved high score is shown below the map. `X`
  reloads the maze file and returns to the title screen.
- **Options**: raise or lower the player's speed with Up and Down, from 1 to 5.
  `X` returns to the title screen.
- **Quit**.

While you play, the arrow keys steer your character. Every item collected
scores 10 points. When a monster catches you, your score is saved if it beats
the stored high score, and the game goes back to the title screen with the maze
reloaded. Holding `S`, `D` and `F` together does the same without saving the
score. Pressing `A` toggles an overlay showing the pathfinding monster's open
list, closed list and path.

## Using it as a library

The game logic does not depend on the display, so its parts can be used on
their own:

- `mazechase.maze`: `Maze`, `TileKind`, and `load_maze`, `save_maze`,
  `load_score`, `save_score` for the maze and score files (little-endian
  32-bit integers). `Maze.wall_frame` picks a sprite-sheet frame for a wall
  from its wall neighbours.
- `mazechase.characters`: `Player`, `PathfindingMonster`, `PursuingMonster`,
  `RandomMonster`, all moving tile by tile through a `Maze`.
- `mazechase.game`: `Game`, the state machine behind the title, play, map tool
  and options screens, and `score_digits`.
- `mazechase.geometry`: `Rect` and helpers such as `rect_make`,
  `rect_make_center`, `resolve_collision`, `distance` and `angle`.
- `mazechase.animation.Animation`, `mazechase.timer.Timer` and
  `mazechase.keys.KeyState`: sprite-sheet frame sequencing, frame timing and
  edge-triggered key state.
- `mazechase.projectiles`: `PreloadedMissiles`, `SpawnedMissiles`, `Bullets`,
  `RotatingMissiles` and `rotation_frame`.
- `mazechase.action.MoveAction`: moves anything with `x` and `y` to a point
  over a set time.
- `mazechase.effect.Effect`: a one-shot sprite-sheet animation.
- `mazechase.database.Database`: unit records read from a token list.
- `mazechase.scenes`: `Scene` and `SceneManager`.
- `mazechase.widgets`: `ProgressBar` and `Button`.

## What it does not do

The game draws everything with plain shapes and text; it loads no image files,
and `Maze.wall_frame` is not used by the window. There is no sound. The
projectile, effect, database, scene and widget modules hold state and logic
only; nothing in the package draws them or plays a game with them.

## Running the tests

```
pip install .[test]
pytest
```