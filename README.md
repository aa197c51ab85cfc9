# gokustudio

Non-graphical building blocks of a small 2D game-engine studio: a bounded
log console, a tilemap model with a plain-text file format, viewport and
sprite-animation helpers, and the game logic of a few sample games.

## Installation

```
pip install gokustudio
```

To run the test suite:

```
pip install "gokustudio[test]"
pytest
```

## What is inside

- `gokustudio.terminal`: `Terminal` keeps the most recent `LogMessage`
  entries (all of them when `max_lines` is 0). `log` and `log_error` add
  messages of `MessageType.INFO` and `MessageType.ERROR`; `messages` and
  `lines` give them back, optionally only the errors. A message prints as
  `YYYY-MM-DD HH:MM:SS - [INFO] text`.
- `gokustudio.tilemap`: `Tilemap(width, height)` is a grid of tile indices.
  `set_tile` ignores coordinates outside the map and `get_tile` returns 0
  there. `save_to_file` writes `width height` on the first line and one tile
  per line after it; `load_from_file` reads that format back and raises
  `ValueError` on malformed input. `create_texture_slice` cuts a region out
  of a tileset image and saves it as `slice_<index>.png`.
- `gokustudio.viewport`: `ViewportState.update_offset` pans the view with the
  `w`, `a`, `s`, `d` keys; `Image` is a sprite sheet whose `update` steps
  through frames and rows; `generate_grid_vertices` returns the line vertices
  of a grid in normalized device coordinates.
- `gokustudio.snake`: `Snake`, `Direction`, `spawn_food` and `step_game`.
- `gokustudio.tetris`: `Block`, `RigidBody`, `Shape2D` and
  `create_tetromino` for the I, O, T, L, J, S and Z shapes.
- `gokustudio.raycast`: `cast_ray` and `render_columns` trace rays through a
  grid map and return `Stripe` records to draw; `Player` moves and turns
  without walking through walls.
- `gokustudio.platformer`: `Player` with gravity, landing and jumping,
  `Platform`, `PlatformGenerator.extend` for endless random platforms and
  `prune_platforms`.

## Example

```python
from gokustudio.tilemap import Tilemap

tilemap = Tilemap(16, 16)
tilemap.set_tile(3, 4, 7)
tilemap.save_to_file("tilemap.txt")
assert Tilemap.load_from_file("tilemap.txt").get_tile(3, 4) == 7
```

```python
import random
from gokustudio.snake import Direction, Snake, spawn_food, step_game

rng = random.Random(1)
snake = Snake()
snake.steer(Direction.RIGHT)
food = spawn_food(rng)
food, ate = step_game(snake, food, rng)
```

## What it does not do

There is no window, renderer or input handling: the game modules hold rules
and state only, and drawing them is up to the caller. The package also has
no project records or editor state, does not save or open project files,
does not generate starter game code, and does not build or run projects.