# supersnake

A snake game that runs in your terminal. You steer the snake to eat fruit.
Each fruit makes the snake longer and the game a little faster. Now and then
a power fruit appears. Eating it makes the snake invincible for about ten
seconds. While it is invincible, the snake passes through walls and comes out
on the other side.

## Installing

```
pip install .
```

## Playing

```
supersnake
```

The board is 20 by 20 cells unless you give another size:

```
supersnake --width 30 --height 15
```

The game shows the controls first. Press ENTER to start.

| Key                    | Action                               |
|------------------------|--------------------------------------|
| W A S D / arrow keys   | Move                                 |
| Q                      | Quit                                 |
| + or =                 | Grow the board by two cells each way |
| - or _                 | Shrink the board (never below 10x10) |
| E                      | Toggle emoji mode                    |
| 1 - 5                  | Board style: small to huge           |

The snake cannot turn straight back into itself. The game ends if the snake
hits a wall while it is not powered, or if it runs into its own body. Your
final score is the number of fruits eaten.

A frame starts at 300 ms. Each fruit takes 10 ms off this until it reaches
120 ms. While no power fruit is on the board, each frame has a 1 in 100
chance of placing one. The power fruit disappears after 100 frames if it is
not eaten.

The terminal must support ANSI escape codes and emoji to draw the board
properly. On POSIX systems, keys are read from a terminal put into
non-echoing, unbuffered mode while the game runs. On Windows, keys come from
the console.

## Using it as a library

You can drive the game pieces from your own code:

```python
import random

from supersnake.snake import Snake, Direction
from supersnake.board import Board

snake = Snake(5, 5)
board = Board(20, 20, snake, random.Random(0))
snake.change_direction(Direction.DOWN)
snake.move()
print(board.render())
```

- `supersnake.snake` has `Direction` and `Snake`. `Snake` provides `move`,
  `change_direction`, `grow`, `eats_itself`, `collision` and the power-up
  state (`activate_power`, `update_power`, `power_active`,
  `power_time_left`).
- `supersnake.board.Board` places food and power fruit and checks whether the
  head is on them. It also handles resizing and glyph presets
  (`set_emoji_size`, `toggle_emoji_mode`). `render()` returns one frame as
  text, and `draw(out)` writes it.
- `supersnake.terminal` has `decode_key`, which turns raw terminal input into
  a key, and `KeyReader`, a context manager that reads key presses without
  blocking.
- `supersnake.game.Game` ties these together. It accepts any object with a
  `get_key()` method as its reader. Call `handle_key`, `update` and `render`
  to step the game yourself, or `run()` to play the frame loop.

## What it does not do

Scores are not saved: there is no high-score table. Settings do not persist
between games.

## Running the tests

```
pip install .[test]
pytest
```