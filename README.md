# tilesnake

A small Snake game on a 25 × 25 board of tiles, drawn in a 500 × 500 pixel window.

## Playing

Install the package and start the game:

```
pip install .
tilesnake
```

The window uses Tk (`tkinter`), which ships with most Python installations.

- Steer with the arrow keys. The snake starts in the middle of the board heading right.
- The snake moves one tile every 250 ms.
- Turning straight back on yourself is ignored; the snake keeps its current heading.
- Leaving the board on one side brings the snake back on the opposite side.
- Eating the red food makes the green snake one tile longer and places new food.
  New food is always put in a column the snake does not occupy.
- Running the head into the body ends the game and a message box shows your score:
  10 points for every tile of the snake.

The game ends after one round; to play again, start `tilesnake` once more. There is no
pause, no high-score table and no settings; board size, speed and colours are fixed
in `tilesnake.config`.

## Using the game logic

The rules live apart from the window, so they can be driven without a display:

```python
import random

from tilesnake.direction import Direction
from tilesnake.game import Game

game = Game(random.Random(1))
game.set_pending(Direction.UP)
result = game.tick()
print(result.head, game.score)
```

- `tilesnake.direction.Direction` is the four directions; `is_opposite()` tells
  whether two point opposite ways.
- `tilesnake.tile.Tile` is a board cell; `rect()` gives the pixel rectangle
  `(left, top, right, bottom)` it covers in the window.
- `tilesnake.body.SnakeBody` holds the tiles of the snake, head first (`head`, `tail`,
  `len()`, iteration), and `step()`s it across the board, wrapping at the edges.
- `tilesnake.food.Food` places food on the board, drawing positions from the random
  generator it is given; its `tile` is where the food is.
- `tilesnake.game.Game` advances the game one `tick()` at a time and reports what
  changed as a `TickResult` (`game_over`, `erased`, `food`, `head`, `ate`). Calling
  `tick()` after the game is over raises `RuntimeError`. `score` is the current score
  and `game_over_message()` the text shown when the game ends.
- `tilesnake.game.key_to_direction` turns an arrow key name (`"Up"`, `"Down"`,
  `"Left"`, `"Right"`) into a `Direction`, and raises `ValueError` for any other key.

## The window

- `tilesnake.window.Window` is a fixed-size Tk window with a canvas. It offers
  repeating timers (`set_timer()`, `get_timer()`, `has_timer()`), `fill_rect()` and
  `fill_background()` for drawing, and `message_box()`. Rectangles filled before the
  window is shown are kept in `painted` and drawn once `show()` is called.
- `tilesnake.window.Timer` calls its callback every interval until `kill()`ed.
- `tilesnake.app.SnakeWindow` plays one game in a `Window`; `tilesnake.app.main` is the
  `tilesnake` command.

## Running the tests

```
pip install ".[test]"
pytest
```