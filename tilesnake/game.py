"""Game rules: turning, moving, eating and scoring."""

import random
from dataclasses import dataclass

from . import config
from .body import SnakeBody
from .direction import Direction
from .food import Food
from .tile import Tile

_KEYS = {
    "Up": Direction.UP,
    "Down": Direction.DOWN,
    "Left": Direction.LEFT,
    "Right": Direction.RIGHT,
}


def key_to_direction(keysym: str) -> Direction:
    """Map an arrow-key name to a direction."""
    try:
        return _KEYS[keysym]
    except KeyError:
        raise ValueError(f"key is not an arrow key: {keysym!r}") from None


@dataclass(frozen=True)
class TickResult:
    """What changed on the board during one tick."""

    game_over: bool
    erased: Tile | None = None
    food: Tile | None = None
    head: Tile | None = None
    ate: bool = False


class Game:
    """State of one game of snake, advanced one tick at a time."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.last_direction = Direction.RIGHT
        self.pending_direction = Direction.RIGHT
        self.body = SnakeBody()
        self.food = Food(rng)
        self.over = False

    def set_pending(self, direction: Direction) -> None:
        """Request a turn to be taken at the next tick."""
        self.pending_direction = direction

    def tick(self) -> TickResult:
        """Advance the snake one tile and report what must be redrawn."""
        if self.over:
            raise RuntimeError("the game is over")
        if not self.pending_direction.is_opposite(self.last_direction):
            self.last_direction = self.pending_direction

        self.body.step(self.last_direction)

        if self.body.head_collides_body():
            self.over = True
            return TickResult(game_over=True)

        ate = self.body.head == self.food.tile
        if ate:
            erased = self.food.tile
            self.food.next(self.body)
        else:
            erased = self.body.pop_tail()

        return TickResult(
            game_over=False,
            erased=erased,
            food=self.food.tile,
            head=self.body.head,
            ate=ate,
        )

    @property
    def score(self) -> int:
        return config.SCORE_FACTOR * len(self.body)

    def game_over_message(self) -> str:
        return f"Game over!\nYou scored {self.score} points!"