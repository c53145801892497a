"""The food tile the snake hunts for."""

import random

from . import config
from .body import SnakeBody
from .tile import Tile


class Food:
    """A food tile placed at random in a column the snake does not occupy."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._tile = Tile()
        self.next(SnakeBody())

    def next(self, avoid: SnakeBody) -> None:
        """Move the food to a random tile in a column free of ``avoid``."""
        if all(avoid.has_x(x) for x in range(config.BOARD_SIZE)):
            raise ValueError("no free column left for food")
        upper = config.BOARD_SIZE - 1
        new_x = self._rng.randint(0, upper)
        while avoid.has_x(new_x):
            new_x = self._rng.randint(0, upper)
        new_y = self._rng.randint(0, upper)
        self._tile = Tile(new_x, new_y)

    @property
    def tile(self) -> Tile:
        return self._tile