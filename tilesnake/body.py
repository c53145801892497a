"""The snake's body: an ordered run of tiles from head to tail."""

from collections import deque
from itertools import islice
from typing import Iterator

from . import config
from .direction import Direction
from .tile import Tile

_STEPS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


class SnakeBody:
    """Tiles occupied by the snake; the board wraps around at its edges."""

    def __init__(self) -> None:
        middle = config.BOARD_SIZE // 2
        self._body: deque[Tile] = deque([Tile(middle, middle)])

    def step(self, direction: Direction) -> None:
        """Grow a new head one tile in ``direction``, wrapping at the edges."""
        dx, dy = _STEPS[direction]
        head = self.head
        self._body.appendleft(
            Tile(
                (head.x + dx) % config.BOARD_SIZE,
                (head.y + dy) % config.BOARD_SIZE,
            )
        )

    def pop_tail(self) -> Tile:
        """Remove and return the last tile."""
        return self._body.pop()

    @property
    def head(self) -> Tile:
        return self._body[0]

    @property
    def tail(self) -> Tile:
        return self._body[-1]

    def head_collides_body(self) -> bool:
        """Return True when the head overlaps any other tile of the body."""
        head = self.head
        return any(tile == head for tile in islice(self._body, 1, None))

    def has_x(self, value: int) -> bool:
        return any(tile.x == value for tile in self._body)

    def has_y(self, value: int) -> bool:
        return any(tile.y == value for tile in self._body)

    def __len__(self) -> int:
        return len(self._body)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self._body)