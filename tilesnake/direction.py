"""Movement directions on the board."""

from enum import Enum


class Direction(Enum):
    """One of the four directions the snake can travel."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3

    def is_opposite(self, other: "Direction") -> bool:
        """Return True when ``other`` points the opposite way."""
        return _OPPOSITES[self] is other


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}