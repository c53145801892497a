"""A single cell on the square board."""

from dataclasses import dataclass

from . import config

_RATIO = float(config.BOARD_RESOLUTION) / config.BOARD_SIZE


@dataclass(frozen=True)
class Tile:
    """A board cell addressed by column ``x`` and row ``y``."""

    x: int = 0
    y: int = 0

    def rect(self) -> tuple[int, int, int, int]:
        """Return the pixel rectangle (left, top, right, bottom) of the cell."""
        return (
            int(self.x * _RATIO),
            int(self.y * _RATIO),
            int((self.x + 1) * _RATIO),
            int((self.y + 1) * _RATIO),
        )