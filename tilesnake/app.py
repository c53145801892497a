"""The snake game window and its command-line entry point."""

from __future__ import annotations

import argparse
import random
from typing import Any

from . import config
from .game import Game, key_to_direction
from .window import Timer, Window

_ARROW_KEYS = frozenset({"Up", "Down", "Left", "Right"})


class SnakeWindow(Window):
    """A window that plays one game of snake."""

    def __init__(self, rng: random.Random | None = None) -> None:
        super().__init__(
            config.BOARD_RESOLUTION, config.BOARD_RESOLUTION, config.GAME_WINDOW_NAME
        )
        self.game = Game(rng)

    def run(self) -> None:
        """Start the game clock, show the window and play until it is closed."""
        self.set_timer(config.TEMPO_MS, SnakeWindow._timer_callback)
        self.show()
        self.message_loop()

    def on_key(self, event: Any) -> None:
        """Queue a turn when an arrow key is pressed."""
        keysym = getattr(event, "keysym", None)
        if keysym in _ARROW_KEYS:
            self.game.set_pending(key_to_direction(keysym))

    def _key_pressed(self, event: Any) -> None:
        self.on_key(event)

    def on_timer(self, timer: Timer) -> None:
        """Advance the game one tick and redraw what changed."""
        result = self.game.tick()
        if result.game_over:
            timer.kill()
            self.message_box(config.GAME_OVER_CAPTION, self.game.game_over_message())
            return
        self.fill_rect(result.erased.rect(), config.BACKGROUND_COLOR)
        self.fill_rect(result.food.rect(), config.FOOD_COLOR)
        self.fill_rect(result.head.rect(), config.SNAKE_BODY_COLOR)

    @staticmethod
    def _timer_callback(window: Window, timer: Timer) -> None:
        if not isinstance(window, SnakeWindow):
            raise TypeError("timer callback bound to a window that is not a SnakeWindow")
        window.on_timer(timer)


def main(argv: list[str] | None = None) -> int:
    """Run the game."""
    parser = argparse.ArgumentParser(prog="tilesnake", description="Play snake.")
    parser.parse_args(argv)
    SnakeWindow().run()
    return 0