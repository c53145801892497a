"""Board geometry, timing and colours for the game."""

BOARD_SIZE = 25
TEMPO_MS = 250

GAME_WINDOW_NAME = "Snake"

BOARD_RESOLUTION = 500

RED = "#ff0000"
GREEN = "#00ff00"

BACKGROUND_COLOR = "#99b4d1"
SNAKE_BODY_COLOR = GREEN
FOOD_COLOR = RED

SCORE_FACTOR = 10
GAME_OVER_CAPTION = "Game over!"