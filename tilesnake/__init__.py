"""A tile-based Snake game with wrap-around edges, its rules and a Tk window to play it in."""

__version__ = "1.0.0"