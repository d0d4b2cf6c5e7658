"""A terminal sliding-tile number merging puzzle and the game-loop pieces it is built on."""

__version__ = "0.1.0"

__all__ = [
    "animation",
    "board",
    "cli",
    "effect",
    "geometry",
    "keys",
    "randomness",
    "scenes",
    "textdata",
    "timer",
]