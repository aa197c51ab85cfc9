"""Log console, tilemap model, viewport helpers and sample 2D game logic."""

__version__ = "0.1.3"

__all__ = [
    "terminal",
    "tilemap",
    "viewport",
    "snake",
    "tetris",
    "raycast",
    "platformer",
]