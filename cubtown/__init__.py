"""Game logic for a grid-based first-person raycasting game."""

__version__ = "0.1.0"

__all__ = [
    "controls",
    "definitions",
    "entities",
    "fonts",
    "game",
    "game_map",
    "hud",
    "menus",
    "minimap",
    "player",
    "vectors",
]