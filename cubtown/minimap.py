"""Minimap: tile colours, rotated background sampling and marker placement."""

from __future__ import annotations

from typing import Iterable

from .definitions import (
    MAP_DOOR,
    MINIMAP_BACKGROUND_CIRCLE_RADIUS,
    MINIMAP_TILE_SIZE,
    SCREEN_H,
)
from .game_map import GameMap
from .vectors import Vec2

FLOOR_COLOR = 0x606060
VOID_COLOR = 0xFF000000
DOOR_COLOR = 0x5B3C11
WALL_COLOR = 0xDEB887

# Markers further away than this many tiles stick to the minimap rim.
MARKER_MAX_TILES = 3.5

# Margin between the north indicator and the border it circles.
NORTH_INDICATOR_MARGIN = 5


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


def tile_color(game_map: GameMap, x: int, y: int) -> int:
    """The minimap colour of map cell (x, y)."""
    if game_map.is_floor(x, y):
        return FLOOR_COLOR
    if game_map.is_void(x, y):
        return VOID_COLOR
    if game_map.get_cell(x, y) == MAP_DOOR:
        return DOOR_COLOR
    return WALL_COLOR


def minimap_colors(game_map: GameMap) -> list[list[int]]:
    """Colour of every tile, row by row, over the map's full width."""
    return [
        [tile_color(game_map, x, y) for x in range(game_map.width)]
        for y in range(game_map.height)
    ]


def marker_offset(dx: float, dy: float, sin_r: float, cos_r: float) -> tuple[float, float]:
    """Pixel offset from the minimap centre of a point dx, dy tiles away.

    The map is turned so that the player's heading points up, and points
    further than a few tiles are pinned to the rim.
    """
    rotated = Vec2(
        dx * -sin_r - dy * -cos_r,
        dx * -cos_r + dy * -sin_r,
    ).normalized()
    length = _clamp(Vec2(dx, dy).length(), 0.0, MARKER_MAX_TILES)
    return (
        rotated.x * length * MINIMAP_TILE_SIZE,
        rotated.y * length * MINIMAP_TILE_SIZE,
    )


def house_offset(
    spawn: Iterable[float], location: Iterable[float], sin_r: float, cos_r: float
) -> tuple[float, float]:
    """Pixel offset from the minimap centre of the spawn tile's centre."""
    spawn_x, spawn_y = spawn
    loc_x, loc_y = location
    return marker_offset(spawn_x - loc_x + 0.5, spawn_y - loc_y + 0.5, sin_r, cos_r)


def rotate_background_point(
    x: float, y: float, minimap_pos: Iterable[float], sin_r: float, cos_r: float
) -> Vec2:
    """The minimap texture point sampled for background pixel (x, y)."""
    cx, cy = minimap_pos
    dx = x - cx
    dy = y - cy
    return Vec2(
        dx * -sin_r + dy * -cos_r + cx,
        -dx * -cos_r + dy * -sin_r + cy,
    )


def outside_circle(x: int, y: int, center: Iterable[int]) -> bool:
    """Whether screen pixel (x, y) lies outside the round minimap."""
    cx, cy = center
    dx = x - cx
    dy = y - cy
    radius = MINIMAP_BACKGROUND_CIRCLE_RADIUS
    return not (dx * dx + dy * dy < radius * radius)


def north_indicator_position(
    border_width: int,
    border_height: int,
    north_height: int,
    sin_r: float,
    cos_r: float,
) -> tuple[int, int]:
    """Screen position of the north marker circling the minimap border."""
    x = (border_width // 2 + NORTH_INDICATOR_MARGIN) + (-cos_r * border_width) / 2
    y = (
        SCREEN_H
        - border_height // 2
        - (north_height + NORTH_INDICATOR_MARGIN)
        + (sin_r * border_height) / 2
    )
    return int(x), int(y)