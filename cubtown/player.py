"""The player: position, heading, movement and collision."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Container

from .definitions import (
    MAX_MONEY,
    MINIMAP_TILE_SIZE,
    PLAYER_COLLISION_RADIUS,
    Key,
    Texture,
)
from .game_map import GameMap
from .vectors import Vec2

_TWO_PI = 2.0 * math.pi


def can_move(game_map: GameMap, x: float, y: float, radius: float) -> bool:
    """Whether a square of half-size radius centred on (x, y) touches no wall."""
    left = math.floor(x - radius)
    right = math.floor(x + radius)
    top = math.floor(y - radius)
    bottom = math.floor(y + radius)
    corners = ((left, top), (right, top), (right, bottom), (left, bottom))
    return not any(game_map.is_wall(cx, cy) for cx, cy in corners)


@dataclass
class Player:
    """The player's state in the world."""

    location: Vec2 = field(default_factory=Vec2)
    rotation_angle: float = 0.0
    direction: Vec2 = field(default_factory=lambda: Vec2(1.0, 0.0))
    plane: Vec2 = field(default_factory=Vec2)
    minimap_pos: Vec2 = field(default_factory=Vec2)
    cos_r: float = 1.0
    sin_r: float = 0.0
    money: int = 0
    health: int = 100
    item: Texture = Texture.HUD_HAND

    def set_position(self, x: float, y: float, angle: float) -> None:
        """Place the player at (x, y) facing angle."""
        self.location = Vec2(x, y)
        self.rotation_angle = angle

    def _move(self, game_map: GameMap, keys: Container[int], speed: int) -> None:
        step = Vec2(0.0, 0.0)
        cos_r, sin_r = self.cos_r, self.sin_r
        if Key.W in keys:
            step = Vec2(cos_r, sin_r)
        if Key.S in keys:
            step = Vec2(-cos_r, -sin_r)
        if Key.A in keys:
            step = Vec2(sin_r / 2, -cos_r / 2)
        if Key.D in keys:
            step = Vec2(-sin_r / 2, cos_r / 2)
        dx = step.x * (speed / 10.0)
        dy = step.y * (speed / 10.0)
        x, y = self.location
        if can_move(game_map, x + dx, y, PLAYER_COLLISION_RADIUS):
            x += dx
        if can_move(game_map, x, y + dy, PLAYER_COLLISION_RADIUS):
            y += dy
        self.location = Vec2(x, y)

    def _rotate(self, keys: Container[int], rotation_speed: int) -> None:
        if Key.RIGHT in keys:
            self.rotation_angle += rotation_speed / 100
        if Key.LEFT in keys:
            self.rotation_angle -= rotation_speed / 100
        self.cos_r = math.cos(self.rotation_angle)
        self.sin_r = math.sin(self.rotation_angle)
        angle = math.fmod(self.rotation_angle, _TWO_PI)
        if angle < 0:
            angle += _TWO_PI
        self.rotation_angle = angle
        if self.money > MAX_MONEY:
            self.money = MAX_MONEY

    def update(
        self,
        game_map: GameMap,
        keys: Container[int],
        speed: int,
        rotation_speed: int,
        plane_len: float,
    ) -> None:
        """Advance the player one frame from the keys held down."""
        self._move(game_map, keys, speed)
        self._rotate(keys, rotation_speed)
        self.minimap_pos = self.location * MINIMAP_TILE_SIZE
        self.plane = Vec2(plane_len * -self.sin_r, plane_len * self.cos_r)
        self.direction = Vec2(self.cos_r, self.sin_r)