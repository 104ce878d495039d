"""Entities placed on the map: soldiers, money and doors."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, MutableSequence

from .definitions import (
    MAP_DOOR,
    MAP_FLOOR,
    SCREEN_H,
    SCREEN_W,
    TILESIZE,
    EntityRotation,
    EntityType,
    Texture,
)
from .game_map import GameMap
from .vectors import Vec2

MONEY_REWARD = 10
MONEY_PICKUP_DISTANCE = 0.5
MONEY_BOB_STEP = 0.05
MONEY_BOB_LOW = -25.0
MONEY_BOB_HIGH = -23.0

DOOR_REACH = 1.5
DOOR_MIN_PLAYER_DISTANCE = 0.75

_TWO_PI = 2.0 * math.pi


@dataclass
class Entity:
    """A sprite living on the map."""

    type: EntityType
    location: Vec2
    textures: dict[EntityRotation, Texture]
    minimap_texture: Texture
    rotation_angle: float = math.pi / 2
    scale: Vec2 = Vec2(1.0, 1.0)
    in_game: bool = True
    health: int = 0
    distance_from_floor: float = 0.0
    anchored: bool = False
    flag: bool = False
    not_displayed: bool = False
    distance_from_player: float = 0.0


@dataclass(frozen=True)
class Projection:
    """Where an entity lands on screen relative to the camera."""

    transformed: Vec2
    screen_x: int = 0
    y_offset: int = 0
    width: int = 0
    height: int = 0
    visible: bool = False

    @property
    def draw_x(self) -> tuple[int, int]:
        return draw_range_x(self.width, self.screen_x)

    @property
    def draw_y(self) -> tuple[int, int]:
        return draw_range_y(self.height, self.y_offset)


def _all_sides(texture: Texture) -> dict[EntityRotation, Texture]:
    return {rotation: texture for rotation in EntityRotation}


def _centre(x: int, y: int) -> Vec2:
    return Vec2(x + 0.5, y + 0.5)


def new_soldier(x: int, y: int) -> Entity:
    """A soldier standing in the middle of tile (x, y)."""
    return Entity(
        type=EntityType.OFFICER,
        location=_centre(x, y),
        textures={
            EntityRotation.FRONT: Texture.ENTITY_SOLDIER_FRONT,
            EntityRotation.FRONT_RIGHT: Texture.ENTITY_SOLDIER_FRONT_RIGHT,
            EntityRotation.RIGHT: Texture.ENTITY_SOLDIER_RIGHT,
            EntityRotation.BACK_RIGHT: Texture.ENTITY_SOLDIER_BACK_RIGHT,
            EntityRotation.BACK: Texture.ENTITY_SOLDIER_BACK,
            EntityRotation.BACK_LEFT: Texture.ENTITY_SOLDIER_BACK_LEFT,
            EntityRotation.LEFT: Texture.ENTITY_SOLDIER_LEFT,
            EntityRotation.FRONT_LEFT: Texture.ENTITY_SOLDIER_FRONT_LEFT,
        },
        minimap_texture=Texture.MINIMAP_ENEMY,
        scale=Vec2(1.2, 1.3),
        health=10,
        anchored=True,
        distance_from_floor=0.0,
    )


def new_money(x: int, y: int) -> Entity:
    """A bobbing bundle of money in the middle of tile (x, y)."""
    return Entity(
        type=EntityType.MONEY,
        location=_centre(x, y),
        textures=_all_sides(Texture.ENTITY_MONEY),
        minimap_texture=Texture.MINIMAP_MONEY,
        scale=Vec2(0.2, 0.2),
        health=10,
        distance_from_floor=MONEY_BOB_LOW,
    )


def new_door(x: int, y: int) -> Entity:
    """An invisible door marker on tile (x, y)."""
    return Entity(
        type=EntityType.DOOR,
        location=_centre(x, y),
        textures=_all_sides(Texture.LOGO),
        minimap_texture=Texture.MINIMAP_DOOR,
        not_displayed=True,
    )


def update_money(entity: Entity) -> int:
    """Advance the bobbing of a money entity; return the money picked up."""
    if not entity.flag:
        entity.distance_from_floor += MONEY_BOB_STEP
        if entity.distance_from_floor > MONEY_BOB_HIGH:
            entity.flag = True
    else:
        entity.distance_from_floor -= MONEY_BOB_STEP
        if entity.distance_from_floor <= MONEY_BOB_LOW:
            entity.flag = False
    if entity.distance_from_player <= MONEY_PICKUP_DISTANCE:
        entity.in_game = False
        return MONEY_REWARD
    return 0


def update_entities(entities: MutableSequence[Entity], player_location: Vec2) -> int:
    """Update live entities and sort all of them furthest first.

    Returns the money the player collected during this update.
    """
    gained = 0
    for entity in entities:
        if not entity.in_game:
            continue
        entity.distance_from_player = entity.location.distance_to(player_location)
        if entity.type is EntityType.MONEY:
            gained += update_money(entity)
    entities.sort(key=lambda e: e.distance_from_player, reverse=True)
    return gained


def _normalize_angle(angle: float) -> float:
    angle = math.fmod(angle, _TWO_PI)
    if angle < 0:
        angle += _TWO_PI
    if angle >= _TWO_PI:
        angle -= _TWO_PI
    return angle


_SECTORS = (
    EntityRotation.FRONT_RIGHT,
    EntityRotation.RIGHT,
    EntityRotation.BACK_RIGHT,
    EntityRotation.BACK,
    EntityRotation.BACK_LEFT,
    EntityRotation.LEFT,
    EntityRotation.FRONT_LEFT,
)


def texture_rotation(entity_angle: float, player_angle: float) -> EntityRotation:
    """Which side of the entity the player sees, in eighths of a turn."""
    diff = _normalize_angle(entity_angle - player_angle)
    eighth = math.pi / 8
    if diff < eighth or diff >= 15 * eighth:
        return EntityRotation.FRONT
    for index, rotation in enumerate(_SECTORS):
        if diff < (3 + 2 * index) * eighth:
            return rotation
    return EntityRotation.FRONT_LEFT


def entity_texture(entity: Entity, player_angle: float) -> Texture:
    """The texture to draw for an entity seen from the player's angle."""
    return entity.textures[texture_rotation(entity.rotation_angle, player_angle)]


def find_door(
    entities: Iterable[Entity], x: float, y: float, player_location: Vec2
) -> Entity | None:
    """The first door within reach of (x, y) that the player is not standing in."""
    point = Vec2(x, y)
    for entity in entities:
        if entity.type is not EntityType.DOOR:
            continue
        if (
            entity.location.distance_to(point) <= DOOR_REACH
            and entity.location.distance_to(player_location) > DOOR_MIN_PLAYER_DISTANCE
        ):
            return entity
    return None


def toggle_door(game_map: GameMap, entity: Entity) -> None:
    """Open a closed door tile or close an open one."""
    x, y = int(entity.location.x), int(entity.location.y)
    if game_map.is_outside(x, y):
        return
    if game_map.get_cell(x, y) == MAP_DOOR:
        game_map.set_cell(x, y, MAP_FLOOR)
    else:
        game_map.set_cell(x, y, MAP_DOOR)


def handle_door_interaction(
    entities: Iterable[Entity], game_map: GameMap, location: Vec2, direction: Vec2
) -> Entity | None:
    """Toggle the door in front of the player, returning it if there was one."""
    front = location + direction * DOOR_REACH
    door = find_door(entities, front.x, front.y, location)
    if door is not None:
        toggle_door(game_map, door)
    return door


def draw_range_x(width: int, x: int) -> tuple[int, int]:
    """Screen columns covered by a sprite of this width centred on x."""
    start = max(x - width // 2, 0)
    end = x + width // 2
    if end >= SCREEN_W:
        end = SCREEN_W - 1
    return start, end


def draw_range_y(height: int, y_offset: int) -> tuple[int, int]:
    """Screen rows covered by a sprite of this height shifted by y_offset."""
    half = int(height / 2)
    start = max(-half + SCREEN_H // 2 + y_offset, 0)
    end = half + SCREEN_H // 2 + y_offset
    if end >= SCREEN_H:
        end = SCREEN_H - 1
    return start, end


def project_entity(
    entity: Entity,
    location: Vec2,
    direction: Vec2,
    plane: Vec2,
    distance_from_camera: float,
) -> Projection:
    """Transform an entity into camera space and size it for the screen."""
    rel = entity.location - location
    det = plane.x * direction.y - direction.x * plane.y
    if det == 0:
        raise ValueError("camera direction and plane are parallel")
    inv_det = 1.0 / det
    transformed = Vec2(
        inv_det * (direction.y * rel.x - direction.x * rel.y),
        inv_det * (-plane.y * rel.x + plane.x * rel.y),
    )
    if transformed.y <= 0:
        return Projection(transformed=transformed)
    depth_scale = distance_from_camera / transformed.y
    return Projection(
        transformed=transformed,
        screen_x=int((SCREEN_W / 2.0) * (1 + transformed.x / transformed.y)),
        y_offset=int(-entity.distance_from_floor * depth_scale / TILESIZE),
        width=int(abs(entity.scale.x * depth_scale)),
        height=int(abs(entity.scale.y * depth_scale)),
        visible=entity.in_game,
    )