import math

import pytest

from cubtown.definitions import (
    MAP_DOOR,
    MAP_FLOOR,
    SCREEN_H,
    SCREEN_W,
    EntityRotation,
    EntityType,
    Texture,
)
from cubtown.entities import (
    Projection,
    draw_range_x,
    draw_range_y,
    entity_texture,
    find_door,
    handle_door_interaction,
    new_door,
    new_money,
    new_soldier,
    project_entity,
    texture_rotation,
    toggle_door,
    update_entities,
    update_money,
)
from cubtown.game_map import GameMap
from cubtown.vectors import Vec2


def test_new_soldier():
    s = new_soldier(3, 4)
    assert s.type is EntityType.OFFICER
    assert s.location == Vec2(3.5, 4.5)
    assert s.health == 10
    assert s.anchored
    assert s.scale == Vec2(1.2, 1.3)
    assert s.minimap_texture is Texture.MINIMAP_ENEMY
    assert s.rotation_angle == pytest.approx(math.pi / 2)
    assert s.textures[EntityRotation.BACK] is Texture.ENTITY_SOLDIER_BACK
    assert set(s.textures) == set(EntityRotation)


def test_new_money():
    m = new_money(0, 2)
    assert m.type is EntityType.MONEY
    assert m.location == Vec2(0.5, 2.5)
    assert m.distance_from_floor == -25
    assert m.scale == Vec2(0.2, 0.2)
    assert set(m.textures.values()) == {Texture.ENTITY_MONEY}


def test_new_door():
    d = new_door(1, 1)
    assert d.type is EntityType.DOOR
    assert d.not_displayed
    assert d.minimap_texture is Texture.MINIMAP_DOOR
    assert set(d.textures.values()) == {Texture.LOGO}


def test_money_bobs_between_bounds():
    m = new_money(0, 0)
    m.distance_from_player = 10
    assert update_money(m) == 0
    assert m.distance_from_floor == pytest.approx(-25 + 0.05)
    assert not m.flag
    for _ in range(1000):
        update_money(m)
        assert -25 - 1e-9 <= m.distance_from_floor <= -23 + 0.05 + 1e-9
        if m.flag:
            break
    assert m.flag
    assert m.distance_from_floor > -23


def test_money_pickup():
    m = new_money(0, 0)
    m.distance_from_player = 0.5
    assert update_money(m) == 10
    assert not m.in_game


def test_update_entities_sorts_furthest_first_and_collects():
    ents = [new_money(1, 0), new_soldier(8, 0), new_money(0, 0), new_soldier(4, 0)]
    gained = update_entities(ents, Vec2(0.5, 0.5))
    assert gained == 10
    distances = [e.distance_from_player for e in ents]
    assert distances == sorted(distances, reverse=True)
    collected = [e for e in ents if not e.in_game]
    assert len(collected) == 1 and collected[0].location == Vec2(0.5, 0.5)


def test_update_entities_skips_removed():
    m = new_money(5, 5)
    m.in_game = False
    m.distance_from_player = 42.0
    assert update_entities([m], Vec2(5.5, 5.5)) == 0
    assert m.distance_from_player == 42.0


@pytest.mark.parametrize(
    "offset,expected",
    [
        (0.0, EntityRotation.FRONT),
        (math.pi / 4, EntityRotation.FRONT_RIGHT),
        (math.pi / 2, EntityRotation.RIGHT),
        (3 * math.pi / 4, EntityRotation.BACK_RIGHT),
        (math.pi, EntityRotation.BACK),
        (5 * math.pi / 4, EntityRotation.BACK_LEFT),
        (3 * math.pi / 2, EntityRotation.LEFT),
        (7 * math.pi / 4, EntityRotation.FRONT_LEFT),
        (-math.pi / 2, EntityRotation.LEFT),
        (4 * math.pi, EntityRotation.FRONT),
    ],
)
def test_texture_rotation(offset, expected):
    assert texture_rotation(1.0 + offset, 1.0) is expected


def test_entity_texture_for_soldier():
    s = new_soldier(0, 0)
    assert entity_texture(s, s.rotation_angle) is Texture.ENTITY_SOLDIER_FRONT
    assert entity_texture(s, s.rotation_angle - math.pi) is Texture.ENTITY_SOLDIER_BACK


@pytest.fixture
def door_map():
    return GameMap(["111", "1D1", "101", "101"])


def test_door_interaction_toggles(door_map):
    door = new_door(1, 1)
    ents = [new_soldier(1, 2), door]
    player = Vec2(1.5, 2.5)
    facing = Vec2(0, -1)
    assert handle_door_interaction(ents, door_map, player, facing) is door
    assert door_map.get_cell(1, 1) == MAP_FLOOR
    assert handle_door_interaction(ents, door_map, player, facing) is door
    assert door_map.get_cell(1, 1) == MAP_DOOR


def test_door_too_close_to_player(door_map):
    door = new_door(1, 1)
    assert find_door([door], 1.5, 1.0, Vec2(1.5, 1.9)) is None
    assert handle_door_interaction([door], door_map, Vec2(1.5, 1.9), Vec2(0, -1)) is None
    assert door_map.get_cell(1, 1) == MAP_DOOR


def test_find_door_ignores_other_entities():
    assert find_door([new_soldier(1, 1), new_money(1, 1)], 1.5, 1.5, Vec2(5, 5)) is None


def test_toggle_door_outside_map_is_ignored(door_map):
    before = door_map.rows
    toggle_door(door_map, new_door(10, 10))
    assert door_map.rows == before


def test_draw_range_x_clamps():
    assert draw_range_x(0, 100) == (100, 100)
    start, end = draw_range_x(400, SCREEN_W)
    assert start == SCREEN_W - 200
    assert end == SCREEN_W - 1
    assert draw_range_x(400, 0)[0] == 0


def test_draw_range_y_clamps():
    assert draw_range_y(0, 0) == (SCREEN_H // 2, SCREEN_H // 2)
    assert draw_range_y(10 * SCREEN_H, 0) == (0, SCREEN_H - 1)
    top, bottom = draw_range_y(100, 20)
    assert bottom - top == 100


def test_project_entity_straight_ahead():
    s = new_soldier(5, 0)
    p = project_entity(s, Vec2(0.5, 0.5), Vec2(1, 0), Vec2(0, 0.66), 1000.0)
    assert isinstance(p, Projection)
    assert p.visible
    assert p.transformed.x == pytest.approx(0.0, abs=1e-12)
    assert p.transformed.y == pytest.approx(5.0)
    assert p.screen_x == SCREEN_W // 2
    assert p.height > p.width > 0
    assert p.y_offset == 0


def test_project_entity_further_is_smaller():
    near = project_entity(new_soldier(3, 0), Vec2(0.5, 0.5), Vec2(1, 0), Vec2(0, 0.66), 1000.0)
    far = project_entity(new_soldier(9, 0), Vec2(0.5, 0.5), Vec2(1, 0), Vec2(0, 0.66), 1000.0)
    assert far.width < near.width
    assert far.height < near.height


def test_project_entity_behind_is_hidden():
    p = project_entity(new_soldier(0, 0), Vec2(5.5, 0.5), Vec2(1, 0), Vec2(0, 0.66), 1000.0)
    assert not p.visible
    assert p.transformed.y < 0


def test_project_removed_entity_is_hidden():
    m = new_money(5, 0)
    m.in_game = False
    p = project_entity(m, Vec2(0.5, 0.5), Vec2(1, 0), Vec2(0, 0.66), 1000.0)
    assert not p.visible


def test_project_entity_parallel_camera_raises():
    with pytest.raises(ValueError):
        project_entity(new_soldier(1, 1), Vec2(0, 0), Vec2(1, 0), Vec2(2, 0), 1000.0)