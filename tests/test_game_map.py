import pytest

from cubtown.definitions import MAP_DOOR, MAP_FLOOR, MAP_VOID, MAP_WALL
from cubtown.game_map import GameMap


@pytest.fixture
def game_map():
    return GameMap(["1111", "10D1", "1" + MAP_VOID + "1", "111"])


def test_dimensions(game_map):
    assert game_map.height == 4
    assert game_map.width == 4


def test_empty_map():
    empty = GameMap([])
    assert empty.width == 0
    assert empty.is_outside(0, 0)
    assert empty.is_void(0, 0)


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (4, 0), (3, 2), (0, 4)])
def test_outside(game_map, x, y):
    assert game_map.is_outside(x, y)
    assert not game_map.is_floor(x, y)
    assert not game_map.is_wall(x, y)
    assert game_map.is_void(x, y)
    assert game_map.get_cell(x, y) is None


def test_cell_kinds(game_map):
    assert game_map.is_floor(1, 1)
    assert not game_map.is_wall(1, 1)
    assert game_map.is_wall(0, 0)
    assert game_map.is_wall(2, 1)
    assert game_map.get_cell(2, 1) == MAP_DOOR
    assert game_map.is_void(1, 2)
    assert game_map.is_wall(1, 2)
    assert not game_map.is_void(0, 0)


def test_set_cell_round_trip(game_map):
    game_map.set_cell(2, 1, MAP_FLOOR)
    assert game_map.is_floor(2, 1)
    assert game_map.rows[1] == "1001"
    game_map.set_cell(2, 1, MAP_WALL)
    assert game_map.get_cell(2, 1) == MAP_WALL


def test_set_cell_outside_raises(game_map):
    with pytest.raises(IndexError):
        game_map.set_cell(10, 10, MAP_FLOOR)


def test_set_cell_rejects_multiple_chars(game_map):
    with pytest.raises(ValueError):
        game_map.set_cell(1, 1, "00")