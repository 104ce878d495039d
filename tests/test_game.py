import pytest

from cubtown.definitions import MAP_DOOR, MAP_FLOOR, GameError, Key, Menu, Settings, Texture
from cubtown.entities import new_door, new_money
from cubtown.game import Game
from cubtown.game_map import GameMap
from cubtown.menus import MenuAction

SIZES = {
    Texture.PAUSE_MENU_RESUME: (200, 60),
    Texture.PAUSE_MENU_OPTIONS: (200, 60),
    Texture.PAUSE_MENU_QUIT: (200, 60),
    Texture.OPTIONS_MENU_BACK: (120, 40),
}


def make_game(rows=None, entities=(), spawn=(1, 1)):
    rows = rows or ["11111", "10001", "10001", "11111"]
    settings = Settings(fov=60, mouse_sens=50, player_speed=1, player_rotation_speed=5)
    game = Game(GameMap(rows), settings, spawn, entities)
    game.configure_menus(SIZES)
    return game


def centre(button):
    return button.x + button.width // 2, button.y + button.height // 2


def test_player_starts_at_spawn_centre():
    game = make_game(spawn=(2, 1))
    assert (game.player.location.x, game.player.location.y) == (2.5, 1.5)


def test_escape_toggles_pause():
    game = make_game()
    game.on_key_pressed(Key.ESCAPE)
    assert game.menu == Menu.PAUSE
    game.on_key_released(Key.ESCAPE)
    game.on_key_pressed(Key.ESCAPE)
    assert game.menu == Menu.NONE


def test_up_key_gives_money():
    game = make_game()
    game.on_key_pressed(Key.UP)
    assert game.player.money == 5


def test_number_key_selects_item():
    game = make_game()
    game.on_key_pressed(Key.TWO)
    assert game.player.item == Texture.HUD_PISTOL


def test_keys_are_tracked_until_released():
    game = make_game()
    game.on_key_pressed(Key.W)
    assert game.keys.is_pressed(Key.W)
    game.on_key_released(Key.W)
    assert not game.keys.is_pressed(Key.W)


def test_e_opens_door_in_front():
    rows = ["11111", "10D01", "11111"]
    game = make_game(rows=rows, entities=[new_door(2, 1)])
    game.on_key_pressed(Key.E)
    assert game.map.get_cell(2, 1) == MAP_FLOOR
    game.on_key_released(Key.E)
    game.on_key_pressed(Key.E)
    assert game.map.get_cell(2, 1) == MAP_DOOR


def test_mouse_turns_player_only_while_playing():
    game = make_game()
    turn = game.on_mouse_move(0, 0)
    assert turn == pytest.approx(-0.05)
    assert game.player.rotation_angle == pytest.approx(-0.05)
    game.pause()
    assert game.on_mouse_move(0, 0) == 0.0
    assert game.player.rotation_angle == pytest.approx(-0.05)


def test_click_resume_unpauses():
    game = make_game()
    game.pause()
    x, y = centre(game.menu_buttons[Menu.PAUSE][0])
    game.on_mouse_move(x, y)
    assert game.on_mouse_button_down(1, x, y) is MenuAction.RESUME
    assert game.menu == Menu.NONE
    assert game.hand.running is True


def test_click_quit_stops_game():
    game = make_game()
    game.pause()
    x, y = centre(game.menu_buttons[Menu.PAUSE][2])
    game.on_mouse_move(x, y)
    game.on_mouse_button_down(1, x, y)
    assert game.running is False


def test_options_plus_raises_setting():
    game = make_game()
    game.pause()
    x, y = centre(game.menu_buttons[Menu.PAUSE][1])
    game.on_mouse_move(x, y)
    game.on_mouse_button_down(1, x, y)
    assert game.menu == Menu.SETTINGS
    x, y = centre(game.menu_buttons[Menu.SETTINGS][0])
    game.on_mouse_move(x, y)
    assert game.on_mouse_button_down(1, x, y) is MenuAction.ADJUSTED
    assert game.settings.mouse_sens == 51


def test_other_mouse_button_does_nothing():
    game = make_game()
    assert game.on_mouse_button_down(3, 0, 0) is None
    assert game.hand.running is False


def test_walking_forward_moves_along_heading():
    game = make_game()
    game.on_key_pressed(Key.W)
    game.update()
    assert game.player.location.x > 1.5
    assert game.player.location.y == pytest.approx(1.5)


def test_update_collects_money():
    money = new_money(1, 1)
    game = make_game(entities=[money])
    game.update()
    assert game.player.money == 10
    assert money.in_game is False


def test_too_many_entities_rejected():
    with pytest.raises(GameError):
        make_game(entities=[new_money(1, 1) for _ in range(101)])