"""The game state and how it reacts to input and to each frame."""

from __future__ import annotations

import math
from typing import Iterable, Mapping

from .controls import KeyTracker, item_for_key, mouse_rotation
from .definitions import MAX_ENTITIES, GameError, Key, Menu, Settings, Texture
from .entities import Entity, handle_door_interaction, update_entities
from .game_map import GameMap
from .hud import HandAnimation
from .menus import (
    Button,
    MenuAction,
    handle_click,
    options_menu_buttons,
    pause_menu_buttons,
)
from .player import Player

LEFT_MOUSE_BUTTON = 1
CHEAT_MONEY = 5


class Game:
    """A running level: map, player, entities, input state and menus."""

    def __init__(
        self,
        game_map: GameMap,
        settings: Settings,
        spawn: tuple[int, int],
        entities: Iterable[Entity],
    ):
        self.map = game_map
        self.settings = settings
        self.spawn = (int(spawn[0]), int(spawn[1]))
        self.entities = list(entities)
        if len(self.entities) > MAX_ENTITIES:
            raise GameError(f"too many entities (at most {MAX_ENTITIES})")
        self.player = Player()
        self.player.set_position(self.spawn[0] + 0.5, self.spawn[1] + 0.5, 0.0)
        self.keys = KeyTracker()
        self.hand = HandAnimation()
        self.menu = Menu.NONE
        self.mouse_position = (0, 0)
        self.running = True
        self.menu_buttons: dict[Menu, list[Button]] = {Menu.PAUSE: [], Menu.SETTINGS: []}

    @property
    def plane_len(self) -> float:
        """Half-width of the camera plane for the configured field of view."""
        return math.tan(math.radians(self.settings.fov) / 2)

    def configure_menus(self, sizes: Mapping[Texture, tuple[int, int]]) -> None:
        """Build the menu buttons from the (width, height) of their textures."""
        self.menu_buttons[Menu.PAUSE] = pause_menu_buttons(
            sizes[Texture.PAUSE_MENU_RESUME],
            sizes[Texture.PAUSE_MENU_OPTIONS],
            sizes[Texture.PAUSE_MENU_QUIT],
        )
        self.menu_buttons[Menu.SETTINGS] = options_menu_buttons(
            sizes[Texture.OPTIONS_MENU_BACK]
        )

    def pause(self) -> None:
        self.menu = Menu.PAUSE

    def unpause(self) -> None:
        self.menu = Menu.NONE

    def on_key_pressed(self, key: int) -> None:
        if key == Key.ESCAPE:
            if self.menu != Menu.NONE:
                self.unpause()
            else:
                self.pause()
        if key == Key.UP:
            self.player.money += CHEAT_MONEY
        item = item_for_key(key)
        if item is not None:
            self.player.item = item
        if key == Key.E:
            handle_door_interaction(
                self.entities, self.map, self.player.location, self.player.direction
            )
        self.keys.press(key)

    def on_key_released(self, key: int) -> None:
        self.keys.release(key)

    def _apply(self, action: MenuAction) -> None:
        if action is MenuAction.RESUME:
            self.unpause()
        elif action is MenuAction.OPTIONS:
            self.menu = Menu.SETTINGS
        elif action is MenuAction.BACK:
            self.menu = Menu.PAUSE
        elif action is MenuAction.QUIT:
            self.running = False

    def on_mouse_button_down(self, button: int, x: int, y: int) -> MenuAction | None:
        """Handle a click; buttons are hit-tested at the last mouse position."""
        if button != LEFT_MOUSE_BUTTON:
            return None
        action = None
        if self.menu != Menu.NONE:
            mx, my = self.mouse_position
            action = handle_click(self.menu_buttons.get(self.menu, []), mx, my, self.settings)
            if action is not None:
                self._apply(action)
        self.hand.start()
        return action

    def on_mouse_move(self, x: int, y: int) -> float:
        """Track the mouse; while playing, turn the player. Returns the turn."""
        self.mouse_position = (x, y)
        if self.menu != Menu.NONE:
            return 0.0
        turn = mouse_rotation(x, self.settings.player_rotation_speed)
        self.player.rotation_angle += turn
        return turn

    def update(self) -> None:
        """Advance the player and the entities by one frame."""
        self.player.update(
            self.map,
            self.keys,
            self.settings.player_speed,
            self.settings.player_rotation_speed,
            self.plane_len,
        )
        self.player.money += update_entities(self.entities, self.player.location)