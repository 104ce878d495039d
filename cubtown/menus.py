"""Pause and options menus: buttons, hit testing and setting incrementors."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from .definitions import (
    OPTIONS_MENU_FOV_LABEL,
    OPTIONS_MENU_MOUSE_LABEL,
    OPTIONS_MENU_ROTATION_LABEL,
    OPTIONS_MENU_SPEED_LABEL,
    SCREEN_H,
    SCREEN_W,
    ButtonType,
    Settings,
    Texture,
)

# Extra pixels around a button that still count as a hit.
HIT_MARGIN = 5

# Size of the plus and minus buttons of the options menu.
INCREMENTOR_BUTTON_SIZE = (48, 48)

Size = tuple[int, int]


class MenuAction(Enum):
    """What the game should do after a button was clicked."""

    RESUME = "resume"
    OPTIONS = "options"
    QUIT = "quit"
    BACK = "back"
    ADJUSTED = "adjusted"


@dataclass
class Incrementor:
    """A bounded integer setting adjusted by plus and minus buttons."""

    label: str
    setting: str
    step: int = 1
    minimum: int = 0
    maximum: int = 100
    row: int = 0

    def _apply(self, settings: Settings, delta: int) -> int:
        value = getattr(settings, self.setting) + delta
        if value < self.minimum:
            value = self.minimum
        if value > self.maximum:
            value = self.maximum
        setattr(settings, self.setting, value)
        return value

    def increment(self, settings: Settings) -> int:
        """Raise the setting by one step, clamped; return the new value."""
        return self._apply(settings, self.step)

    def decrement(self, settings: Settings) -> int:
        """Lower the setting by one step, clamped; return the new value."""
        return self._apply(settings, -self.step)


OPTIONS_INCREMENTORS = (
    Incrementor(OPTIONS_MENU_MOUSE_LABEL, "mouse_sens", 1, 1, 100, 0),
    Incrementor(OPTIONS_MENU_FOV_LABEL, "fov", 1, 45, 100, 2),
    Incrementor(OPTIONS_MENU_SPEED_LABEL, "player_speed", 1, 1, 10, 4),
    Incrementor(OPTIONS_MENU_ROTATION_LABEL, "player_rotation_speed", 1, 1, 10, 6),
)


@dataclass
class Button:
    """A clickable menu button with a normal and a hover texture."""

    x: int
    y: int
    width: int
    height: int
    texture: Texture
    hover_texture: Texture
    action: MenuAction | None = None
    incrementor: Incrementor | None = None
    decrease: bool = False

    def __post_init__(self) -> None:
        if (self.action is None) == (self.incrementor is None):
            raise ValueError("a button needs either an action or an incrementor")

    @property
    def type(self) -> ButtonType:
        if self.incrementor is not None:
            return ButtonType.INCREMENTOR
        return ButtonType.DEFAULT

    def contains(self, x: int, y: int) -> bool:
        """Whether (x, y) falls on the button or within its hit margin."""
        return (
            self.x - HIT_MARGIN <= x <= self.x + self.width + HIT_MARGIN
            and self.y - HIT_MARGIN <= y <= self.y + self.height + HIT_MARGIN
        )

    def _press(self, settings: Settings) -> MenuAction:
        if self.incrementor is None:
            assert self.action is not None
            return self.action
        if self.decrease:
            self.incrementor.decrement(settings)
        else:
            self.incrementor.increment(settings)
        return MenuAction.ADJUSTED


def button_at(buttons: Iterable[Button], x: int, y: int) -> Button | None:
    """The first button under (x, y), or None."""
    return next((button for button in buttons if button.contains(x, y)), None)


def pause_menu_buttons(resume: Size, options: Size, quit: Size) -> list[Button]:
    """The pause menu buttons, given the (width, height) of each texture."""
    row_y = SCREEN_H // 4 + 160
    centre = SCREEN_W // 2
    return [
        Button(centre - 425, row_y, *resume, Texture.PAUSE_MENU_RESUME,
               Texture.PAUSE_MENU_RESUME_H, action=MenuAction.RESUME),
        Button(centre - 50, row_y, *options, Texture.PAUSE_MENU_OPTIONS,
               Texture.PAUSE_MENU_OPTIONS_H, action=MenuAction.OPTIONS),
        Button(centre + 325, row_y, *quit, Texture.PAUSE_MENU_QUIT,
               Texture.PAUSE_MENU_QUIT_H, action=MenuAction.QUIT),
    ]


def options_menu_buttons(back: Size) -> list[Button]:
    """Plus and minus buttons for every setting, then the back button.

    back is the (width, height) of the back button texture.
    """
    centre = SCREEN_W // 2
    buttons = []
    for incrementor in OPTIONS_INCREMENTORS:
        row_y = SCREEN_H // 4 + 50 * incrementor.row - 25
        buttons.append(
            Button(centre + 225 + 125 - 70, row_y, *INCREMENTOR_BUTTON_SIZE,
                   Texture.OPTIONS_MENU_PLUS, Texture.OPTIONS_MENU_PLUS_H,
                   incrementor=incrementor)
        )
        buttons.append(
            Button(centre + 225 - 140, row_y, *INCREMENTOR_BUTTON_SIZE,
                   Texture.OPTIONS_MENU_MINUS, Texture.OPTIONS_MENU_MINUS_H,
                   incrementor=incrementor, decrease=True)
        )
    buttons.append(
        Button(centre - 55, SCREEN_H - SCREEN_H // 4, *back,
               Texture.OPTIONS_MENU_BACK, Texture.OPTIONS_MENU_BACK_H,
               action=MenuAction.BACK)
    )
    return buttons


def handle_click(
    buttons: Iterable[Button], x: int, y: int, settings: Settings
) -> MenuAction | None:
    """Press the first button under (x, y); return its action, or None."""
    button = button_at(buttons, x, y)
    if button is None:
        return None
    return button._press(settings)