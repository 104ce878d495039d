"""Shared game constants, enumerations, settings and the texture manifest."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

SCREEN_W = 1550
SCREEN_H = 850

MAX_MONEY = 999999

FONT_HEART = "\1"

MAX_MAP_ID_LENGTH = 2
SPACES = " \t\n\v\f\r"
MAP_SUPPORTED_DIRECTIONS = "NSEW"
MAP_SUPPORTED_CHARS = "01TBGFH"
MAP_SUPPORTED_ENTITIES_CHARS = "VMD"

RIGHT_HUD_OFFSET = 25

GTA_FONT = "assets/fonts/pricedown.xpm"
GTA_FONT_BLUE_NAME = "BLUE"
GTA_FONT_BLUE_COLOR = 0x049600
GTA_FONT_RED_NAME = "RED"
GTA_FONT_RED_COLOR = 0xFB8457
GTA_FONT_YELLOW_NAME = "YELLOW"
GTA_FONT_YELLOW_COLOR = 0xDEBA8B
GTA_FONT_BLACK_NAME = "BLACK"
GTA_FONT_BLACK_COLOR = 0x000000

MINIMAP_OFFSET = 25
MINIMAP_TILE_SIZE = 25
MINIMAP_BACKGROUND_CIRCLE_RADIUS = 95

MENU_MAX_BTNS = 15
MAX_ENTITIES = 100

PLAYER_SPEED = 0.1
PLAYER_COLLISION_RADIUS = 0.18

KEY_PRESSED_MAX = 10

OPTIONS_MENU_MOUSE_LABEL = "M O U S E"
OPTIONS_MENU_FOV_LABEL = "F O V"
OPTIONS_MENU_SPEED_LABEL = "S P E E D"
OPTIONS_MENU_ROTATION_LABEL = "R O T A T I O N"

RAYS = 1
TILESIZE = 64
WALL_SCALE = 3.0

MAX_TEXTURES = 256

# Cell values stored in the map grid.
MAP_FLOOR = "0"
MAP_WALL = "1"
MAP_DOOR = "D"
MAP_TOWNHALL = "T"
MAP_BUILDING = "B"
# Sentinel for cells outside the playable area (a byte of -1).
MAP_VOID = chr(0xFF)

# One path per line; a line starting with a single character and a space
# binds that map character to the texture instead of a numbered slot.
TEXTURES_MANIFEST = """\
assets/42.xpm
assets/loading_screens/1.xpm
assets/minimap/minimap_border.xpm
assets/minimap/minimap_house.xpm
assets/minimap/bowser.xpm
assets/minimap/minimap_door.xpm
assets/minimap/minimap_money.xpm
assets/minimap/minimap_north_indication.xpm
assets/minimap/minimap_player.xpm
assets/pistol.xpm
assets/fist.xpm
assets/shotgun.xpm
assets/menus/pause/resume.xpm
assets/menus/pause/resume_hover.xpm
assets/menus/pause/options.xpm
assets/menus/pause/options_hover.xpm
assets/menus/pause/quit.xpm
assets/menus/pause/quit_hover.xpm
assets/menus/pause/title.xpm
assets/menus/options/title.xpm
assets/menus/options/plus.xpm
assets/menus/options/plus_hover.xpm
assets/menus/options/minus.xpm
assets/menus/options/minus_hover.xpm
assets/menus/back.xpm
assets/menus/back_hover.xpm
assets/img/pistol1.xpm
assets/img/pistol2.xpm
assets/img/pistol3.xpm
assets/img/pistol4.xpm
assets/img/pistol5.xpm
assets/img/punch1.xpm
assets/img/punch2.xpm
assets/img/punch3.xpm
assets/img/shotgun1.xpm
assets/img/shotgun2.xpm
assets/img/shotgun3.xpm
assets/img/shotgun4.xpm
assets/img/shotgun5.xpm
assets/walls/wall.xpm
assets/entities/soldier/front.xpm
assets/entities/soldier/front_right.xpm
assets/entities/soldier/right.xpm
assets/entities/soldier/back_right.xpm
assets/entities/soldier/back.xpm
assets/entities/soldier/back_left.xpm
assets/entities/soldier/left.xpm
assets/entities/soldier/front_left.xpm
assets/entities/money.xpm
assets/road.xpm
F assets/walls/wall3.xpm
D assets/walls/door.xpm
B assets/walls/building.xpm
G assets/walls/wall2.xpm
H assets/walls/wall3.xpm
"""


class Texture(IntEnum):
    """Identifiers of the texture slots in the atlas."""

    LOGO = 0
    LOADING_SCREEN = 1
    MINIMAP_BORDER = 2
    MINIMAP_HOUSE = 3
    MINIMAP_ENEMY = 4
    MINIMAP_DOOR = 5
    MINIMAP_MONEY = 6
    MINIMAP_NORTH_INDICATION = 7
    MINIMAP_PLAYER = 8
    HUD_PISTOL = 9
    HUD_HAND = 10
    HUD_SHOTGUN = 11
    PAUSE_MENU_RESUME = 12
    PAUSE_MENU_RESUME_H = 13
    PAUSE_MENU_OPTIONS = 14
    PAUSE_MENU_OPTIONS_H = 15
    PAUSE_MENU_QUIT = 16
    PAUSE_MENU_QUIT_H = 17
    PAUSE_MENU_TITLE = 18
    OPTIONS_MENU_TITLE = 19
    OPTIONS_MENU_PLUS = 20
    OPTIONS_MENU_PLUS_H = 21
    OPTIONS_MENU_MINUS = 22
    OPTIONS_MENU_MINUS_H = 23
    OPTIONS_MENU_BACK = 24
    OPTIONS_MENU_BACK_H = 25
    PISTOL1 = 26
    PISTOL2 = 27
    PISTOL3 = 28
    PISTOL4 = 29
    PISTOL5 = 30
    PUNCH1 = 31
    PUNCH2 = 32
    PUNCH3 = 33
    SHOTGUN1 = 34
    SHOTGUN2 = 35
    SHOTGUN3 = 36
    SHOTGUN4 = 37
    SHOTGUN5 = 38
    WALL_DEFAULT = 39
    ENTITY_SOLDIER_FRONT = 40
    ENTITY_SOLDIER_FRONT_RIGHT = 41
    ENTITY_SOLDIER_RIGHT = 42
    ENTITY_SOLDIER_BACK_RIGHT = 43
    ENTITY_SOLDIER_BACK = 44
    ENTITY_SOLDIER_BACK_LEFT = 45
    ENTITY_SOLDIER_LEFT = 46
    ENTITY_SOLDIER_FRONT_LEFT = 47
    ENTITY_MONEY = 48
    FLOOR = 49
    WALL_NORTH = 50
    WALL_SOUTH = 51
    WALL_EAST = 52
    WALL_WEST = 53
    MINIMAP = 55


# Number of textures that count towards loading progress.
TEXTURES_COUNT = 54


class EntityType(Enum):
    """Kinds of entity, keyed by their map character."""

    OFFICER = "S"
    MONEY = "M"
    DOOR = "D"
    CAR = "E"


class EntityRotation(IntEnum):
    """Which side of an entity faces the viewer."""

    FRONT = 0
    FRONT_LEFT = 1
    FRONT_RIGHT = 2
    LEFT = 3
    RIGHT = 4
    BACK = 5
    BACK_LEFT = 6
    BACK_RIGHT = 7


class DoorState(IntEnum):
    CLOSED = 0
    OPENING = 1
    OPEN = 2
    CLOSING = 3


class HandKind(IntEnum):
    """Animation sets for the item held by the player."""

    HAND = 0
    GUN = 1
    SHOTGUN = 2


class Menu(IntEnum):
    NONE = -1
    PAUSE = 0
    SETTINGS = 1
    CREDITS = 2


class ButtonType(IntEnum):
    DEFAULT = 0
    INCREMENTOR = 1


class Key(IntEnum):
    """Key symbols the game reacts to."""

    ESCAPE = 0xFF1B
    LEFT = 0xFF51
    UP = 0xFF52
    RIGHT = 0xFF53
    DOWN = 0xFF54
    W = ord("w")
    A = ord("a")
    S = ord("s")
    D = ord("d")
    E = ord("e")
    ONE = ord("1")
    TWO = ord("2")
    THREE = ord("3")


@dataclass
class Settings:
    """User-adjustable game settings."""

    fov: int
    mouse_sens: int
    player_speed: int
    player_rotation_speed: int
    debug: bool = False
    sounds: int = 0


class GameError(Exception):
    """A fatal error that ends the game with a failure status."""

    exit_code = 1


def _manifest_entries():
    for line in TEXTURES_MANIFEST.splitlines():
        line = line.strip()
        if not line:
            continue
        head, _, rest = line.partition(" ")
        if rest and len(head) == 1:
            yield head, rest.strip()
        else:
            yield None, line


def texture_paths() -> dict[Texture, str]:
    """Map each numbered texture slot to its file path, in loading order."""
    plain = [path for link, path in _manifest_entries() if link is None]
    if len(plain) > TEXTURES_COUNT:
        raise GameError("too many textures in manifest")
    return {Texture(index): path for index, path in enumerate(plain)}


def texture_links() -> dict[str, str]:
    """Map each linked map character to its texture path, in manifest order."""
    return {link: path for link, path in _manifest_entries() if link is not None}