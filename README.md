# cubtown

`cubtown` holds the game logic of a small first-person game. The world is a
grid map that a renderer draws by raycasting. The package uses only the
standard library. It keeps the game state and does the arithmetic a renderer
needs.

## Modules

- **`cubtown.definitions`**: screen size, map cell characters and other
  constants, plus the enumerations `Texture`, `EntityType`, `EntityRotation`,
  `DoorState`, `HandKind`, `Menu`, `ButtonType` and `Key`. It also defines
  the `Settings` dataclass and the `GameError` exception. `texture_paths()`
  maps each numbered texture slot to its asset path. `texture_links()` maps
  map characters such as `"D"` or `"B"` to the wall texture they use.
- **`cubtown.vectors`**: `Vec2`, an immutable 2D vector. It supports `+`,
  `-`, scaling, negation and unpacking, and has `length()`, `normalized()`
  and `distance_to()`.
- **`cubtown.game_map`**: `GameMap`, a mutable grid whose rows may differ in
  length. It has `is_outside`, `is_floor`, `is_wall`, `is_void`, `get_cell`
  and `set_cell`. A cell outside the grid counts as void and not as a wall.
  `set_cell` raises `IndexError` outside the grid.
- **`cubtown.player`**:
  - `Player` holds location, heading, camera plane, money, health and the
    held item. `Player.update` moves and turns the player from the held keys.
    It caps money at 999999.
  - `can_move` checks the player's collision square against the walls.
- **`cubtown.entities`**:
  - `Entity` is one sprite on the map. `new_soldier`, `new_money` and
    `new_door` create the three kinds.
  - `update_entities` updates distances and money bobbing and sorts the
    entities furthest first. It returns the money collected.
  - `handle_door_interaction`, `find_door` and `toggle_door` open or close the
    door tile in front of the player.
  - `texture_rotation` and `entity_texture` pick one of eight views.
  - `project_entity` returns a `Projection` that gives the sprite's screen
    column, vertical offset, size and drawn ranges (`draw_range_x`,
    `draw_range_y`).
- **`cubtown.controls`**:
  - `KeyTracker` holds the keys that are down, at most ten by default, oldest
    first.
  - `item_for_key` maps the keys `1`, `2` and `3` to fist, pistol and
    shotgun.
  - `mouse_rotation` turns the mouse column into one rotation step. It
    ignores movement within five pixels of the centre.
- **`cubtown.menus`**:
  - `Button` has a hit test with a margin, `Button.contains`.
  - `Incrementor` holds a setting that is kept between a minimum and a
    maximum.
  - `pause_menu_buttons` and `options_menu_buttons` lay out the two menus.
  - `button_at` finds the button at a point. `handle_click` presses that
    button and returns a `MenuAction`.
- **`cubtown.hud`**:
  - `HandAnimation` handles the frame timing of the attack animation, 60 ms
    per frame.
  - `format_money`, `format_health` and `format_clock` produce the HUD
    texts. `format_clock` shifts the hour by two.
  - `loading_bar_width` gives the width of the loading bar.
- **`cubtown.minimap`**:
  - `tile_color` and `minimap_colors` give tile colours.
  - `marker_offset` and `house_offset` place markers, rotated so the heading
    points up and pinned to the rim beyond 3.5 tiles.
  - `rotate_background_point` gives the rotated point to sample for the
    background.
  - `outside_circle` tests whether a point is outside the minimap circle.
  - `north_indicator_position` places the north indicator.
- **`cubtown.fonts`**:
  - `Font` and `FontRegistry` keep fonts by name. The registry refuses a
    second font with the same name.
  - `glyph_origin` gives the cell of a character in a 16-column sheet of
    48-pixel glyphs.
  - `layout_text` places each character of a string on screen.
- **`cubtown.game`**: `Game` joins the parts above.
  - It handles key and mouse events (`on_key_pressed`, `on_key_released`,
    `on_mouse_button_down`, `on_mouse_move`).
  - Escape switches between pause and play.
  - `configure_menus` builds the menu buttons from texture sizes.
  - `update()` advances the game by one frame.

## Example

```python
from cubtown.definitions import Key, Settings
from cubtown.entities import new_door, new_money
from cubtown.game import Game
from cubtown.game_map import GameMap

game_map = GameMap([
    "11111",
    "10001",
    "10D01",
    "10001",
    "11111",
])

settings = Settings(fov=66, mouse_sens=10, player_speed=1, player_rotation_speed=3)
game = Game(game_map, settings, (1, 3), [new_money(1, 1), new_door(2, 2)])

game.on_key_pressed(Key.W)
game.update()
game.on_key_released(Key.W)
print(game.player.location, game.player.money)
```

Key codes are the values in `cubtown.definitions.Key`. Letter and digit keys
use their character code.

## What it does not do

`cubtown` draws nothing and opens no window. It provides no raycaster, which
means no wall, floor or sky rendering. It does not read map files or load
textures and font images. It has no command to start a game. A program that
uses it must supply a `GameMap`, the entities and the texture sizes, and must
do all the drawing and input handling itself.

## Errors

`cubtown.definitions.GameError` is raised for errors the game cannot recover
from, such as more than 100 entities in a `Game`. Bad arguments raise
`ValueError` or `IndexError`.