"""Keyboard state tracking and input helpers."""

from __future__ import annotations

from typing import Iterator

from .definitions import KEY_PRESSED_MAX, SCREEN_W, Key, Texture

# Mouse movements closer than this to the screen centre are ignored.
MOUSE_DEAD_ZONE = 5

_ITEM_KEYS = {
    Key.ONE: Texture.HUD_HAND,
    Key.TWO: Texture.HUD_PISTOL,
    Key.THREE: Texture.HUD_SHOTGUN,
}


class KeyTracker:
    """The keys currently held down, in the order they were pressed.

    At most ``capacity`` keys are tracked at once; further presses are
    ignored until a tracked key is released.
    """

    def __init__(self, capacity: int = KEY_PRESSED_MAX):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._keys: list[int] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def pressed(self) -> tuple[int, ...]:
        """Held keys, oldest first."""
        return tuple(self._keys)

    def press(self, key: int) -> bool:
        """Record a key press; return whether the key is now tracked anew."""
        if len(self._keys) >= self._capacity or key in self._keys:
            return False
        self._keys.append(key)
        return True

    def release(self, key: int) -> bool:
        """Forget a held key; return whether it was held."""
        if key not in self._keys:
            return False
        self._keys.remove(key)
        return True

    def is_pressed(self, key: int) -> bool:
        return key in self._keys

    def __contains__(self, key: object) -> bool:
        return key in self._keys

    def __iter__(self) -> Iterator[int]:
        return iter(self._keys)

    def __len__(self) -> int:
        return len(self._keys)


def item_for_key(key: int) -> Texture | None:
    """The HUD item selected by a number key, or None for other keys."""
    try:
        return _ITEM_KEYS.get(Key(key))
    except ValueError:
        return None


def mouse_rotation(x: int, rotation_speed: int) -> float:
    """Rotation to apply for a mouse at column x, before re-centring it.

    Small movements around the centre of the screen are ignored; any
    other movement turns by one fixed step in its direction.
    """
    diff = x - SCREEN_W // 2
    if abs(diff) < MOUSE_DEAD_ZONE:
        return 0.0
    step = -1 if diff < 0 else 1
    return (rotation_speed / 100) * step