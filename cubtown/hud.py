"""Heads-up display: held item animation, stats text and loading bar."""

from __future__ import annotations

from .definitions import FONT_HEART, SCREEN_W, TEXTURES_COUNT, Texture

FRAME_DURATION_MS = 60

SECONDS_PER_DAY = 86400
SECONDS_PER_HOUR = 3600
SECONDS_PER_MINUTE = 60
CLOCK_HOUR_SHIFT = 2

_FRAMES = {
    Texture.HUD_HAND: (Texture.PUNCH1, Texture.PUNCH2, Texture.PUNCH3),
    Texture.HUD_PISTOL: (
        Texture.PISTOL1, Texture.PISTOL2, Texture.PISTOL3,
        Texture.PISTOL4, Texture.PISTOL5,
    ),
    Texture.HUD_SHOTGUN: (
        Texture.SHOTGUN1, Texture.SHOTGUN2, Texture.SHOTGUN3,
        Texture.SHOTGUN4, Texture.SHOTGUN5,
    ),
}


class HandAnimation:
    """The attack animation of the item held in the player's hand."""

    def __init__(self) -> None:
        self.running = False
        self._index = 0
        self._started_at: int | None = None

    @property
    def index(self) -> int:
        return self._index

    def start(self) -> None:
        """Begin playing the animation from its current frame."""
        self.running = True

    def frame(self, item: Texture, now_ms: int) -> Texture:
        """Advance the animation to now_ms and return the texture to draw."""
        frames = _FRAMES.get(item)
        if frames is None:
            raise ValueError(f"{item!r} has no hand animation")
        if self.running:
            if self._started_at is None:
                self._started_at = now_ms
            if now_ms - self._started_at > FRAME_DURATION_MS:
                self._started_at = now_ms
                self._index += 1
            if self._index >= len(frames):
                self.running = False
                self._started_at = None
                self._index = 0
        return frames[self._index]


def format_money(money: int) -> str:
    """The money counter text."""
    return f"${money}"


def format_health(health: int) -> str:
    """The health counter text, led by the heart glyph."""
    return f"{FONT_HEART}{health}"


def format_clock(seconds: int) -> str:
    """The HH:MM clock shown for a time in seconds since the epoch."""
    of_day = seconds % SECONDS_PER_DAY
    hour = of_day // SECONDS_PER_HOUR + CLOCK_HOUR_SHIFT
    minute = (of_day % SECONDS_PER_HOUR) // SECONDS_PER_MINUTE
    return f"{hour:02d}:{minute:02d}"


def loading_bar_width(textures_loaded: int) -> int:
    """Pixel width of the filled loading bar after some textures loaded."""
    if textures_loaded < 0:
        raise ValueError("textures_loaded cannot be negative")
    step = (SCREEN_W // TEXTURES_COUNT) / 1.5
    return int(step * textures_loaded)