"""blobworld/renderer.py — Pyxel renderer for level worlds.

Theme colors are hex strings or CSS color names; Pyxel draws with palette
slots, so each theme color is written into a fixed slot before drawing.
Draw order is list order: later platforms overlay earlier ones.
"""

from __future__ import annotations

import logging

import pyxel

from blobworld.constants import HUD_MARGIN, THEME_BG, THEME_BLOB, THEME_PLATFORM
from blobworld.geometry import Rect

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Palette
# ---------------------------------------------------------------------------

BG_SLOT = 0
PLATFORM_SLOT = 1
BLOB_SLOT = 2
HUD_SLOT = 3

_HUD_COLOR = 0x202020

# CSS basic colors plus a few common extended names
NAMED_COLORS: dict[str, int] = {
    "black": 0x000000,
    "silver": 0xC0C0C0,
    "gray": 0x808080,
    "grey": 0x808080,
    "white": 0xFFFFFF,
    "maroon": 0x800000,
    "red": 0xFF0000,
    "purple": 0x800080,
    "fuchsia": 0xFF00FF,
    "magenta": 0xFF00FF,
    "green": 0x008000,
    "lime": 0x00FF00,
    "olive": 0x808000,
    "yellow": 0xFFFF00,
    "navy": 0x000080,
    "blue": 0x0000FF,
    "teal": 0x008080,
    "aqua": 0x00FFFF,
    "cyan": 0x00FFFF,
    "orange": 0xFFA500,
    "pink": 0xFFC0CB,
    "brown": 0xA52A2A,
    "gold": 0xFFD700,
    "skyblue": 0x87CEEB,
    "lightgray": 0xD3D3D3,
    "lightgrey": 0xD3D3D3,
    "darkgray": 0xA9A9A9,
    "darkgrey": 0xA9A9A9,
    "whitesmoke": 0xF5F5F5,
}


def color(value: str | int) -> int:
    """Convert a ``#RRGGBB`` / ``#RGB`` string, a color name, or an int to 0xRRGGBB.

    Raises:
        ValueError: If *value* is not a recognizable color.
    """
    if isinstance(value, int):
        return value & 0xFFFFFF
    name = value.strip().lower()
    if name in NAMED_COLORS:
        return NAMED_COLORS[name]
    digits = name.lstrip("#")
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    if len(digits) != 6:
        raise ValueError(f"Not a color: {value!r}")
    return int(digits, 16)


def _theme_color(value, default: str) -> int:
    """Like color(), but unknown values fall back to *default* with a warning."""
    try:
        return color(value)
    except (ValueError, AttributeError):
        logger.warning("Unrecognized theme color %r; using %s", value, default)
        return color(default)


def set_theme_palette(theme) -> None:
    """Write theme colors into their palette slots."""
    pyxel.colors[BG_SLOT] = _theme_color(theme.bg, THEME_BG)
    pyxel.colors[PLATFORM_SLOT] = _theme_color(theme.platform, THEME_PLATFORM)
    pyxel.colors[BLOB_SLOT] = _theme_color(theme.blob, THEME_BLOB)
    pyxel.colors[HUD_SLOT] = _HUD_COLOR


# ---------------------------------------------------------------------------
# World
# ---------------------------------------------------------------------------

def draw_platform(rect: Rect, col: int) -> None:
    pyxel.rect(rect.x, rect.y, rect.w, rect.h, col)


def draw_world(level) -> None:
    """Fill the background, then draw every platform in order."""
    set_theme_palette(level.theme)
    pyxel.cls(BG_SLOT)
    for p in level.platforms:
        draw_platform(p, PLATFORM_SLOT)


def draw_blob(x: float, y: float, r: float) -> None:
    """Draw the player blob centered on (x, y)."""
    pyxel.circ(x, y, r, BLOB_SLOT)


def draw_hud(level) -> None:
    pyxel.text(HUD_MARGIN, HUD_MARGIN, level.name, HUD_SLOT)
