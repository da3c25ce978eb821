"""blobworld/level.py — Level resolution and level file loading.

Turns one level description (a dict, usually parsed from levels.json) into
a fully resolved Level: theme colors, physics knobs, spawn point and the
ordered platform list. Authored platforms come first, generated ones are
appended after them.

Every field defaults independently. A field is absent only when it is
missing or None, so explicit zeros survive.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import numpy as np
import yaml

from blobworld.constants import (
    DEFAULT_CANVAS_HEIGHT,
    DEFAULT_CANVAS_WIDTH,
    DEFAULT_LEVEL_NAME,
    GRAVITY,
    JUMP_VELOCITY,
    START_R,
    START_X,
    START_Y,
    THEME_BG,
    THEME_BLOB,
    THEME_PLATFORM,
)
from blobworld.generators import generate_platforms
from blobworld.geometry import Rect, max_bottom, max_right

logger = logging.getLogger(__name__)


class LevelFileError(ValueError):
    """A level file could not be parsed into level descriptions."""


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Theme:
    bg: str = THEME_BG
    platform: str = THEME_PLATFORM
    blob: str = THEME_BLOB


@dataclass(frozen=True)
class SpawnPoint:
    """Player spawn position and blob radius."""
    x: float = START_X
    y: float = START_Y
    r: float = START_R


@dataclass
class Level:
    """A resolved level, ready for physics and rendering."""

    name: str = DEFAULT_LEVEL_NAME
    theme: Theme = field(default_factory=Theme)
    gravity: float = GRAVITY
    jumpV: float = JUMP_VELOCITY
    start: SpawnPoint = field(default_factory=SpawnPoint)
    platforms: list[Rect] = field(default_factory=list)

    def infer_width(self, default_w: float = DEFAULT_CANVAS_WIDTH) -> float:
        """Rightmost platform edge, or *default_w* with no platforms."""
        return max_right(self.platforms, default_w)

    def infer_height(self, default_h: float = DEFAULT_CANVAS_HEIGHT) -> float:
        """Lowest platform edge, or *default_h* with no platforms."""
        return max_bottom(self.platforms, default_h)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "theme": {
                "bg": self.theme.bg,
                "platform": self.theme.platform,
                "blob": self.theme.blob,
            },
            "gravity": self.gravity,
            "jumpV": self.jumpV,
            "start": {"x": self.start.x, "y": self.start.y, "r": self.start.r},
            "platforms": [p.to_dict() for p in self.platforms],
        }


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------

def _or_default(value, default):
    return default if value is None else value


def _mapping(value) -> Mapping:
    return value if isinstance(value, Mapping) else {}


def _resolve_theme(raw) -> Theme:
    overrides = {k: v for k, v in _mapping(raw).items()
                 if k in ("bg", "platform", "blob") and v is not None}
    return Theme(**overrides)


def _resolve_start(raw) -> SpawnPoint:
    start = _mapping(raw)
    return SpawnPoint(
        x=_or_default(start.get("x"), START_X),
        y=_or_default(start.get("y"), START_Y),
        r=_or_default(start.get("r"), START_R),
    )


def _resolve_platforms(
    desc: Mapping,
    rng: Optional[np.random.Generator],
) -> list[Rect]:
    raw = desc.get("platforms")
    authored = raw if isinstance(raw, (list, tuple)) else []
    platforms = [Rect.from_dict(p) for p in authored]

    gen = desc.get("generated")
    generated: list[Rect] = []
    if isinstance(gen, Mapping):
        generated = generate_platforms(gen, rng)

    logger.debug(
        "Resolved %d authored + %d generated platforms",
        len(platforms), len(generated),
    )
    return platforms + generated


def build_level(
    desc: Optional[Mapping] = None,
    rng: Optional[np.random.Generator] = None,
) -> Level:
    """Resolve a level description into a Level.

    Args:
        desc: Raw level record. Every key is optional.
        rng: Random source for unseeded random generators. A seed inside
            the generator config takes precedence.

    Returns:
        Level with every field populated.
    """
    desc = _mapping(desc)
    return Level(
        name=desc.get("name") or DEFAULT_LEVEL_NAME,
        theme=_resolve_theme(desc.get("theme")),
        gravity=_or_default(desc.get("gravity"), GRAVITY),
        jumpV=_or_default(desc.get("jumpV"), JUMP_VELOCITY),
        start=_resolve_start(desc.get("start")),
        platforms=_resolve_platforms(desc, rng),
    )


# ---------------------------------------------------------------------------
# Level files
# ---------------------------------------------------------------------------

BUNDLED_LEVELS = Path(__file__).parent / "levels" / "levels.json"

_YAML_SUFFIXES = (".yaml", ".yml")


def _read_document(path: Path):
    """Parse a JSON or YAML file, chosen by suffix."""
    with open(path, encoding="utf-8") as f:
        try:
            if path.suffix.lower() in _YAML_SUFFIXES:
                return yaml.safe_load(f)
            return json.load(f)
        except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as exc:
            raise LevelFileError(f"Cannot parse {path}: {exc}") from exc


def _descriptions(doc, path: Path) -> list[Mapping]:
    if isinstance(doc, Mapping) and "levels" in doc:
        doc = doc["levels"]
    elif isinstance(doc, Mapping):
        return [doc]
    if not isinstance(doc, list):
        raise LevelFileError(f"{path}: expected a level or a list of levels")
    return doc


def load_levels(
    path: Path | str = BUNDLED_LEVELS,
    rng: Optional[np.random.Generator] = None,
) -> list[Level]:
    """Load and build every level in a JSON or YAML file.

    Accepts a list of level records, a mapping with a ``levels`` list, or a
    single level record.

    Raises:
        FileNotFoundError: If *path* does not exist.
        LevelFileError: If the file does not parse or has the wrong shape.
    """
    path = Path(path)
    descs = _descriptions(_read_document(path), path)
    logger.debug("Loaded %d level descriptions from %s", len(descs), path)
    return [build_level(d, rng) for d in descs]


def load_level(
    path: Path | str = BUNDLED_LEVELS,
    index: int = 0,
    rng: Optional[np.random.Generator] = None,
) -> Level:
    """Load one level by position from a level file.

    Raises:
        IndexError: If *index* is out of range.
    """
    levels = load_levels(path, rng)
    if not 0 <= index < len(levels):
        raise IndexError(f"Level index {index} out of range (0..{len(levels) - 1})")
    return levels[index]
