"""blobworld — Platformer level loading, procedural platforms, and rendering."""

from blobworld.generators import (
    RandomHopsConfig,
    StairsConfig,
    UnknownGenerator,
    generate_platforms,
    make_rng,
    parse_generator,
)
from blobworld.geometry import Rect
from blobworld.level import (
    Level,
    LevelFileError,
    SpawnPoint,
    Theme,
    build_level,
    load_level,
    load_levels,
)

__all__ = [
    "Rect",
    "Theme",
    "SpawnPoint",
    "Level",
    "LevelFileError",
    "build_level",
    "load_level",
    "load_levels",
    "StairsConfig",
    "RandomHopsConfig",
    "UnknownGenerator",
    "parse_generator",
    "generate_platforms",
    "make_rng",
]
