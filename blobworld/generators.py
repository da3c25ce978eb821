"""blobworld/generators.py — Procedural platform generators.

A generator config from a level description is parsed into one of three
variants:

    StairsConfig      deterministic staircase rising to the right
    RandomHopsConfig  seeded random hops inside a fixed playable band
    UnknownGenerator  any other tag; contributes no platforms

Every generator emits a floor rectangle first (except UnknownGenerator),
followed by its platforms in generation order.

Randomness is always drawn from an explicit ``numpy.random.Generator``. A
config seed builds a private generator for that call only, so loading a
level never disturbs random state used elsewhere.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Optional, Union

import numpy as np

from blobworld.constants import (
    HOP_FLOOR_MARGIN,
    HOP_MIN_Y,
    HOPS_COUNT,
    HOPS_FLOOR_H,
    HOPS_FLOOR_Y,
    HOPS_GAP_MAX,
    HOPS_GAP_MIN,
    HOPS_PLAT_H,
    HOPS_PLAT_W_MAX,
    HOPS_PLAT_W_MIN,
    HOPS_RISE_MAX,
    HOPS_RISE_MIN,
    HOPS_START_X,
    HOPS_START_Y,
    HOPS_WORLD_W,
    STAIRS_COUNT,
    STAIRS_FLOOR_H,
    STAIRS_FLOOR_Y,
    STAIRS_RISE,
    STAIRS_START_X,
    STAIRS_START_Y,
    STAIRS_STEP_H,
    STAIRS_STEP_W,
    STAIRS_WORLD_W,
)
from blobworld.geometry import Rect

logger = logging.getLogger(__name__)

STAIRS = "stairs"
RANDOM_HOPS = "randomHops"

_SEED_MODULUS = 2**32


# ---------------------------------------------------------------------------
# Config variants
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class StairsConfig:
    worldW: float = STAIRS_WORLD_W
    floorY: float = STAIRS_FLOOR_Y
    floorH: float = STAIRS_FLOOR_H
    startX: float = STAIRS_START_X
    startY: float = STAIRS_START_Y
    stepW: float = STAIRS_STEP_W
    stepH: float = STAIRS_STEP_H
    rise: float = STAIRS_RISE
    count: int = STAIRS_COUNT


@dataclass(frozen=True)
class RandomHopsConfig:
    worldW: float = HOPS_WORLD_W
    floorY: float = HOPS_FLOOR_Y
    floorH: float = HOPS_FLOOR_H
    count: int = HOPS_COUNT
    platH: float = HOPS_PLAT_H
    platWMin: int = HOPS_PLAT_W_MIN
    platWMax: int = HOPS_PLAT_W_MAX
    gapMin: int = HOPS_GAP_MIN
    gapMax: int = HOPS_GAP_MAX
    riseMin: int = HOPS_RISE_MIN
    riseMax: int = HOPS_RISE_MAX
    startX: float = HOPS_START_X
    startY: float = HOPS_START_Y
    seed: Optional[int] = None


@dataclass(frozen=True)
class UnknownGenerator:
    type: object = None


GeneratorConfig = Union[StairsConfig, RandomHopsConfig, UnknownGenerator]


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def _present(data: Mapping, cls) -> dict:
    """Keep only the keys *cls* declares whose values are not None."""
    names = {f.name for f in fields(cls)}
    return {k: v for k, v in data.items() if k in names and v is not None}


def _parse_seed(value) -> Optional[int]:
    # bool is an int subclass but never a seed
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return int(value) % _SEED_MODULUS


def parse_generator(data: Mapping) -> GeneratorConfig:
    """Turn a raw ``generated`` record into a config variant.

    Absent (missing or None) parameters fall back to the variant's defaults;
    zero is a real value. Unrecognized tags become UnknownGenerator.
    """
    tag = data.get("type")
    if tag == STAIRS:
        return StairsConfig(**_present(data, StairsConfig))
    if tag == RANDOM_HOPS:
        params = _present(data, RandomHopsConfig)
        params["seed"] = _parse_seed(data.get("seed"))
        return RandomHopsConfig(**params)
    return UnknownGenerator(type=tag)


# ---------------------------------------------------------------------------
# Random source
# ---------------------------------------------------------------------------

def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create an independent random source; same seed, same draws."""
    return np.random.default_rng(seed)


def _draw(rng: np.random.Generator, lo: int, hi: int) -> int:
    """Uniform integer between lo and hi, both ends inclusive, in either order."""
    lo, hi = sorted((int(lo), int(hi)))
    return int(rng.integers(lo, hi, endpoint=True))


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(min(value, hi), lo)


# ---------------------------------------------------------------------------
# Generators
# ---------------------------------------------------------------------------

def _floor(world_w: float, floor_y: float, floor_h: float) -> Rect:
    return Rect(x=0, y=floor_y, w=world_w, h=floor_h)


def generate_stairs(cfg: StairsConfig) -> list[Rect]:
    """Floor plus ``count`` steps, each one step right and ``rise`` higher."""
    out = [_floor(cfg.worldW, cfg.floorY, cfg.floorH)]
    for i in range(math.ceil(cfg.count)):
        out.append(Rect(
            x=cfg.startX + i * cfg.stepW,
            y=cfg.startY - i * cfg.rise,
            w=cfg.stepW,
            h=cfg.stepH,
        ))
    return out


def generate_random_hops(
    cfg: RandomHopsConfig,
    rng: Optional[np.random.Generator] = None,
) -> list[Rect]:
    """Floor plus ``count`` hop platforms with random width, gap and rise.

    Each platform is placed at the cursor, then the cursor moves right by
    width + gap and up by a random rise. Vertical position is held inside
    [HOP_MIN_Y, floorY - HOP_FLOOR_MARGIN].

    If the config carries a seed, a private generator is built from it and
    *rng* is ignored.
    """
    if cfg.seed is not None:
        rng = make_rng(cfg.seed)
    elif rng is None:
        rng = make_rng()

    min_y = HOP_MIN_Y
    max_y = cfg.floorY - HOP_FLOOR_MARGIN

    out = [_floor(cfg.worldW, cfg.floorY, cfg.floorH)]
    x = cfg.startX
    y = _clamp(cfg.startY, min_y, max_y)

    for _ in range(math.ceil(cfg.count)):
        w = _draw(rng, cfg.platWMin, cfg.platWMax)
        out.append(Rect(x=x, y=y, w=w, h=cfg.platH))

        gap = _draw(rng, cfg.gapMin, cfg.gapMax)
        dy = _draw(rng, cfg.riseMin, cfg.riseMax)

        x = x + w + gap
        y = _clamp(y - dy, min_y, max_y)

    return out


def generate_platforms(
    config: GeneratorConfig | Mapping,
    rng: Optional[np.random.Generator] = None,
) -> list[Rect]:
    """Run the generator for *config* (a variant or a raw record)."""
    if isinstance(config, Mapping):
        config = parse_generator(config)

    if isinstance(config, StairsConfig):
        return generate_stairs(config)
    if isinstance(config, RandomHopsConfig):
        return generate_random_hops(config, rng)

    logger.warning("Unknown generator type %r; no platforms generated", config.type)
    return []
