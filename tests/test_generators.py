"""Tests for blobworld/generators.py — stairs, random hops, dispatch."""

from __future__ import annotations

import logging

import numpy as np
import pytest

from blobworld.constants import HOP_FLOOR_MARGIN, HOP_MIN_Y
from blobworld.generators import (
    RandomHopsConfig,
    StairsConfig,
    UnknownGenerator,
    generate_platforms,
    generate_random_hops,
    generate_stairs,
    make_rng,
    parse_generator,
)
from blobworld.geometry import Rect
from blobworld.level import build_level


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

class TestParseGenerator:
    def test_stairs_tag(self):
        cfg = parse_generator({"type": "stairs", "count": 3})
        assert isinstance(cfg, StairsConfig)
        assert cfg.count == 3
        assert cfg.stepW == 80

    def test_random_hops_tag(self):
        cfg = parse_generator({"type": "randomHops", "seed": 7})
        assert isinstance(cfg, RandomHopsConfig)
        assert cfg.seed == 7
        assert cfg.worldW == 900

    def test_unknown_tag(self):
        cfg = parse_generator({"type": "teleport"})
        assert cfg == UnknownGenerator(type="teleport")

    def test_missing_tag_is_unknown(self):
        assert isinstance(parse_generator({}), UnknownGenerator)

    def test_none_param_uses_default(self):
        cfg = parse_generator({"type": "stairs", "rise": None})
        assert cfg.rise == 22

    def test_zero_param_kept(self):
        cfg = parse_generator({"type": "stairs", "startX": 0, "rise": 0})
        assert cfg.startX == 0
        assert cfg.rise == 0

    def test_extra_keys_ignored(self):
        cfg = parse_generator({"type": "stairs", "seed": 3, "color": "red"})
        assert cfg == StairsConfig()

    def test_bool_seed_ignored(self):
        cfg = parse_generator({"type": "randomHops", "seed": True})
        assert cfg.seed is None

    def test_string_seed_ignored(self):
        cfg = parse_generator({"type": "randomHops", "seed": "42"})
        assert cfg.seed is None

    def test_float_seed_truncated(self):
        cfg = parse_generator({"type": "randomHops", "seed": 12.9})
        assert cfg.seed == 12

    def test_negative_seed_wrapped(self):
        cfg = parse_generator({"type": "randomHops", "seed": -1})
        assert cfg.seed == 2**32 - 1


# ---------------------------------------------------------------------------
# Stairs
# ---------------------------------------------------------------------------

class TestStairs:
    def test_small_staircase(self):
        cfg = parse_generator({
            "type": "stairs", "count": 3, "startX": 0, "startY": 100,
            "stepW": 10, "stepH": 5, "rise": 2,
        })
        out = generate_stairs(cfg)
        assert out == [
            Rect(0, 324, 640, 36),
            Rect(0, 100, 10, 5),
            Rect(10, 98, 10, 5),
            Rect(20, 96, 10, 5),
        ]

    def test_defaults(self):
        out = generate_stairs(StairsConfig())
        assert len(out) == 9
        assert out[0] == Rect(0, 324, 640, 36)
        assert out[1] == Rect(120, 290, 80, 12)
        assert out[-1] == Rect(120 + 7 * 80, 290 - 7 * 22, 80, 12)

    def test_zero_count_floor_only(self):
        out = generate_stairs(StairsConfig(count=0))
        assert out == [Rect(0, 324, 640, 36)]

    def test_fractional_count_rounds_up(self):
        out = generate_stairs(StairsConfig(count=2.5))
        assert len(out) == 1 + 3

    def test_each_step_right_and_above(self):
        steps = generate_stairs(StairsConfig())[1:]
        for prev, cur in zip(steps, steps[1:]):
            assert cur.x > prev.x
            assert cur.y < prev.y

    def test_custom_floor(self):
        out = generate_stairs(StairsConfig(worldW=1000, floorY=400, floorH=10, count=0))
        assert out == [Rect(0, 400, 1000, 10)]

    def test_ignores_rng(self):
        a = generate_platforms({"type": "stairs"}, make_rng(1))
        b = generate_platforms({"type": "stairs"}, make_rng(2))
        assert a == b


# ---------------------------------------------------------------------------
# Random hops
# ---------------------------------------------------------------------------

class TestRandomHops:
    def test_same_seed_identical(self):
        cfg = {"type": "randomHops", "seed": 1234, "count": 20}
        assert generate_platforms(cfg) == generate_platforms(cfg)

    def test_different_seeds_differ(self):
        a = generate_platforms({"type": "randomHops", "seed": 1})
        b = generate_platforms({"type": "randomHops", "seed": 2})
        assert a != b

    def test_floor_first(self):
        out = generate_random_hops(RandomHopsConfig(seed=5))
        assert out[0] == Rect(0, 324, 900, 36)

    def test_count(self):
        assert len(generate_random_hops(RandomHopsConfig(seed=5))) == 11
        assert len(generate_random_hops(RandomHopsConfig(seed=5, count=3))) == 4

    def test_zero_count_floor_only(self):
        out = generate_random_hops(RandomHopsConfig(seed=5, count=0))
        assert out == [Rect(0, 324, 900, 36)]

    @pytest.mark.parametrize("seed", range(25))
    def test_platforms_stay_in_band(self, seed):
        cfg = RandomHopsConfig(seed=seed, count=40, riseMin=-80, riseMax=80)
        for p in generate_random_hops(cfg)[1:]:
            assert HOP_MIN_Y <= p.y <= cfg.floorY - HOP_FLOOR_MARGIN

    def test_default_start_clamped_into_band(self):
        out = generate_random_hops(RandomHopsConfig(seed=3))
        assert out[1].y == 324 - HOP_FLOOR_MARGIN

    def test_start_inside_band_kept(self):
        out = generate_random_hops(RandomHopsConfig(seed=3, startY=200))
        assert out[1].x == 140
        assert out[1].y == 200

    def test_widths_and_height(self):
        cfg = RandomHopsConfig(seed=9, count=50)
        for p in generate_random_hops(cfg)[1:]:
            assert cfg.platWMin <= p.w <= cfg.platWMax
            assert p.h == cfg.platH

    def test_gaps_in_range(self):
        cfg = RandomHopsConfig(seed=11, count=30)
        hops = generate_random_hops(cfg)[1:]
        for prev, cur in zip(hops, hops[1:]):
            gap = cur.x - prev.right
            assert cfg.gapMin <= gap <= cfg.gapMax

    def test_fixed_ranges_are_inclusive(self):
        cfg = RandomHopsConfig(
            seed=0, count=3, startY=200, platWMin=50, platWMax=50,
            gapMin=10, gapMax=10, riseMin=5, riseMax=5,
        )
        out = generate_random_hops(cfg)[1:]
        assert out == [
            Rect(140, 200, 50, 12),
            Rect(200, 195, 50, 12),
            Rect(260, 190, 50, 12),
        ]

    def test_reversed_bounds_swapped(self):
        level = build_level({"generated": {
            "type": "randomHops", "seed": 1, "count": 30, "startY": 200,
            "platWMin": 120, "platWMax": 70,
            "gapMin": 95, "gapMax": 55,
            "riseMin": 25, "riseMax": -15,
        }})
        hops = level.platforms[1:]
        assert len(hops) == 30
        for p in hops:
            assert 70 <= p.w <= 120
        for prev, cur in zip(hops, hops[1:]):
            assert 55 <= cur.x - prev.right <= 95
            dy = prev.y - cur.y
            if HOP_MIN_Y < cur.y < 324 - HOP_FLOOR_MARGIN:
                assert -15 <= dy <= 25

    def test_fractional_count_rounds_up(self):
        out = generate_random_hops(RandomHopsConfig(seed=2, count=2.5))
        assert len(out) == 1 + 3

    def test_x_strictly_increasing(self):
        hops = generate_random_hops(RandomHopsConfig(seed=21, count=30))[1:]
        xs = [p.x for p in hops]
        assert xs == sorted(xs)
        assert len(set(xs)) == len(xs)

    def test_explicit_rng_reproducible(self):
        cfg = RandomHopsConfig(count=15)
        a = generate_random_hops(cfg, make_rng(77))
        b = generate_random_hops(cfg, make_rng(77))
        assert a == b

    def test_config_seed_overrides_rng(self):
        cfg = RandomHopsConfig(seed=5)
        assert generate_random_hops(cfg, make_rng(1)) == generate_random_hops(cfg)

    def test_unseeded_without_rng(self):
        out = generate_random_hops(RandomHopsConfig(count=4))
        assert len(out) == 5

    def test_does_not_touch_global_numpy_state(self):
        np.random.seed(5)
        expected = np.random.random()
        np.random.seed(5)
        generate_platforms({"type": "randomHops", "seed": 99})
        assert np.random.random() == expected


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

class TestGeneratePlatforms:
    def test_unknown_type_empty(self):
        assert generate_platforms({"type": "teleport"}) == []

    def test_unknown_type_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="blobworld.generators"):
            generate_platforms({"type": "teleport"})
        assert "teleport" in caplog.text

    def test_accepts_config_variant(self):
        assert generate_platforms(StairsConfig(count=1)) == [
            Rect(0, 324, 640, 36),
            Rect(120, 290, 80, 12),
        ]

    def test_accepts_unknown_variant(self):
        assert generate_platforms(UnknownGenerator()) == []
