"""blobworld/main.py — Pyxel level viewer.

Opens a window sized to the first level's platforms and draws the world,
the blob at its spawn point, and the level name. LEFT/RIGHT switch levels,
R rebuilds (new layout for unseeded random levels), Q quits.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pyxel

from blobworld import renderer
from blobworld.constants import FPS
from blobworld.generators import make_rng
from blobworld.level import BUNDLED_LEVELS, Level, load_levels

logger = logging.getLogger(__name__)


class App:
    def __init__(self, path: Path | str = BUNDLED_LEVELS, index: int = 0,
                 seed: int | None = None):
        self.path = Path(path)
        self.rng = make_rng(seed)
        self.levels: list[Level] = load_levels(self.path, self.rng)
        self.index = index % len(self.levels) if self.levels else 0

        level = self.level
        width = int(level.infer_width()) if level else 640
        height = int(level.infer_height()) if level else 360
        pyxel.init(width, height, title="Blobworld", fps=FPS)
        pyxel.run(self.update, self.draw)

    @property
    def level(self) -> Level | None:
        return self.levels[self.index] if self.levels else None

    def update(self):
        if pyxel.btnp(pyxel.KEY_Q):
            pyxel.quit()
        if not self.levels:
            return

        if pyxel.btnp(pyxel.KEY_RIGHT):
            self.index = (self.index + 1) % len(self.levels)
        elif pyxel.btnp(pyxel.KEY_LEFT):
            self.index = (self.index - 1) % len(self.levels)
        elif pyxel.btnp(pyxel.KEY_R):
            self.levels = load_levels(self.path, self.rng)
            logger.debug("Rebuilt %d levels from %s", len(self.levels), self.path)

    def draw(self):
        level = self.level
        if level is None:
            pyxel.cls(0)
            return
        renderer.draw_world(level)
        renderer.draw_blob(level.start.x, level.start.y, level.start.r)
        renderer.draw_hud(level)


def main():
    App()


if __name__ == "__main__":
    main()
